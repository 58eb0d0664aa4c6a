"""
Application Initialization
==========================
This module wires the Model, Controllers and View together and starts the Qt
event loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the parameter store and the animation clock (Controllers).
2. Instantiates the Main Window (View) and hands it the controllers.
3. Prevents circular import errors by being the orchestrator.
"""
import logging
import sys

import pyqtgraph as pg
from PySide6.QtWidgets import QApplication

from hololearn.config import get_log_level
from hololearn.controller.animation import AnimationClock
from hololearn.controller.state import ExperimentStore
from hololearn.logging_config import setup_logging
from hololearn.view.main_window import MainWindow, VISIBLE_APP_NAME

logger = logging.getLogger(__name__)


def main() -> None:
    # 1. Logging (set HOLOLEARN_LOG_LEVEL=DEBUG during development)
    setup_logging(level=get_log_level())

    # 2. Qt application
    app = QApplication(sys.argv)
    app.setApplicationName(VISIBLE_APP_NAME)
    pg.setConfigOption("background", "#111111")
    pg.setConfigOption("foreground", "#888888")
    pg.setConfigOption("antialias", True)

    # 3. Controllers
    store = ExperimentStore()
    clock = AnimationClock(store)

    # 4. Main window
    window = MainWindow(store, clock)
    window.show()
    clock.start()

    # 5. Event loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
