"""
Main Window
===========
Tab bar on top (Record, Reconstruct, Theory, AI Tutor) over a splitter with
the experiment controls on the left and the active page on the right.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QMainWindow, QSplitter, QStackedWidget, QTabBar, QVBoxLayout, QWidget

from hololearn.controller.animation import AnimationClock
from hololearn.controller.state import ExperimentStore
from hololearn.controller.tutor import TutorClient
from hololearn.view.tabs.tab_controls import ExperimentControlPanel
from hololearn.view.tabs.tab_reconstruction import ReconstructionView
from hololearn.view.tabs.tab_recording import RecordingView
from hololearn.view.tabs.tab_theory import TheoryView
from hololearn.view.tabs.tab_tutor import TutorView

logger = logging.getLogger(__name__)

VISIBLE_APP_NAME = "HoloLearn: Interactive Holography Lab"

TAB_LABELS = ["Record", "Reconstruct", "Theory", "AI Tutor"]


class MainWindow(QMainWindow):
    def __init__(
        self,
        store: ExperimentStore,
        clock: AnimationClock,
        tutor_client: TutorClient | None = None
    ) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1280, 820)

        self.store = store
        self.clock = clock

        # ---- Central: TabBar on top + splitter below ----
        central = QWidget(self)
        v = QVBoxLayout(central)
        v.setContentsMargins(0, 0, 0, 0)
        v.setSpacing(0)

        self.tabs = QTabBar(central)
        self.tabs.setExpanding(True)
        self.tabs.setMovable(False)
        self.tabs.setDrawBase(True)
        self.tabs.setShape(QTabBar.Shape.RoundedNorth)
        v.addWidget(self.tabs, 0)

        split = QSplitter(Qt.Orientation.Horizontal, central)
        split.setChildrenCollapsible(False)
        v.addWidget(split, 1)

        self.controls = ExperimentControlPanel(store, split)
        self.pages = QStackedWidget(split)

        self.recording_view = RecordingView(self.pages)
        self.reconstruction_view = ReconstructionView(self.pages)
        self.theory_view = TheoryView(self.pages)
        self.tutor_view = TutorView(tutor_client, parent=self.pages)
        for page in (self.recording_view, self.reconstruction_view, self.theory_view, self.tutor_view):
            self.pages.addWidget(page)

        split.addWidget(self.controls)
        split.addWidget(self.pages)
        split.setStretchFactor(0, 0)
        split.setStretchFactor(1, 1)
        self.setCentralWidget(central)

        for label in TAB_LABELS:
            self.tabs.addTab(label)
        self.tabs.currentChanged.connect(self.pages.setCurrentIndex)

        # Frames go to both simulation views; each skips rendering while hidden
        clock.frame_requested.connect(self.recording_view.on_frame_requested)
        clock.frame_requested.connect(self.reconstruction_view.on_frame_requested)
        store.parameters_changed.connect(self.theory_view.on_parameters_changed)
        self.theory_view.on_parameters_changed(store.parameters)

        self.tabs.setCurrentIndex(0)

    def closeEvent(self, event) -> None:
        logger.info("Shutting down.")
        self.clock.stop()
        self.tutor_view.shutdown()
        super().closeEvent(event)
