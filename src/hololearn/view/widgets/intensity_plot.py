from __future__ import annotations

from typing import TYPE_CHECKING

import pyqtgraph as pg
from PySide6.QtWidgets import QWidget

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt


class IntensityPlot(pg.PlotWidget):
    """Normalized intensity I(y)/I_max along the plate, on fixed axes."""

    def __init__(self, samples: int, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent, background="#111111")
        self.samples = samples

        self.showGrid(x=True, y=True, alpha=0.3)
        self.setLabel('bottom', 'Position (y)', color='#888888')
        self.setLabel('left', 'Int (I)', color='#888888')
        for axis in ('bottom', 'left'):
            self.getAxis(axis).setPen('#666666')
            self.getAxis(axis).setTextPen('#888888')

        # Fixed scale so fringe contrast reads the same across parameter changes
        self.setXRange(0, samples, padding=0)
        self.setYRange(0, 1, padding=0)
        self.setMouseEnabled(x=False, y=False)
        self.hideButtons()
        self.setMenuEnabled(False)

        self.curve = self.plot([], [], pen=pg.mkPen(color='#00ff00', width=2))

    def set_series(self, positions: npt.NDArray[np.float64], values: npt.NDArray[np.float64]) -> None:
        self.curve.setData(positions, values)
