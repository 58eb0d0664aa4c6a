from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import QWidget, QLabel, QGroupBox, QVBoxLayout

from hololearn.model.parameters import ExperimentParameters


class SimulationView(QWidget):
    """
    Base for tabs that render animation frames.

    While hidden a view only remembers the newest (params, tick); it renders
    that frame as soon as it is shown again.
    """

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._pending: Optional[tuple[ExperimentParameters, int]] = None

    @Slot(object, int)
    def on_frame_requested(self, params: ExperimentParameters, tick: int) -> None:
        self._pending = (params, tick)
        if self.isVisible():
            self.render_frame(params, tick)

    def showEvent(self, event) -> None:
        super().showEvent(event)
        if self._pending is not None:
            self.render_frame(*self._pending)

    def render_frame(self, params: ExperimentParameters, tick: int) -> None:
        raise NotImplementedError("`render_frame` must be implemented in subclass.")


def make_card(title: str, parent: QWidget) -> tuple[QGroupBox, QLabel]:
    """Titled box holding one word-wrapped rich-text label."""
    box = QGroupBox(title, parent)
    layout = QVBoxLayout(box)
    label = QLabel(box)
    label.setWordWrap(True)
    label.setTextFormat(Qt.TextFormat.RichText)
    layout.addWidget(label)
    return box, label
