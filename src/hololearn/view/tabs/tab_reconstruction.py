"""
Reconstruction Tab
==================
The developed plate lit by the reference beam again, with the diffraction
orders marked.
"""
from __future__ import annotations

from PySide6.QtWidgets import QWidget, QVBoxLayout

from hololearn.config import FIELD_CANVAS_SIZE
from hololearn.model import reconstruction
from hololearn.model.parameters import ExperimentParameters, HolographyMode
from hololearn.view.renderers import reconstruction as renderer
from hololearn.view.tabs.base import SimulationView, make_card
from hololearn.view.widgets.field_canvas import FieldCanvas

INTRO_TEXT = (
    "<p>We now illuminate the developed hologram with the reference beam. "
    "The hologram acts as a diffraction grating, creating three wavefronts: the 0th order (direct), "
    "the +1 order (Virtual Image), and the -1 order (Real Image).</p>"
)

MODE_TEXT: dict[HolographyMode, str] = {
    HolographyMode.CO_LINEAR: (
        "<p>In Inline mode, the Virtual and Real images overlap. This makes the Virtual image "
        "(the one you look at) blurry or noisy.</p>"
    ),
    HolographyMode.ANGULAR_OFFSET: (
        "<p>In Off-axis mode, the Real Image is diffracted at a steep angle, leaving the Virtual Image "
        "clear and isolated. This is the key innovation of Leith &amp; Upatnieks.</p>"
    ),
}


def explanation_html(mode: HolographyMode) -> str:
    return INTRO_TEXT + MODE_TEXT[HolographyMode(mode)]


class ReconstructionView(SimulationView):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.field_width, self.field_height = FIELD_CANVAS_SIZE
        self._shown_mode: HolographyMode | None = None

        layout = QVBoxLayout(self)
        self.field_canvas = FieldCanvas(self.field_width, self.field_height, self)
        layout.addWidget(self.field_canvas, 1)

        card, self.explanation = make_card("Holographic Reconstruction", self)
        layout.addWidget(card)

    def render_frame(self, params: ExperimentParameters, tick: int) -> None:
        w, h = self.field_width, self.field_height
        orders = reconstruction.compute_orders(params, w, h)
        field = reconstruction.compute_field(params, tick, w, h)
        self.field_canvas.set_frame(
            renderer.render_field(field, params),
            renderer.render_overlay(params, w, h, orders),
        )

        if params.mode != self._shown_mode:
            self._shown_mode = params.mode
            self.explanation.setText(explanation_html(params.mode))
