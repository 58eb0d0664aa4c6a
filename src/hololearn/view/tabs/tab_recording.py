"""
Recording Tab
=============
Wave tank in front of the hologram plate, plus the hologram inspector (film
strip and intensity plot).
"""
from __future__ import annotations

import logging

import numpy as np
from PySide6.QtWidgets import QWidget, QVBoxLayout

from hololearn.config import FIELD_CANVAS_SIZE, INSPECTOR_CANVAS_SIZE, STRIP_TOP, STRIP_HEIGHT
from hololearn.model import wave_field
from hololearn.model.parameters import ExperimentParameters
from hololearn.view.renderers import recording
from hololearn.view.tabs.base import SimulationView, make_card
from hololearn.view.widgets.field_canvas import FieldCanvas
from hololearn.view.widgets.intensity_plot import IntensityPlot

logger = logging.getLogger(__name__)

OBSERVATION_TEXT = (
    "<p>The <b>Wave Tank</b> above simulates coherent light propagation. "
    "The <b>Hologram Plate</b> strip shows the recorded intensity pattern I(y). "
    "Notice how the fringe spacing (carrier frequency) changes when you adjust the reference angle.</p>"
    "<p><b>Try this:</b> Reduce the <i>Object Scattering Amplitude</i> to see how the interference "
    "contrast (fringe visibility) decreases. Change the <i>Phase Shift</i> to see the fringes shift "
    "position. This encodes the object's depth/shape information!</p>"
)

# Strip canvas height: caption row above the strip and a small gap below
STRIP_CANVAS_HEIGHT = STRIP_TOP + STRIP_HEIGHT + 6


class RecordingView(SimulationView):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.field_width, self.field_height = FIELD_CANVAS_SIZE
        self._rng = np.random.default_rng()

        layout = QVBoxLayout(self)
        self.field_canvas = FieldCanvas(self.field_width, self.field_height, self)
        layout.addWidget(self.field_canvas, 3)

        self.inspector_width, inspector_height = INSPECTOR_CANVAS_SIZE
        self.strip_canvas = FieldCanvas(self.inspector_width, STRIP_CANVAS_HEIGHT, self)
        layout.addWidget(self.strip_canvas, 1)

        self.plot = IntensityPlot(self.field_height, self)
        self.plot.setMinimumHeight(max(60, inspector_height - STRIP_CANVAS_HEIGHT))
        layout.addWidget(self.plot, 1)

        card, observation = make_card("Experimental Observation", self)
        observation.setText(OBSERVATION_TEXT)
        layout.addWidget(card)

    def render_frame(self, params: ExperimentParameters, tick: int) -> None:
        w, h = self.field_width, self.field_height

        field = wave_field.compute_field(params, tick, w, h)
        self.field_canvas.set_frame(
            recording.render_field(field, params),
            recording.render_overlay(params, w, h),
        )

        profile = wave_field.compute_profile(params, w, h)
        strip, strip_overlay = recording.render_inspector(
            profile,
            self.inspector_width,
            STRIP_CANVAS_HEIGHT,
            STRIP_TOP,
            STRIP_HEIGHT,
            rng=self._rng,
        )
        self.strip_canvas.set_frame(strip, strip_overlay)
        self.plot.set_series(*recording.plot_series(profile))
