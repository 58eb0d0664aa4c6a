"""
Experiment Control Panel
========================
Left-hand panel: holography mode, playback and the optical bench sliders.

Widgets write into the ExperimentStore; when the store publishes a new
snapshot the panel re-syncs with signals blocked so nothing echoes back.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Callable

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QGridLayout, QLabel, QSlider,
    QPushButton, QButtonGroup, QSizePolicy
)

from hololearn.controller.state import ExperimentStore
from hololearn.model.parameters import (
    ExperimentParameters, HolographyMode,
    REFERENCE_ANGLE_RANGE, WAVELENGTH_RANGE, OBJECT_DISTANCE_RANGE, INTENSITY_RANGE, OPACITY_RANGE,
)

MODE_BUTTONS: dict[HolographyMode, tuple[str, str]] = {
    HolographyMode.CO_LINEAR: ("INLINE", "Gabor (1948)"),
    HolographyMode.ANGULAR_OFFSET: ("OFF-AXIS", "Leith-Upatnieks (1962)"),
}


@dataclass
class _SliderBinding:
    slider: QSlider
    value_label: QLabel
    step: float
    fmt: Callable[[float], str]

    def to_value(self, position: int) -> float:
        return position * self.step

    def to_position(self, value: float) -> int:
        return int(round(value / self.step))


class ExperimentControlPanel(QWidget):
    def __init__(self, store: ExperimentStore, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self._bindings: dict[str, _SliderBinding] = {}

        layout = QVBoxLayout(self)
        layout.setContentsMargins(8, 8, 8, 8)

        # ---- Mode ----
        mode_box = QGroupBox("Holography Mode", self)
        mode_layout = QHBoxLayout(mode_box)
        self.mode_group = QButtonGroup(self)
        self.mode_group.setExclusive(True)
        self.mode_buttons: dict[HolographyMode, QPushButton] = {}
        for mode, (title, subtitle) in MODE_BUTTONS.items():
            button = QPushButton(f"{title}\n{subtitle}", mode_box)
            button.setCheckable(True)
            button.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
            button.clicked.connect(lambda _=False, m=mode: self.store.set_mode(m))
            self.mode_group.addButton(button)
            mode_layout.addWidget(button)
            self.mode_buttons[mode] = button
        layout.addWidget(mode_box)

        # ---- Laser ----
        laser_box = QGroupBox("Laser Parameters", self)
        self.laser_grid = QGridLayout(laser_box)
        self.laser_grid.setVerticalSpacing(8)

        self.play_button = QPushButton(laser_box)
        self.play_button.clicked.connect(self.store.toggle_playing)
        self.laser_grid.addWidget(self.play_button, 0, 0, 1, 3)

        self._add_slider(
            self.laser_grid, "reference_angle", "Reference Angle",
            REFERENCE_ANGLE_RANGE, step=1.0, fmt=lambda v: f"{v:.0f}°",
        )
        self._add_slider(
            self.laser_grid, "wavelength", "Wavelength (λ)",
            WAVELENGTH_RANGE, step=1.0, fmt=lambda v: f"{v:.0f}px",
        )
        self._add_slider(
            self.laser_grid, "intensity", "Intensity",
            INTENSITY_RANGE, step=0.5, fmt=lambda v: f"{v:.1f}",
        )
        layout.addWidget(laser_box)

        # ---- Object ----
        object_box = QGroupBox("Object Properties", self)
        self.object_grid = QGridLayout(object_box)
        self.object_grid.setVerticalSpacing(8)
        self._add_slider(
            self.object_grid, "object_distance", "Position (Z)",
            OBJECT_DISTANCE_RANGE, step=1.0, fmt=lambda v: f"{v:.0f}px",
        )
        self._add_slider(
            self.object_grid, "object_opacity", "Scattering Amplitude",
            OPACITY_RANGE, step=0.1, fmt=lambda v: f"{v:.1f}",
        )
        self._add_slider(
            self.object_grid, "object_phase", "Phase Shift (φ)",
            (0.0, 2 * math.pi), step=0.1, fmt=lambda v: f"{v / math.pi:.2f}π",
        )
        layout.addWidget(object_box)

        self.reset_button = QPushButton("Reset Experiment", self)
        self.reset_button.clicked.connect(self.store.reset)
        layout.addWidget(self.reset_button)
        layout.addStretch()

        self.store.parameters_changed.connect(self.sync_from_parameters)
        self.sync_from_parameters(self.store.parameters)

    # ---- utilities ----

    def _add_slider(
        self,
        grid: QGridLayout,
        key: str,
        label: str,
        bounds: tuple[float, float],
        *,
        step: float,
        fmt: Callable[[float], str]
    ) -> QSlider:
        row = grid.rowCount()
        grid.addWidget(QLabel(label, self), row, 0)

        slider = QSlider(Qt.Orientation.Horizontal, self)
        value_label = QLabel(self)
        value_label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        value_label.setMinimumWidth(48)

        binding = _SliderBinding(slider, value_label, step, fmt)
        slider.setRange(binding.to_position(bounds[0]), int(math.floor(bounds[1] / step)))
        slider.setSingleStep(1)
        slider.valueChanged.connect(lambda pos, k=key: self._on_slider_moved(k, pos))

        grid.addWidget(slider, row, 1)
        grid.addWidget(value_label, row, 2)
        self._bindings[key] = binding
        return slider

    def slider(self, key: str) -> QSlider:
        return self._bindings[key].slider

    def _on_slider_moved(self, key: str, position: int) -> None:
        binding = self._bindings[key]
        value = binding.to_value(position)
        binding.value_label.setText(binding.fmt(value))
        self.store.update(**{key: value})

    @Slot(object)
    def sync_from_parameters(self, params: ExperimentParameters) -> None:
        for key, binding in self._bindings.items():
            value = getattr(params, key)
            binding.slider.blockSignals(True)
            binding.slider.setValue(binding.to_position(value))
            binding.slider.blockSignals(False)
            binding.value_label.setText(binding.fmt(value))

        # Reference angle is fixed at 0 in co-linear mode
        self.slider("reference_angle").setEnabled(params.mode == HolographyMode.ANGULAR_OFFSET)

        for mode, button in self.mode_buttons.items():
            button.blockSignals(True)
            button.setChecked(mode == params.mode)
            button.blockSignals(False)

        self.play_button.setText("Pause" if params.is_playing else "Play")
