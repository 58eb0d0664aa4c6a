"""
Experiment Parameters (Data Model)
==================================
This module defines the immutable configuration snapshot shared by every
engine and renderer.

Why is this file needed?
------------------------
1. Consistency: A frame is always computed from one frozen snapshot. Changing
   a value means building a new snapshot, never mutating the current one.
2. Validation: Raw UI values are clamped into their legal ranges here, before
   any engine sees them, so the physics never has to check its inputs.

Classes:
    HolographyMode: Co-linear (Gabor) vs. angular-offset (Leith-Upatnieks).
    ExperimentParameters: The frozen parameter snapshot.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from enum import StrEnum
from math import tau

from hololearn.model.wave_math import deg2rad


class HolographyMode(StrEnum):
    """Reference beam geometry."""
    CO_LINEAR = "INLINE"
    ANGULAR_OFFSET = "OFFAXIS"


# (min, max) ranges of the user-facing controls
WAVELENGTH_RANGE: tuple[float, float] = (15.0, 40.0)
REFERENCE_ANGLE_RANGE: tuple[float, float] = (5.0, 45.0)
OBJECT_DISTANCE_RANGE: tuple[float, float] = (50.0, 250.0)
INTENSITY_RANGE: tuple[float, float] = (1.0, 8.0)
OPACITY_RANGE: tuple[float, float] = (0.0, 1.0)

DEFAULT_WAVELENGTH: float = 20.0
DEFAULT_OBJECT_DISTANCE: float = 120.0
DEFAULT_INTENSITY: float = 4.0
DEFAULT_OPACITY: float = 1.0
DEFAULT_PHASE: float = 0.0

DEFAULT_ANGLES: dict[HolographyMode, float] = {
    HolographyMode.CO_LINEAR: 0.0,
    HolographyMode.ANGULAR_OFFSET: 15.0,
}


def _clamp(value: float, bounds: tuple[float, float]) -> float:
    lo, hi = bounds
    return min(hi, max(lo, float(value)))


def _wrap_phase(value: float) -> float:
    phase = float(value) % tau
    # Tiny negatives round up to exactly tau
    return 0.0 if phase >= tau else phase


@dataclass(frozen=True)
class ExperimentParameters:
    """
    One consistent snapshot of the optical bench.

    Lengths are in raster pixels, angles in degrees (`theta` gives radians).
    The reference angle is always 0 in co-linear mode once `clamped()` has
    been applied.
    """
    wavelength: float = DEFAULT_WAVELENGTH
    reference_angle: float = DEFAULT_ANGLES[HolographyMode.CO_LINEAR]
    object_distance: float = DEFAULT_OBJECT_DISTANCE
    intensity: float = DEFAULT_INTENSITY
    object_opacity: float = DEFAULT_OPACITY
    object_phase: float = DEFAULT_PHASE
    is_playing: bool = True
    mode: HolographyMode = HolographyMode.CO_LINEAR

    @property
    def theta(self) -> float:
        """Reference angle in radians."""
        return deg2rad(self.reference_angle)

    def clamped(self) -> ExperimentParameters:
        """Return a copy with every value pulled into its legal range."""
        if self.mode == HolographyMode.CO_LINEAR:
            angle = 0.0
        else:
            angle = _clamp(self.reference_angle, REFERENCE_ANGLE_RANGE)

        return replace(
            self,
            wavelength=_clamp(self.wavelength, WAVELENGTH_RANGE),
            reference_angle=angle,
            object_distance=_clamp(self.object_distance, OBJECT_DISTANCE_RANGE),
            intensity=_clamp(self.intensity, INTENSITY_RANGE),
            object_opacity=_clamp(self.object_opacity, OPACITY_RANGE),
            object_phase=_wrap_phase(self.object_phase),
            is_playing=bool(self.is_playing),
            mode=HolographyMode(self.mode),
        )

    def with_mode(self, mode: HolographyMode) -> ExperimentParameters:
        """Switch mode and apply that mode's default reference angle."""
        return replace(self, mode=mode, reference_angle=DEFAULT_ANGLES[mode])

    def reset(self) -> ExperimentParameters:
        """Experiment defaults for the current mode; playback, intensity and mode are kept."""
        return ExperimentParameters(
            intensity=self.intensity,
            is_playing=self.is_playing,
            mode=self.mode,
            reference_angle=DEFAULT_ANGLES[self.mode],
        )
