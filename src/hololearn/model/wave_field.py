"""
Recording-side wave field synthesis.

Evaluates the superposition of the reference plane wave and the object's
spherical wave in front of the hologram plate, and the time-invariant
interference intensity recorded on the plate.
"""
from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import logging
from typing import TYPE_CHECKING

import numpy as np

from hololearn.model.geometry_primitives import Point
from hololearn.model.parameters import ExperimentParameters
from hololearn.model.wave_math import (
    OMEGA, OBJECT_GAIN, OBJECT_EXPONENT, OBJECT_EPSILON,
    wavenumber, sample_grid, plane_wave_phase, radial_distance, spherical_amplitude,
    two_beam_intensity,
)

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

# Plate sits this many pixels left of the right edge
PLATE_MARGIN_PX: int = 40

# Headroom applied on top of the analytic peak estimate
NORMALIZATION_HEADROOM: float = 1.1


@dataclass(frozen=True)
class WaveField:
    """
    Instantaneous scalar field on the sample grid.

    `values` has shape (height, width). `mask` is True where the pipeline
    computed a sample; elsewhere `values` is 0 and carries no meaning.
    """
    values: npt.NDArray[np.float64]
    mask: npt.NDArray[np.bool_]
    time: int

    @property
    def shape(self) -> tuple[int, int]:
        return self.values.shape


@dataclass(frozen=True)
class IntensityProfile:
    """Recorded intensity I(y) along the plate, with its display divisor."""
    values: npt.NDArray[np.float64]
    divisor: float

    def normalized(self) -> npt.NDArray[np.float64]:
        """Intensity over the analytic divisor. Not clipped; may exceed 1."""
        return self.values / self.divisor


@dataclass(frozen=True)
class RecordingGeometry:
    plate_x: float
    object_position: Point

    @classmethod
    def for_grid(cls, params: ExperimentParameters, width: int, height: int) -> RecordingGeometry:
        plate_x = float(width - PLATE_MARGIN_PX)
        return cls(
            plate_x=plate_x,
            object_position=Point(plate_x - params.object_distance, height / 2),
        )


def incident_phase_at_object(params: ExperimentParameters, object_x: float) -> float:
    """
    Reference phase at the object, on-axis component only (y_c = 0).

    The object is illuminated by the reference wave as if it sat on the
    optical axis.
    """
    return wavenumber(params.wavelength) * object_x * np.cos(params.theta)


def reference_wave(
    params: ExperimentParameters,
    time: int,
    x: npt.ArrayLike,
    y: npt.ArrayLike,
    height: int
) -> npt.NDArray[np.float64]:
    """Reference plane wave E_ref(x, y, t) = A cos(k(x cosθ + y_c sinθ) − ωt)."""
    phase = plane_wave_phase(
        x,
        np.asarray(y) - height / 2,
        wavenumber(params.wavelength),
        params.theta,
        OMEGA * time,
    )
    return params.intensity * np.cos(phase)


def object_wave(
    params: ExperimentParameters,
    time: int,
    x: npt.ArrayLike,
    y: npt.ArrayLike,
    geometry: RecordingGeometry
) -> npt.NDArray[np.float64]:
    """Object's spherical wave; zero at and left of the object's x position."""
    obj = geometry.object_position
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)

    r = radial_distance(x, y, obj.x, obj.y)
    amplitude = object_amplitude(params, r)
    phase = (
        incident_phase_at_object(params, obj.x)
        + params.object_phase
        + wavenumber(params.wavelength) * r
        - OMEGA * time
    )
    return np.where(x > obj.x, amplitude * np.cos(phase), 0.0)


def object_amplitude(params: ExperimentParameters, r: npt.ArrayLike) -> npt.NDArray[np.float64]:
    return spherical_amplitude(
        params.intensity * params.object_opacity,
        r,
        gain=OBJECT_GAIN,
        exponent=OBJECT_EXPONENT,
        epsilon=OBJECT_EPSILON,
    )


def compute_field(
    params: ExperimentParameters,
    time: int,
    width: int,
    height: int
) -> WaveField:
    """
    Superposed reference + object field in front of the plate.

    Args:
        params: Parameter snapshot for this frame.
        time: Simulation tick.
        width: Grid width in samples.
        height: Grid height in samples.

    Returns:
        WaveField whose mask covers x <= plate_x. Samples behind the plate are
        not computed.
    """
    x, y = sample_grid(width, height)
    geometry = RecordingGeometry.for_grid(params, width, height)

    total = reference_wave(params, time, x, y, height) + object_wave(params, time, x, y, geometry)
    mask = np.broadcast_to(x <= geometry.plate_x, (height, width))

    return WaveField(values=np.where(mask, total, 0.0), mask=mask, time=time)


def normalization_divisor(params: ExperimentParameters) -> float:
    """
    Analytic display divisor (A + 2·A·opacity)² · 1.1.

    This is an estimate of the peak, not the measured maximum, so extreme
    parameter combinations can clip or leave headroom unused.
    """
    peak = params.intensity + params.intensity * params.object_opacity * 2
    return peak ** 2 * NORMALIZATION_HEADROOM


@lru_cache(maxsize=32)
def compute_profile(params: ExperimentParameters, width: int, height: int) -> IntensityProfile:
    """
    Interference intensity recorded along the plate.

    Both interfering terms carry the same −ωt, which cancels in the phase
    difference, so the profile has no time argument. Results are memoized and
    returned read-only.
    """
    _, y = sample_grid(width, height)
    y = y[:, 0]
    geometry = RecordingGeometry.for_grid(params, width, height)
    plate_x = geometry.plate_x
    obj = geometry.object_position
    k = wavenumber(params.wavelength)

    phi_ref = plane_wave_phase(plate_x, y - height / 2, k, params.theta)
    a_ref = np.full_like(y, params.intensity)

    r = radial_distance(plate_x, y, obj.x, obj.y)
    a_obj = object_amplitude(params, r)
    phi_obj = incident_phase_at_object(params, obj.x) + params.object_phase + k * r

    # (A − B)² >= 0 analytically; clip rounding noise at full destructive interference
    values = np.maximum(two_beam_intensity(a_ref, a_obj, phi_ref - phi_obj), 0.0)
    values.setflags(write=False)

    logger.debug(f"Recomputed intensity profile for {params} ({height} samples).")
    return IntensityProfile(values=values, divisor=normalization_divisor(params))


def compute_profile_at(
    params: ExperimentParameters,
    time: int,
    width: int,
    height: int
) -> IntensityProfile:
    """Profile for a given tick; identical for every tick."""
    return compute_profile(params, width, height)
