"""
Shared wave math for the recording and reconstruction engines.

All functions are vectorized over numpy arrays and never produce NaN/inf for
non-negative radii: every denominator carries a strictly positive epsilon.
"""
from __future__ import annotations

from functools import lru_cache
from math import pi
from typing import TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

# Animation speed (radians per tick). Not user-configurable.
OMEGA: float = 0.15

# Object wave shaping law: intensity * opacity * GAIN / (r**EXPONENT + EPSILON)
OBJECT_GAIN: float = 40.0
OBJECT_EXPONENT: float = 0.7
OBJECT_EPSILON: float = 5.0

# Reconstructed image waves use the same law with stronger, slower falloff
IMAGE_GAIN: float = 100.0
IMAGE_EXPONENT: float = 0.8
IMAGE_EPSILON: float = 10.0

# Tone map: brightness = BASE + (field + intensity) * SCALE
TONE_BASE: float = 10.0
TONE_SCALE: float = 15.0

GRID_SPACING_PX: int = 40


def deg2rad(degrees: float) -> float:
    return degrees * pi / 180


def wavenumber(wavelength: float) -> float:
    """k = 2π / λ, with λ in pixels."""
    return 2.0 * pi / wavelength


@lru_cache(maxsize=8)
def sample_grid(width: int, height: int) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Pixel-centre coordinates of a width x height raster.

    Returns:
        (x, y) arrays broadcastable to shape (height, width). Both are read-only
        because they are shared between frames.
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid size must be positive, got {width}x{height}.")
    x = np.arange(width, dtype=np.float64).reshape(1, width)
    y = np.arange(height, dtype=np.float64).reshape(height, 1)
    x.setflags(write=False)
    y.setflags(write=False)
    return x, y


def plane_wave_phase(
    x: npt.ArrayLike,
    y_centered: npt.ArrayLike,
    k: float,
    theta: float,
    time_phase: float = 0.0
) -> npt.NDArray[np.float64]:
    """Phase of a plane wave travelling at angle theta: k(x cosθ + y sinθ) − ωt."""
    return k * (np.asarray(x) * np.cos(theta) + np.asarray(y_centered) * np.sin(theta)) - time_phase


def radial_distance(
    x: npt.ArrayLike,
    y: npt.ArrayLike,
    source_x: float,
    source_y: float
) -> npt.NDArray[np.float64]:
    return np.hypot(np.asarray(x) - source_x, np.asarray(y) - source_y)


def spherical_amplitude(
    peak: float,
    r: npt.ArrayLike,
    *,
    gain: float,
    exponent: float,
    epsilon: float
) -> npt.NDArray[np.float64]:
    """
    Visually bounded point-source falloff: peak * gain / (r**exponent + epsilon).

    At r = 0 the amplitude is peak * gain / epsilon, so the result is finite
    everywhere.
    """
    return peak * gain / (np.power(np.asarray(r, dtype=np.float64), exponent) + epsilon)


def tone_map(field: npt.ArrayLike, intensity: float) -> npt.NDArray[np.float64]:
    """Fixed affine field-to-brightness map, clamped to [0, 255]."""
    return np.clip(TONE_BASE + (np.asarray(field) + intensity) * TONE_SCALE, 0.0, 255.0)


def two_beam_intensity(
    amp_a: npt.ArrayLike,
    amp_b: npt.ArrayLike,
    phase_difference: npt.ArrayLike
) -> npt.NDArray[np.float64]:
    """Two-beam interference law: A² + B² + 2AB cos(Δφ)."""
    a = np.asarray(amp_a, dtype=np.float64)
    b = np.asarray(amp_b, dtype=np.float64)
    return a * a + b * b + 2.0 * a * b * np.cos(phase_difference)
