"""
Reconstruction-side wave field synthesis.

The developed plate is illuminated by the reference beam again. Behind the
plate the field is modelled analytically as three diffraction orders:

    0   direct beam, attenuated copy of the reading beam
    +1  virtual image, diverging from the original object position
    −1  real image, anchored at a point deflected by twice the reference angle

The orders are always summed; only the reference angle separates them.
"""
from __future__ import annotations

from dataclasses import dataclass
import math
from typing import TYPE_CHECKING

import numpy as np

from hololearn.model.geometry_primitives import Point, Vector
from hololearn.model.parameters import ExperimentParameters
from hololearn.model.wave_field import WaveField, reference_wave
from hololearn.model.wave_math import (
    OMEGA, IMAGE_GAIN, IMAGE_EXPONENT, IMAGE_EPSILON,
    wavenumber, sample_grid, radial_distance, spherical_amplitude,
)

if TYPE_CHECKING:
    import numpy.typing as npt

# Plate sits left of centre to leave room for the real image
RECONSTRUCTION_PLATE_X: float = 250.0

DIRECT_TRANSMISSION: float = 0.5


@dataclass(frozen=True)
class DiffractionOrders:
    """Geometry of the three reconstructed orders for one parameter snapshot."""
    direct_transmission: float
    virtual_image: Point
    real_image: Point
    deflection_angle: float
    plate_x: float
    axis_y: float

    @property
    def real_image_offset(self) -> Vector:
        """Displacement of the real image from the point where the axis crosses the plate."""
        return self.real_image - Point(self.plate_x, self.axis_y)

    @property
    def real_image_axis_offset(self) -> float:
        """Signed perpendicular distance of the real image from the direct axis."""
        return self.real_image.y - self.axis_y

    @property
    def images_overlap(self) -> bool:
        return math.isclose(self.real_image.y, self.virtual_image.y, abs_tol=1e-9)


def compute_orders(
    params: ExperimentParameters,
    width: int,
    height: int,
    plate_x: float = RECONSTRUCTION_PLATE_X
) -> DiffractionOrders:
    """
    Place the virtual and real image sources.

    The virtual image reappears where the object was recorded. The real image
    lies at the same distance behind the plate, rotated by 2θ off the axis,
    which collapses onto the axis in co-linear mode.
    """
    axis_y = height / 2
    deflection = 2.0 * params.theta
    virtual = Point(plate_x - params.object_distance, axis_y)
    real = Point(plate_x, axis_y) + Vector.from_polar(params.object_distance, deflection)

    return DiffractionOrders(
        direct_transmission=DIRECT_TRANSMISSION,
        virtual_image=virtual,
        real_image=real,
        deflection_angle=deflection,
        plate_x=plate_x,
        axis_y=axis_y,
    )


def image_wave(
    params: ExperimentParameters,
    time: int,
    x: npt.ArrayLike,
    y: npt.ArrayLike,
    source: Point
) -> npt.NDArray[np.float64]:
    """Spherical wave A(r) cos(kr − ωt) centred on an image source."""
    r = radial_distance(x, y, source.x, source.y)
    amplitude = spherical_amplitude(
        params.intensity,
        r,
        gain=IMAGE_GAIN,
        exponent=IMAGE_EXPONENT,
        epsilon=IMAGE_EPSILON,
    )
    return amplitude * np.cos(wavenumber(params.wavelength) * r - OMEGA * time)


def compute_field(
    params: ExperimentParameters,
    time: int,
    width: int,
    height: int,
    plate_x: float = RECONSTRUCTION_PLATE_X
) -> WaveField:
    """
    Reconstructed field over the full grid.

    Left of the plate: the reading (reference) beam. From the plate onwards:
    0.5·E_ref + E_virtual + E_real.
    """
    x, y = sample_grid(width, height)
    orders = compute_orders(params, width, height, plate_x)

    reading = reference_wave(params, time, x, y, height)
    behind = (
        orders.direct_transmission * reading
        + image_wave(params, time, x, y, orders.virtual_image)
        + image_wave(params, time, x, y, orders.real_image)
    )
    values = np.where(x < orders.plate_x, reading, behind)
    mask = np.ones((height, width), dtype=bool)

    return WaveField(values=values, mask=mask, time=time)
