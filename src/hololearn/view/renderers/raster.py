"""
Raster helpers shared by the recording and reconstruction renderers.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from hololearn.model.wave_field import WaveField
from hololearn.model.wave_math import GRID_SPACING_PX, tone_map
from hololearn.view.renderers.overlay import Color, hex_color

if TYPE_CHECKING:
    import numpy.typing as npt

GRID_LINE_COLOR: Color = hex_color("#111111")


def blank_canvas(width: int, height: int, background: Color) -> npt.NDArray[np.uint8]:
    """Opaque (height, width, 4) RGBA canvas filled with one colour."""
    canvas = np.empty((height, width, 4), dtype=np.uint8)
    canvas[...] = background
    return canvas


def bench_background(
    width: int,
    height: int,
    background: Color,
    spacing: int = GRID_SPACING_PX
) -> npt.NDArray[np.uint8]:
    """Background with a faint "optical bench" grid every `spacing` pixels."""
    canvas = blank_canvas(width, height, background)
    canvas[:, ::spacing] = GRID_LINE_COLOR
    canvas[::spacing, :] = GRID_LINE_COLOR
    return canvas


def green_laser_rgba(
    brightness: npt.ArrayLike,
    blue_ratio: float
) -> npt.NDArray[np.uint8]:
    """
    Map brightness in [0, 255] to green-laser RGBA pixels.

    Channels: R = 0, G = brightness, B = blue_ratio * brightness, A = 255.
    """
    b = np.asarray(brightness, dtype=np.float64)
    rgba = np.zeros(b.shape + (4,), dtype=np.uint8)
    rgba[..., 1] = np.rint(b).astype(np.uint8)
    rgba[..., 2] = np.rint(b * blue_ratio).astype(np.uint8)
    rgba[..., 3] = 255
    return rgba


def paint_field(
    canvas: npt.NDArray[np.uint8],
    field: WaveField,
    intensity: float,
    blue_ratio: float
) -> npt.NDArray[np.uint8]:
    """Overwrite the computed samples of `field` on `canvas` in place."""
    if canvas.shape[:2] != field.shape:
        raise ValueError(f"Canvas {canvas.shape[:2]} does not match field {field.shape}.")
    pixels = green_laser_rgba(tone_map(field.values, intensity), blue_ratio)
    canvas[field.mask] = pixels[field.mask]
    return canvas
