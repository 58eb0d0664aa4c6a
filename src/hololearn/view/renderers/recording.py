"""
Recording Renderer
==================
Turns the recording-side physics into pixels and overlay items.

Functions:
    render_field: Wave field in front of the plate as an RGBA raster.
    render_overlay: Laser, object and plate markers.
    render_strip: Simulated film strip with grain.
    render_inspector: Film strip placed on the inspector canvas.
    plot_series: Normalized intensity curve for the inspector plot.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from hololearn.model.parameters import ExperimentParameters
from hololearn.model.wave_field import IntensityProfile, RecordingGeometry, WaveField
from hololearn.view.renderers.overlay import (
    Circle, FillRect, Label, Line, OverlayItem, hex_color, rgba,
)
from hololearn.view.renderers.raster import bench_background, blank_canvas, green_laser_rgba, paint_field

if TYPE_CHECKING:
    import numpy.typing as npt

BACKGROUND = hex_color("#020202")
FIELD_BLUE_RATIO: float = 0.1
STRIP_BLUE_RATIO: float = 0.2

# Peak-to-peak film grain in brightness units
DEFAULT_GRAIN: float = 30.0

LASER_GREEN = hex_color("#00ff00")
PLATE_COLOR = hex_color("#e5e5e5")
OBJECT_GLOW = hex_color("#3b82f6")
WHITE = hex_color("#ffffff")

FIELD_CAPTION = "E_field(x,y,t)"
STRIP_CAPTION = "Interference Pattern (Simulated Film)"


def render_field(field: WaveField, params: ExperimentParameters) -> npt.NDArray[np.uint8]:
    """Bench background with the computed field painted over it."""
    height, width = field.shape
    canvas = bench_background(width, height, BACKGROUND)
    return paint_field(canvas, field, params.intensity, FIELD_BLUE_RATIO)


def render_overlay(params: ExperimentParameters, width: int, height: int) -> list[OverlayItem]:
    geometry = RecordingGeometry.for_grid(params, width, height)
    obj = geometry.object_position
    axis_y = height / 2

    return [
        # Laser source
        FillRect(0, axis_y - 20, 30, 40, hex_color("#222222"), name="laser"),
        Label(2, axis_y - 25, "LASER", LASER_GREEN, monospace=True, name="laser_label"),
        Line(30, axis_y, width, axis_y, LASER_GREEN, width=2, name="beam_axis"),
        # Object
        Circle(
            obj.x, obj.y, 6,
            color=rgba(59, 130, 246, 0.5 + params.object_opacity * 0.5),
            glow=10,
            glow_color=OBJECT_GLOW,
            name="object",
        ),
        Label(obj.x - 10, obj.y - 15, "Obj", WHITE, font_size=12, bold=True, name="object_label"),
        # Plate
        FillRect(geometry.plate_x, 10, 8, height - 20, PLATE_COLOR, name="plate"),
        Label(geometry.plate_x - 40, height - 10, "Hologram Plate", WHITE, name="plate_label"),
        Label(
            8, 16, FIELD_CAPTION, hex_color("#4ade80"),
            monospace=True,
            background=rgba(0, 0, 0, 0.7),
            name="caption",
        ),
    ]


def strip_columns(profile: IntensityProfile, width: int) -> npt.NDArray[np.intp]:
    """Profile sample index shown in each strip column."""
    height = profile.values.shape[0]
    columns = np.arange(width)
    return np.minimum(np.floor(columns * height / width).astype(np.intp), height - 1)


def render_strip(
    profile: IntensityProfile,
    width: int,
    strip_height: int,
    grain: float = DEFAULT_GRAIN,
    rng: np.random.Generator | None = None
) -> npt.NDArray[np.uint8]:
    """
    Paint the recorded intensity as a strip of film.

    Each column shows one plate position, brightness clamp(I/divisor, 0, 1)·255
    plus uniform grain in [−grain/2, grain/2). Grain is drawn once per column,
    so every row of a column is identical. `grain=0` gives a deterministic strip.

    Args:
        profile: Intensity profile along the plate.
        width: Strip width in pixels.
        strip_height: Strip height in pixels.
        grain: Peak-to-peak noise amplitude.
        rng: Random generator for the grain; a fresh one is used if omitted.

    Returns:
        (strip_height, width, 4) RGBA array.
    """
    if width <= 0 or strip_height <= 0:
        raise ValueError(f"Strip size must be positive, got {width}x{strip_height}.")

    norm = np.clip(profile.normalized()[strip_columns(profile, width)], 0.0, 1.0)
    g = norm * 255
    if grain:
        rng = rng if rng is not None else np.random.default_rng()
        g = g + (rng.random(width) - 0.5) * grain
    g = np.clip(g, 0, 255)

    row = green_laser_rgba(g, STRIP_BLUE_RATIO)
    return np.broadcast_to(row, (strip_height, width, 4)).copy()


def render_inspector(
    profile: IntensityProfile,
    width: int,
    height: int,
    strip_top: int,
    strip_height: int,
    grain: float = DEFAULT_GRAIN,
    rng: np.random.Generator | None = None
) -> tuple[npt.NDArray[np.uint8], list[OverlayItem]]:
    """Film strip on the dark inspector background, with caption and border."""
    if strip_top + strip_height > height:
        raise ValueError(f"Strip rows {strip_top}..{strip_top + strip_height} exceed height {height}.")
    canvas = blank_canvas(width, height, hex_color("#111111"))
    canvas[strip_top:strip_top + strip_height] = render_strip(profile, width, strip_height, grain, rng)

    bottom = strip_top + strip_height - 1
    right = width - 1
    border = hex_color("#444444")
    overlay: list[OverlayItem] = [
        Label(10, strip_top - 6, STRIP_CAPTION, WHITE, font_size=11, name="strip_caption"),
        Line(0, strip_top, width, strip_top, border, name="strip_border_top"),
        Line(0, bottom, width, bottom, border, name="strip_border_bottom"),
        Line(0, strip_top, 0, bottom, border, name="strip_border_left"),
        Line(right, strip_top, right, bottom, border, name="strip_border_right"),
    ]
    return canvas, overlay


def plot_series(profile: IntensityProfile) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """Plate positions 0..H−1 and the normalized (unclipped) intensity."""
    values = profile.normalized()
    return np.arange(values.shape[0], dtype=np.float64), values
