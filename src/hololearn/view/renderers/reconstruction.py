"""
Reconstruction Renderer
=======================
Paints the reconstructed field and marks where the images form.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from hololearn.model.parameters import ExperimentParameters, HolographyMode
from hololearn.model.reconstruction import DiffractionOrders, compute_orders
from hololearn.model.wave_field import WaveField
from hololearn.view.renderers.overlay import Circle, EyeGlyph, FillRect, Label, Line, OverlayItem, hex_color, rgba
from hololearn.view.renderers.raster import bench_background, paint_field

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt

BACKGROUND = hex_color("#000000")
BLUE_RATIO: float = 0.2

# Observer sits this far left of the right edge
EYE_MARGIN_PX: float = 40.0

FIELD_CAPTION = "Reconstruction_Field(x,y,t)"

MODE_CAPTIONS: dict[HolographyMode, str] = {
    HolographyMode.CO_LINEAR: (
        "Inline: Real and Virtual images overlap on the same axis (Gabor's Problem)."
    ),
    HolographyMode.ANGULAR_OFFSET: (
        "Off-axis: The Real Image is deflected away, leaving a clear view of the Virtual Image."
    ),
}

WHITE = hex_color("#ffffff")
LASER_GREEN = hex_color("#00ff00")
VIRTUAL_COLOR = rgba(100, 200, 255, 0.6)
REAL_COLOR = rgba(255, 100, 100, 0.9)


def render_field(field: WaveField, params: ExperimentParameters) -> npt.NDArray[np.uint8]:
    height, width = field.shape
    canvas = bench_background(width, height, BACKGROUND)
    return paint_field(canvas, field, params.intensity, BLUE_RATIO)


def mode_caption(mode: HolographyMode) -> str:
    return MODE_CAPTIONS[HolographyMode(mode)]


def render_overlay(
    params: ExperimentParameters,
    width: int,
    height: int,
    orders: DiffractionOrders | None = None
) -> list[OverlayItem]:
    """
    Plate, reading beam, image markers, observer and captions.

    The virtual image marker is drawn only while it lies right of x = 0; the
    real image marker only while it lies left of the right edge.
    """
    if orders is None:
        orders = compute_orders(params, width, height)
    axis_y = orders.axis_y
    plate_x = orders.plate_x

    items: list[OverlayItem] = [
        FillRect(plate_x, 10, 4, height - 20, hex_color("#666666"), name="plate"),
        Label(plate_x - 25, height - 10, "Hologram", WHITE, monospace=True, name="plate_label"),
        Line(10, axis_y - 40, 80, axis_y - 40, LASER_GREEN, width=2, name="reading_beam"),
        Label(10, axis_y - 50, "Ref Beam", LASER_GREEN, monospace=True, name="reading_beam_label"),
    ]

    virtual = orders.virtual_image
    if virtual.x > 0:
        items.append(Circle(
            virtual.x, virtual.y, 8,
            color=VIRTUAL_COLOR,
            filled=False,
            dashed=True,
            line_width=2,
            name="virtual_image",
        ))
        items.append(Label(
            virtual.x - 20, virtual.y - 15, "Virtual Img", rgba(100, 200, 255, 0.8),
            monospace=True,
            name="virtual_image_label",
        ))

    real = orders.real_image
    if real.x < width:
        items.append(Circle(
            real.x, real.y, 4,
            color=REAL_COLOR,
            glow=15,
            glow_color=hex_color("#ff0000"),
            name="real_image",
        ))
        items.append(Label(
            real.x - 20, real.y + 20, "Real Img", hex_color("#ffbbbb"),
            monospace=True,
            name="real_image_label",
        ))

    items.append(EyeGlyph(width - EYE_MARGIN_PX, axis_y, WHITE, scale=0.8, name="observer"))
    items.append(Label(
        8, 16, FIELD_CAPTION, hex_color("#4ade80"),
        monospace=True,
        background=rgba(0, 0, 0, 0.7),
        name="caption",
    ))
    items.append(Label(
        8, height - 28, mode_caption(params.mode), hex_color("#d1d5db"),
        background=rgba(0, 0, 0, 0.6),
        name="mode_caption",
    ))
    return items
