"""
Vector overlay items drawn on top of a raster.

Renderers return lists of these plain records; the Qt canvas decides how to
paint them. Keeping them free of Qt types makes the overlays testable without
a display.
"""
from __future__ import annotations

from dataclasses import dataclass

# (r, g, b, a), every channel 0-255
Color = tuple[int, int, int, int]


def rgba(r: int, g: int, b: int, alpha: float = 1.0) -> Color:
    """Build a colour from 0-255 channels and a 0-1 alpha."""
    return int(r), int(g), int(b), int(round(255 * min(1.0, max(0.0, alpha))))


def hex_color(value: str, alpha: float = 1.0) -> Color:
    value = value.lstrip("#")
    if len(value) == 3:
        value = "".join(ch * 2 for ch in value)
    if len(value) != 6:
        raise ValueError(f"Expected #rgb or #rrggbb, got '#{value}'.")
    return rgba(int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16), alpha)


@dataclass(frozen=True)
class FillRect:
    x: float
    y: float
    width: float
    height: float
    color: Color
    name: str = ""


@dataclass(frozen=True)
class Line:
    x0: float
    y0: float
    x1: float
    y1: float
    color: Color
    width: float = 1.0
    name: str = ""


@dataclass(frozen=True)
class Circle:
    """Circle marker. `glow` is a blur radius in pixels (0 = none)."""
    cx: float
    cy: float
    radius: float
    color: Color
    filled: bool = True
    dashed: bool = False
    line_width: float = 1.0
    glow: float = 0.0
    glow_color: Color | None = None
    name: str = ""


@dataclass(frozen=True)
class Label:
    """Text anchored at its baseline-left corner."""
    x: float
    y: float
    text: str
    color: Color
    font_size: int = 10
    monospace: bool = False
    bold: bool = False
    background: Color | None = None
    name: str = ""


@dataclass(frozen=True)
class EyeGlyph:
    """Stylised observer eye: almond outline with a filled pupil."""
    cx: float
    cy: float
    color: Color
    scale: float = 1.0
    name: str = ""


OverlayItem = FillRect | Line | Circle | Label | EyeGlyph


def find(items: list[OverlayItem], name: str) -> OverlayItem | None:
    """First overlay item with the given name, or None."""
    for item in items:
        if item.name == name:
            return item
    return None
