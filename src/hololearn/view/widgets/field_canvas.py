"""
Field Canvas
============
Paints an RGBA raster with a vector overlay on top.

The raster is kept at simulation resolution and scaled uniformly to the
widget (pixelated, aspect preserved). Overlay coordinates are in raster
pixels and go through the same transform.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np
from PySide6.QtCore import QPointF, QRectF, QSize, Qt
from PySide6.QtGui import QBrush, QColor, QFont, QFontMetricsF, QImage, QPainter, QPainterPath, QPen
from PySide6.QtWidgets import QSizePolicy, QWidget

from hololearn.view.renderers.overlay import Circle, Color, EyeGlyph, FillRect, Label, Line, OverlayItem

if TYPE_CHECKING:
    import numpy.typing as npt


def to_qimage(rgba: npt.NDArray[np.uint8]) -> QImage:
    """Copy an (H, W, 4) uint8 array into a QImage."""
    rgba = np.ascontiguousarray(rgba, dtype=np.uint8)
    height, width, channels = rgba.shape
    if channels != 4:
        raise ValueError(f"Expected RGBA data, got {channels} channels.")
    # QImage does not own the buffer; copy() detaches it from numpy
    return QImage(rgba.data, width, height, width * 4, QImage.Format.Format_RGBA8888).copy()


def qcolor(color: Color) -> QColor:
    return QColor(*color)


class FieldCanvas(QWidget):
    def __init__(self, width: int, height: int, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._raster_size = QSize(width, height)
        self._image: QImage | None = None
        self._overlay: list[OverlayItem] = []

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred)
        self.setMinimumSize(width // 2, height // 2)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent)

    def sizeHint(self) -> QSize:
        return self._raster_size

    def hasHeightForWidth(self) -> bool:
        return True

    def heightForWidth(self, width: int) -> int:
        return round(width * self._raster_size.height() / self._raster_size.width())

    def set_frame(self, rgba: npt.NDArray[np.uint8], overlay: list[OverlayItem]) -> None:
        self._image = to_qimage(rgba)
        self._overlay = list(overlay)
        self.update()

    def _target_rect(self) -> QRectF:
        w, h = self._raster_size.width(), self._raster_size.height()
        scale = min(self.width() / w, self.height() / h)
        target_w, target_h = w * scale, h * scale
        return QRectF((self.width() - target_w) / 2, (self.height() - target_h) / 2, target_w, target_h)

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.fillRect(self.rect(), Qt.GlobalColor.black)
        if self._image is None:
            painter.end()
            return

        target = self._target_rect()
        painter.drawImage(target, self._image)

        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.translate(target.topLeft())
        painter.scale(target.width() / self._raster_size.width(), target.height() / self._raster_size.height())
        painter.setClipRect(QRectF(0, 0, self._raster_size.width(), self._raster_size.height()))

        for item in self._overlay:
            painter.save()
            self._draw_item(painter, item)
            painter.restore()
        painter.end()

    def _draw_item(self, painter: QPainter, item: OverlayItem) -> None:
        match item:
            case FillRect():
                painter.fillRect(QRectF(item.x, item.y, item.width, item.height), qcolor(item.color))

            case Line():
                painter.setPen(QPen(qcolor(item.color), item.width))
                painter.drawLine(QPointF(item.x0, item.y0), QPointF(item.x1, item.y1))

            case Circle():
                center = QPointF(item.cx, item.cy)
                if item.glow > 0:
                    self._draw_glow(painter, center, item.radius, item.glow, item.glow_color or item.color)
                if item.filled:
                    painter.setPen(Qt.PenStyle.NoPen)
                    painter.setBrush(QBrush(qcolor(item.color)))
                else:
                    pen = QPen(qcolor(item.color), item.line_width)
                    if item.dashed:
                        # Dash pattern is in units of pen width
                        pen.setDashPattern([4 / item.line_width, 4 / item.line_width])
                    painter.setPen(pen)
                    painter.setBrush(Qt.BrushStyle.NoBrush)
                painter.drawEllipse(center, item.radius, item.radius)

            case Label():
                font = QFont("monospace" if item.monospace else "sans-serif")
                if item.monospace:
                    font.setStyleHint(QFont.StyleHint.Monospace)
                font.setPixelSize(item.font_size)
                font.setBold(item.bold)
                painter.setFont(font)
                if item.background is not None:
                    metrics = QFontMetricsF(font)
                    box = metrics.boundingRect(item.text).translated(item.x, item.y)
                    painter.fillRect(box.adjusted(-4, -3, 4, 3), qcolor(item.background))
                painter.setPen(qcolor(item.color))
                painter.drawText(QPointF(item.x, item.y), item.text)

            case EyeGlyph():
                painter.translate(item.cx, item.cy)
                painter.scale(item.scale, item.scale)
                outline = QPainterPath(QPointF(-15, 0))
                outline.quadTo(QPointF(0, -15), QPointF(15, 0))
                outline.quadTo(QPointF(0, 15), QPointF(-15, 0))
                painter.setPen(QPen(qcolor(item.color), 2))
                painter.setBrush(Qt.BrushStyle.NoBrush)
                painter.drawPath(outline)
                painter.setBrush(QBrush(qcolor(item.color)))
                painter.drawEllipse(QPointF(0, 0), 5, 5)

    @staticmethod
    def _draw_glow(painter: QPainter, center: QPointF, radius: float, blur: float, color: Color) -> None:
        """Approximate a shadow blur with a few translucent rings."""
        steps = 4
        painter.setPen(Qt.PenStyle.NoPen)
        for i in range(steps, 0, -1):
            glow = QColor(*color[:3], max(8, color[3] // (steps + 2)))
            painter.setBrush(QBrush(glow))
            r = radius + blur * i / steps
            painter.drawEllipse(center, r, r)
