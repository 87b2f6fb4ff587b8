from typing import Any, Optional

from PySide6.QtCore import QLineF, QPointF, QRectF
from PySide6.QtGui import QColor, QFontMetricsF, QPainter, QPen

from scaleruler.surfaces.base import TextExtents


def to_qcolor(color: Any) -> QColor:
    """Accept a QColor or an (r, g, b[, a]) tuple of floats in [0, 1]."""
    if isinstance(color, QColor):
        return color
    return QColor.fromRgbF(*color)


class QtPainter:
    """Ruler painter backed by a QPainter."""

    def __init__(self, painter: QPainter) -> None:
        self.painter = painter
        self.color = QColor(0, 0, 0)

    def fill_background(self, x: float, y: float, width: float, height: float, color: Any) -> None:
        self.painter.fillRect(QRectF(x, y, width, height), to_qcolor(color))

    def set_color(self, color: Any) -> None:
        self.color = to_qcolor(color)

    def set_font_size(self, size: float) -> None:
        font = self.painter.font()
        font.setPixelSize(int(size))
        self.painter.setFont(font)

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, width: float) -> None:
        self.painter.setPen(QPen(self.color, width))
        self.painter.drawLine(QLineF(x1, y1, x2, y2))

    def text_extents(self, text: str) -> Optional[TextExtents]:
        metrics = QFontMetricsF(self.painter.font())
        bounds = metrics.tightBoundingRect(text)
        if bounds.isNull():
            return None
        return TextExtents(bounds.width(), bounds.height(), metrics.horizontalAdvance(text), bounds.y())

    def draw_text(self, text: str, x: float, y: float, rotation: float = 0.0) -> None:
        self.painter.setPen(QPen(self.color, 1))
        if rotation == 0:
            self.painter.drawText(QPointF(x, y), text)
            return
        self.painter.save()
        self.painter.translate(x, y)
        self.painter.rotate(rotation)
        self.painter.drawText(QPointF(0, 0), text)
        self.painter.restore()
