from typing import Callable, List, Optional, Tuple
from PySide6.QtCore import Qt, QRectF, QLineF
from PySide6.QtWidgets import QWidget
from PySide6.QtGui import QPainter, QBrush, QPen

from scaleruler.rulers.viewport import Viewport
from scaleruler.colors.modes import ColorMap


class DrawingWidget(QWidget):
    """
    Canvas that shares Viewport instances with the rulers around it.

    Key behaviors:
    - Syncs viewport pixel lengths with its own size (only on resize)
    - Named draw commands are given in data coordinates
    - Wheel zooms (Ctrl: horizontal, Alt: vertical) or pans both viewports
    """

    def __init__(self, h_viewport: Viewport, v_viewport: Viewport, color_map: ColorMap, parent: Optional[QWidget] = None) -> None:
        """Create drawing canvas that shares viewports for coordinate transformation."""
        super().__init__(parent)
        self.h_viewport: Viewport = h_viewport
        self.v_viewport: Viewport = v_viewport
        self.color_map: ColorMap = color_map
        self.draw_commands: dict[str, Callable[[QPainter], None]] = {}

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.h_viewport.length = self.width()
        self.v_viewport.length = self.height()

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        painter.setBrush(QBrush(self.color_map.get_object_color("surface-lower")))
        painter.setPen(Qt.PenStyle.NoPen)
        painter.drawRect(self.rect())

        for command in self.draw_commands.values():
            command(painter)

    def wheelEvent(self, event):
        zoom_in = event.angleDelta().y() > 0

        # Viewport listeners push the new ranges to the rulers
        if event.modifiers() & Qt.KeyboardModifier.ControlModifier:
            self.h_viewport.zoom(zoom_in, event.position().x())
        elif event.modifiers() & Qt.KeyboardModifier.AltModifier:
            self.v_viewport.zoom(zoom_in, event.position().y())
        else:
            self.h_viewport.pan(event.angleDelta().x())
            self.v_viewport.pan(event.angleDelta().y())

        self.update()
        event.accept()

    def add_draw_command(self, name: str, command: Callable[[QPainter], None]) -> None:
        """Register a named drawing function. Replaces existing command with same name."""
        self.draw_commands[name] = command

    def draw_rects(
        self,
        name: str,
        get_rects_func: Callable[[], List[Tuple[float, float, float, float]]],
        brush: Optional[QBrush] = None,
        pen: Optional[QPen] = None
    ) -> None:
        """Draw rectangles. get_rects_func returns list of (x, y, width, height) in data coordinates."""
        def command(painter):
            painter.setPen(pen or Qt.PenStyle.NoPen)
            painter.setBrush(brush or Qt.BrushStyle.NoBrush)
            rects = []
            for x, y, width, height in get_rects_func():
                x1 = self.h_viewport.transform(x)
                y1 = self.v_viewport.transform(y)
                x2 = self.h_viewport.transform(x + width)
                y2 = self.v_viewport.transform(y + height)
                rects.append(QRectF(x1, y1, x2 - x1, y2 - y1))
            painter.drawRects(rects)
        self.add_draw_command(name, command)

    def draw_lines(
        self,
        name: str,
        get_lines_func: Callable[[], List[Tuple[float, float, float, float]]],
        pen: Optional[QPen] = None
    ) -> None:
        """Draw lines. get_lines_func returns list of (x1, y1, x2, y2) in data coordinates."""
        def command(painter):
            if pen:
                painter.setPen(pen)
            lines = [
                QLineF(
                    self.h_viewport.transform(x1),
                    self.v_viewport.transform(y1),
                    self.h_viewport.transform(x2),
                    self.v_viewport.transform(y2)
                )
                for x1, y1, x2, y2 in get_lines_func()
            ]
            painter.drawLines(lines)
        self.add_draw_command(name, command)
