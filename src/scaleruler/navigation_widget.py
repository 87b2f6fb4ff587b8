import logging

from PySide6.QtWidgets import QWidget, QGridLayout
from PySide6.QtGui import QPainter

from scaleruler.rulers import Orientation, Ruler, Viewport
from scaleruler.widgets import DrawingWidget, RulerArea

logger = logging.getLogger(__name__)


class NavigationWidget(QWidget):
    """
    Main composite navigation widget.

    Uses a QGridLayout to arrange:
    - Top ruler area (horizontal Ruler)
    - Left ruler area (vertical Ruler)
    - Main canvas area (for drawing data)

    The canvas zooms and pans the shared viewports; every viewport change is pushed to the
    matching Ruler, which recomputes its ticks and asks its area to repaint.
    """

    def __init__(self, h_viewport, v_viewport, color_map, parent=None):
        super().__init__(parent)
        self.color_map = color_map
        self.h_viewport = h_viewport
        self.v_viewport = v_viewport

        self.top_area = RulerArea('x', self)
        self.left_area = RulerArea('y', self)
        self.canvas = DrawingWidget(h_viewport, v_viewport, color_map, self)

        self.top_ruler = Ruler.create(Orientation.HORIZONTAL, self.top_area)
        self.left_ruler = Ruler.create(Orientation.VERTICAL, self.left_area)
        for ruler in (self.top_ruler, self.left_ruler):
            ruler.background_color = color_map.get_object_color("ruler-base")
            ruler.line_color = color_map.get_object_color("text-base")

        self.top_ruler.set_range(h_viewport.visible_start, h_viewport.visible_stop)
        self.left_ruler.set_range(v_viewport.visible_start, v_viewport.visible_stop)
        h_viewport.add_listener(self.top_ruler.set_range)
        v_viewport.add_listener(self.left_ruler.set_range)

        # Layout
        layout = QGridLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        corner = QWidget()
        corner.setFixedSize(RulerArea.BREADTH, RulerArea.BREADTH)
        corner.paintEvent = lambda e: QPainter(corner).fillRect(corner.rect(), color_map.get_object_color("ruler-base"))

        layout.addWidget(corner, 0, 0)
        layout.addWidget(self.top_area, 0, 1)
        layout.addWidget(self.left_area, 1, 0)
        layout.addWidget(self.canvas, 1, 1)

    def set_range(self, h_lower: float, h_upper: float, v_lower: float, v_upper: float) -> None:
        """Show [h_lower, h_upper] horizontally and [v_lower, v_upper] vertically."""
        logger.debug("Range set to [%s, %s] x [%s, %s]", h_lower, h_upper, v_lower, v_upper)
        self.h_viewport.set_visible(h_lower, h_upper)
        self.v_viewport.set_visible(v_lower, v_upper)
        self.canvas.update()

    # Delegate drawing API to canvas
    def add_draw_command(self, name, command):
        self.canvas.add_draw_command(name, command)

    def draw_rects(self, name, get_rects_func, brush=None, pen=None):
        self.canvas.draw_rects(name, get_rects_func, brush, pen)

    def draw_lines(self, name, get_lines_func, pen=None):
        self.canvas.draw_lines(name, get_lines_func, pen)
