from scaleruler import ColorMap, NavigationWidget, Viewport
from PySide6.QtWidgets import QMainWindow, QApplication
from PySide6.QtGui import QBrush, QPen


class MyWindow(QMainWindow):
    def __init__(self):
        super().__init__()
        self.setWindowTitle("Ruler")
        self.setMinimumSize(640, 420)
        self.color_map = ColorMap(darkmode=False)

        # Setup viewports, zoomable within [-1000, 1000]
        self.h_viewport = Viewport(-1000, 1000, visible_start=-7, visible_stop=23)
        self.v_viewport = Viewport(-1000, 1000, visible_start=-10, visible_stop=10)

        # Create widget
        self.widget = NavigationWidget(self.h_viewport, self.v_viewport, self.color_map)
        self.setCentralWidget(self.widget)

        # Draw stuff
        line = QPen(self.color_map.get_object_color("border-intense"), 1)
        self.widget.draw_lines("axes", lambda: [(-1000, 0, 1000, 0), (0, -1000, 0, 1000)], pen=line)
        self.widget.draw_rects(
            "unit_square",
            lambda: [(0, 0, 1, 1), (5, -5, 10, 2.5)],
            brush=QBrush(self.color_map.get_object_color("text-secondary"))
        )


if __name__ == "__main__":
    app = QApplication([])
    window = MyWindow()
    window.show()
    app.exec()
