from typing import Callable, Literal, Optional, Tuple

from PySide6.QtGui import QPainter
from PySide6.QtWidgets import QWidget

from scaleruler.surfaces.base import DRAW, RESIZE, HandlerRegistry
from scaleruler.surfaces.qt import QtPainter


class RulerArea(QWidget):
    """
    Widget a Ruler draws on.

    Key behaviors:
    - Fixed breadth, stretches along its orientation
    - Forwards paint events to "draw" handlers with a QtPainter
    - Forwards resize events to "resize" handlers with the new width and height
    """

    BREADTH = 20

    def __init__(self, orientation: Literal['x', 'y'] = 'x', parent: Optional[QWidget] = None) -> None:
        """Create ruler drawing area. 'x' for a horizontal ruler, 'y' for a vertical one."""
        super().__init__(parent)
        self.orientation: Literal['x', 'y'] = orientation
        self.handlers = HandlerRegistry()

        if orientation == 'x':
            self.setFixedHeight(self.BREADTH)
        else:
            self.setFixedWidth(self.BREADTH)

    def extent(self) -> Tuple[int, int]:
        return self.width(), self.height()

    def connect_handler(self, signal: str, callback: Callable[..., None], owner: object) -> None:
        self.handlers.connect(signal, callback, owner)

    def disconnect_owner(self, owner: object) -> int:
        return self.handlers.disconnect_owner(owner)

    def handler_count(self, owner: Optional[object] = None, signal: Optional[str] = None) -> int:
        return self.handlers.count(owner, signal)

    def queue_draw(self) -> None:
        self.update()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.handlers.emit(RESIZE, self.width(), self.height())

    def paintEvent(self, event):
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        try:
            self.handlers.emit(DRAW, QtPainter(painter))
        finally:
            painter.end()
