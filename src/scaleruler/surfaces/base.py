from typing import Any, Callable, List, NamedTuple, Optional, Protocol, Tuple

DRAW = "draw"
RESIZE = "resize"
SIGNALS = (DRAW, RESIZE)


class TextExtents(NamedTuple):
    """Size of a rendered label. y_bearing is the (negative) offset from the baseline to the top of the text."""
    width: float
    height: float
    x_advance: float
    y_bearing: float


class RulerPainter(Protocol):
    """Drawing capabilities handed to the "draw" handlers of a surface."""

    def fill_background(self, x: float, y: float, width: float, height: float, color: Any) -> None: ...

    def set_color(self, color: Any) -> None: ...

    def set_font_size(self, size: float) -> None: ...

    def draw_line(self, x1: float, y1: float, x2: float, y2: float, width: float) -> None: ...

    def text_extents(self, text: str) -> Optional[TextExtents]: ...

    def draw_text(self, text: str, x: float, y: float, rotation: float = 0.0) -> None: ...


class RulerSurface(Protocol):
    """
    Something a ruler can be attached to.

    The surface reports its pixel size, lets owners register "draw" and "resize" handlers and
    drop all of them at once, and accepts redraw requests.
    """

    def extent(self) -> Tuple[int, int]: ...

    def connect_handler(self, signal: str, callback: Callable[..., None], owner: object) -> None: ...

    def disconnect_owner(self, owner: object) -> int: ...

    def handler_count(self, owner: Optional[object] = None, signal: Optional[str] = None) -> int: ...

    def queue_draw(self) -> None: ...


class _Handler(NamedTuple):
    signal: str
    owner: object
    callback: Callable[..., None]


class HandlerRegistry:
    """Handlers connected to one surface, tagged by owner so an owner can be disconnected in one call."""

    def __init__(self) -> None:
        self._handlers: List[_Handler] = []

    def connect(self, signal: str, callback: Callable[..., None], owner: object) -> None:
        if signal not in SIGNALS:
            raise ValueError(f"Unknown signal {signal!r}. Use one of {SIGNALS}.")
        self._handlers.append(_Handler(signal, owner, callback))

    def disconnect_owner(self, owner: object) -> int:
        """Remove every handler registered by owner. Returns how many were removed."""
        kept = [h for h in self._handlers if h.owner is not owner]
        removed = len(self._handlers) - len(kept)
        self._handlers = kept
        return removed

    def count(self, owner: Optional[object] = None, signal: Optional[str] = None) -> int:
        return sum(
            1 for h in self._handlers
            if (owner is None or h.owner is owner) and (signal is None or h.signal == signal)
        )

    def emit(self, signal: str, *args: Any) -> None:
        # Copy first: a handler may disconnect itself
        for handler in list(self._handlers):
            if handler.signal == signal:
                handler.callback(*args)
