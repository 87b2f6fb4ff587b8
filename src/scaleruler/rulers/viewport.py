import logging
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)


class Viewport:
    """Visible part of a numeric window, mapped onto `length` pixels. Listeners hear every range change."""

    def __init__(self, window_start: float, window_stop: float, length: float = 1.0, visible_start: Optional[float] = None, visible_stop: Optional[float] = None) -> None:
        """Create viewport over the data range [window_start, window_stop] with an initial visible range."""
        if window_stop <= window_start:
            raise ValueError(f"Empty window [{window_start}, {window_stop}]")
        self.window_start = window_start
        self.window_stop = window_stop
        self.visible_start = window_start if visible_start is None else visible_start
        self.visible_stop = window_stop if visible_stop is None else visible_stop
        self.window_length = self.window_stop - self.window_start
        self.visible_length = self.visible_stop - self.visible_start
        self.length = length
        self._listeners: List[Callable[[float, float], None]] = []

    def add_listener(self, callback: Callable[[float, float], None]) -> None:
        """Call callback(visible_start, visible_stop) whenever the visible range changes."""
        self._listeners.append(callback)

    def remove_listener(self, callback: Callable[[float, float], None]) -> None:
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _changed(self) -> None:
        self.visible_length = self.visible_stop - self.visible_start
        for callback in list(self._listeners):
            callback(self.visible_start, self.visible_stop)

    def set_visible(self, visible_start: float, visible_stop: float) -> None:
        if visible_stop <= visible_start:
            raise ValueError(f"Empty visible range [{visible_start}, {visible_stop}]")
        self.visible_start = visible_start
        self.visible_stop = visible_stop
        self._changed()

    def transform(self, value: float) -> float:
        """Convert data value to pixel position."""
        return (value - self.visible_start) / self.visible_length * self.length

    def get_value_at(self, x: float) -> float:
        """Convert pixel position to data value."""
        normalized = x / self.length
        normalized = max(0.0, min(1.0, normalized))
        return self.visible_start + normalized * self.visible_length

    def get_delta_width(self, delta: float) -> float:
        """Convert pixel delta to data value delta."""
        return self.visible_length * (delta / self.length)

    def zoom(self, zoom_in: bool, mouse_pos: float) -> None:
        """Zoom in/out while keeping the value at mouse_pos fixed in place."""
        value_at_mouse = self.get_value_at(mouse_pos)
        zoom_factor = 1.1 if zoom_in else 0.93
        new_visible_length = min(self.visible_length / zoom_factor, self.window_length)
        offset = (value_at_mouse - self.visible_start) / self.visible_length
        self.visible_start = value_at_mouse - offset * new_visible_length
        self.visible_stop = self.visible_start + new_visible_length
        if self.visible_start < self.window_start:
            self.visible_start = self.window_start
            self.visible_stop = self.visible_start + new_visible_length
        if self.visible_stop > self.window_stop:
            self.visible_stop = self.window_stop
            self.visible_start = self.visible_stop - new_visible_length
        logger.debug("Zoomed to [%s, %s]", self.visible_start, self.visible_stop)
        self._changed()

    def pan(self, delta: float) -> None:
        """Pan viewport by delta pixels. Positive moves right/down, negative moves left/up."""
        value_delta = self.get_delta_width(delta)
        if delta > 0:
            self.visible_start = max(self.window_start, self.visible_start - value_delta)
        else:
            self.visible_start = min(self.window_stop - self.visible_length, self.visible_start - value_delta)
        self.visible_stop = self.visible_start + self.visible_length
        self._changed()
