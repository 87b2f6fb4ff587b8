from scaleruler.surfaces.base import DRAW, RESIZE, HandlerRegistry, TextExtents


class RecordingPainter:
    """Painter that records every call. Labels are char_width pixels per character, or unmeasurable."""

    def __init__(self, char_width=6, measurable=True):
        self.char_width = char_width
        self.measurable = measurable
        self.calls = []

    def fill_background(self, x, y, width, height, color):
        self.calls.append(("fill_background", x, y, width, height, color))

    def set_color(self, color):
        self.calls.append(("set_color", color))

    def set_font_size(self, size):
        self.calls.append(("set_font_size", size))

    def draw_line(self, x1, y1, x2, y2, width):
        self.calls.append(("draw_line", x1, y1, x2, y2, width))

    def text_extents(self, text):
        if not self.measurable:
            return None
        width = self.char_width * len(text)
        return TextExtents(width, 8, width, -8)

    def draw_text(self, text, x, y, rotation=0.0):
        self.calls.append(("draw_text", text, x, y, rotation))

    def named(self, name):
        return [c for c in self.calls if c[0] == name]


class FakeSurface:
    """In-memory ruler surface with a settable size."""

    def __init__(self, width, height):
        self.width = width
        self.height = height
        self.handlers = HandlerRegistry()
        self.draw_requests = 0

    def extent(self):
        return self.width, self.height

    def connect_handler(self, signal, callback, owner):
        self.handlers.connect(signal, callback, owner)

    def disconnect_owner(self, owner):
        return self.handlers.disconnect_owner(owner)

    def handler_count(self, owner=None, signal=None):
        return self.handlers.count(owner, signal)

    def queue_draw(self):
        self.draw_requests += 1

    def resize(self, width, height):
        self.width = width
        self.height = height
        self.handlers.emit(RESIZE, width, height)

    def paint(self, painter=None):
        painter = painter or RecordingPainter()
        self.handlers.emit(DRAW, painter)
        return painter
