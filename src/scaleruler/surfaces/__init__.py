from .base import HandlerRegistry, RulerPainter, RulerSurface, TextExtents
