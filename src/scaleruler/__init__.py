"""Scaleruler public API."""

import logging

from .rulers import Orientation, Ruler, Layout, Tick, Viewport, select_interval, scale_to_range, InvalidRangeError, InvalidExtentError, RulerError
from .colors.modes import ColorMap
from .navigation_widget import NavigationWidget

# Importing the package never configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "Orientation",
    "Ruler",
    "Layout",
    "Tick",
    "Viewport",
    "select_interval",
    "scale_to_range",
    "RulerError",
    "InvalidRangeError",
    "InvalidExtentError",
    "ColorMap",
    "NavigationWidget",
]
