from .intervals import InvalidExtentError, InvalidRangeError, RulerError, scale_to_range, select_interval
from .ruler import Layout, Orientation, Ruler, Tick
from .viewport import Viewport
