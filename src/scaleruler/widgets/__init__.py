from .ruler_area import RulerArea
from .drawing_widget import DrawingWidget

__all__ = ['RulerArea', 'DrawingWidget']
