from typing import Literal, Optional
from PySide6.QtGui import QColor


ObjectColorName = Literal["surface-base", "surface-lower", "ruler-base", "border", "border-intense", "text-base", "text-secondary"]


class ColorMap:

    # Neutral color level map for light & dark mode
    _neutral_levels: dict[str, list[QColor]] = {
        "neutral-0": [QColor(255, 255, 255), QColor(0, 0, 0)],
        "neutral-50": [QColor(246, 247, 249), QColor(20, 24, 31)],
        "neutral-100": [QColor(237, 240, 242), QColor(31, 38, 51)],
        "neutral-200": [QColor(225, 229, 234), QColor(39, 49, 63)],
        "neutral-300": [QColor(211, 219, 228), QColor(47, 59, 76)],
        "neutral-400": [QColor(195, 206, 215), QColor(66, 82, 102)],
        "neutral-700": [QColor(96, 110, 128), QColor(182, 191, 201)],
        "neutral-900": [QColor(24, 29, 37), QColor(237, 239, 243)],
    }

    _object_levels: dict[str, list[str]] = {
        "surface-base": ["neutral-0", "neutral-50"],
        "surface-lower": ["neutral-100", "neutral-0"],
        "ruler-base": ["neutral-300", "neutral-100"],
        "border": ["neutral-200", "neutral-200"],
        "border-intense": ["neutral-400", "neutral-400"],
        "text-base": ["neutral-900", "neutral-900"],
        "text-secondary": ["neutral-700", "neutral-700"],
    }

    def __init__(self, darkmode: bool = True) -> None:
        """Create color map. darkmode=True for dark theme, False for light theme."""
        self.darkmode: bool = darkmode

    def get_object_color(self, name: ObjectColorName, darkmode: Optional[bool] = None) -> QColor:
        """Get UI color (surface, ruler, border, text). Uses instance darkmode if not specified."""
        level = ColorMap._object_levels[name][self._mode_loc(darkmode)]
        return ColorMap._neutral_levels[level][self._mode_loc(darkmode)]

    def _mode_loc(self, darkmode: Optional[bool]) -> int:
        if darkmode is None:
            darkmode = self.darkmode
        return 1 if darkmode else 0
