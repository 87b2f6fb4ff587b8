import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Optional, Sequence, Tuple

import numpy as np

from scaleruler.rulers.intervals import (
    MIN_SPACE_MAJOR_TICKS,
    MIN_SPACE_SUBTICKS,
    SUBTICK_SEGMENTS,
    VALID_INTERVALS,
    RulerError,
    scale_to_range,
    select_interval,
)
from scaleruler.surfaces.base import DRAW, RESIZE, RulerPainter, RulerSurface

logger = logging.getLogger(__name__)


class Orientation(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class Layout:
    """Interval between major ticks and the number of pixels it occupies."""
    major_interval: float
    segment_screen_size: int


@dataclass(frozen=True)
class Tick:
    """One tick mark. Majors (depth 0) carry their domain value and label; minors only a position."""
    position: float
    depth: int
    length: float
    value: Optional[float] = None
    label: Optional[str] = None

    @property
    def is_major(self) -> bool:
        return self.depth == 0


class Ruler:
    """
    Ruler drawn along one edge of a scrollable canvas.

    The ruler owns its range and derived layout. It is attached to at most one surface at a
    time, from which it receives "draw" and "resize" notifications. Invalid ranges and empty
    surfaces never raise out of the ruler: they simply leave nothing to draw.
    """

    # Drawing properties
    LINE_WIDTH = 1.0
    LINE_COORD_OFFSET = 0.5   # centers 1px lines on the pixel grid
    MAJOR_TICK_LENGTH = 0.8   # fraction of the ruler breadth
    LINE_MULTIPLIER = 0.5     # each sub-tick level is this much shorter than the level above
    LABEL_OFFSET = 4
    LABEL_ALIGN = 0.7
    FONT_SIZE = 11

    def __init__(self, orientation: Orientation, surface: Optional[RulerSurface] = None, min_space_major_ticks: float = MIN_SPACE_MAJOR_TICKS, min_space_subticks: float = MIN_SPACE_SUBTICKS, subtick_segments: Sequence[int] = SUBTICK_SEGMENTS, valid_intervals: Sequence[float] = VALID_INTERVALS) -> None:
        """Create ruler. The layout is computed once a surface is attached."""
        if not isinstance(orientation, Orientation):
            raise TypeError(f"orientation must be an Orientation, not {orientation!r}")
        self._orientation = orientation
        self.min_space_major_ticks = min_space_major_ticks
        self.min_space_subticks = min_space_subticks
        self.subtick_segments: Tuple[int, ...] = tuple(subtick_segments)
        self.valid_intervals: Tuple[float, ...] = tuple(valid_intervals)

        self.background_color: Any = (0.8, 0.8, 0.8)
        self.line_color: Any = (0.0, 0.0, 0.0)

        self._lower = -10.0
        self._upper = 10.0
        self._width = 0
        self._height = 0
        self._surface: Optional[RulerSurface] = None
        self._layout: Optional[Layout] = None
        self._drawable = False

        if surface is not None:
            self.attach_surface(surface)

    @classmethod
    def create(cls, orientation: Orientation, surface: Optional[RulerSurface] = None) -> "Ruler":
        return cls(orientation, surface)

    @property
    def orientation(self) -> Orientation:
        return self._orientation

    @property
    def surface(self) -> Optional[RulerSurface]:
        return self._surface

    @property
    def layout(self) -> Optional[Layout]:
        """Last successfully computed layout. Kept when a later range turns out invalid."""
        return self._layout

    @property
    def is_drawable(self) -> bool:
        return self._surface is not None and self._drawable

    def get_lower(self) -> float:
        return self._lower

    def get_upper(self) -> float:
        return self._upper

    def length(self) -> int:
        """Pixel size along the drawing axis."""
        return self._width if self._orientation == Orientation.HORIZONTAL else self._height

    def breadth(self) -> int:
        """Pixel size across the drawing axis."""
        return self._height if self._orientation == Orientation.HORIZONTAL else self._width

    # ---- State changes ----

    def attach_surface(self, surface: RulerSurface) -> None:
        """Draw to surface from now on. Handlers on the previously attached surface are removed first."""
        self.detach_surface()
        self._width, self._height = surface.extent()
        surface.connect_handler(DRAW, self.draw, owner=self)
        surface.connect_handler(RESIZE, self._on_resize, owner=self)
        self._surface = surface
        logger.debug("%s ruler attached to %r (%dx%d)", self._orientation.value, surface, self._width, self._height)
        self._update()

    def detach_surface(self) -> None:
        if self._surface is None:
            return
        removed = self._surface.disconnect_owner(self)
        logger.debug("%s ruler detached from %r, %d handler(s) removed", self._orientation.value, self._surface, removed)
        self._surface = None

    def set_range(self, lower: float, upper: float) -> None:
        """Set the range to display and request a redraw. Invalid ranges draw nothing."""
        self._lower = float(lower)
        self._upper = float(upper)
        if self._surface is None:
            # Kept until a surface is attached
            return
        self._update()
        # The surface does not know the range changed
        self._surface.queue_draw()

    def _on_resize(self, width: int, height: int) -> None:
        self._width = width
        self._height = height
        self._update()

    def _update(self) -> None:
        # Stays False unless the new range and size give a layout
        self._drawable = False
        try:
            interval, spacing = select_interval(
                self._lower, self._upper, self.length(),
                min_spacing=self.min_space_major_ticks,
                valid_intervals=self.valid_intervals,
            )
        except RulerError as e:
            logger.debug("Not drawing %s ruler: %s", self._orientation.value, e)
            return
        self._layout = Layout(interval, spacing)
        self._drawable = True

    # ---- Tick layout ----

    def scale(self, value: float) -> float:
        """Pixel position of a domain value along the drawing axis."""
        return scale_to_range(value, self._lower, self._upper, 0.0, self.length())

    def compute_ticks(self) -> List[Tick]:
        """All ticks for the current range and size, walking outward from zero."""
        if not self.is_drawable:
            return []

        ticks: List[Tick] = []
        line_length = self.MAJOR_TICK_LENGTH * self.breadth()

        # Positive side first, [max(0, lower), upper] from lower to upper
        if self._upper > 0:
            self._walk(max(0.0, self._lower), self._upper, True, line_length, ticks)
        # Then the negative side, [lower, min(0, upper)] from upper to lower
        if self._lower < 0:
            self._walk(self._lower, min(0.0, self._upper), False, line_length, ticks, skip_zero=self._upper > 0)
        return ticks

    def _walk(self, lower: float, upper: float, lower_to_upper: bool, line_length: float, ticks: List[Tick], skip_zero: bool = False) -> None:
        interval = self._layout.major_interval
        segment = self._layout.segment_screen_size

        # Sub-ticks stay on their own side of zero and inside the drawing area
        clip = (self.scale(lower), self.scale(upper))
        clip = (max(0.0, clip[0]), min(float(self.length()), clip[1]))

        # Multiples of the interval, including the one just outside the side so its
        # partially visible segment gets sub-ticks too
        if lower_to_upper:
            steps = np.arange(math.floor(lower / interval), math.floor(upper / interval) + 1)
        else:
            steps = np.arange(math.ceil(upper / interval), math.ceil(lower / interval) - 1, -1)

        for step in steps:
            t = float(step) * interval
            s = self.scale(t)
            if lower <= t <= upper and not (skip_zero and t == 0):
                ticks.append(Tick(s, 0, line_length, t, str(math.floor(t))))
            if lower_to_upper:
                self._sub_ticks(s, s + segment, 0, self.LINE_MULTIPLIER * line_length, lower_to_upper, clip, ticks)
            else:
                self._sub_ticks(s - segment, s, 0, self.LINE_MULTIPLIER * line_length, lower_to_upper, clip, ticks)

    def _sub_ticks(self, lower: float, upper: float, depth: int, line_length: float, lower_to_upper: bool, clip: Tuple[float, float], ticks: List[Tick]) -> None:
        """Split the pixel segment [lower, upper] into subtick_segments[depth] parts, recursing per part."""
        if depth >= len(self.subtick_segments):
            return
        if upper < clip[0] or lower > clip[1]:
            return

        segments = self.subtick_segments[depth]
        interval = abs(upper - lower) / segments
        if interval < self.min_space_subticks:
            return

        bounds = np.linspace(lower, upper, segments + 1)
        if not lower_to_upper:
            bounds = bounds[::-1]

        for i in range(segments):
            s = float(bounds[i])
            if i > 0 and clip[0] <= s <= clip[1]:
                ticks.append(Tick(s, depth + 1, line_length))
            a, b = sorted((s, float(bounds[i + 1])))
            self._sub_ticks(a, b, depth + 1, self.LINE_MULTIPLIER * line_length, lower_to_upper, clip, ticks)

    # ---- Drawing ----

    def draw(self, painter: RulerPainter) -> None:
        """Draw background, outline, ticks and labels. Draws nothing at all when the range is invalid."""
        if not self.is_drawable:
            return

        width, height = self._width, self._height
        offset = self.LINE_COORD_OFFSET
        painter.fill_background(0, 0, width, height, self.background_color)
        painter.set_color(self.line_color)

        # Outline across both ends and a thicker baseline along the tick side
        if self._orientation == Orientation.HORIZONTAL:
            painter.draw_line(offset, 0, offset, height, self.LINE_WIDTH)
            painter.draw_line(width - offset, 0, width - offset, height, self.LINE_WIDTH)
            painter.draw_line(0, height - offset, width, height - offset, 2 * self.LINE_WIDTH)
        else:
            painter.draw_line(0, offset, width, offset, self.LINE_WIDTH)
            painter.draw_line(0, height - offset, width, height - offset, self.LINE_WIDTH)
            painter.draw_line(width - offset, 0, width - offset, height, 2 * self.LINE_WIDTH)

        painter.set_font_size(self.FONT_SIZE)
        for tick in self.compute_ticks():
            self._draw_tick(painter, tick)

    def _draw_tick(self, painter: RulerPainter, tick: Tick) -> None:
        width, height = self._width, self._height
        pos = tick.position - self.LINE_COORD_OFFSET
        if self._orientation == Orientation.HORIZONTAL:
            painter.draw_line(pos, height, pos, height - tick.length, self.LINE_WIDTH)
        else:
            painter.draw_line(width, pos, width - tick.length, pos, self.LINE_WIDTH)

        if tick.label is None:
            return
        extents = painter.text_extents(tick.label)
        # Unmeasurable or too wide for the segment: keep the line, drop the label
        if extents is None or extents.x_advance >= self._layout.segment_screen_size:
            return

        across = self.LABEL_ALIGN * tick.length + self.LINE_MULTIPLIER * extents.y_bearing
        if self._orientation == Orientation.HORIZONTAL:
            painter.draw_text(tick.label, tick.position + self.LABEL_OFFSET, height - across)
        else:
            painter.draw_text(tick.label, width - across, tick.position - self.LABEL_OFFSET, rotation=-90.0)
