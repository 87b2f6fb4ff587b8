"""Major tick interval selection and value-to-pixel mapping."""

import logging
import math
import sys
from itertools import count
from typing import Iterator, Sequence, Tuple

logger = logging.getLogger(__name__)

# Leading digits of the intervals allowed between major ticks. Each is scaled by INTERVAL_BASE ** n, n >= 0.
VALID_INTERVALS: Tuple[float, ...] = (1, 2, 5, 10, 25)
INTERVAL_BASE = 10

# Minimum pixel distance between two major ticks. Over 1920px, (-513, 756) must reject 50 (76px);
# over 540px, (236, 877) must accept 100 (84px). Anything in (76, 84] keeps both.
MIN_SPACE_MAJOR_TICKS = 80

# Minimum pixel distance between two sub-ticks
MIN_SPACE_SUBTICKS = 5

# Each major segment is split into 5 parts and each of those into 2, space permitting
SUBTICK_SEGMENTS: Tuple[int, ...] = (5, 2)


class RulerError(ValueError):
    """Base class for ruler layouts that cannot be computed."""


class InvalidRangeError(RulerError):
    """Raised when the range to display is empty, inverted or not finite."""

    def __init__(self, lower: float, upper: float) -> None:
        super().__init__(f"Invalid ruler range [{lower}, {upper}]")
        self.lower = lower
        self.upper = upper


class InvalidExtentError(RulerError):
    """Raised when the pixel length of the ruler is not a positive number."""

    def __init__(self, pixel_length: float) -> None:
        super().__init__(f"Invalid ruler length {pixel_length}px")
        self.pixel_length = pixel_length


def round_half_away(x: float) -> float:
    """Round to the nearest integer, ties away from zero."""
    return math.copysign(math.floor(abs(x) + 0.5), x)


def scale_to_range(x: float, src_lower: float, src_upper: float, dst_lower: float, dst_upper: float) -> float:
    """Map x from [src_lower, src_upper] to [dst_lower, dst_upper], rounding the offset to whole pixels."""
    src_size = src_upper - src_lower
    if src_size == 0:
        raise InvalidRangeError(src_lower, src_upper)
    scale = (dst_upper - dst_lower) / src_size
    return dst_lower + round_half_away(scale * (x - src_lower))


def interval_drawn_size(interval: float, lower: float, upper: float, pixel_length: float) -> int:
    """Pixel size of one interval when [lower, upper] is drawn over pixel_length pixels."""
    return int(scale_to_range(interval, 0.0, upper - lower, 0.0, pixel_length))


def candidate_intervals(valid_intervals: Sequence[float] = VALID_INTERVALS) -> Iterator[float]:
    """Yield every candidate * 10**n, smallest power first and candidates in list order within a power."""
    for n in count():
        scale = INTERVAL_BASE ** n
        for candidate in valid_intervals:
            yield candidate * scale


def select_interval(lower: float, upper: float, pixel_length: float, *, min_spacing: float = MIN_SPACE_MAJOR_TICKS, valid_intervals: Sequence[float] = VALID_INTERVALS) -> Tuple[float, int]:
    """
    Pick the interval between major ticks for [lower, upper] drawn over pixel_length pixels.

    Returns (interval, pixel_spacing) for the first candidate whose drawn size is at least
    min_spacing pixels. Raises InvalidRangeError when upper <= lower, when the range is too
    wide or too narrow to be measured in floats, or when no representable interval is wide
    enough. Raises InvalidExtentError when pixel_length is not positive.
    """
    if not (math.isfinite(lower) and math.isfinite(upper)) or upper <= lower:
        raise InvalidRangeError(lower, upper)
    if not math.isfinite(pixel_length) or pixel_length <= 0:
        raise InvalidExtentError(pixel_length)
    if not valid_intervals or min(valid_intervals) <= 0:
        raise ValueError("valid_intervals must hold positive numbers")

    width = upper - lower
    # e.g. (-1e308, 1e308) overflows, (0, 5e-324) has no finite pixel scale
    if not math.isfinite(width) or not math.isfinite(pixel_length / width):
        raise InvalidRangeError(lower, upper)

    try:
        for interval in candidate_intervals(valid_intervals):
            if interval > sys.float_info.max:
                break
            spacing = interval_drawn_size(interval, lower, upper, pixel_length)
            if spacing >= min_spacing:
                logger.debug("Interval %s (%dpx) for [%s, %s] over %spx", interval, spacing, lower, upper, pixel_length)
                return interval, spacing
    except OverflowError as e:
        raise InvalidRangeError(lower, upper) from e
    raise InvalidRangeError(lower, upper)
