import math
import random
import sys
import unittest

from scaleruler.rulers.intervals import (
    MIN_SPACE_MAJOR_TICKS,
    InvalidExtentError,
    InvalidRangeError,
    RulerError,
    candidate_intervals,
    interval_drawn_size,
    scale_to_range,
    select_interval,
)


def interval(lower, upper, pixel_length):
    return select_interval(lower, upper, pixel_length)[0]


class TestSelectInterval(unittest.TestCase):

    def test_all_positive_range(self):
        self.assertEqual(interval(236, 877, 540), 100)
        self.assertEqual(interval(236, 877, 1920), 50)

    def test_all_negative_range(self):
        self.assertEqual(interval(-791, -312, 540), 100)
        self.assertEqual(interval(-791, -312, 1920), 25)

    def test_range_across_zero(self):
        self.assertEqual(interval(-513, 756, 540), 250)
        self.assertEqual(interval(-513, 756, 1920), 100)

    def test_fractional_range(self):
        self.assertEqual(interval(-12.56, 27.82, 540), 10)
        self.assertEqual(interval(-12.56, 27.82, 1920), 2)

    def test_large_range(self):
        self.assertEqual(interval(-4.2303576974e8, 3.2434878432e8, 540), 2.5e8)
        self.assertEqual(interval(-4.2303576974e8, 3.2434878432e8, 1920), 5e7)

    def test_unit_range(self):
        self.assertEqual(interval(0, 1, 540), 1)
        self.assertEqual(interval(0, 1, 1920), 1)

    def test_range_below_one_uses_smallest_interval(self):
        self.assertEqual(interval(0, 0.1, 540), 1)
        self.assertEqual(interval(0, 0.1, 1920), 1)

    def test_returns_rounded_spacing(self):
        self.assertEqual(select_interval(236, 877, 540), (100, 84))
        self.assertEqual(select_interval(-513, 756, 540), (250, 106))

    def test_smaller_min_spacing(self):
        self.assertEqual(select_interval(236, 877, 1920, min_spacing=50), (25, 75))
        self.assertEqual(select_interval(-791, -312, 1920, min_spacing=50), (25, 100))

    def test_custom_candidates(self):
        self.assertEqual(interval_drawn_size(50, 0, 100, 100), 50)
        self.assertEqual(select_interval(0, 100, 100, valid_intervals=(1, 5)), (100, 100))

    def test_empty_range_is_invalid(self):
        for pixel_length in (0, 540, 1920):
            with self.assertRaises(InvalidRangeError):
                select_interval(0, 0, pixel_length)

    def test_inverted_range_is_invalid(self):
        for pixel_length in (540, 1920):
            with self.assertRaises(InvalidRangeError):
                select_interval(0, -100, pixel_length)

    def test_non_finite_range_is_invalid(self):
        with self.assertRaises(InvalidRangeError):
            select_interval(math.nan, 1, 540)
        with self.assertRaises(InvalidRangeError):
            select_interval(0, math.inf, 540)

    def test_overflowing_width_is_invalid(self):
        with self.assertRaises(InvalidRangeError):
            select_interval(-1e308, 1e308, 540)

    def test_subnormal_width_is_invalid(self):
        with self.assertRaises(InvalidRangeError):
            select_interval(0.0, 5e-324, 540)

    def test_no_representable_interval_is_invalid(self):
        # Would need an interval of about 1.4e310
        with self.assertRaises(InvalidRangeError):
            select_interval(0.0, 1.7e308, 1)

    def test_widest_representable_range(self):
        chosen, spacing = select_interval(0.0, 1e307, 540)
        self.assertLessEqual(chosen, sys.float_info.max)
        self.assertAlmostEqual(chosen / 2.5e307, 1.0)
        self.assertEqual(spacing, 135)

    def test_empty_surface_is_invalid(self):
        with self.assertRaises(InvalidExtentError):
            select_interval(0, 1, 0)
        with self.assertRaises(InvalidExtentError):
            select_interval(0, 1, -20)

    def test_errors_are_value_errors(self):
        self.assertTrue(issubclass(InvalidRangeError, RulerError))
        self.assertTrue(issubclass(InvalidExtentError, RulerError))
        self.assertTrue(issubclass(RulerError, ValueError))

    def test_first_candidate_meeting_the_spacing(self):
        rng = random.Random(1234)
        for _ in range(300):
            lower = rng.uniform(-1e6, 1e6)
            upper = lower + 10 ** rng.uniform(-3, 9)
            pixel_length = rng.randint(1, 4000)

            chosen, spacing = select_interval(lower, upper, pixel_length)

            self.assertEqual(spacing, interval_drawn_size(chosen, lower, upper, pixel_length))
            self.assertGreaterEqual(spacing, MIN_SPACE_MAJOR_TICKS)
            for candidate in candidate_intervals():
                if candidate == chosen:
                    break
                self.assertLess(interval_drawn_size(candidate, lower, upper, pixel_length), MIN_SPACE_MAJOR_TICKS)


class TestCandidateIntervals(unittest.TestCase):

    def test_enumeration_order(self):
        generator = candidate_intervals()
        first = [next(generator) for _ in range(11)]
        self.assertEqual(first, [1, 2, 5, 10, 25, 10, 20, 50, 100, 250, 100])


class TestScaleToRange(unittest.TestCase):

    def test_maps_bounds(self):
        self.assertEqual(scale_to_range(-50, -50, 50, 0, 1000), 0)
        self.assertEqual(scale_to_range(0, -50, 50, 0, 1000), 500)
        self.assertEqual(scale_to_range(50, -50, 50, 0, 1000), 1000)

    def test_rounds_half_away_from_zero(self):
        self.assertEqual(scale_to_range(0.25, 0, 1, 0, 2), 1)
        self.assertEqual(scale_to_range(-0.25, 0, 1, 0, 2), -1)

    def test_round_trip_within_one_pixel(self):
        lower, upper, pixels = -12.56, 27.82, 540
        unit = (upper - lower) / pixels
        for x in (-12.56, -3.3, 0, 0.01, 7.77, 19.5, 27.82):
            s = scale_to_range(x, lower, upper, 0, pixels)
            back = lower + s * (upper - lower) / pixels
            self.assertLessEqual(abs(back - x), unit)

    def test_empty_source_range(self):
        with self.assertRaises(InvalidRangeError):
            scale_to_range(1, 3, 3, 0, 100)


if __name__ == '__main__':
    unittest.main()
