#!/usr/bin/env python
"""Tests for WeightedInterval and the interval capabilities"""
import datetime
import unittest
from wisp.interval import Interval, Weighted
from wisp.weighted_interval import WeightedInterval


class WeightedIntervalTest(unittest.TestCase):

    def test_from_tuple(self):
        interval = WeightedInterval.from_tuple((1, 4, 5))
        self.assertEqual((interval.start, interval.end, interval.weight), (1, 4, 5))
        self.assertIsNone(interval.corresponding_object)

    def test_equality_ignores_corresponding_object(self):
        self.assertEqual(WeightedInterval(1, 4, 5, 'a'), WeightedInterval(1, 4, 5, 'b'))
        self.assertNotEqual(WeightedInterval(1, 4, 5), WeightedInterval(1, 4, 6))
        self.assertNotEqual(WeightedInterval(1, 4, 5), (1, 4, 5))

    def test_hashable(self):
        intervals = {WeightedInterval(1, 4, 5), WeightedInterval(1, 4, 5), WeightedInterval(0, 1, 2)}
        self.assertEqual(len(intervals), 2)

    def test_repr(self):
        self.assertEqual(repr(WeightedInterval(-123, 123, 11)), 'WeightedInterval(-123, 123, 11)')

    def test_coerce_tuple(self):
        interval = WeightedInterval.coerce((0, 6, 3))
        self.assertEqual(interval.to_tuple(), (0, 6, 3))
        self.assertEqual(interval.corresponding_object, (0, 6, 3))

    def test_coerce_object(self):
        class Shift(object):
            start = 9
            end = 17
            weight = 8

        shift = Shift()
        interval = WeightedInterval.coerce(shift)
        self.assertEqual(interval.to_tuple(), (9, 17, 8))
        self.assertIs(interval.corresponding_object, shift)

    def test_coerce_weighted_interval(self):
        interval = WeightedInterval(0, 1, 1)
        self.assertIs(WeightedInterval.coerce(interval), interval)

    def test_coerce_invalid(self):
        with self.assertRaises(TypeError):
            WeightedInterval.coerce((0, 6))
        with self.assertRaises(TypeError):
            WeightedInterval.coerce("0 6 3")

    def test_capabilities(self):
        interval = WeightedInterval(0, 6, 3)
        self.assertIsInstance(interval, Interval)
        self.assertIsInstance(interval, Weighted)

    def test_duration(self):
        self.assertEqual(WeightedInterval(3, 8, 8).duration(), 5)
        day = WeightedInterval(datetime.datetime(2020, 1, 1),
                               datetime.datetime(2020, 1, 2), 1)
        self.assertEqual(day.duration(), datetime.timedelta(days=1))

    def test_overlaps(self):
        interval = WeightedInterval(1, 4, 5)
        self.assertTrue(interval.overlaps(WeightedInterval(3, 5, 5)))
        self.assertFalse(interval.overlaps(WeightedInterval(4, 7, 3)))

    def test_no_instance_dict(self):
        with self.assertRaises(AttributeError):
            WeightedInterval(0, 1, 1).label = 'label'


if __name__ == '__main__':
    unittest.main()
