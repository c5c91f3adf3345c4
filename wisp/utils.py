#!/usr/bin/env python
"""Helpers shared by the solvers."""


def parse_number(num, default=None):
    try:
        return int(num)
    except ValueError:
        try:
            return float(num)
        except ValueError:
            return default


def add_weights(weight_a, weight_b):
    """
    Add two weights. Tuple weights are added element-wise so they can be used
    to express secondary objectives.

    >>> add_weights(2, 3)
    5
    >>> add_weights((1, 2), (3, 4))
    (4, 6)
    """
    if isinstance(weight_a, tuple):
        return tuple(map(sum, zip(weight_a, weight_b)))
    return weight_a + weight_b


def total_weight(intervals):
    """
    The combined weight of the intervals, or None if there are none.

    >>> from .weighted_interval import WeightedInterval
    >>> total_weight([WeightedInterval(0, 1, 2), WeightedInterval(1, 4, 5)])
    7
    """
    total = None
    for interval in intervals:
        if total is None:
            total = interval.weight
        else:
            total = add_weights(total, interval.weight)
    return total


def overlaps(interval_a, interval_b):
    """
    Return True if the intervals share more than a boundary.

    >>> from .weighted_interval import WeightedInterval
    >>> overlaps(WeightedInterval(0, 4, 1), WeightedInterval(3, 5, 1))
    True
    >>> overlaps(WeightedInterval(0, 4, 1), WeightedInterval(4, 5, 1))
    False
    """
    return (interval_a.start < interval_b.end and
            interval_b.start < interval_a.end)


def is_sorted_by_end(intervals):
    return all(a.end <= b.end for a, b in zip(intervals, intervals[1:]))


def final_compatible(intervals, index):
    """
    Find the index of the last interval that ends at or before the start of
    intervals[index]. The intervals must be sorted by end. Returns None when
    there is no such interval.

    >>> from .weighted_interval import WeightedInterval
    >>> intervals = [WeightedInterval(0, 1, 2),
    ...              WeightedInterval(1, 4, 5),
    ...              WeightedInterval(3, 5, 5),
    ...              WeightedInterval(5, 9, 7)]
    >>> final_compatible(intervals, 3)
    2
    >>> final_compatible(intervals, 2)
    0
    >>> final_compatible(intervals, 0) is None
    True
    """
    if index == 0:
        return None
    low = 0
    high = index - 1
    target = intervals[index].start
    while low < high:
        # Round up so low always moves forward.
        mid = low + (high - low + 1) // 2
        if intervals[mid].end <= target:
            low = mid
        else:
            high = mid - 1
    if intervals[low].end > target:
        return None
    return low
