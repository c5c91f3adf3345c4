#!/usr/bin/env python
from operator import attrgetter
from .solvers import solve_any_order
from .weighted_interval import WeightedInterval


def _getter(field):
    if callable(field):
        return field
    return attrgetter(field)


def optimal_subset(items, weight="length", start="start", end="end"):
    """
    Select the set of non-overlapping items that maximizes the weight
    function, returned in chronological order.

    start and end may be attribute names or functions of an item. weight may
    also be an attribute name or a function, or one of these policies:

    length -- Prefers the items covering the most of the domain. (default)
    first -- Prefers the items that appear first in the input. An earlier
        item is prefered over any number of later items that overlap it.
    count -- Prefers the largest number of items.

    >>> from collections import namedtuple
    >>> Match = namedtuple('Match', ['start', 'end', 'label'])
    >>> matches = [Match(0, 3, 'one'),
    ...            Match(4, 7, 'two'),
    ...            Match(3, 13, 'long_span'),
    ...            Match(8, 13, 'three')]
    >>> [match.label for match in optimal_subset(matches)]
    ['one', 'long_span']
    >>> [match.label for match in optimal_subset(matches, weight="count")]
    ['one', 'two', 'three']
    """
    items = list(items)
    get_start = _getter(start)
    get_end = _getter(end)

    if weight == "length":
        def prefunc(idx, item):
            return get_end(item) - get_start(item)
    elif weight == "first":
        def prefunc(idx, item):
            # Using an exponent makes it so that a first item will be prefered
            # over multiple non-overlapping later items.
            return 2 ** (len(items) - idx)
    elif weight == "count":
        def prefunc(idx, item):
            return 1
    else:
        get_weight = _getter(weight)

        def prefunc(idx, item):
            return get_weight(item)

    solution = solve_any_order([
        WeightedInterval(
            start=get_start(item),
            end=get_end(item),
            weight=prefunc(idx, item),
            corresponding_object=item)
        for idx, item in enumerate(items)])
    return [interval.corresponding_object for interval in reversed(solution)]
