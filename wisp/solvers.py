#!/usr/bin/env python
"""
Solvers for the weighted interval scheduling problem. Both run in
O(n log n) time in the number of intervals.

Intervals are any objects with start, end and weight attributes. An
interval that ends where another starts does not overlap it.
"""
from collections.abc import Sequence
from operator import attrgetter
import logging
from . import config
from .buffers import memo_buffer, solution_buffer
from .utils import add_weights, final_compatible, is_sorted_by_end

logger = logging.getLogger(__name__)

# Among equal ends, starts ascending put a zero length interval after the
# intervals it touches, so end <= start in sorted order means no overlap.
by_end = attrgetter('end', 'start')


def _included_value(intervals, memoization, index):
    """
    The best weight available if intervals[index] is selected, along with
    the index of its compatible predecessor.
    """
    last = final_compatible(intervals, index)
    if last is None:
        return intervals[index].weight, last
    return add_weights(intervals[index].weight, memoization[last]), last


def _check_preconditions(intervals, memoization):
    if len(memoization) < len(intervals):
        raise ValueError(
            "The memoization buffer holds %s weights but there are %s intervals" %
            (len(memoization), len(intervals)))
    if not is_sorted_by_end(intervals):
        raise ValueError("The intervals must be sorted by end")


def _fill_and_reconstruct(intervals, memoization, solution):
    """
    Fill the memoization buffer then append the optimal intervals to the
    solution, latest first.

    intervals must be non-empty and sorted by end, and memoization[0] must
    already hold the weight of the first interval.
    """
    for index in range(1, len(intervals)):
        included_value, _ = _included_value(intervals, memoization, index)
        excluded_value = memoization[index - 1]
        memoization[index] = max(included_value, excluded_value)

    # Walk backwards, selecting an interval only if it strictly improves on
    # the best weight without it. Ties leave the later interval out.
    cursor = len(intervals) - 1
    while cursor is not None:
        included_value, last = _included_value(intervals, memoization, cursor)
        if cursor == 0 or included_value > memoization[cursor - 1]:
            solution.append(intervals[cursor])
            cursor = last
        else:
            cursor -= 1


def solve_presorted(intervals, memoization, solution, strict=None):
    """
    Find the optimal intervals using buffers owned by the caller, so they
    can be reused across many calls.

    The intervals must be sorted by end. If they are not the result is
    meaningless. memoization must have room for at least as many weights as
    there are intervals; its contents do not need to be cleared between
    calls. The optimal intervals are appended to solution, latest first.
    Clear it first if it should only hold this result.

    If strict is True, or strict is None and the WISP_STRICT environment
    variable is set, the preconditions are checked and a ValueError is
    raised when they do not hold.

    >>> from .weighted_interval import WeightedInterval
    >>> intervals = [WeightedInterval(1, 4, 5),
    ...              WeightedInterval(0, 6, 3),
    ...              WeightedInterval(5, 9, 7)]
    >>> memoization = [0] * 3
    >>> solution = []
    >>> solve_presorted(intervals, memoization, solution)
    >>> solution
    [WeightedInterval(5, 9, 7), WeightedInterval(1, 4, 5)]
    >>> memoization
    [5, 5, 12]
    """
    if not isinstance(intervals, Sequence):
        intervals = list(intervals)
    if len(intervals) == 0:
        return
    if strict is None:
        strict = config.WISP_STRICT
    if strict:
        _check_preconditions(intervals, memoization)
    memoization[0] = intervals[0].weight
    selected_before = len(solution)
    _fill_and_reconstruct(intervals, memoization, solution)
    logger.info('%s of %s intervals selected' % (len(solution) - selected_before, len(intervals)))


def solve_any_order(intervals):
    """
    Find the optimal intervals. The intervals can be in any order.

    This copies and sorts the input and allocates new buffers every time it
    is called. Use solve_presorted to avoid that.

    The result is ordered latest first. Reverse it for chronological order.
    """
    intervals = sorted(intervals, key=by_end)
    if len(intervals) == 0:
        return []
    memoization = memo_buffer(len(intervals))
    memoization[0] = intervals[0].weight
    optimal_solution = solution_buffer()
    _fill_and_reconstruct(intervals, memoization, optimal_solution)
    logger.info('%s of %s intervals selected' % (len(optimal_solution), len(intervals)))
    return optimal_solution


def solve_batch(problems, dtype=None):
    """
    Solve a series of problems, allocating one memoization buffer and one
    solution buffer for all of them. Each problem's intervals can be in any
    order. A list of the optimal intervals, latest first, is yielded for
    each problem.

    If a numpy dtype is given the memoization buffer is a numpy array of
    that type, otherwise it is a list.

    >>> from .weighted_interval import WeightedInterval
    >>> problems = [[WeightedInterval(0, 2, 1), WeightedInterval(1, 3, 2)],
    ...             [],
    ...             [WeightedInterval(0, 1, 1), WeightedInterval(1, 2, 1)]]
    >>> list(solve_batch(problems))
    [[WeightedInterval(1, 3, 2)], [], [WeightedInterval(1, 2, 1), WeightedInterval(0, 1, 1)]]
    """
    problems = list(problems)
    max_interval_count = max([len(problem) for problem in problems] or [0])
    memoization = memo_buffer(max_interval_count, dtype=dtype)
    solution = solution_buffer()
    logger.info('solving %s problems with a buffer for %s intervals' %
                (len(problems), max_interval_count))
    for intervals in problems:
        del solution[:]
        solve_presorted(sorted(intervals, key=by_end), memoization, solution)
        yield list(solution)
