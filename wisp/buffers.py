#!/usr/bin/env python
"""
Buffers for solve_presorted. Allocate them once and reuse them across calls.
"""
import numpy as np


def memo_buffer(size, dtype=None):
    """
    Create a memoization buffer with room for size intervals.

    Without a dtype this is a list, which can hold any weight type,
    including tuples. With a dtype it is a numpy array, and sums that do not
    fit the dtype wrap around.

    >>> memo_buffer(3)
    [0, 0, 0]
    >>> memo_buffer(2, dtype='uint8')
    array([0, 0], dtype=uint8)
    """
    if dtype is None:
        return [0] * size
    return np.zeros(size, dtype=dtype)


def solution_buffer():
    return []
