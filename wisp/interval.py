#!/usr/bin/env python
"""
The capabilities the solvers consume.

The solvers never check for these classes. Any object with start and end
attributes is an interval, and any object with a weight attribute is
weighted. Subclassing them only adds the helper methods.
"""
from . import utils


class Interval(object):
    """
    Something with start and end bounds over an ordered domain.
    Subclasses must provide start and end.
    """
    __slots__ = ()

    def duration(self):
        return self.end - self.start

    def overlaps(self, other):
        """
        Return True if the other interval shares more than a boundary with
        this one.
        """
        return utils.overlaps(self, other)


class Weighted(object):
    """
    Something with a weight. Weights must be ordered and support addition.
    Subclasses must provide weight.
    """
    __slots__ = ()
