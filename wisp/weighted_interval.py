#!/usr/bin/env python
from .interval import Interval, Weighted


class WeightedInterval(Interval, Weighted):
    """
    A weighted interval. Any object with start, end and weight attributes
    can be given to the solvers in its place.

    The corresponding_object can hold whatever the interval was created for.
    It is ignored when comparing intervals.

    >>> WeightedInterval.from_tuple((1, 4, 5))
    WeightedInterval(1, 4, 5)
    >>> WeightedInterval(1, 4, 5) == WeightedInterval(1, 4, 5, 'payload')
    True
    """
    __slots__ = ["start", "end", "weight", "corresponding_object"]

    def __init__(self, start, end, weight, corresponding_object=None):
        self.start = start
        self.end = end
        self.weight = weight
        self.corresponding_object = corresponding_object

    @classmethod
    def from_tuple(cls, triple):
        start, end, weight = triple
        return cls(start, end, weight)

    @classmethod
    def coerce(cls, obj):
        """
        Convert a (start, end, weight) tuple or an object with start, end
        and weight attributes into a WeightedInterval. The original object
        is kept as the corresponding_object.
        """
        if isinstance(obj, cls):
            return obj
        if isinstance(obj, tuple):
            if len(obj) != 3:
                raise TypeError("Interval tuples must be (start, end, weight), got: " + repr(obj))
            return cls(obj[0], obj[1], obj[2], obj)
        if not all(hasattr(obj, attr) for attr in ("start", "end", "weight")):
            raise TypeError("Cannot use %r as an interval, it needs start, end and weight" % (obj,))
        return cls(obj.start, obj.end, obj.weight, obj)

    def to_tuple(self):
        return (self.start, self.end, self.weight)

    def __eq__(self, other):
        if not isinstance(other, WeightedInterval):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    def __hash__(self):
        return hash(self.to_tuple())

    def __repr__(self):
        return 'WeightedInterval({0!r}, {1!r}, {2!r})'.format(self.start, self.end, self.weight)
