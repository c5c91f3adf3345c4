#!/usr/bin/env python
"""
Read intervals written as (start, end, weight) triples.

Bounds may be numbers or ISO 8601 dates and times. Triples can be separated
by whitespace, commas or line breaks, and # starts a comment.
"""
import pyparsing as pypar
from dateutil.parser import isoparse
from .utils import parse_number
from .weighted_interval import WeightedInterval


number = pypar.Regex(r"[+-]?(\d+\.\d*|\.\d+|\d+)([eE][+-]?\d+)?")
number.set_parse_action(lambda tokens: parse_number(tokens[0]))
timestamp = pypar.Regex(
    r"\d{4}-\d{2}-\d{2}(T\d{2}(:\d{2}(:\d{2}(\.\d+)?)?)?)?(Z|[+-]\d{2}(:?\d{2})?)?")
timestamp.set_parse_action(lambda tokens: isoparse(tokens[0]))
# Dates have to be tried first, numbers would match their year.
bound = timestamp | number
comma = pypar.Suppress(",")
interval = (pypar.Suppress("(") + bound + comma + bound + comma + number +
            pypar.Suppress(")"))
interval.set_parse_action(lambda tokens: WeightedInterval(tokens[0], tokens[1], tokens[2]))
interval_list = pypar.ZeroOrMore(interval + pypar.Optional(comma))
interval_list.ignore(pypar.python_style_comment)


def parse_intervals(text):
    """
    Parse a list of WeightedIntervals from text.

    >>> parse_intervals("(0, 6, 3), (1, 4, 5)  # two intervals")
    [WeightedInterval(0, 6, 3), WeightedInterval(1, 4, 5)]
    >>> parse_intervals("(2020-01-01, 2020-01-03T12:00, 1.5)")
    [WeightedInterval(datetime.datetime(2020, 1, 1, 0, 0), datetime.datetime(2020, 1, 3, 12, 0), 1.5)]
    """
    try:
        return list(interval_list.parse_string(text, parse_all=True))
    except pypar.ParseException as e:
        raise ValueError("Could not parse interval at line %s, column %s:\n%s" %
                         (e.lineno, e.col, e.line)) from e
