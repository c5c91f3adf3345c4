#!/usr/bin/env python
"""
Print the optimal set of intervals listed in a file.

    python -m wisp intervals.txt --chronological
"""
import argparse
import logging
import sys
from .parsing import parse_intervals
from .solvers import solve_any_order
from .utils import total_weight

logging.basicConfig(level=logging.ERROR, format='%(asctime)s %(message)s')
logger = logging.getLogger(__name__)


def format_value(value):
    if hasattr(value, 'isoformat'):
        return value.isoformat()
    return str(value)


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='wisp',
        description="Select the non-overlapping (start, end, weight) intervals "
                    "with the largest total weight.")
    parser.add_argument(
        "file", nargs='?', type=argparse.FileType('r'), default=sys.stdin,
        help="File of intervals. Standard input is read if it is omitted.")
    parser.add_argument(
        "--chronological", dest='chronological', action='store_true',
        help="Print the intervals earliest first instead of latest first.")
    parser.add_argument(
        "--verbose", dest='verbose', action='store_true')
    parser.set_defaults(chronological=False, verbose=False)
    args = parser.parse_args(argv)
    if args.verbose:
        logging.getLogger('wisp').setLevel(logging.INFO)
    with args.file:
        text = args.file.read()
    try:
        intervals = parse_intervals(text)
    except ValueError as e:
        print(e, file=sys.stderr)
        return 1
    logger.info('%s intervals read' % len(intervals))
    try:
        solution = solve_any_order(intervals)
    except TypeError as e:
        # Numbers mixed with dates, or naive dates mixed with aware ones.
        print("Interval bounds cannot be compared: %s" % e, file=sys.stderr)
        return 1
    if args.chronological:
        solution.reverse()
    for interval in solution:
        print(" ".join(format_value(value) for value in interval.to_tuple()))
    total = total_weight(solution)
    print("total", format_value(total if total is not None else 0))
    return 0


if __name__ == '__main__':
    sys.exit(main())
