"""
Solvers for the weighted interval scheduling problem.

>>> from wisp import solve_any_order, WeightedInterval
>>> solve_any_order([WeightedInterval(0, 6, 3),
...                  WeightedInterval(1, 4, 5),
...                  WeightedInterval(5, 9, 7)])
[WeightedInterval(5, 9, 7), WeightedInterval(1, 4, 5)]
"""
from .version import __version__  # noqa: F401
from .interval import Interval, Weighted  # noqa: F401
from .weighted_interval import WeightedInterval  # noqa: F401
from .solvers import solve_presorted, solve_any_order, solve_batch  # noqa: F401
from .select import optimal_subset  # noqa: F401
