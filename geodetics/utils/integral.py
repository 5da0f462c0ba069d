"""Numerical integration helpers"""

__all__ = ['simpsons_method']

from typing import Callable

import numpy as np

from geodetics._const import DEFAULT_INTEGRATION_INTERVALS


def simpsons_method(
    function: Callable[[float], float],
    interval_start: float,
    interval_end: float,
    intervals: int = DEFAULT_INTEGRATION_INTERVALS,
) -> float:
    """
    Approximates the definite integral of a function using the composite
    Simpson's rule.

    Args:
        function:
            A scalar function of one variable. It is evaluated point by point,
            so it does not need to accept numpy arrays.

        interval_start:
            The lower bound of integration

        interval_end:
            The upper bound of integration. May be lower than interval_start,
            in which case the sign of the result flips.

        intervals:
            (Default 2) The number of sub-intervals; must be even and at least 2

    Returns:
        (float) the approximate integral
    """
    if function is None:
        raise ValueError('function must not be None')

    if intervals < 2 or intervals % 2 == 1:
        raise ValueError(f'intervals must be a positive even number, got {intervals}')

    if interval_start == interval_end:
        return 0.

    points = np.linspace(interval_start, interval_end, intervals + 1)
    values = np.fromiter((function(float(x)) for x in points), dtype=float, count=intervals + 1)

    # Simpson weights: 1, 4, 2, 4, ..., 2, 4, 1
    weights = np.full(intervals + 1, 2.)
    weights[1::2] = 4.
    weights[0] = weights[-1] = 1.

    step = (interval_end - interval_start) / intervals
    return float(np.dot(weights, values) * step / 3)
