"""Module for miscellaneous multi-use functions"""

__all__ = ['normalize_angle', 'round_half_up', 'sin2', 'cos2']

import math


def round_half_up(value: float, precision) -> float:
    """
    Rounds numbers to the nearest whole, where a value exactly between the two nearest
    wholes is rounded to the higher whole.

    Args:
        value:
            The float value to be rounded
        precision:
            The precision to round the float value to

    """
    mod = value + 10 ** -(precision + 12)

    return round(mod, precision)


def normalize_angle(value: float, period: float = 2 * math.pi, start: float = 0.) -> float:
    """
    Wraps an angular value into the half-open range [start, start + period).

    Args:
        value:
            The angle to wrap

        period:
            (Default 2*pi) The length of one full turn, in the unit of `value`

        start:
            (Default 0.) The lower bound of the target range

    Returns:
        float
    """
    wrapped = (value - start) % period + start
    # Floating point modulo can land exactly on the open upper bound
    if wrapped >= start + period:
        return start

    return wrapped


def sin2(value: float) -> float:
    """Square of the sine"""
    return math.sin(value) ** 2


def cos2(value: float) -> float:
    """Square of the cosine"""
    return math.cos(value) ** 2
