"""
Numeric helpers shared by the synthesizer, scorers and aggregators.
"""

import math


def round_half_up(value: float) -> int:
    """
    Round to the nearest integer, halves rounding towards +infinity.

    Python's built-in round() uses banker's rounding; every score in this
    package uses floor(x + 0.5) instead so that 72.5 -> 73 and -30.5 -> -30.
    """
    return int(math.floor(value + 0.5))


def round_to_tenth(value: float) -> float:
    """Round half-up to one decimal place."""
    return round_half_up(value * 10) / 10


def clamp(value: float, lower: float, upper: float) -> float:
    """Clamp value into [lower, upper]."""
    return max(lower, min(upper, value))
