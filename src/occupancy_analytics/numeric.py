"""
Numeric Helpers
===============

Rounding used across all analytics outputs.

Outputs round half away from zero for positive values (2.5 -> 3), matching
the figures shown on existing dashboards, rather than Python's banker's
rounding.
"""

import math


def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Round ``value`` to ``ndigits`` decimals, ties rounding up.
    
    Args:
        value: Number to round
        ndigits: Decimal places to keep
        
    Returns:
        Rounded value (float)
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def round_to_int(value: float) -> int:
    """Round to the nearest integer, ties rounding up."""
    return int(math.floor(value + 0.5))

