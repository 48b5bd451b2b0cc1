"""
Rounding helpers shared by every calculator.

All derived figures round half away from zero on the positive axis
(``floor(x * 10**digits + 0.5)``), never Python's banker's rounding.
Percentages are computed as exact fractions so that ties such as
23/80 = 28.75% are not lost to binary floating point.
"""

import math
from fractions import Fraction

from studyhub.domain.constants import PERCENT_DIGITS

_HALF = Fraction(1, 2)


def _half_up(value: Fraction, digits: int) -> float:
    scale = 10**digits
    return math.floor(value * scale + _HALF) / scale


def round_half_up(value: float, digits: int = PERCENT_DIGITS) -> float:
    """
    Round ``value`` to ``digits`` decimals, ties going up.

    ``value`` is taken at its decimal repr, so ``12.25`` is a tie.

    >>> round_half_up(66.66666)
    66.7
    >>> round_half_up(0.25, 1)
    0.3
    """
    return _half_up(Fraction(repr(value)), digits)


def round_half_up_int(value: float) -> int:
    return math.floor(value + 0.5)


def percent(part: int | float, whole: int | float, cap: float | None = None) -> float:
    """
    Return ``part / whole`` as a percentage with one decimal, 0.0 if ``whole`` is 0.

    With ``cap``, the exact ratio is clamped before rounding.

    >>> percent(23, 80)
    28.8
    """
    if whole == 0:
        return 0.0
    ratio = Fraction(part) * 100 / Fraction(whole)
    if cap is not None:
        ratio = min(ratio, Fraction(cap))
    return _half_up(ratio, PERCENT_DIGITS)
