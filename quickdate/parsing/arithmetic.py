"""
Date difference helpers shared by composition and rendering.

Each helper returns ``(amount, past)`` where ``amount`` is non-negative and
``past`` tells whether ``a`` lies before ``b``.
"""

import math
from datetime import date
from typing import Tuple

from quickdate.calendar import dates


def _round(x: float) -> int:
    # half rounds up, as opposed to Python's banker's rounding
    return math.floor(x + 0.5)


def _signed(v: int) -> Tuple[int, bool]:
    return (-v, True) if v < 0 else (v, False)


def year_diff_rough(a: date, b: date) -> Tuple[int, bool]:
    return _signed(_round(a.year - b.year + (a.month - b.month) / 12))


def month_diff_rough(a: date, b: date) -> Tuple[int, bool]:
    return _signed(_round((a.year - b.year) * 12 + (a.month - b.month) + (a.day - b.day) / 30))


def week_diff_solid(a: date, b: date) -> Tuple[int, bool, bool]:
    """Whole weeks between the dates, plus whether the distance is an exact number of weeks."""
    n = dates.compare(a, b)
    distance = abs(n)
    return distance // 7, n < 0, distance % 7 == 0


def day_diff(a: date, b: date) -> Tuple[int, bool]:
    n = dates.compare(a, b)
    return abs(n), n < 0
