"""
Renderer

Turns a resolved ``ShowDate`` into a ``(left, right)`` pair of display
strings relative to today.

- relative: left is "3 days ago" / "in 2 weeks", right names the date.
- measure: left names the date, right is the distance measured in the
  requested unit, falling back to coarser units when it is too far away.
- plain: left is "March 3", right is the weekday or how long ago it was.
"""

from datetime import date
from typing import Optional, Tuple

from quickdate.calendar import dates
from quickdate.parsing.arithmetic import day_diff, month_diff_rough, week_diff_solid, year_diff_rough
from quickdate.parsing.models import Relative, ShowDate

# 99999 days is about 274 years, 999 weeks about 20, 999 months about 84
MAX_DAYS = 99999
MAX_DAY_YEARS = 274
MAX_WEEKS = 999
MAX_WEEK_YEARS = 20
MAX_MONTHS = 999
MAX_MONTH_YEARS = 84


def _plural(unit: str, amount: int) -> str:
    return f"{unit}s" if amount > 1 else unit


def _distance(amount: int, unit: str, past: bool, prefix: str = "") -> str:
    text = f"{prefix}{amount} {_plural(unit, amount)}"
    return f"{text} ago" if past else f"in {text}"


def _years_rough(amount: int, past: bool) -> str:
    if amount > 999:
        return "> 999 years ago" if past else "in > 999 years"
    return f"~ {amount} years ago" if past else f"in ~ {amount} years"


def _days(d: date, today: date) -> str:
    amount, past = day_diff(d, today)
    if amount == 0:
        return "Today"
    return _distance(amount, "day", past)


def weekday_label(d: date, weekday: Optional[str] = None) -> str:
    """Full weekday name of ``d``, or of ``weekday`` when it is forced."""
    return dates.weekday_name(weekday or dates.day_of_week(d))


def date_label(d: date, today: date, weekday: Optional[str] = None) -> str:
    """Weekday and short date, e.g. "Friday, Mar 7"; the year is added when it is not today's."""
    label = f"{weekday_label(d, weekday)}, {dates.month_name(d.month)[:3]} {d.day}"
    if d.year == today.year:
        return label
    return f"{label}, {d.year}"


def _show_relative(sd: ShowDate, today: date) -> Tuple[str, str]:
    if isinstance(sd.relative, Relative):
        amount, unit, past = sd.relative.amount, sd.relative.unit, sd.relative.past
    else:
        amount, past = day_diff(sd.date, today)
        unit = "day"

    left = _distance(amount, unit, past)
    if unit == "day" and amount < 7:
        return left, weekday_label(sd.date, sd.weekday)
    return left, date_label(sd.date, today, sd.weekday)


def _show_measure(sd: ShowDate, today: date) -> Tuple[str, str]:
    d = sd.date
    left = date_label(d, today, sd.weekday)
    years, years_past = year_diff_rough(d, today)

    if sd.measure == "day":
        if years <= MAX_DAY_YEARS and day_diff(d, today)[0] <= MAX_DAYS:
            return left, _days(d, today)

    elif sd.measure == "week":
        if years <= MAX_WEEK_YEARS:
            weeks, past, exact = week_diff_solid(d, today)
            if weeks == 0:
                return left, _days(d, today)
            if weeks <= MAX_WEEKS:
                return left, _distance(weeks, "week", past, "" if exact else "> ")

    elif sd.measure == "month":
        if years <= MAX_MONTH_YEARS:
            months, past = month_diff_rough(d, today)
            if months <= 1:
                return left, _days(d, today)
            if months <= MAX_MONTHS:
                return left, _distance(months, "month", past, "~ ")

    return left, _years_rough(years, years_past)


def _show_plain(sd: ShowDate, today: date) -> Tuple[str, str]:
    d = sd.date
    month = dates.month_name(d.month)
    if d.year == today.year:
        left = f"{month} {d.day}"
    else:
        left = f"{month[:3]} {d.day}, {d.year}"
    weekday = weekday_label(d, sd.weekday)

    years, years_past = year_diff_rough(d, today)
    if years > 0 and not years_past:
        return left, weekday
    if years >= 4:
        return left, _years_rough(years, years_past)

    months, months_past = month_diff_rough(d, today)
    if months_past and months >= 3:
        return left, _distance(months, "month", True, "~ ")

    days, days_past = day_diff(d, today)
    if not days_past:
        return left, weekday
    return left, _distance(days, "day", True)


def show(sd: ShowDate, today: date) -> Tuple[str, str]:
    """
    Render a candidate.

    Args:
        sd: The resolved date and its display context
        today: The reference date

    Returns:
        The (left, right) display strings
    """
    if sd.relative:
        return _show_relative(sd, today)
    if sd.measure:
        return _show_measure(sd, today)
    return _show_plain(sd, today)
