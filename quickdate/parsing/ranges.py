"""
Date Ranges

Turns recognised year/month/day parts into concrete dates and ranges, and
applies amount+duration shifts.
"""

import math
from datetime import date
from typing import List, Optional, Tuple

from quickdate.calendar import dates
from quickdate.parsing.extractors import parse_month_certain, parse_year, parse_ymd
from quickdate.parsing.models import AmountDuration, DateRange, OrdinalDuration, Span
from quickdate.parsing.segments import span
from quickdate.utils.config import get_config_value
from quickdate.utils.logger import get_logger

logger = get_logger(__name__)


def concrete_date(today: date, year: Optional[int] = None, month: Optional[int] = None, day: Optional[int] = None) -> date:
    """
    Pick the date meant by partial year/month/day parts.

    Without a year, a month is placed in the current year if it is no more
    than one month behind today, otherwise next year. A lone day is placed in
    the current month if it is still ahead, otherwise next month.

    Args:
        today: The reference date
        year: Optional year
        month: Optional month 1-12
        day: Optional day of month

    Returns:
        The concrete date
    """
    if month:
        day = day or 1
        if year:
            return dates.make_date(year, month, day)
        d = dates.set_fields(today, month=month, day=day)
        if month - today.month >= -1:
            return d
        return dates.add(d, years=1)

    # a day next to a bare year is ignored
    if year:
        return date(year, 1, 1)

    if day:
        d = dates.set_fields(today, day=day)
        if dates.compare(d, today) > 0:
            return d
        return dates.add(d, months=1)

    return today


def shift(d: date, amount: AmountDuration) -> date:
    """Move ``d`` by the summed terms of ``amount``, backwards when it is past."""
    total = {"years": 0, "months": 0, "weeks": 0, "days": 0}
    for term in amount.terms:
        total[f"{term.duration.value}s"] += term.amount.value
    if amount.past:
        return dates.subtract(d, **total)
    return dates.add(d, **total)


def weekday_in_range(weekday: str, start: date, unit: Optional[str] = None) -> Tuple[date, Optional[int]]:
    """
    First occurrence of ``weekday`` on or after ``start``.

    Args:
        weekday: "mon".."sun"
        start: The range start, or today when there is no range
        unit: The range unit, if any

    Returns:
        The first occurrence and, for week/month/year ranges, how many
        occurrences the range holds from there
    """
    n = dates.WEEKDAYS.index(weekday)
    k = start.weekday()
    first = dates.add(start, days=n - k if n >= k else n + 7 - k)

    if unit is None or unit == "day":
        return first, None
    if unit == "week":
        return first, 1

    if unit == "month":
        total = dates.days_in_month(first.month, first.year)
    else:
        total = dates.days_in_year(first.year)
    return first, math.ceil((total - first.day + 1) / 7)


def parse_range(text: str, segments: List[Span], today: date) -> Optional[DateRange]:
    """
    Find the first free segment naming a year, month or day.

    The range unit is ``day`` when a day was resolved, ``month`` when only a
    month was, and ``year`` otherwise.
    """
    for s, e in segments:
        part = text[s:e]
        year = parse_year(part)
        month_certain = parse_month_certain(part)
        ymd = parse_ymd(part, year=year, month_certain=month_certain)
        month = ymd.month if ymd else month_certain
        day = ymd.day if ymd else None

        if year or month or day:
            start = concrete_date(
                today,
                year.value if year else None,
                month.value if month else None,
                day.value if day else None,
            )
            unit = ("day" if day else "month") if month else "year"
            first, last = span(year, month, day)
            return DateRange(span=(first + s, last + s), unit=unit, start=start, year_specified=year is not None)
    return None


def parse_range_ordinal_duration(
    text: str, segments: List[Span], ordinal_duration: OrdinalDuration, today: date
) -> Optional[DateRange]:
    """
    Resolve phrases like "2nd week of march" or "3rd month 2027".

    The ordinal+duration must sit right next to a free segment holding a
    month or a year. Week ranges start at the configured week start of the
    month/year.
    """
    start, end = ordinal_duration.span
    ordinal = ordinal_duration.ordinal.value
    unit = ordinal_duration.duration.value
    if unit == "year":
        return None

    for s, e in segments:
        if e != start and s != end:
            continue
        part = text[s:e]
        month_certain = parse_month_certain(part)
        year = parse_year(part)

        # "2nd month of march" makes no sense; only a year can frame months
        month = None if unit == "month" else month_certain
        if month is None and year is None:
            continue

        base = span(month, year)
        covered = (s + base[0], end) if e == start else (start, s + base[1])

        d = concrete_date(today, year.value if year else None, month.value if month else None)
        try:
            if unit == "week":
                week_start = get_config_value("week_start", "mon")
                first = dates.add(dates.start_of_week(d, week_start), weeks=ordinal - 1)
            else:
                first = dates.add(d, **{f"{unit}s": ordinal - 1})
        except (OverflowError, ValueError) as e:
            logger.debug(f"Dropping {ordinal} {unit} range: {e}")
            return None

        return DateRange(span=covered, unit=unit, start=first, year_specified=year is not None)
    return None
