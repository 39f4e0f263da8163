"""
Calendar Date Primitives

Gregorian date helpers used by the date-recognition engine: "today" in the
configured timezone, field-wise arithmetic, weekday lookup, week starts and
month/year lengths.

Month and year arithmetic goes through ``dateutil.relativedelta`` so that the
day of month is constrained to the target month (Jan 31 + 1 month is the last
day of February).
"""

from datetime import date, datetime
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.relativedelta import relativedelta

from quickdate.utils.config import get_config_value
from quickdate.utils.logger import get_logger

logger = get_logger(__name__)

WEEKDAYS = ["mon", "tue", "wed", "thu", "fri", "sat", "sun"]

WEEKDAY_NAMES = {
    "mon": "Monday",
    "tue": "Tuesday",
    "wed": "Wednesday",
    "thu": "Thursday",
    "fri": "Friday",
    "sat": "Saturday",
    "sun": "Sunday",
}

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

_DAYS_IN_MONTH = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


def today(timezone: Optional[str] = None) -> date:
    """
    Get the current local date.

    A pinned ``today`` in the configuration wins over the clock. Otherwise the
    date is taken in ``timezone`` (or the configured one), falling back to the
    system local date.

    Args:
        timezone: IANA timezone name

    Returns:
        The current date
    """
    pinned = get_config_value("today")
    if pinned:
        return date.fromisoformat(str(pinned))

    tz_name = timezone or get_config_value("timezone")
    if not tz_name:
        return date.today()

    try:
        return datetime.now(ZoneInfo(tz_name)).date()
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Invalid timezone '{tz_name}', using system local date")
        return date.today()


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return _DAYS_IN_MONTH[month - 1]


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def make_date(year: int, month: int, day: int) -> date:
    """Build a date, constraining ``day`` to the length of the month."""
    return date(year, month, min(day, days_in_month(month, year)))


def add(d: date, years: int = 0, months: int = 0, weeks: int = 0, days: int = 0) -> date:
    return d + relativedelta(years=years, months=months, weeks=weeks, days=days)


def subtract(d: date, years: int = 0, months: int = 0, weeks: int = 0, days: int = 0) -> date:
    return d - relativedelta(years=years, months=months, weeks=weeks, days=days)


def set_fields(d: date, year: Optional[int] = None, month: Optional[int] = None, day: Optional[int] = None) -> date:
    """Replace fields of ``d``; the day is constrained to the resulting month."""
    return d + relativedelta(year=year, month=month, day=day)


def compare(a: date, b: date) -> int:
    """Signed number of days from ``b`` to ``a``."""
    return (a - b).days


def day_of_week(d: date) -> str:
    return WEEKDAYS[d.weekday()]


def start_of_week(d: date, week_start: str = "mon") -> date:
    """
    Get the first day of the week containing ``d``.

    Args:
        d: Any date in the week
        week_start: The weekday the week starts on ("mon".."sun")

    Returns:
        The date of the week start
    """
    if week_start not in WEEKDAYS:
        raise ValueError(f"Unknown week start '{week_start}'")
    offset = (d.weekday() - WEEKDAYS.index(week_start)) % 7
    return subtract(d, days=offset)


def month_name(month: int) -> str:
    return MONTH_NAMES[month - 1]


def weekday_name(weekday: str) -> str:
    return WEEKDAY_NAMES[weekday]
