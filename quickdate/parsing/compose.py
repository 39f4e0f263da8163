"""
Segmentation & Composition

Decides how the entities found in a piece of text combine into dates. The
cascade below short-circuits at the first rule that applies; when none of the
combining rules do, every entity found contributes its own branch of
alternatives.

The result is a list whose elements are either a single ``ShowDate`` or a
branch: a list of mutually exclusive ``ShowDate`` readings.
"""

from datetime import date
from typing import List, Union

from quickdate.calendar import dates
from quickdate.parsing.extractors import (
    parse_amount_duration,
    parse_maybe_ymd,
    parse_ordinal_duration,
    parse_ordinal_weekday,
    parse_sole_amount,
    parse_weekday_partial,
)
from quickdate.parsing.models import Relative, ShowDate
from quickdate.parsing.ranges import (
    concrete_date,
    parse_range,
    parse_range_ordinal_duration,
    shift,
    weekday_in_range,
)
from quickdate.parsing.segments import in_order, segment
from quickdate.utils.logger import get_logger

logger = get_logger(__name__)

Branch = Union[ShowDate, List[ShowDate]]


def process(text: str, today: date) -> List[Branch]:
    """
    Resolve the dates ``text`` may refer to.

    Candidates whose date would fall outside the supported calendar are
    dropped instead of raising.

    Args:
        text: Free text typed by the user
        today: The reference date

    Returns:
        Candidates and branches of alternative candidates; empty when nothing
        date-like was found
    """
    try:
        return _cascade(text, today)
    except (OverflowError, ValueError) as e:
        logger.warning(f"Dropping candidates for '{text}': {e}")
        return []


def _cascade(text: str, today: date) -> List[Branch]:
    ordinal_weekday = parse_ordinal_weekday(text)
    amount = parse_amount_duration(text)
    ordinal_duration = parse_ordinal_duration(text)
    segments = segment(text, ordinal_weekday, amount, ordinal_duration)

    range_ord_dur = None
    if ordinal_duration:
        range_ord_dur = parse_range_ordinal_duration(text, segments, ordinal_duration, today)
    rng = range_ord_dur

    if range_ord_dur is None:
        segments = segment(text, ordinal_weekday, amount)
        rng = parse_range(text, segments, today)

    # "2nd friday of march", "2027 34th friday"
    if rng and rng.unit in ("month", "year") and ordinal_weekday and ordinal_weekday.ordinal:
        ordinal = ordinal_weekday.ordinal.value
        weekday = ordinal_weekday.weekday.value
        first, most = weekday_in_range(weekday, rng.start, rng.unit)
        if ordinal <= most:
            d = dates.add(first, weeks=ordinal - 1)
            beside = amount and not (
                in_order(ordinal_weekday, amount, rng) or in_order(rng, amount, ordinal_weekday)
            )
            if beside:
                logger.debug("nth weekday in range shifted by amount")
                return [ShowDate(date=shift(d, amount), measure="day")]
            # a plainly named month needs no distance
            measure = None if range_ord_dur is None and rng.unit == "month" else "week"
            logger.debug("nth weekday in range")
            return [ShowDate(date=d, measure=measure, weekday=weekday)]

    weekday = ordinal_weekday.weekday if ordinal_weekday else None

    # the ordinal did not select a weekday, so it may be a day of month
    if ordinal_weekday and ordinal_weekday.ordinal and range_ord_dur is None:
        segments = segment(text, weekday, amount)
        rng = parse_range(text, segments, today)

    if weekday and amount:
        if rng is None or rng.unit == "day":
            base = rng.start if rng else today
            if rng:
                shift_first = (
                    in_order(weekday, amount, rng)
                    or in_order(rng, amount, weekday)
                    or in_order(amount, rng, weekday)
                )
            else:
                shift_first = in_order(amount, weekday)
            start = shift(base, amount) if shift_first else base
            first, _ = weekday_in_range(weekday.value, start)
            if shift_first:
                logger.debug("weekday after shifted date")
                return [ShowDate(date=first, weekday=weekday.value, measure="day")]
            logger.debug("weekday shifted by amount")
            return [ShowDate(date=shift(first, amount), measure="day")]

        if rng.unit == "week":
            beside = not (in_order(weekday, amount, rng) or in_order(rng, amount, weekday))
            if beside:
                first, _ = weekday_in_range(weekday.value, rng.start, rng.unit)
                logger.debug("weekday in week shifted by amount")
                return [ShowDate(date=shift(first, amount), measure="day")]

    if rng and weekday:
        first, most = weekday_in_range(weekday.value, rng.start, rng.unit)
        measure = None if range_ord_dur is None and rng.unit == "month" else "week"
        found = [ShowDate(date=first, measure=measure, weekday=weekday.value)]
        if rng.unit == "month":
            for i in range(1, most):
                found.append(ShowDate(date=dates.add(first, weeks=i), measure=measure, weekday=weekday.value))
        logger.debug(f"weekday occurrences in {rng.unit} range: {len(found)}")
        return found

    if rng and rng.unit == "day" and amount:
        logger.debug("day shifted by amount")
        return [ShowDate(date=shift(rng.start, amount), measure="day")]

    # "2nd week of march": every day of that week
    if range_ord_dur and range_ord_dur.unit == "week":
        first = shift(range_ord_dur.start, amount) if amount else range_ord_dur.start
        measure = "day" if amount else None
        week = [dates.add(first, days=i) for i in range(7)]
        logger.debug("days of nth week")
        return [ShowDate(date=d, measure=measure, weekday=dates.day_of_week(d)) for d in week]

    parallel: List[Branch] = []

    if weekday:
        first, _ = weekday_in_range(weekday.value, today)
        parallel.append([
            ShowDate(date=dates.add(first, weeks=i), weekday=weekday.value, measure="week")
            for i in range(3)
        ])

    if amount:
        if len(amount.terms) == 1:
            term = amount.terms[0]
            relative = Relative(amount=term.amount.value, unit=term.duration.value, past=amount.past)
        else:
            relative = "day"
        parallel.append(ShowDate(date=shift(today, amount), relative=relative))

        # "5 m" may still become "5 mar" or "5 may"
        single = len(amount.terms) == 1
        if not amount.past and single and amount.terms[0].duration.label == "m" and amount.span[1] == len(text):
            segments = segment(text, weekday)

    last = segments[-1] if segments else None
    last_at_end = last is not None and last[1] == len(text)

    if rng:
        # a lone trailing year may still be being typed
        year_at_end = last_at_end and rng.unit == "year" and rng.span[0] >= last[0]
        if not year_at_end:
            measure = rng.unit if range_ord_dur else None
            found = [ShowDate(date=rng.start, measure=measure)]
            repeats = rng.unit == "month" or (rng.unit == "day" and range_ord_dur is None)
            if repeats and not rng.year_specified:
                for i in (1, 2):
                    found.append(ShowDate(date=dates.add(rng.start, years=i), measure=measure))
            parallel.append(found)
            return parallel

    if not last_at_end:
        return parallel

    rest = text[last[0]:]

    if not weekday and not amount:
        partial = parse_weekday_partial(rest)
        if partial:
            found = [
                ShowDate(date=weekday_in_range(c.value, today)[0], weekday=c.value, measure="week")
                for c in partial.candidates
            ]
            if len(found) > 1:
                parallel.extend(found)
            else:
                first = found[0].date
                for i in (1, 2):
                    found.append(ShowDate(date=dates.add(first, weeks=i), measure="week"))
                parallel.append(found)
        else:
            sole = parse_sole_amount(rest)
            if sole:
                parallel.append([
                    ShowDate(
                        date=dates.add(today, **{f"{unit}s": sole.value}),
                        relative=Relative(amount=sole.value, unit=unit),
                    )
                    for unit in ("day", "week", "month")
                ])

    maybe = parse_maybe_ymd(rest)
    if maybe and (maybe.months or maybe.year):
        year = maybe.year.value if maybe.year else None
        day = maybe.day.value if maybe.day else None
        months = [c.value for c in maybe.months] if maybe.months else [None]
        found = [ShowDate(date=concrete_date(today, year, month, day)) for month in months]
        if len(found) > 1:
            parallel.extend(found)
        else:
            first = found[0].date
            for i in (1, 2):
                found.append(ShowDate(date=dates.add(first, years=i)))
            parallel.append(found)
    elif maybe and maybe.day:
        start = concrete_date(today, day=maybe.day.value)
        parallel.append([ShowDate(date=dates.add(start, months=i)) for i in range(3)])

    return parallel
