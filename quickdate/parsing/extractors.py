"""
Entity Extractors

Independent recognisers that each scan the whole input and return the first
entity they find together with its span. None of them raise on unrecognised
input; they return ``None`` instead.
"""

from typing import List, Optional, Sequence

from quickdate.parsing.models import (
    AmountDuration,
    AmountTerm,
    Candidate,
    MaybeYearMonthDay,
    OrdinalDuration,
    OrdinalWeekday,
    PartialMatch,
    Token,
    YearMonthDay,
)
from quickdate.parsing.patterns import (
    CARDINAL_NAMES,
    DURATION_NAMES,
    MONTH_NAMES,
    MONTH_PREFIXES,
    ORDINAL_NAMES,
    ORDINALS,
    PAST_INDICATORS,
    WEEKDAY_NAMES,
    WEEKDAY_PREFIXES,
    Pattern,
    collect,
    compile_pattern,
    join,
    matched_groups,
)
from quickdate.parsing.segments import span

MAX_AMOUNT_TERMS = 6

AMOUNT_LIMITS = {
    "day": 9999,
    "week": 999,
    "month": 999,
    "year": 99,
}

_DAY_CERTAIN = ORDINAL_NAMES + [
    Pattern("1-31th", r"([1-9]|[1-2][0-9]|3[01])(?:st|nd|rd|th)", derive=lambda m: int(m.group(1))),
    # 1-12 is left to the day-or-month reading
    Pattern("13-31", r"(1[3-9]|2[0-9]|3[01])", derive=lambda m: int(m.group(1))),
]

# up to 9999; per-unit limits are applied afterwards
_TERM_AMOUNTS = CARDINAL_NAMES + [
    Pattern(r"\d+", r"0*(0|[1-9]\d{0,3})", derive=lambda m: int(m.group(0))),
]

_SOLE_AMOUNTS = CARDINAL_NAMES + [
    Pattern(r"\d+", r"0*([1-9]\d{0,2})", derive=lambda m: int(m.group(0))),
]

_YEAR = compile_pattern(r"\b(2\d\d\d|19\d\d)\b")
_DAY_OR_MONTH = compile_pattern(r"\b(0?[1-9]|10|11|12)\b")
_DAY_CERTAIN_RE = compile_pattern(rf"\b(?:{join(_DAY_CERTAIN)})\b")
_MONTH_CERTAIN_RE = compile_pattern(rf"\b(?:{join(MONTH_NAMES)})\b")
_MONTH_PREFIX_RE = compile_pattern(rf"\b(?:{join(MONTH_PREFIXES)})$")
_WEEKDAY_PREFIX_RE = compile_pattern(rf"^\s*(?:{join(WEEKDAY_PREFIXES)})$")
_ORDINAL_WEEKDAY_RE = compile_pattern(rf"\b(?:(?:{join(ORDINALS)})\s+)?(?:{join(WEEKDAY_NAMES)})\b")
_ORDINAL_DURATION_RE = compile_pattern(rf"\b(?:{join(ORDINALS)})\s+(?:{join(DURATION_NAMES)})\b")

_AMOUNT_TERM = (
    rf"\b(?:(?:{join(CARDINAL_NAMES)})\s|{join(_TERM_AMOUNTS[-1:])})\s*(?:{join(DURATION_NAMES)})\b"
)
_FIRST_TERM_RE = compile_pattern(_AMOUNT_TERM)
_NEXT_TERM_RE = compile_pattern(rf"^(?:\s*|\s*and\s*){_AMOUNT_TERM}")
_PAST_SUFFIX_RE = compile_pattern(rf"^\s*\b(?:{join(PAST_INDICATORS)})\b")
_SOLE_AMOUNT_RE = compile_pattern(rf"^\s*(?:{join(_SOLE_AMOUNTS)})\s*$")


def _first_token(regex, patterns: Sequence[Pattern], text: str) -> Optional[Token]:
    m = regex.search(text)
    if m is None:
        return None
    i = matched_groups(m)[0]
    found = collect(m.group(i), patterns, i - 1)[0]
    return Token(span=m.span(), label=found.label, value=found.value)


def _partial(regex, patterns: Sequence[Pattern], text: str) -> Optional[PartialMatch]:
    m = regex.search(text)
    if m is None:
        return None
    i = matched_groups(m)[0]
    return PartialMatch(span=m.span(), candidates=collect(m.group(i), patterns, i - 1, multiple=True))


def parse_year(text: str) -> Optional[Token]:
    m = _YEAR.search(text)
    if m is None:
        return None
    return Token(span=m.span(), label="20xx", value=int(m.group(1)))


def parse_day_certain(text: str) -> Optional[Token]:
    """Day of month that cannot be a month: ordinal words, "3rd", or bare 13-31."""
    return _first_token(_DAY_CERTAIN_RE, _DAY_CERTAIN, text)


def parse_day_or_month(text: str) -> Optional[Token]:
    m = _DAY_OR_MONTH.search(text)
    if m is None:
        return None
    return Token(span=m.span(), label="0?1-12", value=int(m.group(1)))


def parse_month_certain(text: str) -> Optional[Token]:
    return _first_token(_MONTH_CERTAIN_RE, MONTH_NAMES, text)


def parse_month_partial(text: str) -> Optional[PartialMatch]:
    """
    One or two letters at the very end of the input that begin month names.

    "j" yields january, june and july; "ma" yields march and may.
    """
    return _partial(_MONTH_PREFIX_RE, MONTH_PREFIXES, text)


def parse_weekday_partial(text: str) -> Optional[PartialMatch]:
    """Input consisting only of one or two letters that begin weekday names."""
    return _partial(_WEEKDAY_PREFIX_RE, WEEKDAY_PREFIXES, text)


def parse_ordinal_weekday(text: str) -> Optional[OrdinalWeekday]:
    """
    Recognise "2nd friday" or a bare "friday".

    Returns:
        The weekday with its optional ordinal, or None
    """
    m = _ORDINAL_WEEKDAY_RE.search(text)
    if m is None:
        return None

    groups = matched_groups(m)
    if len(groups) == 2:
        i, j = groups
        ordinal = collect(m.group(i), ORDINALS, i - 1)[0]
        weekday = collect(m.group(j), WEEKDAY_NAMES, j - 1 - len(ORDINALS))[0]
        return OrdinalWeekday(
            span=m.span(),
            ordinal=Token(span=m.span(i), **ordinal.model_dump()),
            weekday=Token(span=m.span(j), **weekday.model_dump()),
        )

    (j,) = groups
    weekday = collect(m.group(j), WEEKDAY_NAMES, j - 1 - len(ORDINALS))[0]
    return OrdinalWeekday(span=m.span(), weekday=Token(span=m.span(j), **weekday.model_dump()))


def parse_ordinal_duration(text: str) -> Optional[OrdinalDuration]:
    """Recognise an ordinal immediately followed by a unit, as in "3rd week"."""
    m = _ORDINAL_DURATION_RE.search(text)
    if m is None:
        return None

    i, j = matched_groups(m)
    ordinal = collect(m.group(i), ORDINALS, i - 1)[0]
    duration = collect(m.group(j), DURATION_NAMES, j - 1 - len(ORDINALS))[0]
    return OrdinalDuration(
        span=m.span(),
        ordinal=Token(span=m.span(i), **ordinal.model_dump()),
        duration=Token(span=m.span(j), **duration.model_dump()),
    )


def parse_amount_duration(text: str) -> Optional[AmountDuration]:
    """
    Recognise a sequence such as "2 weeks and 3 days ago".

    At most six terms are consumed. Consumption stops at the first term
    whose amount exceeds the unit's limit (9999 days, 999 weeks or months,
    99 years); the terms before it are kept. A trailing "ago", "before" or
    "earlier" marks the sequence as past.

    Args:
        text: The input text

    Returns:
        The sequence with its span, or None if no term was consumed
    """
    terms: List[AmountTerm] = []
    start: Optional[int] = None
    end = 0

    while len(terms) < MAX_AMOUNT_TERMS:
        rest = text[end:]
        if rest == "":
            break

        m = (_FIRST_TERM_RE if start is None else _NEXT_TERM_RE).search(rest)
        if m is None:
            break

        i, j = matched_groups(m)
        amount = collect(m.group(i), _TERM_AMOUNTS, i - 1)[0]
        duration = collect(m.group(j), DURATION_NAMES, j - 1 - len(_TERM_AMOUNTS))[0]
        if amount.value > AMOUNT_LIMITS[duration.value]:
            break

        if start is None:
            start = m.start()
        terms.append(AmountTerm(amount=amount, duration=duration))
        end += m.end()

    if start is None:
        return None

    suffix = _PAST_SUFFIX_RE.search(text[end:])
    if suffix:
        end += suffix.end()

    return AmountDuration(span=(start, end), terms=terms, past=suffix is not None)


def parse_sole_amount(text: str) -> Optional[Candidate]:
    """Text that is nothing but a number from 1 to 999 or a cardinal word."""
    m = _SOLE_AMOUNT_RE.search(text)
    if m is None:
        return None
    i = matched_groups(m)[0]
    return collect(m.group(i), _SOLE_AMOUNTS, i - 1)[0]


def parse_ymd(
    text: str,
    year: Optional[Token] = None,
    month_certain: Optional[Token] = None,
    day_certain: Optional[Token] = None,
    day_or_month: Optional[Token] = None,
) -> Optional[YearMonthDay]:
    """
    Resolve a month and a day, with an optional year, from ``text``.

    Already extracted tokens may be passed in; missing ones are extracted.
    The first applicable reading wins:

    1. a month name with any day ("march 3", "3rd of march")
    2. a certain day with a bare 1-12 number, which is the month ("13 4")
    3. two bare 1-12 numbers: with a year before both they read month-day
       ("2026 3 4" is March 4), otherwise day-month ("3 4" is April 3). A
       year between the two numbers is left unresolved.

    Returns:
        The resolved date parts with their covering span, or None
    """
    if year is None:
        year = parse_year(text)
    if month_certain is None:
        month_certain = parse_month_certain(text)
    if day_certain is None:
        day_certain = parse_day_certain(text)
    if day_or_month is None:
        day_or_month = parse_day_or_month(text)

    day = day_certain if day_certain is not None else day_or_month
    if month_certain and day:
        return YearMonthDay(span=span(year, month_certain, day), year=year, month=month_certain, day=day)

    if day_certain and day_or_month:
        return YearMonthDay(span=span(year, day_certain, day_or_month), year=year, month=day_or_month, day=day_certain)

    if day_or_month is None:
        return None

    offset = day_or_month.span[1]
    second = parse_day_or_month(text[offset:])
    if second is None:
        return None
    second = second.model_copy(update={"span": (second.span[0] + offset, second.span[1] + offset)})

    if year and day_or_month.span[0] < year.span[0] < second.span[0]:
        return None

    if year and year.span[0] < second.span[0]:
        month, day = day_or_month, second
    else:
        month, day = second, day_or_month
    return YearMonthDay(span=span(year, day_or_month, second), year=year, month=month, day=day)


def parse_maybe_ymd(text: str) -> Optional[MaybeYearMonthDay]:
    """
    Best-effort reading of trailing text that may be partially typed.

    A one or two letter month prefix at the end widens to every month it may
    begin, keeping any year and day found before it.
    """
    year = parse_year(text)
    day_or_month = parse_day_or_month(text)
    day = parse_day_certain(text) or day_or_month

    month_partial = parse_month_partial(text)
    if month_partial:
        return MaybeYearMonthDay(year=year, months=month_partial.candidates, day=day)

    if year:
        return MaybeYearMonthDay(year=year, months=[day_or_month] if day_or_month else None)

    if day:
        return MaybeYearMonthDay(day=day)
    return None
