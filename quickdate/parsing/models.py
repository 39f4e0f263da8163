"""
Parsing Models Module

This module defines the entities recognised in free text and the candidates
produced from them. All of them live for a single ``parse`` call.
"""

import datetime
from typing import Any, List, Optional, Tuple, Union

from pydantic import BaseModel

Span = Tuple[int, int]

DURATIONS = ("day", "week", "month", "year")


class Candidate(BaseModel):
    """
    A value recognised by a pattern table.

    ``label`` names the pattern entry that produced the value.
    """
    value: Any
    label: Optional[str] = None


class Token(Candidate):
    """
    A recognised value together with its half-open character span.
    """
    span: Span


class PartialMatch(BaseModel):
    """
    An ambiguous prefix (e.g. "ma" for march/may) and every value it may begin.
    """
    span: Span
    candidates: List[Candidate]


class OrdinalWeekday(BaseModel):
    """
    A weekday, optionally preceded by an ordinal ("2nd friday", "friday").
    """
    span: Span
    ordinal: Optional[Token] = None
    weekday: Token


class OrdinalDuration(BaseModel):
    """
    An ordinal followed by a duration unit ("3rd week", "second month").
    """
    span: Span
    ordinal: Token
    duration: Token


class AmountTerm(BaseModel):
    amount: Candidate
    duration: Candidate


class AmountDuration(BaseModel):
    """
    A sequence of "amount unit" terms with an optional past indicator.

    ``past`` is set by a trailing "ago", "before" or "earlier".
    """
    span: Span
    terms: List[AmountTerm]
    past: bool = False


class YearMonthDay(BaseModel):
    """
    A resolved month and day with an optional year.
    """
    span: Span
    year: Optional[Token] = None
    month: Token
    day: Token


class MaybeYearMonthDay(BaseModel):
    """
    A best-effort reading of trailing text that may still be being typed.
    """
    year: Optional[Candidate] = None
    months: Optional[List[Candidate]] = None
    day: Optional[Candidate] = None


class DateRange(BaseModel):
    """
    A date span anchored at its first day and tagged with its resolution unit.
    """
    span: Span
    unit: str
    start: datetime.date
    year_specified: bool = False


class Relative(BaseModel):
    amount: int
    unit: str
    past: bool = False


class ShowDate(BaseModel):
    """
    A resolved date plus the context it should be displayed in.

    ``relative`` is either an explicit amount or the literal ``"day"``, which
    means "use the exact day distance". ``weekday`` forces the displayed
    weekday name.
    """
    date: datetime.date
    relative: Optional[Union[Relative, str]] = None
    measure: Optional[str] = None
    weekday: Optional[str] = None


class Suggestion(BaseModel):
    """
    A concrete date and its (left, right) display strings.
    """
    date: datetime.date
    left: str
    right: str
