"""
Natural Language Date Recognition

Recognises references to dates in loosely typed text ("3 days ago",
"2nd friday of march", "jan 15 2026", "monday") and renders each date the
text may mean as a pair of display strings.

Supported vocabulary:
- Month names and any prefix of at least three letters: mar, sept, november
- Weekday names and prefixes: fri, thurs, wednesday
- Ordinals: first..twelfth, 1st, 22nd
- Cardinals: a, an, one..twelve, and digits
- Units: d, day(s), w, week(s), m, month(s), y, year(s) and abbreviations
- Past markers: ago, before, earlier
- Years 1900-2999
"""

from datetime import date
from typing import List, Optional, Tuple

from quickdate.calendar import dates
from quickdate.parsing.compose import process
from quickdate.parsing.models import ShowDate, Suggestion
from quickdate.parsing.render import show


def _representatives(text: str, today: date) -> List[ShowDate]:
    branches = process(text, today)
    if len(branches) == 1 and isinstance(branches[0], list):
        return branches[0]
    # several readings: each contributes its first candidate
    return [b[0] if isinstance(b, list) else b for b in branches]


def suggest(text: str, today: Optional[date] = None) -> List[Suggestion]:
    """
    Resolve ``text`` into concrete dates with display strings.

    Args:
        text: Free text typed by the user
        today: Reference date (defaults to today in the configured timezone)

    Returns:
        One suggestion per candidate date; empty if nothing was recognised
    """
    today = today or dates.today()
    suggestions = []
    for sd in _representatives(text, today):
        left, right = show(sd, today)
        suggestions.append(Suggestion(date=sd.date, left=left, right=right))
    return suggestions


def parse(text: str, today: Optional[date] = None) -> List[Tuple[str, str]]:
    """
    Render every date ``text`` may refer to.

    Examples:
        >>> parse("3 days ago", today=date(2025, 1, 15))
        [('3 days ago', 'Sunday')]

        >>> parse("hello world", today=date(2025, 1, 15))
        []
    """
    return [(s.left, s.right) for s in suggest(text, today)]


__all__ = ['parse', 'suggest', 'show']
