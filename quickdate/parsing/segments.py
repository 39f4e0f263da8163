"""
Span bookkeeping for recognised entities.

Spans are half-open ``(start, end)`` character offsets into the input.
"""

from typing import Any, List, Optional

from quickdate.parsing.models import Span


class EmptySpanError(AssertionError):
    """Raised when a span union is requested over no spans at all."""


def span(*items: Optional[Any]) -> Span:
    """
    Smallest span covering every given item.

    Args:
        *items: Objects with a ``span`` attribute; ``None`` entries are skipped

    Returns:
        The covering (start, end) pair
    """
    spans = [item.span for item in items if item is not None]
    if not spans:
        raise EmptySpanError("no spans to cover")
    return min(s for s, _ in spans), max(e for _, e in spans)


def segment(text: str, *items: Optional[Any]) -> List[Span]:
    """
    Parts of ``text`` not covered by any of the given items, left to right.
    """
    claimed = sorted((item.span for item in items if item is not None), key=lambda s: s[0])

    free: List[Span] = []
    seek = 0
    for start, end in claimed:
        if start > seek:
            free.append((seek, start))
        if end > seek:
            seek = end
    if seek < len(text):
        free.append((seek, len(text)))
    return free


def in_order(first: Any, *rest: Any) -> bool:
    """Whether the items appear in the input in the given order without overlap."""
    prev_end = first.span[1]
    for item in rest:
        if item.span[0] < prev_end:
            return False
        prev_end = item.span[1]
    return True
