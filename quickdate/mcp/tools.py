"""
MCP Tools Module

This module defines the tools available in the QuickDate MCP server.
"""

from datetime import date
from typing import Dict, Any, Optional

from mcp.server.fastmcp import FastMCP

from quickdate.calendar import dates
from quickdate.mcp.schemas import DateSuggestionItem, DescribeResult, ParseResult
from quickdate.parsing import suggest
from quickdate.parsing.models import DURATIONS, ShowDate
from quickdate.parsing.render import show
from quickdate.utils.logger import get_logger

logger = get_logger(__name__)


def _resolve_today(today: Optional[str]) -> date:
    """Parse an optional ISO date, defaulting to the configured today."""
    if today:
        return date.fromisoformat(today)
    return dates.today()


def setup_tools(mcp: FastMCP) -> None:
    """
    Set up all MCP tools on the FastMCP application.

    Args:
        mcp (FastMCP): The FastMCP application.
    """

    @mcp.tool()
    def parse_date_text(text: str, today: Optional[str] = None) -> Dict[str, Any]:
        """
        Recognise the dates a loosely typed phrase may refer to.

        Args:
            text (str): Free text such as "3 days ago", "2nd friday of march" or "jan 15 2026"
            today (str, optional): Reference date in ISO format (YYYY-MM-DD). Defaults to today.

        Returns:
            Dict[str, Any]: The concrete dates with their display strings. An empty
            suggestion list means no date was recognised.
        """
        try:
            reference = _resolve_today(today)
        except ValueError as e:
            logger.error(f"Invalid reference date '{today}': {e}")
            return {"success": False, "error": f"Invalid reference date '{today}', expected YYYY-MM-DD"}

        try:
            suggestions = suggest(text, reference)
        except Exception as e:
            logger.error(f"Failed to parse '{text}': {e}")
            return {"success": False, "error": f"Failed to parse text: {e}"}

        result = ParseResult(
            text=text,
            today=reference.isoformat(),
            suggestions=[DateSuggestionItem(**s.model_dump()) for s in suggestions],
        )
        return result.model_dump()

    @mcp.tool()
    def describe_date(date_string: str, measure: Optional[str] = None, today: Optional[str] = None) -> Dict[str, Any]:
        """
        Render a date the way parse results are rendered.

        Args:
            date_string (str): The date in ISO format (YYYY-MM-DD)
            measure (str, optional): Measure the distance from today in "day", "week",
                "month" or "year" units. Without it the plain label is returned.
            today (str, optional): Reference date in ISO format. Defaults to today.

        Returns:
            Dict[str, Any]: The left and right display strings
        """
        if measure is not None and measure not in DURATIONS:
            return {"success": False, "error": f"Unknown measure '{measure}', expected one of {', '.join(DURATIONS)}"}

        try:
            d = date.fromisoformat(date_string)
            reference = _resolve_today(today)
        except ValueError as e:
            logger.error(f"Invalid date passed to describe_date: {e}")
            return {"success": False, "error": f"Invalid date: {e}"}

        left, right = show(ShowDate(date=d, measure=measure), reference)
        return DescribeResult(date=d.isoformat(), measure=measure, left=left, right=right).model_dump()
