"""
MCP Schemas Module

This module defines the schemas returned by the MCP tools.
"""

from typing import List, Optional
import datetime
from pydantic import BaseModel, field_serializer


class DateSuggestionItem(BaseModel):
    """
    Schema for a single date suggestion.

    ``left`` and ``right`` are the two display strings shown next to each
    other in the quick-entry field, e.g. ("3 days ago", "Sunday").
    """
    date: datetime.date
    left: str
    right: str

    @field_serializer("date")
    def serialize_date(self, value: datetime.date) -> str:
        return value.isoformat()


class ParseResult(BaseModel):
    """
    Schema for the result of parsing free text.
    """
    success: bool = True
    text: str
    today: str
    suggestions: List[DateSuggestionItem] = []


class DescribeResult(BaseModel):
    """
    Schema for the rendering of a single date.
    """
    success: bool = True
    date: str
    measure: Optional[str] = None
    left: str
    right: str
