"""
QuickDate

Natural-language date recognition for quick task entry.
"""

from quickdate.parsing import parse, suggest

__all__ = ['parse', 'suggest']
