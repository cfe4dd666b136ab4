"""
text/gemini parsing and formatting
"""

from ..constants import GEMINI_MIME_TYPE
from .elements import LINE, HeadingLine, LineKind, Link, ListItem, Mode, QuoteLine, TextLine
from .format import format_gemtext
from .parser import extract_title, parse_gemtext, step

__all__ = [
    "parse_gemtext",
    "format_gemtext",
    "extract_title",
    "step",
    "Link",
    "HeadingLine",
    "ListItem",
    "QuoteLine",
    "TextLine",
    "LineKind",
    "Mode",
    "LINE",
    "GEMINI_MIME_TYPE",
]
