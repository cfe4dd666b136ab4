"""
Gopher menu parsing
"""

from .elements import GopherItemType, GopherLine, ITEM_TYPES, item_type_of
from .parser import parse_gopher_line, parse_gopher_menu

__all__ = [
    "parse_gopher_menu",
    "parse_gopher_line",
    "GopherLine",
    "GopherItemType",
    "ITEM_TYPES",
    "item_type_of",
]
