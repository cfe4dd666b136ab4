from .dispatcher import ELEMENT, decode_body, dispatch, extract_links, navigation_target
from .header import StatusHeader, parse_status_line, split_status_block

__all__ = [
    "dispatch",
    "decode_body",
    "navigation_target",
    "extract_links",
    "ELEMENT",
    "StatusHeader",
    "parse_status_line",
    "split_status_block",
]
