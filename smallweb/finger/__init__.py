"""
Finger response classification
"""

from .elements import FingerCategory, FingerElement
from .parser import (
    classify_finger_line,
    cleanup_finger_content,
    extract_emails,
    extract_urls,
    parse_finger_text,
)

__all__ = [
    "parse_finger_text",
    "classify_finger_line",
    "extract_urls",
    "extract_emails",
    "cleanup_finger_content",
    "FingerElement",
    "FingerCategory",
]
