"""
Parsers for Gemini, Gopher and Finger responses.
"""

from .dispatch import dispatch, extract_links, navigation_target
from .url import LinkScheme, resolve_url

__all__ = ["dispatch", "extract_links", "navigation_target", "resolve_url", "LinkScheme"]
