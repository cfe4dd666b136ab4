"""
Heuristic classification of Finger responses.

Finger output is free-form text: each line is classified on its own, and the first rule
that matches wins. A line with both an email address and a URL is an email.

>>> [element.category.value for element in parse_finger_text(
...     "Login: ada\\r\\n\\r\\nMail: ada@example.org\\r\\nOnline since 10:00 UTC\\r\\n")]
['text', 'email', 'timestamp']
"""

import re
from typing import Callable, List, Optional, Tuple

from ..constants import FINGER_STATUS_KEYWORDS
from .elements import FingerCategory, FingerElement


EMAIL_REGEX = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
URL_REGEX = re.compile(r"https?://\S+")
CONTROL_CHARACTERS_REGEX = re.compile(r"[\x00-\x08\x0B\x0C\x0E-\x1F\x7F]")


def _classify_email(line: str, stripped: str) -> Optional[FingerElement]:
    match = EMAIL_REGEX.search(stripped)
    if not match:
        return None
    email = match.group(0)
    return FingerElement(FingerCategory.EMAIL, line, "mailto:" + email, email)


def _classify_link(line: str, stripped: str) -> Optional[FingerElement]:
    match = URL_REGEX.search(stripped)
    if not match:
        return None
    url = match.group(0)
    return FingerElement(FingerCategory.LINK, line, url, url)


def _classify_timestamp(line: str, stripped: str) -> Optional[FingerElement]:
    if ("T" in stripped and "Z" in stripped) or "GMT" in stripped or "UTC" in stripped:
        return FingerElement(FingerCategory.TIMESTAMP, line)
    return None


def _classify_status(line: str, stripped: str) -> Optional[FingerElement]:
    if stripped.startswith(FINGER_STATUS_KEYWORDS):
        return FingerElement(FingerCategory.STATUS, line)
    return None


# By priority.
CLASSIFIERS: Tuple[Callable[[str, str], Optional[FingerElement]], ...] = (
    _classify_email,
    _classify_link,
    _classify_timestamp,
    _classify_status,
)


def classify_finger_line(line: str) -> FingerElement:
    """
    Classify a single line of a Finger response.

    >>> classify_finger_line("Last login: 2024-01-01T00:00:00Z")
    FingerElement(category=<FingerCategory.TIMESTAMP: 'timestamp'>, raw_line='Last login: 2024-01-01T00:00:00Z', target=None, display_text=None)

    >>> classify_finger_line("Plan: see https://example.org/plan").target
    'https://example.org/plan'
    """
    stripped = line.strip()
    for classify in CLASSIFIERS:
        element = classify(line, stripped)
        if element is not None:
            return element
    return FingerElement(FingerCategory.TEXT, line)


def parse_finger_text(text: str) -> List[FingerElement]:
    """
    Classify every non-blank line of a Finger response.

    Blank lines carry no information in Finger output and are dropped.

    :param text: the Finger response.
    :return: a list of classified lines.
    """
    parsed: List[FingerElement] = []
    for line in text.split("\n"):
        if line.endswith("\r"):
            line = line[:-1]
        if line.strip():
            parsed.append(classify_finger_line(line))
    return parsed


def extract_urls(text: str) -> List[str]:
    """
    Find all HTTP and HTTPS URLs in a Finger response.

    >>> extract_urls("Home: https://example.org/~ada\\nWiki: http://wiki.example.org/Ada")
    ['https://example.org/~ada', 'http://wiki.example.org/Ada']
    """
    return URL_REGEX.findall(text)


def extract_emails(text: str) -> List[str]:
    """Find all email addresses in a Finger response."""
    return EMAIL_REGEX.findall(text)


def cleanup_finger_content(text: str) -> str:
    """
    Remove control characters and normalise line endings to newlines.

    >>> cleanup_finger_content("ada\\x07\\r\\nlovelace\\rbabbage")
    'ada\\nlovelace\\nbabbage'
    """
    return (
        CONTROL_CHARACTERS_REGEX.sub("", text)
        .replace("\r\n", "\n")
        .replace("\r", "\n")
    )
