"""
Elements of Finger responses.
"""

import enum
from dataclasses import dataclass
from typing import Optional


class FingerCategory(enum.Enum):
    TEXT = "text"
    LINK = "link"
    EMAIL = "email"
    TIMESTAMP = "timestamp"
    STATUS = "status"


@dataclass(frozen=True)
class FingerElement:
    """
    A classified line of a Finger response.

    Links and emails carry the target to request when activated (a `mailto:` URL for emails)
    and the text to display for it.
    """

    category: FingerCategory
    raw_line: str
    target: Optional[str] = None
    display_text: Optional[str] = None

    def __post_init__(self):
        has_target = self.category in (FingerCategory.LINK, FingerCategory.EMAIL)
        if has_target != (self.target is not None):
            raise ValueError("only links and emails have a target")
