"""
Elements of the text/gemini format.

Every parsed line becomes one element. Toggle lines of preformatted blocks only switch the
parser mode and never become elements.
"""

import enum
from dataclasses import dataclass
from typing import ClassVar, Optional, Union

from ..constants import HEADING_MARKER, LIST_ITEM_MARKER, MAX_HEADING_LEVEL, QUOTE_MARKER
from ..url import LinkScheme


class LineKind(enum.Enum):
    TEXT = "text"
    LINK = "link"
    HEADING = "heading"
    LIST_ITEM = "list_item"
    QUOTE = "quote"


class Mode(enum.Enum):
    """State of the gemtext parser."""

    NORMAL = enum.auto()
    PREFORMATTED = enum.auto()


def _validate_raw_content(raw_content: str) -> None:
    if "\n" in raw_content:
        raise ValueError("line content cannot contain newlines")


@dataclass(frozen=True)
class TextLine:
    """
    Plain text line, possibly empty.

    Lines inside a preformatted block are text lines too and keep their whitespace exactly;
    `preformatted` tells a renderer to display them with a fixed-width font without wrapping.
    """

    kind: ClassVar[LineKind] = LineKind.TEXT

    raw_content: str
    preformatted: bool = False

    def __post_init__(self):
        _validate_raw_content(self.raw_content)


@dataclass(frozen=True)
class Link:
    """
    Link to another document. Both the target and the label are optional.

    A link line without a target (a lone `=>`) has neither target nor label: activating it
    does nothing. Otherwise the label defaults to the target.

    The target is resolved against the URL of the page when one is known, so it is absolute
    unless the page URL was unknown. `scheme` classifies the resolved target for display
    only; it never influences parsing.
    """

    kind: ClassVar[LineKind] = LineKind.LINK

    raw_content: str
    target: Optional[str]
    label: Optional[str]
    scheme: Optional[LinkScheme]

    def __post_init__(self):
        """Validate link."""
        _validate_raw_content(self.raw_content)
        if self.target is None and (self.label is not None or self.scheme is not None):
            raise ValueError("link without target cannot have a label or scheme")
        if self.target is not None and not self.target:
            raise ValueError("link target cannot be empty")


@dataclass(frozen=True)
class HeadingLine:
    """
    Header of a new section.

    Levels are indicated by pound signs: the more pounds, the deeper the level, up to 3.
    """

    kind: ClassVar[LineKind] = LineKind.HEADING

    raw_content: str
    level: int

    def __post_init__(self):
        """Validate heading line."""
        _validate_raw_content(self.raw_content)
        if not 1 <= self.level <= MAX_HEADING_LEVEL:
            raise ValueError(f"heading level must be between 1 and {MAX_HEADING_LEVEL}")

    @property
    def text(self) -> str:
        return self.raw_content.strip().lstrip(HEADING_MARKER).strip()


@dataclass(frozen=True)
class ListItem:
    kind: ClassVar[LineKind] = LineKind.LIST_ITEM

    raw_content: str

    def __post_init__(self):
        _validate_raw_content(self.raw_content)

    @property
    def text(self) -> str:
        return self.raw_content.strip()[len(LIST_ITEM_MARKER) :].strip()


@dataclass(frozen=True)
class QuoteLine:
    kind: ClassVar[LineKind] = LineKind.QUOTE

    raw_content: str

    def __post_init__(self):
        _validate_raw_content(self.raw_content)

    @property
    def text(self) -> str:
        return self.raw_content.strip()[len(QUOTE_MARKER) :].strip()


LINE = Union[TextLine, Link, HeadingLine, ListItem, QuoteLine]
