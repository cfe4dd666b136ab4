"""
Entries of Gopher menus (RFC 1436).
"""

import enum
from dataclasses import dataclass
from typing import Optional

from ..constants import GOPHER_DEFAULT_PORT, TELNET_DEFAULT_PORT


class GopherItemType(enum.Enum):
    TEXT_FILE = "textFile"
    DIRECTORY = "directory"
    CSO = "cso"
    ERROR = "error"
    BIN_HEX = "binHex"
    DOS_BINARY = "dosBinary"
    UUENCODED = "uuencoded"
    SEARCH = "search"
    TELNET = "telnet"
    BINARY = "binary"
    REDUNDANT = "redundant"
    TN3270 = "tn3270"
    GIF = "gif"
    IMAGE = "image"
    TELNET_3270 = "telnet3270"
    # These are not in the original RFC but encountered frequently.
    INFO = "info"
    HTTP = "http"
    HTTPS = "https"
    UNKNOWN = "unknown"


# Type characters absent from this table, "?" included, are UNKNOWN items.
ITEM_TYPES = {
    "0": GopherItemType.TEXT_FILE,
    "1": GopherItemType.DIRECTORY,
    "2": GopherItemType.CSO,
    "3": GopherItemType.ERROR,
    "4": GopherItemType.BIN_HEX,
    "5": GopherItemType.DOS_BINARY,
    "6": GopherItemType.UUENCODED,
    "7": GopherItemType.SEARCH,
    "8": GopherItemType.TELNET,
    "9": GopherItemType.BINARY,
    "+": GopherItemType.REDUNDANT,
    "T": GopherItemType.TN3270,
    "g": GopherItemType.GIF,
    "I": GopherItemType.IMAGE,
    "i": GopherItemType.INFO,
    "h": GopherItemType.HTTP,
    "H": GopherItemType.HTTPS,
}

NAVIGABLE_TYPES = frozenset(
    (GopherItemType.TEXT_FILE, GopherItemType.DIRECTORY, GopherItemType.SEARCH)
)
DOWNLOADABLE_TYPES = frozenset(
    (
        GopherItemType.BIN_HEX,
        GopherItemType.DOS_BINARY,
        GopherItemType.UUENCODED,
        GopherItemType.BINARY,
        GopherItemType.GIF,
        GopherItemType.IMAGE,
    )
)
EXTERNAL_TYPES = frozenset(
    (
        GopherItemType.HTTP,
        GopherItemType.HTTPS,
        GopherItemType.TELNET,
        GopherItemType.TN3270,
        GopherItemType.TELNET_3270,
    )
)

# Selector prefix of "h" items pointing outside of Gopherspace.
URL_SELECTOR_PREFIX = "URL:"

TELNET_TYPES = frozenset(
    (GopherItemType.TELNET, GopherItemType.TN3270, GopherItemType.TELNET_3270)
)


def item_type_of(type_char: str) -> GopherItemType:
    """
    Semantic type of a Gopher type character.

    >>> item_type_of("1")
    <GopherItemType.DIRECTORY: 'directory'>
    >>> item_type_of("?")
    <GopherItemType.UNKNOWN: 'unknown'>
    """
    return ITEM_TYPES.get(type_char, GopherItemType.UNKNOWN)


@dataclass(frozen=True)
class GopherLine:
    """
    One line of a Gopher menu.

    Info lines have an empty selector and host and a zero port. Lines that could not be
    parsed are UNKNOWN items whose description is the whole raw line.
    """

    type_char: str
    item_type: GopherItemType
    description: str
    selector: str = ""
    host: str = ""
    port: int = 0

    @property
    def is_navigable(self) -> bool:
        return self.item_type in NAVIGABLE_TYPES

    @property
    def is_downloadable(self) -> bool:
        return self.item_type in DOWNLOADABLE_TYPES

    @property
    def is_external(self) -> bool:
        return self.item_type in EXTERNAL_TYPES

    @property
    def url(self) -> Optional[str]:
        """
        URL to request when the line is activated, if it points anywhere.

        >>> GopherLine("h", GopherItemType.HTTP, "Web", "URL:https://example.org/", "gopher.example.org", 70).url
        'https://example.org/'

        >>> GopherLine("0", GopherItemType.TEXT_FILE, "About", "about.txt", "gopher.example.org", 7070).url
        'gopher://gopher.example.org:7070/about.txt'

        >>> GopherLine("8", GopherItemType.TELNET, "Chat", "", "bbs.example.org", 0).url
        'telnet://bbs.example.org:23'
        """
        if self.item_type in (GopherItemType.INFO, GopherItemType.ERROR, GopherItemType.UNKNOWN):
            return None
        is_web = self.item_type in (GopherItemType.HTTP, GopherItemType.HTTPS)
        if is_web and self.selector.startswith(URL_SELECTOR_PREFIX):
            return self.selector[len(URL_SELECTOR_PREFIX) :]
        if not self.host:
            return None
        # Telnet sessions have no selector to request.
        if self.item_type in TELNET_TYPES:
            return f"telnet://{self.host}:{self.port or TELNET_DEFAULT_PORT}"

        selector = self.selector if self.selector.startswith("/") else "/" + self.selector
        port = self.port or GOPHER_DEFAULT_PORT
        return f"gopher://{self.host}:{port}{selector}"
