"""
Pick the parser matching the scheme a response was retrieved with.

>>> dispatch("1Floodgap Home\\t/\\tgopher.floodgap.com\\t70\\r\\n", "gopher://floodgap.com/")[0].is_navigable
True
"""

import logging
import re
from functools import singledispatch
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Union

from .. import constants
from ..finger import FingerCategory, FingerElement, parse_finger_text
from ..gopher import GopherItemType, GopherLine, parse_gopher_menu
from ..text import LINE, Link, TextLine, parse_gemtext
from .header import split_status_block

logger = logging.getLogger(constants.LOGGER_NAME)


ELEMENT = Union[LINE, GopherLine, FingerElement]

ERROR_TYPE_CHAR = "3"

SCHEME_NAME_REGEX = re.compile(r"^\s*(?P<scheme>[A-Za-z][A-Za-z0-9+.\-]*):")


def decode_body(raw: Union[str, bytes], encoding: str = "utf-8") -> str:
    """
    Decode a response body, replacing undecodable sequences.

    >>> decode_body(b"caf\\xc3\\xa9 \\xff") == "café \\ufffd"
    True
    """
    if isinstance(raw, str):
        return raw

    try:
        return raw.decode(encoding)
    except UnicodeDecodeError:
        logger.warning("failed to decode response as %s, replacing invalid bytes", encoding)
    except LookupError:
        logger.warning("unknown encoding %s, falling back to utf-8", encoding)
        encoding = "utf-8"
    return raw.decode(encoding, errors="replace")


def _scheme_of(url: str) -> str:
    """
    Scheme of a URL, lowercased, read without parsing the rest of the URL.

    >>> _scheme_of(" GEMINI://[broken/")
    'gemini'
    """
    match = SCHEME_NAME_REGEX.match(url)
    if match is None:
        return ""
    return match.group("scheme").lower()


def _dispatch_gemini(response: str, source_url: str) -> List[ELEMENT]:
    _, body = split_status_block(response)
    return list(parse_gemtext(body, base_url=source_url))


def _dispatch_gopher(response: str, _: str) -> List[ELEMENT]:
    return list(parse_gopher_menu(response))


def _dispatch_finger(response: str, _: str) -> List[ELEMENT]:
    return list(parse_finger_text(response))


def _dispatch_plain_text(response: str, _: str) -> List[ELEMENT]:
    return [TextLine(line, preformatted=True) for line in response.splitlines()]


PARSERS: Dict[str, Callable[[str, str], List[ELEMENT]]] = {
    "gemini": _dispatch_gemini,
    "gopher": _dispatch_gopher,
    "finger": _dispatch_finger,
}


def _fetch_error(message: str, scheme: str) -> ELEMENT:
    if scheme == "gopher":
        return GopherLine(ERROR_TYPE_CHAR, GopherItemType.ERROR, message)
    if scheme == "finger":
        return FingerElement(FingerCategory.TEXT, message)
    # Text lines hold a single line.
    return TextLine(" ".join(message.splitlines()), preformatted=True)


def dispatch(response: Union[str, bytes], source_url: str) -> List[ELEMENT]:
    """
    Parse a response with the parser of the scheme it was retrieved with.

    A fetching error message is surfaced as a single element holding the whole message.
    Responses of unsupported schemes are shown as plain preformatted text.

    >>> dispatch("Failed to fetch gemini://example.org/: timed out", "gemini://example.org/")
    [TextLine(raw_content='Failed to fetch gemini://example.org/: timed out', preformatted=True)]

    :param response: the response, as text or undecoded bytes.
    :param source_url: URL the response was retrieved from. For Gemini, relative links are
        resolved against it.
    :return: the parsed elements, all of the same family.
    """
    text = decode_body(response)
    scheme = _scheme_of(source_url)

    if text.startswith(constants.FETCH_ERROR_MARKER):
        logger.debug("response from %s is a fetching error", source_url)
        return [_fetch_error(text, scheme)]

    parser = PARSERS.get(scheme)
    if parser is None:
        logger.warning("unsupported scheme %r, showing %s as plain text", scheme, source_url)
        parser = _dispatch_plain_text
    else:
        logger.debug("parsing %s response from %s", scheme, source_url)

    return parser(text, source_url)


@singledispatch
def navigation_target(element) -> Optional[str]:
    """
    URL to request when the element is activated, if it points anywhere.

    >>> navigation_target(FingerElement(FingerCategory.EMAIL, "ada@example.org",
    ...     "mailto:ada@example.org", "ada@example.org"))
    'mailto:ada@example.org'

    >>> navigation_target(TextLine("Just text"))
    """
    return None


@navigation_target.register
def _(element: Link) -> Optional[str]:
    return element.target


@navigation_target.register
def _1(element: FingerElement) -> Optional[str]:
    return element.target


@navigation_target.register
def _2(element: GopherLine) -> Optional[str]:
    if element.is_navigable or element.is_external or element.is_downloadable:
        return element.url
    return None


def extract_links(elements: Iterable[ELEMENT]) -> Sequence[str]:
    """Navigation targets of the elements, in document order."""
    targets = (navigation_target(element) for element in elements)
    return [target for target in targets if target is not None]
