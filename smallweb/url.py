"""
Resolution and classification of link targets.

Link targets found in Gemini documents are frequently relative, and capsules in the wild
routinely publish malformed ones. Resolution therefore never fails: when the base URL cannot
be understood, the result is a best-effort string rather than an error.
"""

import enum
import logging
import re
from typing import List, Tuple
from urllib.parse import urlsplit

from . import constants, exceptions

logger = logging.getLogger(constants.LOGGER_NAME)


SCHEME_SEPARATOR = "://"
SCHEME_REGEX = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")

# Schemes without an authority part: such targets are absolute even though they lack "://".
OPAQUE_SCHEME_PREFIXES = ("mailto:", "xmpp:", "irc:")
RELATIVE_PREFIXES = ("/", "./", "../")


class LinkScheme(enum.Enum):
    """Scheme of a link target, used by renderers to pick an icon or a style."""

    GEMINI = "gemini"
    GOPHER = "gopher"
    FINGER = "finger"
    HTTP = "http"
    HTTPS = "https"
    MAIL = "mail"
    XMPP = "xmpp"
    IRC = "irc"
    RELATIVE = "relative"
    UNKNOWN = "unknown"


# Literal prefixes, checked in order.
SCHEME_PREFIXES = {
    "gemini://": LinkScheme.GEMINI,
    "gopher://": LinkScheme.GOPHER,
    "finger://": LinkScheme.FINGER,
    "http://": LinkScheme.HTTP,
    "https://": LinkScheme.HTTPS,
    "mailto:": LinkScheme.MAIL,
    "xmpp:": LinkScheme.XMPP,
    "irc:": LinkScheme.IRC,
}


def has_scheme(url: str) -> bool:
    """
    Whether the URL starts with a scheme followed by "://".

    >>> has_scheme("gopher://floodgap.com/")
    True
    >>> has_scheme("docs/index.gmi?next=gemini://elsewhere/")
    False
    """
    return SCHEME_REGEX.match(url) is not None


def repair_scheme(url: str) -> str:
    """
    Prepend the Gemini scheme to targets that start with a bare "://".

    This is a quirk kept for compatibility with buggy producers: nothing in the Gemini
    specification says a missing scheme means Gemini.
    """
    if url.startswith(SCHEME_SEPARATOR):
        return "gemini" + url
    return url


def needs_resolution(target: str) -> bool:
    """Whether a link target must be resolved against the URL of its page."""
    if target.startswith(SCHEME_SEPARATOR):
        return True
    return not has_scheme(target) and not target.startswith(OPAQUE_SCHEME_PREFIXES)


def classify_link_scheme(url: str) -> LinkScheme:
    """
    Classify a (resolved) link target by its literal scheme prefix.

    >>> classify_link_scheme("mailto:someone@example.org")
    <LinkScheme.MAIL: 'mail'>
    >>> classify_link_scheme("../index.gmi")
    <LinkScheme.RELATIVE: 'relative'>
    >>> classify_link_scheme("spartan://mozz.us/")
    <LinkScheme.UNKNOWN: 'unknown'>
    """
    for prefix, scheme in SCHEME_PREFIXES.items():
        if url.startswith(prefix):
            return scheme
    if url.startswith(RELATIVE_PREFIXES) or not has_scheme(url):
        return LinkScheme.RELATIVE
    return LinkScheme.UNKNOWN


def _split_base(base: str) -> Tuple[str, str, str]:
    """
    Split a base URL into its scheme, host (with port, if any) and path.

    :raises ParseError: when the URL has no scheme or host, or an invalid port.
    """
    try:
        parts = urlsplit(base.strip())
        port = parts.port
    except ValueError as error:
        raise exceptions.ParseError(f"invalid base URL {base!r}: {error}") from error

    host = parts.hostname
    if not parts.scheme or not host:
        raise exceptions.ParseError(f"base URL {base!r} has no scheme or host")

    # User info is not carried over to resolved URLs.
    if ":" in host:
        host = f"[{host}]"
    if port is not None:
        host = f"{host}:{port}"
    return parts.scheme, host, parts.path


def _directory_segments(path: str) -> List[str]:
    """
    Segments of the directory containing the resource at `path`.

    >>> _directory_segments("/a/b/page.gmi")
    ['a', 'b']
    >>> _directory_segments("/a/b/")
    ['a', 'b']
    >>> _directory_segments("")
    []
    """
    return path.split("/")[1:-1]


def _join_directory(segments: List[str]) -> str:
    if not segments:
        return "/"
    return "/" + "/".join(segments) + "/"


def resolve_url(base: str, relative: str) -> str:
    """
    Resolve a link target against the URL of the page it was found on.

    >>> resolve_url("gemini://example.com/dir/page.gmi", "./bar.gmi")
    'gemini://example.com/dir/bar.gmi'

    >>> resolve_url("gemini://example.com:1966/a/b/page.gmi", "../../../up.gmi")
    'gemini://example.com:1966/up.gmi'

    >>> resolve_url("not a url", "page.gmi")
    'gemini://page.gmi'

    :param base: URL of the page containing the link.
    :param relative: the link target, relative or absolute.
    :return: the resolved URL. Never raises.
    """

    # The repair must happen before the path rules: a repaired target is absolute.
    relative = repair_scheme(relative)
    if has_scheme(relative) or relative.startswith(OPAQUE_SCHEME_PREFIXES):
        return relative

    try:
        scheme, host, path = _split_base(base)
    except exceptions.ParseError as error:
        logger.debug("falling back to string concatenation: %s", error)
        return "gemini://" + relative

    origin = f"{scheme}://{host}"

    if relative.startswith("/"):
        return origin + relative

    segments = _directory_segments(path)

    if relative.startswith("./"):
        return origin + _join_directory(segments) + relative[2:]

    if relative.startswith("../"):
        remainder = relative
        while remainder.startswith("../"):
            remainder = remainder[3:]
            # Going above the root stays at the root.
            if segments:
                segments.pop()
        return origin + _join_directory(segments) + remainder

    return origin + _join_directory(segments) + relative
