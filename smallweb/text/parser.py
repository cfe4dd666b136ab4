"""
Parser for text/gemini documents.

>>> parse_gemtext("# Welcome to Geminispace!\\n\\n=> users/ Users directory\\n",
...     base_url="gemini://example.org/")
[HeadingLine(raw_content='# Welcome to Geminispace!', level=1),
    TextLine(raw_content='', preformatted=False),
    Link(raw_content='=> users/ Users directory', target='gemini://example.org/users/', label='Users directory', scheme=<LinkScheme.GEMINI: 'gemini'>)]
"""
import logging
import re
from typing import Callable, Iterator, List, Optional, Tuple

from ..constants import (
    HEADING_MARKER,
    LINK_PREFIX,
    LOGGER_NAME,
    MAX_HEADING_LEVEL,
    PREFORMAT_TOGGLE,
    QUOTE_MARKER,
)
from ..url import classify_link_scheme, needs_resolution, resolve_url
from . import elements

logger = logging.getLogger(LOGGER_NAME)


# Matched against stripped lines.
HEADING_REGEX = re.compile(r"^(?P<markers>#+)[^#]")
LIST_ITEM_REGEX = re.compile(r"^[*]\s")


def _stream_lines(text: str) -> Iterator[str]:
    """
    Split text into lines (newline (\\n) character) on demand.

    A carriage return right before the newline is part of the line terminator.

    >>> iter = _stream_lines("foo\\r\\nbar\\n")
    >>> next(iter)
    'foo'
    >>> next(iter)
    'bar'
    >>> next(iter)
    Traceback (most recent call last):
        ...
    StopIteration

    :param text: the text to split.
    :return: a generated list of lines.
    """

    def _strip_terminator(line: str) -> str:
        return line[:-1] if line.endswith("\r") else line

    start = 0
    line_index = text.find("\n", start)
    while line_index != -1:
        yield _strip_terminator(text[start:line_index])
        start = line_index + 1
        line_index = text.find("\n", start)

    # Deal with text that does not end in a newline.
    if start < len(text):
        yield _strip_terminator(text[start:])


def _parse_link(line: str, stripped: str, base_url: Optional[str]) -> elements.Link:
    tokens = stripped[len(LINK_PREFIX) :].split()
    if not tokens:
        return elements.Link(line, None, None, None)

    target, *label_tokens = tokens
    if base_url is not None and needs_resolution(target):
        target = resolve_url(base_url, target)

    label = " ".join(label_tokens) if label_tokens else target
    return elements.Link(line, target, label, classify_link_scheme(target))


def _parse_heading(line: str, stripped: str, _: Optional[str]) -> elements.LINE:
    match = HEADING_REGEX.match(stripped)
    if match is None:
        return elements.TextLine(line)
    level = min(len(match.group("markers")), MAX_HEADING_LEVEL)
    return elements.HeadingLine(line, level)


Rule = Tuple[
    Callable[[str], bool], Callable[[str, str, Optional[str]], elements.LINE]
]

# Classification of lines in normal mode, by precedence. Toggle lines are handled
# before any rule; lines no rule matches are text lines.
NORMAL_MODE_RULES: List[Rule] = [
    (lambda stripped: stripped.startswith(LINK_PREFIX), _parse_link),
    (lambda stripped: stripped.startswith(HEADING_MARKER), _parse_heading),
    (
        lambda stripped: LIST_ITEM_REGEX.match(stripped) is not None,
        lambda line, *_: elements.ListItem(line),
    ),
    (
        lambda stripped: stripped.startswith(QUOTE_MARKER),
        lambda line, *_: elements.QuoteLine(line),
    ),
]


def step(
    mode: elements.Mode, line: str, base_url: Optional[str] = None
) -> Tuple[elements.Mode, Optional[elements.LINE]]:
    """
    Parse a single line given the current parser mode.

    >>> step(elements.Mode.NORMAL, "```python")
    (<Mode.PREFORMATTED: 2>, None)

    >>> step(elements.Mode.PREFORMATTED, "  * not a list item")
    (<Mode.PREFORMATTED: 2>, TextLine(raw_content='  * not a list item', preformatted=True))

    :param mode: the mode the parser is in before reading the line.
    :param line: the line, without its terminator.
    :param base_url: URL the document was retrieved from, if known.
    :return: the mode after reading the line and the parsed element, if the line
        produced one.
    """
    stripped = line.strip()

    if stripped.startswith(PREFORMAT_TOGGLE):
        if mode is elements.Mode.NORMAL:
            return elements.Mode.PREFORMATTED, None
        return elements.Mode.NORMAL, None

    # Preformatted content is kept exactly as is.
    if mode is elements.Mode.PREFORMATTED:
        return mode, elements.TextLine(line, preformatted=True)

    for matches, build in NORMAL_MODE_RULES:
        if matches(stripped):
            return mode, build(line, stripped, base_url)

    # Includes empty lines, kept for vertical spacing.
    return mode, elements.TextLine(line)


def parse_gemtext(text: str, base_url: Optional[str] = None) -> List[elements.LINE]:
    """
    Parse Gemini text as a list of line types.

    The `LINE` type is a union of all possible line types. Every call starts in normal mode;
    a preformatted block that is still open at the end of the text is not an error.

    >>> parse_gemtext("* List item 1\\n> Quoted\\n=>\\n")
    [ListItem(raw_content='* List item 1'),
        QuoteLine(raw_content='> Quoted'),
        Link(raw_content='=>', target=None, label=None, scheme=None)]

    :param text: the gemini text.
    :param base_url: URL the text was retrieved from. Relative link targets are resolved
        against it; without it they are left untouched.
    :return: a list of line types.
    """

    # Special case: no text at all.
    if not text:
        return []

    parsed_lines: List[elements.LINE] = []
    mode = elements.Mode.NORMAL
    for line in _stream_lines(text):
        mode, element = step(mode, line, base_url)
        if element is not None:
            parsed_lines.append(element)

    if mode is elements.Mode.PREFORMATTED:
        logger.debug("preformatted block left open at the end of the document")

    return parsed_lines


def extract_title(lines: List[elements.LINE]) -> Optional[str]:
    """
    Find a title for a parsed document: its first heading or non-blank text line.

    >>> extract_title(parse_gemtext("\\n## Station log\\nWelcome aboard.\\n"))
    'Station log'
    """
    for line in lines:
        if isinstance(line, elements.HeadingLine):
            return line.text
        if isinstance(line, elements.TextLine) and not line.preformatted:
            text = line.raw_content.strip()
            if text:
                return text
    return None
