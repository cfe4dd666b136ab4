"""
Format text/gemini elements as canonical gemtext.
"""

from functools import singledispatch
from typing import Iterable, List

from ..constants import HEADING_MARKER, LINK_PREFIX, LIST_ITEM_MARKER, PREFORMAT_TOGGLE, QUOTE_MARKER
from .elements import LINE, HeadingLine, Link, ListItem, QuoteLine, TextLine


def format_gemtext(lines: Iterable[LINE]) -> str:
    """
    Format text/gemini elements.

    Consecutive preformatted text lines are fenced with toggle lines. Parsing the output
    gives back elements of the same kinds with the same targets, labels, levels and texts.

    >>> format_gemtext([HeadingLine("##   Log ", 2), TextLine("  x = 1", preformatted=True)])
    '## Log\\n```\\n  x = 1\\n```\\n'

    :param lines: text/gemini lines.
    :return: the document as text.
    """
    output: List[str] = []
    preformatted = False
    for line in lines:
        in_block = isinstance(line, TextLine) and line.preformatted
        if in_block != preformatted:
            output.append(PREFORMAT_TOGGLE + "\n")
            preformatted = in_block
        text = _format_line(line)
        # A carriage return before a lone newline would be read as part of the terminator.
        output.append(text + ("\r\n" if text.endswith("\r") else "\n"))

    if preformatted:
        output.append(PREFORMAT_TOGGLE + "\n")
    return "".join(output)


@singledispatch
def _format_line(line: TextLine) -> str:
    """
    Format the line without its terminator.

    Note that this is the base function, arbitrarily chosen as the first instance of the generic
    function. Doctests and documentation describes behaviour for all line types instead of only
    text lines.

    >>> _format_line(TextLine("Is this acceptable?"))
    'Is this acceptable?'

    >>> _format_line(TextLine("     Is    this    acceptable?        "))
    '     Is    this    acceptable?        '

    >>> _format_line(Link("=>  docs/   The  docs", "docs/", "The docs", None))
    '=> docs/ The docs'

    :param line: a text/gemini line.
    :return: line formatted as text.
    """
    return line.raw_content


@_format_line.register
def _(line: HeadingLine) -> str:
    return HEADING_MARKER * line.level + " " + line.text


@_format_line.register
def _1(line: Link) -> str:
    output = LINK_PREFIX
    if line.target is not None:
        output += " " + line.target
        if line.label and line.label != line.target:
            output += " " + line.label
    return output


@_format_line.register
def _2(line: ListItem) -> str:
    return LIST_ITEM_MARKER + " " + line.text


@_format_line.register
def _3(line: QuoteLine) -> str:
    return QUOTE_MARKER + " " + line.text
