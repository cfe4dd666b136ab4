"""
Parser for Gopher menus.

Servers in the wild routinely emit malformed menu lines, so no line is ever dropped or
rejected: what cannot be parsed becomes an UNKNOWN item carrying the raw line.

>>> parse_gopher_menu("iWelcome!\\t\\terror.host\\t1\\r\\n"
...     "1Floodgap Home\\t/\\tgopher.floodgap.com\\t70\\r\\n")
[GopherLine(type_char='i', item_type=<GopherItemType.INFO: 'info'>, description='Welcome!', selector='', host='', port=0),
    GopherLine(type_char='1', item_type=<GopherItemType.DIRECTORY: 'directory'>, description='Floodgap Home', selector='/', host='gopher.floodgap.com', port=70)]
"""

import logging
from typing import List

from ..constants import GOPHER_DEFAULT_PORT, LOGGER_NAME
from .elements import GopherItemType, GopherLine, item_type_of

logger = logging.getLogger(LOGGER_NAME)


LINE_TERMINATOR = "\r\n"
FIELD_SEPARATOR = "\t"
INFO_TYPE_CHAR = "i"


def _parse_port(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        return GOPHER_DEFAULT_PORT


def parse_gopher_line(line: str) -> GopherLine:
    """
    Parse a single, non-empty menu line.

    >>> parse_gopher_line("0Notes\\twith a tab\\tnotes.txt\\tgopher.example.org\\tseventy")
    GopherLine(type_char='0', item_type=<GopherItemType.TEXT_FILE: 'textFile'>, description='Notes\\twith a tab', selector='notes.txt', host='gopher.example.org', port=70)

    >>> parse_gopher_line("1Broken line")
    GopherLine(type_char='1', item_type=<GopherItemType.UNKNOWN: 'unknown'>, description='1Broken line', selector='', host='', port=0)

    :param line: the line without its terminator.
    :return: the parsed line.
    """
    type_char, fields = line[0], line[1:].split(FIELD_SEPARATOR)

    if type_char == INFO_TYPE_CHAR:
        return GopherLine(type_char, GopherItemType.INFO, fields[0])

    if len(fields) >= 3:
        # Descriptions may legitimately contain tabs: count the fields from the end.
        return GopherLine(
            type_char,
            item_type_of(type_char),
            FIELD_SEPARATOR.join(fields[:-3]),
            fields[-3],
            fields[-2],
            _parse_port(fields[-1]),
        )

    # The description keeps the type character: the line is shown as it was received.
    logger.warning("could not parse gopher line %r", line)
    return GopherLine(type_char, GopherItemType.UNKNOWN, line)


def parse_gopher_menu(response: str) -> List[GopherLine]:
    """
    Parse a Gopher menu as a list of lines.

    Each non-empty line of the response gives exactly one parsed line.

    :param response: the menu, with CRLF line terminators.
    :return: a list of parsed lines.
    """
    return [
        parse_gopher_line(line)
        for line in response.split(LINE_TERMINATOR)
        if line
    ]
