"""
Header blocks written by the fetching layer in front of Gemini bodies.

A header block starts with a `Status:` line and ends at the first blank line:

    Status: 20 text/gemini

    # Body starts here
"""

import logging
from typing import List, Optional, Tuple

from .. import constants, exceptions

logger = logging.getLogger(constants.LOGGER_NAME)


class StatusHeader:
    """
    The status line of a Gemini response defines the result of the request.
    """

    category: constants.Category
    detail: constants.Detail
    meta: str

    # Fields for compatibility with new status codes. Use these fields when the category or
    # detail are unknown.
    category_value: int
    detail_value: int

    # pylint: disable=too-many-arguments
    def __init__(
        self,
        category: constants.Category,
        category_value: int,
        detail: constants.Detail,
        detail_value: int,
        meta: str,
    ) -> None:
        super().__init__()
        self.category = category
        self.category_value = category_value
        self.detail = detail
        self.detail_value = detail_value
        self.meta = meta

    def __repr__(self):
        return f"<StatusHeader {self.category}:{self.detail}:{self.meta}>"

    def __str__(self) -> str:
        return f"{self.category_value}{self.detail_value} {self.meta}"

    def __eq__(self, other) -> bool:
        if not isinstance(other, StatusHeader):
            return NotImplemented
        return str(self) == str(other)

    @property
    def status_code(self) -> int:
        """The status code as an int."""
        return self.category_value * 10 + self.detail_value


def parse_status_line(line: str) -> StatusHeader:
    """
    Parse the `Status:` line of a header block.

    >>> parse_status_line("Status: 20 text/gemini; lang=en").status_code
    20

    >>> parse_status_line("Status: 51 Not found").detail.name
    'PERMANENT_FAILURE_NOT_FOUND'

    :param line: the status line, with or without the `Status:` marker.
    :raises HeaderParseError: when the status code is missing or not numeric.
    """
    status = line.strip()
    if status.startswith(constants.STATUS_MARKER):
        status = status[len(constants.STATUS_MARKER) :].strip()

    if len(status) < 2:
        raise exceptions.HeaderParseError("status is too short")

    # Determine the status category.
    try:
        category_value = int(status[0])
    except ValueError:
        raise exceptions.HeaderParseError(
            f"status category '{status[0]}' is not an integer"
        )

    try:
        category = constants.Category(category_value)
    except ValueError:
        category = constants.Category.UNKNOWN

    # Determine the status detail.
    try:
        detail_value = int(status[1])
    except ValueError:
        raise exceptions.HeaderParseError(
            f"status detail '{status[1]}' is not an integer"
        )

    detail = constants.CATEGORY_TO_DETAILS_MAP[category].get(
        detail_value, constants.Detail.UNKNOWN
    )

    # The meta line is the rest of the line.
    meta = status[3:].strip()

    return StatusHeader(category, category_value, detail, detail_value, meta)


def _find_blank_line(lines: List[str]) -> Optional[int]:
    for index, line in enumerate(lines):
        if not line.strip():
            return index
    return None


def split_status_block(response: str) -> Tuple[Optional[StatusHeader], str]:
    """
    Separate the header block of a response from its body.

    >>> split_status_block("Status: 20 text/gemini\\n\\n# Hello\\n")
    (<StatusHeader Category.SUCCESS:Detail.SUCCESS:text/gemini>, '# Hello\\n')

    >>> split_status_block("# No header\\n")
    (None, '# No header\\n')

    :param response: the response as written by the fetching layer.
    :return: the parsed status line, if there was a well-formed one, and the body. Without
        a blank line ending the header block, the whole response is the body.
    """
    if not response.startswith(constants.STATUS_MARKER):
        return None, response

    lines = response.split("\n")
    blank_index = _find_blank_line(lines)
    if blank_index is None:
        logger.debug("status line without blank line, keeping the whole response")
        return None, response

    body = "\n".join(lines[blank_index + 1 :])
    try:
        header = parse_status_line(lines[0])
    except exceptions.HeaderParseError as error:
        logger.warning("could not parse status line %r: %s", lines[0], error)
        header = None

    return header, body
