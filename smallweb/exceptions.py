"""
Exceptions used internally by the smallweb parsers.

None of the public parsing functions raise: these errors are raised by low-level helpers
and caught by their callers, which log them and degrade to plain elements.
"""


class SmallWebError(Exception):
    """Base smallweb error."""


class ParseError(SmallWebError):
    """Base error for any parsing errors."""


class HeaderParseError(ParseError):
    """
    Raised when the status line of a Gemini header block could not be parsed.

    This error could indicate:
        * The fetching layer wrote a header we do not understand.
        * The server of the host is buggy.
        * The response was truncated somehow.
    """
