"""
Line preprocessing and token trimming.

Turns one physical line (or line fragment) of an env file into a
``(key, value)`` pair, or decides that the line carries nothing.
"""

import enum
import os

from envctx.exceptions import MalformedLineError

WHITESPACE = " \t\r\n"
QUOTE = '"'
COMMENT = "#"
SEPARATOR = "="


class QuoteState(enum.Enum):
    """Scanner state for comment detection."""

    OUTSIDE = "outside"
    INSIDE = "inside"


def normalize_newline(line: str) -> str:
    """Cut the line at the platform newline, or at a bare LF if there is none."""
    pos = line.find(os.linesep)
    if pos == -1:
        pos = line.find("\n")
    if pos == -1:
        return line
    return line[:pos]


def is_skippable(line: str) -> bool:
    """Blank lines and lines starting with '#' are dropped before any other work."""
    return not line or line.startswith(COMMENT)


def strip_comment(line: str) -> str:
    """
    Remove a trailing comment, ignoring '#' between double quotes.

    Every '"' flips the scanner between OUTSIDE and INSIDE; there is no
    escape handling. An odd number of quotes before a '#' keeps the scanner
    INSIDE, so the rest of the line is kept as-is.
    """
    state = QuoteState.OUTSIDE
    for pos, char in enumerate(line):
        if char == QUOTE:
            state = QuoteState.INSIDE if state is QuoteState.OUTSIDE else QuoteState.OUTSIDE
        elif char == COMMENT and state is QuoteState.OUTSIDE:
            return line[:pos]
    return line


def trim(token: str) -> str:
    """
    Strip surrounding whitespace, then one leading and one trailing quote.

    The quotes are handled independently: ``"abc`` becomes ``abc``.
    """
    token = token.strip(WHITESPACE)
    if token.startswith(QUOTE):
        token = token[1:]
    if token.endswith(QUOTE):
        token = token[:-1]
    return token


def split_assignment(line: str) -> tuple[str, str]:
    """
    Split ``KEY=VALUE`` on the first '=' and trim both sides.

    Raises:
        MalformedLineError: No '=' in the line, or the key is empty after trimming
    """
    key, sep, value = line.partition(SEPARATOR)
    if not sep:
        raise MalformedLineError(line, "missing '='")
    key = trim(key)
    if not key:
        raise MalformedLineError(line, "empty key")
    return key, trim(value)


def parse_line(raw: str) -> tuple[str, str] | None:
    """
    Run the full preprocessing pipeline on one line as read from the file.

    Returns:
        ``(key, value)`` with the value not yet resolved, or None for blank
        and comment lines

    Raises:
        MalformedLineError: The line is neither blank nor a valid assignment
    """
    line = normalize_newline(raw)
    if is_skippable(line):
        return None
    return split_assignment(strip_comment(line))
