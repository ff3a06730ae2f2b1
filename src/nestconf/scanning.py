"""Stateless text scanning primitives used by the line classifier.

Every function here works on a single line of text and is quote aware in the
same way: a double quote opens or closes a quoted region unless it is escaped
by a backslash, and an escape only affects the character directly after it.
"""

from __future__ import annotations

from typing import Callable

from .errors import MalformedInputError

DEFAULT_TRIM_CHARS = " \t"
QUOTE = '"'
ESCAPE = "\\"


def trim_ends(line: str, chars: str = DEFAULT_TRIM_CHARS) -> str:
    """Remove leading and trailing characters found in ``chars``."""

    return line.strip(chars)


def _scan_unquoted(line: str, matches: Callable[[int], bool]) -> int:
    # Two-flag state machine: (escaped, quoted).
    escaped = False
    quoted = False
    for index, char in enumerate(line):
        if char == ESCAPE:
            escaped = not escaped
            continue
        if char == QUOTE:
            if not escaped:
                quoted = not quoted
        elif not quoted and not escaped and matches(index):
            return index
        escaped = False
    return -1


def find_unquoted(line: str, target: str) -> int:
    """Return the index of the first unquoted, unescaped ``target`` or -1."""

    return _scan_unquoted(line, lambda index: line[index] == target)


def _is_comment_start(line: str, index: int) -> bool:
    if line[index] == "#":
        return True
    # A lone slash is data; only "//" starts a comment.
    return line.startswith("//", index)


def strip_comment(line: str) -> str:
    """Truncate ``line`` at the first unquoted ``#`` or ``//``."""

    position = _scan_unquoted(line, lambda index: _is_comment_start(line, index))
    if position < 0:
        return line
    return line[:position]


def strip_quotes(
    text: str,
    front: str = QUOTE,
    back: str = QUOTE,
    line_number: int = 0,
    line: str | None = None,
) -> str:
    """Remove a ``front``/``back`` pair wrapping ``text``.

    Quoting is optional: text that does not start with ``front`` is returned
    unchanged. Text that starts with ``front`` must also end with ``back``,
    otherwise :class:`MalformedInputError` is raised for ``line_number``.
    """

    if not text.startswith(front):
        return text
    inner = text[len(front):]
    if not inner or not inner.endswith(back):
        raise MalformedInputError(
            "Unfinished quoted string",
            line_number,
            line if line is not None else text,
        )
    return inner[: len(inner) - len(back)]


def unescape(text: str) -> str:
    """Resolve ``\\"`` and ``\\\\`` escapes; other backslashes stay literal."""

    if ESCAPE not in text:
        return text
    chars: list[str] = []
    index = 0
    while index < len(text):
        char = text[index]
        if char == ESCAPE and index + 1 < len(text) and text[index + 1] in (QUOTE, ESCAPE):
            chars.append(text[index + 1])
            index += 2
            continue
        chars.append(char)
        index += 1
    return "".join(chars)


def unquote(
    text: str,
    line_number: int = 0,
    line: str | None = None,
    trim_chars: str = DEFAULT_TRIM_CHARS,
) -> str:
    """Trim a token, strip optional double quotes and resolve escapes."""

    token = trim_ends(text, trim_chars)
    if not token.startswith(QUOTE):
        return token
    return unescape(strip_quotes(token, QUOTE, QUOTE, line_number, line))
