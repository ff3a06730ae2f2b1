"""Line classification: section headers versus key/value assignments."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import MalformedInputError
from .scanning import DEFAULT_TRIM_CHARS, find_unquoted, strip_quotes, trim_ends, unquote


@dataclass(frozen=True)
class SectionHeader:
    """A ``[group]`` or ``[group subsection]`` line."""

    group: str
    subsection: str = ""


@dataclass(frozen=True)
class KeyValue:
    """A ``key=value`` line."""

    key: str
    value: str


ClassifiedLine = Union[SectionHeader, KeyValue]


def parse_section_header(line: str, line_number: int, trim_chars: str = DEFAULT_TRIM_CHARS) -> SectionHeader:
    inner = trim_ends(strip_quotes(line, "[", "]", line_number, line), trim_chars)
    separator = find_unquoted(inner, " ")
    if separator < 0:
        # Singleton header selects the default subsection.
        return SectionHeader(group=unquote(inner, line_number, line, trim_chars))
    return SectionHeader(
        group=unquote(inner[:separator], line_number, line, trim_chars),
        subsection=unquote(inner[separator + 1:], line_number, line, trim_chars),
    )


def parse_key_value(line: str, line_number: int, trim_chars: str = DEFAULT_TRIM_CHARS) -> KeyValue:
    position = find_unquoted(line, "=")
    if position < 0:
        raise MalformedInputError("Malformed line", line_number, line)
    return KeyValue(
        key=unquote(line[:position], line_number, line, trim_chars),
        value=unquote(line[position + 1:], line_number, line, trim_chars),
    )


def classify_line(line: str, line_number: int, trim_chars: str = DEFAULT_TRIM_CHARS) -> ClassifiedLine:
    """Classify a trimmed, comment-stripped, non-empty line.

    Raises :class:`MalformedInputError` for unmatched brackets or quotes and
    for assignments without an unquoted ``=``.
    """

    if line.startswith("["):
        return parse_section_header(line, line_number, trim_chars)
    return parse_key_value(line, line_number, trim_chars)
