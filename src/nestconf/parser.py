"""Parse driver turning a sequence of lines into a :class:`ConfigTable`."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

import logging

from .classifier import SectionHeader, classify_line
from .errors import FileAccessError
from .scanning import DEFAULT_TRIM_CHARS, strip_comment, trim_ends
from .source import open_line_source
from .table import ConfigTable


class ConfigParser:
    """Single forward pass over a document.

    The only state is the current section, which starts at the default
    subsection of the default group and moves on every header line.
    """

    def __init__(self, trim_chars: str = DEFAULT_TRIM_CHARS, logger: logging.Logger | None = None) -> None:
        self._trim_chars = trim_chars
        self._logger = logger or logging.getLogger(__name__)

    def parse(self, lines: Iterable[str]) -> ConfigTable:
        table = ConfigTable()
        current = table.ensure_group("").ensure_subsection("")
        line_count = 0
        for line_number, raw in enumerate(lines, start=1):
            line_count = line_number
            line = trim_ends(raw.rstrip("\r\n"), self._trim_chars)
            line = trim_ends(strip_comment(line), self._trim_chars)
            if not line:
                continue
            parsed = classify_line(line, line_number, self._trim_chars)
            if isinstance(parsed, SectionHeader):
                # Re-entering an existing section keeps its fields.
                current = table.ensure_group(parsed.group).ensure_subsection(parsed.subsection)
                self._logger.debug(
                    "section_selected",
                    extra={"group": parsed.group, "subsection": parsed.subsection, "line_number": line_number},
                )
            else:
                current.set_field(parsed.key, parsed.value)
        self._logger.debug("config_parsed", extra={"lines": line_count, "groups": len(table)})
        return table


def parse_lines(lines: Iterable[str], trim_chars: str = DEFAULT_TRIM_CHARS) -> ConfigTable:
    """Parse an iterable of lines (with or without line terminators)."""

    return ConfigParser(trim_chars=trim_chars).parse(lines)


def parse_string(text: str, trim_chars: str = DEFAULT_TRIM_CHARS) -> ConfigTable:
    """Parse a whole document held in memory."""

    return parse_lines(text.split("\n"), trim_chars=trim_chars)


def load_config(
    path: str | Path,
    encoding: str = "utf-8",
    errors: str = "strict",
    trim_chars: str = DEFAULT_TRIM_CHARS,
) -> ConfigTable:
    """Open ``path``, parse it and close it again.

    Raises :class:`FileAccessError` when the file cannot be opened or decoded
    and :class:`~nestconf.errors.MalformedInputError` for syntax errors.
    """

    logger = logging.getLogger(__name__)
    with open_line_source(path, encoding=encoding, errors=errors) as source:
        try:
            table = ConfigParser(trim_chars=trim_chars, logger=logger).parse(source)
        except (OSError, UnicodeDecodeError) as exc:
            raise FileAccessError(str(path), str(exc)) from exc
    logger.info("config_loaded", extra={"path": str(path), "groups": len(table)})
    return table
