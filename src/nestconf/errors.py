"""Exception hierarchy for parsing and typed access."""

from __future__ import annotations


class ConfigError(Exception):
    """Base class for every error raised by nestconf."""


class MalformedInputError(ConfigError):
    """A line could not be parsed (unterminated quote, missing delimiter)."""

    def __init__(self, message: str, line_number: int, line: str) -> None:
        super().__init__(f"{message} on line {line_number}: '{line}'")
        self.line_number = line_number
        self.line = line


class InvalidValueError(ConfigError, ValueError):
    """Field text is not a valid value of the requested type."""

    def __init__(self, text: str, type_name: str) -> None:
        super().__init__(f"String '{text}' is not a valid {type_name}")
        self.text = text
        self.type_name = type_name


class OutOfRangeError(ConfigError, ValueError):
    """Numeric field text is outside the range of the requested type."""

    def __init__(self, text: str, type_name: str) -> None:
        super().__init__(f"String '{text}' not representable in type {type_name}")
        self.text = text
        self.type_name = type_name


class DecodeError(ConfigError):
    """Unexpected low-level failure while converting field text."""

    def __init__(self, text: str, type_name: str) -> None:
        super().__init__(f"Unknown error while parsing '{text}' as a {type_name}")
        self.text = text
        self.type_name = type_name


class FileAccessError(ConfigError):
    """The configuration source could not be opened or read."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read config file '{path}': {reason}")
        self.path = path
