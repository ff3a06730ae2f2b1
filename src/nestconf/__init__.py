"""Top-level package for the nestconf sectioned configuration parser."""

from .classifier import KeyValue, SectionHeader, classify_line
from .config import LoggingConfig, NestconfSettings, ReaderConfig
from .errors import (
    ConfigError,
    DecodeError,
    FileAccessError,
    InvalidValueError,
    MalformedInputError,
    OutOfRangeError,
)
from .logging_utils import JsonFormatter, configure_logging
from .parser import ConfigParser, load_config, parse_lines, parse_string
from .scanning import find_unquoted, strip_comment, strip_quotes, trim_ends, unescape, unquote
from .source import LineSource, open_line_source
from .table import ConfigTable, Section, SectionGroup
from .values import (
    BOOL,
    FLOAT,
    FLOAT32,
    INT,
    INT8,
    INT16,
    INT32,
    INT64,
    UINT8,
    UINT16,
    UINT32,
    UINT64,
    BoolDecoder,
    FloatDecoder,
    IntegerDecoder,
    ValueDecoder,
    decode,
    decode_optional,
    register_decoder,
)

__all__ = [
    "ConfigTable",
    "SectionGroup",
    "Section",
    "ConfigParser",
    "parse_lines",
    "parse_string",
    "load_config",
    "LineSource",
    "open_line_source",
    "SectionHeader",
    "KeyValue",
    "classify_line",
    "trim_ends",
    "strip_comment",
    "find_unquoted",
    "strip_quotes",
    "unescape",
    "unquote",
    "ValueDecoder",
    "BoolDecoder",
    "IntegerDecoder",
    "FloatDecoder",
    "BOOL",
    "INT",
    "INT8",
    "INT16",
    "INT32",
    "INT64",
    "UINT8",
    "UINT16",
    "UINT32",
    "UINT64",
    "FLOAT",
    "FLOAT32",
    "decode",
    "decode_optional",
    "register_decoder",
    "ConfigError",
    "MalformedInputError",
    "InvalidValueError",
    "OutOfRangeError",
    "DecodeError",
    "FileAccessError",
    "LoggingConfig",
    "ReaderConfig",
    "NestconfSettings",
    "JsonFormatter",
    "configure_logging",
]
