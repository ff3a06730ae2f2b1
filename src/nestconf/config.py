"""Runtime settings for the nestconf tools."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .parser import load_config
from .scanning import DEFAULT_TRIM_CHARS
from .table import ConfigTable


class LoggingConfig(BaseModel):
    """Where parser and CLI log records go, and in what shape."""

    # Parser events are DEBUG, file loads INFO; the CLI stays quiet by default.
    level: str = Field(default="WARNING", description="Root logger level name")
    # One JSON object per record, extra= fields included.
    json_format: bool = Field(default=False, description="Write records as JSON")
    # Unset means the CLI's stderr.
    log_file: str | None = Field(default=None, description="Write records to this file instead of stderr")
    max_bytes: int = Field(default=1_000_000, description="Rotate the log file past this many bytes")
    backup_count: int = Field(default=3, description="Rotated log files kept beside log_file")


class ReaderConfig(BaseModel):
    """How configuration files are read and tokenized."""

    encoding: str = Field(default="utf-8", description="Text encoding of config files")
    errors: str = Field(default="strict", description="Codec error handler")
    trim_chars: str = Field(default=DEFAULT_TRIM_CHARS, description="Characters trimmed from line and token ends")


class NestconfSettings(BaseSettings):
    """Settings loaded from env or from a nestconf file."""

    # Environment keys use NESTCONF_ prefix and "__" nesting.
    model_config = SettingsConfigDict(env_prefix="NESTCONF_", env_nested_delimiter="__", extra="ignore")

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    reader: ReaderConfig = Field(default_factory=ReaderConfig)

    def load(self, path: str | Path) -> ConfigTable:
        """Parse ``path`` using the reader settings."""

        return load_config(
            path,
            encoding=self.reader.encoding,
            errors=self.reader.errors,
            trim_chars=self.reader.trim_chars,
        )

    @classmethod
    def from_config_file(cls, path: str | Path) -> "NestconfSettings":
        # Each nested model is read from the default subsection of its group.
        table = load_config(path)
        data: dict[str, Any] = {}
        for name in cls.model_fields:
            section = table.section(name, "")
            if len(section):
                data[name] = section.to_dict()
        return cls(**data)
