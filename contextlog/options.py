# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Logger configuration models."""

from dataclasses import dataclass, field, replace
from typing import Literal

from .level import LogLevel

DEFAULT_CONTEXT = "app"
DEFAULT_FILE_PATH = "logs/app.log"
DEFAULT_MAX_SIZE = 10 * 1024 * 1024  # 10 MiB
DEFAULT_MAX_FILES = 5

DateFormat = Literal["ISO", "locale", "epoch"]
DATE_FORMATS: tuple[str, ...] = ("ISO", "locale", "epoch")


@dataclass(frozen=True)
class FormattingOptions:
    """Output formatting settings.

    Attributes:
        colorize: Whether to colorize the line prefix (terminal backends only)
        date_format: Timestamp format, one of "ISO", "locale" or "epoch"
    """
    colorize: bool = True
    date_format: DateFormat = "ISO"

    def __post_init__(self) -> None:
        if self.date_format not in DATE_FORMATS:
            raise ValueError(
                f"Invalid date_format: {self.date_format!r}. Must be one of {list(DATE_FORMATS)}"
            )


@dataclass(frozen=True)
class LoggerOptions:
    """Options shared by every logger backend.

    Attributes:
        level: Minimum level to emit (level names are accepted and parsed)
        context: Label identifying the origin of each line
        timestamp: Whether to prefix lines with a timestamp
        formatting: Colorization and date format settings
    """
    level: LogLevel = LogLevel.INFO
    context: str = DEFAULT_CONTEXT
    timestamp: bool = True
    formatting: FormattingOptions = field(default_factory=FormattingOptions)

    def __post_init__(self) -> None:
        object.__setattr__(self, "level", LogLevel.parse(self.level))

    def with_context(self, suffix: str) -> "LoggerOptions":
        """Return a copy whose context is extended with ``suffix``."""
        return replace(self, context=f"{self.context}:{suffix}")

    def without_colors(self) -> "LoggerOptions":
        """Return a copy with colorization turned off."""
        if not self.formatting.colorize:
            return self
        return replace(self, formatting=replace(self.formatting, colorize=False))


@dataclass(frozen=True)
class FileLoggerOptions(LoggerOptions):
    """Options for the file backend.

    Attributes:
        file_path: Path of the active log file
        append: Append to an existing file instead of truncating it
        max_size: Size in bytes at which the file is rotated
        max_files: Number of rotated files to keep (``.1`` to ``.max_files``)
    """
    file_path: str = DEFAULT_FILE_PATH
    append: bool = True
    max_size: int = DEFAULT_MAX_SIZE
    max_files: int = DEFAULT_MAX_FILES

    def __post_init__(self) -> None:
        super().__post_init__()
        if self.max_size <= 0:
            raise ValueError(f"max_size must be positive, got {self.max_size}")
        if self.max_files < 1:
            raise ValueError(f"max_files must be at least 1, got {self.max_files}")
