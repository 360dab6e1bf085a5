# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Structured logging with pluggable backends and hierarchical context.

A single :class:`Logger` interface is implemented by five backends: console,
rotating file, event bus, fan-out (multi) and null. Loggers are immutable;
``child()`` returns a new logger whose context extends the parent's with
``:<suffix>``.

Example:
    >>> from contextlog import LoggerOptions, create_logger
    >>>
    >>> logger = create_logger("console", LoggerOptions(level="debug", context="ingestion"))
    >>> logger.info("Fetched {count} messages from {source}", {"count": 12, "source": "imap"})
    >>>
    >>> worker_logger = logger.child("worker-1")  # context "ingestion:worker-1"
    >>> worker_logger.warn("Retrying")
"""

__version__ = "0.1.0"

from .background import flush_background, flush_pending, run_in_background
from .colors import (
    Colors,
    has_ansi_color_codes,
    strip_ansi_color_codes,
    strip_colors,
    strip_colors_from_args,
)
from .console_logger import ConsoleLogger
from .event_bus import EventBus, InMemoryEventBus, LogEvent
from .event_logger import EventLogger
from .factory import LoggerType, create_logger, is_silent, options_from_env
from .file_logger import FileLogger, RotatingFileSink
from .formatting import format_message
from .level import LOG_LEVEL_VALUES, LogLevel, should_log
from .logger import Logger
from .multi_logger import MultiLogger
from .null_logger import NullLogger
from .options import FileLoggerOptions, FormattingOptions, LoggerOptions

__all__ = [
    "__version__",
    "Colors",
    "ConsoleLogger",
    "EventBus",
    "EventLogger",
    "FileLogger",
    "FileLoggerOptions",
    "FormattingOptions",
    "InMemoryEventBus",
    "LOG_LEVEL_VALUES",
    "LogEvent",
    "LogLevel",
    "Logger",
    "LoggerOptions",
    "LoggerType",
    "MultiLogger",
    "NullLogger",
    "RotatingFileSink",
    "create_logger",
    "flush_background",
    "flush_pending",
    "format_message",
    "has_ansi_color_codes",
    "is_silent",
    "options_from_env",
    "run_in_background",
    "should_log",
    "strip_ansi_color_codes",
    "strip_colors",
    "strip_colors_from_args",
]
