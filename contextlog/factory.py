# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Factory functions for creating logger instances."""

import os
from collections.abc import Iterable, Mapping
from enum import Enum

from .console_logger import ConsoleLogger
from .event_bus import EventBus
from .event_logger import EventLogger
from .file_logger import FileLogger
from .logger import Logger
from .multi_logger import MultiLogger
from .null_logger import NullLogger
from .options import DEFAULT_CONTEXT, DEFAULT_FILE_PATH, FileLoggerOptions, LoggerOptions

_TRUTHY = ("true", "1", "yes", "on")


class LoggerType(str, Enum):
    """Available logger backends."""

    CONSOLE = "console"
    FILE = "file"
    EVENT = "event"
    MULTI = "multi"
    NULL = "null"


def _default(value: str | None, environ: Mapping[str, str], env_var: str, fallback: str) -> str:
    """Helper to pick an explicit value, then env var, then fallback."""
    return value or environ.get(env_var) or fallback


def is_silent(environ: Mapping[str, str] | None = None) -> bool:
    """Return True if LOG_SILENT asks for all logging to be discarded."""
    environ = os.environ if environ is None else environ
    return environ.get("LOG_SILENT", "").strip().lower() in _TRUTHY


def options_from_env(
    logger_type: LoggerType | str = LoggerType.CONSOLE,
    environ: Mapping[str, str] | None = None,
) -> LoggerOptions:
    """Build logger options from LOG_LEVEL, LOG_CONTEXT and (for files) LOG_FILE.

    Raises:
        ValueError: If LOG_LEVEL is not a valid level
    """
    environ = os.environ if environ is None else environ
    level = _default(None, environ, "LOG_LEVEL", "info")
    context = _default(None, environ, "LOG_CONTEXT", DEFAULT_CONTEXT)

    if LoggerType(logger_type) is LoggerType.FILE:
        file_path = _default(None, environ, "LOG_FILE", DEFAULT_FILE_PATH)
        return FileLoggerOptions(level=level, context=context, file_path=file_path)  # type: ignore[arg-type]
    return LoggerOptions(level=level, context=context)  # type: ignore[arg-type]


def create_logger(
    logger_type: LoggerType | str | None = None,
    options: LoggerOptions | None = None,
    *,
    event_bus: EventBus | None = None,
    loggers: Iterable[Logger] | None = None,
    environ: Mapping[str, str] | None = None,
) -> Logger:
    """Factory function to create a logger instance.

    Every call builds a fresh logger; to switch backends, call it again with a
    different type.

    Args:
        logger_type: Backend to create. Options: "console", "file", "event",
            "multi", "null". Defaults to LOG_TYPE env or "console".
        options: Logger options. Defaults are read from LOG_LEVEL, LOG_CONTEXT
            and, for the file backend, LOG_FILE.
        event_bus: Bus for the "event" backend
        loggers: Delegates for the "multi" backend
        environ: Environment to read defaults from (defaults to os.environ)

    Returns:
        Logger instance; a NullLogger whenever LOG_SILENT is truthy

    Raises:
        ValueError: If logger_type is not recognized, or the event/multi
            backend is missing its bus/delegates

    Example:
        >>> # Console logger with DEBUG level
        >>> logger = create_logger("console", LoggerOptions(level="debug", context="my-service"))
        >>>
        >>> # Rotating file logger
        >>> logger = create_logger("file", FileLoggerOptions(file_path="logs/app.log"))
        >>>
        >>> # Console and file together
        >>> logger = create_logger("multi", loggers=[create_logger("console"), create_logger("file")])
    """
    environ = os.environ if environ is None else environ
    type_name = _default(logger_type, environ, "LOG_TYPE", LoggerType.CONSOLE.value).lower()

    try:
        backend = LoggerType(type_name)
    except ValueError:
        raise ValueError(
            f"Unknown logger_type: {type_name}. "
            f"Must be one of: {', '.join(t.value for t in LoggerType)}"
        ) from None

    if is_silent(environ):
        return NullLogger(options)

    if options is None:
        options = options_from_env(backend, environ)

    if backend is LoggerType.CONSOLE:
        return ConsoleLogger(options)
    if backend is LoggerType.FILE:
        return FileLogger(options)
    if backend is LoggerType.EVENT:
        return EventLogger(event_bus, options)
    if backend is LoggerType.MULTI:
        return MultiLogger(loggers, options)
    return NullLogger(options)
