# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Abstract logger interface."""

import logging
import sys
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any

from .formatting import format_message
from .level import LogLevel, should_log
from .options import LoggerOptions

logger = logging.getLogger(__name__)


class Logger(ABC):
    """Abstract base class for loggers.

    Subclasses implement :meth:`log` and :meth:`child`; the level methods are
    thin wrappers over :meth:`log`. Loggers are immutable: :meth:`child`
    returns a new instance instead of changing this one.
    """

    def __init__(self, options: LoggerOptions | None = None):
        self._options = options if options is not None else LoggerOptions()

    @property
    def options(self) -> LoggerOptions:
        """The options snapshot this logger was built with."""
        return self._options

    @property
    def context(self) -> str:
        """Context label included in every line."""
        return self._options.context

    @property
    def level(self) -> LogLevel:
        """Minimum level this logger emits."""
        return self._options.level

    @abstractmethod
    def log(self, level: LogLevel | str, message: str, *args: Any) -> Any:
        """Log a message at the specified level.

        Args:
            level: The log level
            message: The message, optionally with {placeholders}
            *args: Additional arguments; a leading mapping fills the placeholders
        """
        pass

    @abstractmethod
    def child(self, context: str) -> "Logger":
        """Create a child logger whose context is ``<context>:<suffix>``.

        Args:
            context: Suffix appended to this logger's context

        Returns:
            A new logger of the same kind
        """
        pass

    def debug(self, message: str, *args: Any) -> None:
        """Log a debug-level message."""
        self._emit(LogLevel.DEBUG, message, *args)

    def info(self, message: str, *args: Any) -> None:
        """Log an info-level message."""
        self._emit(LogLevel.INFO, message, *args)

    def warn(self, message: str, *args: Any) -> None:
        """Log a warning-level message."""
        self._emit(LogLevel.WARN, message, *args)

    def warning(self, message: str, *args: Any) -> None:
        """Alias of :meth:`warn`."""
        self.warn(message, *args)

    def error(self, message: str, *args: Any) -> None:
        """Log an error-level message."""
        self._emit(LogLevel.ERROR, message, *args)

    def exception(self, message: str, *args: Any) -> None:
        """Log an error-level message with exception context.

        Intended for use inside an exception handler: the exception being
        handled is appended to the arguments unless it is already one of them.
        """
        exc = sys.exc_info()[1]
        if exc is not None and not any(arg is exc for arg in args):
            args = (*args, exc)
        self.error(message, *args)

    def _emit(self, level: LogLevel, message: str, *args: Any) -> None:
        """Issue a level-method call; backends with asynchronous sinks override this."""
        self.log(level, message, *args)

    def close(self) -> None:
        """Release any resources held by the logger."""

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def capabilities(self) -> dict[str, Callable[..., Any]]:
        """Return the logger operations as a table of bound callables.

        Consumers can copy the table into their own dispatch without depending
        on a concrete backend.
        """
        return {
            "debug": self.debug,
            "info": self.info,
            "warn": self.warn,
            "error": self.error,
            "log": self.log,
            "child": self.child,
        }

    # Helpers shared by the concrete backends

    def _accept(self, level: LogLevel | str) -> LogLevel | None:
        """Return the parsed level if a message at it should be emitted, else None."""
        try:
            parsed = LogLevel.parse(level)
        except ValueError as e:
            logger.warning("Dropping log call: %s", e)
            return None
        # Nothing is ever logged at SILENT; it only exists as a minimum
        if parsed is LogLevel.SILENT or not should_log(parsed, self._options.level):
            return None
        return parsed

    def _timestamp(self) -> str:
        if not self._options.timestamp:
            return ""

        date_format = self._options.formatting.date_format
        if date_format == "epoch":
            return str(int(datetime.now(timezone.utc).timestamp()))
        if date_format == "locale":
            return datetime.now().astimezone().strftime("%c")
        return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")

    def _prefix(self, level: LogLevel) -> str:
        parts = []
        timestamp = self._timestamp()
        if timestamp:
            parts.append(f"[{timestamp}]")
        parts.append(f"[{level.value.upper()}]")
        parts.append(f"[{self._options.context}]")
        return " ".join(parts)

    @staticmethod
    def _format(message: Any, args: tuple[Any, ...]) -> Any:
        """Apply template formatting when the first argument is a mapping."""
        if args and isinstance(args[0], Mapping):
            return format_message(message, args[0])
        return message
