# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Logger that fans out to several other loggers."""

import inspect
from collections.abc import Iterable
from typing import Any

from .background import run_in_background
from .level import LogLevel
from .logger import Logger
from .options import LoggerOptions


class MultiLogger(Logger):
    """Logger that forwards every call to a list of delegate loggers.

    Calls are issued to the delegates in the order they were supplied.
    Asynchronous delegates are not awaited; each delegate handles its own
    failures.
    """

    def __init__(self, loggers: Iterable[Logger] | None, options: LoggerOptions | None = None):
        """Initialize multi logger.

        Args:
            loggers: Delegate loggers
            options: Options for this logger's own context label

        Raises:
            ValueError: If no delegate list is given
        """
        if loggers is None:
            raise ValueError("MultiLogger requires a list of loggers")
        super().__init__(options)
        self.loggers: tuple[Logger, ...] = tuple(loggers)

    def debug(self, message: str, *args: Any) -> None:
        for delegate in self.loggers:
            delegate.debug(message, *args)

    def info(self, message: str, *args: Any) -> None:
        for delegate in self.loggers:
            delegate.info(message, *args)

    def warn(self, message: str, *args: Any) -> None:
        for delegate in self.loggers:
            delegate.warn(message, *args)

    def error(self, message: str, *args: Any) -> None:
        for delegate in self.loggers:
            delegate.error(message, *args)

    def log(self, level: LogLevel | str, message: str, *args: Any) -> None:
        for delegate in self.loggers:
            result = delegate.log(level, message, *args)
            if inspect.isawaitable(result):
                run_in_background(result)

    def child(self, context: str) -> "MultiLogger":
        """Create a multi logger over the children of every delegate."""
        return MultiLogger(
            [delegate.child(context) for delegate in self.loggers],
            self._options.with_context(context),
        )

    def close(self) -> None:
        """Close every delegate."""
        for delegate in self.loggers:
            delegate.close()
