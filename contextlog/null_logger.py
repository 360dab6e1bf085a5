# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Null logger implementation that discards everything."""

from typing import Any

from .level import LogLevel
from .logger import Logger
from .options import LoggerOptions


class NullLogger(Logger):
    """Logger that does nothing.

    Useful for tests or for turning logging off. Children are the logger
    itself, since a child of a no-op is indistinguishable from it.
    """

    def __init__(self, options: LoggerOptions | None = None):
        super().__init__(options)

    def debug(self, message: str, *args: Any) -> None:
        pass

    def info(self, message: str, *args: Any) -> None:
        pass

    def warn(self, message: str, *args: Any) -> None:
        pass

    def warning(self, message: str, *args: Any) -> None:
        pass

    def error(self, message: str, *args: Any) -> None:
        pass

    def exception(self, message: str, *args: Any) -> None:
        pass

    def log(self, level: LogLevel | str, message: str, *args: Any) -> None:
        pass

    def child(self, context: str) -> "NullLogger":
        return self
