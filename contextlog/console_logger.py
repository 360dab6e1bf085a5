# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Console logger writing human-readable lines to stdout/stderr."""

import logging
import sys
from typing import Any

from .colors import Colors, strip_ansi_color_codes, strip_colors_from_args
from .formatting import render_value
from .level import LogLevel
from .logger import Logger
from .options import LoggerOptions

logger = logging.getLogger(__name__)

LEVEL_COLORS = {
    LogLevel.DEBUG: Colors.gray,
    LogLevel.INFO: Colors.cyan,
    LogLevel.WARN: Colors.yellow,
    LogLevel.ERROR: Colors.red,
}


def render_arg(arg: Any) -> str:
    """Render a positional log argument for a console line."""
    if isinstance(arg, str):
        return arg
    if isinstance(arg, BaseException):
        return f"{type(arg).__name__}: {arg}"
    try:
        return render_value(arg)
    except Exception:
        return repr(arg)


class ConsoleLogger(Logger):
    """Logger that writes to the console.

    Debug and info lines go to stdout, warnings and errors to stderr. When
    colorization is enabled only the ``[timestamp] [LEVEL] [context]`` prefix
    is colored. Color codes already in the message or its arguments are
    stripped.
    """

    def __init__(self, options: LoggerOptions | None = None):
        """Initialize console logger.

        Args:
            options: Logger options; defaults to LoggerOptions()
        """
        super().__init__(options)

    def _colorize(self, text: str, level: LogLevel) -> str:
        if not self._options.formatting.colorize:
            return text
        color = LEVEL_COLORS.get(level)
        return f"{color}{text}{Colors.reset}" if color else text

    def log(self, level: LogLevel | str, message: str, *args: Any) -> None:
        """Format and write a log line.

        Args:
            level: The log level
            message: The message, optionally with {placeholders}
            *args: Additional arguments; a leading mapping fills the placeholders
        """
        emit_level = self._accept(level)
        if emit_level is None:
            return

        try:
            formatted = strip_ansi_color_codes(self._format(message, args))
            parts = [self._colorize(self._prefix(emit_level), emit_level), render_arg(formatted)]
            parts.extend(render_arg(arg) for arg in strip_colors_from_args(args))
            line = " ".join(parts)
        except Exception as e:
            line = f"[{emit_level.value.upper()}] [{self.context}] {message!r} (formatting failed: {e})"

        stream = sys.stdout if emit_level in (LogLevel.DEBUG, LogLevel.INFO) else sys.stderr
        try:
            print(line, file=stream, flush=True)
        except (OSError, ValueError) as e:
            # Closed or broken stream
            logger.warning("Console logger could not write to %s: %s", getattr(stream, "name", stream), e)

    def child(self, context: str) -> "ConsoleLogger":
        """Create a child console logger with the extended context."""
        return ConsoleLogger(self._options.with_context(context))
