# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Log levels and level-gating."""

from enum import Enum


class LogLevel(str, Enum):
    """Severity levels, ordered from least to most severe.

    ``SILENT`` is only meaningful as a minimum level: configuring it turns a
    logger off, but nothing is ever logged *at* it.
    """

    DEBUG = "debug"
    INFO = "info"
    WARN = "warn"
    ERROR = "error"
    SILENT = "silent"

    @classmethod
    def parse(cls, value: "LogLevel | str") -> "LogLevel":
        """Convert an enum member or a case-insensitive level name.

        Args:
            value: LogLevel member or name such as "debug", "INFO" or "warning"

        Returns:
            Matching LogLevel

        Raises:
            ValueError: If the name is not a known level
        """
        if isinstance(value, LogLevel):
            return value
        if isinstance(value, str):
            normalized = value.strip().lower()
            if normalized == "warning":
                normalized = "warn"
            for level in cls:
                if level.value == normalized:
                    return level
        raise ValueError(
            f"Invalid log level: {value!r}. Must be one of {[level.value for level in cls]}"
        )


# Higher number = more severe
LOG_LEVEL_VALUES: dict[LogLevel, int] = {
    LogLevel.DEBUG: 0,
    LogLevel.INFO: 1,
    LogLevel.WARN: 2,
    LogLevel.ERROR: 3,
    LogLevel.SILENT: 4,
}


def should_log(message_level: LogLevel | str, minimum_level: LogLevel | str) -> bool:
    """Return True if a message at ``message_level`` passes ``minimum_level``."""
    return LOG_LEVEL_VALUES[LogLevel.parse(message_level)] >= LOG_LEVEL_VALUES[LogLevel.parse(minimum_level)]
