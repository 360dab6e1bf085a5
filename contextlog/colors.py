# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""ANSI color codes and color stripping for non-terminal sinks."""

import re
from collections.abc import Mapping
from typing import Any, Iterable


class Colors:
    """Common ANSI color and style codes for terminal output."""

    reset = "\x1b[0m"
    # Regular colors
    black = "\x1b[30m"
    red = "\x1b[31m"
    green = "\x1b[32m"
    yellow = "\x1b[33m"
    blue = "\x1b[34m"
    magenta = "\x1b[35m"
    cyan = "\x1b[36m"
    white = "\x1b[37m"
    gray = "\x1b[90m"
    # Bright colors
    bright_red = "\x1b[91m"
    bright_green = "\x1b[92m"
    bright_yellow = "\x1b[93m"
    bright_blue = "\x1b[94m"
    bright_magenta = "\x1b[95m"
    bright_cyan = "\x1b[96m"
    bright_white = "\x1b[97m"
    # Text styles
    bold = "\x1b[1m"
    dim = "\x1b[2m"
    italic = "\x1b[3m"
    underline = "\x1b[4m"


# CSI "select graphic rendition" sequences: ESC [ <n>(;<n>)* m
ANSI_COLOR_PATTERN = re.compile(r"\x1b\[\d+(?:;\d+)*m")


def has_ansi_color_codes(text: Any) -> bool:
    """Return True if ``text`` is a string containing ANSI color codes."""
    if not isinstance(text, str):
        return False
    return ANSI_COLOR_PATTERN.search(text) is not None


def strip_ansi_color_codes(text: Any) -> Any:
    """Remove ANSI color codes from a string. Non-strings are returned unchanged."""
    if not isinstance(text, str):
        return text
    # Removing one sequence can splice together another, e.g. "\x1b\x1b[0m[1m"
    count = 1
    while count:
        text, count = ANSI_COLOR_PATTERN.subn("", text)
    return text


def strip_colors(value: Any) -> Any:
    """Strip ANSI color codes from every string inside ``value``.

    Mappings, lists and tuples are rebuilt with their contents stripped.
    Exceptions and any other non-string values are returned as is. A container
    that contains itself is left as is at the point where the cycle closes.

    Args:
        value: Arbitrary log argument

    Returns:
        The value with all nested strings stripped of color codes
    """
    return _strip(value, frozenset())


def _strip(value: Any, ancestors: frozenset[int]) -> Any:
    if value is None:
        return value

    if isinstance(value, str):
        return strip_ansi_color_codes(value)

    if isinstance(value, BaseException) or not isinstance(value, (Mapping, list, tuple)):
        return value

    if id(value) in ancestors:
        return value
    ancestors = ancestors | {id(value)}

    if isinstance(value, Mapping):
        return {key: _strip(item, ancestors) for key, item in value.items()}
    if isinstance(value, list):
        return [_strip(item, ancestors) for item in value]
    return tuple(_strip(item, ancestors) for item in value)


def strip_colors_from_args(args: Iterable[Any]) -> list[Any]:
    """Strip color codes from each positional log argument."""
    return [strip_colors(arg) for arg in args]
