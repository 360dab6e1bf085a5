# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Message template formatting.

Messages may contain ``{placeholders}`` that are filled in from a context
object, typically the first argument of a log call::

    >>> format_message("User {user.name} from {ip}", {"user": {"name": "John"}, "ip": "1.2.3.4"})
    'User John from 1.2.3.4'

Placeholders that cannot be resolved are left in the output untouched.
"""

import json
import re
from collections.abc import Mapping
from typing import Any

_PLACEHOLDER_PATTERN = re.compile(r"\{([^}]+)\}")

_MISSING = object()


def _resolve_segment(value: Any, segment: str) -> Any:
    if value is None or isinstance(value, (str, bytes, int, float, bool)):
        return _MISSING

    if isinstance(value, Mapping):
        return value.get(segment, _MISSING)

    if isinstance(value, (list, tuple)):
        if not segment.isdigit():
            return _MISSING
        index = int(segment)
        return value[index] if index < len(value) else _MISSING

    return getattr(value, segment, _MISSING)


def _resolve_path(context: Any, path: str) -> Any:
    value = context
    for segment in path.split("."):
        value = _resolve_segment(value, segment)
        if value is _MISSING:
            break
    return value


def json_default(value: Any) -> str:
    """Fallback for values json.dumps cannot encode natively."""
    if isinstance(value, BaseException):
        return f"{type(value).__name__}: {value}"
    return str(value)


def render_value(value: Any) -> str:
    """Render a resolved placeholder value as text.

    ``None`` becomes ``null`` and booleans become ``true``/``false`` so that
    scalars read the same way as values nested inside JSON-rendered containers.
    """
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (Mapping, list, tuple)):
        try:
            return json.dumps(value, default=json_default)
        except (TypeError, ValueError):
            # Cyclic or otherwise unserializable
            return str(value)
    return str(value)


def format_message(template: Any, context: Any = None) -> Any:
    """Replace ``{dotted.path}`` placeholders in ``template`` with values from ``context``.

    Args:
        template: Message template. Non-string templates are returned unchanged.
        context: Object the placeholder paths are resolved against. Mappings are
            walked by key, lists and tuples by integer index and any other
            object by attribute.

    Returns:
        The formatted message, or ``template`` itself if there is no context
    """
    if context is None or not isinstance(template, str):
        return template

    def _replace(match: re.Match) -> str:
        try:
            value = _resolve_path(context, match.group(1))
            if value is _MISSING:
                return match.group(0)
            return render_value(value)
        except Exception:
            # Misbehaving properties or __str__ keep the placeholder
            return match.group(0)

    return _PLACEHOLDER_PATTERN.sub(_replace, template)
