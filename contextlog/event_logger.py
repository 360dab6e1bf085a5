# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Event logger publishing log entries to a message bus."""

import inspect
import logging
from typing import Any

from .background import run_in_background
from .colors import strip_ansi_color_codes, strip_colors_from_args
from .event_bus import EventBus, LogEvent
from .level import LogLevel
from .logger import Logger
from .options import LoggerOptions

logger = logging.getLogger(__name__)


class EventLogger(Logger):
    """Logger that publishes each entry as a :class:`LogEvent`.

    Events have type ``logger.<level>`` and carry the formatted message and
    the color-stripped arguments. Colorization is always off since consumers
    are not terminals.

    :meth:`log` is a coroutine for callers that want to wait for the publish;
    the level methods (``info`` etc.) fire and forget it and return
    immediately, also from synchronous code (see :mod:`contextlog.background`).
    A failed publish is logged once through this module's logger and dropped.

    Example:
        >>> bus = InMemoryEventBus()
        >>> log = EventLogger(bus, LoggerOptions(context="billing"))
        >>> await log.log("info", "Invoice {id} sent", {"id": 42})
        >>> bus.published_events[0].data["message"]
        'Invoice 42 sent'
    """

    def __init__(self, event_bus: EventBus | None, options: LoggerOptions | None = None):
        """Initialize event logger.

        Args:
            event_bus: Bus to publish events to; anything with a ``publish(event)``
                method returning an awaitable (or None) is accepted
            options: Logger options

        Raises:
            ValueError: If no event bus is given
        """
        if event_bus is None:
            raise ValueError("EventLogger requires an event bus")
        super().__init__((options if options is not None else LoggerOptions()).without_colors())
        self.event_bus = event_bus

    def _build_event(self, level: LogLevel, message: Any, args: tuple[Any, ...]) -> LogEvent:
        return LogEvent(
            type=f"logger.{level.value}",
            source=self.context,
            data={
                "level": level.value,
                "message": strip_ansi_color_codes(self._format(message, args)),
                "args": strip_colors_from_args(args),
            },
        )

    async def log(self, level: LogLevel | str, message: str, *args: Any) -> None:
        """Publish a log event.

        Completes when the bus has accepted or rejected the event; never raises.
        """
        emit_level = self._accept(level)
        if emit_level is None:
            return

        try:
            event = self._build_event(emit_level, message, args)
            result = self.event_bus.publish(event)
            if inspect.isawaitable(result):
                await result
        except Exception as e:
            # Don't let logging errors cause application failures
            logger.error("Failed to publish log event: %s", e)

    def _emit(self, level: LogLevel, message: str, *args: Any) -> None:
        if self._accept(level) is None:
            return
        run_in_background(self.log(level, message, *args))

    def child(self, context: str) -> "EventLogger":
        """Create a child logger publishing to the same bus."""
        return EventLogger(self.event_bus, self._options.with_context(context))
