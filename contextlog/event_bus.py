# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Event bus interface consumed by the event logger, and the log event model."""

import logging
import uuid
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LogEvent:
    """A log entry published as an event.

    Attributes:
        type: Event type, ``logger.<level>``
        source: Context of the logger that produced the entry
        data: ``{"level", "message", "args"}`` payload
        id: Unique event identifier
        timestamp: Time the entry was logged (UTC)
    """
    type: str
    source: str
    data: dict[str, Any]
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict[str, Any]:
        """Return the event as a dictionary with an ISO-8601 timestamp."""
        return {
            "id": self.id,
            "type": self.type,
            "source": self.source,
            "timestamp": self.timestamp.isoformat().replace("+00:00", "Z"),
            "data": self.data,
        }


class EventBus(ABC):
    """Abstract base class for message buses that accept log events."""

    @abstractmethod
    async def publish(self, event: LogEvent) -> None:
        """Publish an event to the bus.

        Args:
            event: The event to publish

        Raises:
            Exception: If publishing fails for any reason
        """
        pass


class InMemoryEventBus(EventBus):
    """Event bus that stores events in memory.

    Useful for testing and for wiring an event logger without a broker.
    Setting ``fail_with`` makes every publish raise that exception.
    """

    def __init__(self, fail_with: Exception | None = None):
        self.published_events: list[LogEvent] = []
        self.fail_with = fail_with

    async def publish(self, event: LogEvent) -> None:
        """Store the event, or raise ``fail_with`` if set."""
        if self.fail_with is not None:
            raise self.fail_with
        self.published_events.append(event)
        logger.debug("InMemoryEventBus: published %s from %s", event.type, event.source)

    def clear_events(self) -> None:
        """Clear all stored events (useful for testing)."""
        self.published_events.clear()

    def get_events(self, event_type: str | None = None) -> list[LogEvent]:
        """Get stored events, optionally filtered by event type.

        Args:
            event_type: Optional event type to filter by, e.g. "logger.error"

        Returns:
            List of published events
        """
        if event_type is None:
            return self.published_events
        return [e for e in self.published_events if e.type == event_type]
