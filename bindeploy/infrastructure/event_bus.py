"""
Event Bus Infrastructure

Architectural Intent:
- In-memory event bus implementation for publishing domain events
- Supports async subscription handlers
- A failing handler is logged and skipped; publish never raises
"""

import json
import logging
from typing import Callable, Awaitable
from bindeploy.domain.events.event_base import DomainEvent

logger = logging.getLogger(__name__)


class EventBus:
    def __init__(self) -> None:
        self._handlers: dict[type, list[Callable[[DomainEvent], Awaitable[None]]]] = {}

    async def publish(self, events: list[DomainEvent]) -> None:
        for event in events:
            event_type = type(event)
            for handler in self._handlers.get(event_type, []):
                try:
                    await handler(event)
                except Exception:
                    logger.exception(
                        "Event handler %r failed for %s", handler, event.event_type
                    )

    def subscribe(
        self, event_type: type, handler: Callable[[DomainEvent], Awaitable[None]]
    ) -> None:
        if event_type not in self._handlers:
            self._handlers[event_type] = []
        self._handlers[event_type].append(handler)


async def log_event(event: DomainEvent) -> None:
    """Audit trail: one INFO line per deployment event."""
    logger.info("%s", json.dumps(event.to_dict()))
