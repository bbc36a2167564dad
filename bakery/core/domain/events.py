"""
Base Domain Event Classes for Domain-Driven Design

Domain Events represent significant business occurrences. Here they carry
order and custom order changes to the notification collaborator.
"""

import logging
from abc import ABC
from dataclasses import dataclass, field
from datetime import UTC, datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Callable, Coroutine
from uuid import UUID, uuid4

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DomainEvent(ABC):
    """
    Base class for all domain events.

    Domain events are immutable records of something that happened
    in the domain.

    Example:
        ```python
        @dataclass(frozen=True)
        class OrderPlaced(DomainEvent):
            order_id: UUID | None = None
            order_number: str = ""
            total: Decimal = Decimal("0")
        ```
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    version: int = field(default=1)

    @property
    def event_type(self) -> str:
        """Get the event type name (class name)."""
        return self.__class__.__name__

    def to_dict(self) -> dict[str, Any]:
        """Convert event to a JSON-friendly dictionary."""
        result: dict[str, Any] = {
            "event_id": str(self.event_id),
            "event_type": self.event_type,
            "occurred_at": self.occurred_at.isoformat(),
            "version": self.version,
        }
        for key, value in self.__dict__.items():
            if key in result:
                continue
            if isinstance(value, datetime):
                result[key] = value.isoformat()
            elif isinstance(value, UUID):
                result[key] = str(value)
            elif isinstance(value, Decimal):
                result[key] = float(value)
            elif isinstance(value, Enum):
                result[key] = value.value
            else:
                result[key] = value
        return result


# Type aliases for event handlers
EventHandler = Callable[[DomainEvent], Coroutine[Any, Any, None]]


class DomainEventPublisher:
    """
    Simple in-memory domain event publisher.

    Handlers run after the originating transaction has committed, so a
    failing handler is logged and never reaches the caller.
    """

    _handlers: dict[str, list[EventHandler]] = {}

    @classmethod
    def subscribe(cls, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """
        Subscribe to an event type.

        Args:
            event_type: Type of event to subscribe to
            handler: Async handler function
        """
        cls._handlers.setdefault(event_type.__name__, []).append(handler)

    @classmethod
    async def publish(cls, event: DomainEvent) -> None:
        """Publish a domain event to all subscribers."""
        event_name = event.event_type
        for handler in cls._handlers.get(event_name, []):
            try:
                await handler(event)
            except Exception as e:
                logger.error(f"Error in event handler for {event_name}: {e}", exc_info=True)

    @classmethod
    async def publish_all(cls, events: list[DomainEvent]) -> None:
        """Publish multiple events in order."""
        for event in events:
            await cls.publish(event)

    @classmethod
    def clear_handlers(cls) -> None:
        """Clear all event handlers (useful for testing)."""
        cls._handlers.clear()
