"""Event bus system for synchronous event dispatch.

Events are dispatched immediately to every subscriber of their exact type,
in priority order.

Typical usage example:
    from skyport.core.event_bus import EventBus, EventPriority
    from skyport.airports.events import PlaneLandedEvent

    bus = EventBus()
    bus.subscribe(PlaneLandedEvent, on_landed, EventPriority.HIGH)
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class EventPriority(Enum):
    """Priority levels for event handlers, executed CRITICAL first."""

    CRITICAL = auto()
    HIGH = auto()
    NORMAL = auto()
    LOW = auto()


@dataclass
class Event:
    """Base class for all events.

    Attributes:
        timestamp: Unix timestamp when the event was created.
    """

    timestamp: float = field(default_factory=time.time, kw_only=True)


class EventBus:
    """Central event bus for synchronous event dispatch.

    Handlers with equal priority run in subscription order. An exception
    raised by a handler propagates to the publisher.

    Examples:
        >>> bus = EventBus()
        >>> bus.subscribe(PlaneLandedEvent, lambda event: print(event.plane))
        >>> bus.publish(PlaneLandedEvent(plane=plane, airport=airport))
    """

    def __init__(self) -> None:
        self._handlers: dict[type[Event], list[tuple[Callable[[Any], None], EventPriority]]] = {}

    def subscribe(
        self,
        event_type: type[Event],
        handler: Callable[[Any], None],
        priority: EventPriority = EventPriority.NORMAL,
    ) -> None:
        """Subscribe a handler to an event type.

        Args:
            event_type: The class of event to subscribe to.
            handler: Callable that accepts the event as its only parameter.
            priority: Priority level for this handler.
        """
        handlers = self._handlers.setdefault(event_type, [])
        handlers.append((handler, priority))

        # sort() is stable, so equal priorities keep subscription order
        handlers.sort(key=lambda x: x[1].value)

    def unsubscribe(self, event_type: type[Event], handler: Callable[[Any], None]) -> None:
        """Unsubscribe a handler; a no-op if it is not subscribed."""
        if event_type in self._handlers:
            self._handlers[event_type] = [
                (h, p) for h, p in self._handlers[event_type] if h != handler
            ]

            if not self._handlers[event_type]:
                del self._handlers[event_type]

    def publish(self, event: Event) -> None:
        """Publish an event to all subscribers of its type."""
        for handler, _ in list(self._handlers.get(type(event), [])):
            handler(event)

    def clear(self) -> None:
        """Remove all event handlers."""
        self._handlers.clear()

    def get_subscriber_count(self, event_type: type[Event]) -> int:
        return len(self._handlers.get(event_type, []))
