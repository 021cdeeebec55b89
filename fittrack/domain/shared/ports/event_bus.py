"""Event bus port (interface).

Defines contract for event publishing and subscription.
Follows the Dependency Inversion Principle: domain defines the port,
infrastructure provides the implementation.

Unlike a request/response backend, the tracking store is mutated from a
single UI thread one action at a time, so handlers are plain synchronous
callables. Handlers that need I/O schedule it themselves.
"""

from typing import Callable, Protocol, Type, TypeVar

from fittrack.domain.tracking.core.events.base import DomainEvent

# Type variable for domain events
TEvent = TypeVar("TEvent", bound=DomainEvent)

# Event handler type: function that takes an event and returns None
EventHandler = Callable[[TEvent], None]


class IEventBus(Protocol):
    """
    Interface for event publishing and subscription.

    Example usage (composition root):
        >>> def on_collection_changed(event: CollectionChanged) -> None:
        ...     print(f"{event.collection} changed")
        ...
        >>> event_bus.subscribe(CollectionChanged, on_collection_changed)
        >>> event_bus.publish(CollectionChanged.create("habits", []))
    """

    def subscribe(
        self,
        event_type: Type[TEvent],
        handler: EventHandler[TEvent],
    ) -> None:
        """
        Subscribe a handler to an event type.

        Args:
            event_type: Type of event to listen for (e.g., CollectionChanged)
            handler: Function to call when event is published
        """
        ...

    def publish(self, event: TEvent) -> None:
        """
        Publish an event to all subscribed handlers.

        Args:
            event: Domain event to publish

        Note:
            - Handlers are called in subscription order
            - If a handler fails, other handlers still execute
            - Failed handlers are logged, never raised to the publisher
        """
        ...

    def unsubscribe(
        self,
        event_type: Type[TEvent],
        handler: EventHandler[TEvent],
    ) -> bool:
        """
        Unsubscribe a handler from an event type.

        Returns:
            True if handler was found and removed, False otherwise
        """
        ...

    def clear(self) -> None:
        """Clear all event subscriptions."""
        ...
