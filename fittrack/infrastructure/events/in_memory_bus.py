"""In-memory event bus implementation.

Provides an in-memory implementation of IEventBus port.
Handlers are stored in memory and called synchronously in subscription order.
"""

import logging
from typing import Any, Callable, Dict, List, Type, TypeVar

from fittrack.domain.tracking.core.events.base import DomainEvent

logger = logging.getLogger(__name__)

TEvent = TypeVar("TEvent", bound=DomainEvent)


class InMemoryEventBus:
    """
    In-memory implementation of IEventBus port.

    Thread safety: NOT thread-safe (store mutations are serialized by the UI)
    Persistence: Handlers lost on process restart (in-memory only)
    Error handling: Failed handlers log errors but don't prevent other handlers

    Example:
        >>> bus = InMemoryEventBus()
        >>>
        >>> def log_event(event: CollectionChanged) -> None:
        ...     print(f"Changed: {event.collection}")
        >>>
        >>> bus.subscribe(CollectionChanged, log_event)
        >>> bus.publish(CollectionChanged.create("habits", []))
    """

    def __init__(self) -> None:
        """Initialize event bus with empty handler registry."""
        self._handlers: Dict[Type[DomainEvent], List[Callable[[Any], None]]] = {}

    def subscribe(
        self,
        event_type: Type[TEvent],
        handler: Callable[[TEvent], None],
    ) -> None:
        """
        Subscribe a handler to an event type.

        Note:
            - Same handler can be subscribed multiple times (will be called multiple times)
            - Handlers are called in subscription order
        """
        self._handlers.setdefault(event_type, []).append(handler)

        logger.debug(
            "Handler subscribed",
            extra={
                "event_type": event_type.__name__,
                "handler": getattr(handler, "__name__", repr(handler)),
            },
        )

    def publish(self, event: TEvent) -> None:
        """
        Publish an event to all subscribed handlers.

        Note:
            - Handlers are called in subscription order
            - If a handler fails, it logs an error but other handlers still execute
        """
        handlers = list(self._handlers.get(type(event), []))

        if not handlers:
            logger.debug(
                "No handlers for event",
                extra={"event_type": event.event_type},
            )
            return

        logger.debug(
            "Publishing event",
            extra={
                "event_type": event.event_type,
                "event_id": event.event_id,
                "handler_count": len(handlers),
            },
        )

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.error(
                    "Event handler failed",
                    extra={
                        "event_type": event.event_type,
                        "event_id": event.event_id,
                        "handler": getattr(handler, "__name__", repr(handler)),
                        "error": str(e),
                    },
                    exc_info=True,
                )

    def unsubscribe(
        self,
        event_type: Type[TEvent],
        handler: Callable[[TEvent], None],
    ) -> bool:
        """
        Unsubscribe a handler from an event type.

        Returns:
            True if handler was found and removed, False otherwise

        Note:
            - If handler was subscribed multiple times, only first occurrence is removed
        """
        handlers = self._handlers.get(event_type)
        if not handlers or handler not in handlers:
            return False

        handlers.remove(handler)
        logger.debug(
            "Handler unsubscribed",
            extra={
                "event_type": event_type.__name__,
                "handler": getattr(handler, "__name__", repr(handler)),
            },
        )
        return True

    def clear(self) -> None:
        """Clear all event subscriptions (test utility)."""
        self._handlers.clear()
        logger.debug("All event handlers cleared")

    def get_handler_count(self, event_type: Type[TEvent]) -> int:
        """Number of handlers subscribed to an event type."""
        return len(self._handlers.get(event_type, []))
