"""CollectionChanged domain event."""

from dataclasses import dataclass
from typing import Any

from .base import DomainEvent, local_now, new_event_id


@dataclass(frozen=True)
class CollectionChanged(DomainEvent):
    """Event emitted after a store mutation changed a top-level collection.

    Carries the full JSON-compatible document of the collection, so a
    subscriber can persist it under ``collection`` without reading the
    store back.

    Attributes:
        collection: Collection key (e.g. ``"completedWorkouts"``)
        document: Serialized collection as plain JSON-compatible data
    """

    collection: str
    document: Any

    @classmethod
    def create(cls, collection: str, document: Any) -> "CollectionChanged":
        """Factory method to create event.

        Args:
            collection: Collection key
            document: Serialized collection

        Returns:
            CollectionChanged: New event
        """
        return cls(
            event_id=new_event_id(),
            occurred_at=local_now(),
            collection=collection,
            document=document,
        )
