"""Domain events for the tracking context."""

from .base import DomainEvent
from .collection_changed import CollectionChanged

__all__ = [
    "DomainEvent",
    "CollectionChanged",
]
