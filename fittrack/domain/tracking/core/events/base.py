"""Base type for events raised by the tracking store."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID, uuid4


def new_event_id() -> UUID:
    return uuid4()


def local_now() -> datetime:
    """Naive local "now", the same clock entry dates are recorded with."""
    return datetime.now()


@dataclass(frozen=True)
class DomainEvent:
    """Immutable record of a change the store has already applied.

    Attributes:
        event_id: Identifies one publication; bus log lines carry it
        occurred_at: Naive local time the change was applied
    """

    event_id: UUID
    occurred_at: datetime

    @property
    def event_type(self) -> str:
        """Name the event is logged and routed under."""
        return type(self).__name__
