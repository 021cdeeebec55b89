"""Unit test configuration.

Shared fixtures for store, bus and clock-dependent tests. Nothing here
touches the filesystem except through pytest's ``tmp_path``.
"""

from datetime import datetime, timezone
from typing import List

import pytest

from fittrack.domain.tracking.core.events import CollectionChanged
from fittrack.domain.tracking.core.value_objects import EntityIdGenerator
from fittrack.domain.tracking.store import FitnessStore
from fittrack.infrastructure.events.in_memory_bus import InMemoryEventBus

# Wednesday
REFERENCE = datetime(2025, 10, 22, 15, 30)


@pytest.fixture
def reference() -> datetime:
    """Fixed "now" used by aggregation tests (a Wednesday afternoon)."""
    return REFERENCE


@pytest.fixture
def aware_reference() -> datetime:
    """The same instant as ``reference``, expressed as an aware UTC datetime."""
    return REFERENCE.astimezone(timezone.utc)


@pytest.fixture
def event_bus() -> InMemoryEventBus:
    """Fixture providing clean InMemoryEventBus."""
    return InMemoryEventBus()


@pytest.fixture
def published(event_bus: InMemoryEventBus) -> List[CollectionChanged]:
    """Collect every CollectionChanged published on the bus."""
    events: List[CollectionChanged] = []
    event_bus.subscribe(CollectionChanged, events.append)
    return events


@pytest.fixture
def store(event_bus: InMemoryEventBus) -> FitnessStore:
    """Seeded store with a fixed clock and deterministic ids."""
    counter = iter(range(1_000_000))
    return FitnessStore(
        event_bus=event_bus,
        id_generator=EntityIdGenerator(clock=lambda: 1_761_000_000 + next(counter)),
        clock=lambda: REFERENCE,
    )
