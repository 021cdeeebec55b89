"""Composition root - wires store, event bus, storage and sync.

Usage:
    async with running_app() as app:
        app.store.consume_meal("1")
        dashboard = await app.home.handle(GetHomeDashboardQuery())
"""

import logging as _logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Optional

from fittrack.application.dashboard.queries import (
    GetHomeDashboardQueryHandler,
    GetProgressDashboardQueryHandler,
)
from fittrack.application.sync import StateSyncService
from fittrack.domain.tracking.core.ports import IKeyValueStorage
from fittrack.domain.tracking.store import FitnessStore
from fittrack.infrastructure.config import Settings
from fittrack.infrastructure.events.in_memory_bus import InMemoryEventBus
from fittrack.infrastructure.persistence.factory import create_storage

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

logger = _logging.getLogger("startup")


def configure_logging(level: str) -> None:
    """Basic logging configuration; unknown level names fall back to INFO."""
    _logging.basicConfig(
        level=getattr(_logging, level.upper(), _logging.INFO),
        format=LOG_FORMAT,
    )


@dataclass
class FitTrackApp:
    """Wired application components."""

    settings: Settings
    store: FitnessStore
    event_bus: InMemoryEventBus
    storage: IKeyValueStorage
    sync: StateSyncService
    home: GetHomeDashboardQueryHandler
    progress: GetProgressDashboardQueryHandler


async def bootstrap(
    settings: Optional[Settings] = None,
    storage: Optional[IKeyValueStorage] = None,
) -> FitTrackApp:
    """Build every component and hydrate the store from storage.

    Args:
        settings: Runtime settings (read from env when omitted)
        storage: Storage override; otherwise chosen by ``create_storage``

    Returns:
        FitTrackApp: Ready-to-use application with sync attached
    """
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    event_bus = InMemoryEventBus()
    storage = storage or create_storage(settings)
    store = FitnessStore(event_bus=event_bus)
    sync = StateSyncService(storage, event_bus)

    restored = await sync.hydrate(store)
    sync.attach()

    logger.info(
        "bootstrap.ready",
        extra={
            "storage_backend": settings.storage_backend,
            "restored_collections": len(restored),
        },
    )

    return FitTrackApp(
        settings=settings,
        store=store,
        event_bus=event_bus,
        storage=storage,
        sync=sync,
        home=GetHomeDashboardQueryHandler(store),
        progress=GetProgressDashboardQueryHandler(store),
    )


@asynccontextmanager
async def running_app(
    settings: Optional[Settings] = None,
    storage: Optional[IKeyValueStorage] = None,
) -> AsyncIterator[FitTrackApp]:
    """Bootstrap the app and flush pending writes on exit."""
    app = await bootstrap(settings, storage)
    try:
        yield app
    finally:
        await app.sync.flush()
        app.sync.detach()
        logger.info("shutdown.flushed")
