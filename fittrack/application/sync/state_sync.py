"""StateSyncService - keeps key/value storage in step with the store.

Startup: ``hydrate`` loads every collection key once and restores what it
finds into the store. Runtime: ``attach`` subscribes to ``CollectionChanged``;
each event queues the latest document for its key and, when an event loop
is running, starts a background writer for that key. ``flush`` waits for
all writers and writes whatever is still queued.

Storage failures are logged and dropped. The store's in-memory state stays
authoritative for the session whatever happens to a save.
"""

import asyncio
import logging
from typing import Any, Optional

from fittrack.domain.shared.ports.event_bus import IEventBus
from fittrack.domain.tracking.core.events import CollectionChanged
from fittrack.domain.tracking.core.exceptions import CorruptDocumentError
from fittrack.domain.tracking.core.ports import IKeyValueStorage
from fittrack.domain.tracking.core.value_objects import CollectionKey
from fittrack.domain.tracking.store import FitnessStore

logger = logging.getLogger(__name__)


class StateSyncService:
    """Persist store collections through an ``IKeyValueStorage``.

    Writes for the same key are serialised and coalesced: while a save is
    in flight only the most recent document is kept for the next one.

    Example:
        >>> sync = StateSyncService(storage, bus)
        >>> await sync.hydrate(store)
        >>> sync.attach()
        >>> store.add_habit(HabitDraft(name="Read", target=5))
        >>> await sync.flush()
    """

    def __init__(self, storage: IKeyValueStorage, event_bus: IEventBus):
        self._storage = storage
        self._event_bus = event_bus
        self._pending: dict[str, Any] = {}
        self._writers: dict[str, "asyncio.Task[None]"] = {}
        self._attached = False

    @property
    def pending_keys(self) -> list[str]:
        """Keys with a document queued but not yet written."""
        return list(self._pending)

    async def hydrate(self, store: FitnessStore) -> list[str]:
        """Restore every stored collection into the store.

        Absent keys keep the store's current (seed) value. Documents that
        cannot be read or decoded are logged and skipped the same way.

        Args:
            store: Store to restore into

        Returns:
            list[str]: Keys restored from storage
        """
        restored: list[str] = []
        for key in CollectionKey:
            try:
                document = await self._storage.load(key.value)
            except CorruptDocumentError as e:
                logger.warning(
                    "Unreadable collection document, keeping defaults",
                    extra={"collection": key.value, "reason": e.reason},
                )
                continue
            except Exception as e:
                logger.error(
                    f"Failed to load collection: {e}",
                    extra={"collection": key.value},
                    exc_info=True,
                )
                continue

            if document is None:
                continue

            try:
                store.restore(key, document)
            except CorruptDocumentError as e:
                logger.warning(
                    "Invalid collection document, keeping defaults",
                    extra={"collection": key.value, "reason": e.reason},
                )
                continue
            restored.append(key.value)

        logger.info("Store hydrated", extra={"restored": restored})
        return restored

    def attach(self) -> None:
        """Start listening for collection changes. Idempotent."""
        if self._attached:
            return
        self._event_bus.subscribe(CollectionChanged, self._on_collection_changed)
        self._attached = True

    def detach(self) -> None:
        if not self._attached:
            return
        self._event_bus.unsubscribe(CollectionChanged, self._on_collection_changed)
        self._attached = False

    async def flush(self) -> None:
        """Wait for in-flight writes, then write every queued document."""
        while self._writers or self._pending:
            for key in list(self._pending):
                if key not in self._writers:
                    self._writers[key] = asyncio.ensure_future(self._write_latest(key))
            await asyncio.gather(*list(self._writers.values()))

    def _on_collection_changed(self, event: CollectionChanged) -> None:
        self._pending[event.collection] = event.document
        if event.collection in self._writers:
            return

        loop = self._running_loop()
        if loop is None:
            # No loop: the document waits for flush()
            return

        self._writers[event.collection] = loop.create_task(self._write_latest(event.collection))

    async def _write_latest(self, key: str) -> None:
        try:
            while key in self._pending:
                document = self._pending.pop(key)
                await self._save(key, document)
        finally:
            self._writers.pop(key, None)

    async def _save(self, key: str, document: Any) -> None:
        try:
            await self._storage.save(key, document)
        except Exception as e:
            logger.error(
                f"Failed to save collection: {e}",
                extra={"collection": key},
                exc_info=True,
            )
            return
        logger.debug("Collection saved", extra={"collection": key})

    @staticmethod
    def _running_loop() -> Optional[asyncio.AbstractEventLoop]:
        try:
            return asyncio.get_running_loop()
        except RuntimeError:
            return None
