"""Storage Factory for Persistence Layer.

Environment-based storage selection with in-memory as the safe default.
Strategy:
- .env (device/runtime): FITTRACK_STORAGE_BACKEND=jsonfile
- tests: FITTRACK_STORAGE_BACKEND=inmemory (fast, isolated)
- Default: inmemory

Usage:
    from fittrack.infrastructure.persistence.factory import create_storage

    storage = create_storage()  # inmemory or jsonfile based on env
"""

from typing import Optional

from fittrack.domain.tracking.core.ports.storage import IKeyValueStorage
from fittrack.infrastructure.config import (
    STORAGE_BACKEND_INMEMORY,
    STORAGE_BACKEND_JSONFILE,
    Settings,
)
from fittrack.infrastructure.persistence.in_memory.key_value_storage import (
    InMemoryKeyValueStorage,
)
from fittrack.infrastructure.persistence.json_file.key_value_storage import (
    JsonFileKeyValueStorage,
)


def create_storage(settings: Optional[Settings] = None) -> IKeyValueStorage:
    """Create storage based on settings (read from env when omitted).

    Values of FITTRACK_STORAGE_BACKEND:
        - "inmemory": transient in-memory storage (default)
        - "jsonfile": one JSON file per collection under FITTRACK_DATA_DIR

    Returns:
        IKeyValueStorage: Storage instance

    Raises:
        ValueError: If the backend name is unknown
    """
    settings = settings or Settings.from_env()
    backend = settings.storage_backend.lower()

    if backend == STORAGE_BACKEND_JSONFILE:
        return JsonFileKeyValueStorage(settings.data_dir)
    if backend == STORAGE_BACKEND_INMEMORY:
        return InMemoryKeyValueStorage()

    raise ValueError(
        f"Unknown FITTRACK_STORAGE_BACKEND '{settings.storage_backend}'. "
        f"Use '{STORAGE_BACKEND_INMEMORY}' or '{STORAGE_BACKEND_JSONFILE}'."
    )
