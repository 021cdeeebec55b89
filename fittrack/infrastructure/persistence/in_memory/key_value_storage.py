"""In-memory implementation of IKeyValueStorage for testing."""

import json
from typing import Any, Optional

from fittrack.domain.tracking.core.ports.storage import IKeyValueStorage


class InMemoryKeyValueStorage(IKeyValueStorage):
    """
    In-memory implementation of key/value storage.

    Values are kept as JSON strings, so what comes back from ``load`` is
    always a fresh copy and anything that is not JSON-serializable fails
    on ``save`` exactly as it would on disk. Data is lost when the
    application stops.
    """

    def __init__(self) -> None:
        """Initialize empty storage."""
        self._values: dict[str, str] = {}

    async def load(self, key: str) -> Optional[Any]:
        """
        Load value by key.

        Returns:
            Decoded copy of the stored value, None if absent
        """
        raw = self._values.get(key)
        return json.loads(raw) if raw is not None else None

    async def save(self, key: str, value: Any) -> None:
        """
        Save value under key.

        Raises:
            TypeError: If value is not JSON-serializable
        """
        self._values[key] = json.dumps(value)

    def keys(self) -> list[str]:
        """Stored keys in insertion order."""
        return list(self._values)

    def clear(self) -> None:
        """
        Clear all values from memory.

        Useful for test cleanup.
        """
        self._values.clear()

    def count(self) -> int:
        """Number of stored keys."""
        return len(self._values)
