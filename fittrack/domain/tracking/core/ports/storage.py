"""IKeyValueStorage port - persistence bridge interface."""

from abc import ABC, abstractmethod
from typing import Any, Optional


class IKeyValueStorage(ABC):
    """Port for key/value persistence of collection documents.

    Values are plain JSON-compatible structures (dicts, lists, numbers,
    strings). Infrastructure adapters decide where they live; the domain
    only loads once per key at startup and saves after every change.
    """

    @abstractmethod
    async def load(self, key: str) -> Optional[Any]:
        """Load the value stored under key.

        Args:
            key: Collection key

        Returns:
            Optional[Any]: Stored value, None if absent
        """
        pass

    @abstractmethod
    async def save(self, key: str, value: Any) -> None:
        """Store value under key, replacing any previous value.

        Args:
            key: Collection key
            value: JSON-compatible value
        """
        pass
