"""
JSON file implementation of IKeyValueStorage.

Each key is stored as ``<directory>/<key>.json``. Writes go to a temporary
file in the same directory and are moved into place with ``os.replace`` so
a crash mid-write never leaves a truncated document behind. File I/O runs in
a worker thread to keep the event loop free.
"""

import asyncio
import json
import os
import tempfile
from pathlib import Path
from typing import Any, Optional, Union

import structlog
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from fittrack.domain.tracking.core.exceptions.domain_errors import CorruptDocumentError
from fittrack.domain.tracking.core.ports.storage import IKeyValueStorage

logger = structlog.get_logger(__name__)


class JsonFileKeyValueStorage(IKeyValueStorage):
    """Key/value storage backed by one JSON file per key.

    Example:
        >>> storage = JsonFileKeyValueStorage(Path("~/.fittrack").expanduser())
        >>> await storage.save("dailyCalories", 2200)
        >>> await storage.load("dailyCalories")
        2200
    """

    SUFFIX = ".json"

    def __init__(self, directory: Union[str, Path]) -> None:
        """Initialize storage.

        Args:
            directory: Directory holding the documents (created on first save)
        """
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        """File path of a key."""
        return self.directory / f"{key}{self.SUFFIX}"

    async def load(self, key: str) -> Optional[Any]:
        """Load a document.

        Returns:
            Decoded document, None if the file does not exist

        Raises:
            CorruptDocumentError: If the file is not valid JSON
            OSError: If the file exists but cannot be read
        """
        return await asyncio.to_thread(self._read, key)

    async def save(self, key: str, value: Any) -> None:
        """Write a document atomically.

        Raises:
            TypeError: If value is not JSON-serializable
            OSError: If the write still fails after retries
        """
        payload = json.dumps(value, ensure_ascii=False, indent=2)
        await asyncio.to_thread(self._write, key, payload)
        logger.debug("Document saved", key=key, bytes=len(payload))

    def _read(self, key: str) -> Optional[Any]:
        path = self.path_for(key)
        if not path.exists():
            logger.debug("Document absent", key=key)
            return None
        try:
            with path.open("r", encoding="utf-8") as fh:
                return json.load(fh)
        except json.JSONDecodeError as e:
            logger.warning("Document is not valid JSON", key=key, path=str(path), error=str(e))
            raise CorruptDocumentError(key, str(e)) from e

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.1, min=0.1, max=1),
        retry=retry_if_exception_type(OSError),
        reraise=True,
    )
    def _write(self, key: str, payload: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self.directory, prefix=f".{key}.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, self.path_for(key))
        except OSError:
            logger.warning("Document write failed", key=key, directory=str(self.directory))
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
