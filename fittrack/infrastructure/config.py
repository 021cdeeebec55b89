"""Configuration utilities for infrastructure layer.

Values come from the environment; a ``.env`` file in the working directory
is loaded first when present (existing environment variables win).
"""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

STORAGE_BACKEND_INMEMORY = "inmemory"
STORAGE_BACKEND_JSONFILE = "jsonfile"


def get_storage_backend() -> str:
    """
    Get storage backend name.

    Returns:
        Backend from FITTRACK_STORAGE_BACKEND, defaults to "inmemory"
    """
    return os.getenv("FITTRACK_STORAGE_BACKEND", STORAGE_BACKEND_INMEMORY).lower()


def get_data_dir() -> Path:
    """
    Get directory for the JSON file backend.

    Expands ``~`` and environment variables in FITTRACK_DATA_DIR.

    Returns:
        Data directory, defaults to ~/.fittrack
    """
    raw = os.getenv("FITTRACK_DATA_DIR", "~/.fittrack")
    return Path(os.path.expandvars(raw)).expanduser()


def get_log_level() -> str:
    """Log level name from LOG_LEVEL, defaults to INFO."""
    return os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    storage_backend: str
    data_dir: Path
    log_level: str

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            storage_backend=get_storage_backend(),
            data_dir=get_data_dir(),
            log_level=get_log_level(),
        )
