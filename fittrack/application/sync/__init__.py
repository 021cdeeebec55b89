"""Synchronisation between the in-memory store and key/value storage."""

from fittrack.application.sync.state_sync import StateSyncService

__all__ = ["StateSyncService"]
