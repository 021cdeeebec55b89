"""Ports for the tracking context."""

from .storage import IKeyValueStorage

__all__ = ["IKeyValueStorage"]
