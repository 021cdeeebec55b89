"""Ports shared across domain contexts."""

from .event_bus import EventHandler, IEventBus

__all__ = ["EventHandler", "IEventBus"]
