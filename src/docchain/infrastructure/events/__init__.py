"""Event channel adapters."""

from docchain.infrastructure.events.event_bus import InMemoryEventBus

__all__ = ["InMemoryEventBus"]
