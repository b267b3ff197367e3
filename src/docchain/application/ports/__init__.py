"""Application ports - interfaces for external adapters."""

from docchain.application.ports.event_publisher import EventPublisher, VersionRestored
from docchain.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory
from docchain.application.ports.version_cache import VersionCache, VersionLoader
from docchain.application.ports.version_store_client import VersionStoreClient

__all__ = [
    "EventPublisher",
    "UnitOfWork",
    "UnitOfWorkFactory",
    "VersionCache",
    "VersionLoader",
    "VersionRestored",
    "VersionStoreClient",
]
