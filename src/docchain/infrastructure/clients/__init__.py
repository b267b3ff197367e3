"""Version store client adapters."""

from docchain.infrastructure.clients.http_client import HttpVersionStoreClient
from docchain.infrastructure.clients.local_client import LocalVersionStoreClient

__all__ = [
    "HttpVersionStoreClient",
    "LocalVersionStoreClient",
]
