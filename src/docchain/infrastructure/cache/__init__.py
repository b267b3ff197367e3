"""Version cache adapters."""

from docchain.infrastructure.cache.version_cache import InMemoryVersionCache

__all__ = ["InMemoryVersionCache"]
