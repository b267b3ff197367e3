"""Process-local version list cache."""

from uuid import UUID

from docchain.application.ports import VersionLoader
from docchain.domain.entities import DocumentVersion
from docchain.logging import get_logger

logger = get_logger(__name__)


class InMemoryVersionCache:
    """Read-through cache of version lists with event-driven invalidation.

    Entries have no TTL. While loads for a document are in flight it carries
    a generation counter that ``invalidate_versions`` bumps; a load only
    stores its result if the generation it started under is still current,
    so a read that straddles an invalidation never puts stale history back.
    The counter is dropped once the last load finishes.
    """

    def __init__(self, loader: VersionLoader) -> None:
        self._loader = loader
        self._entries: dict[UUID, tuple[DocumentVersion, ...]] = {}
        self._generations: dict[UUID, int] = {}
        self._loading: dict[UUID, int] = {}

    def is_cached(self, document_id: UUID) -> bool:
        return document_id in self._entries

    def is_tracking(self, document_id: UUID) -> bool:
        """Whether any load or generation bookkeeping is held for the document."""
        return document_id in self._loading or document_id in self._generations

    async def get_versions(self, document_id: UUID) -> list[DocumentVersion]:
        """Return the ordered versions, loading them on a miss."""
        cached = self._entries.get(document_id)
        if cached is not None:
            return list(cached)

        generation = self._generations.get(document_id, 0)
        self._loading[document_id] = self._loading.get(document_id, 0) + 1
        try:
            versions = await self._loader(document_id)
            if self._generations.get(document_id, 0) == generation:
                self._entries[document_id] = tuple(versions)
            else:
                logger.debug("version_cache.stale_load_dropped", document_id=str(document_id))
        finally:
            self._finish_load(document_id)
        return list(versions)

    async def invalidate_versions(self, document_id: UUID) -> None:
        """Drop the entry; a no-op when nothing is cached."""
        self._entries.pop(document_id, None)
        if document_id in self._loading:
            self._generations[document_id] = self._generations.get(document_id, 0) + 1
        logger.debug("version_cache.invalidated", document_id=str(document_id))

    def _finish_load(self, document_id: UUID) -> None:
        remaining = self._loading.pop(document_id) - 1
        if remaining:
            self._loading[document_id] = remaining
        else:
            self._generations.pop(document_id, None)
