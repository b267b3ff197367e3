"""Version cache port."""

from collections.abc import Awaitable, Callable
from typing import Protocol
from uuid import UUID

from docchain.domain.entities import DocumentVersion

VersionLoader = Callable[[UUID], Awaitable[list[DocumentVersion]]]


class VersionCache(Protocol):
    """Read-through cache of ordered version lists keyed by document id."""

    async def get_versions(self, document_id: UUID) -> list[DocumentVersion]: ...

    async def invalidate_versions(self, document_id: UUID) -> None: ...
