"""Document version repository port."""

from typing import Protocol
from uuid import UUID

from docchain.domain.entities import DocumentVersion


class DocumentVersionRepository(Protocol):
    """Port for version snapshot persistence."""

    async def get_by_id(self, version_id: UUID) -> DocumentVersion | None: ...

    async def list_by_document(self, document_id: UUID) -> list[DocumentVersion]:
        """Versions of a document ordered by version number ascending."""
        ...

    async def create(self, version: DocumentVersion) -> DocumentVersion:
        """Insert version. Raises ConflictError on duplicate (document_id, version)."""
        ...
