"""Version store client port - how a session reaches the store."""

from typing import Protocol
from uuid import UUID

from docchain.domain.entities import Document, DocumentVersion


class VersionStoreClient(Protocol):
    """Port used by the navigation service; local or over HTTP."""

    async def get_document(self, document_id: UUID) -> Document: ...

    async def list_versions(self, document_id: UUID) -> list[DocumentVersion]: ...

    async def create_version(
        self,
        document_id: UUID,
        content: str,
        title: str | None = None,
        diff_content: str | None = None,
    ) -> DocumentVersion: ...

    async def restore_version(self, document_id: UUID, version_id: UUID) -> Document: ...
