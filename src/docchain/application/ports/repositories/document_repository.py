"""Document repository port."""

from typing import Protocol
from uuid import UUID

from docchain.domain.entities import Document


class DocumentRepository(Protocol):
    """Port for document head persistence."""

    async def get_by_id(
        self, document_id: UUID, include_deleted: bool = False
    ) -> Document | None: ...

    async def get_for_update(self, document_id: UUID) -> Document | None:
        """Get live document and lock it until the unit of work ends."""
        ...

    async def create(self, document: Document) -> Document: ...

    async def update(self, document: Document) -> Document: ...

    async def soft_delete(self, document_id: UUID) -> None: ...

    async def hard_delete(self, document_id: UUID) -> None:
        """Delete document; its versions go with it."""
        ...
