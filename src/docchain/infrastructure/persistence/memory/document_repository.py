"""In-memory document repository."""

from dataclasses import replace
from datetime import UTC, datetime
from typing import TYPE_CHECKING
from uuid import UUID

from docchain.domain.entities import Document
from docchain.domain.exceptions import ConflictError

if TYPE_CHECKING:
    from docchain.infrastructure.persistence.memory.unit_of_work import MemoryUnitOfWork


class MemoryDocumentRepository:
    """Document repository over a memory unit of work's staged view."""

    def __init__(self, uow: "MemoryUnitOfWork") -> None:
        self._uow = uow

    async def get_by_id(self, document_id: UUID, include_deleted: bool = False) -> Document | None:
        """Get document by id."""
        doc = self._uow.visible_document(document_id)
        if not doc or (not include_deleted and doc.deleted_at):
            return None
        return replace(doc)

    async def get_for_update(self, document_id: UUID) -> Document | None:
        """Lock document until the unit of work ends, then read it."""
        await self._uow.lock_document(document_id)
        return await self.get_by_id(document_id)

    async def create(self, document: Document) -> Document:
        """Create document."""
        if self._uow.visible_document(document.id):
            raise ConflictError(f"Document {document.id} already exists")
        self._uow.stage_document(replace(document))
        return document

    async def update(self, document: Document) -> Document:
        """Update document."""
        self._uow.stage_document(replace(document))
        return document

    async def soft_delete(self, document_id: UUID) -> None:
        """Soft delete document."""
        doc = self._uow.visible_document(document_id)
        if doc:
            self._uow.stage_document(replace(doc, deleted_at=datetime.now(UTC)))

    async def hard_delete(self, document_id: UUID) -> None:
        """Hard delete document and its versions."""
        self._uow.stage_document_delete(document_id)
