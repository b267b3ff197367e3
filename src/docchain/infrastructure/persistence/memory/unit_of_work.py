"""In-memory Unit of Work implementation."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

from docchain.domain.entities import Document, DocumentVersion
from docchain.domain.exceptions import ConflictError
from docchain.infrastructure.persistence.memory.database import MemoryDatabase
from docchain.infrastructure.persistence.memory.document_repository import (
    MemoryDocumentRepository,
)
from docchain.infrastructure.persistence.memory.version_repository import (
    MemoryDocumentVersionRepository,
)


class MemoryUnitOfWork:
    """Memory Unit of Work - writes are staged and applied on commit.

    Document locks taken through ``get_for_update`` are held until exit.
    """

    def __init__(self, database: MemoryDatabase) -> None:
        self._db = database
        self._documents = MemoryDocumentRepository(self)
        self._versions = MemoryDocumentVersionRepository(self)
        self._held_locks: set[UUID] = set()
        self._staged_documents: dict[UUID, Document] = {}
        self._staged_versions: dict[UUID, DocumentVersion] = {}
        self._deleted_documents: set[UUID] = set()

    async def __aenter__(self) -> "MemoryUnitOfWork":
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if exc_type:
            await self.rollback()
        for document_id in self._held_locks:
            self._db.release(document_id)
        self._held_locks.clear()

    @property
    def documents(self) -> MemoryDocumentRepository:
        return self._documents

    @property
    def versions(self) -> MemoryDocumentVersionRepository:
        return self._versions

    async def lock_document(self, document_id: UUID) -> None:
        if document_id in self._held_locks:
            return
        await self._db.acquire(document_id)
        self._held_locks.add(document_id)

    def visible_document(self, document_id: UUID) -> Document | None:
        if document_id in self._deleted_documents:
            return None
        return self._staged_documents.get(document_id) or self._db.documents.get(document_id)

    def visible_versions(self) -> dict[UUID, DocumentVersion]:
        merged = {**self._db.versions, **self._staged_versions}
        return {
            vid: v for vid, v in merged.items() if v.document_id not in self._deleted_documents
        }

    def stage_document(self, document: Document) -> None:
        self._staged_documents[document.id] = document

    def stage_version(self, version: DocumentVersion) -> None:
        self._staged_versions[version.id] = version

    def stage_document_delete(self, document_id: UUID) -> None:
        self._staged_documents.pop(document_id, None)
        self._deleted_documents.add(document_id)

    async def commit(self) -> None:
        for version in self._staged_versions.values():
            for existing in self._db.versions.values():
                if (existing.document_id, existing.version) == (
                    version.document_id,
                    version.version,
                ) and existing.id != version.id:
                    raise ConflictError(
                        f"Document {version.document_id} already has version {version.version}"
                    )
        self._db.documents.update(self._staged_documents)
        self._db.versions.update(self._staged_versions)
        for document_id in self._deleted_documents:
            self._db.documents.pop(document_id, None)
            for vid in [v.id for v in self._db.versions.values() if v.document_id == document_id]:
                del self._db.versions[vid]
        self._clear()

    async def rollback(self) -> None:
        self._clear()

    def _clear(self) -> None:
        self._staged_documents.clear()
        self._staged_versions.clear()
        self._deleted_documents.clear()


def create_memory_uow_factory(database: MemoryDatabase) -> object:
    """Create UnitOfWork factory (async context manager) over ``database``."""

    @asynccontextmanager
    async def factory() -> AsyncIterator[MemoryUnitOfWork]:
        uow = MemoryUnitOfWork(database)
        async with uow:
            try:
                yield uow
                await uow.commit()
            except BaseException:
                await uow.rollback()
                raise

    return factory
