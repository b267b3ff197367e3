"""In-memory document version repository."""

from operator import attrgetter
from typing import TYPE_CHECKING
from uuid import UUID

from docchain.domain.entities import DocumentVersion
from docchain.domain.exceptions import ConflictError

if TYPE_CHECKING:
    from docchain.infrastructure.persistence.memory.unit_of_work import MemoryUnitOfWork


class MemoryDocumentVersionRepository:
    """Version repository over a memory unit of work's staged view."""

    def __init__(self, uow: "MemoryUnitOfWork") -> None:
        self._uow = uow

    async def get_by_id(self, version_id: UUID) -> DocumentVersion | None:
        """Get version by id."""
        return self._uow.visible_versions().get(version_id)

    async def list_by_document(self, document_id: UUID) -> list[DocumentVersion]:
        """List versions of a document by version number."""
        versions = [
            v for v in self._uow.visible_versions().values() if v.document_id == document_id
        ]
        return sorted(versions, key=attrgetter("version"))

    async def create(self, version: DocumentVersion) -> DocumentVersion:
        """Create version; (document_id, version) must be unique."""
        for existing in self._uow.visible_versions().values():
            if existing.id == version.id:
                raise ConflictError(f"Version {version.id} already exists")
            if (existing.document_id, existing.version) == (version.document_id, version.version):
                raise ConflictError(
                    f"Document {version.document_id} already has version {version.version}"
                )
        self._uow.stage_version(version)
        return version
