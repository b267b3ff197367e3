"""Get version use case."""

from uuid import UUID

from docchain.domain.entities import DocumentVersion
from docchain.domain.exceptions import NotFoundError


class GetVersionUseCase:
    """Get one version of a document."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, document_id: UUID, version_id: UUID) -> DocumentVersion:
        async with self._uow_factory() as uow:
            document = await uow.documents.get_by_id(document_id)
            if not document:
                raise NotFoundError("Document", str(document_id))
            version = await uow.versions.get_by_id(version_id)
            if not version or version.document_id != document_id:
                raise NotFoundError("Version", str(version_id))
            return version
