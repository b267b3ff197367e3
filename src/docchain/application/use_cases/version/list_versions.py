"""List versions use case."""

from uuid import UUID

from docchain.domain.entities import DocumentVersion
from docchain.domain.exceptions import NotFoundError


class ListVersionsUseCase:
    """List a document's history, oldest first."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, document_id: UUID) -> list[DocumentVersion]:
        """Empty list when the document has no recorded history."""
        async with self._uow_factory() as uow:
            document = await uow.documents.get_by_id(document_id)
            if not document:
                raise NotFoundError("Document", str(document_id))
            return await uow.versions.list_by_document(document_id)
