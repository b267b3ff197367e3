"""Delete document use case."""

from uuid import UUID

from docchain.domain.exceptions import NotFoundError
from docchain.logging import get_logger

logger = get_logger(__name__)


class DeleteDocumentUseCase:
    """Delete a document together with its whole version chain."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, document_id: UUID) -> None:
        async with self._uow_factory() as uow:
            document = await uow.documents.get_by_id(document_id, include_deleted=True)
            if not document:
                raise NotFoundError("Document", str(document_id))
            await uow.documents.hard_delete(document_id)

        logger.info("document.deleted", document_id=str(document_id))
