"""Restore version use case."""

from datetime import UTC, datetime
from uuid import UUID

from docchain.domain.entities import Document
from docchain.domain.exceptions import NotFoundError
from docchain.logging import get_logger

logger = get_logger(__name__)


class RestoreVersionUseCase:
    """Make a version the document head.

    Restoring is a forward move of the head: later versions stay in the chain
    and no version row is written, so undoing a restore means restoring the
    still-intact later version by id.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, document_id: UUID, version_id: UUID) -> Document:
        """Copy the version's content and title onto the head."""
        async with self._uow_factory() as uow:
            document = await uow.documents.get_for_update(document_id)
            if not document:
                raise NotFoundError("Document", str(document_id))
            version = await uow.versions.get_by_id(version_id)
            if not version or version.document_id != document_id:
                raise NotFoundError("Version", str(version_id))

            document.content = version.content
            if version.title is not None:
                document.title = version.title
            document.current_version_id = version.id
            document.updated_at = datetime.now(UTC)
            await uow.documents.update(document)

        logger.info(
            "version.restored",
            document_id=str(document_id),
            version=version.version,
        )
        return document
