"""Create document use case."""

from datetime import UTC, datetime
from uuid import uuid4

from docchain.application.dto.document_dto import DocumentCreateInput
from docchain.domain.entities import Document
from docchain.domain.exceptions import ValidationError
from docchain.logging import get_logger

logger = get_logger(__name__)


class CreateDocumentUseCase:
    """Create a document head with no recorded history."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, input_data: DocumentCreateInput) -> Document:
        """Create document. Its inline content is the implicit version 1."""
        if not input_data.title or not input_data.title.strip():
            raise ValidationError("Document title is required")

        now = datetime.now(UTC)
        document = Document(
            id=uuid4(),
            title=input_data.title,
            content=input_data.content,
            owner_id=input_data.owner_id,
            created_at=now,
            updated_at=now,
            kind=input_data.kind,
            visibility=input_data.visibility,
            chat_id=input_data.chat_id,
            style=input_data.style,
            author=input_data.author,
            slug=input_data.slug,
        )
        async with self._uow_factory() as uow:
            await uow.documents.create(document)

        logger.info("document.created", document_id=str(document.id), kind=str(document.kind))
        return document
