"""Create version use case."""

from datetime import UTC, datetime
from uuid import uuid4

from docchain.application.dto.version_dto import VersionCreateInput
from docchain.domain.entities import DocumentVersion
from docchain.domain.exceptions import NotFoundError, ValidationError
from docchain.domain.version_chain import DEFAULT_MAX_DEPTH, VersionChain
from docchain.logging import get_logger

logger = get_logger(__name__)


class CreateVersionUseCase:
    """Append a snapshot to a document's chain and move the head to it.

    The document row is locked for the unit of work, so concurrent appends
    to the same document are serialized and numbering stays gap-free.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        max_chain_depth: int = DEFAULT_MAX_DEPTH,
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._max_chain_depth = max_chain_depth

    async def execute(self, input_data: VersionCreateInput) -> DocumentVersion:
        """Create version ``max + 1`` linked to the current latest version."""
        if input_data.content is None:
            raise ValidationError("Version content is required")

        async with self._uow_factory() as uow:
            document = await uow.documents.get_for_update(input_data.document_id)
            if not document:
                raise NotFoundError("Document", str(input_data.document_id))

            chain = VersionChain(
                await uow.versions.list_by_document(document.id),
                max_depth=self._max_chain_depth,
            )
            chain.validate()
            head = chain.head

            now = datetime.now(UTC)
            title = input_data.title if input_data.title is not None else document.title
            version = DocumentVersion(
                id=uuid4(),
                document_id=document.id,
                version=chain.next_version_number,
                content=input_data.content,
                title=title,
                diff_content=input_data.diff_content,
                previous_version_id=head.id if head else None,
                created_at=now,
                updated_at=now,
            )
            await uow.versions.create(version)

            document.content = version.content
            document.title = title
            document.current_version_id = version.id
            document.updated_at = now
            await uow.documents.update(document)

        logger.info(
            "version.created",
            document_id=str(version.document_id),
            version=version.version,
        )
        return version
