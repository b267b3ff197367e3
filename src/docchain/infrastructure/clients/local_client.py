"""In-process version store client."""

from uuid import UUID

from docchain.application.dto.version_dto import VersionCreateInput
from docchain.application.use_cases.document.get_document import GetDocumentUseCase
from docchain.application.use_cases.version.create_version import CreateVersionUseCase
from docchain.application.use_cases.version.list_versions import ListVersionsUseCase
from docchain.application.use_cases.version.restore_version import RestoreVersionUseCase
from docchain.domain.entities import Document, DocumentVersion


class LocalVersionStoreClient:
    """Calls the version use cases directly, without an HTTP hop."""

    def __init__(
        self,
        get_document: GetDocumentUseCase,
        list_versions: ListVersionsUseCase,
        create_version: CreateVersionUseCase,
        restore_version: RestoreVersionUseCase,
    ) -> None:
        self._get_document = get_document
        self._list_versions = list_versions
        self._create_version = create_version
        self._restore_version = restore_version

    async def get_document(self, document_id: UUID) -> Document:
        return await self._get_document.execute(document_id)

    async def list_versions(self, document_id: UUID) -> list[DocumentVersion]:
        return await self._list_versions.execute(document_id)

    async def create_version(
        self,
        document_id: UUID,
        content: str,
        title: str | None = None,
        diff_content: str | None = None,
    ) -> DocumentVersion:
        return await self._create_version.execute(
            VersionCreateInput(
                document_id=document_id,
                content=content,
                title=title,
                diff_content=diff_content,
            )
        )

    async def restore_version(self, document_id: UUID, version_id: UUID) -> Document:
        return await self._restore_version.execute(document_id, version_id)
