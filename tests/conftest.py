"""Pytest fixtures for docchain tests."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import replace
from datetime import UTC, datetime, timedelta
from uuid import UUID, uuid4

import pytest
import structlog

from docchain.application.dto.document_dto import DocumentCreateInput
from docchain.application.dto.version_dto import VersionCreateInput
from docchain.application.ports import VersionRestored
from docchain.application.use_cases.document.create_document import CreateDocumentUseCase
from docchain.application.use_cases.version.create_version import CreateVersionUseCase
from docchain.domain.entities import Document, DocumentVersion
from docchain.domain.exceptions import NotFoundError
from docchain.infrastructure.persistence.memory import (
    MemoryDatabase,
    create_memory_uow_factory,
)
from docchain.logging import clear_log_context

BASE_TIME = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)


# --- Builders ---


def build_chain(count: int, document_id: UUID | None = None) -> list[DocumentVersion]:
    """Well-formed chain of ``count`` versions, oldest first."""
    document_id = document_id or uuid4()
    versions: list[DocumentVersion] = []
    previous: DocumentVersion | None = None
    for number in range(1, count + 1):
        created = BASE_TIME - timedelta(hours=count - number)
        version = DocumentVersion(
            id=uuid4(),
            document_id=document_id,
            version=number,
            content=f"content v{number}",
            title=f"Title v{number}",
            previous_version_id=previous.id if previous else None,
            created_at=created,
            updated_at=created,
        )
        versions.append(version)
        previous = version
    return versions


async def seed_document(
    uow_factory, title: str = "Draft", content: str | None = "initial"
) -> Document:
    """Create a document head through the use case."""
    return await CreateDocumentUseCase(unit_of_work_factory=uow_factory).execute(
        DocumentCreateInput(title=title, owner_id="user-1", content=content)
    )


async def append_versions(uow_factory, document_id: UUID, count: int) -> list[DocumentVersion]:
    """Append ``count`` edits in order."""
    use_case = CreateVersionUseCase(unit_of_work_factory=uow_factory)
    created = []
    for n in range(count):
        created.append(
            await use_case.execute(
                VersionCreateInput(
                    document_id=document_id,
                    content=f"edit {n + 1}",
                    title=f"Title {n + 1}",
                )
            )
        )
    return created


# --- Fakes ---


class FakeVersionStoreClient:
    """In-memory VersionStoreClient with failure injection.

    ``restore_error`` is raised by ``restore_version`` when set.
    ``restore_gate`` (an asyncio.Event) makes restores wait until it is set.
    """

    def __init__(self, document: Document, versions: list[DocumentVersion]) -> None:
        self.document = document
        self.versions = list(versions)
        self.calls: list[str] = []
        self.restore_error: Exception | None = None
        self.restore_gate: asyncio.Event | None = None

    def _check(self, document_id: UUID) -> None:
        if document_id != self.document.id:
            raise NotFoundError("Document", str(document_id))

    async def get_document(self, document_id: UUID) -> Document:
        self.calls.append("get_document")
        self._check(document_id)
        return replace(self.document)

    async def list_versions(self, document_id: UUID) -> list[DocumentVersion]:
        self.calls.append("list_versions")
        self._check(document_id)
        return list(self.versions)

    async def create_version(
        self,
        document_id: UUID,
        content: str,
        title: str | None = None,
        diff_content: str | None = None,
    ) -> DocumentVersion:
        self.calls.append("create_version")
        self._check(document_id)
        head = self.versions[-1] if self.versions else None
        now = datetime.now(UTC)
        version = DocumentVersion(
            id=uuid4(),
            document_id=document_id,
            version=head.version + 1 if head else 1,
            content=content,
            title=title if title is not None else self.document.title,
            diff_content=diff_content,
            previous_version_id=head.id if head else None,
            created_at=now,
            updated_at=now,
        )
        self.versions.append(version)
        self.document = replace(
            self.document, content=content, title=version.title, current_version_id=version.id
        )
        return version

    async def restore_version(self, document_id: UUID, version_id: UUID) -> Document:
        self.calls.append("restore_version")
        self._check(document_id)
        if self.restore_gate is not None:
            await self.restore_gate.wait()
        if self.restore_error is not None:
            raise self.restore_error
        target = next(v for v in self.versions if v.id == version_id)
        self.document = replace(
            self.document,
            content=target.content,
            title=target.title or self.document.title,
            current_version_id=target.id,
        )
        return replace(self.document)


class RecordingPublisher:
    """EventPublisher that keeps published events."""

    def __init__(self) -> None:
        self.events: list[VersionRestored] = []

    async def publish(self, event: VersionRestored) -> None:
        self.events.append(event)


# --- Fixtures ---


@pytest.fixture
def database() -> MemoryDatabase:
    """Fresh in-memory database for each test."""
    return MemoryDatabase()


@pytest.fixture
def uow_factory(database: MemoryDatabase):
    """Memory UoW factory over the test database."""
    return create_memory_uow_factory(database)


@pytest.fixture
def document() -> Document:
    return Document(
        id=uuid4(),
        title="Head title",
        content="head content",
        owner_id="user-1",
        created_at=BASE_TIME,
        updated_at=BASE_TIME,
    )


@pytest.fixture
def fake_client(document: Document) -> FakeVersionStoreClient:
    """Fake store client with a five-version history."""
    return FakeVersionStoreClient(document, build_chain(5, document.id))


@pytest.fixture
def publisher() -> RecordingPublisher:
    return RecordingPublisher()


@pytest.fixture
def restore_logging():
    """Undo configure_logging side effects on the root logger."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    clear_log_context()
    structlog.reset_defaults()
