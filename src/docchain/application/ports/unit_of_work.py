"""Unit of Work port - transactional boundary."""

from collections.abc import AsyncIterator
from typing import Protocol

from docchain.application.ports.repositories.document_repository import DocumentRepository
from docchain.application.ports.repositories.version_repository import (
    DocumentVersionRepository,
)


class UnitOfWork(Protocol):
    """Unit of Work - manages transaction and repository access."""

    @property
    def documents(self) -> DocumentRepository: ...

    @property
    def versions(self) -> DocumentVersionRepository: ...

    async def commit(self) -> None: ...

    async def rollback(self) -> None: ...


class UnitOfWorkFactory(Protocol):
    """Factory for creating UnitOfWork instances."""

    async def __call__(self) -> AsyncIterator[UnitOfWork]: ...
