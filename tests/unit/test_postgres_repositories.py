"""Unit tests for PostgreSQL repositories over a recording connection."""

import pytest
from psycopg.errors import UniqueViolation

from docchain.domain.exceptions import ConflictError
from docchain.infrastructure.persistence.postgres.document_repository import (
    PostgresDocumentRepository,
)
from docchain.infrastructure.persistence.postgres.version_repository import (
    PostgresDocumentVersionRepository,
)

from tests.conftest import build_chain


class _Cursor:
    def __init__(self, rows) -> None:
        self._rows = rows

    async def fetchone(self):
        return self._rows[0] if self._rows else None

    async def fetchall(self):
        return list(self._rows)


class _RecordingConnection:
    def __init__(self, rows=(), error: Exception | None = None) -> None:
        self.rows = list(rows)
        self.error = error
        self.queries: list[tuple[str, tuple]] = []

    async def execute(self, query: str, params: tuple = ()):
        self.queries.append((query, params))
        if self.error is not None:
            raise self.error
        return _Cursor(self.rows)


def _version_row(version) -> tuple:
    return (
        version.id,
        version.document_id,
        version.version,
        version.content,
        version.title,
        version.diff_content,
        version.previous_version_id,
        version.created_at,
        version.updated_at,
    )


@pytest.mark.asyncio
async def test_list_by_document_orders_by_version() -> None:
    versions = build_chain(2)
    conn = _RecordingConnection(rows=[_version_row(v) for v in versions])
    repo = PostgresDocumentVersionRepository(conn)

    assert await repo.list_by_document(versions[0].document_id) == versions
    query, params = conn.queries[0]
    assert query.endswith("ORDER BY version")
    assert params == (versions[0].document_id,)


@pytest.mark.asyncio
async def test_get_missing_version_returns_none() -> None:
    repo = PostgresDocumentVersionRepository(_RecordingConnection())
    (version,) = build_chain(1)
    assert await repo.get_by_id(version.id) is None


@pytest.mark.asyncio
async def test_duplicate_version_number_is_conflict() -> None:
    (version,) = build_chain(1)
    repo = PostgresDocumentVersionRepository(
        _RecordingConnection(error=UniqueViolation("uq_document_version_number"))
    )
    with pytest.raises(ConflictError, match="already has version 1"):
        await repo.create(version)


@pytest.mark.asyncio
async def test_get_for_update_locks_live_row(document) -> None:
    conn = _RecordingConnection()
    repo = PostgresDocumentRepository(conn)

    assert await repo.get_for_update(document.id) is None
    query, params = conn.queries[0]
    assert "deleted_at IS NULL FOR UPDATE" in query
    assert params == (document.id,)


@pytest.mark.asyncio
async def test_get_by_id_maps_row(document) -> None:
    row = (
        document.id,
        document.title,
        document.content,
        "text",
        "private",
        document.owner_id,
        None,
        None,
        True,
        None,
        None,
        None,
        document.created_at,
        document.updated_at,
        None,
    )
    conn = _RecordingConnection(rows=[row])
    repo = PostgresDocumentRepository(conn)

    assert await repo.get_by_id(document.id, include_deleted=True) == document
    assert "deleted_at IS NULL" not in conn.queries[0][0]
