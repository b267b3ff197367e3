"""PostgreSQL document version repository implementation."""

from collections.abc import Sequence
from uuid import UUID

from psycopg import AsyncConnection
from psycopg.errors import UniqueViolation

from docchain.domain.entities import DocumentVersion
from docchain.domain.exceptions import ConflictError

_COLUMNS = (
    "id, document_id, version, content, title, diff_content, previous_version_id, "
    "created_at, updated_at"
)


def _row_to_version(r: Sequence) -> DocumentVersion:
    return DocumentVersion(
        id=r[0],
        document_id=r[1],
        version=r[2],
        content=r[3],
        title=r[4],
        diff_content=r[5],
        previous_version_id=r[6],
        created_at=r[7],
        updated_at=r[8],
    )


class PostgresDocumentVersionRepository:
    """Document version repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, version_id: UUID) -> DocumentVersion | None:
        """Get version by id."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM document_version WHERE id = %s",
            (version_id,),
        )
        r = await cur.fetchone()
        return _row_to_version(r) if r else None

    async def list_by_document(self, document_id: UUID) -> list[DocumentVersion]:
        """List versions of a document by version number."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM document_version WHERE document_id = %s ORDER BY version",
            (document_id,),
        )
        return [_row_to_version(r) for r in await cur.fetchall()]

    async def create(self, version: DocumentVersion) -> DocumentVersion:
        """Create version; duplicate (document_id, version) is a conflict."""
        try:
            await self._conn.execute(
                f"INSERT INTO document_version ({_COLUMNS}) "
                "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s)",
                (
                    version.id,
                    version.document_id,
                    version.version,
                    version.content,
                    version.title,
                    version.diff_content,
                    version.previous_version_id,
                    version.created_at,
                    version.updated_at,
                ),
            )
        except UniqueViolation as e:
            raise ConflictError(
                f"Document {version.document_id} already has version {version.version}"
            ) from e
        return version
