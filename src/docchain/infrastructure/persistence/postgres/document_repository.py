"""PostgreSQL document repository implementation."""

from collections.abc import Sequence
from uuid import UUID

from psycopg import AsyncConnection
from psycopg.types.json import Jsonb

from docchain.domain.entities import Document
from docchain.domain.value_objects import ArtifactKind, Visibility

_COLUMNS = (
    "id, title, content, kind, visibility, owner_id, chat_id, current_version_id, "
    "is_current, style, author, slug, created_at, updated_at, deleted_at"
)


def _row_to_document(r: Sequence) -> Document:
    return Document(
        id=r[0],
        title=r[1],
        content=r[2],
        kind=ArtifactKind(r[3]),
        visibility=Visibility(r[4]),
        owner_id=r[5],
        chat_id=r[6],
        current_version_id=r[7],
        is_current=r[8],
        style=r[9],
        author=r[10],
        slug=r[11],
        created_at=r[12],
        updated_at=r[13],
        deleted_at=r[14],
    )


class PostgresDocumentRepository:
    """Document repository implementation."""

    def __init__(self, conn: AsyncConnection) -> None:
        self._conn = conn

    async def get_by_id(self, document_id: UUID, include_deleted: bool = False) -> Document | None:
        """Get document by id."""
        q = f"SELECT {_COLUMNS} FROM document WHERE id = %s"
        if not include_deleted:
            q += " AND deleted_at IS NULL"
        cur = await self._conn.execute(q, (document_id,))
        r = await cur.fetchone()
        return _row_to_document(r) if r else None

    async def get_for_update(self, document_id: UUID) -> Document | None:
        """Get live document and lock its row for the transaction."""
        cur = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM document WHERE id = %s AND deleted_at IS NULL FOR UPDATE",
            (document_id,),
        )
        r = await cur.fetchone()
        return _row_to_document(r) if r else None

    async def create(self, document: Document) -> Document:
        """Create document."""
        await self._conn.execute(
            f"INSERT INTO document ({_COLUMNS}) "
            "VALUES (%s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s, %s)",
            (
                document.id,
                document.title,
                document.content,
                str(document.kind),
                str(document.visibility),
                document.owner_id,
                document.chat_id,
                document.current_version_id,
                document.is_current,
                Jsonb(document.style) if document.style is not None else None,
                document.author,
                document.slug,
                document.created_at,
                document.updated_at,
                document.deleted_at,
            ),
        )
        return document

    async def update(self, document: Document) -> Document:
        """Update the mutable head fields."""
        await self._conn.execute(
            "UPDATE document SET title=%s, content=%s, visibility=%s, current_version_id=%s, "
            "style=%s, updated_at=%s WHERE id=%s",
            (
                document.title,
                document.content,
                str(document.visibility),
                document.current_version_id,
                Jsonb(document.style) if document.style is not None else None,
                document.updated_at,
                document.id,
            ),
        )
        return document

    async def soft_delete(self, document_id: UUID) -> None:
        """Soft delete document."""
        await self._conn.execute(
            "UPDATE document SET deleted_at = NOW() WHERE id = %s",
            (document_id,),
        )

    async def hard_delete(self, document_id: UUID) -> None:
        """Hard delete document; versions cascade."""
        await self._conn.execute("DELETE FROM document WHERE id = %s", (document_id,))
