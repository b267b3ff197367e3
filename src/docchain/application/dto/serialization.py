"""JSON-ready mappings for documents and versions."""

from datetime import datetime
from typing import Any
from uuid import UUID

from docchain.domain.entities import Document, DocumentVersion
from docchain.domain.value_objects import ArtifactKind, Visibility


def _uuid_or_none(value: str | None) -> UUID | None:
    return UUID(value) if value else None


def _iso_or_none(value: datetime | None) -> str | None:
    return value.isoformat() if value else None


def document_to_dict(doc: Document) -> dict[str, Any]:
    return {
        "id": str(doc.id),
        "title": doc.title,
        "content": doc.content,
        "kind": str(doc.kind),
        "visibility": str(doc.visibility),
        "owner_id": doc.owner_id,
        "chat_id": str(doc.chat_id) if doc.chat_id else None,
        "current_version_id": str(doc.current_version_id) if doc.current_version_id else None,
        "is_current": doc.is_current,
        "style": doc.style,
        "author": doc.author,
        "slug": doc.slug,
        "created_at": doc.created_at.isoformat(),
        "updated_at": doc.updated_at.isoformat(),
        "deleted_at": _iso_or_none(doc.deleted_at),
    }


def document_from_dict(data: dict[str, Any]) -> Document:
    return Document(
        id=UUID(data["id"]),
        title=data["title"],
        content=data.get("content"),
        owner_id=data["owner_id"],
        created_at=datetime.fromisoformat(data["created_at"]),
        updated_at=datetime.fromisoformat(data["updated_at"]),
        kind=ArtifactKind(data.get("kind", ArtifactKind.TEXT)),
        visibility=Visibility(data.get("visibility", Visibility.PRIVATE)),
        chat_id=_uuid_or_none(data.get("chat_id")),
        current_version_id=_uuid_or_none(data.get("current_version_id")),
        is_current=data.get("is_current", True),
        style=data.get("style"),
        author=data.get("author"),
        slug=data.get("slug"),
        deleted_at=datetime.fromisoformat(data["deleted_at"]) if data.get("deleted_at") else None,
    )


def version_to_dict(version: DocumentVersion) -> dict[str, Any]:
    return {
        "id": str(version.id),
        "document_id": str(version.document_id),
        "version": version.version,
        "content": version.content,
        "title": version.title,
        "diff_content": version.diff_content,
        "previous_version_id": (
            str(version.previous_version_id) if version.previous_version_id else None
        ),
        "created_at": version.created_at.isoformat(),
        "updated_at": version.updated_at.isoformat(),
    }


def version_from_dict(data: dict[str, Any]) -> DocumentVersion:
    return DocumentVersion(
        id=UUID(data["id"]),
        document_id=UUID(data["document_id"]),
        version=int(data["version"]),
        content=data["content"],
        title=data.get("title"),
        diff_content=data.get("diff_content"),
        previous_version_id=_uuid_or_none(data.get("previous_version_id")),
        created_at=datetime.fromisoformat(data["created_at"]),
        updated_at=datetime.fromisoformat(data["updated_at"]),
    )
