"""Document entity."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any
from uuid import UUID

from docchain.domain.value_objects import ArtifactKind, Visibility


@dataclass
class Document:
    """Mutable head of a document; the state served to readers."""

    id: UUID
    title: str
    content: str | None
    owner_id: str
    created_at: datetime
    updated_at: datetime
    kind: ArtifactKind = ArtifactKind.TEXT
    visibility: Visibility = Visibility.PRIVATE
    chat_id: UUID | None = None
    current_version_id: UUID | None = None
    is_current: bool = True
    style: dict[str, Any] | None = None
    author: str | None = None
    slug: str | None = None
    deleted_at: datetime | None = None
