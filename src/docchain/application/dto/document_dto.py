"""Document DTOs."""

from dataclasses import dataclass
from typing import Any
from uuid import UUID

from docchain.domain.value_objects import ArtifactKind, Visibility


@dataclass
class DocumentCreateInput:
    """Input for creating a document head."""

    title: str
    owner_id: str
    content: str | None = None
    kind: ArtifactKind = ArtifactKind.TEXT
    visibility: Visibility = Visibility.PRIVATE
    chat_id: UUID | None = None
    style: dict[str, Any] | None = None
    author: str | None = None
    slug: str | None = None
