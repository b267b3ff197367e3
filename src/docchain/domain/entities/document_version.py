"""Document version entity."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class DocumentVersion:
    """Immutable snapshot of a document at one point of its history.

    Only ``updated_at`` may change after creation, via ``dataclasses.replace``.
    """

    id: UUID
    document_id: UUID
    version: int
    content: str
    created_at: datetime
    updated_at: datetime
    title: str | None = None
    diff_content: str | None = None
    previous_version_id: UUID | None = None
