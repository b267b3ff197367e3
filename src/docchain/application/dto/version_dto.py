"""Version DTOs."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class VersionCreateInput:
    """Input for appending a version to a document's chain."""

    document_id: UUID
    content: str | None
    title: str | None = None
    diff_content: str | None = None
