"""Event publisher port."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID


@dataclass(frozen=True)
class VersionRestored:
    """Emitted after a version became the document head."""

    document_id: UUID
    content: str
    title: str


class EventPublisher(Protocol):
    """Port for the notification channel."""

    async def publish(self, event: VersionRestored) -> None: ...
