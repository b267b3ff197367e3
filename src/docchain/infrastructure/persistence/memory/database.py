"""Process-local tables shared by memory units of work."""

import asyncio
from uuid import UUID

from docchain.domain.entities import Document, DocumentVersion


class MemoryDatabase:
    """Documents and versions held in dicts.

    One ``asyncio.Lock`` per document stands in for a row lock. A lock lives
    only while some unit of work holds or waits for it.
    """

    def __init__(self) -> None:
        self.documents: dict[UUID, Document] = {}
        self.versions: dict[UUID, DocumentVersion] = {}
        self._locks: dict[UUID, asyncio.Lock] = {}
        self._lock_users: dict[UUID, int] = {}

    @property
    def lock_count(self) -> int:
        return len(self._locks)

    def is_locked(self, document_id: UUID) -> bool:
        lock = self._locks.get(document_id)
        return lock is not None and lock.locked()

    async def acquire(self, document_id: UUID) -> None:
        """Wait for the document lock."""
        lock = self._locks.setdefault(document_id, asyncio.Lock())
        self._lock_users[document_id] = self._lock_users.get(document_id, 0) + 1
        try:
            await lock.acquire()
        except BaseException:
            self._drop_user(document_id)
            raise

    def release(self, document_id: UUID) -> None:
        self._locks[document_id].release()
        self._drop_user(document_id)

    def _drop_user(self, document_id: UUID) -> None:
        users = self._lock_users.pop(document_id) - 1
        if users:
            self._lock_users[document_id] = users
        else:
            del self._locks[document_id]
