"""Browsing and restoring versions for an editing session."""

import asyncio
from collections.abc import Awaitable
from dataclasses import dataclass
from typing import TypeVar
from uuid import UUID

from docchain.application.ports import (
    EventPublisher,
    VersionCache,
    VersionRestored,
    VersionStoreClient,
)
from docchain.domain.entities import DocumentVersion
from docchain.domain.exceptions import (
    DocChainError,
    NotFoundError,
    RestoreInProgressError,
    TransportError,
    ValidationError,
)
from docchain.domain.navigation import NavigationState
from docchain.domain.value_objects import NavigationIntent
from docchain.logging import get_logger

logger = get_logger(__name__)

T = TypeVar("T")


@dataclass
class DocumentView:
    """What a session currently shows for one document."""

    document_id: UUID
    title: str
    content: str
    versions: list[DocumentVersion]
    navigation: NavigationState

    @property
    def current_version(self) -> DocumentVersion | None:
        """Version at the viewed index, None for an empty history."""
        index = self.navigation.index
        if 0 <= index < len(self.versions):
            return self.versions[index]
        return None


class VersionNavigator:
    """Session-side orchestration of version navigation and restore.

    Keeps one ``DocumentView`` per opened document. Store calls go through
    ``client`` and are bounded by ``timeout`` seconds; version lists are read
    through ``cache``. Nothing is retried.
    """

    def __init__(
        self,
        client: VersionStoreClient,
        cache: VersionCache,
        publisher: EventPublisher,
        timeout: float = 10.0,
    ) -> None:
        self._client = client
        self._cache = cache
        self._publisher = publisher
        self._timeout = timeout
        self._views: dict[UUID, DocumentView] = {}
        self._restores_in_flight: dict[UUID, object] = {}

    def view(self, document_id: UUID) -> DocumentView:
        """Current view of an opened document."""
        view = self._views.get(document_id)
        if view is None:
            raise NotFoundError("Open document", str(document_id))
        return view

    def is_restoring(self, document_id: UUID) -> bool:
        return document_id in self._restores_in_flight

    async def _call(self, awaitable: Awaitable[T]) -> T:
        try:
            async with asyncio.timeout(self._timeout):
                return await awaitable
        except TimeoutError as e:
            raise TransportError("Version store did not respond in time") from e

    async def open(self, document_id: UUID) -> DocumentView:
        """Load the head and its history; navigation starts at latest."""
        document = await self._call(self._client.get_document(document_id))
        versions = await self._call(self._cache.get_versions(document_id))
        view = DocumentView(
            document_id=document_id,
            title=document.title,
            content=document.content or "",
            versions=versions,
            navigation=NavigationState.at_latest(len(versions)),
        )
        self._views[document_id] = view
        return view

    async def refresh(self, document_id: UUID) -> DocumentView:
        """Re-read the history through the cache, keeping the viewed position."""
        view = self.view(document_id)
        versions = await self._call(self._cache.get_versions(document_id))
        view.versions = versions
        view.navigation = view.navigation.resized(len(versions))
        return view

    def navigate(self, document_id: UUID, intent: NavigationIntent | str) -> DocumentView:
        view = self.view(document_id)
        view.navigation = view.navigation.apply(NavigationIntent(intent))
        return view

    async def restore(self, document_id: UUID, index: int | None = None) -> DocumentView:
        """Make the version at ``index`` (default: the viewed one) the head.

        Raises ``ValidationError`` before touching the store when the index is
        out of range and ``RestoreInProgressError`` while another restore of
        the same document is pending. On any store failure the view is left
        exactly as it was.
        """
        view = self.view(document_id)
        if document_id in self._restores_in_flight:
            raise RestoreInProgressError(
                f"Restore already in progress for document {document_id}"
            )
        if index is None:
            index = view.navigation.index
        if not view.versions or not 0 <= index < len(view.versions):
            raise ValidationError("Invalid version selected")

        token = object()
        self._restores_in_flight[document_id] = token
        target = view.versions[index]
        try:
            try:
                await self._call(self._client.restore_version(document_id, target.id))
            except DocChainError:
                logger.exception(
                    "version.restore_failed",
                    document_id=str(document_id),
                    version=target.version,
                )
                raise

            view.content = target.content
            view.title = target.title or view.title
            view.navigation = view.navigation.apply(NavigationIntent.LATEST)
            await self._invalidate(document_id)
            await self._publisher.publish(
                VersionRestored(
                    document_id=document_id,
                    content=view.content,
                    title=view.title,
                )
            )
            logger.info(
                "version.restore_completed",
                document_id=str(document_id),
                version=target.version,
            )
            return view
        finally:
            if self._restores_in_flight.get(document_id) is token:
                del self._restores_in_flight[document_id]

    async def record_edit(
        self,
        document_id: UUID,
        content: str,
        title: str | None = None,
        diff_content: str | None = None,
    ) -> DocumentView:
        """Append an edit as a new version and jump to it.

        The view is only updated once the reloaded history is in hand; a failed
        reload leaves it as it was.
        """
        view = self.view(document_id)
        version = await self._call(
            self._client.create_version(document_id, content, title, diff_content)
        )
        await self._invalidate(document_id)
        versions = await self._call(self._cache.get_versions(document_id))

        view.content = version.content
        view.title = version.title or view.title
        view.versions = versions
        view.navigation = NavigationState.at_latest(len(versions))
        return view

    def close(self, document_id: UUID) -> None:
        self._views.pop(document_id, None)

    async def _invalidate(self, document_id: UUID) -> None:
        try:
            await self._cache.invalidate_versions(document_id)
        except Exception:
            logger.warning(
                "version_cache.invalidate_failed",
                document_id=str(document_id),
                exc_info=True,
            )
