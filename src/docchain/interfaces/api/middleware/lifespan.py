"""Lifespan middleware - opens resources on startup, releases them on shutdown."""

from collections.abc import Awaitable, Callable, Sequence
from typing import Any

from psycopg_pool import AsyncConnectionPool

from docchain.logging import get_logger

logger = get_logger(__name__)


class LifespanMiddleware:
    """Opens the connection pool (when there is one) and runs shutdown hooks."""

    def __init__(
        self,
        pool: AsyncConnectionPool | None = None,
        on_shutdown: Sequence[Callable[[], Awaitable[None]]] = (),
    ) -> None:
        self._pool = pool
        self._on_shutdown = list(on_shutdown)

    async def process_startup(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        if self._pool is not None:
            await self._pool.open()
        logger.info("app.started", pooled=self._pool is not None)

    async def process_shutdown(
        self, scope: dict[str, Any], event: dict[str, Any]
    ) -> None:
        for hook in self._on_shutdown:
            await hook()
        if self._pool is not None:
            await self._pool.close()
        logger.info("app.stopped")
