"""In-process notification channel."""

import inspect
from collections.abc import Awaitable, Callable

from docchain.application.ports import VersionRestored
from docchain.logging import get_logger

logger = get_logger(__name__)

Subscriber = Callable[[VersionRestored], Awaitable[None] | None]


class InMemoryEventBus:
    """Fan out events to subscribers such as a live preview or editor buffer.

    A failing subscriber is logged and does not affect the publisher or the
    remaining subscribers.
    """

    def __init__(self) -> None:
        self._subscribers: list[Subscriber] = []

    def subscribe(self, subscriber: Subscriber) -> Callable[[], None]:
        """Register ``subscriber``; returns a callable that unsubscribes it."""
        self._subscribers.append(subscriber)

        def unsubscribe() -> None:
            if subscriber in self._subscribers:
                self._subscribers.remove(subscriber)

        return unsubscribe

    async def publish(self, event: VersionRestored) -> None:
        for subscriber in list(self._subscribers):
            try:
                result = subscriber(event)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception(
                    "event.subscriber_failed",
                    event_type=type(event).__name__,
                    document_id=str(event.document_id),
                )
