"""HTTP version store client."""

from collections.abc import Callable
from typing import Any
from uuid import UUID

import httpx

from docchain.application.dto.serialization import (
    document_from_dict,
    version_from_dict,
)
from docchain.domain.entities import Document, DocumentVersion
from docchain.domain.exceptions import TransportError
from docchain.logging import get_logger

logger = get_logger(__name__)


def _decode(decoder: Callable[[Any], Any], payload: Any) -> Any:
    try:
        return decoder(payload)
    except (KeyError, TypeError, ValueError) as e:
        raise TransportError(f"Unexpected response payload: {e}") from e


class HttpVersionStoreClient:
    """Version store client over the docchain HTTP API.

    Timeouts, network errors, non-2xx responses and unreadable bodies all
    raise ``TransportError``; nothing is retried.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=timeout)

    async def __aenter__(self) -> "HttpVersionStoreClient":
        return self

    async def __aexit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _request(self, method: str, path: str, json: dict | None = None) -> Any:
        url = f"{self._base_url}{path}"
        try:
            response = await self._client.request(method, url, json=json)
        except httpx.TimeoutException as e:
            logger.warning("http_client.timeout", method=method, path=path)
            raise TransportError(f"{method} {path} timed out") from e
        except httpx.HTTPError as e:
            logger.warning("http_client.request_failed", method=method, path=path, error=str(e))
            raise TransportError(f"{method} {path} failed: {e}") from e

        if not response.is_success:
            logger.warning(
                "http_client.unsuccessful_response",
                method=method,
                path=path,
                status_code=response.status_code,
            )
            raise TransportError(
                f"{method} {path} returned {response.status_code}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as e:
            raise TransportError(f"{method} {path} returned invalid JSON") from e

    async def get_document(self, document_id: UUID) -> Document:
        data = await self._request("GET", f"/v1/documents/{document_id}")
        return _decode(document_from_dict, data)

    async def list_versions(self, document_id: UUID) -> list[DocumentVersion]:
        data = await self._request("GET", f"/v1/documents/{document_id}/versions")
        return _decode(
            lambda d: [version_from_dict(item) for item in d["items"]], data
        )

    async def create_version(
        self,
        document_id: UUID,
        content: str,
        title: str | None = None,
        diff_content: str | None = None,
    ) -> DocumentVersion:
        data = await self._request(
            "POST",
            f"/v1/documents/{document_id}/versions",
            json={"content": content, "title": title, "diff_content": diff_content},
        )
        return _decode(version_from_dict, data)

    async def restore_version(self, document_id: UUID, version_id: UUID) -> Document:
        data = await self._request(
            "POST", f"/v1/documents/{document_id}/versions/{version_id}/restore"
        )
        return _decode(document_from_dict, data)
