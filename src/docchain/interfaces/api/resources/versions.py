"""Document version API resources."""

from uuid import UUID

import falcon.asgi

from docchain.application.dto.serialization import document_to_dict, version_to_dict
from docchain.application.dto.version_dto import VersionCreateInput
from docchain.application.use_cases.version.create_version import CreateVersionUseCase
from docchain.application.use_cases.version.get_version import GetVersionUseCase
from docchain.application.use_cases.version.list_versions import ListVersionsUseCase
from docchain.application.use_cases.version.restore_version import RestoreVersionUseCase
from docchain.domain.exceptions import DocChainError
from docchain.interfaces.api.resources.errors import bad_request, respond_with_error


def _optional_str(body: dict, key: str) -> str | None:
    value = body.get(key)
    if value is not None and not isinstance(value, str):
        raise TypeError(f"{key} must be a string")
    return value


class VersionsResource:
    """GET/POST /v1/documents/{document_id}/versions."""

    def __init__(
        self,
        list_versions: ListVersionsUseCase,
        create_version: CreateVersionUseCase,
    ) -> None:
        self._list_versions = list_versions
        self._create_version = create_version

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        """List versions, oldest first."""
        try:
            doc_id = UUID(document_id)
        except ValueError:
            bad_request(resp, "Invalid UUID")
            return
        try:
            versions = await self._list_versions.execute(doc_id)
        except DocChainError as e:
            respond_with_error(resp, e)
            return
        resp.media = {"items": [version_to_dict(v) for v in versions]}
        resp.status = falcon.HTTP_200

    async def on_post(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        """Append a version with the given content."""
        try:
            doc_id = UUID(document_id)
            body = await req.get_media()
            input_data = VersionCreateInput(
                document_id=doc_id,
                content=_optional_str(body, "content"),
                title=_optional_str(body, "title"),
                diff_content=_optional_str(body, "diff_content"),
            )
        except (ValueError, TypeError, AttributeError) as e:
            bad_request(resp, f"Invalid version: {e}")
            return

        try:
            version = await self._create_version.execute(input_data)
        except DocChainError as e:
            respond_with_error(resp, e)
            return
        resp.media = version_to_dict(version)
        resp.status = falcon.HTTP_201


class VersionResource:
    """GET /v1/documents/{document_id}/versions/{version_id}."""

    def __init__(self, get_version: GetVersionUseCase) -> None:
        self._get_version = get_version

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: str,
        version_id: str,
    ) -> None:
        try:
            doc_id = UUID(document_id)
            ver_id = UUID(version_id)
        except ValueError:
            bad_request(resp, "Invalid UUID")
            return
        try:
            version = await self._get_version.execute(doc_id, ver_id)
        except DocChainError as e:
            respond_with_error(resp, e)
            return
        resp.media = version_to_dict(version)
        resp.status = falcon.HTTP_200


class VersionRestoreResource:
    """POST /v1/documents/{document_id}/versions/{version_id}/restore."""

    def __init__(self, restore_version: RestoreVersionUseCase) -> None:
        self._restore_version = restore_version

    async def on_post(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        document_id: str,
        version_id: str,
    ) -> None:
        """Make the version the document head; returns the updated document."""
        try:
            doc_id = UUID(document_id)
            ver_id = UUID(version_id)
        except ValueError:
            bad_request(resp, "Invalid UUID")
            return
        try:
            document = await self._restore_version.execute(doc_id, ver_id)
        except DocChainError as e:
            respond_with_error(resp, e)
            return
        resp.media = document_to_dict(document)
        resp.status = falcon.HTTP_200
