"""Document API resources."""

from uuid import UUID

import falcon.asgi

from docchain.application.dto.document_dto import DocumentCreateInput
from docchain.application.dto.serialization import document_to_dict
from docchain.application.use_cases.document.create_document import CreateDocumentUseCase
from docchain.application.use_cases.document.delete_document import DeleteDocumentUseCase
from docchain.application.use_cases.document.get_document import GetDocumentUseCase
from docchain.domain.exceptions import DocChainError
from docchain.domain.value_objects import ArtifactKind, Visibility
from docchain.interfaces.api.resources.errors import bad_request, respond_with_error


def _parse_create_body(body: dict, owner_id: str) -> DocumentCreateInput:
    """Build create input from JSON body; raises KeyError/ValueError/TypeError."""
    title = body["title"]
    if not isinstance(title, str):
        raise TypeError("title must be a string")
    content = body.get("content")
    if content is not None and not isinstance(content, str):
        raise TypeError("content must be a string")
    style = body.get("style")
    if style is not None and not isinstance(style, dict):
        raise TypeError("style must be an object")
    chat_id = body.get("chat_id")
    return DocumentCreateInput(
        title=title,
        owner_id=owner_id,
        content=content,
        kind=ArtifactKind(body.get("kind", ArtifactKind.TEXT)),
        visibility=Visibility(body.get("visibility", Visibility.PRIVATE)),
        chat_id=UUID(chat_id) if chat_id else None,
        style=style,
        author=body.get("author"),
        slug=body.get("slug"),
    )


class DocumentsResource:
    """POST /v1/documents - create document."""

    def __init__(self, create_document: CreateDocumentUseCase) -> None:
        self._create_document = create_document

    async def on_post(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """Create a document owned by the requesting user."""
        try:
            body = await req.get_media()
            input_data = _parse_create_body(body, req.context.user.user_id)
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            bad_request(resp, f"Invalid document: {e}")
            return

        try:
            document = await self._create_document.execute(input_data)
        except DocChainError as e:
            respond_with_error(resp, e)
            return
        resp.media = document_to_dict(document)
        resp.status = falcon.HTTP_201


class DocumentResource:
    """GET/DELETE /v1/documents/{document_id}."""

    def __init__(
        self,
        get_document: GetDocumentUseCase,
        delete_document: DeleteDocumentUseCase,
    ) -> None:
        self._get_document = get_document
        self._delete_document = delete_document

    async def on_get(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        """Get document head."""
        try:
            doc_id = UUID(document_id)
        except ValueError:
            bad_request(resp, "Invalid UUID")
            return
        try:
            document = await self._get_document.execute(doc_id)
        except DocChainError as e:
            respond_with_error(resp, e)
            return
        resp.media = document_to_dict(document)
        resp.status = falcon.HTTP_200

    async def on_delete(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, document_id: str
    ) -> None:
        """Delete document and its versions."""
        try:
            doc_id = UUID(document_id)
        except ValueError:
            bad_request(resp, "Invalid UUID")
            return
        try:
            await self._delete_document.execute(doc_id)
        except DocChainError as e:
            respond_with_error(resp, e)
            return
        resp.status = falcon.HTTP_204
