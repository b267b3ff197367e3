"""Request context middleware - request user and log context."""

from dataclasses import dataclass
from uuid import uuid4

import falcon.asgi

from docchain.logging import bind_log_context, clear_log_context

ANONYMOUS = "anonymous"


@dataclass
class RequestUser:
    """User from request context."""

    user_id: str


class RequestContextMiddleware:
    """Sets req.context.user and binds request metadata to log events.

    Authentication happens upstream; the caller identity arrives in the
    ``X-User-Id`` header and falls back to anonymous.
    """

    async def process_request(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        user_id = (req.get_header("X-User-Id") or "").strip() or ANONYMOUS
        request_id = req.get_header("X-Request-ID") or uuid4().hex
        req.context.user = RequestUser(user_id=user_id)
        req.context.request_id = request_id
        clear_log_context()
        bind_log_context(request_id=request_id, user_id=user_id, path=req.path)

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        request_id = getattr(req.context, "request_id", None)
        if request_id:
            resp.set_header("X-Request-ID", request_id)
        clear_log_context()
