"""CORS middleware - adds Access-Control-Allow-Origin headers."""

import falcon.asgi

_ALLOWED_METHODS = "GET, POST, DELETE, OPTIONS"
_ALLOWED_HEADERS = "Authorization, Content-Type, X-User-Id, X-Request-ID"


class CORSMiddleware:
    """Middleware that adds CORS headers and answers OPTIONS preflight.

    ``"*"`` in ``origins`` allows any origin.
    """

    def __init__(self, origins: list[str]) -> None:
        self._origins = origins
        self._allow_any = "*" in origins

    def _allowed_origin(self, origin: str | None) -> str | None:
        if self._allow_any:
            return origin or "*"
        if origin and origin in self._origins:
            return origin
        return None

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        if req.method == "OPTIONS":
            resp.status = falcon.HTTP_204
            resp.complete = True

    async def process_response(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response, resource, req_succeeded
    ) -> None:
        allowed = self._allowed_origin(req.get_header("Origin"))
        if not allowed:
            return
        resp.set_header("Access-Control-Allow-Origin", allowed)
        resp.set_header("Vary", "Origin")
        resp.set_header("Access-Control-Allow-Methods", _ALLOWED_METHODS)
        resp.set_header("Access-Control-Allow-Headers", _ALLOWED_HEADERS)
        resp.set_header("Access-Control-Max-Age", "86400")
