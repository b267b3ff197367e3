"""Mapping of domain errors to HTTP responses."""

import falcon
import falcon.asgi

from docchain.domain.exceptions import (
    ChainIntegrityError,
    ConflictError,
    DocChainError,
    NotFoundError,
    TransportError,
    ValidationError,
)
from docchain.logging import get_logger

logger = get_logger(__name__)

_STATUS_BY_ERROR: tuple[tuple[type[DocChainError], str], ...] = (
    (NotFoundError, falcon.HTTP_404),
    (ConflictError, falcon.HTTP_409),
    (ValidationError, falcon.HTTP_400),
    (TransportError, falcon.HTTP_502),
    (ChainIntegrityError, falcon.HTTP_500),
)


def respond_with_error(resp: falcon.asgi.Response, error: DocChainError) -> None:
    """Set status and ``{"error": ...}`` body for a domain error."""
    for error_type, status in _STATUS_BY_ERROR:
        if isinstance(error, error_type):
            resp.status = status
            break
    else:
        resp.status = falcon.HTTP_500
    if isinstance(error, ChainIntegrityError):
        logger.error("version_chain.corrupt", error=str(error))
    resp.media = {"error": str(error)}


def bad_request(resp: falcon.asgi.Response, message: str) -> None:
    resp.status = falcon.HTTP_400
    resp.media = {"error": message}


async def handle_unexpected(
    req: falcon.asgi.Request, resp: falcon.asgi.Response, ex: Exception, params: dict
) -> None:
    """Catch-all error handler: log and answer 500."""
    logger.exception("request.unhandled_error", method=req.method, path=req.path)
    resp.status = falcon.HTTP_500
    resp.media = {"title": "500 Internal Server Error"}
