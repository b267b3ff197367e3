"""API middleware."""

from docchain.interfaces.api.middleware.cors import CORSMiddleware
from docchain.interfaces.api.middleware.lifespan import LifespanMiddleware
from docchain.interfaces.api.middleware.request_context import (
    RequestContextMiddleware,
    RequestUser,
)

__all__ = [
    "CORSMiddleware",
    "LifespanMiddleware",
    "RequestContextMiddleware",
    "RequestUser",
]
