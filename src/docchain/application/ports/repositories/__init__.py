"""Repository ports."""

from docchain.application.ports.repositories.document_repository import (
    DocumentRepository,
)
from docchain.application.ports.repositories.version_repository import (
    DocumentVersionRepository,
)

__all__ = [
    "DocumentRepository",
    "DocumentVersionRepository",
]
