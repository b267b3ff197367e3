"""Domain entities."""

from docchain.domain.entities.document import Document
from docchain.domain.entities.document_version import DocumentVersion

__all__ = [
    "Document",
    "DocumentVersion",
]
