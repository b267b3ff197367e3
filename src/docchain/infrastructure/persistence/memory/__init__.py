"""In-memory persistence adapter."""

from docchain.infrastructure.persistence.memory.database import MemoryDatabase
from docchain.infrastructure.persistence.memory.unit_of_work import (
    MemoryUnitOfWork,
    create_memory_uow_factory,
)

__all__ = [
    "MemoryDatabase",
    "MemoryUnitOfWork",
    "create_memory_uow_factory",
]
