"""Implementaciones in-memory para testing y desarrollo."""

from app.infrastructure.in_memory.hiring_repo import InMemoryHiringRepo
from app.infrastructure.in_memory.service_repo import InMemoryServiceRepo
from app.infrastructure.in_memory.transaction_manager import NoopTransactionManager as InMemoryTransactionManager

__all__ = [
    # Repositories
    "InMemoryHiringRepo",
    "InMemoryServiceRepo",
    # Infrastructure
    "InMemoryTransactionManager",
]
