"""
Capa de Infraestructura - Motor de Contrataciones.

Implementaciones concretas de los puertos (interfaces).

Estructura:
- db/: Tablas, repositorios SQL, transacciones y reintentos
- in_memory/: Implementaciones in-memory para testing y desarrollo
- services/: Servicios de infraestructura (Clock, UUID)
"""

# Database
from app.infrastructure.db.repositories.hiring_repo_sql import HiringRepoSQL
from app.infrastructure.db.repositories.service_repo_sql import ServiceRepoSQL
from app.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager

# In-Memory (for testing)
from app.infrastructure.in_memory import (
    InMemoryHiringRepo,
    InMemoryServiceRepo,
    InMemoryTransactionManager,
)

# Services
from app.infrastructure.services.clock_impl import ClockImpl
from app.infrastructure.services.uuid_generator_impl import UUIDGeneratorImpl

__all__ = [
    # Database - Repositories SQL
    "HiringRepoSQL",
    "ServiceRepoSQL",
    "SQLAlchemyTransactionManager",
    # In-Memory Implementations
    "InMemoryHiringRepo",
    "InMemoryServiceRepo",
    "InMemoryTransactionManager",
    # Services
    "ClockImpl",
    "UUIDGeneratorImpl",
]
