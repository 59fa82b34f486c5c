"""
Capa de Aplicación - Motor de Contrataciones.

Esta capa contiene los casos de uso, DTOs e interfaces (puertos).
Orquesta la lógica de dominio y define los contratos con la infraestructura.

Estructura:
- use_cases/: Casos de uso del sistema
- dtos/: Data Transfer Objects
- interfaces/: Puertos (contratos para adaptadores)
"""

from app.application.dtos import (
    Actor,
    ActorRole,
    CreateHiringDTO,
    RatingResultDTO,
)
from app.application.interfaces import (
    Clock,
    FakeClock,
    FakeUUIDGenerator,
    HiringRepo,
    ServiceRepo,
    TransactionManager,
    UUIDGenerator,
)

__all__ = [
    # DTOs
    "Actor",
    "ActorRole",
    "CreateHiringDTO",
    "RatingResultDTO",
    # Interfaces - Repositories
    "HiringRepo",
    "ServiceRepo",
    # Interfaces - Infrastructure
    "TransactionManager",
    # Interfaces - Utilities
    "Clock",
    "FakeClock",
    "UUIDGenerator",
    "FakeUUIDGenerator",
]
