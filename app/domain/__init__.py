"""
Capa de Dominio - Motor de contrataciones.

Esta capa contiene la lógica de negocio pura, sin dependencias de frameworks.
Incluye entidades, value objects, servicios de dominio y excepciones.

Estructura:
- entities/: Entidades del dominio (Hiring, Service)
- value_objects/: Objetos de valor inmutables (PriceBreakdown, DatetimeRange)
- services/: Precios, máquina de estados, ledger de pagos y calificaciones
- errors.py: Excepciones específicas del dominio
- constants.py: Constantes del dominio
"""

from app.domain.constants import (
    HIRING_STATUS_CANCELLED,
    HIRING_STATUS_COMPLETED,
    HIRING_STATUS_CONFIRMED,
    HIRING_STATUS_IN_PROGRESS,
    HIRING_STATUS_PENDING,
)
from app.domain.entities import (
    Hiring,
    HiringStatus,
    PaymentEntry,
    PaymentMethod,
    Rating,
    RatingAggregate,
    Service,
    TimeUnit,
)
from app.domain.errors import (
    AlreadyRatedError,
    DomainError,
    HiringNotFoundError,
    InvalidDateRangeError,
    InvalidDurationError,
    InvalidPaymentError,
    InvalidPricingInputError,
    InvalidScoreError,
    InvalidStateError,
    InvalidTransitionError,
    OptimisticLockError,
    ServiceNotFoundError,
    UnauthorizedError,
    ValidationError,
)
from app.domain.value_objects import DatetimeRange, PriceBreakdown

__all__ = [
    # Constants
    "HIRING_STATUS_CANCELLED",
    "HIRING_STATUS_COMPLETED",
    "HIRING_STATUS_CONFIRMED",
    "HIRING_STATUS_IN_PROGRESS",
    "HIRING_STATUS_PENDING",
    # Entities
    "Hiring",
    "HiringStatus",
    "PaymentEntry",
    "PaymentMethod",
    "Rating",
    "RatingAggregate",
    "Service",
    "TimeUnit",
    # Value Objects
    "DatetimeRange",
    "PriceBreakdown",
    # Errors
    "DomainError",
    "ValidationError",
    "InvalidPricingInputError",
    "InvalidDurationError",
    "InvalidDateRangeError",
    "InvalidPaymentError",
    "InvalidScoreError",
    "InvalidTransitionError",
    "InvalidStateError",
    "AlreadyRatedError",
    "OptimisticLockError",
    "UnauthorizedError",
    "HiringNotFoundError",
    "ServiceNotFoundError",
]
