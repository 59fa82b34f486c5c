"""Entidad Hiring - Agregado raíz del dominio."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum

from app.domain.constants import (
    HIRING_STATUS_CANCELLED,
    HIRING_STATUS_COMPLETED,
    HIRING_STATUS_CONFIRMED,
    HIRING_STATUS_IN_PROGRESS,
    HIRING_STATUS_PENDING,
)


class HiringStatus(str, Enum):
    """Estados posibles de una contratación."""

    PENDING = HIRING_STATUS_PENDING
    CONFIRMED = HIRING_STATUS_CONFIRMED
    IN_PROGRESS = HIRING_STATUS_IN_PROGRESS
    COMPLETED = HIRING_STATUS_COMPLETED
    CANCELLED = HIRING_STATUS_CANCELLED

    @property
    def is_terminal(self) -> bool:
        return self in (HiringStatus.COMPLETED, HiringStatus.CANCELLED)


class PaymentMethod(str, Enum):
    """Métodos de pago aceptados."""

    CASH = "efectivo"
    TRANSFER = "transferencia"
    CARD = "tarjeta"
    PAYPAL = "paypal"
    STRIPE = "stripe"


@dataclass(frozen=True)
class PaymentEntry:
    """Registro del historial de pagos. Nunca se modifica ni se elimina."""

    paid_at: datetime
    amount: Decimal
    concept: str
    receipt: str | None = None
    transaction_id: str | None = None


@dataclass(frozen=True)
class Rating:
    """Calificación del cliente sobre una contratación completada."""

    score: int
    rated_at: datetime
    comment: str | None = None


@dataclass
class Hiring:
    """
    Entidad principal del dominio - Agregado Raíz.

    Representa la contratación de un servicio por un cliente, con su desglose
    de precio congelado al momento de la creación.
    """

    # Identificadores y referencias (inmutables tras la creación)
    id: str
    service_id: str
    client_id: str
    provider_id: str

    # Periodo contratado
    start_date: datetime
    end_date: datetime
    duration: int

    # Financieros (copiados del servicio al crear, nunca recalculados)
    base_price: Decimal
    commission_rate: Decimal
    commission_amount: Decimal
    total_price: Decimal
    final_price: Decimal

    payment_method: PaymentMethod
    status: HiringStatus = HiringStatus.PENDING

    # Pagos
    paid: bool = False
    paid_at: datetime | None = None
    transaction_id: str | None = None
    payments: list[PaymentEntry] = field(default_factory=list)

    notes: str | None = None
    rating: Rating | None = None

    # Control de concurrencia
    lock_version: int = 0

    # Timestamps
    created_at: datetime | None = None
    updated_at: datetime | None = None

    # === Propiedades calculadas ===

    @property
    def provider_price(self) -> Decimal:
        """Monto neto que recibe el proveedor."""
        return self.base_price - self.commission_amount

    @property
    def total_paid(self) -> Decimal:
        """Suma de todos los montos del historial de pagos."""
        return sum((entry.amount for entry in self.payments), Decimal("0"))

    @property
    def outstanding_amount(self) -> Decimal:
        """Saldo pendiente para cubrir el precio final (nunca negativo)."""
        return max(self.final_price - self.total_paid, Decimal("0"))

    @property
    def is_terminal(self) -> bool:
        return self.status.is_terminal

    @property
    def is_rated(self) -> bool:
        return self.rating is not None

    def is_participant(self, user_id: str) -> bool:
        """Verifica si el usuario es el cliente o el proveedor de la contratación."""
        return user_id in (self.client_id, self.provider_id)

    def touch(self, now: datetime) -> None:
        self.updated_at = now
        self.lock_version += 1
