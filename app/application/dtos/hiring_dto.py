"""DTOs para contrataciones."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from app.domain.entities.hiring import Hiring
from app.domain.entities.service import RatingAggregate
from app.domain.value_objects.price_breakdown import PriceBreakdown


class ActorRole(str, Enum):
    """Rol del usuario que invoca la operación."""

    CLIENT = "client"
    PROVIDER = "provider"
    ADMIN = "admin"


@dataclass(frozen=True)
class Actor:
    """Usuario autenticado por la capa externa."""

    user_id: str
    role: ActorRole = ActorRole.CLIENT

    @property
    def is_admin(self) -> bool:
        return self.role == ActorRole.ADMIN

    def can_view(self, hiring: Hiring) -> bool:
        """Admin, cliente o proveedor de la contratación."""
        return self.is_admin or hiring.is_participant(self.user_id)

    def can_pay(self, hiring: Hiring) -> bool:
        """Admin o cliente de la contratación."""
        return self.is_admin or hiring.client_id == self.user_id


@dataclass
class CreateHiringDTO:
    """DTO para crear una nueva contratación."""

    service_id: str
    start_date: datetime
    end_date: datetime
    duration: int
    payment_method: str
    notes: str | None = None


@dataclass(frozen=True)
class RatingResultDTO:
    """Contratación calificada junto con el agregado actualizado del servicio."""

    hiring: Hiring
    service_id: str
    service_rating: RatingAggregate


@dataclass(frozen=True)
class PriceQuoteDTO:
    """Cotización de un servicio para una duración dada."""

    service_id: str
    duration: int
    time_unit: str
    breakdown: PriceBreakdown
