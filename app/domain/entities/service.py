"""Entidad Service - oferta publicada por un proveedor."""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum

from app.domain.constants import DEFAULT_COMMISSION_RATE


class TimeUnit(str, Enum):
    """Unidad de tiempo sobre la que se cobra la tarifa."""

    HOUR = "hora"
    DAY = "dia"
    WEEK = "semana"
    MONTH = "mes"
    PROJECT = "proyecto"


@dataclass(frozen=True)
class RatingAggregate:
    """Promedio y número de calificaciones de un servicio."""

    average_rating: float
    rating_count: int


@dataclass
class Service:
    """
    Servicio del catálogo.

    El motor de contrataciones solo lo lee para obtener los datos de precio
    y escribe únicamente el agregado de calificaciones.
    """

    id: str
    provider_id: str
    rate: Decimal
    time_unit: TimeUnit
    min_duration: int
    max_duration: int
    commission_rate: Decimal = DEFAULT_COMMISSION_RATE
    title: str = ""
    average_rating: float = 0.0
    rating_count: int = 0
    is_active: bool = True
    updated_at: datetime | None = None

    def accepts_duration(self, duration: int) -> bool:
        """Verifica si la duración cae dentro de los límites del servicio."""
        return self.min_duration <= duration <= self.max_duration

    def apply_rating_aggregate(self, aggregate: RatingAggregate, updated_at: datetime) -> None:
        """Reemplaza el promedio de calificaciones con un valor recalculado."""
        self.average_rating = aggregate.average_rating
        self.rating_count = aggregate.rating_count
        self.updated_at = updated_at
