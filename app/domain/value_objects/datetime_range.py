"""Value Object DatetimeRange - periodo de una contratación."""

from dataclasses import dataclass
from datetime import datetime

from app.domain.errors import InvalidDateRangeError


@dataclass(frozen=True)
class DatetimeRange:
    """
    Value Object inmutable que representa un rango de fechas/horas.

    Usado para fecha de inicio y fecha de fin de una contratación.

    Attributes:
        start: Fecha/hora de inicio.
        end: Fecha/hora de fin (estrictamente posterior a start).
    """

    start: datetime
    end: datetime

    def __post_init__(self) -> None:
        if (self.start.tzinfo is None) != (self.end.tzinfo is None):
            raise InvalidDateRangeError(
                "Las fechas de inicio y fin deben ser ambas con o sin zona horaria"
            )
        if self.start >= self.end:
            raise InvalidDateRangeError(
                "La fecha de fin debe ser posterior a la fecha de inicio: "
                f"{self.start.isoformat()} >= {self.end.isoformat()}"
            )
