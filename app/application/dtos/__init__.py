"""DTOs (Data Transfer Objects) de la capa de aplicación."""

from app.application.dtos.hiring_dto import (
    Actor,
    ActorRole,
    CreateHiringDTO,
    PriceQuoteDTO,
    RatingResultDTO,
)

__all__ = [
    "Actor",
    "ActorRole",
    "CreateHiringDTO",
    "PriceQuoteDTO",
    "RatingResultDTO",
]
