"""Entidades del dominio de contrataciones."""

from app.domain.entities.hiring import (
    Hiring,
    HiringStatus,
    PaymentEntry,
    PaymentMethod,
    Rating,
)
from app.domain.entities.service import RatingAggregate, Service, TimeUnit

__all__ = [
    # Hiring
    "Hiring",
    "HiringStatus",
    "PaymentEntry",
    "PaymentMethod",
    "Rating",
    # Service
    "Service",
    "TimeUnit",
    "RatingAggregate",
]
