"""Servicios de dominio: precios, estados, pagos y calificaciones."""

from app.domain.services.hiring_factory import HiringFactory
from app.domain.services.hiring_state_machine import HiringStateMachine
from app.domain.services.payment_ledger import PaymentInput, PaymentLedger
from app.domain.services.pricing_calculator import PricingCalculator
from app.domain.services.rating_aggregator import RatingAggregator, RatingInput

__all__ = [
    "HiringFactory",
    "HiringStateMachine",
    "PaymentInput",
    "PaymentLedger",
    "PricingCalculator",
    "RatingAggregator",
    "RatingInput",
]
