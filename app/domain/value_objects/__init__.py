"""Value Objects del dominio de contrataciones."""

from app.domain.value_objects.datetime_range import DatetimeRange
from app.domain.value_objects.money import (
    MAX_MONEY_AMOUNT,
    MONEY_QUANTUM,
    has_cents_precision,
    to_decimal,
    to_money,
)
from app.domain.value_objects.price_breakdown import PriceBreakdown

__all__ = [
    "DatetimeRange",
    "MAX_MONEY_AMOUNT",
    "MONEY_QUANTUM",
    "has_cents_precision",
    "PriceBreakdown",
    "to_decimal",
    "to_money",
]
