"""Cálculo del desglose de precio de una contratación."""

from decimal import Decimal

from app.domain.constants import MAX_COMMISSION_RATE, MIN_COMMISSION_RATE
from app.domain.errors import InvalidPricingInputError
from app.domain.value_objects.money import MAX_MONEY_AMOUNT, to_decimal, to_money
from app.domain.value_objects.price_breakdown import PriceBreakdown


class PricingCalculator:
    """
    Calculadora pura de precios.

    La comisión se redondea a centavos una sola vez; precio final y precio del
    proveedor se derivan de los montos ya redondeados, de modo que
    ``final - base == comision == base - proveedor`` siempre se cumple.
    """

    def calculate(self, rate: object, duration: int, commission_rate: object) -> PriceBreakdown:
        rate_value = self._parse(rate, "rate")
        commission_value = self._parse(commission_rate, "commission_rate")

        if isinstance(duration, bool) or not isinstance(duration, int):
            raise InvalidPricingInputError("duration", duration, "debe ser un entero")
        if duration <= 0:
            raise InvalidPricingInputError("duration", duration, "debe ser mayor a 0")
        if rate_value < 0:
            raise InvalidPricingInputError("rate", rate, "no puede ser negativa")
        if not MIN_COMMISSION_RATE <= commission_value <= MAX_COMMISSION_RATE:
            raise InvalidPricingInputError(
                "commission_rate",
                commission_rate,
                f"debe estar entre {MIN_COMMISSION_RATE} y {MAX_COMMISSION_RATE}",
            )

        try:
            base_price = to_money(rate_value * duration)
            commission_amount = to_money(base_price * commission_value / Decimal("100"))
        except ValueError as exc:
            raise InvalidPricingInputError("rate", rate, "fuera de rango") from exc
        if base_price + commission_amount > MAX_MONEY_AMOUNT:
            raise InvalidPricingInputError(
                "rate", rate, f"el precio final no puede exceder {MAX_MONEY_AMOUNT}"
            )

        return PriceBreakdown(
            base_price=base_price,
            commission_rate=commission_value,
            commission_amount=commission_amount,
            total_price=base_price,
            final_price=base_price + commission_amount,
            provider_price=base_price - commission_amount,
        )

    @staticmethod
    def _parse(value: object, field: str) -> Decimal:
        try:
            return to_decimal(value)
        except ValueError as exc:
            raise InvalidPricingInputError(field, value, "debe ser numérico") from exc
