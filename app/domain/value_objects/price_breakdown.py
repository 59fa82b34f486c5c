"""Value Object PriceBreakdown - desglose de precio de una contratación."""

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class PriceBreakdown:
    """
    Desglose inmutable del precio de una contratación.

    Attributes:
        base_price: tarifa × duración.
        commission_rate: porcentaje de comisión de la plataforma (0-50).
        commission_amount: base_price × commission_rate / 100.
        total_price: igual a base_price.
        final_price: lo que paga el cliente (base + comisión).
        provider_price: lo que recibe el proveedor (base - comisión).
    """

    base_price: Decimal
    commission_rate: Decimal
    commission_amount: Decimal
    total_price: Decimal
    final_price: Decimal
    provider_price: Decimal

    def as_dict(self) -> dict[str, Decimal]:
        return {
            "base_price": self.base_price,
            "commission_rate": self.commission_rate,
            "commission_amount": self.commission_amount,
            "total_price": self.total_price,
            "final_price": self.final_price,
            "provider_price": self.provider_price,
        }
