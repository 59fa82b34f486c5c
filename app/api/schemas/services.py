from decimal import Decimal

from pydantic import BaseModel, ConfigDict

from app.application.dtos.hiring_dto import PriceQuoteDTO


class QuotePriceRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    duration: int


class PriceQuoteResponse(BaseModel):
    model_config = ConfigDict(json_encoders={Decimal: lambda v: format(v, ".2f")})

    service_id: str
    duration: int
    time_unit: str
    base_price: Decimal
    commission_rate: Decimal
    commission_amount: Decimal
    total_price: Decimal
    final_price: Decimal
    provider_price: Decimal

    @classmethod
    def from_quote(cls, quote: PriceQuoteDTO) -> "PriceQuoteResponse":
        return cls(
            service_id=quote.service_id,
            duration=quote.duration,
            time_unit=quote.time_unit,
            **quote.breakdown.as_dict(),
        )
