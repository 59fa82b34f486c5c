from datetime import datetime, timezone
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, constr, field_validator

from app.application.dtos.hiring_dto import RatingResultDTO
from app.domain.entities.hiring import Hiring, PaymentEntry


def _as_utc(value: datetime) -> datetime:
    """Fechas sin zona horaria se interpretan como UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class CreateHiringRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    service_id: constr(strip_whitespace=True, min_length=1, max_length=36)
    start_date: datetime
    end_date: datetime
    duration: int
    payment_method: str
    notes: str | None = None

    @field_validator("start_date", "end_date")
    @classmethod
    def normalize_dates(cls, value: datetime) -> datetime:
        return _as_utc(value)


class ChangeStatusRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    status: str


class AddPaymentRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    amount: Decimal
    concept: str
    receipt: str | None = Field(default=None, max_length=255)
    transaction_id: str | None = Field(default=None, max_length=128)


class RateHiringRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    score: int
    comment: str | None = None


class PaymentEntryResponse(BaseModel):
    model_config = ConfigDict(json_encoders={Decimal: lambda v: format(v, ".2f")})

    date: datetime
    amount: Decimal
    concept: str
    receipt: str | None = None
    transaction_id: str | None = None

    @classmethod
    def from_entry(cls, entry: PaymentEntry) -> "PaymentEntryResponse":
        return cls(
            date=entry.paid_at,
            amount=entry.amount,
            concept=entry.concept,
            receipt=entry.receipt,
            transaction_id=entry.transaction_id,
        )


class RatingResponse(BaseModel):
    score: int
    comment: str | None = None
    date: datetime


class HiringResponse(BaseModel):
    model_config = ConfigDict(json_encoders={Decimal: lambda v: format(v, ".2f")})

    id: str
    service_id: str
    client_id: str
    provider_id: str
    start_date: datetime
    end_date: datetime
    duration: int
    base_price: Decimal
    commission_rate: Decimal
    commission_amount: Decimal
    total_price: Decimal
    final_price: Decimal
    provider_price: Decimal
    status: str
    payment_method: str
    paid: bool
    paid_at: datetime | None = None
    transaction_id: str | None = None
    total_paid: Decimal
    outstanding_amount: Decimal
    payments: list[PaymentEntryResponse]
    notes: str | None = None
    rating: RatingResponse | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @classmethod
    def from_entity(cls, hiring: Hiring) -> "HiringResponse":
        rating = None
        if hiring.rating is not None:
            rating = RatingResponse(
                score=hiring.rating.score,
                comment=hiring.rating.comment,
                date=hiring.rating.rated_at,
            )
        return cls(
            id=hiring.id,
            service_id=hiring.service_id,
            client_id=hiring.client_id,
            provider_id=hiring.provider_id,
            start_date=hiring.start_date,
            end_date=hiring.end_date,
            duration=hiring.duration,
            base_price=hiring.base_price,
            commission_rate=hiring.commission_rate,
            commission_amount=hiring.commission_amount,
            total_price=hiring.total_price,
            final_price=hiring.final_price,
            provider_price=hiring.provider_price,
            status=hiring.status.value,
            payment_method=hiring.payment_method.value,
            paid=hiring.paid,
            paid_at=hiring.paid_at,
            transaction_id=hiring.transaction_id,
            total_paid=hiring.total_paid,
            outstanding_amount=hiring.outstanding_amount,
            payments=[PaymentEntryResponse.from_entry(entry) for entry in hiring.payments],
            notes=hiring.notes,
            rating=rating,
            created_at=hiring.created_at,
            updated_at=hiring.updated_at,
        )


class ServiceRatingResponse(BaseModel):
    service_id: str
    average_rating: float
    rating_count: int


class RateHiringResponse(BaseModel):
    hiring: HiringResponse
    service: ServiceRatingResponse

    @classmethod
    def from_result(cls, result: RatingResultDTO) -> "RateHiringResponse":
        return cls(
            hiring=HiringResponse.from_entity(result.hiring),
            service=ServiceRatingResponse(
                service_id=result.service_id,
                average_rating=result.service_rating.average_rating,
                rating_count=result.service_rating.rating_count,
            ),
        )
