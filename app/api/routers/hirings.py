from collections.abc import Awaitable, Callable
from typing import TypeVar

from fastapi import APIRouter, Depends, status

from app.api.dependencies import get_actor, get_use_cases
from app.api.schemas.hirings import (
    AddPaymentRequest,
    ChangeStatusRequest,
    CreateHiringRequest,
    HiringResponse,
    RateHiringRequest,
    RateHiringResponse,
)
from app.application.dtos.hiring_dto import Actor, CreateHiringDTO
from app.config import Settings, get_settings
from app.domain.services.payment_ledger import PaymentInput
from app.domain.services.rating_aggregator import RatingInput
from app.infrastructure.db.retry import retry_on_deadlock

router = APIRouter()

T = TypeVar("T")


async def _run(settings: Settings, call: Callable[[], Awaitable[T]]) -> T:
    return await retry_on_deadlock(
        call,
        max_attempts=settings.db_retry_attempts,
        base_delay=settings.db_retry_base_delay,
    )


@router.post(
    "/hirings",
    response_model=HiringResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_hiring(
    payload: CreateHiringRequest,
    actor: Actor = Depends(get_actor),
    settings: Settings = Depends(get_settings),
    use_cases=Depends(get_use_cases),
) -> HiringResponse:
    request = CreateHiringDTO(
        service_id=payload.service_id,
        start_date=payload.start_date,
        end_date=payload.end_date,
        duration=payload.duration,
        payment_method=payload.payment_method,
        notes=payload.notes,
    )
    hiring = await _run(settings, lambda: use_cases["create_hiring"].execute(actor, request))
    return HiringResponse.from_entity(hiring)


@router.get("/hirings/my", response_model=list[HiringResponse])
async def list_my_hirings(
    actor: Actor = Depends(get_actor),
    use_cases=Depends(get_use_cases),
) -> list[HiringResponse]:
    hirings = await use_cases["list_my_hirings"].execute(actor)
    return [HiringResponse.from_entity(hiring) for hiring in hirings]


@router.get("/hirings/{hiring_id}", response_model=HiringResponse)
async def get_hiring(
    hiring_id: str,
    actor: Actor = Depends(get_actor),
    use_cases=Depends(get_use_cases),
) -> HiringResponse:
    hiring = await use_cases["get_hiring"].execute(actor, hiring_id)
    return HiringResponse.from_entity(hiring)


@router.put("/hirings/{hiring_id}/status", response_model=HiringResponse)
async def change_hiring_status(
    hiring_id: str,
    payload: ChangeStatusRequest,
    actor: Actor = Depends(get_actor),
    settings: Settings = Depends(get_settings),
    use_cases=Depends(get_use_cases),
) -> HiringResponse:
    hiring = await _run(
        settings,
        lambda: use_cases["change_status"].execute(actor, hiring_id, payload.status),
    )
    return HiringResponse.from_entity(hiring)


@router.post("/hirings/{hiring_id}/payment", response_model=HiringResponse)
async def add_payment(
    hiring_id: str,
    payload: AddPaymentRequest,
    actor: Actor = Depends(get_actor),
    settings: Settings = Depends(get_settings),
    use_cases=Depends(get_use_cases),
) -> HiringResponse:
    payment = PaymentInput(
        amount=payload.amount,
        concept=payload.concept,
        receipt=payload.receipt,
        transaction_id=payload.transaction_id,
    )
    hiring = await _run(
        settings,
        lambda: use_cases["add_payment"].execute(actor, hiring_id, payment),
    )
    return HiringResponse.from_entity(hiring)


@router.post("/hirings/{hiring_id}/rate", response_model=RateHiringResponse)
async def rate_hiring(
    hiring_id: str,
    payload: RateHiringRequest,
    actor: Actor = Depends(get_actor),
    settings: Settings = Depends(get_settings),
    use_cases=Depends(get_use_cases),
) -> RateHiringResponse:
    rating = RatingInput(score=payload.score, comment=payload.comment)
    result = await _run(
        settings,
        lambda: use_cases["rate_hiring"].execute(actor, hiring_id, rating),
    )
    return RateHiringResponse.from_result(result)
