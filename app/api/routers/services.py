from fastapi import APIRouter, Depends

from app.api.dependencies import get_use_cases
from app.api.schemas.services import PriceQuoteResponse, QuotePriceRequest

router = APIRouter()


@router.post("/services/{service_id}/price", response_model=PriceQuoteResponse)
async def quote_service_price(
    service_id: str,
    payload: QuotePriceRequest,
    use_cases=Depends(get_use_cases),
) -> PriceQuoteResponse:
    quote = await use_cases["quote_price"].execute(service_id, payload.duration)
    return PriceQuoteResponse.from_quote(quote)
