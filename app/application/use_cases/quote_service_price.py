import logging

from app.application.dtos.hiring_dto import PriceQuoteDTO
from app.application.interfaces.service_repo import ServiceRepo
from app.domain.errors import InvalidDurationError, ServiceNotFoundError
from app.domain.services.pricing_calculator import PricingCalculator


class QuoteServicePriceUseCase:
    """
    Cotiza el precio de un servicio para una duración, sin crear nada.

    Aplica los mismos límites de duración y la misma calculadora que la
    creación de contrataciones, así la cotización coincide con el precio final.
    """

    def __init__(
        self,
        service_repo: ServiceRepo,
        calculator: PricingCalculator | None = None,
    ) -> None:
        self._service_repo = service_repo
        self._calculator = calculator or PricingCalculator()
        self._logger = logging.getLogger(__name__)

    async def execute(self, service_id: str, duration: int) -> PriceQuoteDTO:
        service = await self._service_repo.get_by_id(service_id)
        if service is None:
            raise ServiceNotFoundError(service_id)

        if (
            not isinstance(duration, bool)
            and isinstance(duration, int)
            and not service.accepts_duration(duration)
        ):
            raise InvalidDurationError(
                duration=duration,
                min_duration=service.min_duration,
                max_duration=service.max_duration,
                time_unit=service.time_unit.value,
            )

        breakdown = self._calculator.calculate(
            rate=service.rate,
            duration=duration,
            commission_rate=service.commission_rate,
        )
        self._logger.info(
            "Service price quoted",
            extra={
                "service_id": service.id,
                "duration": duration,
                "final_price": str(breakdown.final_price),
            },
        )
        return PriceQuoteDTO(
            service_id=service.id,
            duration=duration,
            time_unit=service.time_unit.value,
            breakdown=breakdown,
        )
