import logging

from app.application.dtos.hiring_dto import Actor, RatingResultDTO
from app.application.interfaces.clock import Clock
from app.application.interfaces.hiring_repo import HiringRepo
from app.application.interfaces.service_repo import ServiceRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.use_cases.hiring_access import load_hiring
from app.domain.services.rating_aggregator import RatingAggregator, RatingInput


class RateHiringUseCase:
    def __init__(
        self,
        hiring_repo: HiringRepo,
        service_repo: ServiceRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
        aggregator: RatingAggregator | None = None,
    ) -> None:
        self._hiring_repo = hiring_repo
        self._service_repo = service_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._aggregator = aggregator or RatingAggregator()
        self._logger = logging.getLogger(__name__)

    async def execute(self, actor: Actor, hiring_id: str, rating: RatingInput) -> RatingResultDTO:
        async with self._transaction_manager.start():
            hiring = await load_hiring(self._hiring_repo, hiring_id)
            expected_lock_version = hiring.lock_version
            now = self._clock.now()

            # Lectura no atómica respecto a otras calificaciones concurrentes:
            # el promedio puede quedar momentáneamente desfasado.
            siblings = await self._hiring_repo.list_rated_by_service(hiring.service_id)
            hiring, aggregate = self._aggregator.rate(
                hiring=hiring,
                client_id=actor.user_id,
                rating=rating,
                rated_siblings=siblings,
                now=now,
            )
            await self._hiring_repo.save(hiring, expected_lock_version=expected_lock_version)

            service = await self._service_repo.get_by_id(hiring.service_id)
            if service is not None:
                await self._service_repo.update_rating(
                    service.id, aggregate, updated_at=now
                )
            else:
                self._logger.warning(
                    "Rated hiring references a missing service",
                    extra={"hiring_id": hiring.id, "service_id": hiring.service_id},
                )

        self._logger.info(
            "Hiring rated",
            extra={
                "hiring_id": hiring.id,
                "service_id": hiring.service_id,
                "score": hiring.rating.score if hiring.rating else None,
                "average_rating": aggregate.average_rating,
                "rating_count": aggregate.rating_count,
            },
        )
        return RatingResultDTO(
            hiring=hiring,
            service_id=hiring.service_id,
            service_rating=aggregate,
        )
