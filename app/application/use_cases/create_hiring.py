import logging

from app.application.dtos.hiring_dto import Actor, CreateHiringDTO
from app.application.interfaces.clock import Clock
from app.application.interfaces.hiring_repo import HiringRepo
from app.application.interfaces.service_repo import ServiceRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.interfaces.uuid_generator import UUIDGenerator
from app.domain.entities.hiring import Hiring
from app.domain.errors import ServiceNotFoundError
from app.domain.services.hiring_factory import HiringFactory


class CreateHiringUseCase:
    def __init__(
        self,
        service_repo: ServiceRepo,
        hiring_repo: HiringRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
        uuid_generator: UUIDGenerator,
        factory: HiringFactory | None = None,
    ) -> None:
        self._service_repo = service_repo
        self._hiring_repo = hiring_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._uuid_generator = uuid_generator
        self._factory = factory or HiringFactory()
        self._logger = logging.getLogger(__name__)

    async def execute(self, actor: Actor, request: CreateHiringDTO) -> Hiring:
        async with self._transaction_manager.start():
            service = await self._service_repo.get_by_id(request.service_id)
            if service is None:
                raise ServiceNotFoundError(request.service_id)

            hiring = self._factory.create(
                hiring_id=self._uuid_generator.generate_uuid(),
                service=service,
                client_id=actor.user_id,
                start_date=request.start_date,
                end_date=request.end_date,
                duration=request.duration,
                payment_method=request.payment_method,
                notes=request.notes,
                now=self._clock.now(),
            )
            await self._hiring_repo.add(hiring)

        self._logger.info(
            "Hiring created",
            extra={
                "hiring_id": hiring.id,
                "service_id": hiring.service_id,
                "client_id": hiring.client_id,
                "duration": hiring.duration,
                "final_price": str(hiring.final_price),
            },
        )
        return hiring
