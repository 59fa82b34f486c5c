import logging

from app.application.dtos.hiring_dto import Actor
from app.application.interfaces.clock import Clock
from app.application.interfaces.hiring_repo import HiringRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.use_cases.hiring_access import load_hiring
from app.domain.entities.hiring import Hiring
from app.domain.errors import UnauthorizedError
from app.domain.services.hiring_state_machine import HiringStateMachine


class ChangeHiringStatusUseCase:
    def __init__(
        self,
        hiring_repo: HiringRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
        state_machine: HiringStateMachine | None = None,
    ) -> None:
        self._hiring_repo = hiring_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._state_machine = state_machine or HiringStateMachine()
        self._logger = logging.getLogger(__name__)

    async def execute(self, actor: Actor, hiring_id: str, requested_status: str) -> Hiring:
        async with self._transaction_manager.start():
            hiring = await load_hiring(self._hiring_repo, hiring_id)
            if not actor.can_view(hiring):
                self._logger.warning(
                    "Status change rejected",
                    extra={"hiring_id": hiring_id, "user_id": actor.user_id},
                )
                raise UnauthorizedError(
                    user_id=actor.user_id, operation="actualizar esta contratación"
                )

            previous_status = hiring.status
            expected_lock_version = hiring.lock_version
            self._state_machine.apply(hiring, requested_status, self._clock.now())

            if hiring.lock_version != expected_lock_version:
                await self._hiring_repo.save(hiring, expected_lock_version=expected_lock_version)

        self._logger.info(
            "Hiring status changed",
            extra={
                "hiring_id": hiring.id,
                "from_status": previous_status.value,
                "to_status": hiring.status.value,
                "user_id": actor.user_id,
            },
        )
        return hiring
