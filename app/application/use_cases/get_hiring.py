import logging
from typing import Sequence

from app.application.dtos.hiring_dto import Actor
from app.application.interfaces.hiring_repo import HiringRepo
from app.application.use_cases.hiring_access import load_hiring
from app.domain.entities.hiring import Hiring
from app.domain.errors import UnauthorizedError


class GetHiringUseCase:
    def __init__(self, hiring_repo: HiringRepo) -> None:
        self._hiring_repo = hiring_repo
        self._logger = logging.getLogger(__name__)

    async def execute(self, actor: Actor, hiring_id: str) -> Hiring:
        hiring = await load_hiring(self._hiring_repo, hiring_id)
        if not actor.can_view(hiring):
            self._logger.warning(
                "Hiring access rejected",
                extra={"hiring_id": hiring_id, "user_id": actor.user_id},
            )
            raise UnauthorizedError(user_id=actor.user_id, operation="ver esta contratación")
        return hiring


class ListMyHiringsUseCase:
    def __init__(self, hiring_repo: HiringRepo) -> None:
        self._hiring_repo = hiring_repo

    async def execute(self, actor: Actor) -> Sequence[Hiring]:
        return await self._hiring_repo.list_by_participant(actor.user_id)
