from app.application.interfaces.hiring_repo import HiringRepo
from app.domain.entities.hiring import Hiring
from app.domain.errors import HiringNotFoundError


async def load_hiring(hiring_repo: HiringRepo, hiring_id: str) -> Hiring:
    hiring = await hiring_repo.get_by_id(hiring_id)
    if hiring is None:
        raise HiringNotFoundError(hiring_id)
    return hiring
