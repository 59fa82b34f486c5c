import copy
from typing import Sequence

from app.application.interfaces.hiring_repo import HiringRepo
from app.domain.entities.hiring import Hiring
from app.domain.errors import HiringNotFoundError, OptimisticLockError


class InMemoryHiringRepo(HiringRepo):
    """Guarda copias de las contrataciones: los cambios solo se ven tras save()."""

    def __init__(self) -> None:
        self.hirings: dict[str, Hiring] = {}

    async def get_by_id(self, hiring_id: str) -> Hiring | None:
        hiring = self.hirings.get(hiring_id)
        return copy.deepcopy(hiring) if hiring else None

    async def add(self, hiring: Hiring) -> None:
        if hiring.id in self.hirings:
            raise ValueError("Hiring id already exists")
        self.hirings[hiring.id] = copy.deepcopy(hiring)

    async def save(self, hiring: Hiring, expected_lock_version: int) -> None:
        stored = self.hirings.get(hiring.id)
        if stored is None:
            raise HiringNotFoundError(hiring.id)
        if stored.lock_version != expected_lock_version:
            raise OptimisticLockError(
                hiring_id=hiring.id,
                expected_version=expected_lock_version,
                actual_version=stored.lock_version,
            )
        self.hirings[hiring.id] = copy.deepcopy(hiring)

    async def list_rated_by_service(self, service_id: str) -> Sequence[Hiring]:
        return [
            copy.deepcopy(h)
            for h in self.hirings.values()
            if h.service_id == service_id and h.rating is not None
        ]

    async def list_by_participant(self, user_id: str) -> Sequence[Hiring]:
        found = [copy.deepcopy(h) for h in self.hirings.values() if h.is_participant(user_id)]
        return sorted(found, key=lambda h: h.created_at or h.start_date, reverse=True)
