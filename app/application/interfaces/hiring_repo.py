from typing import Sequence

from app.domain.entities.hiring import Hiring


class HiringRepo:
    async def get_by_id(self, hiring_id: str) -> Hiring | None:
        raise NotImplementedError

    async def add(self, hiring: Hiring) -> None:
        raise NotImplementedError

    async def save(self, hiring: Hiring, expected_lock_version: int) -> None:
        """
        Persiste la contratación si la versión almacenada coincide.

        Raises:
            OptimisticLockError: la versión almacenada no es expected_lock_version.
        """
        raise NotImplementedError

    async def list_rated_by_service(self, service_id: str) -> Sequence[Hiring]:
        raise NotImplementedError

    async def list_by_participant(self, user_id: str) -> Sequence[Hiring]:
        """Contrataciones donde el usuario es cliente o proveedor, más recientes primero."""
        raise NotImplementedError
