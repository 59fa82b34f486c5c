from datetime import datetime

from app.domain.entities.service import RatingAggregate, Service


class ServiceRepo:
    async def get_by_id(self, service_id: str) -> Service | None:
        raise NotImplementedError

    async def update_rating(
        self, service_id: str, aggregate: RatingAggregate, updated_at: datetime
    ) -> None:
        raise NotImplementedError
