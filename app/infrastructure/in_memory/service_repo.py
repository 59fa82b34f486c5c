import copy
from datetime import datetime

from app.application.interfaces.service_repo import ServiceRepo
from app.domain.entities.service import RatingAggregate, Service
from app.domain.errors import ServiceNotFoundError


class InMemoryServiceRepo(ServiceRepo):
    def __init__(self) -> None:
        self.services: dict[str, Service] = {}

    def add(self, service: Service) -> None:
        self.services[service.id] = copy.deepcopy(service)

    async def get_by_id(self, service_id: str) -> Service | None:
        service = self.services.get(service_id)
        return copy.deepcopy(service) if service else None

    async def update_rating(
        self, service_id: str, aggregate: RatingAggregate, updated_at: datetime
    ) -> None:
        service = self.services.get(service_id)
        if service is None:
            raise ServiceNotFoundError(service_id)
        service.apply_rating_aggregate(aggregate, updated_at=updated_at)
