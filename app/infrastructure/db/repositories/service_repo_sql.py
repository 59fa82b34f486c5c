"""Implementación SQL del repositorio de servicios."""

from datetime import datetime

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.service_repo import ServiceRepo
from app.domain.entities.service import RatingAggregate, Service, TimeUnit
from app.domain.errors import ServiceNotFoundError
from app.infrastructure.db.repositories.hiring_repo_sql import (
    from_db_datetime,
    to_db_datetime,
)
from app.infrastructure.db.tables import services


class ServiceRepoSQL(ServiceRepo):
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, service: Service) -> None:
        """Registra un servicio en el catálogo (usado para carga inicial y pruebas)."""
        values = {
            "id": service.id,
            "provider_id": service.provider_id,
            "title": service.title,
            "rate": service.rate,
            "time_unit": service.time_unit.value,
            "min_duration": service.min_duration,
            "max_duration": service.max_duration,
            "commission_rate": service.commission_rate,
            "average_rating": service.average_rating,
            "rating_count": service.rating_count,
            "is_active": service.is_active,
            "updated_at": to_db_datetime(service.updated_at),
        }
        await self._session.execute(insert(services).values(values))

    async def get_by_id(self, service_id: str) -> Service | None:
        stmt = select(services).where(services.c.id == service_id).limit(1)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        return Service(
            id=row["id"],
            provider_id=row["provider_id"],
            title=row["title"],
            rate=row["rate"],
            time_unit=TimeUnit(row["time_unit"]),
            min_duration=row["min_duration"],
            max_duration=row["max_duration"],
            commission_rate=row["commission_rate"],
            average_rating=row["average_rating"],
            rating_count=row["rating_count"],
            is_active=bool(row["is_active"]),
            updated_at=from_db_datetime(row["updated_at"]),
        )

    async def update_rating(
        self, service_id: str, aggregate: RatingAggregate, updated_at: datetime
    ) -> None:
        stmt = (
            update(services)
            .where(services.c.id == service_id)
            .values(
                average_rating=aggregate.average_rating,
                rating_count=aggregate.rating_count,
                updated_at=to_db_datetime(updated_at),
            )
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            raise ServiceNotFoundError(service_id)
