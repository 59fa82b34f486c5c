"""Implementación SQL del repositorio de contrataciones."""

from collections import defaultdict
from datetime import datetime, timezone
from typing import Sequence

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.hiring_repo import HiringRepo
from app.domain.entities.hiring import (
    Hiring,
    HiringStatus,
    PaymentEntry,
    PaymentMethod,
    Rating,
)
from app.domain.errors import HiringNotFoundError, OptimisticLockError
from app.infrastructure.db.tables import hiring_payments, hirings


def to_db_datetime(value: datetime | None) -> datetime | None:
    """Las fechas se guardan en UTC sin zona horaria."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def from_db_datetime(value: datetime | None) -> datetime | None:
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


class HiringRepoSQL(HiringRepo):
    """Implementación SQL del repositorio de contrataciones usando SQLAlchemy."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, hiring_id: str) -> Hiring | None:
        stmt = select(hirings).where(hirings.c.id == hiring_id).limit(1)
        result = await self._session.execute(stmt)
        row = result.mappings().first()
        if not row:
            return None
        payments = await self._load_payments([row["id"]])
        return self._row_to_hiring(row, payments.get(row["id"], []))

    async def add(self, hiring: Hiring) -> None:
        values = self._hiring_values(hiring)
        values["id"] = hiring.id
        values["service_id"] = hiring.service_id
        values["client_id"] = hiring.client_id
        values["provider_id"] = hiring.provider_id
        await self._session.execute(insert(hirings).values(values))
        await self._insert_payments(hiring.id, hiring.payments, start=0)

    async def save(self, hiring: Hiring, expected_lock_version: int) -> None:
        stmt = (
            update(hirings)
            .where(
                hirings.c.id == hiring.id,
                hirings.c.lock_version == expected_lock_version,
            )
            .values(self._hiring_values(hiring))
        )
        result = await self._session.execute(stmt)
        if result.rowcount == 0:
            current = await self._session.execute(
                select(hirings.c.lock_version).where(hirings.c.id == hiring.id)
            )
            actual_version = current.scalar()
            if actual_version is None:
                raise HiringNotFoundError(hiring.id)
            raise OptimisticLockError(
                hiring_id=hiring.id,
                expected_version=expected_lock_version,
                actual_version=actual_version,
            )

        # El historial es de solo anexado: se insertan únicamente las entradas nuevas.
        count_stmt = select(func.count()).select_from(hiring_payments).where(
            hiring_payments.c.hiring_id == hiring.id
        )
        stored = (await self._session.execute(count_stmt)).scalar() or 0
        await self._insert_payments(hiring.id, hiring.payments[stored:], start=stored)

    async def list_rated_by_service(self, service_id: str) -> Sequence[Hiring]:
        stmt = select(hirings).where(
            hirings.c.service_id == service_id,
            hirings.c.rating_score.is_not(None),
        )
        return await self._fetch_many(stmt)

    async def list_by_participant(self, user_id: str) -> Sequence[Hiring]:
        stmt = (
            select(hirings)
            .where((hirings.c.client_id == user_id) | (hirings.c.provider_id == user_id))
            .order_by(hirings.c.created_at.desc())
        )
        return await self._fetch_many(stmt)

    async def _fetch_many(self, stmt) -> list[Hiring]:
        result = await self._session.execute(stmt)
        rows = result.mappings().all()
        if not rows:
            return []
        payments = await self._load_payments([row["id"] for row in rows])
        return [self._row_to_hiring(row, payments.get(row["id"], [])) for row in rows]

    async def _load_payments(self, hiring_ids: list[str]) -> dict[str, list[PaymentEntry]]:
        stmt = (
            select(hiring_payments)
            .where(hiring_payments.c.hiring_id.in_(hiring_ids))
            .order_by(hiring_payments.c.hiring_id, hiring_payments.c.position)
        )
        result = await self._session.execute(stmt)
        grouped: dict[str, list[PaymentEntry]] = defaultdict(list)
        for row in result.mappings().all():
            grouped[row["hiring_id"]].append(
                PaymentEntry(
                    paid_at=from_db_datetime(row["paid_at"]),
                    amount=row["amount"],
                    concept=row["concept"],
                    receipt=row["receipt"],
                    transaction_id=row["transaction_id"],
                )
            )
        return grouped

    async def _insert_payments(
        self, hiring_id: str, entries: Sequence[PaymentEntry], start: int
    ) -> None:
        if not entries:
            return
        rows = [
            {
                "hiring_id": hiring_id,
                "position": start + offset,
                "paid_at": to_db_datetime(entry.paid_at),
                "amount": entry.amount,
                "concept": entry.concept,
                "receipt": entry.receipt,
                "transaction_id": entry.transaction_id,
            }
            for offset, entry in enumerate(entries)
        ]
        await self._session.execute(insert(hiring_payments), rows)

    def _hiring_values(self, hiring: Hiring) -> dict:
        rating = hiring.rating
        return {
            "start_date": to_db_datetime(hiring.start_date),
            "end_date": to_db_datetime(hiring.end_date),
            "duration": hiring.duration,
            "base_price": hiring.base_price,
            "commission_rate": hiring.commission_rate,
            "commission_amount": hiring.commission_amount,
            "total_price": hiring.total_price,
            "final_price": hiring.final_price,
            "status": hiring.status.value,
            "payment_method": hiring.payment_method.value,
            "paid": hiring.paid,
            "paid_at": to_db_datetime(hiring.paid_at),
            "transaction_id": hiring.transaction_id,
            "notes": hiring.notes,
            "rating_score": rating.score if rating else None,
            "rating_comment": rating.comment if rating else None,
            "rating_date": to_db_datetime(rating.rated_at) if rating else None,
            "lock_version": hiring.lock_version,
            "created_at": to_db_datetime(hiring.created_at),
            "updated_at": to_db_datetime(hiring.updated_at),
        }

    def _row_to_hiring(self, row, payments: list[PaymentEntry]) -> Hiring:
        rating = None
        if row["rating_score"] is not None:
            rating = Rating(
                score=row["rating_score"],
                rated_at=from_db_datetime(row["rating_date"]),
                comment=row["rating_comment"],
            )
        return Hiring(
            id=row["id"],
            service_id=row["service_id"],
            client_id=row["client_id"],
            provider_id=row["provider_id"],
            start_date=from_db_datetime(row["start_date"]),
            end_date=from_db_datetime(row["end_date"]),
            duration=row["duration"],
            base_price=row["base_price"],
            commission_rate=row["commission_rate"],
            commission_amount=row["commission_amount"],
            total_price=row["total_price"],
            final_price=row["final_price"],
            payment_method=PaymentMethod(row["payment_method"]),
            status=HiringStatus(row["status"]),
            paid=bool(row["paid"]),
            paid_at=from_db_datetime(row["paid_at"]),
            transaction_id=row["transaction_id"],
            payments=payments,
            notes=row["notes"],
            rating=rating,
            lock_version=row["lock_version"],
            created_at=from_db_datetime(row["created_at"]),
            updated_at=from_db_datetime(row["updated_at"]),
        )
