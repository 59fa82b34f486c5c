"""
Integration tests for the SQL adapters.

Corre los repositorios SQLAlchemy contra SQLite in-memory (o TEST_DATABASE_URL):
- Persistencia completa de contrataciones con pagos y calificación
- Control de concurrencia optimista por lock_version
- Recalculo del agregado de calificaciones del servicio
- Casos de uso completos sobre el transaction manager SQL
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from app.api.dependencies import build_use_cases
from app.application.dtos.hiring_dto import CreateHiringDTO
from app.domain.entities.hiring import HiringStatus, Rating
from app.domain.entities.service import RatingAggregate
from app.domain.errors import (
    HiringNotFoundError,
    OptimisticLockError,
    ServiceNotFoundError,
)
from app.domain.services.payment_ledger import PaymentInput, PaymentLedger
from app.domain.services.rating_aggregator import RatingInput
from app.infrastructure.db.repositories.hiring_repo_sql import HiringRepoSQL
from app.infrastructure.db.repositories.service_repo_sql import ServiceRepoSQL
from app.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager

pytestmark = pytest.mark.integration


class TestServiceRepoSQL:
    @pytest.mark.asyncio
    async def test_roundtrip_and_rating_update(self, db_session, sample_service, clock):
        repo = ServiceRepoSQL(db_session)
        await repo.add(sample_service)

        loaded = await repo.get_by_id(sample_service.id)
        assert loaded.rate == Decimal("100")
        assert loaded.commission_rate == Decimal("10")
        assert loaded.min_duration == 1
        assert loaded.max_duration == 8
        assert (loaded.average_rating, loaded.rating_count) == (0.0, 0)

        await repo.update_rating(sample_service.id, RatingAggregate(4.5, 2), updated_at=clock.now())

        updated = await repo.get_by_id(sample_service.id)
        assert (updated.average_rating, updated.rating_count) == (4.5, 2)
        assert updated.updated_at == clock.now()

    @pytest.mark.asyncio
    async def test_missing_service(self, db_session, clock):
        repo = ServiceRepoSQL(db_session)

        assert await repo.get_by_id("missing") is None
        with pytest.raises(ServiceNotFoundError):
            await repo.update_rating("missing", RatingAggregate(1.0, 1), updated_at=clock.now())


class TestHiringRepoSQL:
    @pytest.mark.asyncio
    async def test_add_and_get(self, db_session, make_hiring):
        repo = HiringRepoSQL(db_session)
        hiring = make_hiring()
        hiring.notes = "Puerta trasera"
        await repo.add(hiring)

        loaded = await repo.get_by_id(hiring.id)

        assert loaded == hiring
        assert loaded.final_price == Decimal("440.00")
        assert loaded.start_date.tzinfo is not None
        assert await repo.get_by_id("missing") is None

    @pytest.mark.asyncio
    async def test_save_appends_payments_in_order(self, db_session, make_hiring, clock):
        repo = HiringRepoSQL(db_session)
        ledger = PaymentLedger()
        hiring = make_hiring()
        await repo.add(hiring)

        for amount, concept in (("100", "Anticipo"), ("100", "Anticipo"), ("240", "Saldo")):
            current = await repo.get_by_id(hiring.id)
            version = current.lock_version
            clock.advance(minutes=1)
            ledger.add_payment(current, PaymentInput(amount=amount, concept=concept), clock.now())
            await repo.save(current, expected_lock_version=version)

        loaded = await repo.get_by_id(hiring.id)
        assert [(p.amount, p.concept) for p in loaded.payments] == [
            (Decimal("100.00"), "Anticipo"),
            (Decimal("100.00"), "Anticipo"),
            (Decimal("240.00"), "Saldo"),
        ]
        assert loaded.paid is True
        assert loaded.paid_at == clock.now()
        assert loaded.lock_version == 3

    @pytest.mark.asyncio
    async def test_stale_version_is_rejected(self, db_session, make_hiring, clock):
        repo = HiringRepoSQL(db_session)
        hiring = make_hiring()
        await repo.add(hiring)

        first = await repo.get_by_id(hiring.id)
        second = await repo.get_by_id(hiring.id)

        first.status = HiringStatus.CONFIRMED
        first.touch(clock.now())
        await repo.save(first, expected_lock_version=0)

        second.status = HiringStatus.CANCELLED
        second.touch(clock.now())
        with pytest.raises(OptimisticLockError) as exc_info:
            await repo.save(second, expected_lock_version=0)

        assert exc_info.value.actual_version == 1
        assert (await repo.get_by_id(hiring.id)).status == HiringStatus.CONFIRMED

    @pytest.mark.asyncio
    async def test_save_unknown_hiring(self, db_session, make_hiring):
        repo = HiringRepoSQL(db_session)

        with pytest.raises(HiringNotFoundError):
            await repo.save(make_hiring(), expected_lock_version=0)

    @pytest.mark.asyncio
    async def test_listings(self, db_session, make_hiring, clock):
        repo = HiringRepoSQL(db_session)
        older = make_hiring()
        newer = make_hiring()
        newer.created_at = older.created_at + timedelta(hours=1)
        other_client = make_hiring(client_id="client-2")
        other_client.created_at = older.created_at + timedelta(hours=2)
        for hiring in (older, newer, other_client):
            await repo.add(hiring)

        rated = await repo.get_by_id(newer.id)
        rated.status = HiringStatus.COMPLETED
        rated.rating = Rating(score=4, comment="Bien", rated_at=clock.now())
        rated.touch(clock.now())
        await repo.save(rated, expected_lock_version=0)

        mine = await repo.list_by_participant("client-1")
        provided = await repo.list_by_participant("provider-1")
        rated_list = await repo.list_rated_by_service("service-1")

        assert [h.id for h in mine] == [newer.id, older.id]
        assert [h.id for h in provided] == [other_client.id, newer.id, older.id]
        assert [h.id for h in rated_list] == [newer.id]
        assert rated_list[0].rating.comment == "Bien"


class TestUseCasesOverSQL:
    @pytest.mark.asyncio
    async def test_full_lifecycle(
        self, db_session, sample_service, clock, uuid_generator, client_actor, provider_actor
    ):
        service_repo = ServiceRepoSQL(db_session)
        await service_repo.add(sample_service)
        await db_session.commit()

        use_cases = build_use_cases(
            hiring_repo=HiringRepoSQL(db_session),
            service_repo=service_repo,
            tx_manager=SQLAlchemyTransactionManager(db_session),
            clock=clock,
            uuid_generator=uuid_generator,
        )
        request = CreateHiringDTO(
            service_id=sample_service.id,
            start_date=clock.now() + timedelta(days=1),
            end_date=clock.now() + timedelta(days=1, hours=4),
            duration=4,
            payment_method="tarjeta",
        )

        hiring = await use_cases["create_hiring"].execute(client_actor, request)
        await use_cases["add_payment"].execute(
            client_actor, hiring.id, PaymentInput(amount="440", concept="Pago total")
        )
        for status in ("confirmada", "en_progreso", "completada"):
            await use_cases["change_status"].execute(provider_actor, hiring.id, status)
        result = await use_cases["rate_hiring"].execute(
            client_actor, hiring.id, RatingInput(score=5)
        )

        assert result.service_rating == RatingAggregate(5.0, 1)
        stored = await use_cases["get_hiring"].execute(client_actor, hiring.id)
        assert stored.status == HiringStatus.COMPLETED
        assert stored.paid is True
        assert stored.rating.score == 5
        assert (await service_repo.get_by_id(sample_service.id)).rating_count == 1
