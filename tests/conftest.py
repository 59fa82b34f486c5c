"""
Pytest configuration and shared fixtures.

Este módulo provee fixtures reutilizables para:
- Reloj y generador de UUID deterministas
- Repositorios in-memory con un servicio de ejemplo
- Cliente HTTP de prueba (FastAPI TestClient) con los casos de uso in-memory
- Base de datos SQLite in-memory para los tests de integración
"""

import os
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import AsyncGenerator, Callable, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.api.dependencies import build_use_cases, get_use_cases
from app.application.dtos.hiring_dto import Actor, ActorRole
from app.application.interfaces.clock import FakeClock
from app.application.interfaces.uuid_generator import FakeUUIDGenerator
from app.domain.entities.hiring import Hiring, HiringStatus, PaymentMethod
from app.domain.entities.service import Service, TimeUnit
from app.domain.services.hiring_factory import HiringFactory
from app.infrastructure.db.tables import metadata
from app.infrastructure.in_memory.hiring_repo import InMemoryHiringRepo
from app.infrastructure.in_memory.service_repo import InMemoryServiceRepo
from app.infrastructure.in_memory.transaction_manager import NoopTransactionManager
from app.main import app

# ============================================================================
# IDENTIDADES DE PRUEBA
# ============================================================================

CLIENT_ID = "client-1"
PROVIDER_ID = "provider-1"
ADMIN_ID = "admin-1"
STRANGER_ID = "stranger-1"
SERVICE_ID = "service-1"

START = datetime(2025, 2, 1, 9, 0, tzinfo=timezone.utc)
END = START + timedelta(hours=4)

TEST_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


def headers_for(user_id: str, role: str = "client") -> dict[str, str]:
    return {"X-User-Id": user_id, "X-User-Role": role}


# ============================================================================
# FIXTURES DE DOMINIO
# ============================================================================


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def uuid_generator() -> FakeUUIDGenerator:
    return FakeUUIDGenerator()


@pytest.fixture
def sample_service() -> Service:
    """Servicio por hora: tarifa 100, entre 1 y 8 horas, comisión 10%."""
    return Service(
        id=SERVICE_ID,
        provider_id=PROVIDER_ID,
        title="Plomería residencial",
        rate=Decimal("100"),
        time_unit=TimeUnit.HOUR,
        min_duration=1,
        max_duration=8,
        commission_rate=Decimal("10"),
    )


@pytest.fixture
def make_hiring(sample_service: Service, clock: FakeClock) -> Callable[..., Hiring]:
    """Construye contrataciones válidas del servicio de ejemplo."""
    factory = HiringFactory()
    counter = {"value": 0}

    def _make(
        duration: int = 4,
        status: HiringStatus = HiringStatus.PENDING,
        client_id: str = CLIENT_ID,
        hiring_id: str | None = None,
    ) -> Hiring:
        counter["value"] += 1
        hiring = factory.create(
            hiring_id=hiring_id or f"hiring-{counter['value']}",
            service=sample_service,
            client_id=client_id,
            start_date=START,
            end_date=END,
            duration=duration,
            payment_method=PaymentMethod.CASH,
            now=clock.now(),
        )
        hiring.status = status
        return hiring

    return _make


@pytest.fixture
def client_actor() -> Actor:
    return Actor(user_id=CLIENT_ID, role=ActorRole.CLIENT)


@pytest.fixture
def provider_actor() -> Actor:
    return Actor(user_id=PROVIDER_ID, role=ActorRole.PROVIDER)


@pytest.fixture
def admin_actor() -> Actor:
    return Actor(user_id=ADMIN_ID, role=ActorRole.ADMIN)


@pytest.fixture
def stranger_actor() -> Actor:
    return Actor(user_id=STRANGER_ID, role=ActorRole.CLIENT)


# ============================================================================
# FIXTURES DE REPOSITORIOS Y CASOS DE USO (IN-MEMORY)
# ============================================================================


@pytest.fixture
def hiring_repo() -> InMemoryHiringRepo:
    return InMemoryHiringRepo()


@pytest.fixture
def service_repo(sample_service: Service) -> InMemoryServiceRepo:
    repo = InMemoryServiceRepo()
    repo.add(sample_service)
    return repo


@pytest.fixture
def use_cases(hiring_repo, service_repo, clock, uuid_generator) -> dict:
    return build_use_cases(
        hiring_repo=hiring_repo,
        service_repo=service_repo,
        tx_manager=NoopTransactionManager(),
        clock=clock,
        uuid_generator=uuid_generator,
    )


# ============================================================================
# FIXTURES DE CLIENTE HTTP
# ============================================================================


@pytest.fixture
def client(use_cases: dict) -> Generator[TestClient, None, None]:
    """
    FastAPI TestClient con los casos de uso in-memory del test.
    Cada test parte de repositorios vacíos (salvo el servicio de ejemplo).
    """
    app.dependency_overrides[get_use_cases] = lambda: use_cases

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def create_payload() -> dict:
    return {
        "service_id": SERVICE_ID,
        "start_date": START.isoformat(),
        "end_date": END.isoformat(),
        "duration": 4,
        "payment_method": "efectivo",
        "notes": "Revisar fuga en la cocina",
    }


# ============================================================================
# FIXTURES DE BASE DE DATOS
# ============================================================================


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Engine SQLite in-memory con el esquema creado."""
    engine = create_async_engine(TEST_DATABASE_URL, echo=False, poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    session_factory = async_sessionmaker(test_engine, expire_on_commit=False)
    async with session_factory() as session:
        yield session


# ============================================================================
# MARKERS DE PYTEST
# ============================================================================


def pytest_configure(config):
    config.addinivalue_line(
        "markers",
        "integration: Tests contra una base de datos SQL (SQLite in-memory por defecto)",
    )
    config.addinivalue_line(
        "markers",
        "deadlock: Tests de escenarios de deadlock",
    )
