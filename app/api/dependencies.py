from functools import lru_cache

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import AsyncSessionLocal
from app.application.dtos.hiring_dto import Actor, ActorRole
from app.application.interfaces.clock import Clock
from app.application.interfaces.hiring_repo import HiringRepo
from app.application.interfaces.service_repo import ServiceRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.interfaces.uuid_generator import UUIDGenerator
from app.application.use_cases.add_payment import AddPaymentUseCase
from app.application.use_cases.change_hiring_status import ChangeHiringStatusUseCase
from app.application.use_cases.create_hiring import CreateHiringUseCase
from app.application.use_cases.get_hiring import GetHiringUseCase, ListMyHiringsUseCase
from app.application.use_cases.quote_service_price import QuoteServicePriceUseCase
from app.application.use_cases.rate_hiring import RateHiringUseCase
from app.config import Settings, get_settings
from app.infrastructure.db.repositories.hiring_repo_sql import HiringRepoSQL
from app.infrastructure.db.repositories.service_repo_sql import ServiceRepoSQL
from app.infrastructure.db.transaction_manager import SQLAlchemyTransactionManager
from app.infrastructure.in_memory.hiring_repo import InMemoryHiringRepo
from app.infrastructure.in_memory.service_repo import InMemoryServiceRepo
from app.infrastructure.in_memory.transaction_manager import NoopTransactionManager
from app.infrastructure.services.clock_impl import ClockImpl
from app.infrastructure.services.uuid_generator_impl import UUIDGeneratorImpl


async def get_session(settings: Settings = Depends(get_settings)) -> AsyncSession | None:
    if settings.use_in_memory:
        yield None
        return
    async with AsyncSessionLocal() as session:
        yield session


@lru_cache(maxsize=1)
def get_in_memory_bundle():
    return {
        "hiring_repo": InMemoryHiringRepo(),
        "service_repo": InMemoryServiceRepo(),
        "tx_manager": NoopTransactionManager(),
    }


def build_use_cases(
    hiring_repo: HiringRepo,
    service_repo: ServiceRepo,
    tx_manager: TransactionManager,
    clock: Clock,
    uuid_generator: UUIDGenerator,
) -> dict:
    return {
        "create_hiring": CreateHiringUseCase(
            service_repo=service_repo,
            hiring_repo=hiring_repo,
            transaction_manager=tx_manager,
            clock=clock,
            uuid_generator=uuid_generator,
        ),
        "change_status": ChangeHiringStatusUseCase(
            hiring_repo=hiring_repo,
            transaction_manager=tx_manager,
            clock=clock,
        ),
        "add_payment": AddPaymentUseCase(
            hiring_repo=hiring_repo,
            transaction_manager=tx_manager,
            clock=clock,
        ),
        "rate_hiring": RateHiringUseCase(
            hiring_repo=hiring_repo,
            service_repo=service_repo,
            transaction_manager=tx_manager,
            clock=clock,
        ),
        "get_hiring": GetHiringUseCase(hiring_repo=hiring_repo),
        "list_my_hirings": ListMyHiringsUseCase(hiring_repo=hiring_repo),
        "quote_price": QuoteServicePriceUseCase(service_repo=service_repo),
    }


def get_use_cases(
    settings: Settings = Depends(get_settings),
    session: AsyncSession | None = Depends(get_session),
):
    clock = ClockImpl()
    uuid_generator = UUIDGeneratorImpl()

    if settings.use_in_memory:
        bundle = get_in_memory_bundle()
        return build_use_cases(
            hiring_repo=bundle["hiring_repo"],
            service_repo=bundle["service_repo"],
            tx_manager=bundle["tx_manager"],
            clock=clock,
            uuid_generator=uuid_generator,
        )

    if not session:
        raise RuntimeError("DB session not available")

    return build_use_cases(
        hiring_repo=HiringRepoSQL(session),
        service_repo=ServiceRepoSQL(session),
        tx_manager=SQLAlchemyTransactionManager(session),
        clock=clock,
        uuid_generator=uuid_generator,
    )


def get_actor(
    user_id: str | None = Header(default=None, alias="X-User-Id"),
    role: str | None = Header(default=None, alias="X-User-Role"),
) -> Actor:
    """Identidad del usuario, propagada por la capa de autenticación."""
    if not user_id or not user_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="X-User-Id header is required",
        )
    try:
        actor_role = ActorRole(role.strip().lower()) if role else ActorRole.CLIENT
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unknown role: {role}",
        ) from None
    return Actor(user_id=user_id.strip(), role=actor_role)
