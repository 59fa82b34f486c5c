import asyncio
import sys
from decimal import Decimal
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root))

from app.api.deps import AsyncSessionLocal, engine  # noqa: E402
from app.domain.entities.service import Service, TimeUnit  # noqa: E402
from app.infrastructure.db.repositories.service_repo_sql import ServiceRepoSQL  # noqa: E402
from app.infrastructure.db.tables import metadata  # noqa: E402

DEMO_SERVICES = [
    Service(
        id="svc-plomeria",
        provider_id="prov-001",
        title="Plomería residencial",
        rate=Decimal("100"),
        time_unit=TimeUnit.HOUR,
        min_duration=1,
        max_duration=8,
        commission_rate=Decimal("10"),
    ),
    Service(
        id="svc-mudanza",
        provider_id="prov-002",
        title="Mudanza local",
        rate=Decimal("1500"),
        time_unit=TimeUnit.DAY,
        min_duration=1,
        max_duration=3,
        commission_rate=Decimal("12.5"),
    ),
    Service(
        id="svc-web",
        provider_id="prov-003",
        title="Sitio web corporativo",
        rate=Decimal("18000"),
        time_unit=TimeUnit.PROJECT,
        min_duration=1,
        max_duration=1,
        commission_rate=Decimal("8"),
    ),
]


async def seed():
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
        print("Created missing tables.")

    async with AsyncSessionLocal() as session:
        repo = ServiceRepoSQL(session)
        async with session.begin():
            for service in DEMO_SERVICES:
                if await repo.get_by_id(service.id) is None:
                    await repo.add(service)
                    print(f"Seeded service {service.id}")

    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(seed())
