from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.config import get_settings

settings = get_settings()

# Sin DATABASE_URL se usa SQLite en memoria (dev/test)
DB_URL = settings.database_url or "sqlite+aiosqlite:///:memory:"

engine = create_async_engine(DB_URL, echo=settings.sql_echo)
AsyncSessionLocal = async_sessionmaker(engine, expire_on_commit=False)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as session:
        yield session
