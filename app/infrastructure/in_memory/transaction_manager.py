from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from app.application.interfaces.transaction_manager import TransactionManager


class NoopTransactionManager(TransactionManager):
    """Sin transacción real: los repos in-memory solo aplican cambios en save()/add()."""

    @asynccontextmanager
    async def start(self) -> AsyncIterator[None]:
        yield
