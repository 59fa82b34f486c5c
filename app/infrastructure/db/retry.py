"""
Reintentos ante fallas transitorias de la base de datos.

Un deadlock o una espera de bloqueo agotada abortan la transacción completa,
por eso se reintenta la unidad de trabajo entera (el caso de uso) y no una
sentencia aislada.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy.exc import DBAPIError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# MySQL
MYSQL_DEADLOCK_ERROR = "1213"
MYSQL_LOCK_WAIT_TIMEOUT = "1205"
# PostgreSQL (SQLSTATE)
PG_DEADLOCK_DETECTED = "40P01"
PG_SERIALIZATION_FAILURE = "40001"

TRANSIENT_ERROR_CODES = (
    MYSQL_DEADLOCK_ERROR,
    MYSQL_LOCK_WAIT_TIMEOUT,
    PG_DEADLOCK_DETECTED,
    PG_SERIALIZATION_FAILURE,
)


def is_deadlock_error(error: BaseException) -> bool:
    """Indica si el error es un deadlock (o similar) que vale la pena reintentar."""
    if not isinstance(error, DBAPIError):
        return False
    if error.connection_invalidated:
        return False
    message = str(error.orig) if error.orig is not None else str(error)
    return any(code in message for code in TRANSIENT_ERROR_CODES)


async def retry_on_deadlock(
    func: Callable[[], Awaitable[T]],
    max_attempts: int = 3,
    base_delay: float = 0.1,
) -> T:
    """
    Ejecuta ``func`` reintentando cuando falla por deadlock.

    El retardo crece exponencialmente: base_delay * 2 ** intento.
    Cualquier otro error se propaga de inmediato.

    Example:
        hiring = await retry_on_deadlock(
            lambda: use_case.execute(actor, hiring_id, payment),
            max_attempts=settings.db_retry_attempts,
        )
    """
    if max_attempts < 1:
        raise ValueError("max_attempts debe ser al menos 1")

    attempt = 0
    while True:
        try:
            return await func()
        except DBAPIError as exc:
            if not is_deadlock_error(exc):
                raise
            attempt += 1
            if attempt >= max_attempts:
                logger.error(
                    "Database deadlock persists after max retries",
                    extra={"attempts": attempt, "error": str(exc)},
                )
                raise
            delay = base_delay * (2 ** (attempt - 1))
            logger.warning(
                "Database deadlock detected, retrying",
                extra={
                    "attempt": attempt,
                    "max_attempts": max_attempts,
                    "retry_delay": delay,
                    "error": str(exc),
                },
            )
            await asyncio.sleep(delay)
