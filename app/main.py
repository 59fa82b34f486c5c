import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api.deps import engine
from app.api.routers.health import router as health_router
from app.api.routers.hirings import router as hirings_router
from app.api.routers.services import router as services_router
from app.config import get_settings
from app.domain.errors import (
    AlreadyRatedError,
    DomainError,
    HiringNotFoundError,
    InvalidStateError,
    InvalidTransitionError,
    OptimisticLockError,
    ServiceNotFoundError,
    UnauthorizedError,
)
from app.infrastructure.db.tables import metadata

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

# Cualquier otro DomainError es un error de validación de entrada (400)
ERROR_STATUS_CODES: dict[type[DomainError], int] = {
    InvalidTransitionError: 409,
    InvalidStateError: 409,
    AlreadyRatedError: 409,
    OptimisticLockError: 409,
    UnauthorizedError: 403,
    HiringNotFoundError: 404,
    ServiceNotFoundError: 404,
}


def status_code_for(exc: DomainError) -> int:
    for error_type, status_code in ERROR_STATUS_CODES.items():
        if isinstance(exc, error_type):
            return status_code
    return 400


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Crea las tablas si faltan (dev/demo)
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
    yield
    await engine.dispose()


app = FastAPI(
    title="Hirings API",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(DomainError)
async def domain_exception_handler(request: Request, exc: DomainError):
    status_code = status_code_for(exc)
    logger.info(
        "Domain error",
        extra={
            "code": exc.code,
            "status_code": status_code,
            "path": request.url.path,
            "method": request.method,
        },
    )
    return JSONResponse(
        status_code=status_code,
        content={"detail": exc.message, "code": exc.code},
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler to prevent stack trace exposure to clients.
    All unhandled exceptions are logged internally and return a generic error message.
    """
    error_id = str(uuid.uuid4())

    logger.error(
        "Unhandled exception occurred",
        exc_info=exc,
        extra={
            "error_id": error_id,
            "path": request.url.path,
            "method": request.method,
            "client_host": request.client.host if request.client else None,
        },
    )

    return JSONResponse(
        status_code=500,
        content={
            "detail": "Internal server error",
            "error_id": error_id,
            "message": "An unexpected error occurred. Please contact support with the error_id if the issue persists.",
        },
    )


app.include_router(health_router, tags=["Health"])
app.include_router(hirings_router, prefix="/api/v1", tags=["Hirings"])
app.include_router(services_router, prefix="/api/v1", tags=["Services"])
