"""Interfaces (Puertos) de la capa de aplicación."""

from app.application.interfaces.clock import Clock, FakeClock
from app.application.interfaces.hiring_repo import HiringRepo
from app.application.interfaces.service_repo import ServiceRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.interfaces.uuid_generator import (
    FakeUUIDGenerator,
    UUIDGenerator,
)

__all__ = [
    # Repositories
    "HiringRepo",
    "ServiceRepo",
    # Infrastructure
    "TransactionManager",
    # Utilities
    "Clock",
    "FakeClock",
    "UUIDGenerator",
    "FakeUUIDGenerator",
]
