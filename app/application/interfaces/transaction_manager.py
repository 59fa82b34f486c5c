"""Interface TransactionManager - límite transaccional de un caso de uso."""

from contextlib import AbstractAsyncContextManager
from typing import Protocol


class TransactionManager(Protocol):
    def start(self) -> AbstractAsyncContextManager[None]:
        """Abre (o se une a) una transacción: confirma al salir, revierte si hay excepción."""
        ...
