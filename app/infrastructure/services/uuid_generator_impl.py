"""Implementación real del generador de identificadores."""

import uuid

from app.application.interfaces.uuid_generator import UUIDGenerator


class UUIDGeneratorImpl(UUIDGenerator):
    """
    Genera identificadores de contratación como UUID v4.

    Para testing, usar FakeUUIDGenerator de application.interfaces.uuid_generator.
    """

    def generate_uuid(self) -> str:
        return str(uuid.uuid4())
