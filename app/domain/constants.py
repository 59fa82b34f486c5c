"""Constantes del dominio de contrataciones."""

from decimal import Decimal

HIRING_STATUS_PENDING = "pendiente"
HIRING_STATUS_CONFIRMED = "confirmada"
HIRING_STATUS_IN_PROGRESS = "en_progreso"
HIRING_STATUS_COMPLETED = "completada"
HIRING_STATUS_CANCELLED = "cancelada"

MIN_COMMISSION_RATE = Decimal("0")
MAX_COMMISSION_RATE = Decimal("50")
DEFAULT_COMMISSION_RATE = Decimal("10")

MIN_RATING_SCORE = 1
MAX_RATING_SCORE = 5

NOTES_MAX_LENGTH = 500
COMMENT_MAX_LENGTH = 500
PAYMENT_CONCEPT_MAX_LENGTH = 255
