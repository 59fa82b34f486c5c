"""Excepciones de dominio para el motor de contrataciones."""


class DomainError(Exception):
    """Clase base para todos los errores de dominio."""

    def __init__(self, message: str, code: str | None = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)


# === Errores de Validación ===


class ValidationError(DomainError):
    """Error de validación de datos de entrada."""

    def __init__(self, field: str, message: str):
        super().__init__(
            message=f"Validación fallida en '{field}': {message}",
            code="VALIDATION_ERROR",
        )
        self.field = field


class InvalidPricingInputError(DomainError):
    """Parámetros de precio inválidos (tarifa, duración o comisión)."""

    def __init__(self, field: str, value: object, message: str):
        super().__init__(
            message=f"Entrada de precio inválida en '{field}' ({value}): {message}",
            code="INVALID_PRICING_INPUT",
        )
        self.field = field
        self.value = value


class InvalidDurationError(DomainError):
    """La duración solicitada está fuera de los límites del servicio."""

    def __init__(self, duration: int, min_duration: int, max_duration: int, time_unit: str):
        super().__init__(
            message=(
                f"La duración debe estar entre {min_duration} y {max_duration} "
                f"{time_unit} (recibido: {duration})"
            ),
            code="INVALID_DURATION",
        )
        self.duration = duration
        self.min_duration = min_duration
        self.max_duration = max_duration


class InvalidDateRangeError(DomainError):
    """Rango de fechas inválido."""

    def __init__(self, message: str):
        super().__init__(message=message, code="INVALID_DATE_RANGE")


class InvalidPaymentError(DomainError):
    """Entrada de pago inválida (monto o concepto)."""

    def __init__(self, field: str, message: str):
        super().__init__(
            message=f"Pago inválido en '{field}': {message}",
            code="INVALID_PAYMENT",
        )
        self.field = field


class InvalidScoreError(DomainError):
    """Calificación fuera del rango 1-5."""

    def __init__(self, score: object):
        super().__init__(
            message=f"La calificación debe ser un entero entre 1 y 5 (recibido: {score})",
            code="INVALID_SCORE",
        )
        self.score = score


# === Errores de Estado ===


class InvalidTransitionError(DomainError):
    """Transición de estado no permitida."""

    def __init__(self, current_status: str, requested_status: object, reason: str):
        super().__init__(
            message=(
                f"No se puede cambiar el estado de '{current_status}' "
                f"a '{requested_status}': {reason}"
            ),
            code="INVALID_TRANSITION",
        )
        self.current_status = current_status
        self.requested_status = requested_status


class InvalidStateError(DomainError):
    """El estado de la contratación no permite la operación."""

    def __init__(self, current_status: str, expected_status: str | list[str], operation: str):
        expected = expected_status if isinstance(expected_status, str) else ", ".join(expected_status)
        super().__init__(
            message=f"No se puede {operation}: estado actual '{current_status}', esperado '{expected}'",
            code="INVALID_STATE",
        )
        self.current_status = current_status
        self.expected_status = expected_status
        self.operation = operation


class AlreadyRatedError(DomainError):
    """La contratación ya fue calificada."""

    def __init__(self, hiring_id: str | None):
        super().__init__(
            message=f"La contratación {hiring_id} ya fue calificada",
            code="ALREADY_RATED",
        )
        self.hiring_id = hiring_id


class OptimisticLockError(DomainError):
    """Conflicto de concurrencia al actualizar la contratación."""

    def __init__(self, hiring_id: str, expected_version: int, actual_version: int | None):
        super().__init__(
            message=f"Conflicto de concurrencia en contratación {hiring_id}: "
            f"versión esperada {expected_version}, versión actual {actual_version}",
            code="OPTIMISTIC_LOCK_ERROR",
        )
        self.hiring_id = hiring_id
        self.expected_version = expected_version
        self.actual_version = actual_version


# === Errores de Autorización ===


class UnauthorizedError(DomainError):
    """El usuario no tiene relación con la contratación para esta operación."""

    def __init__(self, user_id: str, operation: str):
        super().__init__(
            message=f"Usuario {user_id} no autorizado para {operation}",
            code="UNAUTHORIZED",
        )
        self.user_id = user_id
        self.operation = operation


# === Errores de Búsqueda ===


class HiringNotFoundError(DomainError):
    """La contratación no existe."""

    def __init__(self, hiring_id: str):
        super().__init__(
            message=f"Contratación no encontrada: {hiring_id}",
            code="HIRING_NOT_FOUND",
        )
        self.hiring_id = hiring_id


class ServiceNotFoundError(DomainError):
    """El servicio no existe."""

    def __init__(self, service_id: str):
        super().__init__(
            message=f"Servicio no encontrado: {service_id}",
            code="SERVICE_NOT_FOUND",
        )
        self.service_id = service_id
