"""Creación de contrataciones a partir de un servicio del catálogo."""

from datetime import datetime

from app.domain.constants import NOTES_MAX_LENGTH
from app.domain.entities.hiring import Hiring, HiringStatus, PaymentMethod
from app.domain.entities.service import Service
from app.domain.errors import InvalidDurationError, ValidationError
from app.domain.services.pricing_calculator import PricingCalculator
from app.domain.value_objects.datetime_range import DatetimeRange


class HiringFactory:
    """Construye una contratación nueva con su desglose de precio congelado."""

    def __init__(self, calculator: PricingCalculator | None = None) -> None:
        self._calculator = calculator or PricingCalculator()

    def create(
        self,
        hiring_id: str,
        service: Service,
        client_id: str,
        start_date: datetime,
        end_date: datetime,
        duration: int,
        payment_method: PaymentMethod | str,
        now: datetime,
        notes: str | None = None,
    ) -> Hiring:
        """
        Crea la contratación en estado pendiente.

        La comisión se copia del servicio en este momento; cambios posteriores
        en el servicio no afectan a la contratación.

        Raises:
            InvalidDateRangeError: end_date no es posterior a start_date.
            InvalidDurationError: duración fuera de los límites del servicio.
            InvalidPricingInputError: tarifa, duración o comisión inválidas.
            ValidationError: método de pago o notas inválidos.
        """
        period = DatetimeRange(start=start_date, end=end_date)

        if (
            not isinstance(duration, bool)
            and isinstance(duration, int)
            and not service.accepts_duration(duration)
        ):
            raise InvalidDurationError(
                duration=duration,
                min_duration=service.min_duration,
                max_duration=service.max_duration,
                time_unit=service.time_unit.value,
            )

        pricing = self._calculator.calculate(
            rate=service.rate,
            duration=duration,
            commission_rate=service.commission_rate,
        )

        return Hiring(
            id=hiring_id,
            service_id=service.id,
            client_id=client_id,
            provider_id=service.provider_id,
            start_date=period.start,
            end_date=period.end,
            duration=duration,
            base_price=pricing.base_price,
            commission_rate=pricing.commission_rate,
            commission_amount=pricing.commission_amount,
            total_price=pricing.total_price,
            final_price=pricing.final_price,
            payment_method=self._parse_payment_method(payment_method),
            status=HiringStatus.PENDING,
            notes=self._validate_notes(notes),
            created_at=now,
            updated_at=now,
        )

    @staticmethod
    def _parse_payment_method(payment_method: PaymentMethod | str) -> PaymentMethod:
        try:
            return PaymentMethod(payment_method)
        except ValueError as exc:
            allowed = ", ".join(method.value for method in PaymentMethod)
            raise ValidationError(
                "payment_method", f"debe ser uno de: {allowed}"
            ) from exc

    @staticmethod
    def _validate_notes(notes: str | None) -> str | None:
        if notes is None:
            return None
        if len(notes) > NOTES_MAX_LENGTH:
            raise ValidationError(
                "notes", f"no pueden tener más de {NOTES_MAX_LENGTH} caracteres"
            )
        return notes
