"""Historial de pagos (ledger) de una contratación."""

from dataclasses import dataclass
from datetime import datetime

from app.domain.constants import PAYMENT_CONCEPT_MAX_LENGTH
from app.domain.entities.hiring import Hiring, PaymentEntry
from app.domain.errors import InvalidPaymentError
from app.domain.value_objects.money import (
    MAX_MONEY_AMOUNT,
    has_cents_precision,
    to_decimal,
    to_money,
)


@dataclass(frozen=True)
class PaymentInput:
    """Pago declarado por el llamador (no verificado contra una pasarela)."""

    amount: object
    concept: str
    receipt: str | None = None
    transaction_id: str | None = None


class PaymentLedger:
    """
    Registro append-only de pagos.

    Los pagos duplicados generan entradas duplicadas; la idempotencia por
    ``transaction_id`` es responsabilidad del llamador. La marca de pagado
    solo pasa de False a True.
    """

    def add_payment(self, hiring: Hiring, payment: PaymentInput, now: datetime) -> Hiring:
        entry = self._build_entry(payment, now)

        hiring.payments.append(entry)
        if entry.transaction_id:
            hiring.transaction_id = entry.transaction_id

        if not hiring.paid and hiring.total_paid >= hiring.final_price:
            hiring.paid = True
            hiring.paid_at = now

        hiring.touch(now)
        return hiring

    @staticmethod
    def _build_entry(payment: PaymentInput, now: datetime) -> PaymentEntry:
        try:
            amount = to_decimal(payment.amount)
        except ValueError as exc:
            raise InvalidPaymentError("amount", "debe ser numérico") from exc
        if amount <= 0:
            raise InvalidPaymentError("amount", "debe ser mayor a 0")
        if amount > MAX_MONEY_AMOUNT:
            raise InvalidPaymentError("amount", f"no puede exceder {MAX_MONEY_AMOUNT}")
        # El monto declarado se registra tal cual: no se redondea.
        if not has_cents_precision(amount):
            raise InvalidPaymentError("amount", "máximo 2 decimales")

        concept = (payment.concept or "").strip()
        if not concept:
            raise InvalidPaymentError("concept", "es requerido")
        if len(concept) > PAYMENT_CONCEPT_MAX_LENGTH:
            raise InvalidPaymentError(
                "concept", f"máximo {PAYMENT_CONCEPT_MAX_LENGTH} caracteres"
            )

        return PaymentEntry(
            paid_at=now,
            amount=to_money(amount),
            concept=concept,
            receipt=payment.receipt or None,
            transaction_id=payment.transaction_id or None,
        )
