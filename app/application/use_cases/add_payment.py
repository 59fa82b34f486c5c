import logging

from app.application.dtos.hiring_dto import Actor
from app.application.interfaces.clock import Clock
from app.application.interfaces.hiring_repo import HiringRepo
from app.application.interfaces.transaction_manager import TransactionManager
from app.application.use_cases.hiring_access import load_hiring
from app.domain.entities.hiring import Hiring
from app.domain.errors import UnauthorizedError
from app.domain.services.payment_ledger import PaymentInput, PaymentLedger


class AddPaymentUseCase:
    def __init__(
        self,
        hiring_repo: HiringRepo,
        transaction_manager: TransactionManager,
        clock: Clock,
        ledger: PaymentLedger | None = None,
    ) -> None:
        self._hiring_repo = hiring_repo
        self._transaction_manager = transaction_manager
        self._clock = clock
        self._ledger = ledger or PaymentLedger()
        self._logger = logging.getLogger(__name__)

    async def execute(self, actor: Actor, hiring_id: str, payment: PaymentInput) -> Hiring:
        async with self._transaction_manager.start():
            hiring = await load_hiring(self._hiring_repo, hiring_id)
            if not actor.can_pay(hiring):
                self._logger.warning(
                    "Payment rejected",
                    extra={"hiring_id": hiring_id, "user_id": actor.user_id},
                )
                raise UnauthorizedError(
                    user_id=actor.user_id,
                    operation="agregar pagos a esta contratación",
                )

            was_paid = hiring.paid
            expected_lock_version = hiring.lock_version
            self._ledger.add_payment(hiring, payment, self._clock.now())
            await self._hiring_repo.save(hiring, expected_lock_version=expected_lock_version)

        self._logger.info(
            "Payment recorded",
            extra={
                "hiring_id": hiring.id,
                "amount": str(hiring.payments[-1].amount),
                "total_paid": str(hiring.total_paid),
                "final_price": str(hiring.final_price),
                "paid": hiring.paid,
            },
        )
        if hiring.paid and not was_paid:
            self._logger.info("Hiring fully paid", extra={"hiring_id": hiring.id})
        return hiring
