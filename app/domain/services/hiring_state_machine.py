"""Máquina de estados de una contratación."""

from datetime import datetime

from app.domain.entities.hiring import Hiring, HiringStatus
from app.domain.errors import InvalidTransitionError


class HiringStateMachine:
    """
    Gobierna las transiciones de estado de una contratación.

    pendiente -> confirmada -> en_progreso -> completada, y desde cualquier
    estado no terminal -> cancelada. Los estados terminales (completada,
    cancelada) son inmutables; volver a pedir el mismo estado terminal es una
    operación sin efecto. No se exige pasar por los estados intermedios.
    """

    def transition(self, current: HiringStatus, requested: object) -> HiringStatus:
        """
        Valida una transición y retorna el estado resultante.

        Raises:
            InvalidTransitionError: estado desconocido, o cambio desde un estado terminal.
        """
        target = self.parse(current, requested)

        if current.is_terminal and target != current:
            raise InvalidTransitionError(
                current_status=current.value,
                requested_status=target.value,
                reason=f"una contratación {current.value} no puede cambiar de estado",
            )
        return target

    def apply(self, hiring: Hiring, requested: object, now: datetime) -> Hiring:
        """Aplica la transición sobre la contratación y refresca updated_at."""
        target = self.transition(hiring.status, requested)
        if hiring.is_terminal and target == hiring.status:
            return hiring

        hiring.status = target
        hiring.touch(now)
        return hiring

    @staticmethod
    def parse(current: HiringStatus, requested: object) -> HiringStatus:
        if isinstance(requested, HiringStatus):
            return requested
        try:
            return HiringStatus(requested)
        except ValueError as exc:
            raise InvalidTransitionError(
                current_status=current.value,
                requested_status=requested,
                reason="estado no válido",
            ) from exc
