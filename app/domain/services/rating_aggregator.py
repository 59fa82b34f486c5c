"""Calificación de contrataciones y promedio del servicio."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from app.domain.constants import COMMENT_MAX_LENGTH, MAX_RATING_SCORE, MIN_RATING_SCORE
from app.domain.entities.hiring import Hiring, HiringStatus, Rating
from app.domain.entities.service import RatingAggregate
from app.domain.errors import (
    AlreadyRatedError,
    InvalidScoreError,
    InvalidStateError,
    UnauthorizedError,
    ValidationError,
)


@dataclass(frozen=True)
class RatingInput:
    score: object
    comment: str | None = None


class RatingAggregator:
    """
    Registra la calificación del cliente y recalcula el promedio del servicio.

    El promedio se recalcula completo a partir de todas las contrataciones
    calificadas del servicio (sin suma acumulada), sin filtrar por estado.
    """

    def rate(
        self,
        hiring: Hiring,
        client_id: str,
        rating: RatingInput,
        rated_siblings: Iterable[Hiring],
        now: datetime,
    ) -> tuple[Hiring, RatingAggregate]:
        """
        Califica una contratación completada.

        Args:
            hiring: Contratación a calificar.
            client_id: Usuario que califica; debe ser el cliente de la contratación.
            rating: Puntuación (1-5) y comentario opcional.
            rated_siblings: Contrataciones calificadas del mismo servicio, leídas del store.
            now: Momento de la calificación.

        Returns:
            La contratación calificada y el nuevo agregado del servicio.

        Raises:
            UnauthorizedError, InvalidStateError, AlreadyRatedError, InvalidScoreError.
        """
        if client_id != hiring.client_id:
            raise UnauthorizedError(user_id=client_id, operation="calificar esta contratación")
        if hiring.status != HiringStatus.COMPLETED:
            raise InvalidStateError(
                current_status=hiring.status.value,
                expected_status=HiringStatus.COMPLETED.value,
                operation="calificar la contratación",
            )
        if hiring.is_rated:
            raise AlreadyRatedError(hiring.id)

        score = self._validate_score(rating.score)
        comment = self._validate_comment(rating.comment)

        hiring.rating = Rating(score=score, comment=comment, rated_at=now)
        hiring.touch(now)

        return hiring, self.aggregate([*rated_siblings, hiring])

    @staticmethod
    def aggregate(hirings: Iterable[Hiring]) -> RatingAggregate:
        """Promedio aritmético de las calificaciones, contando cada contratación una vez."""
        scores: dict[str, int] = {}
        for item in hirings:
            if item.rating is not None:
                scores[item.id] = item.rating.score

        if not scores:
            return RatingAggregate(average_rating=0.0, rating_count=0)
        return RatingAggregate(
            average_rating=sum(scores.values()) / len(scores),
            rating_count=len(scores),
        )

    @staticmethod
    def _validate_score(score: object) -> int:
        if isinstance(score, bool) or not isinstance(score, int):
            raise InvalidScoreError(score)
        if not MIN_RATING_SCORE <= score <= MAX_RATING_SCORE:
            raise InvalidScoreError(score)
        return score

    @staticmethod
    def _validate_comment(comment: str | None) -> str | None:
        if comment is None:
            return None
        comment = comment.strip()
        if len(comment) > COMMENT_MAX_LENGTH:
            raise ValidationError(
                "comment", f"no puede tener más de {COMMENT_MAX_LENGTH} caracteres"
            )
        return comment or None
