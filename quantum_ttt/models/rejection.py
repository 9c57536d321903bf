"""
Rejection models for the quantum tic-tac-toe engine.

A Rejection is the outcome of a request the engine refuses: an illegal
move, a measurement with nothing pending, a bad collapse target. It is
returned instead of raised so callers can branch on ``kind`` the same
way they branch on a GameStatus. Validation always happens before any
state is touched, so a Rejection never leaves partial changes behind.

Faults in the engine itself are not Rejections; they raise
EngineInvariantError.

Example:
    >>> outcome = game.play(4, 4)
    >>> if outcome.kind == "rejected":
    ...     print(outcome.code, outcome.reason)
"""

from __future__ import annotations

from enum import Enum
from typing import Literal

from pydantic import BaseModel, Field

from quantum_ttt.engine.errors import MoveRejectedError


class RejectionCode(str, Enum):
    """Why a request was refused.

    Categories:
        Moves: GAME_FINISHED, MEASUREMENT_PENDING, SQUARE_OUT_OF_RANGE,
            SAME_SQUARE, SQUARE_CLASSICAL
        Measurement: NO_MEASUREMENT_PENDING, INVALID_MEASUREMENT_CHOICE
        Collapse: UNKNOWN_MOVE, NOT_AN_ENDPOINT, TARGET_CLASSICAL
    """

    # Moves
    GAME_FINISHED = "game_finished"
    MEASUREMENT_PENDING = "measurement_pending"
    SQUARE_OUT_OF_RANGE = "square_out_of_range"
    SAME_SQUARE = "same_square"
    SQUARE_CLASSICAL = "square_classical"

    # Measurement
    NO_MEASUREMENT_PENDING = "no_measurement_pending"
    INVALID_MEASUREMENT_CHOICE = "invalid_measurement_choice"

    # Collapse
    UNKNOWN_MOVE = "unknown_move"
    NOT_AN_ENDPOINT = "not_an_endpoint"
    TARGET_CLASSICAL = "target_classical"


class Rejection(BaseModel):
    """A refused request.

    Attributes:
        code: Machine-readable reason
        reason: Human-readable explanation
        context: Details about the request (squares, move ids, ...)
    """

    kind: Literal["rejected"] = "rejected"
    code: RejectionCode
    reason: str
    context: dict[str, object] = Field(default_factory=dict)

    def raise_for_rejection(self) -> None:
        """Raise MoveRejectedError for callers that prefer exceptions.

        Raises:
            MoveRejectedError: Always, carrying this rejection
        """
        raise MoveRejectedError(self)


def rejected(code: RejectionCode, reason: str, **context: object) -> Rejection:
    """Create a Rejection.

    Args:
        code: The rejection code
        reason: Human-readable reason for rejection
        **context: Additional context to include

    Returns:
        Rejection with the given code and reason

    Example:
        >>> outcome = rejected(RejectionCode.SAME_SQUARE, "Pick two squares.", square=4)
        >>> outcome.context["square"]
        4
    """
    return Rejection(code=code, reason=reason, context=dict(context))
