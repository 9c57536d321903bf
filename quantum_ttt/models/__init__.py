"""Pydantic models for the quantum tic-tac-toe engine"""

from quantum_ttt.models.board import LINES, ClassicalMark, SpookyMove
from quantum_ttt.models.status import (
    AwaitingMeasurement,
    AwaitingMove,
    Cycle,
    Finished,
    GameStatus,
    SquareView,
    Winner,
)
from quantum_ttt.models.rejection import Rejection, RejectionCode, rejected

__all__ = [
    # Board models
    "LINES",
    "ClassicalMark",
    "SpookyMove",
    # Status models
    "GameStatus",
    "AwaitingMove",
    "AwaitingMeasurement",
    "Finished",
    "Winner",
    "Cycle",
    "SquareView",
    # Rejection models
    "Rejection",
    "RejectionCode",
    "rejected",
]
