"""Quantum tic-tac-toe rules engine"""

from quantum_ttt.config import GameConfig, configure_logging
from quantum_ttt.engine.errors import EngineInvariantError, MoveRejectedError
from quantum_ttt.engine.game import QuantumTicTacToe
from quantum_ttt.models.board import LINES, ClassicalMark, SpookyMove
from quantum_ttt.models.rejection import Rejection, RejectionCode
from quantum_ttt.models.status import (
    AwaitingMeasurement,
    AwaitingMove,
    Finished,
    GameStatus,
    SquareView,
    Winner,
)

__version__ = "0.1.0"
__all__ = [
    # Engine
    "QuantumTicTacToe",
    "GameConfig",
    "configure_logging",
    # Errors
    "EngineInvariantError",
    "MoveRejectedError",
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
    "SquareView",
    # Rejection models
    "Rejection",
    "RejectionCode",
]
