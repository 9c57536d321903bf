"""
Move store for the quantum tic-tac-toe engine.

This module owns the raw game state: the nine-square classical board,
every spooky move ever played, and the move counter. It performs no
rule checks beyond refusing to overwrite a classical mark; the state
machine validates requests before calling into it.
"""

from __future__ import annotations

import logging

from quantum_ttt.config import GameConfig
from quantum_ttt.engine.errors import EngineInvariantError
from quantum_ttt.models.board import BOARD_SIZE, ClassicalMark, SpookyMove, is_square

logger = logging.getLogger(__name__)


def player_for_move(move_id: int, config: GameConfig) -> str:
    """Map a move id to the player who owns it.

    Odd ids belong to the first player, even ids to the second.

    Args:
        move_id: 1-based move sequence number
        config: Player symbols for the game

    Returns:
        The owning player's symbol
    """
    if move_id < 1:
        raise ValueError(f"Move ids start at 1, got {move_id}")
    return config.first_player if move_id % 2 == 1 else config.second_player


class MoveStore:
    """Holds the classical board and the spooky move history.

    Attributes:
        config: Player symbols for this game
        move_number: Id the next recorded move will receive

    Example:
        >>> store = MoveStore(GameConfig())
        >>> move = store.record(0, 4)
        >>> move.label()
        'X1'
    """

    def __init__(self, config: GameConfig):
        self.config = config
        self.move_number = 1
        self._classical: list[ClassicalMark | None] = [None] * BOARD_SIZE
        self._moves: dict[int, SpookyMove] = {}

    @property
    def current_player(self) -> str:
        return player_for_move(self.move_number, self.config)

    @property
    def classical(self) -> tuple[ClassicalMark | None, ...]:
        return tuple(self._classical)

    def classical_at(self, square: int) -> ClassicalMark | None:
        """Return the classical mark on a square, if any.

        Raises:
            ValueError: If ``square`` is not on the board
        """
        if not is_square(square):
            raise ValueError(f"Square {square!r} is not on the board (0-8)")
        return self._classical[square]

    def is_classical(self, square: int) -> bool:
        return self.classical_at(square) is not None

    def open_squares(self) -> list[int]:
        """Return the squares that have no classical mark yet."""
        return [sq for sq in range(BOARD_SIZE) if self._classical[sq] is None]

    def mark(self, square: int, mark: ClassicalMark) -> None:
        """Place a classical mark.

        Raises:
            EngineInvariantError: If the square is already classical
        """
        existing = self._classical[square]
        if existing is not None:
            raise EngineInvariantError(
                f"Square {square} already holds {existing.player}{existing.move_id}"
            )
        self._classical[square] = mark

    def record(self, a: int, b: int) -> SpookyMove:
        """Record a new spooky move for the current player.

        The move id is the current move number; the counter is not
        advanced here.

        Args:
            a: First square
            b: Second square

        Returns:
            The recorded SpookyMove
        """
        move = SpookyMove(id=self.move_number, player=self.current_player, a=a, b=b)
        self._moves[move.id] = move
        logger.debug(f"Recorded move {move.label()} on squares {a}-{b}")
        return move

    def advance(self) -> None:
        """Move on to the next move number."""
        self.move_number += 1

    def get(self, move_id: int) -> SpookyMove | None:
        return self._moves.get(move_id)

    def moves(self) -> list[SpookyMove]:
        """Return all recorded moves in ascending id order."""
        return [self._moves[mid] for mid in sorted(self._moves)]

    def uncollapsed(self) -> list[SpookyMove]:
        """Return the moves still spooky, in ascending id order."""
        return [move for move in self.moves() if not move.is_collapsed]
