"""
Request validators for the quantum tic-tac-toe engine.

Each validator checks one kind of request against the current game and
returns either None (the request is legal) or a Rejection explaining
why not. Validators never mutate the game.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from quantum_ttt.models.board import is_square
from quantum_ttt.models.rejection import Rejection, RejectionCode, rejected

if TYPE_CHECKING:
    from quantum_ttt.engine.game import QuantumTicTacToe


class PlayValidator:
    """Validates a request to place a spooky move.

    Checks:
        1. Game is not finished
        2. No measurement is pending
        3. Both squares are on the board
        4. The squares differ
        5. Neither square is classical

    Example:
        >>> validator = PlayValidator()
        >>> rejection = validator.validate(0, 0, game)
        >>> rejection.code
        <RejectionCode.SAME_SQUARE: 'same_square'>
    """

    def validate(self, a: int, b: int, game: "QuantumTicTacToe") -> Rejection | None:
        """Validate a play request.

        Args:
            a: First square
            b: Second square
            game: The game the move would be played in

        Returns:
            None if the move is legal, otherwise a Rejection
        """
        status = game.status
        if status.kind == "finished":
            return rejected(
                RejectionCode.GAME_FINISHED,
                "The game has ended. Start a new game to play again.",
            )

        if status.kind == "awaiting_measurement":
            return rejected(
                RejectionCode.MEASUREMENT_PENDING,
                "Measurement must be resolved before the next move.",
                chooser=status.chooser,
            )

        for square in (a, b):
            if not is_square(square):
                return rejected(
                    RejectionCode.SQUARE_OUT_OF_RANGE,
                    f"Square {square!r} is not on the board (0-8).",
                    square=square,
                )

        if a == b:
            return rejected(
                RejectionCode.SAME_SQUARE,
                "A move must choose two distinct squares.",
                square=a,
            )

        for square in (a, b):
            mark = game.store.classical_at(square)
            if mark is not None:
                return rejected(
                    RejectionCode.SQUARE_CLASSICAL,
                    f"Square {square} is already classical ({mark.player}{mark.move_id}).",
                    square=square,
                )

        return None


class MeasurementValidator:
    """Validates a measurement choice.

    The chooser may only collapse the cycle's first move, onto either of
    its two squares: ``squares[0]`` or ``squares[1]``.
    """

    def validate(self, choice: int, game: "QuantumTicTacToe") -> Rejection | None:
        """Validate a measurement request.

        Args:
            choice: Square the cycle's first move should collapse to
            game: The game holding the pending measurement

        Returns:
            None if the choice is legal, otherwise a Rejection
        """
        pending = game.status
        if pending.kind != "awaiting_measurement":
            return rejected(
                RejectionCode.NO_MEASUREMENT_PENDING,
                "There is no measurement to make.",
            )

        if choice not in pending.choices or not is_square(choice):
            first, second = pending.choices
            return rejected(
                RejectionCode.INVALID_MEASUREMENT_CHOICE,
                f"Choice must be square {first} or {second}.",
                choice=choice,
                choices=[first, second],
            )

        return None
