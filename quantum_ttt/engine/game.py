"""
Quantum tic-tac-toe game engine.

This module implements the turn / measurement state machine, coordinating
the move store, cycle detector, collapse resolver and win evaluator.

Flow of a move:
    play(a, b) -> PlayValidator -> MoveStore.record
                                        |
                                        v
                                   find_cycle
                    no cycle /          |           \\ mixed players
              next turn          same player         pending measurement
                                 auto-collapse       -> measure_collapse(choice)
                                        \\             /
                                 CollapseResolver (+ cascades)
                                        |
                                 evaluate_winners -> next turn / finished

Every public operation runs to completion synchronously. A refused request
returns a Rejection and leaves the game unchanged.
"""

from __future__ import annotations

import logging

from quantum_ttt.config import GameConfig
from quantum_ttt.engine.collapse import CollapseResolver
from quantum_ttt.engine.cycles import find_cycle
from quantum_ttt.engine.errors import EngineInvariantError
from quantum_ttt.engine.scoring import evaluate_winners
from quantum_ttt.engine.store import MoveStore
from quantum_ttt.engine.validators import MeasurementValidator, PlayValidator
from quantum_ttt.models.board import BOARD_SIZE, ClassicalMark, SpookyMove, is_square
from quantum_ttt.models.rejection import Rejection
from quantum_ttt.models.status import (
    AwaitingMeasurement,
    AwaitingMove,
    Cycle,
    Finished,
    GameStatus,
    SquareView,
    Winner,
)

logger = logging.getLogger(__name__)


class QuantumTicTacToe:
    """One game of quantum tic-tac-toe.

    The game starts empty with the first player to make move 1. It is
    mutated only by ``play`` and ``measure_collapse``; to start over,
    replace it with ``reset()``.

    Attributes:
        config: Player symbols for this game
        store: The underlying MoveStore

    Example:
        >>> game = QuantumTicTacToe()
        >>> game.play(0, 1).kind
        'awaiting_move'
        >>> game.play(1, 2).kind
        'awaiting_move'
        >>> status = game.play(2, 0)
        >>> status.kind, status.chooser
        ('awaiting_measurement', 'O')
        >>> game.measure_collapse(status.squares[0]).kind
        'awaiting_move'
    """

    def __init__(self, config: GameConfig | None = None):
        """Initialize an empty game.

        Args:
            config: Player symbols; read from the environment if omitted
        """
        self.config = config or GameConfig.from_env()
        self.store = MoveStore(self.config)
        self._resolver = CollapseResolver(self.store)
        self._play_validator = PlayValidator()
        self._measurement_validator = MeasurementValidator()
        self._pending: AwaitingMeasurement | None = None

    def reset(self) -> "QuantumTicTacToe":
        """Return a fresh game with the same configuration."""
        return QuantumTicTacToe(self.config)

    # State queries

    @property
    def status(self) -> GameStatus:
        """The current status, derived from the game state."""
        if self._pending is not None:
            return self._pending.model_copy(deep=True)
        winners = self._final_result()
        if winners is not None:
            return Finished(winners=winners)
        return AwaitingMove(player=self.current_player, move_number=self.move_number)

    @property
    def current_player(self) -> str:
        return self.store.current_player

    @property
    def move_number(self) -> int:
        return self.store.move_number

    @property
    def pending_measurement(self) -> AwaitingMeasurement | None:
        """A copy of the pending measurement, or None."""
        if self._pending is None:
            return None
        return self._pending.model_copy(deep=True)

    @property
    def is_finished(self) -> bool:
        return self._pending is None and self._final_result() is not None

    @property
    def classical(self) -> tuple[ClassicalMark | None, ...]:
        return self.store.classical

    def get_move(self, move_id: int) -> SpookyMove | None:
        """Look up a recorded move by id.

        Args:
            move_id: The move's sequence number

        Returns:
            A copy of the SpookyMove, or None if no such move was played
        """
        move = self.store.get(move_id)
        return move.model_copy() if move is not None else None

    def list_moves(self) -> list[SpookyMove]:
        """Return copies of every recorded move in ascending id order."""
        return [move.model_copy() for move in self.store.moves()]

    def square(self, square: int) -> SquareView:
        """Describe one square: its classical mark and the spooky moves on it.

        Raises:
            ValueError: If ``square`` is not on the board
        """
        if not is_square(square):
            raise ValueError(f"Square {square!r} is not on the board (0-8)")
        return SquareView(
            square=square,
            classical=self.store.classical_at(square),
            spooky=[m.id for m in self.store.uncollapsed() if m.touches(square)],
        )

    def board(self) -> list[SquareView]:
        """Describe all nine squares."""
        return [self.square(sq) for sq in range(BOARD_SIZE)]

    # Operations

    def play(self, a: int, b: int) -> GameStatus | Rejection:
        """Place a spooky move for the current player on squares a and b.

        Args:
            a: First square
            b: Second square

        Returns:
            The new GameStatus, or a Rejection if the move is illegal
        """
        rejection = self._play_validator.validate(a, b, self)
        if rejection is not None:
            logger.warning(f"Rejected play {a}-{b}: {rejection.reason}")
            return rejection

        move = self.store.record(a, b)
        cycle = find_cycle(self.store.moves(), a, b, move.id)

        if cycle is None:
            self.store.advance()
            return self.status

        owners = {self.store.get(mid).player for mid in cycle.moves}
        if len(owners) == 1:
            # Every orientation gives the same owners; take the first.
            logger.info(f"Move {move.label()} closes a single-player cycle; collapsing")
            assignments = {mid: cycle.squares[i] for i, mid in enumerate(cycle.moves)}
            self._collapse(assignments)
            return self.status

        chooser = self.config.opponent(move.player)
        self._pending = AwaitingMeasurement(
            squares=list(cycle.squares),
            moves=list(cycle.moves),
            chooser=chooser,
        )
        logger.info(
            f"Move {move.label()} closes cycle {cycle.squares}; {chooser} must measure"
        )
        return self.status

    def measure_collapse(self, choice: int) -> GameStatus | Rejection:
        """Resolve the pending cycle.

        The chooser picks where the cycle's first move collapses:
        ``squares[0]`` collapses every move i onto ``squares[i]``;
        ``squares[1]`` collapses every move i onto ``squares[(i + 1) % k]``.

        Args:
            choice: squares[0] or squares[1] of the pending cycle

        Returns:
            The new GameStatus, or a Rejection if the choice is illegal
        """
        rejection = self._measurement_validator.validate(choice, self)
        if rejection is not None:
            logger.warning(f"Rejected measurement {choice!r}: {rejection.reason}")
            return rejection

        pending = self._pending
        cycle = Cycle(squares=pending.squares, moves=pending.moves)
        if choice == cycle.squares[0]:
            assignments = {mid: cycle.squares[i] for i, mid in enumerate(cycle.moves)}
        else:
            assignments = {mid: cycle.edge(i)[1] for i, mid in enumerate(cycle.moves)}

        logger.info(f"{pending.chooser} measures move {cycle.moves[0]} onto square {choice}")
        self._pending = None
        self._collapse(assignments)
        return self.status

    # Internals

    def _collapse(self, assignments: dict[int, int]) -> None:
        """Collapse a cycle, follow cascades and end the turn."""
        outcome = self._resolver.apply_collapse(assignments)
        if isinstance(outcome, Rejection):
            raise EngineInvariantError(f"Cycle collapse refused: {outcome.reason}")
        self._resolver.resolve_cascades()

        winners = self._final_result()
        if winners is None:
            self.store.advance()
        elif winners:
            summary = ", ".join(f"{w.player} +{w.points}" for w in winners)
            logger.info(f"Game finished: {summary}")
        else:
            logger.info("Game finished: draw")

    def _final_result(self) -> list[Winner] | None:
        """Winners if the game is over, [] for a draw, None while in play."""
        winners = evaluate_winners(self.store.classical, self.config.players)
        if winners is not None:
            return winners
        # A move needs two open squares.
        if len(self.store.open_squares()) < 2:
            return []
        return None
