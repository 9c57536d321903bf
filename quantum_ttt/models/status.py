"""
Status models for the quantum tic-tac-toe engine.

GameStatus is always derived from the engine's state, never stored.
It is a discriminated union on ``kind``:

    - AwaitingMove: the current player must place a spooky move
    - AwaitingMeasurement: a cycle was closed and the chooser must collapse it
    - Finished: at least one line is complete, or no legal move remains

Example:
    >>> status = game.play(0, 1)
    >>> if status.kind == "awaiting_move":
    ...     print(status.player, status.move_number)
"""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field, model_validator

from quantum_ttt.models.board import ClassicalMark, Line, Player


class Cycle(BaseModel):
    """A closed loop of spooky moves.

    ``moves[i]`` joins ``squares[i]`` to ``squares[(i + 1) % k]``; the last
    move wraps from ``squares[-1]`` back to ``squares[0]``.

    Attributes:
        squares: Ordered squares around the loop
        moves: Move ids in the same order, the closing move last
    """

    squares: list[int]
    moves: list[int]

    @model_validator(mode="after")
    def check_lengths(self) -> "Cycle":
        """Ensure squares and moves pair up into a loop of at least two edges."""
        if len(self.squares) != len(self.moves):
            raise ValueError("a cycle needs as many moves as squares")
        if len(self.moves) < 2:
            raise ValueError("a cycle needs at least two moves")
        return self

    def __len__(self) -> int:
        return len(self.moves)

    def edge(self, i: int) -> tuple[int, int]:
        """Return the two squares joined by ``moves[i]``."""
        k = len(self.moves)
        return self.squares[i], self.squares[(i + 1) % k]


class Winner(BaseModel):
    """A player's result once the game has finished.

    Attributes:
        player: The scoring player
        lines: Every line the player completed
        earliest_line_max_move: Over the completed lines, the smallest
            "last move needed" (max move id on the line)
        points: 1.0 outright, 0.5 runner-up, 0.75 each on an exact tie
    """

    player: Player
    lines: list[Line]
    earliest_line_max_move: int
    points: float


class AwaitingMove(BaseModel):
    """The current player must place a move."""

    kind: Literal["awaiting_move"] = "awaiting_move"
    player: Player
    move_number: int


class AwaitingMeasurement(BaseModel):
    """A cycle is pending; the chooser picks squares[0] or squares[1]."""

    kind: Literal["awaiting_measurement"] = "awaiting_measurement"
    squares: list[int]
    moves: list[int]
    chooser: Player

    @property
    def choices(self) -> tuple[int, int]:
        """The two squares touched by the cycle's first move."""
        return self.squares[0], self.squares[1]


class Finished(BaseModel):
    """The game is over. An empty ``winners`` list is a draw."""

    kind: Literal["finished"] = "finished"
    winners: list[Winner] = Field(default_factory=list)

    @property
    def is_draw(self) -> bool:
        return not self.winners


GameStatus = Annotated[
    AwaitingMove | AwaitingMeasurement | Finished,
    Field(discriminator="kind"),
]


class SquareView(BaseModel):
    """Read-only view of one square for a presentation layer.

    Attributes:
        square: The square index
        classical: The classical mark, if the square is determined
        spooky: Ids of uncollapsed moves touching the square, ascending
    """

    square: int
    classical: ClassicalMark | None = None
    spooky: list[int] = Field(default_factory=list)
