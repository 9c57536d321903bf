"""
Board models for the quantum tic-tac-toe engine.

A board has nine squares, numbered 0-8 row by row. Each move places a
spooky mark spanning two squares; once collapsed, the move leaves a
classical mark on exactly one of them.

Key concepts:
    - ClassicalMark: A determined, permanent owner of a square
    - SpookyMove: A move spanning two squares, undetermined until collapsed
    - LINES: The eight winning triples (rows, columns, diagonals)

Example:
    >>> move = SpookyMove(id=1, player="X", a=0, b=4)
    >>> move.collapse(4)
    >>> move.collapsed_to
    4
"""

from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, Field, model_validator

BOARD_SIZE = 9

Square = Annotated[int, Field(ge=0, le=BOARD_SIZE - 1)]
Player = str
Line = tuple[int, int, int]

# Winning lines (rows, columns, diagonals)
LINES: tuple[Line, ...] = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),              # diagonals
)


def is_square(value: object) -> bool:
    """Check whether a value names one of the nine board squares."""
    return isinstance(value, int) and not isinstance(value, bool) and 0 <= value < BOARD_SIZE


class ClassicalMark(BaseModel):
    """A determined mark on a square.

    Attributes:
        player: Owner of the square
        move_id: The move that collapsed onto this square
    """

    player: Player
    move_id: int = Field(ge=1)

    model_config = {"frozen": True}


class SpookyMove(BaseModel):
    """A move spanning two distinct squares.

    The move id is its 1-based sequence number in the game; its parity
    encodes which player made it. ``collapsed_to`` stays ``None`` until
    the move is measured, after which it is fixed for the rest of the game.

    Attributes:
        id: Sequence number of the move
        player: Player who made the move
        a: First square
        b: Second square
        collapsed_to: Square the move collapsed to, or None while spooky
    """

    id: int = Field(ge=1)
    player: Player
    a: Square
    b: Square
    collapsed_to: Square | None = None

    @model_validator(mode="after")
    def check_squares(self) -> "SpookyMove":
        """Ensure the move spans two squares and any collapse is onto one of them."""
        if self.a == self.b:
            raise ValueError("a spooky move must span two distinct squares")
        if self.collapsed_to is not None and self.collapsed_to not in (self.a, self.b):
            raise ValueError("collapsed_to must be one of the move's squares")
        return self

    @property
    def squares(self) -> tuple[int, int]:
        return (self.a, self.b)

    @property
    def is_collapsed(self) -> bool:
        return self.collapsed_to is not None

    def touches(self, square: int) -> bool:
        return square == self.a or square == self.b

    def other(self, square: int) -> int:
        """Return the endpoint opposite to ``square``.

        Raises:
            ValueError: If ``square`` is not an endpoint of this move
        """
        if square == self.a:
            return self.b
        if square == self.b:
            return self.a
        raise ValueError(f"Square {square} is not an endpoint of move {self.id}")

    def collapse(self, square: int) -> None:
        """Fix this move onto one of its squares.

        Raises:
            ValueError: If already collapsed or ``square`` is not an endpoint
        """
        if self.collapsed_to is not None:
            raise ValueError(f"Move {self.id} already collapsed to {self.collapsed_to}")
        if not self.touches(square):
            raise ValueError(f"Square {square} is not an endpoint of move {self.id}")
        self.collapsed_to = square

    def label(self) -> str:
        """Short label used when listing spooky marks, e.g. ``X3``."""
        return f"{self.player}{self.id}"
