"""
Win evaluation for the quantum tic-tac-toe engine.

A line is complete for a player when all three of its squares are
classical and owned by that player. Because one measurement can settle
several squares at once, both players may complete lines in the same
step. The tie-break compares, for each player, the earliest-completing
line: the line whose last-needed move (highest move id on it) is lowest.

Scoring:
    - One player complete: 1.0
    - Both complete, distinct values: lower value 1.0, other 0.5
    - Both complete, equal values: 0.75 each
"""

from __future__ import annotations

from typing import Sequence

from quantum_ttt.models.board import LINES, ClassicalMark, Line
from quantum_ttt.models.status import Winner

OUTRIGHT_POINTS = 1.0
RUNNER_UP_POINTS = 0.5
TIE_POINTS = 0.75


def completed_lines(classical: Sequence[ClassicalMark | None]) -> dict[str, list[Line]]:
    """Collect every complete line per player.

    Args:
        classical: The nine squares' classical marks (None if not classical)

    Returns:
        Mapping of player -> complete lines, in LINES order; players with
        no complete line are absent
    """
    lines: dict[str, list[Line]] = {}
    for line in LINES:
        marks = [classical[sq] for sq in line]
        if any(mark is None for mark in marks):
            continue
        owner = marks[0].player
        if all(mark.player == owner for mark in marks):
            lines.setdefault(owner, []).append(line)
    return lines


def earliest_line_max_move(
    classical: Sequence[ClassicalMark | None],
    lines: Sequence[Line],
) -> int:
    """Smallest, over ``lines``, of the highest move id on the line."""
    return min(max(classical[sq].move_id for sq in line) for line in lines)


def evaluate_winners(
    classical: Sequence[ClassicalMark | None],
    players: tuple[str, str] = ("X", "O"),
) -> list[Winner] | None:
    """Score the board.

    Args:
        classical: The nine squares' classical marks
        players: (first player, second player); orders entries on a tie

    Returns:
        Winner entries, highest points first, or None if no line is complete
    """
    lines = completed_lines(classical)
    if not lines:
        return None

    entries = [
        Winner(
            player=player,
            lines=lines[player],
            earliest_line_max_move=earliest_line_max_move(classical, lines[player]),
            points=OUTRIGHT_POINTS,
        )
        for player in players
        if player in lines
    ]
    if len(entries) == 1:
        return entries

    first, second = entries
    if first.earliest_line_max_move == second.earliest_line_max_move:
        first.points = second.points = TIE_POINTS
        return [first, second]
    if second.earliest_line_max_move < first.earliest_line_max_move:
        first, second = second, first
    second.points = RUNNER_UP_POINTS
    return [first, second]
