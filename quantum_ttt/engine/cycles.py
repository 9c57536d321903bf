"""
Cycle detection for the quantum tic-tac-toe engine.

Uncollapsed spooky moves form an undirected graph whose vertices are
squares and whose edges are moves. That graph stays a forest except at
the moment a new move joins two squares that are already connected:
the new edge then closes a cycle, which has to be measured.

The graph is rebuilt from scratch on every call. With nine squares it
never holds more than a handful of edges.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable

from quantum_ttt.models.board import SpookyMove
from quantum_ttt.models.status import Cycle

logger = logging.getLogger(__name__)


def build_adjacency(
    moves: Iterable[SpookyMove],
    exclude_move_id: int | None = None,
) -> dict[int, list[tuple[int, int]]]:
    """Build an adjacency map from uncollapsed moves.

    Moves are visited in ascending id order and each adjacency list keeps
    that order, so searches over the map are reproducible.

    Args:
        moves: Candidate moves; collapsed moves are skipped
        exclude_move_id: A move to leave out (the edge being tested)

    Returns:
        Mapping of square -> list of (neighbour square, move id)
    """
    adj: dict[int, list[tuple[int, int]]] = {}
    for move in sorted(moves, key=lambda m: m.id):
        if move.is_collapsed or move.id == exclude_move_id:
            continue
        adj.setdefault(move.a, []).append((move.b, move.id))
        adj.setdefault(move.b, []).append((move.a, move.id))
    return adj


def find_path(
    adj: dict[int, list[tuple[int, int]]],
    start: int,
    goal: int,
) -> tuple[list[int], list[int]] | None:
    """Breadth-first search for the shortest path from start to goal.

    Args:
        adj: Adjacency map from build_adjacency
        start: Square to search from
        goal: Square to reach

    Returns:
        (squares, move ids) along the path, squares running start..goal,
        or None if goal is unreachable
    """
    parent: dict[int, tuple[int, int]] = {}
    visited = {start}
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for nb, move_id in adj.get(node, []):
            if nb in visited:
                continue
            visited.add(nb)
            parent[nb] = (node, move_id)
            if nb == goal:
                return _reconstruct(parent, start, goal)
            queue.append(nb)
    return None


def _reconstruct(
    parent: dict[int, tuple[int, int]],
    start: int,
    goal: int,
) -> tuple[list[int], list[int]]:
    squares: list[int] = []
    move_ids: list[int] = []
    cur = goal
    while cur != start:
        prev, move_id = parent[cur]
        squares.append(cur)
        move_ids.append(move_id)
        cur = prev
    squares.append(start)
    squares.reverse()
    move_ids.reverse()
    return squares, move_ids


def find_cycle(
    moves: Iterable[SpookyMove],
    a: int,
    b: int,
    new_move_id: int,
) -> Cycle | None:
    """Check whether a new edge a-b closes a cycle.

    Searches the graph of all other uncollapsed moves for a path from
    ``a`` to ``b``. If one exists, the new move closes it into a cycle.

    Args:
        moves: All recorded moves (the new one may be among them)
        a: First square of the new move
        b: Second square of the new move
        new_move_id: Id of the new move, appended as the closing edge

    Returns:
        Cycle whose squares start at ``a`` and end at ``b``, with the new
        move last (joining ``b`` back to ``a``); None if no cycle forms
    """
    adj = build_adjacency(moves, exclude_move_id=new_move_id)
    path = find_path(adj, a, b)
    if path is None:
        return None

    squares, move_ids = path
    cycle = Cycle(squares=squares, moves=move_ids + [new_move_id])
    logger.debug(f"Move {new_move_id} closes cycle through squares {cycle.squares}")
    return cycle
