"""
Collapse resolution for the quantum tic-tac-toe engine.

Collapsing a spooky move turns it into a classical mark on one of its two
squares. Once a square is classical, every other spooky move touching it
is forced onto its other square, which may in turn force further moves.
CollapseResolver applies an assignment and then follows that cascade to
a fixpoint.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from quantum_ttt.engine.errors import EngineInvariantError
from quantum_ttt.models.board import ClassicalMark, SpookyMove
from quantum_ttt.models.rejection import Rejection, RejectionCode, rejected

if TYPE_CHECKING:
    from quantum_ttt.engine.store import MoveStore

logger = logging.getLogger(__name__)


class CollapseResolver:
    """Applies collapses and cascades to a MoveStore.

    Example:
        >>> resolver = CollapseResolver(store)
        >>> collapsed = resolver.apply_collapse({1: 0, 2: 1, 3: 2})
        >>> forced = resolver.resolve_cascades()
    """

    def __init__(self, store: "MoveStore"):
        """Initialize the resolver.

        Args:
            store: The move store to mutate
        """
        self._store = store

    def validate(self, assignments: dict[int, int]) -> Rejection | None:
        """Check an assignment of move ids to squares without applying it.

        Already-collapsed moves are ignored. Targets claimed by an earlier
        entry of the same assignment count as classical.

        Args:
            assignments: Mapping of move id -> target square

        Returns:
            None if every entry can be applied, otherwise a Rejection
        """
        claimed: set[int] = set()
        for move_id, to in assignments.items():
            move = self._store.get(move_id)
            if move is None:
                return rejected(
                    RejectionCode.UNKNOWN_MOVE,
                    f"There is no move {move_id}.",
                    move_id=move_id,
                )
            if move.is_collapsed:
                continue
            if not move.touches(to):
                return rejected(
                    RejectionCode.NOT_AN_ENDPOINT,
                    f"Move {move_id} spans squares {move.a} and {move.b}, not {to}.",
                    move_id=move_id,
                    square=to,
                )
            if self._store.is_classical(to) or to in claimed:
                return rejected(
                    RejectionCode.TARGET_CLASSICAL,
                    f"Square {to} is already classical.",
                    move_id=move_id,
                    square=to,
                )
            claimed.add(to)
        return None

    def apply_collapse(self, assignments: dict[int, int]) -> list[SpookyMove] | Rejection:
        """Collapse each move onto its assigned square.

        The whole assignment is validated before anything changes, so a
        Rejection leaves the store untouched.

        Args:
            assignments: Mapping of move id -> target square

        Returns:
            The moves collapsed by this call, or a Rejection
        """
        rejection = self.validate(assignments)
        if rejection is not None:
            return rejection

        collapsed: list[SpookyMove] = []
        for move_id, to in assignments.items():
            move = self._store.get(move_id)
            if move.is_collapsed:
                continue
            self._collapse(move, to)
            collapsed.append(move)
        return collapsed

    def resolve_cascades(self) -> list[SpookyMove]:
        """Collapse every move forced by a classical endpoint.

        Scans the uncollapsed moves in ascending id order, collapsing any
        move with exactly one classical endpoint onto its other endpoint,
        and repeats until a full scan changes nothing.

        Returns:
            The moves collapsed by the cascade, in collapse order

        Raises:
            EngineInvariantError: If a spooky move has both endpoints classical
        """
        forced: list[SpookyMove] = []
        progressed = True
        while progressed:
            progressed = False
            for move in self._store.uncollapsed():
                a_classical = self._store.is_classical(move.a)
                b_classical = self._store.is_classical(move.b)
                if a_classical and b_classical:
                    raise EngineInvariantError(
                        f"Move {move.id} is spooky but both squares "
                        f"{move.a} and {move.b} are classical"
                    )
                if a_classical or b_classical:
                    to = move.b if a_classical else move.a
                    self._collapse(move, to)
                    forced.append(move)
                    progressed = True
        return forced

    def _collapse(self, move: SpookyMove, to: int) -> None:
        self._store.mark(to, ClassicalMark(player=move.player, move_id=move.id))
        move.collapse(to)
        logger.debug(f"Collapsed {move.label()} to square {to}")
