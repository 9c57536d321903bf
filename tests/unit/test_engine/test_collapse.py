"""Unit tests for CollapseResolver.

Tests cover:
- Applying a valid assignment
- Rejections for unknown moves, foreign squares and classical targets
- No mutation when an assignment is rejected
- Idempotence for already-collapsed moves
- Cascades to a fixpoint
- Invariant fault when both endpoints are classical
"""

import pytest

from quantum_ttt.engine.collapse import CollapseResolver
from quantum_ttt.engine.errors import EngineInvariantError
from quantum_ttt.engine.store import MoveStore
from quantum_ttt.models.board import ClassicalMark
from quantum_ttt.models.rejection import Rejection, RejectionCode


@pytest.fixture
def store(config) -> MoveStore:
    return MoveStore(config)


@pytest.fixture
def resolver(store) -> CollapseResolver:
    return CollapseResolver(store)


@pytest.fixture
def record(store):
    """Factory that records (a, b) moves in turn order."""

    def _record(*edges: tuple[int, int]) -> None:
        for a, b in edges:
            store.record(a, b)
            store.advance()

    return _record


class TestApplyCollapse:
    """Tests for CollapseResolver.apply_collapse()."""

    def test_marks_squares_and_moves(self, store, resolver, record) -> None:
        """Each move collapses onto its target with a matching classical mark."""
        record((0, 1), (1, 2), (2, 0))

        collapsed = resolver.apply_collapse({1: 0, 2: 1, 3: 2})

        assert [m.id for m in collapsed] == [1, 2, 3]
        assert store.classical_at(0) == ClassicalMark(player="X", move_id=1)
        assert store.classical_at(1) == ClassicalMark(player="O", move_id=2)
        assert store.classical_at(2) == ClassicalMark(player="X", move_id=3)
        assert store.get(2).collapsed_to == 1

    def test_unknown_move(self, store, resolver, record) -> None:
        record((0, 1))

        outcome = resolver.apply_collapse({7: 0})

        assert isinstance(outcome, Rejection)
        assert outcome.code == RejectionCode.UNKNOWN_MOVE
        assert outcome.context["move_id"] == 7

    def test_not_an_endpoint(self, store, resolver, record) -> None:
        record((0, 1))

        outcome = resolver.apply_collapse({1: 5})

        assert outcome.code == RejectionCode.NOT_AN_ENDPOINT
        assert store.get(1).collapsed_to is None

    def test_target_already_classical(self, store, resolver, record) -> None:
        record((0, 1))
        store.mark(0, ClassicalMark(player="O", move_id=9))

        outcome = resolver.apply_collapse({1: 0})

        assert outcome.code == RejectionCode.TARGET_CLASSICAL

    def test_target_claimed_within_batch(self, store, resolver, record) -> None:
        """Two moves of one assignment cannot share a target."""
        record((0, 1), (1, 2))

        outcome = resolver.apply_collapse({1: 1, 2: 1})

        assert outcome.code == RejectionCode.TARGET_CLASSICAL
        assert store.classical_at(1) is None

    def test_rejection_leaves_store_untouched(self, store, resolver, record) -> None:
        """A bad entry late in the assignment blocks the earlier ones too."""
        record((0, 1), (1, 2))

        outcome = resolver.apply_collapse({1: 0, 2: 5})

        assert isinstance(outcome, Rejection)
        assert store.classical == (None,) * 9
        assert store.get(1).collapsed_to is None

    def test_already_collapsed_is_skipped(self, store, resolver, record) -> None:
        """Re-applying a collapsed move is a no-op."""
        record((0, 1))
        resolver.apply_collapse({1: 0})

        collapsed = resolver.apply_collapse({1: 1})

        assert collapsed == []
        assert store.get(1).collapsed_to == 0
        assert store.classical_at(1) is None


class TestResolveCascades:
    """Tests for CollapseResolver.resolve_cascades()."""

    def test_no_classical_no_cascade(self, resolver, record) -> None:
        record((0, 1), (2, 3))

        assert resolver.resolve_cascades() == []

    def test_forced_onto_other_square(self, store, resolver, record) -> None:
        """A move with one classical endpoint collapses to the other."""
        record((0, 1))
        store.mark(0, ClassicalMark(player="O", move_id=2))

        forced = resolver.resolve_cascades()

        assert [m.id for m in forced] == [1]
        assert store.get(1).collapsed_to == 1
        assert store.classical_at(1) == ClassicalMark(player="X", move_id=1)

    def test_chain(self, store, resolver, record) -> None:
        """Collapse ripples along a chain of moves."""
        record((0, 1), (1, 2), (2, 5), (5, 8))
        store.mark(0, ClassicalMark(player="O", move_id=10))

        forced = resolver.resolve_cascades()

        assert [m.id for m in forced] == [1, 2, 3, 4]
        assert [store.classical_at(sq).move_id for sq in (1, 2, 5, 8)] == [1, 2, 3, 4]

    def test_chain_needing_several_scans(self, store, resolver, record) -> None:
        """Moves forced by later moves are picked up on the next scan."""
        record((5, 8), (2, 5), (1, 2), (0, 1))
        store.mark(0, ClassicalMark(player="O", move_id=10))

        forced = resolver.resolve_cascades()

        assert [m.id for m in forced] == [4, 3, 2, 1]
        assert store.get(1).collapsed_to == 8

    def test_both_endpoints_classical_is_fatal(self, store, resolver, record) -> None:
        """A spooky move between two classical squares is an engine fault."""
        record((0, 1))
        store.mark(0, ClassicalMark(player="O", move_id=2))
        store.mark(1, ClassicalMark(player="O", move_id=4))

        with pytest.raises(EngineInvariantError):
            resolver.resolve_cascades()
