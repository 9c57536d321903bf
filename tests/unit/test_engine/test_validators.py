"""Unit tests for PlayValidator and MeasurementValidator.

Tests cover:
- Legal plays and measurements pass
- Each rejection code for plays
- Each rejection code for measurements
"""

import pytest

from quantum_ttt.engine.validators import MeasurementValidator, PlayValidator
from quantum_ttt.models.rejection import RejectionCode


class TestPlayValidator:
    """Tests for PlayValidator."""

    @pytest.fixture
    def validator(self) -> PlayValidator:
        return PlayValidator()

    def test_legal_move(self, validator, game) -> None:
        assert validator.validate(0, 8, game) is None

    def test_same_square(self, validator, game) -> None:
        result = validator.validate(4, 4, game)

        assert result.code == RejectionCode.SAME_SQUARE
        assert "distinct" in result.reason

    @pytest.mark.parametrize("a,b", [(0, 9), (-1, 3), (2, 100)])
    def test_out_of_range(self, validator, game, a, b) -> None:
        result = validator.validate(a, b, game)

        assert result.code == RejectionCode.SQUARE_OUT_OF_RANGE

    def test_non_integer_square(self, validator, game) -> None:
        result = validator.validate("a", 3, game)

        assert result.code == RejectionCode.SQUARE_OUT_OF_RANGE

    def test_classical_square(self, validator, game, play_all) -> None:
        """Squares settled by an auto-collapse are off limits."""
        play_all(game, [(0, 1), (3, 4), (0, 1)])

        result = validator.validate(1, 5, game)

        assert result.code == RejectionCode.SQUARE_CLASSICAL
        assert result.context["square"] == 1

    def test_measurement_pending(self, validator, pending_game) -> None:
        result = validator.validate(5, 6, pending_game)

        assert result.code == RejectionCode.MEASUREMENT_PENDING
        assert result.context["chooser"] == "O"

    def test_game_finished(self, validator, game, play_all) -> None:
        play_all(game, [(0, 1), (6, 7), (0, 1), (6, 7), (2, 5), (3, 4), (2, 5)])

        result = validator.validate(3, 4, game)

        assert result.code == RejectionCode.GAME_FINISHED


class TestMeasurementValidator:
    """Tests for MeasurementValidator."""

    @pytest.fixture
    def validator(self) -> MeasurementValidator:
        return MeasurementValidator()

    @pytest.mark.parametrize("choice", [2, 1])
    def test_first_edge_squares_are_legal(self, validator, pending_game, choice) -> None:
        assert validator.validate(choice, pending_game) is None

    def test_nothing_pending(self, validator, game) -> None:
        result = validator.validate(0, game)

        assert result.code == RejectionCode.NO_MEASUREMENT_PENDING

    def test_square_later_in_cycle(self, validator, pending_game) -> None:
        """Only the first move's squares may be chosen."""
        result = validator.validate(0, pending_game)

        assert result.code == RejectionCode.INVALID_MEASUREMENT_CHOICE
        assert result.context["choices"] == [2, 1]

    def test_square_outside_cycle(self, validator, pending_game) -> None:
        result = validator.validate(7, pending_game)

        assert result.code == RejectionCode.INVALID_MEASUREMENT_CHOICE
