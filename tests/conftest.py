"""
Shared pytest fixtures for quantum tic-tac-toe tests.

This module provides:
- config: Default X/O GameConfig
- game: A fresh QuantumTicTacToe independent of the environment
- play_all: Helper to play a sequence of moves and return the last status
- pending_game: A game waiting on the 0-1, 1-2, 2-0 measurement
- Custom markers for test categorization
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable

import pytest

# Add project root to path for imports
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from quantum_ttt.config import GameConfig  # noqa: E402
from quantum_ttt.engine.game import QuantumTicTacToe  # noqa: E402


# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests as full-game integration tests")


# =============================================================================
# Game Fixtures
# =============================================================================


@pytest.fixture
def config() -> GameConfig:
    """Default player symbols."""
    return GameConfig(first_player="X", second_player="O")


@pytest.fixture
def game(config: GameConfig) -> QuantumTicTacToe:
    """Create an empty game."""
    return QuantumTicTacToe(config)


@pytest.fixture
def play_all() -> Callable:
    """Factory that plays a list of (a, b) moves and returns the final status."""

    def _play(game: QuantumTicTacToe, moves: list[tuple[int, int]]):
        status = None
        for a, b in moves:
            status = game.play(a, b)
            assert status.kind != "rejected", f"move {a}-{b} rejected: {status.reason}"
        return status

    return _play


@pytest.fixture
def pending_game(game: QuantumTicTacToe, play_all) -> QuantumTicTacToe:
    """Game where X1 0-1, O2 1-2, X3 2-0 closed a cycle for O to measure.

    The pending cycle is squares [2, 1, 0] joined by moves [2, 1, 3].
    """
    play_all(game, [(0, 1), (1, 2), (2, 0)])
    return game
