"""Exceptions raised by the quantum tic-tac-toe engine."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from quantum_ttt.models.rejection import Rejection


class EngineInvariantError(RuntimeError):
    """The engine reached a state its own rules forbid.

    This signals a bug in the engine, not an illegal request. Illegal
    requests are reported as Rejection values instead.
    """


class MoveRejectedError(ValueError):
    """Raised by ``Rejection.raise_for_rejection``.

    Attributes:
        rejection: The refused request
    """

    def __init__(self, rejection: "Rejection"):
        super().__init__(f"{rejection.code.value}: {rejection.reason}")
        self.rejection = rejection
