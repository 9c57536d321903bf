"""Quantum tic-tac-toe engine.

Key components (import directly from submodules):
- QuantumTicTacToe: Turn / measurement state machine (game.py)
- MoveStore: Classical board and move history (store.py)
- find_cycle: Cycle detection over spooky moves (cycles.py)
- CollapseResolver: Collapse and cascade resolution (collapse.py)
- evaluate_winners: Line scoring and tie-break (scoring.py)
- Validators: Play and measurement validation (validators.py)
"""

# Note: Imports are done lazily to avoid circular import issues.
# Import directly from submodules:
#   from quantum_ttt.engine.game import QuantumTicTacToe
#   from quantum_ttt.engine.store import MoveStore
