"""
Quantum tic-tac-toe test suite

Test structure:
- unit/: Test components in isolation
- integration/: Play whole games through the engine
"""
