"""
Life core Python package.

Pure-logic pieces of the Game of Life simulation, kept apart from the
CLI and the Flask app so they are easy to test on their own.
Modules:
- board.py: Board, Coord, points_surrounding
- rules.py: AliveCellRules, DeadCellRules, Fate, classify
- simulation.py: Game, RunResult
- patterns.py, normalize.py, hashkey.py, render.py
"""
