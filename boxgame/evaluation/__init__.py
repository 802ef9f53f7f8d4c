"""
Evaluation Package
==================

Command-line harness for running box games.
"""

from boxgame.evaluation.run_game import fibonacci_weights, run_game

__all__ = ["fibonacci_weights", "run_game"]
