"""
CLI commands for solving and benchmarking.
"""

from .solve import main as solve_day
from .benchmark import main as run_benchmark
from .explore_words import main as explore_dictionary

__all__ = [
    "solve_day",
    "run_benchmark",
    "explore_dictionary",
]
