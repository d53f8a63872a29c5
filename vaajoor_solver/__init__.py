"""
Vaajoor Solver - Core modules.
"""

from .errors import SolverError, MalformedFeedback, OracleError, ExhaustedCandidates
from .feedback import Classification, Letter, Guess
from .game_loop import filter_candidates, solve
from .utils import load_words

__version__ = "0.1.0"

__all__ = [
    "Classification",
    "Letter",
    "Guess",
    "filter_candidates",
    "solve",
    "load_words",
    "SolverError",
    "MalformedFeedback",
    "OracleError",
    "ExhaustedCandidates",
]
