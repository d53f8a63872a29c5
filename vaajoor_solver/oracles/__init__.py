"""
Feedback oracles for scoring guesses.

This module provides a clean interface to the sources of feedback:
- The Vaajoor web API via requests (with retries)
- An offline oracle that knows the secret word

Usage:
    from vaajoor_solver.oracles import get_oracle

    oracle = get_oracle("vaajoor")
    response = oracle.evaluate("crane", "1")

    print(response.codes)
"""

from .base_oracle import OracleResponse, FeedbackOracle
from .vaajoor_oracle import VaajoorOracle
from .local_oracle import LocalOracle, score_guess
from .oracle_factory import get_oracle, ORACLE_PRESETS

__all__ = [
    # Main functions
    "get_oracle",
    "score_guess",

    # Oracle classes
    "VaajoorOracle",
    "LocalOracle",

    # Base types
    "OracleResponse",
    "FeedbackOracle",

    # Constants
    "ORACLE_PRESETS",
]
