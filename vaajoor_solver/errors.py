"""
Error types raised while solving a puzzle.
"""


class SolverError(Exception):
    """Base class for every error that aborts a solve attempt."""


class MalformedFeedback(SolverError, ValueError):
    """Oracle response does not have 5 codes aligned to 5 letters, or holds an unknown code."""


class OracleError(SolverError, RuntimeError):
    """Calling the feedback oracle failed (transport or decoding)."""


class ExhaustedCandidates(SolverError, RuntimeError):
    """Candidate set became empty before a fully correct guess."""
