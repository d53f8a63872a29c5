from __future__ import annotations
from typing import Protocol, Dict, Any, List
from dataclasses import dataclass, field

@dataclass
class OracleResponse:
    """Standardized result from any feedback oracle."""
    codes: List[str]                  # 5 per-letter codes: 'g', 'y' or 'r'
    dictionary_error: bool = False    # oracle does not know the guessed word
    raw: Dict[str, Any] = field(default_factory=dict)  # decoded payload for debugging


class FeedbackOracle(Protocol):
    """Protocol defining the interface all feedback oracles must implement."""

    def evaluate(self, word: str, session_key: str) -> OracleResponse:
        """
        Score a guessed word against the hidden word of a session.

        Args:
            word: Guessed word
            session_key: Opaque session identifier (the puzzle day)

        Returns:
            OracleResponse with the per-letter codes

        Raises:
            MalformedFeedback: If the response shape is invalid
            OracleError: If the call itself fails
        """
        ...
