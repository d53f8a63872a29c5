"""
Feedback model for one evaluated guess.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple, Union

from .errors import MalformedFeedback

WORD_LENGTH = 5


class Classification(Enum):
    """Per-letter verdict returned by the oracle, keyed by its wire code."""
    CORRECT = "g"
    PRESENT = "y"
    ABSENT = "r"

    @classmethod
    def from_code(cls, code: Union[str, "Classification"]) -> "Classification":
        if isinstance(code, cls):
            return code
        try:
            return cls(code)
        except ValueError:
            raise MalformedFeedback(f"Unknown feedback code: {code!r}") from None


@dataclass(frozen=True)
class Letter:
    position: int
    classification: Classification
    letter: str


@dataclass(frozen=True)
class Guess:
    """A guessed word together with its per-letter classifications."""
    word: str
    letters: Tuple[Letter, ...]

    @classmethod
    def build(cls, word: str, classifications: Iterable) -> "Guess":
        """
        Pair each character of `word` with its aligned classification.

        Args:
            word: The guessed word (5 characters)
            classifications: 5 codes ('g', 'y', 'r'), a 5-character code
                string, or Classification members

        Raises:
            MalformedFeedback: If either side is not 5 long or a code is unknown
        """
        codes = list(classifications)
        if len(word) != WORD_LENGTH:
            raise MalformedFeedback(f"Expected a {WORD_LENGTH}-letter word, got {word!r}")
        if len(codes) != WORD_LENGTH:
            raise MalformedFeedback(
                f"Expected {WORD_LENGTH} feedback codes for {word!r}, got {len(codes)}"
            )

        letters = tuple(
            Letter(position=i, classification=Classification.from_code(code), letter=ch)
            for i, (ch, code) in enumerate(zip(word, codes))
        )
        return cls(word=word, letters=letters)

    def is_fully_solved(self) -> bool:
        return all(c.classification is Classification.CORRECT for c in self.letters)

    def has_correct_at(self, position: int) -> bool:
        return any(
            c.classification is Classification.CORRECT and c.position == position
            for c in self.letters
        )

    def was_correct_for(self, value: str) -> bool:
        """True if some occurrence of `value` in this guess was pinned exactly."""
        return any(
            c.classification is Classification.CORRECT and c.letter == value
            for c in self.letters
        )

    @property
    def codes(self) -> str:
        return "".join(c.classification.value for c in self.letters)
