from __future__ import annotations
from collections import Counter
from typing import List

from ..utils import normalize_word
from .base_oracle import OracleResponse


def score_guess(guess: str, secret: str) -> List[str]:
    """
    Compute Wordle feedback codes for a guess against a secret.

    Greens are marked first and consume their letter; yellows are then handed
    out left to right while unmatched copies of the letter remain.
    """
    codes = ["r"] * len(guess)
    remaining = Counter()

    for i, (g, s) in enumerate(zip(guess, secret)):
        if g == s:
            codes[i] = "g"
        else:
            remaining[s] += 1

    for i, g in enumerate(guess):
        if codes[i] == "r" and remaining[g] > 0:
            codes[i] = "y"
            remaining[g] -= 1

    return codes


class LocalOracle:
    """
    Offline oracle that knows the secret word.
    Used for benchmarking and for playing without the network.
    """

    def __init__(self, secret: str):
        self.secret = normalize_word(secret)
        self.calls = 0

    def evaluate(self, word: str, session_key: str) -> OracleResponse:
        self.calls += 1
        word = normalize_word(word)
        if len(word) != len(self.secret):
            return OracleResponse(codes=["r"] * len(self.secret), dictionary_error=True,
                                  raw={"word": word, "session": session_key})
        codes = score_guess(word, self.secret)
        return OracleResponse(codes=codes, raw={"word": word, "session": session_key, "match": codes})
