"""
Core game loop: eliminate candidates with oracle feedback until solved.
"""

from __future__ import annotations
import random
from typing import Dict, List, Any, Optional

from .errors import ExhaustedCandidates
from .feedback import Classification, Guess, Letter
from .oracles.base_oracle import FeedbackOracle


def _keeps(word: str, letter: Letter, guess: Guess) -> bool:
    """Whether `word` is still consistent with one letter of the guess."""
    p, v = letter.position, letter.letter
    cls = letter.classification

    if cls is Classification.CORRECT:
        return len(word) > p and word[p] == v

    if cls is Classification.PRESENT:
        return (
            v in word
            and len(word) > p
            and word[p] != v
            and not guess.has_correct_at(p)
        )

    # ABSENT: a doubled letter whose other copy was green stays allowed
    if v in word:
        return guess.was_correct_for(v)
    return True


def filter_candidates(candidates: List[str], guess: Guess) -> List[str]:
    """
    Narrow the candidate set with one evaluated guess.

    Letters are applied in position order, each one filtering the survivors of
    the previous. Returns a new list; `candidates` is left untouched.
    """
    words = list(candidates)
    for letter in guess.letters:
        words = [w for w in words if _keeps(w, letter, guess)]
    return words


def solve(
    dictionary: List[str],
    session_key: str,
    oracle: FeedbackOracle,
    rng: Optional[random.Random] = None,
    trace: Optional[List[Dict[str, Any]]] = None,
) -> str:
    """
    Guess, evaluate and prune until the oracle reports a fully correct word.

    Args:
        dictionary: Initial candidate words
        session_key: Puzzle identifier passed through to the oracle
        oracle: Source of per-letter feedback
        rng: Random generator used to pick guesses (defaults to the
            process-wide `random` module)
        trace: If given, one record per turn is appended to it

    Returns:
        The solved word

    Raises:
        ExhaustedCandidates: If no candidate is left before a solved guess
        MalformedFeedback: If the oracle response is malformed
        OracleError: If the oracle call fails
    """
    chooser = rng or random
    candidates = list(dictionary)
    turn = 0

    while True:
        if not candidates:
            raise ExhaustedCandidates(
                f"No candidates left after {turn} guesses for session {session_key}"
            )

        turn += 1
        candidate = chooser.choice(candidates)
        response = oracle.evaluate(candidate, session_key)

        turn_record = {
            "turn": turn,
            "guess": candidate,
            "candidates_before": len(candidates),
        } if trace is not None else None

        # Oracle does not know this word, so it cannot be the answer
        if response.dictionary_error:
            candidates = [w for w in candidates if w != candidate]
            if turn_record:
                turn_record["codes"] = ""
                turn_record["result"] = "REJECTED"
                turn_record["candidates_after"] = len(candidates)
                trace.append(turn_record)
            continue

        guess = Guess.build(candidate, response.codes)
        if turn_record:
            turn_record["codes"] = guess.codes

        if guess.is_fully_solved():
            if turn_record:
                turn_record["result"] = "SOLVED"
                turn_record["candidates_after"] = 1
                trace.append(turn_record)
            return candidate

        # An unsolved guess is never the answer, even when a doubled letter lets it pass the filter
        candidates = [w for w in filter_candidates(candidates, guess) if w != candidate]
        if turn_record:
            turn_record["result"] = "FILTERED"
            turn_record["candidates_after"] = len(candidates)
            trace.append(turn_record)
