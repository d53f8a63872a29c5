"""
Offline benchmarking of the solver against known secret words.
"""

import random
from collections import Counter
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

import orjson

from .errors import SolverError
from .game_loop import solve
from .oracles.local_oracle import LocalOracle
from .utils import normalize_word


def play_secret(
    words: List[str],
    secret: str,
    rng: Optional[random.Random] = None,
    session_key: str = "benchmark",
) -> Dict[str, Any]:
    """Solve one secret with a LocalOracle and report how it went."""
    oracle = LocalOracle(secret)
    trace: List[Dict[str, Any]] = []
    try:
        answer = solve(words, session_key, oracle, rng=rng, trace=trace)
        error = None
    except SolverError as e:
        answer = None
        error = f"{type(e).__name__}: {e}"

    return {
        "secret": secret,
        "answer": answer,
        "solved": answer is not None and normalize_word(answer) == normalize_word(secret),
        "guesses": oracle.calls,
        "error": error,
        "trace": [t["guess"] for t in trace],
    }


def run_benchmark(
    words: List[str],
    secrets: Iterable[str],
    rng: Optional[random.Random] = None,
) -> List[Dict[str, Any]]:
    """
    Run the solver once per secret word.

    Args:
        words: Dictionary handed to the solver
        secrets: Secret words to play against
        rng: Random generator for guess selection (shared across games)

    Returns:
        List of per-secret result dicts
    """
    return [play_secret(words, s, rng=rng) for s in secrets]


def summarize(results: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Aggregate per-secret results into totals and a guess distribution."""
    n = len(results)
    solved = [r for r in results if r["solved"]]
    dist = Counter(r["guesses"] for r in solved)
    failures = [r["secret"] for r in results if not r["solved"]]

    return {
        "total": n,
        "solved": len(solved),
        "solve_rate": (len(solved) / n) if n else 0.0,
        "average_guesses": (sum(r["guesses"] for r in solved) / len(solved)) if solved else 0.0,
        "distribution": dict(sorted(dist.items())),
        "failures": len(failures),
        "failed_secrets": failures[:20],
    }


def write_results(path: Union[str, Path], results: List[Dict[str, Any]]):
    """Write results as JSONL."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("wb") as f:
        for r in results:
            f.write(orjson.dumps(r) + b"\n")


def read_results(path: Union[str, Path]) -> Iterable[Dict[str, Any]]:
    with open(path, "rb") as f:
        for line in f:
            if line.strip():
                yield orjson.loads(line)
