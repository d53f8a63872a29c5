"""
Utility functions for reading dictionaries and checking words.
"""

from collections import Counter
from pathlib import Path
from typing import Dict, List, Union


def load_words(filepath: Union[str, Path]) -> List[str]:
    """
    Load a word list from file.
    Surrounding whitespace is trimmed and blank lines are dropped.
    """
    with open(filepath, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip()]


def normalize_word(word: str) -> str:
    """Normalize a word to trimmed lowercase."""
    return word.strip().lower()


def word_stats(words: List[str], length: int = 5) -> Dict:
    """Summarize a dictionary: size, off-length entries, duplicates, letter frequency."""
    counts = Counter(words)
    letters = Counter(ch for w in set(words) for ch in w)
    return {
        "total": len(words),
        "unique": len(counts),
        "wrong_length": sorted({w for w in words if len(w) != length}),
        "duplicates": sorted(w for w, c in counts.items() if c > 1),
        "top_letters": letters.most_common(10),
    }
