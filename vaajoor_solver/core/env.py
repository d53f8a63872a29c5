# vaajoor_solver/core/env.py
from __future__ import annotations
import os
from dataclasses import dataclass
from dotenv import load_dotenv

KNOWN_KEYS = [
    "VAAJOOR_CHECK_URL",     # feedback oracle endpoint
    "VAAJOOR_WORDS_FILE",    # dictionary, one word per line
    "VAAJOOR_TIMEOUT",       # seconds per oracle request
    "VAAJOOR_MAX_ATTEMPTS",  # oracle retries before giving up
]

DEFAULT_CHECK_URL = "https://www.vaajoor.com/api/check"
DEFAULT_WORDS_FILE = "words.txt"


def load_env(dotenv_path: str | None = None) -> dict[str, str]:
    """
    Load .env once. Returns a dict of which known keys are present.
    """
    load_dotenv(dotenv_path or os.getenv("DOTENV_PATH", ".env"), override=False)
    found = {}
    for k in KNOWN_KEYS:
        v = os.getenv(k)
        if v:
            found[k] = v
    return found


@dataclass(frozen=True)
class Settings:
    check_url: str = DEFAULT_CHECK_URL
    words_file: str = DEFAULT_WORDS_FILE
    timeout: float = 10.0
    max_attempts: int = 3

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from the process environment (call load_env first)."""
        try:
            return cls(
                check_url=os.getenv("VAAJOOR_CHECK_URL", DEFAULT_CHECK_URL),
                words_file=os.getenv("VAAJOOR_WORDS_FILE", DEFAULT_WORDS_FILE),
                timeout=float(os.getenv("VAAJOOR_TIMEOUT", "10")),
                max_attempts=int(os.getenv("VAAJOOR_MAX_ATTEMPTS", "3")),
            )
        except ValueError as e:
            raise ValueError(f"Invalid VAAJOOR_* setting: {e}") from e
