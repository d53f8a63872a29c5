from __future__ import annotations
from typing import Dict, List

import pytest

from vaajoor_solver.oracles import OracleResponse


class FirstChoice:
    """Deterministic stand-in for random.Random: always picks the first candidate."""

    def choice(self, seq):
        return seq[0]


class ScriptedOracle:
    """Returns canned codes per word and records every call."""

    def __init__(self, answers: Dict[str, str], default: str | None = None):
        self.answers = answers
        self.default = default
        self.calls: List[tuple] = []

    def evaluate(self, word: str, session_key: str) -> OracleResponse:
        self.calls.append((word, session_key))
        codes = self.answers.get(word, self.default)
        return OracleResponse(codes=list(codes))


class FakeResponse:
    def __init__(self, payload=None, status_code: int = 200, text: str = ""):
        self.payload = payload
        self.status_code = status_code
        self.text = text

    def raise_for_status(self):
        import requests
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        if self.payload is None:
            raise ValueError("No JSON object could be decoded")
        return self.payload


class FakeSession:
    """Replays a queue of responses (or exceptions) for requests.Session.get."""

    def __init__(self, *outcomes):
        self.outcomes = list(outcomes)
        self.requests: List[dict] = []

    def get(self, url, params=None, timeout=None):
        self.requests.append({"url": url, "params": params, "timeout": timeout})
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


@pytest.fixture
def first_choice():
    return FirstChoice()


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    for key in ("VAAJOOR_CHECK_URL", "VAAJOOR_WORDS_FILE", "VAAJOOR_TIMEOUT", "VAAJOOR_MAX_ATTEMPTS"):
        # setenv first so teardown also removes values a .env file loads during the test
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.setenv("DOTENV_PATH", str(tmp_path / "missing.env"))
    return monkeypatch


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("crate\n  crane \n\ncrash\n", encoding="utf-8")
    return path


@pytest.fixture
def scripted_oracle():
    return ScriptedOracle


@pytest.fixture
def fake_session():
    return FakeSession


@pytest.fixture
def fake_response():
    return FakeResponse
