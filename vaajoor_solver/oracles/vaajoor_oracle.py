from __future__ import annotations
from typing import Any, Dict, List

import requests
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from ..core.env import DEFAULT_CHECK_URL
from ..errors import MalformedFeedback, OracleError
from .base_oracle import OracleResponse


class VaajoorOracle:
    """Client for the Vaajoor `check` endpoint."""

    def __init__(
        self,
        url: str = DEFAULT_CHECK_URL,
        timeout: float = 10.0,
        max_attempts: int = 3,
        session: requests.Session | None = None,
        wait=None,
    ):
        """
        Initialize the HTTP oracle.

        Args:
            url: Check endpoint URL
            timeout: Per-request timeout in seconds
            max_attempts: Attempts per evaluation before giving up
            session: requests session to reuse (a new one by default)
            wait: tenacity wait strategy between attempts
        """
        self.url = url
        self.timeout = timeout
        self.max_attempts = max_attempts
        self.session = session or requests.Session()
        self.wait = wait or wait_exponential(multiplier=1, min=1, max=8)

    def evaluate(self, word: str, session_key: str) -> OracleResponse:
        """
        Ask the server to score `word` for puzzle `session_key`.

        Transport failures are retried with exponential backoff; once the
        attempts run out the last failure is raised as OracleError.
        """
        try:
            for attempt in Retrying(
                stop=stop_after_attempt(self.max_attempts),
                wait=self.wait,
                retry=retry_if_exception_type(requests.RequestException),
                reraise=True,
            ):
                with attempt:
                    data = self._fetch(word, session_key)
        except requests.RequestException as e:
            raise OracleError(f"Request to {self.url} failed for {word!r}: {e}") from e

        return OracleResponse(
            codes=self._parse_response(data),
            dictionary_error=bool(data.get("dictionaryError", False)),
            raw=data,
        )

    def _fetch(self, word: str, session_key: str) -> Dict[str, Any]:
        response = self.session.get(
            self.url,
            params={"word": word, "g": session_key},
            timeout=self.timeout,
        )
        response.raise_for_status()
        try:
            data = response.json()
        except ValueError as e:
            raise OracleError(f"Invalid JSON from {self.url}: {response.text[:200]}") from e
        if not isinstance(data, dict):
            raise OracleError(f"Expected a JSON object from {self.url}, got {type(data).__name__}")
        return data

    def _parse_response(self, data: Dict[str, Any]) -> List[str]:
        """Extract and validate the 5 per-letter codes."""
        codes = data.get("match")
        if not isinstance(codes, list) or len(codes) != 5:
            raise MalformedFeedback(f"Expected 5 codes in 'match', got {codes!r}")
        if not all(isinstance(c, str) and len(c) == 1 for c in codes):
            raise MalformedFeedback(f"Codes must be single characters, got {codes!r}")
        return codes
