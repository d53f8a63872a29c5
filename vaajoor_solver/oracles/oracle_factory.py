from __future__ import annotations

from ..core.env import Settings
from .vaajoor_oracle import VaajoorOracle
from .local_oracle import LocalOracle


# Oracle presets for convenience
ORACLE_PRESETS = {
    "vaajoor": "vaajoor",
    "online": "vaajoor",
    "http": "vaajoor",
}


def get_oracle(name: str = "vaajoor", settings: Settings | None = None):
    """
    Factory function to get the feedback oracle registered under a name.

    Args:
        name: "vaajoor" (HTTP, the default) or "local/<secret>" for an
            offline oracle that knows the secret word
        settings: Endpoint and retry configuration for the HTTP oracle

    Returns:
        An object implementing FeedbackOracle

    Raises:
        ValueError: If the oracle type cannot be determined
    """
    settings = settings or Settings()
    resolved = ORACLE_PRESETS.get(name, name)

    if resolved == "vaajoor":
        return VaajoorOracle(
            url=settings.check_url,
            timeout=settings.timeout,
            max_attempts=settings.max_attempts,
        )

    elif resolved.startswith("local/"):
        secret = resolved.replace("local/", "", 1)
        if not secret:
            raise ValueError("local oracle needs a secret word: local/<word>")
        return LocalOracle(secret)

    else:
        raise ValueError(
            f"Unknown oracle: {name}\n"
            f"Supported: {', '.join(sorted(ORACLE_PRESETS))} or local/<secret>"
        )
