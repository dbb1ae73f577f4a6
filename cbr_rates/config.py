"""Runtime settings for fetching the CBR daily-rates feed."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any

CBR_DAILY_URL = "https://www.cbr.ru/scripts/XML_daily_eng.asp"
DEFAULT_WINDOW_DAYS = 90
# The CBR endpoint rejects some generic HTTP clients.
DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64)"


@dataclass(frozen=True, slots=True)
class FetchSettings:
    """Endpoint, window length and decoding policy for one run."""

    endpoint: str = CBR_DAILY_URL
    window_days: int = DEFAULT_WINDOW_DAYS
    user_agent: str = DEFAULT_USER_AGENT
    timeout: float | None = None
    strict_numbers: bool = False

    def __post_init__(self) -> None:
        if self.window_days <= 0:
            raise ValueError("window_days must be positive")
        if not self.endpoint:
            raise ValueError("endpoint must not be empty")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError("timeout must be positive when provided")

    def with_overrides(self, **overrides: Any) -> "FetchSettings":
        """Return a copy with every non-``None`` override applied."""

        applied = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **applied)


__all__ = ["CBR_DAILY_URL", "DEFAULT_WINDOW_DAYS", "DEFAULT_USER_AGENT", "FetchSettings"]
