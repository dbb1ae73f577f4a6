"""Abstractions for pluggable daily feed sources."""

from __future__ import annotations

from datetime import date
from typing import Protocol


class DailyFeedSource(Protocol):
    """Contract for fetching one day's raw feed document.

    Concrete implementations perform a single retrieval for ``day`` and return
    the undecoded response body, raising a ``CbrRatesError`` subclass on failure.
    """

    def fetch(self, day: date) -> bytes:
        ...  # pragma: no cover - protocol definition


__all__ = ["DailyFeedSource"]
