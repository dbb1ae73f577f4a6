"""Public interface for the cbr_rates package."""

from __future__ import annotations

from datetime import date
from importlib import metadata as importlib_metadata
from typing import Any

from cbr_rates.analysis import RateSummary, analyze_rates, average_by_currency
from cbr_rates.collector import CollectionResult, RangeCollector, collect_rates
from cbr_rates.config import CBR_DAILY_URL, DEFAULT_WINDOW_DAYS, FetchSettings
from cbr_rates.errors import (
    CbrRatesError,
    DecodeError,
    EmptyResultError,
    InputFormatError,
    NetworkError,
    RequestConstructionError,
)
from cbr_rates.ingestion.cbr_client import CBRDailyClient
from cbr_rates.ingestion.cbr_xml import decode_daily_rates
from cbr_rates.ingestion.models import CurrencyObservation, RawQuote
from cbr_rates.utils.date_range import parse_request_date

__all__ = [
    "__version__",
    "CbrRates",
    "CBRDailyClient",
    "CBR_DAILY_URL",
    "DEFAULT_WINDOW_DAYS",
    "CollectionResult",
    "CurrencyObservation",
    "FetchSettings",
    "RangeCollector",
    "RateSummary",
    "RawQuote",
    "analyze_rates",
    "average_by_currency",
    "collect_rates",
    "decode_daily_rates",
    "CbrRatesError",
    "DecodeError",
    "EmptyResultError",
    "InputFormatError",
    "NetworkError",
    "RequestConstructionError",
]

try:
    __version__ = importlib_metadata.version("cbr-rates")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"


class CbrRates:
    """Package facade bundling settings, fetching and analysis."""

    __slots__ = ("settings", "_session")

    # Provide direct access to the package version as a class attribute.
    __version__ = __version__

    def __init__(self, settings: FetchSettings | None = None, *, session: Any = None, **overrides: Any) -> None:
        """Configure the facade.

        Keyword overrides (``window_days``, ``endpoint``, ``timeout``,
        ``user_agent``, ``strict_numbers``) are applied on top of ``settings``
        or the defaults. ``session`` is an optional ``requests.Session`` reused
        for every request.
        """

        base = settings or FetchSettings()
        self.settings = base.with_overrides(**overrides)
        self._session = session

    def collect(self, anchor: date | str | None = None) -> list[CurrencyObservation]:
        """Fetch the configured window ending at ``anchor`` (today by default)."""

        anchor_date = parse_request_date(anchor if anchor is not None else "")
        with CBRDailyClient(self.settings, session=self._session) as client:
            return collect_rates(
                client,
                anchor_date,
                self.settings.window_days,
                strict=self.settings.strict_numbers,
            )

    def summary(self, anchor: date | str | None = None) -> RateSummary:
        """Collect the window and return its max/min/average summary.

        Raises :class:`EmptyResultError` when nothing was collected.
        """

        observations = self.collect(anchor)
        if not observations:
            raise EmptyResultError("No currency rates found for the requested window")
        return analyze_rates(observations)
