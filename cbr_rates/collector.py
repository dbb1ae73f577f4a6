"""Walk a window of calendar days backward and gather every observation."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Optional

from cbr_rates.errors import CbrRatesError
from cbr_rates.ingestion.cbr_xml import decode_daily_rates
from cbr_rates.ingestion.models import CurrencyObservation
from cbr_rates.ingestion.strategy import DailyFeedSource
from cbr_rates.utils.date_range import days_back, format_request_date, window_for
from cbr_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)

Decoder = Callable[[bytes], list[CurrencyObservation]]


@dataclass(slots=True)
class CollectionResult:
    """Observations gathered before the first failure, plus that failure."""

    observations: list[CurrencyObservation] = field(default_factory=list)
    error: CbrRatesError | None = None
    failed_on: date | None = None

    @property
    def complete(self) -> bool:
        return self.error is None


class RangeCollector:
    """Fetch and decode one feed per calendar day, newest first."""

    def __init__(
        self,
        source: DailyFeedSource,
        *,
        decoder: Optional[Decoder] = None,
        strict: bool = False,
    ) -> None:
        self.source = source
        self.decoder = decoder or (lambda content: decode_daily_rates(content, strict=strict))

    def _collect_day(self, day: date) -> list[CurrencyObservation]:
        LOGGER.info("Fetching rates for %s", format_request_date(day))
        observations = self.decoder(self.source.fetch(day))
        if observations and observations[0].rate_date != day:
            LOGGER.debug("Feed for %s resolved to %s", day, observations[0].rate_date)
        return observations

    def collect(self, anchor: date, days: int) -> list[CurrencyObservation]:
        """Return observations for ``anchor`` and the ``days - 1`` preceding dates.

        The first client or decoder failure propagates and nothing gathered so far
        is returned.
        """

        window = window_for(anchor, days)
        LOGGER.info("Collecting %s days from %s back to %s", days, window.end, window.start)
        collected: list[CurrencyObservation] = []
        for day in days_back(anchor, days):
            collected.extend(self._collect_day(day))
        LOGGER.info("Collected %s observations", len(collected))
        return collected

    def collect_partial(self, anchor: date, days: int) -> CollectionResult:
        """Like :meth:`collect`, but keep what was gathered before a failure."""

        result = CollectionResult()
        for day in days_back(anchor, days):
            try:
                result.observations.extend(self._collect_day(day))
            except CbrRatesError as exc:
                LOGGER.warning("Stopping at %s: %s", format_request_date(day), exc)
                result.error = exc
                result.failed_on = day
                break
        LOGGER.info(
            "Collected %s observations (complete=%s)", len(result.observations), result.complete
        )
        return result


def collect_rates(
    source: DailyFeedSource, anchor: date, days: int, *, strict: bool = False
) -> list[CurrencyObservation]:
    """Convenience wrapper around :meth:`RangeCollector.collect`."""

    return RangeCollector(source, strict=strict).collect(anchor, days)


__all__ = ["CollectionResult", "RangeCollector", "collect_rates"]
