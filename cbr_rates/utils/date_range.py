"""Date helpers for building CBR request windows."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterator, Tuple

from cbr_rates.errors import InputFormatError

REQUEST_DATE_FORMAT = "%d/%m/%Y"
FEED_DATE_FORMAT = "%d.%m.%Y"


@dataclass(frozen=True)
class DateRange:
    """Container representing a closed date range."""

    start: date
    end: date

    def as_tuple(self) -> Tuple[date, date]:
        """Return the range as a tuple of ``(start, end)``."""
        return (self.start, self.end)


def parse_request_date(value: str | date) -> date:
    """Parse a user supplied ``DD/MM/YYYY`` date.

    An empty string resolves to today's date, mirroring the interactive prompt.
    """

    if isinstance(value, date):
        return value
    cleaned = value.strip()
    if not cleaned:
        return date.today()
    try:
        return datetime.strptime(cleaned, REQUEST_DATE_FORMAT).date()
    except ValueError as exc:
        raise InputFormatError(
            f"Invalid date {value!r}; expected format DD/MM/YYYY"
        ) from exc


def format_request_date(day: date) -> str:
    """Format ``day`` as the ``date_req`` query value."""
    return day.strftime(REQUEST_DATE_FORMAT)


def parse_feed_date(value: str) -> date:
    """Parse the ``DD.MM.YYYY`` date reported inside a feed document."""
    return datetime.strptime(value.strip(), FEED_DATE_FORMAT).date()


def days_back(anchor: date, days: int) -> Iterator[date]:
    """Yield ``days`` calendar dates starting at ``anchor`` and stepping backward."""

    if days <= 0:
        raise ValueError("days must be positive")
    for offset in range(days):
        yield anchor - timedelta(days=offset)


def window_for(anchor: date, days: int) -> DateRange:
    """Return the closed range covered by :func:`days_back`."""

    if days <= 0:
        raise ValueError("days must be positive")
    return DateRange(start=anchor - timedelta(days=days - 1), end=anchor)


__all__ = [
    "DateRange",
    "REQUEST_DATE_FORMAT",
    "FEED_DATE_FORMAT",
    "parse_request_date",
    "format_request_date",
    "parse_feed_date",
    "days_back",
    "window_for",
]
