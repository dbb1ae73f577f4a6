"""Report the highest, lowest and average CBR unit rate over a window of days."""

from __future__ import annotations

import argparse
import sys
from datetime import date
from typing import Optional, Sequence, TextIO

import requests

from cbr_rates.analysis import RateSummary, analyze_rates, average_by_currency
from cbr_rates.collector import RangeCollector
from cbr_rates.config import FetchSettings
from cbr_rates.errors import CbrRatesError, EmptyResultError
from cbr_rates.ingestion.cbr_client import CBRDailyClient
from cbr_rates.ingestion.models import CurrencyObservation
from cbr_rates.utils.date_range import format_request_date, parse_request_date
from cbr_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)

PROMPT = "Enter a date as DD/MM/YYYY (or press Enter for today): "

__all__ = ["collect_window", "format_summary", "parse_args", "resolve_anchor", "main"]


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--date",
        dest="anchor",
        help="Most recent date of the window (DD/MM/YYYY); prompts when omitted",
    )
    parser.add_argument("--days", type=int, help="Number of calendar days to fetch (default 90)")
    parser.add_argument("--endpoint", help="Override the daily-rates URL")
    parser.add_argument("--timeout", type=float, help="Per-request timeout in seconds")
    parser.add_argument(
        "--strict",
        dest="strict_numbers",
        action="store_true",
        default=None,
        help="Fail on malformed numeric fields instead of treating them as zero",
    )
    parser.add_argument(
        "--allow-partial",
        action="store_true",
        help="Report on the days gathered before a failure instead of aborting",
    )
    parser.add_argument(
        "--by-currency",
        action="store_true",
        help="Also print the average unit rate of each currency",
    )
    return parser.parse_args(argv)


def resolve_anchor(value: str | None) -> date:
    """Return the anchor date from ``--date`` or an interactive prompt."""

    if value is None:
        try:
            value = input(PROMPT)
        except EOFError:
            value = ""
    return parse_request_date(value)


def collect_window(
    anchor: date,
    settings: FetchSettings,
    *,
    allow_partial: bool = False,
    session: requests.Session | None = None,
) -> list[CurrencyObservation]:
    """Gather every observation for the configured window ending at ``anchor``."""

    with CBRDailyClient(settings, session=session) as client:
        collector = RangeCollector(client, strict=settings.strict_numbers)
        if allow_partial:
            result = collector.collect_partial(anchor, settings.window_days)
            if result.error is not None and not result.observations:
                raise result.error
            observations = result.observations
        else:
            observations = collector.collect(anchor, settings.window_days)
    if not observations:
        raise EmptyResultError(
            f"No currency rates found for {settings.window_days} days ending {format_request_date(anchor)}"
        )
    return observations


def _describe(observation: CurrencyObservation) -> str:
    return (
        f"{observation.unit_rate:f} RUB per 1 {observation.name} ({observation.code}) "
        f"on {format_request_date(observation.rate_date)} with nominal {observation.nominal}"
    )


def format_summary(summary: RateSummary) -> list[str]:
    """Render the three result lines."""

    if summary.maximum is None or summary.minimum is None:
        raise EmptyResultError("Cannot format a summary of zero observations")
    return [
        f"Maximum rate: {_describe(summary.maximum)}",
        f"Minimum rate: {_describe(summary.minimum)}",
        f"Average rate across all currencies: {summary.average:f} RUB",
    ]


def main(argv: Optional[Sequence[str]] = None, *, stdout: TextIO | None = None) -> None:
    args = parse_args(argv)
    out = stdout or sys.stdout
    try:
        settings = FetchSettings().with_overrides(
            window_days=args.days,
            endpoint=args.endpoint,
            timeout=args.timeout,
            strict_numbers=args.strict_numbers,
        )
    except ValueError as exc:
        LOGGER.error("Invalid settings: %s", exc)
        raise SystemExit(f"Invalid settings: {exc}") from exc
    try:
        anchor = resolve_anchor(args.anchor)
        observations = collect_window(anchor, settings, allow_partial=args.allow_partial)
        lines = format_summary(analyze_rates(observations))
    except CbrRatesError as exc:
        LOGGER.error("%s: %s", type(exc).__name__, exc)
        raise SystemExit(f"Error: {exc}") from exc

    print("\nResults:", file=out)
    for line in lines:
        print(line, file=out)
    if args.by_currency:
        print("\nAverage rate per currency:", file=out)
        for code, average in average_by_currency(observations).items():
            print(f"- {code}: {average:f} RUB", file=out)


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    main()
