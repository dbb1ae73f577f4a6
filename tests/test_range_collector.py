from __future__ import annotations

from datetime import date, timedelta

import pytest
import requests

from cbr_rates.collector import RangeCollector, collect_rates
from cbr_rates.errors import DecodeError, NetworkError
from cbr_rates.ingestion.cbr_client import CBRDailyClient
from tests.helpers import EUR, USD, build_feed


class _DictSource:
    """Feed source keyed by requested date; ``None`` values raise a NetworkError."""

    def __init__(self, feeds: dict[date, bytes | None]) -> None:
        self.feeds = feeds
        self.requested: list[date] = []

    def fetch(self, day: date) -> bytes:
        self.requested.append(day)
        content = self.feeds[day]
        if content is None:
            raise NetworkError(f"boom on {day}", request_date=day)
        return content


def test_single_day_window_makes_one_call(fake_session, ok) -> None:
    session = fake_session([ok(build_feed("05.03.2024", [USD, EUR]))])
    client = CBRDailyClient(session=session)

    observations = collect_rates(client, date(2024, 3, 5), 1)

    assert len(session.calls) == 1
    assert [obs.code for obs in observations] == ["USD", "EUR"]


def test_collect_walks_backward_including_weekends() -> None:
    anchor = date(2024, 3, 11)  # Monday
    friday_feed = build_feed("09.03.2024", [USD])
    monday_feed = build_feed("11.03.2024", [EUR])
    source = _DictSource(
        {
            anchor: monday_feed,
            anchor - timedelta(days=1): friday_feed,
            anchor - timedelta(days=2): friday_feed,
        }
    )

    observations = RangeCollector(source).collect(anchor, 3)

    assert source.requested == [date(2024, 3, 11), date(2024, 3, 10), date(2024, 3, 9)]
    assert [(obs.code, obs.rate_date) for obs in observations] == [
        ("EUR", date(2024, 3, 11)),
        ("USD", date(2024, 3, 9)),
        ("USD", date(2024, 3, 9)),
    ]


def test_collect_length_is_sum_of_daily_entries() -> None:
    anchor = date(2024, 3, 7)
    source = _DictSource(
        {anchor - timedelta(days=i): build_feed("07.03.2024", [USD, EUR]) for i in range(4)}
    )

    assert len(RangeCollector(source).collect(anchor, 4)) == 8


def test_collect_fails_fast_on_third_day(fake_session, ok) -> None:
    feed = build_feed("05.03.2024", [USD, EUR])
    session = fake_session(
        [ok(feed), ok(feed), requests.ConnectionError("reset"), ok(feed), ok(feed)]
    )
    client = CBRDailyClient(session=session)

    with pytest.raises(NetworkError):
        RangeCollector(client).collect(date(2024, 3, 5), 5)

    assert len(session.calls) == 3


def test_collect_propagates_decode_errors() -> None:
    anchor = date(2024, 3, 5)
    source = _DictSource({anchor: b"<html>maintenance</html>"})

    with pytest.raises(DecodeError):
        RangeCollector(source).collect(anchor, 2)


def test_collect_strict_mode_is_forwarded() -> None:
    anchor = date(2024, 3, 5)
    bad = ("R01235", "840", "USD", "1", "US Dollar", "91,6779", "oops")
    source = _DictSource({anchor: build_feed("05.03.2024", [bad])})

    assert RangeCollector(source).collect(anchor, 1)[0].unit_rate == 0.0
    with pytest.raises(DecodeError):
        RangeCollector(source, strict=True).collect(anchor, 1)


def test_collect_rejects_non_positive_window() -> None:
    with pytest.raises(ValueError):
        RangeCollector(_DictSource({})).collect(date(2024, 3, 5), 0)


def test_collect_partial_keeps_days_before_failure() -> None:
    anchor = date(2024, 3, 5)
    feeds: dict[date, bytes | None] = {
        anchor: build_feed("05.03.2024", [USD]),
        anchor - timedelta(days=1): build_feed("04.03.2024", [EUR]),
        anchor - timedelta(days=2): None,
    }
    source = _DictSource(feeds)

    result = RangeCollector(source).collect_partial(anchor, 5)

    assert result.complete is False
    assert isinstance(result.error, NetworkError)
    assert result.failed_on == anchor - timedelta(days=2)
    assert [obs.code for obs in result.observations] == ["USD", "EUR"]
    assert len(source.requested) == 3


def test_collect_partial_complete_run() -> None:
    anchor = date(2024, 3, 5)
    source = _DictSource({anchor: build_feed("05.03.2024", [USD, EUR])})

    result = RangeCollector(source).collect_partial(anchor, 1)

    assert result.complete is True
    assert result.failed_on is None
    assert len(result.observations) == 2


def test_custom_decoder_is_used() -> None:
    anchor = date(2024, 3, 5)
    source = _DictSource({anchor: b"ignored"})

    observations = RangeCollector(source, decoder=lambda content: []).collect(anchor, 1)

    assert observations == []
