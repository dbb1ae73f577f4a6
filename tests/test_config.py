from __future__ import annotations

import pytest

from cbr_rates.config import CBR_DAILY_URL, DEFAULT_WINDOW_DAYS, FetchSettings


def test_defaults_match_cbr_daily_feed() -> None:
    settings = FetchSettings()

    assert settings.endpoint == CBR_DAILY_URL
    assert settings.window_days == DEFAULT_WINDOW_DAYS == 90
    assert settings.timeout is None
    assert settings.strict_numbers is False


def test_with_overrides_ignores_none() -> None:
    settings = FetchSettings().with_overrides(window_days=7, endpoint=None, timeout=2.5)

    assert settings.window_days == 7
    assert settings.endpoint == CBR_DAILY_URL
    assert settings.timeout == 2.5


@pytest.mark.parametrize(
    "kwargs",
    [{"window_days": 0}, {"endpoint": ""}, {"timeout": 0}],
)
def test_invalid_settings_are_rejected(kwargs) -> None:
    with pytest.raises(ValueError):
        FetchSettings(**kwargs)
