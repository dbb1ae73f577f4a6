from __future__ import annotations

from typing import Callable

import pytest

from tests.helpers import EUR, JPY, USD, Entry, FakeSession, build_feed, ok_response


@pytest.fixture
def make_feed() -> Callable[..., bytes]:
    return build_feed


@pytest.fixture
def default_entries() -> list[Entry]:
    return [USD, EUR, JPY]


@pytest.fixture
def fake_session() -> type[FakeSession]:
    return FakeSession


@pytest.fixture
def ok() -> Callable[[bytes], object]:
    return ok_response
