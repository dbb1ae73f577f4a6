"""Feed documents and fake HTTP sessions shared by the test-suite."""

from __future__ import annotations

from types import SimpleNamespace

Entry = tuple[str, str, str, str, str, str, str]

USD: Entry = ("R01235", "840", "USD", "1", "US Dollar", "91,6779", "91,6779")
EUR: Entry = ("R01239", "978", "EUR", "1", "Euro", "99,1925", "99,1925")
JPY: Entry = ("R01820", "392", "JPY", "100", "Japanese Yen", "61,0512", "0,610512")


def build_feed(feed_date: str, entries: list[Entry], *, encoding: str = "windows-1251") -> bytes:
    valutes = "".join(
        f'<Valute ID="{id_}"><NumCode>{num}</NumCode><CharCode>{char}</CharCode>'
        f"<Nominal>{nominal}</Nominal><Name>{name}</Name><Value>{value}</Value>"
        f"<VunitRate>{unit}</VunitRate></Valute>"
        for id_, num, char, nominal, name, value, unit in entries
    )
    document = (
        f'<?xml version="1.0" encoding="{encoding}"?>'
        f'<ValCurs Date="{feed_date}" name="Foreign Currency Market">{valutes}</ValCurs>'
    )
    return document.encode(encoding)


class FakeSession:
    """Stand-in for ``requests.Session`` returning queued responses or raising."""

    def __init__(self, responses: list[object]) -> None:
        self.responses = list(responses)
        self.headers: dict[str, str] = {}
        self.calls: list[dict[str, object]] = []
        self.closed = False

    def get(self, url: str, params=None, headers=None, timeout=None):
        self.calls.append({"url": url, "params": params, "headers": headers, "timeout": timeout})
        outcome = self.responses.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    def close(self) -> None:
        self.closed = True


def ok_response(content: bytes) -> SimpleNamespace:
    return SimpleNamespace(status_code=200, content=content)
