"""Decoder for the CBR ``XML_daily`` document.

The feed is served as ``windows-1251`` with an XML declaration, e.g.::

    <?xml version="1.0" encoding="windows-1251"?>
    <ValCurs Date="02.03.2024" name="Foreign Currency Market">
        <Valute ID="R01235">
            <NumCode>840</NumCode>
            <CharCode>USD</CharCode>
            <Nominal>1</Nominal>
            <Name>US Dollar</Name>
            <Value>91,6779</Value>
            <VunitRate>91,6779</VunitRate>
        </Valute>
    </ValCurs>

Raw bytes are handed to lxml untouched so the declared encoding is
honoured; markup that is not well-formed is rejected. Numeric fields use a
comma as the decimal separator.
"""

from __future__ import annotations

import math
from datetime import date

from lxml import etree

from cbr_rates.errors import DecodeError
from cbr_rates.ingestion.models import CurrencyObservation, NumericField, RawQuote
from cbr_rates.utils.date_range import parse_feed_date
from cbr_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)


def parse_numeric_field(raw: str) -> NumericField:
    """Convert a comma-decimal string such as ``"93,4409"``."""

    cleaned = raw.strip().replace(",", ".")
    try:
        value = float(cleaned)
    except ValueError:
        return NumericField(raw=raw, error=f"not a decimal number: {raw!r}")
    if not math.isfinite(value):
        return NumericField(raw=raw, error=f"not a finite number: {raw!r}")
    return NumericField(raw=raw, value=value)


def parse_integer_field(raw: str) -> NumericField:
    """Convert a lot-size string such as ``"100"``."""

    try:
        value = int(raw.strip())
    except ValueError:
        return NumericField(raw=raw, error=f"not an integer: {raw!r}")
    return NumericField(raw=raw, value=float(value))


def _child_text(element: etree._Element, name: str) -> str:
    return (element.findtext(name) or "").strip()


def _load_root(content: bytes | str) -> etree._Element:
    if isinstance(content, str):
        # The declaration no longer describes already-decoded text.
        parser = etree.XMLParser(encoding="utf-8", resolve_entities=False, no_network=True)
        content = content.encode("utf-8")
    else:
        parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        root = etree.fromstring(content, parser=parser)
    except etree.XMLSyntaxError as exc:
        raise DecodeError(f"Feed document is not well-formed XML: {exc}") from exc
    if root is None or root.tag != "ValCurs":
        raise DecodeError("Feed document has no ValCurs root element")
    return root


def _feed_date(root: etree._Element) -> date:
    raw_date = root.get("Date")
    if not raw_date:
        raise DecodeError("Feed document is missing the Date attribute")
    try:
        return parse_feed_date(raw_date)
    except ValueError as exc:
        raise DecodeError(f"Feed Date attribute {raw_date!r} is not DD.MM.YYYY") from exc


def _quotes_from_root(root: etree._Element) -> list[RawQuote]:
    return [
        RawQuote(
            id=valute.get("ID", ""),
            num_code=_child_text(valute, "NumCode"),
            char_code=_child_text(valute, "CharCode"),
            nominal=_child_text(valute, "Nominal"),
            name=_child_text(valute, "Name"),
            value=_child_text(valute, "Value"),
            unit_rate=_child_text(valute, "VunitRate"),
        )
        for valute in root.findall("Valute")
    ]


def parse_raw_quotes(content: bytes | str) -> list[RawQuote]:
    """Return every ``Valute`` entry as untouched strings, in feed order."""

    return _quotes_from_root(_load_root(content))


def _resolve(field: NumericField, label: str, quote: RawQuote, *, strict: bool) -> float:
    if field.ok:
        return field.or_zero()
    if strict:
        raise DecodeError(f"{quote.char_code or quote.id}: invalid {label}: {field.error}")
    LOGGER.debug("Coercing %s of %s to zero (%s)", label, quote.char_code or quote.id, field.error)
    return 0.0


def to_observation(quote: RawQuote, rate_date: date, *, strict: bool = False) -> CurrencyObservation:
    """Convert one wire-level quote into a domain observation."""

    nominal = _resolve(parse_integer_field(quote.nominal), "Nominal", quote, strict=strict)
    value = _resolve(parse_numeric_field(quote.value), "Value", quote, strict=strict)
    unit_rate = _resolve(parse_numeric_field(quote.unit_rate), "VunitRate", quote, strict=strict)
    return CurrencyObservation(
        rate_date=rate_date,
        code=quote.char_code,
        name=quote.name,
        nominal=int(nominal),
        value=value,
        unit_rate=unit_rate,
    )


def decode_daily_rates(content: bytes | str, *, strict: bool = False) -> list[CurrencyObservation]:
    """Decode one day's feed into observations dated with the feed's own ``Date``.

    With ``strict`` disabled an unparsable ``Nominal``/``Value``/``VunitRate``
    is coerced to zero; with it enabled the first such field raises
    :class:`~cbr_rates.errors.DecodeError`.
    """

    root = _load_root(content)
    rate_date = _feed_date(root)
    return [
        to_observation(quote, rate_date, strict=strict) for quote in _quotes_from_root(root)
    ]


__all__ = [
    "decode_daily_rates",
    "parse_raw_quotes",
    "parse_numeric_field",
    "parse_integer_field",
    "to_observation",
]
