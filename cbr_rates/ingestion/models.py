"""Data models shared across ingestion modules."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class RawQuote:
    """One ``Valute`` entry exactly as it appears in the daily XML feed."""

    id: str
    num_code: str
    char_code: str
    nominal: str
    name: str
    value: str
    unit_rate: str


@dataclass(frozen=True, slots=True)
class CurrencyObservation:
    """Representation of a single currency rate for the feed's reported date."""

    rate_date: date
    code: str
    name: str
    nominal: int
    value: float
    unit_rate: float


@dataclass(frozen=True, slots=True)
class NumericField:
    """Outcome of converting one locale-formatted numeric field."""

    raw: str
    value: float | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def or_zero(self) -> float:
        """Return the parsed number, or ``0.0`` when parsing failed."""
        return self.value if self.value is not None else 0.0


__all__ = ["RawQuote", "CurrencyObservation", "NumericField"]
