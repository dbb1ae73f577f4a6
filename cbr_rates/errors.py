"""Exception hierarchy raised by the cbr_rates pipeline."""

from __future__ import annotations

from datetime import date


class CbrRatesError(RuntimeError):
    """Base class for every failure surfaced by the package."""


class InputFormatError(CbrRatesError, ValueError):
    """User supplied a date that does not match ``DD/MM/YYYY``."""


class RequestConstructionError(CbrRatesError):
    """The daily-rates request could not be built for the configured endpoint."""


class NetworkError(CbrRatesError):
    """Transport failure or a non-200 response from the daily-rates endpoint."""

    def __init__(
        self,
        message: str,
        *,
        request_date: date | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.request_date = request_date
        self.status_code = status_code


class DecodeError(CbrRatesError, ValueError):
    """The feed document (or, in strict mode, one of its numeric fields) is unusable."""


class EmptyResultError(CbrRatesError):
    """No observations were collected for the requested window."""


__all__ = [
    "CbrRatesError",
    "InputFormatError",
    "RequestConstructionError",
    "NetworkError",
    "DecodeError",
    "EmptyResultError",
]
