"""requests-based client for the Central Bank of Russia daily-rates feed."""

from __future__ import annotations

from datetime import date
from typing import Optional

import requests

from cbr_rates.config import FetchSettings
from cbr_rates.errors import NetworkError, RequestConstructionError
from cbr_rates.utils.date_range import format_request_date
from cbr_rates.utils.logger import get_logger

LOGGER = get_logger(__name__)

_CONSTRUCTION_ERRORS = (
    requests.exceptions.MissingSchema,
    requests.exceptions.InvalidSchema,
    requests.exceptions.InvalidURL,
)


class CBRDailyClient:
    """Fetch the raw XML document published for a single calendar date."""

    def __init__(
        self,
        settings: Optional[FetchSettings] = None,
        *,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.settings = settings or FetchSettings()
        self._owns_session = session is None
        self.session = session or requests.Session()

    def fetch(self, day: date) -> bytes:
        """Return the response body for ``day`` exactly as the server sent it."""

        date_req = format_request_date(day)
        try:
            response = self.session.get(
                self.settings.endpoint,
                params={"date_req": date_req},
                headers={"User-Agent": self.settings.user_agent},
                timeout=self.settings.timeout,
            )
        except _CONSTRUCTION_ERRORS as exc:
            raise RequestConstructionError(
                f"Cannot build request for date {date_req} against {self.settings.endpoint!r}: {exc}"
            ) from exc
        except requests.RequestException as exc:
            raise NetworkError(
                f"Request for date {date_req} failed: {exc}", request_date=day
            ) from exc

        if response.status_code != 200:
            raise NetworkError(
                f"Unexpected HTTP {response.status_code} for date {date_req}",
                request_date=day,
                status_code=response.status_code,
            )
        LOGGER.debug("Fetched %s bytes for %s", len(response.content), date_req)
        return response.content

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "CBRDailyClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


__all__ = ["CBRDailyClient"]
