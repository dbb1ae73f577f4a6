"""Summary statistics over collected currency observations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import pandas as pd

from cbr_rates.ingestion.models import CurrencyObservation


@dataclass(frozen=True, slots=True)
class RateSummary:
    """Highest and lowest unit-rate observations plus the overall mean."""

    maximum: CurrencyObservation | None
    minimum: CurrencyObservation | None
    average: float
    count: int = 0


def analyze_rates(observations: Sequence[CurrencyObservation]) -> RateSummary:
    """Scan ``observations`` once for max, min and mean unit rate.

    Ties keep the first observation encountered. The mean mixes every currency
    together. An empty sequence yields ``RateSummary(None, None, 0.0)``.
    """

    if not observations:
        return RateSummary(maximum=None, minimum=None, average=0.0)

    maximum = minimum = observations[0]
    total = 0.0
    for observation in observations:
        if observation.unit_rate > maximum.unit_rate:
            maximum = observation
        if observation.unit_rate < minimum.unit_rate:
            minimum = observation
        total += observation.unit_rate
    count = len(observations)
    return RateSummary(maximum=maximum, minimum=minimum, average=total / count, count=count)


def observations_frame(observations: Sequence[CurrencyObservation]) -> pd.DataFrame:
    """Tabulate observations with one row per currency/day pair."""

    columns = ["rate_date", "code", "name", "nominal", "value", "unit_rate"]
    return pd.DataFrame(
        [
            (obs.rate_date, obs.code, obs.name, obs.nominal, obs.value, obs.unit_rate)
            for obs in observations
        ],
        columns=columns,
    )


def average_by_currency(observations: Sequence[CurrencyObservation]) -> dict[str, float]:
    """Mean unit rate per currency code, ordered by code."""

    if not observations:
        return {}
    frame = observations_frame(observations)
    means = frame.groupby("code", sort=True)["unit_rate"].mean()
    return {str(code): float(value) for code, value in means.items()}


__all__ = ["RateSummary", "analyze_rates", "average_by_currency", "observations_frame"]
