"""CLI entry point for the CBR rate extremes report."""

from __future__ import annotations

from cbr_rates.reports.rate_extremes import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    main()
