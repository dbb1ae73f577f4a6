"""Logging utilities for the cbr_rates package."""

from __future__ import annotations

import logging

_CONFIGURED = False


def get_logger(name: str = "cbr_rates") -> logging.Logger:
    """Return ``name``'s logger, installing the package log format on first use."""
    global _CONFIGURED
    if not _CONFIGURED:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        )
        _CONFIGURED = True
    return logging.getLogger(name)
