"""Logging setup for txnormalizer. Log lines go to stderr so stdout stays pure CSV."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

_configured = False


def get_logger(name: str = "txnormalizer") -> logging.Logger:
    """Return a named logger, configuring the root handler on first use."""
    global _configured
    if not _configured:
        logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
        _configured = True
    return logging.getLogger(name)
