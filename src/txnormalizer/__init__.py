"""Normalize exchange CSV trade exports into one record format."""

from __future__ import annotations

from importlib import metadata as importlib_metadata

from .csv_normalizer import parse_csv, write_csv
from .errors import InputReadError, NormalizeError, ParseError, UnknownExchangeError
from .exchanges import EXCHANGE_PARSERS, get_parser, supported_exchanges
from .runner import run_normalization
from .schemas import CSV_HEADERS, NormalizeConfig, NormalizedRecord, OrderBook, RowError, RunSummary, TxType

__all__ = [
    "__version__",
    "CSV_HEADERS",
    "EXCHANGE_PARSERS",
    "InputReadError",
    "NormalizeConfig",
    "NormalizeError",
    "NormalizedRecord",
    "OrderBook",
    "ParseError",
    "RowError",
    "RunSummary",
    "TxType",
    "UnknownExchangeError",
    "get_parser",
    "parse_csv",
    "run_normalization",
    "supported_exchanges",
    "write_csv",
]

try:
    __version__ = importlib_metadata.version("txnormalizer")
except importlib_metadata.PackageNotFoundError:  # pragma: no cover - fallback for local runs
    __version__ = "0.1.0"
