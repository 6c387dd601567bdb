"""
Registry of exchange parsers.

EXCHANGE_PARSERS is the single list of supported exchanges: CLI validation,
usage text and dispatch all read from it. Callers that need a different set
(tests, embedding code) pass their own mapping instead of mutating this one.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import List, Mapping

from txnormalizer.errors import UnknownExchangeError
from .base import ColumnMap, ExchangeParser, FixedColumnParser
from .coinbase import CoinbaseParser
from .gdax import GdaxParser
from .quadriga import QuadrigaParser

EXCHANGE_PARSERS: Mapping[str, ExchangeParser] = MappingProxyType(
    {p.exchange: p for p in (GdaxParser(), QuadrigaParser(), CoinbaseParser())}
)


def supported_exchanges(registry: Mapping[str, ExchangeParser] = EXCHANGE_PARSERS) -> List[str]:
    return sorted(registry)


def get_parser(exchange: str, registry: Mapping[str, ExchangeParser] = EXCHANGE_PARSERS) -> ExchangeParser:
    try:
        return registry[exchange]
    except KeyError:
        raise UnknownExchangeError(exchange, supported_exchanges(registry)) from None


__all__ = [
    "EXCHANGE_PARSERS",
    "ColumnMap",
    "ExchangeParser",
    "FixedColumnParser",
    "CoinbaseParser",
    "GdaxParser",
    "QuadrigaParser",
    "get_parser",
    "supported_exchanges",
]
