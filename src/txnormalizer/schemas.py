"""
Pydantic schemas (data models) shared by the parsers, the CSV pipeline and the CLI.

- NormalizedRecord is the one shape every exchange export is converted into.
- amount / price / fee stay plain strings: they are copied from the export
  verbatim and never go through float or Decimal.
- OrderBook is the base/quote pair supplied once per run.
"""

from __future__ import annotations

import codecs
from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

# Output column order, also written as the CSV header row.
CSV_HEADERS = (
    "exchange",
    "base_currency",
    "quote_currency",
    "transaction_type",
    "timestamp",
    "amount",
    "price",
    "fee",
)

# RFC3339 at second precision; years below 1000 keep four digits
RFC3339_SECONDS = "{:04d}-{:02d}-{:02d}T{:02d}:{:02d}:{:02d}Z"


class TxType(str, Enum):
    BUY = "buy"  # base currency acquired
    SELL = "sell"  # base currency disposed
    WITHDRAWAL = "withdrawal"
    DEPOSIT = "deposit"


def _require_code(v: Any) -> Any:
    # codes are opaque and kept as given; only blank ones are refused
    if isinstance(v, str) and not v.strip():
        raise ValueError("currency code must not be blank")
    return v


class OrderBook(BaseModel):
    """Base/quote currency pair applied to every record of a run."""

    model_config = ConfigDict(frozen=True)

    base_currency: str = Field(..., min_length=1, description="Currency bought or sold, e.g. ETH")
    quote_currency: str = Field(..., min_length=1, description="Currency the price is quoted in, e.g. BTC")

    @field_validator("base_currency", "quote_currency", mode="before")
    @classmethod
    def _non_blank_assets(cls, v):
        return _require_code(v)


class NormalizedRecord(BaseModel):
    """
    Exchange-agnostic trade record.

    Fields:
      exchange: identifier of the parser that produced the record (gdax, ...).
      base_currency / quote_currency: taken from the OrderBook, not the row.
      transaction_type: buy / sell, or None when the side token was not recognized.
      timestamp: aware datetime, always stored in UTC.
      amount, price, fee: numeric strings exactly as they appeared in the export.
    """

    model_config = ConfigDict(frozen=True)

    exchange: str
    base_currency: str
    quote_currency: str
    transaction_type: Optional[TxType] = None
    timestamp: datetime
    amount: str
    price: str
    fee: str

    @field_validator("timestamp")
    @classmethod
    def _to_utc(cls, v: datetime) -> datetime:
        if v.tzinfo is None or v.utcoffset() is None:
            raise ValueError("timestamp must carry a UTC offset")
        return v.astimezone(timezone.utc)

    def _rfc3339(self) -> str:
        ts = self.timestamp
        # sub-second digits are dropped, not rounded
        return RFC3339_SECONDS.format(ts.year, ts.month, ts.day, ts.hour, ts.minute, ts.second)

    def to_row(self) -> List[str]:
        """Flatten to the 8 CSV columns, in CSV_HEADERS order."""
        return [
            self.exchange,
            self.base_currency,
            self.quote_currency,
            self.transaction_type.value if self.transaction_type is not None else "",
            self._rfc3339(),
            self.amount,
            self.price,
            self.fee,
        ]


class RowError(BaseModel):
    """One input row that could not be parsed. row_number is 1-based; the header is row 1."""

    row_number: int
    exchange: str
    error: str
    raw_row: List[str]


class NormalizeConfig(BaseModel):
    """
    Settings for one normalization run, built from the command line.

    The exchange is checked against the parser registry passed in the
    validation context (``{"registry": ...}``), or the default registry.
    """

    exchange: str
    base_currency: str = Field(..., min_length=1)
    quote_currency: str = Field(..., min_length=1)
    strict_sides: bool = False
    encoding: str = Field("utf-8", min_length=1)
    header_rows: int = Field(1, ge=0)

    @field_validator("base_currency", "quote_currency", mode="before")
    @classmethod
    def _non_blank_assets(cls, v):
        return _require_code(v)

    @field_validator("encoding")
    @classmethod
    def _known_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError:
            raise ValueError(f"unknown encoding: {v!r}") from None
        return v

    @field_validator("exchange")
    @classmethod
    def _known_exchange(cls, v: str, info: ValidationInfo) -> str:
        from .exchanges import EXCHANGE_PARSERS, supported_exchanges

        registry = (info.context or {}).get("registry", EXCHANGE_PARSERS)
        if v not in registry:
            raise ValueError(
                f"invalid exchange: {v!r} (expected one of {', '.join(supported_exchanges(registry))})"
            )
        return v

    @property
    def order_book(self) -> OrderBook:
        return OrderBook(base_currency=self.base_currency, quote_currency=self.quote_currency)


class RunSummary(BaseModel):
    exchange: str
    rows_read: int = 0
    records_written: int = 0
    rows_failed: int = 0
    errors: List[RowError] = Field(default_factory=list)
