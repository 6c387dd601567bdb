from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Mapping, Protocol, Sequence

from pydantic import ValidationError

from txnormalizer.errors import ParseError
from txnormalizer.schemas import NormalizedRecord, OrderBook, TxType


@dataclass(frozen=True)
class ColumnMap:
    # 0-based positions in the exchange's export row
    side: int
    timestamp: int
    amount: int
    price: int
    fee: int

    @property
    def width(self) -> int:
        return max(self.side, self.timestamp, self.amount, self.price, self.fee) + 1


class ExchangeParser(Protocol):
    exchange: str

    def parse(
        self, book: OrderBook, values: Sequence[str], *, strict_sides: bool = False
    ) -> NormalizedRecord: ...


class FixedColumnParser(ABC):
    """
    Shared parse flow for exports with a fixed column layout.

    Subclasses set ``exchange``, ``columns`` and ``sides`` and implement
    ``parse_timestamp``, which raises ValueError on a malformed value.
    """

    exchange: str = ""
    columns: ColumnMap
    sides: Mapping[str, TxType] = MappingProxyType({})

    @abstractmethod
    def parse_timestamp(self, raw: str) -> datetime:
        ...

    def parse(
        self, book: OrderBook, values: Sequence[str], *, strict_sides: bool = False
    ) -> NormalizedRecord:
        if len(values) < self.columns.width:
            raise ParseError(
                self.exchange,
                f"expected at least {self.columns.width} columns, got {len(values)}",
            )

        side = values[self.columns.side]
        txn_type = self.sides.get(side)
        if txn_type is None and strict_sides:
            raise ParseError(self.exchange, f"unrecognized side {side!r}")

        raw_ts = values[self.columns.timestamp]
        try:
            timestamp = self.parse_timestamp(raw_ts)
        except (ValueError, ArithmeticError) as exc:
            raise ParseError(self.exchange, f"bad timestamp {raw_ts!r}: {exc}") from exc

        try:
            return NormalizedRecord(
                exchange=self.exchange,
                base_currency=book.base_currency,
                quote_currency=book.quote_currency,
                transaction_type=txn_type,
                timestamp=timestamp,
                amount=values[self.columns.amount],
                price=values[self.columns.price],
                fee=values[self.columns.fee],
            )
        except ValidationError as ve:
            raise ParseError(self.exchange, str(ve)) from ve

    def __repr__(self) -> str:
        return f"{type(self).__name__}(exchange={self.exchange!r})"
