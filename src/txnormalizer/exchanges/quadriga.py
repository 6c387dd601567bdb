from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from decimal import ROUND_FLOOR, Decimal
from types import MappingProxyType

from txnormalizer.schemas import TxType
from .base import ColumnMap, FixedColumnParser

# type, major, minor, amount, rate, value, fee, total, timestamp
QUADRIGA_COLUMNS = ColumnMap(side=0, timestamp=8, amount=3, price=4, fee=6)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# plain ASCII decimal, optional exponent; no padding, NaN or Infinity
_EPOCH_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d{1,3})?", re.ASCII)


def parse_epoch_millis(raw: str) -> datetime:
    """
    Parse a fractional unix time such as ``1513303913.151``.

    Integer part is seconds; the fraction is kept to millisecond precision
    (truncated). Decimal keeps ``.151`` from turning into ``.150999...``.
    Padded or non-numeric values raise ValueError.
    """
    if _EPOCH_NUMBER.fullmatch(raw) is None:
        raise ValueError("not a decimal unix time")
    value = Decimal(raw)
    seconds = value.to_integral_value(rounding=ROUND_FLOOR)
    millis = ((value - seconds) * 1000).to_integral_value(rounding=ROUND_FLOOR)
    return EPOCH + timedelta(seconds=int(seconds), milliseconds=int(millis))


class QuadrigaParser(FixedColumnParser):
    exchange = "quadriga"
    columns = QUADRIGA_COLUMNS
    sides = MappingProxyType({"buy": TxType.BUY, "sell": TxType.SELL})

    def parse_timestamp(self, raw: str) -> datetime:
        return parse_epoch_millis(raw)
