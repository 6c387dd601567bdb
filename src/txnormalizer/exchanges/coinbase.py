from __future__ import annotations

from datetime import datetime
from types import MappingProxyType

from txnormalizer.schemas import TxType
from .base import ColumnMap, FixedColumnParser

# Timestamp, Transaction Type, Asset, Quantity Transacted, Spot Price at Transaction,
# Subtotal, Total (inclusive of fees), Fees, Notes
COINBASE_COLUMNS = ColumnMap(side=1, timestamp=0, amount=3, price=4, fee=7)

# local wall time plus its offset, e.g. 2017-12-10 13:42:35 -0800
COINBASE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S %z"


class CoinbaseParser(FixedColumnParser):
    exchange = "coinbase"
    columns = COINBASE_COLUMNS
    sides = MappingProxyType({"Buy": TxType.BUY, "Sell": TxType.SELL})

    def parse_timestamp(self, raw: str) -> datetime:
        return datetime.strptime(raw, COINBASE_TIME_FORMAT)
