from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from types import MappingProxyType

from txnormalizer.schemas import TxType
from .base import ColumnMap, FixedColumnParser

# trade id, product, side, created at, size, size unit, price, fee, total, price/fee/total unit
GDAX_COLUMNS = ColumnMap(side=2, timestamp=3, amount=4, price=6, fee=7)

# 2017-04-08T01:22:03.691Z or 2017-04-08T01:22:03.691+02:00; fraction optional
_ISO_TS = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})T(\d{2}):(\d{2}):(\d{2})(?:\.(\d{1,9}))?(Z|[+-]\d{2}:\d{2})",
    re.ASCII,
)


def parse_iso_timestamp(raw: str) -> datetime:
    m = _ISO_TS.fullmatch(raw)
    if m is None:
        raise ValueError("does not match YYYY-MM-DDThh:mm:ss.sssZhh:mm")
    year, month, day, hour, minute, second = (int(g) for g in m.group(1, 2, 3, 4, 5, 6))
    # python datetimes stop at microseconds; extra digits are truncated
    micro = int((m.group(7) or "").ljust(6, "0")[:6])

    offset = m.group(8)
    if offset == "Z":
        tz = timezone.utc
    else:
        sign = -1 if offset[0] == "-" else 1
        tz = timezone(sign * timedelta(hours=int(offset[1:3]), minutes=int(offset[4:6])))

    return datetime(year, month, day, hour, minute, second, micro, tzinfo=tz)


class GdaxParser(FixedColumnParser):
    exchange = "gdax"
    columns = GDAX_COLUMNS
    sides = MappingProxyType({"BUY": TxType.BUY, "SELL": TxType.SELL})

    def parse_timestamp(self, raw: str) -> datetime:
        return parse_iso_timestamp(raw)
