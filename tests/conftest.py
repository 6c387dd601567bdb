from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from txnormalizer.schemas import OrderBook

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

GDAX_HEADER = "trade id,product,side,created at,size,size unit,price,fee,total,price/fee/total unit"
GDAX_ROW = "398241,ETH-BTC,BUY,2017-04-08T01:22:03.691Z,1.07003890,ETH,0.03727,0.000119641049409,-0.039999990852409,BTC"


def unix(seconds: int, millis: int = 0) -> datetime:
    return EPOCH + timedelta(seconds=seconds, milliseconds=millis)


@pytest.fixture
def eth_btc() -> OrderBook:
    return OrderBook(base_currency="ETH", quote_currency="BTC")


@pytest.fixture
def btc_cad() -> OrderBook:
    return OrderBook(base_currency="BTC", quote_currency="CAD")
