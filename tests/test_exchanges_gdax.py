import pytest

from conftest import unix
from txnormalizer.errors import ParseError
from txnormalizer.exchanges import GdaxParser
from txnormalizer.schemas import TxType

ROW = ["398241", "ETH-BTC", "BUY", "2017-04-08T01:22:03.691Z", "1.07003890", "ETH", "0.03727", "0.000119641049409", "-0.039999990852409", "BTC"]


def test_parse_gdax_record(eth_btc):
    rec = GdaxParser().parse(eth_btc, ROW)

    assert rec.exchange == "gdax"
    assert rec.base_currency == "ETH"
    assert rec.quote_currency == "BTC"
    assert rec.transaction_type is TxType.BUY
    assert rec.timestamp == unix(1491614523, 691)
    assert rec.amount == "1.07003890"
    assert rec.price == "0.03727"
    assert rec.fee == "0.000119641049409"


@pytest.mark.parametrize("side,expected", [("BUY", TxType.BUY), ("SELL", TxType.SELL), ("buy", None), ("", None)])
def test_gdax_side_mapping(eth_btc, side, expected):
    row = list(ROW)
    row[2] = side
    assert GdaxParser().parse(eth_btc, row).transaction_type == expected


def test_gdax_offset_is_converted_to_utc(eth_btc):
    row = list(ROW)
    row[3] = "2017-04-08T03:22:03.5+02:00"
    assert GdaxParser().parse(eth_btc, row).timestamp == unix(1491614523, 500)


def test_gdax_fraction_is_optional(eth_btc):
    row = list(ROW)
    row[3] = "2017-04-08T01:22:03Z"
    assert GdaxParser().parse(eth_btc, row).timestamp == unix(1491614523)


@pytest.mark.parametrize(
    "bad",
    [
        "2017-04-08 01:22:03.691Z",
        "2017-04-08T01:22:03.691",
        "yesterday",
        "2017-13-08T01:22:03.691Z",
        "\u0662\u0660\u0661\u0667-04-08T01:22:03.691Z",  # arabic-indic digits
    ],
)
def test_gdax_bad_timestamp_raises(eth_btc, bad):
    row = list(ROW)
    row[3] = bad
    with pytest.raises(ParseError) as ei:
        GdaxParser().parse(eth_btc, row)
    assert isinstance(ei.value.__cause__, ValueError)


def test_gdax_strict_sides_rejects_unknown_token(eth_btc):
    row = list(ROW)
    row[2] = "HOLD"
    with pytest.raises(ParseError, match="unrecognized side"):
        GdaxParser().parse(eth_btc, row, strict_sides=True)


def test_gdax_short_row_raises(eth_btc):
    with pytest.raises(ParseError, match="expected at least 8 columns"):
        GdaxParser().parse(eth_btc, ROW[:5])


def test_gdax_year_below_1000_keeps_four_digits(eth_btc):
    row = list(ROW)
    row[3] = "0999-04-08T01:22:03.691Z"
    assert GdaxParser().parse(eth_btc, row).to_row()[4] == "0999-04-08T01:22:03Z"
