import pytest

from txnormalizer.errors import UnknownExchangeError
from txnormalizer.exchanges import EXCHANGE_PARSERS, FixedColumnParser, GdaxParser, get_parser, supported_exchanges


def test_supported_exchanges_come_from_registry():
    assert supported_exchanges() == ["coinbase", "gdax", "quadriga"]
    assert supported_exchanges({"b": None, "a": None}) == ["a", "b"]


def test_every_parser_is_registered_under_its_own_name():
    for name, parser in EXCHANGE_PARSERS.items():
        assert parser.exchange == name


def test_registry_is_read_only():
    with pytest.raises(TypeError):
        EXCHANGE_PARSERS["kraken"] = GdaxParser()  # type: ignore[index]


def test_get_parser():
    assert isinstance(get_parser("gdax"), GdaxParser)


def test_get_parser_unknown():
    with pytest.raises(UnknownExchangeError) as ei:
        get_parser("kraken")
    assert ei.value.supported == ["coinbase", "gdax", "quadriga"]
    assert "kraken" in str(ei.value)
    # still a KeyError for callers doing dict-style lookups
    assert isinstance(ei.value, KeyError)


def test_fixed_column_parser_is_abstract():
    with pytest.raises(TypeError):
        FixedColumnParser()


def test_side_tables_are_read_only():
    for parser in EXCHANGE_PARSERS.values():
        with pytest.raises(TypeError):
            parser.sides["HOLD"] = None
