'''Currency metadata.'''

import pytest

from puclient import CurrencyInfo, Denomination


def test_currency_info(btc_info):
    assert btc_info.currency_code == "BTC"
    assert btc_info.network == "mainnet"
    assert len(btc_info.denominations) == 4
    assert btc_info.denomination("BTC") == Denomination("BTC", "100000000")
    assert btc_info.denomination("bits").multiplier == "100"
    assert btc_info.denomination("btc") is None
    assert btc_info.denomination("XYZ") is None


def test_denomination_forms():
    info = CurrencyInfo("BTC", "Bitcoin", "mainnet", [
        Denomination("BTC", 100000000, symbol="₿"),
        {"name": "mBTC", "multiplier": 100000},
        ("sats", 1, "s"),
    ])
    # multipliers are held as strings
    assert [d.multiplier for d in info.denominations] == \
        ["100000000", "100000", "1"]
    assert info.denomination("BTC").symbol == "₿"
    assert info.denomination("mBTC").symbol is None
    assert info.denomination("sats").symbol == "s"
    assert isinstance(info.denominations, tuple)


def test_duplicate_denominations():
    with pytest.raises(ValueError):
        CurrencyInfo("BTC", "Bitcoin", "mainnet",
                     [("BTC", "100000000"), ("BTC", "1")])


def test_currency_info_is_immutable(btc_info):
    with pytest.raises(AttributeError):
        btc_info.network = "testnet"
