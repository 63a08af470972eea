import pubitcoin as btc
import pytest


def test_network_settings():
    mainnet = btc.get_network_settings("mainnet")
    assert mainnet.chain_params == "bitcoin"
    assert mainnet.wif_prefix == b'\x80'
    assert mainnet.bip32_priv_vbytes == btc.MAINNET_PRIVATE
    assert mainnet.bip32_pub_vbytes == btc.MAINNET_PUBLIC
    assert mainnet.address_prefix is None
    assert mainnet.legacy_vbytes == {}
    for name in ["testnet", "signet", "regtest"]:
        settings = btc.get_network_settings(name)
        assert settings.name == name
        assert settings.wif_prefix == b'\xef'
        assert settings.bip32_priv_vbytes == btc.TESTNET_PRIVATE
        assert settings.bip32_pub_vbytes == btc.TESTNET_PUBLIC
    assert btc.get_network_settings("regtest").chain_params == \
        "bitcoin/regtest"


def test_network_aliases():
    for alias in ["bitcoin", "main", "MAINNET"]:
        assert btc.get_network_settings(alias) is btc.NETWORKS["mainnet"]
    for alias in ["bitcointestnet", "test", "Testnet"]:
        assert btc.get_network_settings(alias) is btc.NETWORKS["testnet"]


def test_custom_network_passes_through():
    custom = btc.NETWORKS["mainnet"]._replace(name="custom")
    assert btc.get_network_settings(custom) is custom


def test_unknown_network():
    for bad in ["litecoin", "", None]:
        with pytest.raises(ValueError):
            btc.get_network_settings(bad)
