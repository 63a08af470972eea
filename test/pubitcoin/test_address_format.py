'''Address validation, prefix handling and legacy conversion.'''

import pubitcoin as btc
import pytest

SATOSHI_HASH160 = bytes.fromhex("62e907b15cbf27d5425399ebf6f0fb50ebb88f18")
SATOSHI_ADDRESS = "1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNa"


@pytest.mark.parametrize("addr, network", [
    (SATOSHI_ADDRESS, "mainnet"),
    ("1AGNa15ZQXAZUgFiqJ2i7Z2DPU2J6hW62i", "mainnet"),
    ("3J98t1WpEZ73CNmQviecrnyiWrnqRhWNLy", "mainnet"),
    ("bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4", "mainnet"),
    ("bc1qt493axn3wl4gzjxvfg03vkacre0m6f2gzfhv5t", "main"),
    ("2MvAfRVvRAeBS18NT7mKVc1gFim169GkFC5", "testnet"),
    ("tb1qrp33g0q5c5txsp9arysrx4k6zdkfs4nce4xj0gdcccefvpysxf3q0sl5k7",
     "testnet"),
    ("2MvAfRVvRAeBS18NT7mKVc1gFim169GkFC5", "signet"),
])
def test_valid_address(addr, network):
    assert btc.valid_address(addr, network)


@pytest.mark.parametrize("addr, network", [
    # checksum
    ("1A1zP1eP5QGefi2DMPTfTL5SLmv7DivfNb", "mainnet"),
    ("bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t5", "mainnet"),
    # wrong network
    (SATOSHI_ADDRESS, "testnet"),
    ("tb1qrp33g0q5c5txsp9arysrx4k6zdkfs4nce4xj0gdcccefvpysxf3q0sl5k7",
     "mainnet"),
    ("2MvAfRVvRAeBS18NT7mKVc1gFim169GkFC5", "mainnet"),
    ("", "mainnet"),
    (None, "mainnet"),
    ("not an address", "mainnet"),
])
def test_invalid_address(addr, network):
    assert not btc.valid_address(addr, network)


def test_no_prefix_network():
    fmt = btc.get_address_formatter("mainnet")
    assert fmt.dirty_address(" " + SATOSHI_ADDRESS) == SATOSHI_ADDRESS
    assert fmt.sanitize_address(SATOSHI_ADDRESS + "\n") == SATOSHI_ADDRESS
    # nothing to convert on bitcoin networks
    assert fmt.to_new_format(SATOSHI_ADDRESS) == SATOSHI_ADDRESS
    assert btc.get_address_formatter("main") is fmt


def test_prefix_network():
    prefixnet = btc.NETWORKS["mainnet"]._replace(name="prefixnet",
                                                  address_prefix="pay")
    fmt = btc.get_address_formatter(prefixnet)
    dirty = fmt.dirty_address(SATOSHI_ADDRESS)
    assert dirty == "pay:" + SATOSHI_ADDRESS
    # already prefixed
    assert fmt.dirty_address(dirty) == dirty
    assert fmt.dirty_address("PAY:" + SATOSHI_ADDRESS) == "PAY:" + SATOSHI_ADDRESS
    assert fmt.sanitize_address(dirty) == SATOSHI_ADDRESS
    assert fmt.sanitize_address(SATOSHI_ADDRESS) == SATOSHI_ADDRESS
    assert fmt.valid_address(dirty)
    assert fmt.valid_address(SATOSHI_ADDRESS)
    assert not fmt.valid_address("pay:")


def test_legacy_conversion():
    legacynet = btc.NETWORKS["mainnet"]._replace(
        name="legacynet", legacy_vbytes={b'\x6f': b'\x00'})
    fmt = btc.get_address_formatter(legacynet)
    legacy = btc.bin_to_b58check(SATOSHI_HASH160, 0x6f)
    assert not fmt.valid_address(legacy)
    converted = fmt.to_new_format(legacy)
    assert converted == SATOSHI_ADDRESS
    assert fmt.valid_address(converted)
    # current format addresses and non-base58 input pass through
    assert fmt.to_new_format(SATOSHI_ADDRESS) == SATOSHI_ADDRESS
    assert fmt.to_new_format("bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4") == \
        "bc1qw508d6qejxtdg4y5r3zarvary0c5xw7kv8f3t4"
    assert fmt.to_new_format("garbage!") == "garbage!"


def test_unknown_network():
    with pytest.raises(ValueError):
        btc.get_address_formatter("litecoin")
