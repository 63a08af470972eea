from collections import namedtuple

# BIP32 serialization version bytes
MAINNET_PRIVATE = b'\x04\x88\xAD\xE4'
MAINNET_PUBLIC = b'\x04\x88\xB2\x1E'
TESTNET_PRIVATE = b'\x04\x35\x83\x94'
TESTNET_PUBLIC = b'\x04\x35\x87\xCF'

WIF_PREFIX_MAP = {"mainnet": b'\x80', "testnet": b'\xef', "signet": b'\xef',
    "regtest": b'\xef'}

# Everything the address formatter and key classifier need
# to know about a network.
#
# `chain_params` is the python-bitcointx chain name used with
# `bitcointx.ChainParams`. `address_prefix` is a cashaddr-style
# "prefix:" that some networks write in front of bare addresses
# (None for networks which do not). `legacy_vbytes` maps the
# version byte of a superseded base58 address encoding to the
# version byte of its replacement on this network.
NetworkSettings = namedtuple('NetworkSettings',
    ['name', 'chain_params', 'wif_prefix',
     'bip32_priv_vbytes', 'bip32_pub_vbytes', 'address_prefix',
     'legacy_vbytes'])


def _bitcoin_settings(name: str, chain_params: str) -> NetworkSettings:
    if name == "mainnet":
        priv, pub = MAINNET_PRIVATE, MAINNET_PUBLIC
    else:
        priv, pub = TESTNET_PRIVATE, TESTNET_PUBLIC
    return NetworkSettings(name=name, chain_params=chain_params,
                           wif_prefix=WIF_PREFIX_MAP[name],
                           bip32_priv_vbytes=priv, bip32_pub_vbytes=pub,
                           address_prefix=None, legacy_vbytes={})


NETWORKS = {
    "mainnet": _bitcoin_settings("mainnet", "bitcoin"),
    "testnet": _bitcoin_settings("testnet", "bitcoin/testnet"),
    # signet shares address encodings with testnet
    "signet": _bitcoin_settings("signet", "bitcoin/testnet"),
    "regtest": _bitcoin_settings("regtest", "bitcoin/regtest"),
}

# alternative spellings accepted in currency configuration
NETWORK_ALIASES = {
    "bitcoin": "mainnet",
    "main": "mainnet",
    "bitcointestnet": "testnet",
    "test": "testnet",
}


def get_network_settings(network) -> NetworkSettings:
    """ Accepts a network name (or alias), or an
    already constructed NetworkSettings which is returned
    as is; this allows callers to define networks that
    are not in the built-in table.
    """
    if isinstance(network, NetworkSettings):
        return network
    name = str(network).lower()
    name = NETWORK_ALIASES.get(name, name)
    if name not in NETWORKS:
        raise ValueError("Unknown network: " + str(network))
    return NETWORKS[name]

