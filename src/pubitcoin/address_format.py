from bitcointx import ChainParams
from bitcointx.wallet import CCoinAddress

from .keys import KeyFormatError, b58check_to_bin, bin_to_b58check
from .networks import get_network_settings, NetworkSettings


class AddressFormatter(object):
    """ Address cleaning, validation and legacy conversion
    for a single network. Validity is decided by python-bitcointx
    with the chain parameters of the network, so base58 (p2pkh,
    p2sh) and bech32/bech32m (segwit v0, taproot) addresses are
    all understood.
    """

    def __init__(self, network):
        self.network = get_network_settings(network)

    def valid_address(self, addr: str) -> bool:
        if not isinstance(addr, str) or not addr:
            return False
        with ChainParams(self.network.chain_params):
            try:
                candidate = CCoinAddress(self.sanitize_address(addr))
                # python-bitcointx does not check hash length
                # on p2sh construction.
                candidate.to_scriptPubKey()
            except Exception:
                return False
        return True

    def _split_prefix(self, addr):
        prefix = self.network.address_prefix
        if prefix and addr.lower().startswith(prefix + ":"):
            return addr[len(prefix) + 1:]
        return addr

    def sanitize_address(self, addr: str) -> str:
        """ Strips whitespace and any network address prefix.
        """
        return self._split_prefix(addr.strip())

    def dirty_address(self, addr: str) -> str:
        """ Writes the network address prefix in front of a
        bare address; identity on networks without one.
        """
        prefix = self.network.address_prefix
        addr = addr.strip()
        if not prefix or self._split_prefix(addr) != addr:
            return addr
        return prefix + ":" + addr

    def to_new_format(self, addr: str) -> str:
        """ Re-encodes a base58 address written with a legacy
        version byte into the current one. Anything that is not
        a legacy address is returned unchanged; deciding whether
        the result is valid is up to valid_address.
        """
        if not self.network.legacy_vbytes:
            return addr
        try:
            vbyte, payload = b58check_to_bin(addr)
        except KeyFormatError:
            return addr
        new_vbyte = self.network.legacy_vbytes.get(vbyte)
        if new_vbyte is None:
            return addr
        return bin_to_b58check(payload, new_vbyte)


_formatters = {}

def get_address_formatter(network) -> AddressFormatter:
    settings = get_network_settings(network)
    formatter = _formatters.get(settings.name)
    if formatter is None or formatter.network is not settings:
        formatter = AddressFormatter(settings)
        if not isinstance(network, NetworkSettings):
            _formatters[settings.name] = formatter
    return formatter

def valid_address(addr: str, network) -> bool:
    return get_address_formatter(network).valid_address(addr)

def sanitize_address(addr: str, network) -> str:
    return get_address_formatter(network).sanitize_address(addr)

def dirty_address(addr: str, network) -> str:
    return get_address_formatter(network).dirty_address(addr)

def to_new_format(addr: str, network) -> str:
    return get_address_formatter(network).to_new_format(addr)
