import pytest

from puclient import CurrencyInfo, load_program_config


class DictFormatter(object):
    """
    Address formatter stand-in driven by a table of valid
    addresses and a table of legacy -> new address conversions,
    so that classification can be tested without real chain rules.
    `accept_all` makes every non-empty string a valid address.
    """

    def __init__(self, valid=(), legacy=None, prefix=None, accept_all=False):
        self.valid = set(valid)
        self.legacy = dict(legacy or {})
        self.prefix = prefix
        self.accept_all = accept_all

    def _strip(self, addr):
        if self.prefix and addr.startswith(self.prefix + ":"):
            return addr[len(self.prefix) + 1:]
        return addr

    def valid_address(self, addr):
        if self.accept_all:
            return bool(addr)
        return self._strip(addr) in self.valid

    def sanitize_address(self, addr):
        return self._strip(addr.strip())

    def dirty_address(self, addr):
        addr = addr.strip()
        if self.prefix and self._strip(addr) == addr:
            return self.prefix + ":" + addr
        return addr

    def to_new_format(self, addr):
        return self.legacy.get(addr, addr)


@pytest.fixture
def btc_info() -> CurrencyInfo:
    return CurrencyInfo(currency_code="BTC", currency_name="Bitcoin",
                        network="mainnet",
                        denominations=[("BTC", "100000000"),
                                       ("mBTC", "100000"), ("bits", "100"),
                                       ("sats", "1")])


@pytest.fixture
def testbtc_info() -> CurrencyInfo:
    return CurrencyInfo(currency_code="TESTBTC", currency_name="Bitcoin",
                        network="testnet",
                        denominations=[("TESTBTC", "100000000"),
                                       ("sats", "1")])


@pytest.fixture
def dict_formatter():
    """ The DictFormatter class, for tests to build their own. """
    return DictFormatter


@pytest.fixture
def default_config(tmp_path):
    """ Built-in defaults only: the data directory is empty. """
    load_program_config(config_path=str(tmp_path))
    return tmp_path
