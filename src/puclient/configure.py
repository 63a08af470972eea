import io
import os
from configparser import ConfigParser, NoOptionError, NoSectionError
from typing import List

import pubitcoin as btc
from pubase.support import (get_log, set_logging_level, set_logging_color,
                            puprint, PU_APP_NAME, lookup_appdata_folder)

from .currency import CurrencyInfo, Denomination

log = get_log()


class AttributeDict(object):
    """
    A class to convert a nested Dictionary into an object with key-values
    accessibly using attribute notation (AttributeDict.attribute) instead of
    key notation (Dict["key"]). This class recursively sets Dicts to objects,
    allowing you to recurse down nested dicts (like: AttributeDict.attr.attr)
    """

    def __init__(self, **entries):
        self.add_entries(**entries)

    def add_entries(self, **entries):
        for key, value in entries.items():
            if isinstance(value, dict):
                self.__dict__[key] = AttributeDict(**value)
            else:
                self.__dict__[key] = value

    def __getitem__(self, key):
        """
        Provides dict-style access to attributes
        """
        return getattr(self, key)


global_singleton = AttributeDict()
global_singleton.APPNAME = PU_APP_NAME
global_singleton.datadir = None
global_singleton.config = ConfigParser(strict=False)
#This is reset to a full path after load_program_config call
global_singleton.config_location = 'payuri.cfg'


def pu_single() -> AttributeDict:
    return global_singleton

CURRENCY_SECTION_PREFIX = 'CURRENCY:'

required_currency_options = ['currency_name', 'network', 'denominations']

defaultconfig = \
    """
[LOGGING]
# Set the log level for the output to the terminal/console
# Possible choices: DEBUG / INFO / WARNING / ERROR
console_log_level = INFO

# Use color-coded log messages to help distinguish log levels?:
color = true

[PAYMENT]
# currency used by payment-uri.py when --currency is not given
default_currency = BTC

# One section per currency, named CURRENCY:<currency code>.
# currency_name (lower-cased) is the URI scheme;
# network is one of mainnet, testnet, signet, regtest;
# denominations is a comma separated list of NAME:MULTIPLIER,
# the multiplier converting one unit of NAME to the smallest unit.
# The denomination named like the currency code is used for the
# `amount` URI parameter.
[CURRENCY:BTC]
currency_name = Bitcoin
network = mainnet
denominations = BTC:100000000, mBTC:100000, bits:100, sats:1

[CURRENCY:TESTBTC]
currency_name = Bitcoin
network = testnet
denominations = TESTBTC:100000000, mTESTBTC:100000, sats:1

[CURRENCY:REGBTC]
currency_name = Bitcoin
network = regtest
denominations = REGBTC:100000000, sats:1
"""


def parse_denominations(value: str) -> List[Denomination]:
    """ "BTC:100000000, sats:1" -> [Denomination('BTC', '100000000'),
    Denomination('sats', '1')]
    """
    denominations = []
    for item in value.split(','):
        item = item.strip()
        if not item:
            continue
        name, sep, multiplier = item.partition(':')
        name, multiplier = name.strip(), multiplier.strip()
        if not sep or not name or not multiplier.isdigit() or \
                int(multiplier) == 0:
            raise ValueError("Invalid denomination in config: " + item)
        denominations.append(Denomination(name, multiplier))
    if not denominations:
        raise ValueError("No denominations in config")
    return denominations


def get_currency_codes() -> List[str]:
    return [s[len(CURRENCY_SECTION_PREFIX):]
            for s in global_singleton.config.sections()
            if s.startswith(CURRENCY_SECTION_PREFIX)]


def get_currency_info(currency_code: str) -> CurrencyInfo:
    section = CURRENCY_SECTION_PREFIX + currency_code
    _config = global_singleton.config
    if not _config.has_section(section):
        raise ValueError("Currency " + currency_code + " is not configured")
    for o in required_currency_options:
        if not _config.has_option(section, o):
            raise ValueError("Config section " + section +
                             " does not contain the required option " + o)
    network = _config.get(section, 'network')
    # fail early on a network we do not know
    btc.get_network_settings(network)
    return CurrencyInfo(currency_code=currency_code,
                        currency_name=_config.get(section, 'currency_name'),
                        network=network,
                        denominations=parse_denominations(
                            _config.get(section, 'denominations')))


def get_default_currency() -> str:
    try:
        return global_singleton.config.get('PAYMENT', 'default_currency')
    except (NoSectionError, NoOptionError):
        return 'BTC'


def load_program_config(config_path: str = "") -> None:
    """ Loads the built-in defaults, then `payuri.cfg` from
    `config_path` (by default the application data folder) if
    that file exists. Nothing is written to disk.
    """
    global_singleton.config = ConfigParser(strict=False)
    global_singleton.config.read_file(io.StringIO(defaultconfig))
    if not config_path:
        config_path = lookup_appdata_folder(global_singleton.APPNAME)
    global_singleton.datadir = config_path
    global_singleton.config_location = os.path.join(
        global_singleton.datadir, 'payuri.cfg')

    try:
        loadedFiles = global_singleton.config.read(
            [global_singleton.config_location])
    except UnicodeDecodeError:
        raise ValueError("Error loading `payuri.cfg`, invalid file format.")
    if loadedFiles:
        log.debug("Loaded config from " + global_singleton.config_location)
    else:
        log.debug("No config file at " + global_singleton.config_location +
                  ", using defaults")

    loglevel = global_singleton.config.get("LOGGING", "console_log_level")
    try:
        set_logging_level(loglevel)
    except (ValueError, TypeError):
        puprint("Failed to set logging level, must be DEBUG, INFO, WARNING, "
                "ERROR", "error")

    # Logs to the console are color-coded if user chooses
    if global_singleton.config.get("LOGGING", "color") == "true":
        set_logging_color(True)
    else:
        set_logging_color(False)
