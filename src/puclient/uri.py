"""Conversion between payment URIs and payment requests.

Decoding: bitcoin:<path>?amount=..&label=..&message=..&r=..
The path is classified, first match wins, as a BIP39 seed, a
BIP32 extended private key, a WIF private key or, failing all
of those, a public address. Amounts are converted to the
smallest unit of the currency's own denomination.

Encoding is the inverse for public addresses only.
"""
from collections import namedtuple
from typing import Optional

from pubase import get_log
from pubitcoin import (KeyFormatError, verify_mnemonic,
                       verify_bip32_master_privkey, verify_wif,
                       amount_to_native, native_to_amount,
                       split_uri, serialize_uri, get_address_formatter)

from .currency import CurrencyInfo

log = get_log()


class PaymentUriError(Exception):
    pass


class InvalidUriError(PaymentUriError):
    pass


class InvalidPublicAddressError(PaymentUriError):
    pass


# the four mutually exclusive things a URI path can hold
Seed = namedtuple('Seed', ['seed'])
MasterPrivateKey = namedtuple('MasterPrivateKey', ['master_priv'])
PrivateKeys = namedtuple('PrivateKeys', ['private_keys'])
PublicAddress = namedtuple('PublicAddress', ['public_address', 'legacy_address'],
                           defaults=(None,))

Metadata = namedtuple('Metadata', ['name', 'message'], defaults=(None, None))

EncodeRequest = namedtuple('EncodeRequest',
    ['public_address', 'legacy_address', 'native_amount', 'currency_code',
     'metadata'], defaults=(None, None, None, None))


class ParsedUri(namedtuple('ParsedUri', ['payload', 'metadata',
                                         'payment_protocol_url',
                                         'currency_code', 'native_amount'])):
    """ Result of parse_uri. `payload` is one of Seed,
    MasterPrivateKey, PrivateKeys or PublicAddress, or None for a
    URI that only carries a payment protocol URL. `currency_code`
    and `native_amount` are either both set or both None.
    """
    __slots__ = ()

    def _field(self, variant, name):
        if isinstance(self.payload, variant):
            return getattr(self.payload, name)
        return None

    @property
    def seed(self):
        return self._field(Seed, 'seed')

    @property
    def master_priv(self):
        return self._field(MasterPrivateKey, 'master_priv')

    @property
    def private_keys(self):
        return self._field(PrivateKeys, 'private_keys')

    @property
    def public_address(self):
        return self._field(PublicAddress, 'public_address')

    @property
    def legacy_address(self):
        return self._field(PublicAddress, 'legacy_address')

    def to_dict(self) -> dict:
        d = {}
        if self.payload is not None:
            for k, v in self.payload._asdict().items():
                if v is not None:
                    d[k] = list(v) if isinstance(v, tuple) else v
        if self.payment_protocol_url is not None:
            d['payment_protocol_url'] = self.payment_protocol_url
        d['metadata'] = {k: v for k, v in self.metadata._asdict().items()
                         if v is not None}
        if self.native_amount is not None:
            d['currency_code'] = self.currency_code
            d['native_amount'] = self.native_amount
        return d


def _get_formatter(currency_info: CurrencyInfo, formatter):
    if formatter is None:
        return get_address_formatter(currency_info.network)
    return formatter

# Path classifiers. Each takes the path and network and returns a
# payload variant, or None when the path is not of its kind.

def classify_seed(pathname, network):
    try:
        verify_mnemonic(pathname, network)
    except KeyFormatError as e:
        log.debug("Path is not a seed phrase: " + str(e))
        return None
    return Seed(pathname)

def classify_master_priv(pathname, network):
    try:
        verify_bip32_master_privkey(pathname, network)
    except KeyFormatError as e:
        log.debug("Path is not an extended private key: " + str(e))
        return None
    return MasterPrivateKey(pathname)

def classify_wif(pathname, network):
    try:
        verify_wif(pathname, network)
    except KeyFormatError as e:
        log.debug("Path is not a WIF private key: " + str(e))
        return None
    return PrivateKeys((pathname,))

KEY_CLASSIFIERS = (classify_seed, classify_master_priv, classify_wif)


def resolve_address(pathname: str, formatter) -> PublicAddress:
    """ Validates the path as an address, first as written and
    then as a legacy address converted to the current format.
    """
    address = formatter.dirty_address(pathname)
    if formatter.valid_address(address):
        return PublicAddress(address)
    legacy_address = formatter.sanitize_address(address)
    address = formatter.to_new_format(legacy_address)
    if not formatter.valid_address(address):
        raise InvalidPublicAddressError("Invalid address: " + pathname)
    log.debug("Converted legacy address {} to {}".format(legacy_address,
                                                         address))
    return PublicAddress(address, legacy_address)


def classify_pathname(pathname: str, network, formatter):
    for classifier in KEY_CLASSIFIERS:
        payload = classifier(pathname, network)
        if payload is not None:
            return payload
    return resolve_address(pathname, formatter)


def _decode_amount(amount: str, currency_info: CurrencyInfo):
    denomination = currency_info.denomination(currency_info.currency_code)
    if denomination is None:
        log.debug("No {} denomination, ignoring amount {}".format(
            currency_info.currency_code, amount))
        return None, None
    try:
        native_amount = amount_to_native(amount, denomination.multiplier)
    except ValueError as e:
        raise InvalidUriError(str(e))
    return currency_info.currency_code, native_amount


def parse_uri(uri: str, currency_info: CurrencyInfo,
              formatter=None) -> ParsedUri:
    """ Raises InvalidUriError or InvalidPublicAddressError.
    `formatter` defaults to the address formatter of the
    currency's network.
    """
    formatter = _get_formatter(currency_info, formatter)
    scheme, pathname, query = split_uri(uri)
    currency_name = currency_info.currency_name.lower()
    if scheme and scheme != currency_name:
        raise InvalidUriError("URI scheme {} does not belong to {}".format(
            scheme, currency_name))
    payment_protocol_url = query.get('r') or None
    if not pathname and not payment_protocol_url:
        raise InvalidUriError("URI has neither a path nor a payment "
                              "protocol URL")
    payload = None
    if pathname:
        payload = classify_pathname(pathname, currency_info.network,
                                    formatter)
    metadata = Metadata(name=query.get('label') or None,
                        message=query.get('message') or None)
    currency_code = native_amount = None
    if query.get('amount'):
        currency_code, native_amount = _decode_amount(query['amount'],
                                                      currency_info)
    return ParsedUri(payload=payload, metadata=metadata,
                     payment_protocol_url=payment_protocol_url,
                     currency_code=currency_code, native_amount=native_amount)


def _resolve_encode_address(request: EncodeRequest, formatter) -> str:
    legacy_address = request.legacy_address
    public_address = request.public_address
    if legacy_address and formatter.valid_address(
            formatter.to_new_format(legacy_address)):
        return legacy_address
    if public_address and formatter.valid_address(public_address):
        return formatter.dirty_address(public_address)
    raise InvalidPublicAddressError("No valid address to encode")


def _metadata_field(metadata, key: str) -> Optional[str]:
    if isinstance(metadata, dict):
        value = metadata.get(key)
    else:
        value = getattr(metadata, key, None)
    return value if isinstance(value, str) else None


def encode_uri(request: EncodeRequest, currency_info: CurrencyInfo,
               formatter=None) -> str:
    """ Raises InvalidPublicAddressError; raises ValueError if
    an amount is given for a currency code without a denomination.
    Label and message are written as given, callers must not
    pass characters that are reserved in a query ('&', '=').
    """
    formatter = _get_formatter(currency_info, formatter)
    address = _resolve_encode_address(request, formatter)
    scheme = currency_info.currency_name.lower()
    path = formatter.sanitize_address(address)
    if not request.native_amount and request.metadata is None:
        return serialize_uri(scheme, path)
    amount = None
    if request.native_amount:
        code = request.currency_code or currency_info.currency_code
        denomination = currency_info.denomination(code)
        if denomination is None:
            raise ValueError("No denomination " + str(code) +
                             " for currency " + currency_info.currency_code)
        amount = native_to_amount(request.native_amount,
                                  denomination.multiplier)
    params = [('amount', amount),
              ('label', _metadata_field(request.metadata, 'name')),
              ('message', _metadata_field(request.metadata, 'message'))]
    return serialize_uri(scheme, path, params)
