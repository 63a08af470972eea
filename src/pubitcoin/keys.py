"""Syntactic checks for the secrets that can turn up
in the path of a payment URI: BIP39 seed phrases, BIP32
extended private keys and WIF private keys.

Each verify_* function returns None when the string parses
as that kind of secret for the given network, and raises
KeyFormatError otherwise. Nothing here derives keys; a valid
secret is only range-checked against the curve order.
"""
import struct

import coincurve as secp256k1
from bitcointx import base58
from bitcointx.core import Hash
from mnemonic import Mnemonic

from .networks import get_network_settings

BIP39_WORD_COUNTS = (12, 15, 18, 21, 24)
BIP32_SERIALIZED_LENGTH = 78


class KeyFormatError(Exception):
    pass


class ExtendedPublicKeyError(KeyFormatError):
    pass


_mnemonic = Mnemonic("english")

# b58check wrapper functions around bitcointx.base58 functions:

def bin_to_b58check(inp, magicbyte=b'\x00'):
    """ The magic byte (prefix) should be passed either as bytes
    or an integer. What is returned is a string in base58 encoding,
    with the prefix and the checksum.
    """
    if isinstance(magicbyte, int):
        magicbyte = struct.pack(b'B', magicbyte)
    inp_fmtd = magicbyte + inp
    checksum = Hash(inp_fmtd)[:4]
    return base58.encode(inp_fmtd + checksum)

def b58check_decode(s):
    """ Returns the payload (prefix included) of a base58check
    string, or raises KeyFormatError.
    """
    if not isinstance(s, str) or not s:
        raise KeyFormatError("Not a base58check string")
    try:
        data = base58.decode(s)
    except base58.Base58Error as e:
        raise KeyFormatError("Invalid base58: " + repr(e))
    if len(data) < 5 or Hash(data[:-4])[:4] != data[-4:]:
        raise KeyFormatError("Checksum wrong")
    return data[:-4]

def b58check_to_bin(s):
    data = b58check_decode(s)
    return data[:1], data[1:]

def get_version_byte(s):
    return b58check_to_bin(s)[0]

def read_privkey(priv):
    if len(priv) == 33:
        if priv[-1:] == b'\x01':
            compressed = True
        else:
            raise KeyFormatError("Invalid private key")
    elif len(priv) == 32:
        compressed = False
    else:
        raise KeyFormatError("Invalid private key")
    return (compressed, priv[:32])

def _check_secret(secret):
    # coincurve refuses zero and anything not below the group order
    try:
        secp256k1.PrivateKey(secret)
    except ValueError as e:
        raise KeyFormatError("Private key out of range: " + repr(e))

def verify_mnemonic(phrase, network=None):
    """ BIP39 seeds carry no network information, so
    `network` is accepted for symmetry only.
    """
    if not isinstance(phrase, str):
        raise KeyFormatError("Mnemonic must be a string")
    words = phrase.lower().split()
    if len(words) not in BIP39_WORD_COUNTS:
        raise KeyFormatError("Invalid mnemonic length")
    if not _mnemonic.check(" ".join(words)):
        raise KeyFormatError("Invalid mnemonic seed.")

def verify_bip32_master_privkey(xprv, network):
    settings = get_network_settings(network)
    data = b58check_decode(xprv)
    if len(data) != BIP32_SERIALIZED_LENGTH:
        raise KeyFormatError("Invalid extended key length")
    vbytes = data[0:4]
    depth = data[4]
    fingerprint = data[5:9]
    i = data[9:13]
    keydata = data[45:78]
    if vbytes == settings.bip32_pub_vbytes:
        raise ExtendedPublicKeyError("Extended public key, not a private "
                                     "key")
    if vbytes != settings.bip32_priv_vbytes:
        raise KeyFormatError("Extended key is not a private key for "
                             "network " + settings.name)
    if depth == 0 and (fingerprint != b'\x00' * 4 or i != b'\x00' * 4):
        raise KeyFormatError("Zero depth key with non-zero parent")
    if keydata[:1] != b'\x00':
        raise KeyFormatError("Invalid private key data")
    _check_secret(keydata[1:])

def verify_wif(wif, network):
    settings = get_network_settings(network)
    vbyte, raw = b58check_to_bin(wif)
    if vbyte != settings.wif_prefix:
        raise KeyFormatError("WIF prefix does not match network " +
                             settings.name)
    compressed, priv = read_privkey(raw)
    _check_secret(priv)
