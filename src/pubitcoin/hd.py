"""Types describing hierarchical deterministic (BIP32) paths.

A Path is a list of index strings as they are written in a
path representation, e.g. ["44'", "0'", "0'"] for m/44'/0'/0'.
Nothing here derives keys; these are the shapes that callers
(and wallet configuration) use to talk about where keys live.
"""
from collections import namedtuple
from numbers import Integral
from typing import List, Optional

BIP32_MAX_PATH_LEVEL = 2**31


class HDPathError(Exception):
    pass


class ScriptType:
    P2PKH = 'P2PKH'
    P2PKH_AIRBITZ = 'P2PKH-AIRBITZ'
    P2SH = 'P2SH'
    P2WPKH_P2SH = 'P2WPKH-P2SH'
    P2WPKH = 'P2WPKH'
    P2WSH = 'P2WSH'

SCRIPT_TYPES = (ScriptType.P2PKH, ScriptType.P2PKH_AIRBITZ, ScriptType.P2SH,
                ScriptType.P2WPKH_P2SH, ScriptType.P2WPKH, ScriptType.P2WSH)


class Chain:
    EXTERNAL = 'external'
    INTERNAL = 'internal'

CHAIN_INDEX = {Chain.EXTERNAL: 0, Chain.INTERNAL: 1}

# BIP44 / BIP49 / BIP84 purpose levels
PURPOSES = {ScriptType.P2PKH: 44, ScriptType.P2WPKH_P2SH: 49,
            ScriptType.P2WPKH: 84}

HDPath = namedtuple('HDPath', ['path', 'chain', 'script_type'],
                    defaults=(None, None))
HDStandardPathParams = namedtuple('HDStandardPathParams',
                                  ['account', 'coin_type'], defaults=(0, 0))


def harden(lvl: int) -> int:
    if not isinstance(lvl, Integral) or not 0 <= lvl < BIP32_MAX_PATH_LEVEL:
        raise HDPathError("Unable to derive hardened path level from {}."
                          "".format(lvl))
    return lvl + BIP32_MAX_PATH_LEVEL


def index_to_int(index: str) -> int:
    """ "44'" -> 2**31 + 44, "0" -> 0. The 'h' suffix is
    accepted as a synonym of the apostrophe.
    """
    hardened = index[-1:] in ("'", "h", "H")
    digits = index[:-1] if hardened else index
    if not digits.isdigit():
        raise HDPathError("Invalid path level {}.".format(index))
    lvl = int(digits)
    if lvl >= BIP32_MAX_PATH_LEVEL:
        raise HDPathError("Invalid path level {}.".format(index))
    return harden(lvl) if hardened else lvl


def int_to_index(lvl: int) -> str:
    if not isinstance(lvl, Integral) or not 0 <= lvl < BIP32_MAX_PATH_LEVEL * 2:
        raise HDPathError("Invalid path level {}.".format(lvl))
    if lvl < BIP32_MAX_PATH_LEVEL:
        return str(lvl)
    return str(lvl - BIP32_MAX_PATH_LEVEL) + "'"


def parse_path(pathstr: str) -> List[str]:
    spath = pathstr.strip().split('/')
    if spath[0] != 'm':
        raise HDPathError("Not a valid path: {}".format(pathstr))
    levels = [s for s in spath[1:] if s != '']
    return [int_to_index(index_to_int(s)) for s in levels]


def path_to_str(path: List[str]) -> str:
    return '/'.join(['m'] + [int_to_index(index_to_int(s)) for s in path])


def standard_path(script_type: str,
                  params: Optional[HDStandardPathParams] = None) -> HDPath:
    """ The account level path of the standard derivation
    scheme for a script type, e.g. m/84'/0'/0' for P2WPKH.
    """
    if script_type not in PURPOSES:
        raise HDPathError("No standard path for script type " +
                          str(script_type))
    if params is None:
        params = HDStandardPathParams()
    path = [int_to_index(harden(x)) for x in (PURPOSES[script_type],
                                               params.coin_type,
                                               params.account)]
    return HDPath(path=path, script_type=script_type)


def chain_path(hd_path: HDPath, chain: str) -> HDPath:
    """ Extends an account path by the external (0) or
    internal (1) chain level.
    """
    if chain not in CHAIN_INDEX:
        raise HDPathError("Unknown chain " + str(chain))
    if hd_path.script_type is not None and \
            hd_path.script_type not in SCRIPT_TYPES:
        raise HDPathError("Unknown script type " + str(hd_path.script_type))
    return HDPath(path=list(hd_path.path) + [str(CHAIN_INDEX[chain])],
                  chain=chain, script_type=hd_path.script_type)
