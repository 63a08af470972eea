# If user has compiled and installed libsecp256k1 system-wide, python-bitcointx
# finds it by itself; a copy next to the interpreter (as installed by a
# bundled installer) is preferred when present.
# Nothing in this package needs libsecp256k1 through bitcointx: addresses
# are parsed without EC operations and private keys are range-checked
# with coincurve, which ships its own copy.
import os, sys
if sys.platform in ('windows', 'win32'):
    expected_secp_location = os.path.join(os.path.dirname(os.path.dirname(__file__)), 'libsecp256k1-0.dll')
else:
    if sys.platform == "darwin":
        secp_name = "libsecp256k1.dylib"
    else:
        secp_name = "libsecp256k1.so"
    expected_secp_location = os.path.join(sys.prefix, "lib", secp_name)
if os.path.exists(expected_secp_location):
    import bitcointx
    bitcointx.set_custom_secp256k1_path(expected_secp_location)

from pubitcoin.networks import *
from pubitcoin.keys import *
from pubitcoin.amount import *
from pubitcoin.address_format import *
from pubitcoin.bip21 import *
from pubitcoin.hd import *
