
from .currency import CurrencyInfo, Denomination
from .uri import (PaymentUriError, InvalidUriError, InvalidPublicAddressError,
                  Seed, MasterPrivateKey, PrivateKeys, PublicAddress, Metadata,
                  ParsedUri, EncodeRequest, parse_uri, encode_uri,
                  classify_pathname, resolve_address)
from .configure import (load_program_config, pu_single, get_currency_info,
                        get_currency_codes, get_default_currency,
                        parse_denominations)
from .uri_tool import uri_tool_main, get_uritool_parser
