# https://github.com/bitcoin/bips/blob/master/bip-0021.mediawiki
# bitcoin:<address>[?amount=<amount>][?label=<label>][?message=<message>]
# Tokenizing and serializing only; what the path holds (address, key
# or seed) and what the parameters mean is decided by the caller.

from typing import Dict, List, Optional, Tuple
from urllib.parse import parse_qsl, quote, unquote, urlparse

# characters RFC 3986 permits verbatim in a query, less '+' which
# form decoding reads as a space; everything
# else (spaces, non-ascii, '#') is percent-encoded on output.
QUERY_SAFE = "!$&'()*,;=:@/?"


def split_uri(uri: str) -> Tuple[str, str, Dict[str, str]]:
    """ Splits a payment URI into (scheme, pathname, query).
    Never raises: anything that cannot be tokenized comes back
    as empty fields. Scheme is lower-cased, pathname is
    percent-decoded, and only the first value of a repeated
    query key is kept.
    """
    if not isinstance(uri, str):
        return '', '', {}
    try:
        parsed = urlparse(uri.strip())
    except ValueError:
        return '', '', {}
    pathname = parsed.path
    # "bitcoin://<address>" as written by some wallets
    if not pathname and parsed.netloc:
        pathname = parsed.netloc
    query = {}
    for key, value in parse_qsl(parsed.query, keep_blank_values=True):
        if key not in query:
            query[key] = value
    return parsed.scheme.lower(), unquote(pathname), query


def build_query(params: List[Tuple[str, Optional[str]]]) -> str:
    """ Joins ordered (key, value) pairs, skipping pairs
    whose value is None.
    """
    return "&".join(key + "=" + quote(str(value), safe=QUERY_SAFE)
                    for key, value in params if value is not None)


def serialize_uri(scheme: str, path: str,
                  params: List[Tuple[str, Optional[str]]] = ()) -> str:
    uri = scheme + ':' + path
    query = build_query(list(params))
    if query:
        uri += '?' + query
    return uri
