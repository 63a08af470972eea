from decimal import Decimal, ROUND_DOWN, localcontext
from typing import Union
import re

# Amounts travel as strings in two units:
#  display amount: what a URI carries, e.g. "0.5" (BTC)
#  native amount:  integer string in the smallest unit, e.g. "50000000" (sat)
# The multiplier of a denomination converts display -> native:
# 0.5        * 100000000 = 50000000
# 0.00000001 * 100000000 = 1
# 1.5        * 100       = 150      (bits)

DISPLAY_PLACES = 8

_amount_re = re.compile(r"^([0-9]+(\.[0-9]*)?|\.[0-9]+)$")


def is_amount_str(amount: str) -> bool:
    return _amount_re.match(str(amount).strip()) is not None


def _to_decimal(value: Union[int, str, Decimal], what: str) -> Decimal:
    if isinstance(value, (int, Decimal)):
        value = str(value)
    if not is_amount_str(value):
        raise ValueError("Invalid " + what + " " + str(value))
    return Decimal(value.strip())


def _digits(d: Decimal) -> int:
    return len(d.as_tuple().digits)


def amount_to_native(amount: str, multiplier: Union[int, str]) -> str:
    """ Converts a display amount into an integer string in the
    smallest unit, rounding towards zero. Exact: the context precision
    is widened to hold every digit of the product.
    """
    a = _to_decimal(amount, "amount")
    m = _to_decimal(multiplier, "multiplier")
    with localcontext() as ctx:
        ctx.prec = _digits(a) + _digits(m) + 2
        native = (a * m).to_integral_value(rounding=ROUND_DOWN)
    return str(native)


def native_to_amount(native_amount: Union[int, str], multiplier: Union[int, str],
                     places: int = DISPLAY_PLACES) -> str:
    """ Inverse of amount_to_native: divides by the multiplier and
    truncates to `places` fractional digits. Trailing zeros are
    removed, so 50000000 sat is "0.5" and 100000000 sat is "1".
    """
    n = _to_decimal(native_amount, "native amount")
    m = _to_decimal(multiplier, "multiplier")
    if m == 0:
        raise ValueError("Multiplier must not be zero")
    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = _digits(n) + _digits(m) + places + 2
        ctx.rounding = ROUND_DOWN
        amount = (n / m).quantize(quantum, rounding=ROUND_DOWN)
        amount = amount.normalize()
    return format(amount, 'f')
