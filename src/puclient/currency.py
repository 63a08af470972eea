from collections import namedtuple
from typing import Optional

# A display unit of a currency; `multiplier` converts an amount
# in this unit into the smallest indivisible unit (an integer string).
Denomination = namedtuple('Denomination', ['name', 'multiplier', 'symbol'],
                          defaults=(None,))


class CurrencyInfo(namedtuple('CurrencyInfo', ['currency_code', 'currency_name',
                                               'network', 'denominations'])):
    """ Read-only currency metadata: the code (e.g. BTC), the name
    whose lower-case form is the URI scheme (e.g. Bitcoin), the
    network type tag and the denominations, at most one per name.
    """
    __slots__ = ()

    def __new__(cls, currency_code, currency_name, network, denominations):
        denoms = []
        for d in denominations:
            if isinstance(d, dict):
                d = Denomination(**d)
            elif not isinstance(d, Denomination):
                d = Denomination(*d)
            denoms.append(d._replace(multiplier=str(d.multiplier)))
        names = [d.name for d in denoms]
        if len(set(names)) != len(names):
            raise ValueError("Duplicate denomination names for currency " +
                             str(currency_code))
        return super().__new__(cls, currency_code, currency_name, network,
                               tuple(denoms))

    def denomination(self, name: str) -> Optional[Denomination]:
        for d in self.denominations:
            if d.name == name:
                return d
        return None
