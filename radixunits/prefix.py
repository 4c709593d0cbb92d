"""
Unit prefixes as ``base ** exponent`` factors, for use with
:meth:`radixunits.function.PowerConverter.of_prefix`.
"""

from enum import Enum


class _Prefix(Enum):

    def __init__(self, symbol: str, base: int, exponent: int):
        self.symbol = symbol
        self.base = base
        self.exponent = exponent

    def converter(self):
        from .function import PowerConverter
        return PowerConverter.of_prefix(self)


class MetricPrefix(_Prefix):
    """SI prefixes, powers of ten."""
    YOTTA = ('Y', 10, 24)
    ZETTA = ('Z', 10, 21)
    EXA = ('E', 10, 18)
    PETA = ('P', 10, 15)
    TERA = ('T', 10, 12)
    GIGA = ('G', 10, 9)
    MEGA = ('M', 10, 6)
    KILO = ('k', 10, 3)
    HECTO = ('h', 10, 2)
    DECA = ('da', 10, 1)
    DECI = ('d', 10, -1)
    CENTI = ('c', 10, -2)
    MILLI = ('m', 10, -3)
    MICRO = ('µ', 10, -6)
    NANO = ('n', 10, -9)
    PICO = ('p', 10, -12)
    FEMTO = ('f', 10, -15)
    ATTO = ('a', 10, -18)
    ZEPTO = ('z', 10, -21)
    YOCTO = ('y', 10, -24)


class BinaryPrefix(_Prefix):
    """IEC prefixes, powers of 1024."""
    KIBI = ('Ki', 1024, 1)
    MEBI = ('Mi', 1024, 2)
    GIBI = ('Gi', 1024, 3)
    TEBI = ('Ti', 1024, 4)
    PEBI = ('Pi', 1024, 5)
    EXBI = ('Ei', 1024, 6)
    ZEBI = ('Zi', 1024, 7)
    YOBI = ('Yi', 1024, 8)
