"""Converter algebra."""

from .converter import IDENTITY, AbstractConverter, IdentityConverter, PairConverter
from .rational import RationalConverter
from .power import PowerConverter
from .scalar import AddConverter, MultiplyConverter
from .composition import simple_compose


def power_converter(base: int, exponent: int) -> PowerConverter:
    """Factory for ``base ** exponent`` converters."""
    return PowerConverter.of(base, exponent)


__all__ = [
    'IDENTITY',
    'AbstractConverter',
    'IdentityConverter',
    'PairConverter',
    'PowerConverter',
    'RationalConverter',
    'MultiplyConverter',
    'AddConverter',
    'simple_compose',
    'power_converter',
]
