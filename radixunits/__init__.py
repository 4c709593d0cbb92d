"""
radixunits - Unit Conversion Algebra and Mixed Radix Quantities
===============================================================

Exact, composable unit converters and composite quantities built on pint.

Main Features:
- Power, rational, multiply and offset converters with algebraic simplification
- Exactness-preserving integer conversion with a decimal fallback
- Converters between any two pint units
- Mixed radix quantities (e.g. feet-inches-picas): construction, decomposition
  and formatting
"""

__version__ = "0.1.0"
__author__ = "radixunits Development Team"

from .exceptions import (
    ArgumentCountError,
    IncompatibleUnitsError,
    InvalidConverterError,
    UnsupportedCompositionError,
    UnsupportedConversionError,
)
from .function import (
    IDENTITY,
    AbstractConverter,
    AddConverter,
    MultiplyConverter,
    PairConverter,
    PowerConverter,
    RationalConverter,
    power_converter,
)
from .prefix import BinaryPrefix, MetricPrefix
from .units import Q_, get_converter, ureg
from .format import MixedRadix, MixedRadixFormatOptions, RealFormat, SimpleUnitFormat

__all__ = [
    'ArgumentCountError',
    'IncompatibleUnitsError',
    'InvalidConverterError',
    'UnsupportedCompositionError',
    'UnsupportedConversionError',
    'IDENTITY',
    'AbstractConverter',
    'AddConverter',
    'MultiplyConverter',
    'PairConverter',
    'PowerConverter',
    'RationalConverter',
    'power_converter',
    'BinaryPrefix',
    'MetricPrefix',
    'Q_',
    'get_converter',
    'ureg',
    'MixedRadix',
    'MixedRadixFormatOptions',
    'RealFormat',
    'SimpleUnitFormat',
]
