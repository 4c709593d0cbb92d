"""Number, unit and mixed radix formatting."""

from .real_format import RealFormat
from .unit_format import SimpleUnitFormat
from .mixed_radix import MixedRadix, MixedRadixFormatOptions

__all__ = [
    'RealFormat',
    'SimpleUnitFormat',
    'MixedRadix',
    'MixedRadixFormatOptions',
]
