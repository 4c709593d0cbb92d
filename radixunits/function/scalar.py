"""
Converters backed by a floating point parameter.

These are the approximate variants: integer input cannot stay exact, so it
goes through ``Decimal`` in the working context.
"""

import math
from dataclasses import dataclass
from decimal import Context, Decimal
from numbers import Real
from typing import Any, Tuple, Union

from ..calculus import get_math_context
from ..exceptions import InvalidConverterError
from .converter import AbstractConverter


def _as_float(name: str, value: Real) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{name} must be a real number, got {type(value).__name__}")
    return float(value)


@dataclass(frozen=True, eq=False)
class MultiplyConverter(AbstractConverter):
    """Converter multiplying by an approximate factor."""
    factor: float

    def __post_init__(self):
        factor = _as_float('factor', self.factor)
        if factor == 0.0 or math.isnan(factor):
            raise InvalidConverterError(f"factor must be non-zero, got {factor}")
        object.__setattr__(self, 'factor', factor)

    def is_identity(self) -> bool:
        return self.factor == 1.0

    def is_linear(self) -> bool:
        return True

    def inverse(self) -> 'MultiplyConverter':
        return self if self.is_identity() else MultiplyConverter(1.0 / self.factor)

    def _parameters(self) -> Tuple[Any, ...]:
        return (self.factor,)

    def _convert_int(self, value: int, context: Context) -> Union[int, Decimal]:
        return get_math_context().multiply(Decimal(value), Decimal(repr(self.factor)))

    def _convert_decimal(self, value: Decimal, context: Context) -> Decimal:
        return context.multiply(value, Decimal(repr(self.factor)))

    def _convert_float(self, value: float) -> float:
        return value * self.factor


@dataclass(frozen=True, eq=False)
class AddConverter(AbstractConverter):
    """Converter adding an offset; affine, hence not linear."""
    offset: float

    def __post_init__(self):
        offset = _as_float('offset', self.offset)
        if math.isnan(offset):
            raise InvalidConverterError("offset can not be NaN")
        object.__setattr__(self, 'offset', offset)

    def is_identity(self) -> bool:
        return self.offset == 0.0

    def is_linear(self) -> bool:
        return False

    def inverse(self) -> 'AddConverter':
        return self if self.is_identity() else AddConverter(-self.offset)

    def _parameters(self) -> Tuple[Any, ...]:
        return (self.offset,)

    def _convert_int(self, value: int, context: Context) -> Union[int, Decimal]:
        if self.offset.is_integer():
            return value + int(self.offset)
        return get_math_context().add(Decimal(value), Decimal(repr(self.offset)))

    def _convert_decimal(self, value: Decimal, context: Context) -> Decimal:
        return context.add(value, Decimal(repr(self.offset)))

    def _convert_float(self, value: float) -> float:
        return value + self.offset
