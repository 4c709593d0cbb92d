import logging
import math
import warnings
from dataclasses import dataclass, field
from decimal import Context, Decimal
from fractions import Fraction
from math import gcd
from typing import Any, Tuple, Union

import numpy as np

from ..calculus import get_math_context
from ..exceptions import InvalidConverterError
from .converter import AbstractConverter


logger = logging.getLogger(__name__)


def _float_ratio(numerator: int, denominator: int) -> float:
    """``numerator / denominator`` as a float, infinite when it overflows."""
    try:
        return numerator / denominator
    except OverflowError:
        warnings.warn(
            f"{numerator}/{denominator} exceeds the float range; "
            f"floating point conversions will not be finite",
            RuntimeWarning
        )
        return math.copysign(math.inf, numerator)


@dataclass(frozen=True, eq=False)
class RationalConverter(AbstractConverter):
    """
    Converter whose factor is the exact ratio ``numerator / denominator``.

    The ratio is kept reduced, with a positive denominator.
    """
    numerator: int
    denominator: int
    _float_factor: float = field(init=False, repr=False)

    def __post_init__(self):
        for name in ('numerator', 'denominator'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise TypeError(f"{name} must be an integer, got {type(value).__name__}")

        numerator, denominator = int(self.numerator), int(self.denominator)
        if denominator == 0:
            raise InvalidConverterError(f"denominator can not be zero (numerator {numerator})")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        divisor = gcd(numerator, denominator)
        object.__setattr__(self, 'numerator', numerator // divisor)
        object.__setattr__(self, 'denominator', denominator // divisor)
        object.__setattr__(self, '_float_factor', _float_ratio(self.numerator, self.denominator))

    @classmethod
    def of(cls, numerator: int, denominator: int = 1) -> 'RationalConverter':
        return cls(numerator, denominator)

    @property
    def factor(self) -> Fraction:
        return Fraction(self.numerator, self.denominator)

    @property
    def float_factor(self) -> float:
        return self._float_factor

    def is_identity(self) -> bool:
        return self.numerator == self.denominator

    def is_linear(self) -> bool:
        return True

    def inverse(self) -> 'RationalConverter':
        return self if self.is_identity() else RationalConverter(self.denominator, self.numerator)

    def _parameters(self) -> Tuple[Any, ...]:
        return (self.numerator, self.denominator)

    def _convert_int(self, value: int, context: Context) -> Union[int, Decimal]:
        product = value * self.numerator
        quotient, remainder = divmod(product, self.denominator)
        if remainder == 0:
            return quotient

        logger.debug("%r: %d is not a multiple of %d, falling back to Decimal", self, product, self.denominator)
        return get_math_context().divide(Decimal(product), Decimal(self.denominator))

    def _convert_decimal(self, value: Decimal, context: Context) -> Decimal:
        product = context.multiply(value, Decimal(self.numerator))
        return context.divide(product, Decimal(self.denominator))

    def _convert_float(self, value: float) -> float:
        return value * self._float_factor

    def __repr__(self) -> str:
        return f"RationalConverter({self.numerator}/{self.denominator})"
