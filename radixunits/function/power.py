import logging
import math
import warnings
from dataclasses import dataclass, field
from decimal import Context, Decimal
from typing import Any, Tuple, Union

import numpy as np

from ..calculus import get_math_context
from ..exceptions import InvalidConverterError
from .converter import AbstractConverter
from .rational import RationalConverter


logger = logging.getLogger(__name__)


def _float_power(base: int, exponent: int) -> float:
    """``abs(base) ** abs(exponent)`` as a float, infinite when it overflows."""
    try:
        return float(abs(base)) ** abs(exponent)
    except OverflowError:
        warnings.warn(
            f"{base}^{exponent} exceeds the float range; "
            f"floating point conversions will not be finite",
            RuntimeWarning
        )
        return math.inf


@dataclass(frozen=True, eq=False)
class PowerConverter(AbstractConverter):
    """
    Converter whose factor is ``base ** exponent``.

    Integer conversions stay exact whenever the result is integral, so
    ``PowerConverter(10, 3).inverse().convert(5000)`` gives ``5`` and not
    ``5.0``. Only a non-integral quotient falls back to ``Decimal``.

    Parameters
    ----------
    base : int
        Non-zero base (0^0 is undefined)
    exponent : int
        Exponent, may be negative

    Notes
    -----
    ``repr`` renders the factor as ``base^exponent``, e.g.
    ``PowerConverter(10^3)``.
    """
    base: int
    exponent: int
    _magnitude: float = field(init=False, repr=False)
    _hash: int = field(init=False, repr=False)

    def __post_init__(self):
        for name in ('base', 'exponent'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
            object.__setattr__(self, name, int(value))

        if self.base == 0:
            raise InvalidConverterError("base can not be zero (because 0^0 is undefined)")

        object.__setattr__(self, '_magnitude', _float_power(self.base, self.exponent))
        object.__setattr__(self, '_hash', AbstractConverter.__hash__(self))

    @classmethod
    def of(cls, base: int, exponent: int) -> 'PowerConverter':
        return cls(base, exponent)

    @classmethod
    def of_prefix(cls, prefix: Any) -> 'PowerConverter':
        """Converter for a unit prefix exposing ``base`` and ``exponent``."""
        return cls(prefix.base, prefix.exponent)

    @property
    def float_factor(self) -> float:
        """``base ** exponent`` in floating point."""
        sign = -1.0 if self.base < 0 and self.exponent % 2 else 1.0
        if self.exponent >= 0:
            return sign * self._magnitude
        return sign / self._magnitude

    def is_identity(self) -> bool:
        """
        True iff ``base == 1`` or ``exponent == 0``.

        Other factors equal to one, such as ``(-1)^2``, are not identities:
        they still compare and hash by their parameters.
        """
        # 1^x = 1 and x^0 = 1; 0^0 is ruled out by the constructor
        return self.base == 1 or self.exponent == 0

    def is_linear(self) -> bool:
        return True

    def inverse(self) -> 'PowerConverter':
        return self if self.is_identity() else PowerConverter(self.base, -self.exponent)

    def to_rational_converter(self) -> RationalConverter:
        """Exact rational equivalent of this converter."""
        if self.exponent > 0:
            return RationalConverter(self.base ** self.exponent, 1)
        return RationalConverter(1, self.base ** -self.exponent)

    def _parameters(self) -> Tuple[Any, ...]:
        return (self.base, self.exponent)

    def _convert_int(self, value: int, context: Context) -> Union[int, Decimal]:
        factor = self.base ** abs(self.exponent)
        if self.exponent > 0:
            return value * factor

        quotient, remainder = divmod(value, factor)
        if remainder == 0:
            return quotient

        logger.debug("%r: %d is not a multiple of %d, falling back to Decimal", self, value, factor)
        return get_math_context().divide(Decimal(value), Decimal(factor))

    def _convert_decimal(self, value: Decimal, context: Context) -> Decimal:
        factor = Decimal(self.base ** abs(self.exponent))
        if self.exponent > 0:
            return context.multiply(value, factor)
        return context.divide(value, factor)

    def _convert_float(self, value: float) -> float:
        sign = -1.0 if self.base < 0 and self.exponent % 2 else 1.0
        if self.exponent > 0:
            return sign * value * self._magnitude
        return sign * value / self._magnitude

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        return f"PowerConverter({self.base}^{self.exponent})"
