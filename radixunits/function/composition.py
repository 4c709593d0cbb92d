"""
Composition table of the converter algebra.

``simple_compose(left, right)`` returns a single converter equivalent to
applying ``right`` and then ``left``, or ``None`` when the two can only be
chained. Every variant defined in this package is covered; a linear pair
falling outside the table means the algebra is missing a rule.
"""

import math
from typing import Optional

from ..exceptions import UnsupportedCompositionError
from .converter import AbstractConverter, PairConverter
from .power import PowerConverter
from .rational import RationalConverter
from .scalar import AddConverter, MultiplyConverter


def _compose_rationals(left: RationalConverter, right: RationalConverter) -> RationalConverter:
    return RationalConverter(
        left.numerator * right.numerator,
        left.denominator * right.denominator
    )


def _folded_multiply(factor: float) -> Optional[MultiplyConverter]:
    # a factor that underflows or overflows the float range can only be chained
    if factor == 0.0 or not math.isfinite(factor):
        return None
    return MultiplyConverter(factor)


def _compose_power(left: PowerConverter, right: AbstractConverter) -> Optional[AbstractConverter]:
    if isinstance(right, PowerConverter):
        if left.base == right.base:
            return PowerConverter(left.base, left.exponent + right.exponent)
        return None
    if isinstance(right, RationalConverter):
        return _compose_rationals(left.to_rational_converter(), right)
    if isinstance(right, MultiplyConverter):
        # Not exact: the power factor is folded into the float factor
        return _folded_multiply(left.float_factor * right.factor)
    raise UnsupportedCompositionError(left, right)


def _compose_rational(left: RationalConverter, right: AbstractConverter) -> Optional[AbstractConverter]:
    if isinstance(right, PowerConverter):
        return _compose_rationals(left, right.to_rational_converter())
    if isinstance(right, RationalConverter):
        return _compose_rationals(left, right)
    if isinstance(right, MultiplyConverter):
        return _folded_multiply(left.float_factor * right.factor)
    raise UnsupportedCompositionError(left, right)


def _compose_multiply(left: MultiplyConverter, right: AbstractConverter) -> Optional[AbstractConverter]:
    if isinstance(right, (PowerConverter, RationalConverter)):
        return _folded_multiply(left.factor * right.float_factor)
    if isinstance(right, MultiplyConverter):
        return _folded_multiply(left.factor * right.factor)
    raise UnsupportedCompositionError(left, right)


def simple_compose(left: AbstractConverter, right: AbstractConverter) -> Optional[AbstractConverter]:
    """
    Collapse ``left`` after ``right`` into one converter when a rule exists.

    Parameters
    ----------
    left : AbstractConverter
        Converter applied second, never an identity
    right : AbstractConverter
        Converter applied first, never an identity

    Returns
    -------
    AbstractConverter or None
        ``None`` when the pair has to stay a two-step chain

    Raises
    ------
    UnsupportedCompositionError
        For a linear pair with no rule
    """
    if isinstance(left, AddConverter) and isinstance(right, AddConverter):
        return AddConverter(left.offset + right.offset)
    if not (left.is_linear() and right.is_linear()):
        return None
    if isinstance(left, PairConverter) or isinstance(right, PairConverter):
        return None

    if isinstance(left, PowerConverter):
        return _compose_power(left, right)
    if isinstance(left, RationalConverter):
        return _compose_rational(left, right)
    if isinstance(left, MultiplyConverter):
        return _compose_multiply(left, right)
    raise UnsupportedCompositionError(left, right)
