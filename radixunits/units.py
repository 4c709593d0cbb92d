"""
pint binding: maps a conversion between two pint units onto the converter algebra.
"""

import logging
import math
from fractions import Fraction
from functools import lru_cache
from typing import Optional, Union

import pint

from .exceptions import IncompatibleUnitsError, UnsupportedConversionError
from .function import (
    IDENTITY,
    AbstractConverter,
    AddConverter,
    MultiplyConverter,
    PowerConverter,
    RationalConverter,
)


logger = logging.getLogger(__name__)

# Shared unit registry
ureg = pint.UnitRegistry()
Q_ = ureg.Quantity

UnitLike = Union[pint.Unit, str]

# Relative distance under which a float factor is taken as exact
FACTOR_REL_TOL = 1e-15
MAX_DENOMINATOR = 1_000_000


def as_unit(unit: UnitLike, registry: Optional[pint.UnitRegistry] = None) -> pint.Unit:
    """Resolve ``unit`` to a pint unit, parsing strings with ``registry`` (default ``ureg``)."""
    if isinstance(unit, pint.Unit):
        return unit
    if isinstance(unit, str):
        return (registry or ureg).Unit(unit)
    raise TypeError(f"Expected a pint unit or a unit name, got {type(unit).__name__}")


def is_compatible(from_unit: UnitLike, to_unit: UnitLike) -> bool:
    """True when ``from_unit`` can be converted to ``to_unit``."""
    source = as_unit(from_unit)
    return source.is_compatible_with(as_unit(to_unit, source._REGISTRY))


def scale_converter(factor: float) -> AbstractConverter:
    """
    Most exact converter for a multiplicative factor.

    Powers of ten become :class:`PowerConverter`, small ratios such as 1/12
    become :class:`RationalConverter`, anything else stays a float factor.
    """
    if factor == 1.0:
        return IDENTITY
    if factor > 0:
        exponent = round(math.log10(factor))
        if math.isclose(10.0 ** exponent, factor, rel_tol=FACTOR_REL_TOL):
            return PowerConverter(10, exponent)

    ratio = Fraction(factor).limit_denominator(MAX_DENOMINATOR)
    if ratio != 0 and math.isclose(float(ratio), factor, rel_tol=FACTOR_REL_TOL):
        return RationalConverter(ratio.numerator, ratio.denominator)
    return MultiplyConverter(factor)


def get_converter(from_unit: UnitLike, to_unit: UnitLike) -> AbstractConverter:
    """
    Converter from values in ``from_unit`` to values in ``to_unit``.

    Parameters
    ----------
    from_unit : pint.Unit or str
        Source unit
    to_unit : pint.Unit or str
        Target unit; strings are parsed with the registry of ``from_unit``

    Returns
    -------
    AbstractConverter
        A scaling converter, or an offset composed with a scaling for units
        such as degrees Celsius

    Raises
    ------
    IncompatibleUnitsError
        If the units have different dimensionality
    UnsupportedConversionError
        If the conversion is neither linear nor affine (logarithmic units)
    """
    source = as_unit(from_unit)
    target = as_unit(to_unit, source._REGISTRY)
    return _converter_between(source, target)


@lru_cache(maxsize=256)
def _converter_between(source: pint.Unit, target: pint.Unit) -> AbstractConverter:
    if source == target:
        return IDENTITY
    if not source.is_compatible_with(target):
        raise IncompatibleUnitsError(source, target)

    registry = source._REGISTRY
    try:
        at_zero, at_one, at_two = (
            registry.Quantity(float(x), source).to(target).magnitude for x in (0, 1, 2)
        )
    except pint.DimensionalityError as exc:
        raise IncompatibleUnitsError(source, target, str(exc)) from exc

    if not math.isclose(at_two - at_one, at_one - at_zero, rel_tol=1e-9, abs_tol=1e-12):
        raise UnsupportedConversionError(source, target)

    source_factor, _ = registry.get_root_units(source)
    target_factor, _ = registry.get_root_units(target)
    converter = scale_converter(source_factor / target_factor)
    if at_zero != 0.0:
        converter = AddConverter(at_zero).compose(converter)

    logger.debug("converter %s -> %s: %r", source, target, converter)
    return converter
