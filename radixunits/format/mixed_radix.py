"""
Mixed radix quantities: one quantity written as amounts of successively
smaller units, e.g. ``1 ft 2 in 3 P``.
"""

from dataclasses import dataclass, field, replace
from numbers import Number
from typing import Callable, List, Optional, Tuple

import pint

from ..calculus import EXTRACTION_TOLERANCE, integer_part, is_negligible, normalize_number
from ..exceptions import ArgumentCountError, IncompatibleUnitsError, UnsupportedConversionError
from ..function import AbstractConverter
from ..units import UnitLike, as_unit, get_converter
from .real_format import RealFormat
from .unit_format import SimpleUnitFormat


@dataclass(frozen=True)
class MixedRadixFormatOptions:
    """
    Settings for :meth:`MixedRadix.format`.

    Attributes
    ----------
    real_format : callable
        Renders the last (possibly fractional) part
    unit_format : callable
        Renders a unit symbol
    number_to_unit_delimiter : str
        Text between a number and its unit symbol
    radix_parts_delimiter : str
        Text between successive parts
    """
    real_format: Callable[[Number], str] = field(default_factory=RealFormat)
    unit_format: Callable[[pint.Unit], str] = field(default_factory=SimpleUnitFormat.get_instance)
    number_to_unit_delimiter: str = ' '
    radix_parts_delimiter: str = ' '

    def with_real_format(self, real_format: Callable[[Number], str]) -> 'MixedRadixFormatOptions':
        return replace(self, real_format=real_format)

    def with_unit_format(self, unit_format: Callable[[pint.Unit], str]) -> 'MixedRadixFormatOptions':
        return replace(self, unit_format=unit_format)

    def with_number_to_unit_delimiter(self, delimiter: str) -> 'MixedRadixFormatOptions':
        return replace(self, number_to_unit_delimiter=delimiter)

    def with_radix_parts_delimiter(self, delimiter: str) -> 'MixedRadixFormatOptions':
        return replace(self, radix_parts_delimiter=delimiter)


@dataclass(frozen=True)
class MixedRadix:
    """
    Ordered chain of units: a primary unit followed by smaller secondary units.

    Build it with :meth:`of_primary` and :meth:`mix`; every call returns a new
    chain and leaves the previous one untouched. Units are kept in declaration
    order, which is expected to be descending magnitude.

    Examples
    --------
    >>> radix = MixedRadix.of_primary(ureg.foot).mix(ureg.inch)
    >>> radix.extract_values(radix.create_quantity(1, 6))
    [1, 6.0]
    """
    primary_unit: pint.Unit
    secondary_units: Tuple[pint.Unit, ...] = ()
    tolerance: float = EXTRACTION_TOLERANCE
    _to_primary: Tuple[AbstractConverter, ...] = field(init=False, repr=False, compare=False)
    _from_primary: Tuple[AbstractConverter, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        primary = as_unit(self.primary_unit)
        secondary = tuple(as_unit(unit, primary._REGISTRY) for unit in self.secondary_units)

        seen = [primary]
        for unit in secondary:
            if not unit.is_compatible_with(primary):
                raise IncompatibleUnitsError(unit, primary)
            if unit in seen:
                raise ValueError(f"Unit {unit} appears more than once in the mixed radix")
            seen.append(unit)

        to_primary = tuple(get_converter(unit, primary) for unit in seen)
        for unit, converter in zip(seen, to_primary):
            if not converter.is_linear():
                raise UnsupportedConversionError(unit, primary)

        object.__setattr__(self, 'primary_unit', primary)
        object.__setattr__(self, 'secondary_units', secondary)
        object.__setattr__(self, '_to_primary', to_primary)
        object.__setattr__(self, '_from_primary', tuple(get_converter(primary, unit) for unit in seen))

    @classmethod
    def of_primary(cls, unit: UnitLike, tolerance: float = EXTRACTION_TOLERANCE) -> 'MixedRadix':
        """Start a chain holding only ``unit``."""
        return cls(unit, (), tolerance)

    def mix(self, unit: UnitLike) -> 'MixedRadix':
        """Return a new chain with ``unit`` appended as the smallest unit."""
        return replace(self, secondary_units=self.secondary_units + (unit,))

    @property
    def units(self) -> Tuple[pint.Unit, ...]:
        return (self.primary_unit,) + self.secondary_units

    def __len__(self) -> int:
        return 1 + len(self.secondary_units)

    def create_quantity(self, *values: Number) -> pint.Quantity:
        """
        Build a quantity from one amount per unit.

        Parameters
        ----------
        *values : numbers
            ``values[0]`` is the amount of the primary unit, ``values[1]`` of
            the first secondary unit, and so on. Units without a value
            contribute nothing.

        Returns
        -------
        pint.Quantity
            Sum of all contributions, in the primary unit. With a single value
            its number type is kept; otherwise the sum is a float.

        Raises
        ------
        ArgumentCountError
            If more values than units are given
        """
        if len(values) > len(self):
            raise ArgumentCountError(len(values), len(self))

        registry = self.primary_unit._REGISTRY
        if not values:
            return registry.Quantity(0, self.primary_unit)

        values = [normalize_number(value) for value in values]
        if len(values) == 1:
            return registry.Quantity(values[0], self.primary_unit)

        total = float(values[0])
        for value, converter in zip(values[1:], self._to_primary[1:]):
            total += converter.convert(float(value))
        return registry.Quantity(total, self.primary_unit)

    def extract_values(self, quantity: pint.Quantity) -> List[Number]:
        """
        Split a quantity into one amount per unit.

        Every unit but the last receives a whole count (an ``int``); the last
        unit receives what is left, untruncated. A single-unit chain returns
        the full value.

        Parameters
        ----------
        quantity : pint.Quantity
            Quantity convertible to the primary unit

        Returns
        -------
        list
            ``len(self)`` amounts, largest unit first

        Raises
        ------
        IncompatibleUnitsError
            If the quantity cannot be expressed in the primary unit
        """
        if not isinstance(quantity, pint.Quantity):
            raise TypeError(f"Expected a pint.Quantity, got {type(quantity).__name__}")
        if not quantity.units.is_compatible_with(self.primary_unit):
            raise IncompatibleUnitsError(quantity.units, self.primary_unit)

        converter = get_converter(quantity.units, self.primary_unit)
        value = converter.convert(normalize_number(quantity.magnitude))
        if len(self) == 1:
            return [value]

        remaining = float(value)
        values = []
        for to_primary, from_primary in zip(self._to_primary[:-1], self._from_primary[:-1]):
            count = integer_part(from_primary.convert(remaining), self.tolerance)
            values.append(count)
            remaining -= to_primary.convert(float(count))
        values.append(self._from_primary[-1].convert(remaining))
        return values

    def format(self, quantity: pint.Quantity, options: Optional[MixedRadixFormatOptions] = None) -> str:
        """
        Render a quantity part by part, e.g. ``"1 ft 2 in 3. P"``.

        Whole counts are written as plain integers, the last unit's amount with
        ``options.real_format``. Trailing parts that are zero are left out, so a
        quantity built from its primary value alone renders as that part only.
        The primary part is always written.
        """
        if options is None:
            options = MixedRadixFormatOptions()

        values = self.extract_values(quantity)
        last_index = len(values) - 1
        shown = last_index
        while shown > 0 and is_negligible(values[shown], self.tolerance):
            shown -= 1

        parts = []
        for index in range(shown + 1):
            value = values[index]
            number = options.real_format(value) if index == last_index else str(value)
            symbol = options.unit_format(self.units[index])
            parts.append(f"{number}{options.number_to_unit_delimiter}{symbol}")
        return options.radix_parts_delimiter.join(parts)
