"""
Unit converters: immutable transformations between two numeric representations
of the same physical quantity.

Every converter exposes the same surface:

- ``is_identity()`` / ``is_linear()``
- ``compose(other)``: the converter applying ``other`` first, then ``self``
- ``inverse()``
- ``convert(value, context=None)`` for ``int``, ``decimal.Decimal`` and ``float``

Identity converters compare equal to each other whatever their concrete type
and sort before every other converter; hashing is consistent with that rule.
"""

from dataclasses import dataclass
from decimal import Context, Decimal
from functools import total_ordering
from numbers import Number
from typing import Any, List, Optional, Tuple, Union

from ..calculus import get_math_context, normalize_number


_IDENTITY_HASH = hash("radixunits.function.identity")

Numeric = Union[int, float, Decimal]


@total_ordering
class AbstractConverter:
    """Base class of all converters."""

    def is_identity(self) -> bool:
        raise NotImplementedError

    def is_linear(self) -> bool:
        return True

    def inverse(self) -> 'AbstractConverter':
        raise NotImplementedError

    def _parameters(self) -> Tuple[Any, ...]:
        """Defining parameters, used for equality, hashing and ordering."""
        raise NotImplementedError

    def compose(self, other: 'AbstractConverter') -> 'AbstractConverter':
        """
        Compose two converters.

        The result is equivalent to converting with ``other`` first and then
        with ``self``. Pairs covered by the composition table collapse into a
        single converter, anything else becomes a :class:`PairConverter`.

        Parameters
        ----------
        other : AbstractConverter
            Converter applied first

        Returns
        -------
        AbstractConverter
            ``IDENTITY`` when the composition cancels out
        """
        if not isinstance(other, AbstractConverter):
            raise TypeError(f"Cannot compose a converter with {type(other).__name__}")
        if self.is_identity():
            return IDENTITY if other.is_identity() else other
        if other.is_identity():
            return self

        from .composition import simple_compose
        composed = simple_compose(self, other)
        if composed is None:
            return PairConverter(self, other)
        return IDENTITY if composed.is_identity() else composed

    def convert(self, value: Number, context: Optional[Context] = None) -> Numeric:
        """
        Convert a number.

        Parameters
        ----------
        value : int, decimal.Decimal or float
            Value to convert; numpy scalars are accepted
        context : decimal.Context, optional
            Rounding context for decimal input. Defaults to the working
            context of :mod:`radixunits.calculus`

        Returns
        -------
        int, decimal.Decimal or float
            Integer input stays an integer whenever the result is exact and
            degrades to ``Decimal`` otherwise. Decimal input gives ``Decimal``,
            float input gives ``float``. An identity returns ``value`` itself.
        """
        if self.is_identity():
            return value

        value = normalize_number(value)
        if context is None:
            context = get_math_context()

        if isinstance(value, bool):
            raise TypeError("Cannot convert a bool")
        if isinstance(value, int):
            return self._convert_int(value, context)
        if isinstance(value, Decimal):
            return self._convert_decimal(value, context)
        if isinstance(value, float):
            return self._convert_float(value)
        raise TypeError(f"Cannot convert value of type {type(value).__name__}")

    def __call__(self, value: Number, context: Optional[Context] = None) -> Numeric:
        return self.convert(value, context)

    def _convert_int(self, value: int, context: Context) -> Union[int, Decimal]:
        raise NotImplementedError

    def _convert_decimal(self, value: Decimal, context: Context) -> Decimal:
        raise NotImplementedError

    def _convert_float(self, value: float) -> float:
        raise NotImplementedError

    def conversion_steps(self) -> List['AbstractConverter']:
        """Non-identity steps, in composition order (the last one runs first)."""
        return [] if self.is_identity() else [self]

    # -- comparison

    def _type_name(self) -> str:
        cls = type(self)
        return f"{cls.__module__}.{cls.__qualname__}"

    def _compare(self, other: 'AbstractConverter') -> int:
        if self is other:
            return 0
        # identities sort before every non-identity
        if self.is_identity() or other.is_identity():
            return int(other.is_identity()) - int(self.is_identity())
        if type(self) is type(other):
            mine, theirs = self._parameters(), other._parameters()
        else:
            mine, theirs = self._type_name(), other._type_name()
        if mine == theirs:
            return 0
        return -1 if mine < theirs else 1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AbstractConverter):
            return NotImplemented
        if self is other:
            return True
        if self.is_identity() and other.is_identity():
            return True
        return type(self) is type(other) and self._parameters() == other._parameters()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, AbstractConverter):
            return NotImplemented
        return self._compare(other) < 0

    def __hash__(self) -> int:
        if self.is_identity():
            return _IDENTITY_HASH
        return hash((self._type_name(), self._parameters()))


@dataclass(frozen=True, eq=False)
class IdentityConverter(AbstractConverter):
    """Converter leaving every value unchanged."""

    def is_identity(self) -> bool:
        return True

    def inverse(self) -> 'IdentityConverter':
        return self

    def _parameters(self) -> Tuple[Any, ...]:
        return ()

    def __repr__(self) -> str:
        return "IdentityConverter()"


IDENTITY = IdentityConverter()


@dataclass(frozen=True, eq=False)
class PairConverter(AbstractConverter):
    """Two converters applied in sequence: ``right`` first, then ``left``."""
    left: AbstractConverter
    right: AbstractConverter

    def is_identity(self) -> bool:
        return False

    def is_linear(self) -> bool:
        return self.left.is_linear() and self.right.is_linear()

    def inverse(self) -> 'PairConverter':
        return PairConverter(self.right.inverse(), self.left.inverse())

    def _parameters(self) -> Tuple[Any, ...]:
        return (self.left, self.right)

    def _convert_int(self, value: int, context: Context) -> Union[int, Decimal]:
        return self.left.convert(self.right.convert(value, context), context)

    def _convert_decimal(self, value: Decimal, context: Context) -> Decimal:
        return self.left.convert(self.right.convert(value, context), context)

    def _convert_float(self, value: float) -> float:
        return self.left.convert(self.right.convert(value))

    def conversion_steps(self) -> List[AbstractConverter]:
        return self.left.conversion_steps() + self.right.conversion_steps()

    def __repr__(self) -> str:
        return f"PairConverter({self.left!r} o {self.right!r})"
