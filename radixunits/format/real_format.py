from dataclasses import dataclass, replace
from decimal import Context, Decimal, ROUND_HALF_EVEN
from fractions import Fraction
from numbers import Number
import math

from ..calculus import normalize_number


# decimal separator, grouping separator
_LOCALE_SYMBOLS = {
    'en': ('.', ','),
    'de': (',', '.'),
    'fr': (',', ' '),
    'it': (',', '.'),
    'es': (',', '.'),
    'ch': ('.', '’'),
}


@dataclass(frozen=True)
class RealFormat:
    """
    Decimal rendering of real numbers.

    Values are rounded half-even to ``max_fraction_digits``; trailing zeros are
    dropped down to ``min_fraction_digits``. With
    ``decimal_separator_always_shown`` a whole number keeps its separator,
    e.g. ``3.`` instead of ``3``.
    """
    max_fraction_digits: int = 3
    min_fraction_digits: int = 0
    decimal_separator_always_shown: bool = False
    decimal_separator: str = '.'
    grouping_separator: str = ','
    grouping_used: bool = False
    rounding: str = ROUND_HALF_EVEN

    def __post_init__(self):
        if self.max_fraction_digits < 0 or self.min_fraction_digits < 0:
            raise ValueError("Fraction digit counts must be non-negative")
        if self.min_fraction_digits > self.max_fraction_digits:
            raise ValueError(
                f"min_fraction_digits ({self.min_fraction_digits}) exceeds "
                f"max_fraction_digits ({self.max_fraction_digits})"
            )

    @classmethod
    def for_locale(cls, locale: str, **kwargs) -> 'RealFormat':
        """
        Format using the separators of ``locale`` (``'de'``, ``'fr_FR'``, ...).

        Grouping is enabled unless ``grouping_used`` is passed explicitly.
        """
        language = locale.replace('-', '_').split('_')[0].lower()
        if language not in _LOCALE_SYMBOLS:
            raise ValueError(f"Unsupported locale: {locale}")
        decimal_separator, grouping_separator = _LOCALE_SYMBOLS[language]
        kwargs.setdefault('grouping_used', True)
        return cls(
            decimal_separator=decimal_separator,
            grouping_separator=grouping_separator,
            **kwargs
        )

    def with_options(self, **changes) -> 'RealFormat':
        return replace(self, **changes)

    def format(self, value: Number) -> str:
        value = normalize_number(value)
        if isinstance(value, float):
            if math.isnan(value):
                return 'NaN'
            if math.isinf(value):
                return '-∞' if value < 0 else '∞'
            number = Decimal(repr(value))
        elif isinstance(value, Fraction):
            number = Decimal(value.numerator) / Decimal(value.denominator)
        else:
            number = Decimal(value)

        quantum = Decimal(1).scaleb(-self.max_fraction_digits)
        context = Context(prec=max(number.adjusted(), 0) + self.max_fraction_digits + 2)
        rounded = number.quantize(quantum, rounding=self.rounding, context=context)
        if rounded.is_zero():
            rounded = rounded.copy_abs()

        text = format(rounded.copy_abs(), 'f')
        integer_digits, _, fraction_digits = text.partition('.')
        fraction_digits = fraction_digits.rstrip('0').ljust(self.min_fraction_digits, '0')

        if self.grouping_used:
            integer_digits = self._group(integer_digits)

        result = integer_digits
        if fraction_digits or self.decimal_separator_always_shown:
            result = f"{result}{self.decimal_separator}{fraction_digits}"
        return f"-{result}" if rounded.is_signed() else result

    def _group(self, digits: str) -> str:
        groups = []
        while len(digits) > 3:
            groups.insert(0, digits[-3:])
            digits = digits[:-3]
        groups.insert(0, digits)
        return self.grouping_separator.join(groups)

    __call__ = format
