import pytest
import numpy as np
from decimal import Decimal
from fractions import Fraction

from radixunits import RealFormat


class TestRealFormat:

    def test_defaults(self):
        real_format = RealFormat()
        assert real_format(2.5) == "2.5"
        assert real_format(3) == "3"
        assert real_format(1.23456) == "1.235"
        assert real_format(2.9999999999) == "3"

    def test_decimal_separator_always_shown(self):
        real_format = RealFormat(decimal_separator_always_shown=True)
        assert real_format(3) == "3."
        assert real_format(2.9999999999999893) == "3."
        assert real_format(0.5) == "0.5"

    def test_negative_values(self):
        assert RealFormat()(-1.5) == "-1.5"
        assert RealFormat()(-0.0000001) == "0"

    def test_min_fraction_digits(self):
        real_format = RealFormat(min_fraction_digits=2)
        assert real_format(1.5) == "1.50"
        assert real_format(1.23456) == "1.235"

    def test_half_even_rounding(self):
        real_format = RealFormat(max_fraction_digits=0)
        assert real_format(2.5) == "2"
        assert real_format(3.5) == "4"

    def test_number_types(self):
        real_format = RealFormat()
        assert real_format(Decimal("0.1234")) == "0.123"
        assert real_format(Fraction(1, 4)) == "0.25"
        assert real_format(np.float64(0.125)) == "0.125"
        assert real_format(np.int32(12)) == "12"
        assert real_format(float('nan')) == "NaN"
        assert real_format(float('-inf')) == "-∞"

    def test_locales(self):
        assert RealFormat.for_locale('de')(1234567.891) == "1.234.567,891"
        assert RealFormat.for_locale('en_US')(1234.5) == "1,234.5"
        assert RealFormat.for_locale('fr-FR', grouping_used=False)(1234.5) == "1234,5"

    def test_grouping_keeps_small_numbers(self):
        assert RealFormat(grouping_used=True)(999.5) == "999.5"
        assert RealFormat(grouping_used=True)(-1000) == "-1,000"

    def test_unsupported_locale(self):
        with pytest.raises(ValueError):
            RealFormat.for_locale('xx')

    def test_invalid_digit_counts(self):
        with pytest.raises(ValueError):
            RealFormat(min_fraction_digits=4, max_fraction_digits=2)
        with pytest.raises(ValueError):
            RealFormat(max_fraction_digits=-1)

    def test_with_options(self):
        real_format = RealFormat().with_options(max_fraction_digits=1)
        assert real_format(1.25) == "1.2"
