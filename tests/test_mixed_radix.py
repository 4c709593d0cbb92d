import pytest
import numpy as np

from radixunits import (
    ArgumentCountError,
    IncompatibleUnitsError,
    MixedRadix,
    MixedRadixFormatOptions,
    RealFormat,
    SimpleUnitFormat,
    ureg,
)


PICA_SYMBOL = "P̸"


class TestMixedRadixConstruction:

    def setup_method(self):
        self.foot = ureg.foot
        self.inch = ureg.inch
        self.pica = ureg.pica

    def test_of_primary(self):
        radix = MixedRadix.of_primary(self.foot)
        assert radix.primary_unit == self.foot
        assert radix.secondary_units == ()
        assert len(radix) == 1

    def test_mix_extends_chain(self):
        radix = MixedRadix.of_primary(self.foot).mix(self.inch).mix(self.pica)
        assert len(radix) == 3
        assert radix.units == (self.foot, self.inch, self.pica)

    def test_mix_does_not_mutate(self):
        base = MixedRadix.of_primary(self.foot)
        with_inch = base.mix(self.inch)
        with_pica = base.mix(self.pica)

        assert len(base) == 1
        assert base.secondary_units == ()
        assert with_inch.units == (self.foot, self.inch)
        assert with_pica.units == (self.foot, self.pica)

    def test_declaration_order_is_kept(self):
        radix = MixedRadix.of_primary(self.foot).mix(self.pica).mix(self.inch)
        assert radix.units == (self.foot, self.pica, self.inch)

    def test_unit_names_accepted(self):
        radix = MixedRadix.of_primary('foot').mix('inch')
        assert radix == MixedRadix.of_primary(self.foot).mix(self.inch)
        assert hash(radix) == hash(MixedRadix.of_primary(self.foot).mix(self.inch))

    def test_mix_incompatible_unit(self):
        with pytest.raises(IncompatibleUnitsError):
            MixedRadix.of_primary(self.foot).mix(ureg.second)

    def test_mix_duplicate_unit(self):
        with pytest.raises(ValueError):
            MixedRadix.of_primary(self.foot).mix(self.inch).mix(self.inch)
        with pytest.raises(ValueError):
            MixedRadix.of_primary(self.foot).mix(self.foot)


class TestQuantityConstruction:

    def setup_method(self):
        self.radix = MixedRadix.of_primary(ureg.foot).mix(ureg.inch)

    def test_create_quantity(self):
        quantity = self.radix.create_quantity(1, 2)
        assert quantity.units == ureg.foot
        assert quantity.magnitude == pytest.approx(1.1666666666666667, abs=1e-9)

    def test_too_many_arguments(self):
        radix = MixedRadix.of_primary(ureg.foot)
        with pytest.raises(ArgumentCountError) as excinfo:
            radix.create_quantity(1, 2)
        assert excinfo.value.given == 2
        assert excinfo.value.expected == 1

    def test_fewer_arguments_zero_fill(self):
        quantity = self.radix.create_quantity(1)
        assert quantity.magnitude == 1
        assert quantity.units == ureg.foot

    def test_no_arguments(self):
        assert self.radix.create_quantity().magnitude == 0

    def test_numpy_values(self):
        quantity = self.radix.create_quantity(np.int64(1), np.float64(6.0))
        assert quantity.magnitude == pytest.approx(1.5)


class TestValueExtraction:

    def setup_method(self):
        self.radix = MixedRadix.of_primary(ureg.foot).mix(ureg.inch).mix(ureg.pica)

    def test_round_trip(self):
        quantity = self.radix.create_quantity(1, 2, 3)
        values = self.radix.extract_values(quantity)

        assert len(values) == 3
        assert values[0] == 1
        assert values[1] == 2
        assert values[2] == pytest.approx(3, abs=1e-9)
        assert type(values[0]) is int
        assert type(values[1]) is int

    @pytest.mark.parametrize("parts", [
        (0, 0, 1.5),
        (5, 11, 0.25),
        (12, 0, 5.0),
        (3, 7, 0.0),
    ])
    def test_round_trip_table(self, parts):
        values = self.radix.extract_values(self.radix.create_quantity(*parts))
        assert values[:2] == list(parts[:2])
        assert values[2] == pytest.approx(parts[2], abs=1e-9)

    def test_omitted_values_come_back_as_zero(self):
        values = self.radix.extract_values(self.radix.create_quantity(1))
        assert values == [1, 0, 0.0]

    def test_quantity_in_other_unit(self):
        radix = MixedRadix.of_primary(ureg.foot).mix(ureg.inch)
        values = radix.extract_values(ureg.Quantity(30, ureg.inch))
        assert values[0] == 2
        assert values[1] == pytest.approx(6.0)

    def test_single_unit_chain_keeps_full_value(self):
        radix = MixedRadix.of_primary(ureg.foot)
        assert radix.extract_values(ureg.Quantity(1.25, ureg.foot)) == [1.25]
        assert radix.extract_values(ureg.Quantity(36, ureg.inch)) == [3]

    def test_incompatible_quantity(self):
        with pytest.raises(IncompatibleUnitsError):
            self.radix.extract_values(ureg.Quantity(1, ureg.second))

    def test_rejects_plain_numbers(self):
        with pytest.raises(TypeError):
            self.radix.extract_values(1.5)


class TestFormatting:

    def setup_method(self):
        self.radix = MixedRadix.of_primary(ureg.foot).mix(ureg.inch).mix(ureg.pica)
        self.unit_format = SimpleUnitFormat().label(ureg.pica, PICA_SYMBOL)
        self.options = MixedRadixFormatOptions(
            real_format=RealFormat(max_fraction_digits=3, decimal_separator_always_shown=True),
            unit_format=self.unit_format,
            number_to_unit_delimiter=" ",
            radix_parts_delimiter=" ",
        )

    def test_full_format(self):
        quantity = self.radix.create_quantity(1, 2, 3)
        assert self.radix.format(quantity, self.options) == "1 ft 2 in 3. " + PICA_SYMBOL

    def test_partial_values_show_only_supplied_parts(self):
        radix = MixedRadix.of_primary(ureg.foot).mix(ureg.inch)
        assert radix.format(radix.create_quantity(1)) == "1 ft"

    def test_inner_zero_is_kept(self):
        options = self.options.with_real_format(RealFormat())
        quantity = self.radix.create_quantity(1, 0, 3)
        assert self.radix.format(quantity, options) == "1 ft 0 in 3 " + PICA_SYMBOL

    def test_default_options(self):
        radix = MixedRadix.of_primary(ureg.foot).mix(ureg.inch)
        assert radix.format(radix.create_quantity(1, 6)) == "1 ft 6 in"
        assert radix.format(radix.create_quantity(1, 6.25)) == "1 ft 6.25 in"

    def test_delimiters(self):
        options = (
            self.options
            .with_number_to_unit_delimiter("")
            .with_radix_parts_delimiter(", ")
        )
        quantity = self.radix.create_quantity(1, 2, 3)
        assert self.radix.format(quantity, options) == "1ft, 2in, 3." + PICA_SYMBOL

    def test_single_unit_uses_real_format(self):
        radix = MixedRadix.of_primary(ureg.foot)
        quantity = ureg.Quantity(1.5, ureg.foot)
        assert radix.format(quantity, self.options) == "1.5 ft"

    def test_options_are_independent(self):
        options = MixedRadixFormatOptions()
        changed = options.with_radix_parts_delimiter(" + ")
        assert options.radix_parts_delimiter == " "
        assert changed.radix_parts_delimiter == " + "
        assert changed.number_to_unit_delimiter == " "
