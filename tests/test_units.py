import math

import pytest
import pint

from radixunits import (
    IDENTITY,
    AddConverter,
    IncompatibleUnitsError,
    MultiplyConverter,
    PairConverter,
    PowerConverter,
    RationalConverter,
    SimpleUnitFormat,
    get_converter,
    ureg,
)
from radixunits.units import as_unit, is_compatible, scale_converter


class TestGetConverter:

    def test_same_unit_is_identity(self):
        assert get_converter(ureg.metre, ureg.metre) is IDENTITY

    def test_powers_of_ten(self):
        assert get_converter(ureg.kilometre, ureg.metre) == PowerConverter(10, 3)
        assert get_converter(ureg.millimetre, ureg.metre) == PowerConverter(10, -3)
        assert get_converter('km', 'm') == PowerConverter(10, 3)

    def test_exact_ratios(self):
        foot_to_inch = get_converter(ureg.foot, ureg.inch)
        assert foot_to_inch == RationalConverter(12, 1)
        assert foot_to_inch.convert(2) == 24
        assert get_converter(ureg.inch, ureg.foot) == RationalConverter(1, 12)

    def test_offset_units(self):
        converter = get_converter(ureg.degC, ureg.kelvin)
        assert converter == AddConverter(273.15)
        assert converter.convert(0.0) == 273.15

    def test_offset_with_scaling(self):
        converter = get_converter('degC', 'degF')
        assert isinstance(converter, PairConverter)
        assert not converter.is_linear()
        assert converter.convert(100.0) == pytest.approx(212.0)
        assert converter.convert(-40.0) == pytest.approx(-40.0)

    def test_incompatible_units(self):
        with pytest.raises(IncompatibleUnitsError) as excinfo:
            get_converter(ureg.metre, ureg.second)
        assert excinfo.value.from_unit == ureg.metre
        assert excinfo.value.to_unit == ureg.second

    def test_matches_pint(self):
        converter = get_converter(ureg.mile, ureg.yard)
        expected = ureg.Quantity(3.5, ureg.mile).to(ureg.yard).magnitude
        assert converter.convert(3.5) == pytest.approx(expected)

    def test_is_compatible(self):
        assert is_compatible('foot', 'metre')
        assert not is_compatible('foot', 'second')


class TestScaleConverter:

    def test_variants(self):
        assert scale_converter(1.0) is IDENTITY
        assert scale_converter(1000.0) == PowerConverter(10, 3)
        assert scale_converter(1e-6) == PowerConverter(10, -6)
        assert scale_converter(1 / 12) == RationalConverter(1, 12)
        assert scale_converter(0.3048) == RationalConverter(381, 1250)
        assert scale_converter(math.pi) == MultiplyConverter(math.pi)


class TestUnitHelpers:

    def test_as_unit(self):
        assert as_unit('inch') == ureg.inch
        assert as_unit(ureg.foot) is ureg.foot
        with pytest.raises(TypeError):
            as_unit(12)

    def test_unit_format_default_symbols(self):
        unit_format = SimpleUnitFormat()
        assert unit_format(ureg.foot) == "ft"
        assert unit_format(ureg.inch) == "in"

    def test_unit_format_labels(self):
        unit_format = SimpleUnitFormat(labels={'pica': "P̸"})
        assert unit_format(ureg.pica) == "P̸"
        assert unit_format.label(ureg.foot, "feet") is unit_format
        assert unit_format(ureg.foot) == "feet"
        # other instances keep their own labels
        assert SimpleUnitFormat()(ureg.foot) == "ft"

    def test_unit_format_rejects_empty_label(self):
        with pytest.raises(ValueError):
            SimpleUnitFormat().label(ureg.foot, "")

    def test_shared_instance(self):
        assert SimpleUnitFormat.get_instance() is SimpleUnitFormat.get_instance()

    def test_other_registries(self):
        registry = pint.UnitRegistry()
        assert get_converter(registry.kilogram, registry.gram) == PowerConverter(10, 3)
