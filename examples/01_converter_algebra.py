"""
Example: Converter Algebra
==========================

This example shows how converters compose, simplify and keep integer
results exact whenever the arithmetic allows it.
"""

from decimal import Context, Decimal

from radixunits import (
    MetricPrefix,
    MultiplyConverter,
    PowerConverter,
    RationalConverter,
    get_converter,
    ureg,
)

print("Converter Algebra Examples")
print("=" * 50)

# Example 1: Powers of ten
print("\nExample 1: Composing powers of ten")
print("-" * 40)

kilo = PowerConverter.of_prefix(MetricPrefix.KILO)
milli = PowerConverter.of_prefix(MetricPrefix.MILLI)

print(f"kilo o kilo:  {kilo.compose(kilo)}")
print(f"kilo o milli: {kilo.compose(milli)} (identity: {kilo.compose(milli).is_identity()})")
print(f"milli(5000) = {milli.convert(5000)!r}")
print(f"milli(7)    = {milli.convert(7)!r}")
print(f"milli(7.0)  = {milli.convert(7.0)!r}")

# Example 2: Mixing variants
print("\nExample 2: Mixing converter variants")
print("-" * 40)

third = RationalConverter(1, 3)
print(f"10^2 o 1/3 = {PowerConverter(10, 2).compose(third)}")
print(f"10^2 o x0.5 = {PowerConverter(10, 2).compose(MultiplyConverter(0.5))}")
print(f"1/3 of 1: {third.convert(1)!r}")
print(f"1/3 of Decimal(1) at 5 digits: {third.convert(Decimal(1), Context(prec=5))!r}")

# Example 3: Converters between pint units
print("\nExample 3: Converters between pint units")
print("-" * 40)

for source, target in [("foot", "inch"), ("km", "m"), ("degC", "degF"), ("mile", "yard")]:
    converter = get_converter(source, target)
    print(f"{source:>5} -> {target:<5} {converter!r}")

celsius_to_fahrenheit = get_converter(ureg.degC, ureg.degF)
print(f"\n100 degC = {celsius_to_fahrenheit.convert(100.0):.1f} degF")
print(f"steps: {celsius_to_fahrenheit.conversion_steps()}")
