"""
Example: Mixed Radix Quantities
===============================

This example builds lengths out of feet, inches and picas, splits them back
into their parts and renders them.
"""

from radixunits import (
    MixedRadix,
    MixedRadixFormatOptions,
    RealFormat,
    SimpleUnitFormat,
    ureg,
)

print("Mixed Radix Examples")
print("=" * 50)

radix = MixedRadix.of_primary(ureg.foot).mix(ureg.inch).mix(ureg.pica)

options = MixedRadixFormatOptions(
    real_format=RealFormat(max_fraction_digits=3, decimal_separator_always_shown=True),
    unit_format=SimpleUnitFormat().label(ureg.pica, "P̸"),
)

# Example 1: Round trip
print("\nExample 1: Construction and extraction")
print("-" * 40)

length = radix.create_quantity(1, 2, 3)
print(f"Quantity: {length}")
print(f"Parts:    {radix.extract_values(length)}")
print(f"Text:     {radix.format(length, options)}")

# Example 2: Quantities from elsewhere
print("\nExample 2: Splitting metric lengths")
print("-" * 40)

for metres in [0.5, 1.0, 2.54]:
    quantity = ureg.Quantity(metres, ureg.metre)
    print(f"{metres:>5} m = {radix.format(quantity, options)}")

# Example 3: Localized output
print("\nExample 3: German number format")
print("-" * 40)

german = options.with_real_format(RealFormat.for_locale('de')).with_radix_parts_delimiter(", ")
print(radix.format(radix.create_quantity(1, 2, 3.75), german))
