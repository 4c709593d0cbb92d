"""
Exceptions raised by the converter algebra and the mixed radix engine.
"""

from typing import Any


class InvalidConverterError(ValueError):
    """Raised when a converter is constructed from invalid parameters."""
    pass


class UnsupportedCompositionError(RuntimeError):
    """Raised when two converters have no composition rule."""

    def __init__(self, left: Any, right: Any):
        super().__init__(
            f"composition of {left!r} with {right!r} is not supported"
        )
        self.left = left
        self.right = right


class ArgumentCountError(ValueError):
    """Raised when more values are supplied than a mixed radix has units."""

    def __init__(self, given: int, expected: int):
        super().__init__(
            f"got {given} values, but the mixed radix has only {expected} units"
        )
        self.given = given
        self.expected = expected


class IncompatibleUnitsError(ValueError):
    """Raised when a unit cannot be converted to another."""

    def __init__(self, from_unit: Any, to_unit: Any, detail: str = ""):
        message = f"Cannot convert from {from_unit} to {to_unit}: incompatible dimensions"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.from_unit = from_unit
        self.to_unit = to_unit


class UnsupportedConversionError(ValueError):
    """Raised for unit conversions that are not scalings or offsets."""

    def __init__(self, from_unit: Any, to_unit: Any):
        super().__init__(
            f"Conversion from {from_unit} to {to_unit} is not linear or affine"
        )
        self.from_unit = from_unit
        self.to_unit = to_unit
