"""Exceptions raised by the measurement library.

Error taxonomy:
    InvalidUnitError: a value passed to a lookup or conversion function is
        not a unit of the enumeration the function was built for.
    UnknownUnitNameError: a unit name matches no unit of the enumeration.
    MeasurementFormatError: text could not be parsed as a measurement.
    InvalidRuleDeclarationError: a unit enumeration violates a declaration
        invariant; detected while the conversion table is compiled.
    UnknownCultureError: a culture name is not registered.
"""

from __future__ import annotations

__all__ = [
    "MeasurementError",
    "InvalidUnitError",
    "UnknownUnitNameError",
    "MeasurementFormatError",
    "InvalidRuleDeclarationError",
    "UnknownCultureError",
]


class MeasurementError(Exception):
    """Base class of every error raised by the library."""


class InvalidUnitError(MeasurementError, ValueError):
    """The unit has no entry in the unit table.

    Attributes:
        unit: The offending value.
        unit_type: The unit enumeration the table was built for.
    """

    def __init__(self, unit: object, unit_type: type | None = None):
        self.unit = unit
        self.unit_type = unit_type
        if unit_type is None:
            msg = f"Unknown unit: {unit!r}"
        else:
            msg = f"Unknown unit for {unit_type.__name__}: {unit!r}"
        super().__init__(msg)


class UnknownUnitNameError(InvalidUnitError):
    """No unit of the enumeration is known under the name."""

    def __init__(self, name: str, unit_type: type | None = None):
        self.name = name
        super().__init__(name, unit_type)


class MeasurementFormatError(MeasurementError, ValueError):
    """The text is not a valid measurement.

    Attributes:
        text: The text that failed to parse.
        reason: Short description of the failure.
    """

    def __init__(self, text: str, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid measurement {text!r}: {reason}")


class InvalidRuleDeclarationError(MeasurementError, TypeError):
    """The unit enumeration declaration is invalid.

    Attributes:
        unit_type: The enumeration being compiled.
    """

    def __init__(self, unit_type: type, message: str):
        self.unit_type = unit_type
        super().__init__(f"{unit_type.__name__}: {message}")


class UnknownCultureError(MeasurementError, KeyError):
    """The culture name is not registered."""

    def __str__(self) -> str:
        return f"Unknown culture: {self.args[0]!r}"
