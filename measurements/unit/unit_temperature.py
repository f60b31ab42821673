"""Temperature scales.

Temperature is the family where offsets matter: most scales are declared as
a two-step rule (scale, then shift) towards degrees Fahrenheit, and the
reverse conversion undoes the shift before the scale.

Classes:
    TemperatureUnit: Fahrenheit, Celsius, Kelvin, Rankine, Reaumur, Delisle.

Example:
    >>> round(TemperatureUnit.Fahrenheit(50).value_in(TemperatureUnit.Celsius), 6)
    10.0
    >>> round(TemperatureUnit.Celsius(38).value_in(TemperatureUnit.Rankin), 2)
    560.07
"""

from __future__ import annotations

from .unit_base import ConversionRule, Operation, UnitDescriptor, UnitEnum

MULTIPLY = Operation.MULTIPLY
ADD = Operation.ADD
SUBTRACT = Operation.SUBTRACT


class TemperatureUnit(UnitEnum):
    """Temperature scales; degrees Fahrenheit is the base unit."""

    Fahrenheit = 0, UnitDescriptor("°F", "F", 1), ConversionRule.base()
    Celsius = 1, UnitDescriptor("°C", "C", 1), ConversionRule(MULTIPLY, 1.8, ADD, 32)
    Kelvin = 2, UnitDescriptor("°K", "K", 1), ConversionRule(MULTIPLY, 1.8, SUBTRACT, 459.67)
    Rankin = 3, UnitDescriptor("°R", "R", 1), ConversionRule(SUBTRACT, 459.67)
    Reaumur = 4, UnitDescriptor("°Re", "Re", 1), ConversionRule(MULTIPLY, 2.25, ADD, 32)
    Delisle = 5, UnitDescriptor("°De", "De", 1), ConversionRule(MULTIPLY, -1.2, ADD, 212)
