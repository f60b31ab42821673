"""Distance and length units.

All distances convert through the inch, the base unit of the family. Metric
units are declared as two-step rules (millimeters per inch, then the metric
scale) so that the factors stay exact decimal literals.

Classes:
    DistanceUnit: Length units from typographic points to nautical miles.

Example:
    >>> round(DistanceUnit.Meter(1).value_in(DistanceUnit.Inch), 4)
    39.3701
    >>> round(DistanceUnit.RussianLine(10).value_in(DistanceUnit.Inch), 6)
    1.0
"""

from __future__ import annotations

from .unit_base import ConversionRule, Operation, UnitDescriptor, UnitEnum

MULTIPLY = Operation.MULTIPLY
DIVIDE = Operation.DIVIDE


class DistanceUnit(UnitEnum):
    """Units of length; the inch is the base unit."""

    Line = 0, UnitDescriptor("ln", "'''", 1), ConversionRule(DIVIDE, 12)
    RussianLine = 1, UnitDescriptor("rln", precision=1), ConversionRule(DIVIDE, 10)
    Inch = 2, UnitDescriptor('"', "in", 1), ConversionRule.base()
    Foot = 3, UnitDescriptor("'", "ft", 2), ConversionRule(MULTIPLY, 12)
    Yard = 4, UnitDescriptor("yd", precision=2), ConversionRule(MULTIPLY, 36)
    Mile = 5, UnitDescriptor("mi", precision=3), ConversionRule(MULTIPLY, 63360)
    NauticalMile = 6, UnitDescriptor("nm", precision=3), ConversionRule(MULTIPLY, 1_852_000, DIVIDE, 25.4)
    Millimeter = 7, UnitDescriptor("mm", precision=0), ConversionRule(DIVIDE, 25.4)
    Centimeter = 8, UnitDescriptor("cm", precision=1), ConversionRule(DIVIDE, 2.54)
    Meter = 9, UnitDescriptor("m", precision=1), ConversionRule(DIVIDE, 25.4, MULTIPLY, 1000)
    Kilometer = 10, UnitDescriptor("km", precision=3), ConversionRule(DIVIDE, 25.4, MULTIPLY, 1_000_000)
    Point = 11, UnitDescriptor("pt", precision=1), ConversionRule(DIVIDE, 72)
    Pica = 12, UnitDescriptor("p", precision=1), ConversionRule(DIVIDE, 6)
