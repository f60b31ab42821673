"""Angular units for orientation, ballistics and slopes.

All angles convert through the radian. Besides the usual circle fractions
(degree, MOA, mil, gradian, turn) the family contains the slope units
"inches per 100 yards", "cm per 100 m" and percent, whose relation to the
angle is the arctangent of the rise over the run.

Classes:
    AngularUnit: Plane angle units.

Example:
    >>> round(AngularUnit.Percent(100).value_in(AngularUnit.Degree), 6)
    45.0
    >>> round(AngularUnit.Degree(360).value_in(AngularUnit.Radian), 6)
    6.283185
"""

from __future__ import annotations

from .unit_base import ConversionRule, Operation, UnitDescriptor, UnitEnum

MULTIPLY = Operation.MULTIPLY
DIVIDE = Operation.DIVIDE
ATAN = Operation.ATAN

PI = 3.14159265358979


class AngularUnit(UnitEnum):
    """Units of plane angle; the radian is the base unit."""

    Radian = 0, UnitDescriptor("rad", precision=6), ConversionRule.base()
    Degree = 1, UnitDescriptor("°", "deg", 4), ConversionRule(DIVIDE, 180, MULTIPLY, PI)
    # 1/60 of a degree
    MOA = 2, UnitDescriptor("moa", precision=2), ConversionRule(DIVIDE, 10800, MULTIPLY, PI)
    # 1/6400 of a circle
    Mil = 3, UnitDescriptor("mil", precision=2), ConversionRule(DIVIDE, 3200, MULTIPLY, PI)
    MRad = 4, UnitDescriptor("mrad", precision=2), ConversionRule(DIVIDE, 1000)
    # 1/6000 of a circle
    Thousand = 5, UnitDescriptor("ths", precision=2), ConversionRule(DIVIDE, 3000, MULTIPLY, PI)
    InchesPer100Yards = 6, UnitDescriptor("in/100yd", precision=2), ConversionRule(DIVIDE, 3600, ATAN)
    CmPer100Meters = 7, UnitDescriptor("cm/100m", precision=2), ConversionRule(DIVIDE, 10000, ATAN)
    Percent = 8, UnitDescriptor("%", "percent", 0), ConversionRule(DIVIDE, 100, ATAN)
    Turn = 9, UnitDescriptor("turn", precision=0), ConversionRule(MULTIPLY, 2 * PI)
    Gradian = 10, UnitDescriptor("gon", "ᵍ", 0), ConversionRule(MULTIPLY, 2 * PI, DIVIDE, 400.0)
