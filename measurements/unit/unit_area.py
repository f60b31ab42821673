"""Area units.

Classes:
    AreaUnit: Area units; the square millimeter is the base unit.
"""

from __future__ import annotations

from .unit_base import ConversionRule, Operation, UnitDescriptor, UnitEnum

MULTIPLY = Operation.MULTIPLY


class AreaUnit(UnitEnum):
    """Units of area; the square millimeter is the base unit."""

    SquareMillimeter = 0, UnitDescriptor("mm²", "mm2", 0), ConversionRule.base()
    SquareCentimeter = 1, UnitDescriptor("cm²", "cm2", 0), ConversionRule(MULTIPLY, 100)
    SquareMeter = 2, UnitDescriptor("m²", "m2", 0), ConversionRule(MULTIPLY, 1_000_000)
    SquareKilometer = 3, UnitDescriptor("km²", "km2", 0), ConversionRule(MULTIPLY, 1e12)
    SquareInch = 4, UnitDescriptor("in²", "in2", 0), ConversionRule(MULTIPLY, 645.16)
    SquareFoot = 5, UnitDescriptor("ft²", "ft2", 0), ConversionRule(MULTIPLY, 92903.04)
    SquareYard = 6, UnitDescriptor("yd²", "yd2", 0), ConversionRule(MULTIPLY, 836127.36)
    SquareMile = 7, UnitDescriptor("mi²", "mi2", 0), ConversionRule(MULTIPLY, 2589988110000)
    Acre = 8, UnitDescriptor("ac", precision=0), ConversionRule(MULTIPLY, 4046856422.4)
    Hectare = 9, UnitDescriptor("ha", precision=0), ConversionRule(MULTIPLY, 1e10)
    Ar = 10, UnitDescriptor("ar", precision=0), ConversionRule(MULTIPLY, 1e8)
