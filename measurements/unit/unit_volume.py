"""Volume units, metric, imperial and US customary.

Classes:
    VolumeUnit: Volume units; the milliliter is the base unit.
"""

from __future__ import annotations

from .unit_base import ConversionRule, Operation, UnitDescriptor, UnitEnum

MULTIPLY = Operation.MULTIPLY


class VolumeUnit(UnitEnum):
    """Units of volume; the milliliter is the base unit."""

    Milliliter = 0, UnitDescriptor("ml", precision=1), ConversionRule.base()
    Liter = 1, UnitDescriptor("l", precision=3), ConversionRule(MULTIPLY, 1000)
    CubicMeter = 2, UnitDescriptor("m³", "m3", 6), ConversionRule(MULTIPLY, 1_000_000)
    CubicInch = 3, UnitDescriptor("in³", "in3", 6), ConversionRule(MULTIPLY, 16.38706)
    CubicFoot = 4, UnitDescriptor("ft³", "ft3", 6), ConversionRule(MULTIPLY, 28316.83968)
    CubicYard = 5, UnitDescriptor("yd³", "yd3", 6), ConversionRule(MULTIPLY, 764554.9)
    ImperialPint = 6, UnitDescriptor("imp.pt", precision=1), ConversionRule(MULTIPLY, 568)
    ImperialQuart = 7, UnitDescriptor("imp.qt", precision=1), ConversionRule(MULTIPLY, 1137)
    ImperialGallon = 8, UnitDescriptor("imp.gal", precision=1), ConversionRule(MULTIPLY, 4546)
    # US fluid units
    Ounce = 9, UnitDescriptor("oz", precision=1), ConversionRule(MULTIPLY, 29.57)
    Pint = 10, UnitDescriptor("pt", precision=1), ConversionRule(MULTIPLY, 473.176473)
    Quart = 11, UnitDescriptor("qt", precision=1), ConversionRule(MULTIPLY, 946.3529)
    Gallon = 12, UnitDescriptor("gal", precision=1), ConversionRule(MULTIPLY, 3785.412)
