"""Density units.

Classes:
    DensityUnit: Density units; kilograms per cubic meter is the base unit.
"""

from __future__ import annotations

from .unit_base import ConversionRule, Operation, UnitDescriptor, UnitEnum

MULTIPLY = Operation.MULTIPLY


class DensityUnit(UnitEnum):
    """Units of density; kilograms per cubic meter is the base unit."""

    GramPerCubicCentimeter = 0, UnitDescriptor("g/cm³", "g/cm3", 0), ConversionRule(MULTIPLY, 1000)
    KilogramPerCubicMeter = 1, UnitDescriptor("kg/m³", "kg/m3", 3), ConversionRule.base()
    PoundsPerCubicInch = 2, UnitDescriptor("lb/in³", "lb/in3", 0), ConversionRule(MULTIPLY, 27679.9)
    OuncesPerCubicInch = 3, UnitDescriptor("oz/in³", "oz/in3", 0), ConversionRule(MULTIPLY, 1729.994)
    PoundsPerCubicFoot = 4, UnitDescriptor("lb/ft³", "lb/ft3", 2), ConversionRule(MULTIPLY, 16.0185)
