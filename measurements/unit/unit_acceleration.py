"""Acceleration units.

Classes:
    AccelerationUnit: Acceleration units; the gal (cm/s²) is the base unit.
"""

from __future__ import annotations

from .unit_base import ConversionRule, Operation, UnitDescriptor, UnitEnum

MULTIPLY = Operation.MULTIPLY


class AccelerationUnit(UnitEnum):
    """Units of acceleration; the gal is the base unit."""

    Gal = 0, UnitDescriptor("gal", "cm/s²", 6), ConversionRule.base()
    FeetPerSecondSquare = 1, UnitDescriptor("ft/s²", "ft/s2", 3), ConversionRule(MULTIPLY, 30.48)
    MeterPerSecondSquare = 2, UnitDescriptor("m/s²", "m/s2", 3), ConversionRule(MULTIPLY, 100)
    EarthGravity = 3, UnitDescriptor("g0", precision=3), ConversionRule(MULTIPLY, 980.665)
