"""Fuel consumption units.

Miles per gallon is inversely proportional to liters per kilometer, so it is
declared with a DIVIDE_FACTOR rule, whose reverse is the same division.

Classes:
    GasConsumptionUnit: Consumption units; liters per kilometer is the base unit.

Example:
    >>> mpg = GasConsumptionUnit.MilesPerGallon(23.5214583)
    >>> round(mpg.value_in(GasConsumptionUnit.LiterPer100Km), 6)
    10.0
"""

from __future__ import annotations

from .unit_base import ConversionRule, Operation, UnitDescriptor, UnitEnum


class GasConsumptionUnit(UnitEnum):
    """Units of fuel consumption; liters per kilometer is the base unit."""

    LiterPerKm = 0, UnitDescriptor("l/km", precision=5), ConversionRule.base()
    LiterPer100Km = 1, UnitDescriptor("l/100km", precision=1), ConversionRule(Operation.DIVIDE, 100)
    MilesPerGallon = 2, UnitDescriptor("mpg", "mi/gal", 1), ConversionRule(Operation.DIVIDE_FACTOR, 2.35214583)
