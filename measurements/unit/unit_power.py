"""Power units.

Classes:
    PowerUnit: Power units; the watt is the base unit.
"""

from __future__ import annotations

from .unit_base import ConversionRule, Operation, UnitDescriptor, UnitEnum

MULTIPLY = Operation.MULTIPLY


class PowerUnit(UnitEnum):
    """Units of power; the watt is the base unit."""

    Watt = 0, UnitDescriptor("w", precision=1), ConversionRule.base()
    MetricHorsepower = 1, UnitDescriptor("ps", precision=1), ConversionRule(MULTIPLY, 735.5)
    MechanicalHorsepower = 2, UnitDescriptor("hp", precision=1), ConversionRule(MULTIPLY, 745.7)
    # foot-pound force per second
    FootPoundPerSecond = 3, UnitDescriptor("ft⋅lbf", "ft-lbf", 1), ConversionRule(MULTIPLY, 1.3558179483314)
