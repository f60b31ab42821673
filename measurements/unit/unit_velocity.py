"""Velocity units.

Classes:
    VelocityUnit: Speed units; meters per second is the base unit.

Example:
    >>> round(VelocityUnit.KilometersPerHour(36).value_in(VelocityUnit.MetersPerSecond), 6)
    10.0
"""

from __future__ import annotations

from .unit_base import ConversionRule, Operation, UnitDescriptor, UnitEnum

DIVIDE = Operation.DIVIDE


class VelocityUnit(UnitEnum):
    """Units of speed; meters per second is the base unit."""

    MetersPerSecond = 0, UnitDescriptor("m/s", precision=0), ConversionRule.base()
    KilometersPerHour = 1, UnitDescriptor("km/h", "kmph", 1), ConversionRule(DIVIDE, 3.6)
    FeetPerSecond = 2, UnitDescriptor("ft/s", precision=1), ConversionRule(DIVIDE, 3.2808399)
    MilesPerHour = 3, UnitDescriptor("mi/h", "mph", 1), ConversionRule(DIVIDE, 2.23693629)
    Knot = 4, UnitDescriptor("kt", precision=1), ConversionRule(DIVIDE, 1.94384449)
