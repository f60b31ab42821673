"""Energy units.

Classes:
    EnergyUnit: Energy units; the joule is the base unit.
"""

from __future__ import annotations

from .unit_base import ConversionRule, Operation, UnitDescriptor, UnitEnum

MULTIPLY = Operation.MULTIPLY


class EnergyUnit(UnitEnum):
    """Units of energy; the joule is the base unit."""

    FootPound = 0, UnitDescriptor("ft·lb", "ft-lb", 0), ConversionRule(Operation.DIVIDE, 0.737562149277)
    Joule = 1, UnitDescriptor("J", precision=0), ConversionRule.base()
    BTU = 2, UnitDescriptor("BTU", precision=0), ConversionRule(MULTIPLY, 1055)
    HorsepowerHour = 3, UnitDescriptor("hp·h", "hp-h", 0), ConversionRule(MULTIPLY, 2_684_500)
    WattHour = 4, UnitDescriptor("w·h", "wh", 0), ConversionRule(MULTIPLY, 3600)
    KilowattHour = 5, UnitDescriptor("kw·h", "kwh", 0), ConversionRule(MULTIPLY, 3_600_000)
