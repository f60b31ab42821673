"""Force units.

Classes:
    ForceUnit: Force units; the newton is the base unit.
"""

from __future__ import annotations

from .unit_base import ConversionRule, Operation, UnitDescriptor, UnitEnum

MULTIPLY = Operation.MULTIPLY


class ForceUnit(UnitEnum):
    """Units of force; the newton is the base unit."""

    Newton = 0, UnitDescriptor("N", "kg·m/s²", 3), ConversionRule.base()
    Dyne = 1, UnitDescriptor("dyn", precision=3), ConversionRule(Operation.DIVIDE, 100_000)
    KilogramForce = 2, UnitDescriptor("kp", precision=3), ConversionRule(MULTIPLY, 9.80665)
    PoundForce = 3, UnitDescriptor("lbf", precision=3), ConversionRule(MULTIPLY, 4.448222)
    Poundal = 4, UnitDescriptor("pdl", precision=3), ConversionRule(MULTIPLY, 0.138255)
