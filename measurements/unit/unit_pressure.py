"""Pressure units.

Classes:
    PressureUnit: Pressure units; the pascal is the base unit.
"""

from __future__ import annotations

from .unit_base import ConversionRule, Operation, UnitDescriptor, UnitEnum

MULTIPLY = Operation.MULTIPLY


class PressureUnit(UnitEnum):
    """Units of pressure; the pascal is the base unit."""

    Pascal = 0, UnitDescriptor("pa", precision=0), ConversionRule.base()
    KiloPascal = 1, UnitDescriptor("kPa", precision=1), ConversionRule(MULTIPLY, 1000)
    Bar = 2, UnitDescriptor("bar", precision=3), ConversionRule(MULTIPLY, 100_000)
    Atmosphere = 3, UnitDescriptor("atm", precision=3), ConversionRule(MULTIPLY, 101_325)
    MillimetersOfMercury = 4, UnitDescriptor("mmHg", precision=1), ConversionRule(MULTIPLY, 133.322387415)
    InchesOfMercury = 5, UnitDescriptor("inHg", precision=2), ConversionRule(MULTIPLY, 3386.389)
    PoundsPerSquareInch = 6, UnitDescriptor("psi", "lbf/in2", 1), ConversionRule(MULTIPLY, 6895)
