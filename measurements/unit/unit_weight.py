"""Weight (mass) units.

The grain is the base unit of the family; it is the natural unit for bullet
and powder weights and keeps every other factor a plain multiplier.

Classes:
    WeightUnit: Mass units from grains to long tons.
"""

from __future__ import annotations

from .unit_base import ConversionRule, Operation, UnitDescriptor, UnitEnum

MULTIPLY = Operation.MULTIPLY

GRAINS_PER_GRAM = 15.4323583529
GRAINS_PER_TONNE = 15432358.3529


class WeightUnit(UnitEnum):
    """Units of mass; the grain is the base unit."""

    Grain = 0, UnitDescriptor("gr", precision=0), ConversionRule.base()
    Ounce = 1, UnitDescriptor("oz", precision=1), ConversionRule(MULTIPLY, 437.5)
    Gram = 2, UnitDescriptor("g", precision=1), ConversionRule(MULTIPLY, GRAINS_PER_GRAM)
    Pound = 3, UnitDescriptor("lb", precision=3), ConversionRule(MULTIPLY, 7000)
    Kilogram = 4, UnitDescriptor("kg", precision=3), ConversionRule(MULTIPLY, 15432.3583529)
    # weight of the mass under standard gravity
    Newton = 5, UnitDescriptor("N", precision=3), ConversionRule(MULTIPLY, 1573.6626)
    # avoirdupois dram, 1.7718451953125 g
    Dram = 6, UnitDescriptor("dr", precision=1), ConversionRule(MULTIPLY, 1.7718451953125 * GRAINS_PER_GRAM)
    TroyOunce = 7, UnitDescriptor("tr.oz", precision=1), ConversionRule(MULTIPLY, GRAINS_PER_GRAM * 31.1034768)
    Tonne = 8, UnitDescriptor("t", precision=3), ConversionRule(MULTIPLY, GRAINS_PER_TONNE)
    USTonne = 9, UnitDescriptor("us.t", precision=3), ConversionRule(MULTIPLY, GRAINS_PER_TONNE * 0.907)
    UKTonne = 10, UnitDescriptor("uk.t", precision=3), ConversionRule(MULTIPLY, GRAINS_PER_TONNE * 1.016)
