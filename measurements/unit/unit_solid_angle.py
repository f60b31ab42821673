"""Solid angle units.

Classes:
    SolidAngularUnit: Steradian, square degree and square minute of angle.
"""

from __future__ import annotations

from .unit_base import ConversionRule, Operation, UnitDescriptor, UnitEnum


class SolidAngularUnit(UnitEnum):
    """Units of solid angle; the steradian is the base unit."""

    Steradian = 0, UnitDescriptor("sr", precision=6), ConversionRule.base()
    SquareDegree = 1, UnitDescriptor("deg2", "sqdeg", 6), ConversionRule(
        Operation.MULTIPLY, 3.0461741978670859934674354937889e-4)
    SquareMinute = 2, UnitDescriptor("moa2", "sqmoa", 6), ConversionRule(
        Operation.MULTIPLY, 8.4615949940752388707428763716359e-8)
