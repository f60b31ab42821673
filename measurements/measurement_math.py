"""Trigonometry and elementary physics on measurements.

The helpers convert their arguments to the SI unit a formula needs, apply
the formula with NumPy and wrap the result in a measurement. Durations are
``datetime.timedelta`` values.

Functions:
    sin, cos, tan: Trigonometric functions of an angular measurement.
    asin, acos, atan: Inverse functions returning an angle in radians.
    sqrt, pow, abs: Elementary functions of the value, keeping the unit.
    velocity: Average velocity over a distance and a duration.
    velocity_from_acceleration: Velocity gained under constant acceleration.
    kinetic_energy: Kinetic energy of a mass moving at a velocity.
    rectangle_area: Area of a rectangle.
    rectangular_prism_volume: Volume of a prism from its base area and depth.
    pressure: Pressure of a weight resting on an area.
    travel_time: Time needed to cover a distance at a velocity.
    distance_traveled: Distance covered at a constant velocity.
    distance_traveled_with_acceleration: Distance covered from rest under
        constant acceleration.

Example:
    >>> from measurements.unit import WeightUnit, VelocityUnit, EnergyUnit
    >>> e = kinetic_energy(WeightUnit.Kilogram(4), VelocityUnit.MetersPerSecond(3))
    >>> round(e.value_in(EnergyUnit.Joule), 6)
    18.0
"""

from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from typing import TypeVar

import numpy as np

from .config import DECIMAL_CONTEXT, Number
from .measurement import DecimalMeasurement, Measurement, MeasurementBase
from .unit import (
    AccelerationUnit,
    AngularUnit,
    AreaUnit,
    DistanceUnit,
    EnergyUnit,
    PressureUnit,
    VelocityUnit,
    VolumeUnit,
    WeightUnit,
)

__all__ = [
    "sin",
    "cos",
    "tan",
    "asin",
    "acos",
    "atan",
    "sqrt",
    "pow",
    "abs",
    "velocity",
    "velocity_from_acceleration",
    "kinetic_energy",
    "rectangle_area",
    "rectangular_prism_volume",
    "pressure",
    "travel_time",
    "distance_traveled",
    "distance_traveled_with_acceleration",
]

M = TypeVar("M", bound=MeasurementBase)


def _radians(angle: MeasurementBase[AngularUnit]) -> float:
    return float(angle.value_in(AngularUnit.Radian))


# -------------------------------- Trigonometry --------------------------------
def sin(angle: MeasurementBase[AngularUnit]) -> float:
    return float(np.sin(_radians(angle)))


def cos(angle: MeasurementBase[AngularUnit]) -> float:
    return float(np.cos(_radians(angle)))


def tan(angle: MeasurementBase[AngularUnit]) -> float:
    return float(np.tan(_radians(angle)))


def asin(value: Number) -> Measurement[AngularUnit]:
    return Measurement(np.arcsin(value), AngularUnit.Radian)


def acos(value: Number) -> Measurement[AngularUnit]:
    return Measurement(np.arccos(value), AngularUnit.Radian)


def atan(value: Number) -> Measurement[AngularUnit]:
    return Measurement(np.arctan(value), AngularUnit.Radian)


# -------------------------------- Elementary functions --------------------------------
def sqrt(value: M) -> M:
    """Square root of the value; the unit is kept.

    Works with both measurement variants; the decimal variant is evaluated
    in the library decimal context.
    """
    if isinstance(value, DecimalMeasurement):
        return DecimalMeasurement(DECIMAL_CONTEXT.sqrt(value.value), value.unit)
    return type(value)(np.sqrt(value.value), value.unit)


def pow(value: M, exponent: Number | Decimal) -> M:
    """The value raised to ``exponent``; the unit is kept."""
    if isinstance(value, DecimalMeasurement):
        if isinstance(exponent, float):
            exponent = Decimal(repr(exponent))
        return DecimalMeasurement(DECIMAL_CONTEXT.power(value.value, exponent), value.unit)
    return type(value)(np.power(value.value, exponent), value.unit)


def abs(value: M) -> M:
    """Absolute value; the unit is kept."""
    return value.__abs__()


# -------------------------------- Physics --------------------------------
def velocity(distance: Measurement[DistanceUnit], time: timedelta) -> Measurement[VelocityUnit]:
    """Average velocity covering ``distance`` in ``time``."""
    meters = distance.value_in(DistanceUnit.Meter)
    return Measurement(meters / time.total_seconds(), VelocityUnit.MetersPerSecond)


def velocity_from_acceleration(
    acceleration: Measurement[AccelerationUnit], time: timedelta
) -> Measurement[VelocityUnit]:
    """Velocity gained from rest under constant ``acceleration`` during ``time``."""
    mps2 = acceleration.value_in(AccelerationUnit.MeterPerSecondSquare)
    return Measurement(mps2 * time.total_seconds(), VelocityUnit.MetersPerSecond)


def kinetic_energy(weight: Measurement[WeightUnit], speed: Measurement[VelocityUnit]) -> Measurement[EnergyUnit]:
    """Kinetic energy ``m * v**2 / 2`` in joules.

    Example:
        >>> e = kinetic_energy(WeightUnit.Grain(55), VelocityUnit.FeetPerSecond(2300))
        >>> round(e.value_in(EnergyUnit.FootPound), 3)
        645.929
    """
    kilograms = weight.value_in(WeightUnit.Kilogram)
    mps = speed.value_in(VelocityUnit.MetersPerSecond)
    return Measurement(0.5 * kilograms * np.square(mps), EnergyUnit.Joule)


def rectangle_area(width: Measurement[DistanceUnit], height: Measurement[DistanceUnit]) -> Measurement[AreaUnit]:
    area = width.value_in(DistanceUnit.Meter) * height.value_in(DistanceUnit.Meter)
    return Measurement(area, AreaUnit.SquareMeter)


def rectangular_prism_volume(
    area: Measurement[AreaUnit], depth: Measurement[DistanceUnit]
) -> Measurement[VolumeUnit]:
    volume = area.value_in(AreaUnit.SquareMeter) * depth.value_in(DistanceUnit.Meter)
    return Measurement(volume, VolumeUnit.CubicMeter)


def pressure(weight: Measurement[WeightUnit], area: Measurement[AreaUnit]) -> Measurement[PressureUnit]:
    """Pressure of ``weight`` resting on ``area``, in pounds per square inch."""
    psi = weight.value_in(WeightUnit.Pound) / area.value_in(AreaUnit.SquareInch)
    return Measurement(psi, PressureUnit.PoundsPerSquareInch)


def travel_time(distance: Measurement[DistanceUnit], speed: Measurement[VelocityUnit]) -> timedelta:
    """Time needed to cover ``distance`` at constant ``speed``.

    Raises:
        ZeroDivisionError: If ``speed`` is zero.
    """
    seconds = distance.value_in(DistanceUnit.Meter) / speed.value_in(VelocityUnit.MetersPerSecond)
    return timedelta(seconds=seconds)


def distance_traveled(speed: Measurement[VelocityUnit], time: timedelta) -> Measurement[DistanceUnit]:
    meters = speed.value_in(VelocityUnit.MetersPerSecond) * time.total_seconds()
    return Measurement(meters, DistanceUnit.Meter)


def distance_traveled_with_acceleration(
    acceleration: Measurement[AccelerationUnit], time: timedelta
) -> Measurement[DistanceUnit]:
    """Distance ``a * t**2 / 2`` covered from rest under constant acceleration."""
    final_speed = velocity_from_acceleration(acceleration, time)
    meters = final_speed.value_in(VelocityUnit.MetersPerSecond) / 2 * time.total_seconds()
    return Measurement(meters, DistanceUnit.Meter)
