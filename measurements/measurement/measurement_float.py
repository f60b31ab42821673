"""Floating-point measurement value type.

Classes:
    Measurement: Float value and unit pair with tolerant comparison.

Functions:
    as_measurements: Wrap a sequence of scalars into measurements.
    values_in: Extract the values of measurements in one unit as an array.
    convert_array: Vectorised conversion of a NumPy array between units.

Comparison:
    Float arithmetic accumulates round-off, so two measurements compare
    equal when their base-unit values differ by less than a tolerance scaled
    to the decimal order of magnitude of the values::

        epsilon = 10 ** (round(log10(max(|a|, |b|))) - EPSILON_EXPONENT)

    Zero and non-finite values compare exactly.

Hashing:
    Tolerant equality is not transitive, so no rounding of the value can
    give equal hashes to every pair of equal measurements. The hash is
    therefore coarse: the unit family, the sign of the base value and
    whether it is finite. Large sets of same-sign measurements of one
    family degrade to linear lookups.

Division:
    Division follows IEEE semantics; dividing by zero gives a signed
    infinity (or NaN for 0 / 0) instead of raising.

Example:
    >>> from measurements.unit import DistanceUnit
    >>> Measurement(1, DistanceUnit.Inch).value_in(DistanceUnit.Centimeter)
    2.54
    >>> cm, mm = DistanceUnit.Centimeter, DistanceUnit.Millimeter
    >>> Measurement(5, cm) + Measurement(5, mm) == Measurement(5.5, cm)
    True
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Iterable
from decimal import Decimal
from typing import TYPE_CHECKING, Any

import numpy as np

from ..config import BASE_TYPE, EPSILON_EXPONENT
from ..unit.compiler import Arithmetic, unit_table
from ..unit.unit_base import UnitEnum
from .measurement_base import MeasurementBase, U

if TYPE_CHECKING:
    from .measurement_decimal import DecimalMeasurement

__all__ = ["Measurement", "as_measurements", "values_in", "convert_array"]


class Measurement(MeasurementBase[U]):
    """Measurement with a ``float`` value.

    Example:
        >>> from measurements.unit import TemperatureUnit
        >>> t = Measurement(50, TemperatureUnit.Fahrenheit)
        >>> round(t.value_in(TemperatureUnit.Celsius), 6)
        10.0
        >>> f"{t:N2}"
        '50.00°F'
    """

    __slots__ = ()

    ARITHMETIC = Arithmetic.FLOAT

    @classmethod
    def _coerce(cls, value: Any) -> float:
        if isinstance(value, (str, bytes)):
            msg = f"Measurement value must be a number, got {value!r}; use Measurement.parse for text"
            raise TypeError(msg)
        return float(value)

    @classmethod
    def _parse_number(cls, text: str) -> float:
        return float(text)

    @staticmethod
    def _format_lossless(value: float) -> str:
        return np.format_float_positional(value, trim="-")

    @staticmethod
    def _compare_values(a: float, b: float) -> int:
        if a == b:
            return 0
        if math.isfinite(a) and math.isfinite(b):
            magnitude = max(abs(a), abs(b))
            epsilon = 10.0 ** (round(math.log10(magnitude)) - EPSILON_EXPONENT)
            if abs(a - b) < epsilon:
                return 0
        return -1 if a < b else 1

    @staticmethod
    def _hash_value(value: float) -> tuple[int, bool]:
        # Tolerant equality never holds across sign, zero or finiteness.
        return (value > 0) - (value < 0), math.isfinite(value)

    @staticmethod
    def _div(a: Any, b: Any) -> float:
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.divide(a, b))

    @staticmethod
    def _is_scalar(value: Any) -> bool:
        return isinstance(value, numbers.Real)

    @staticmethod
    def _scalar(value: Any) -> float:
        return float(value)

    def to_decimal(self) -> DecimalMeasurement[U]:
        """The measurement as a DecimalMeasurement, using the shortest repr of the value."""
        from .measurement_decimal import DecimalMeasurement

        return DecimalMeasurement(Decimal(repr(self._value)), self._unit)

    @classmethod
    def from_decimal(cls, measurement: DecimalMeasurement[U]) -> Measurement[U]:
        return cls(float(measurement.value), measurement.unit)


def as_measurements(values: Iterable[Any], unit: U) -> list[Measurement[U]]:
    """Wrap every scalar of ``values`` into a measurement in ``unit``.

    Args:
        values: Iterable of numbers (a NumPy array works too).
        unit: Unit of every value.

    Returns:
        list[Measurement]: One measurement per value, in order.
    """
    return [Measurement(value, unit) for value in values]


def values_in(measurements: Iterable[Measurement[U]], unit: U) -> np.ndarray:
    """Values of ``measurements`` expressed in ``unit``.

    Returns:
        np.ndarray: 1-D float array with one entry per measurement.
    """
    return np.array([m.value_in(unit) for m in measurements], dtype=float)


def convert_array(values: BASE_TYPE, from_unit: UnitEnum, to_unit: UnitEnum) -> np.ndarray:
    """Convert an array of scalars between two units of one enumeration.

    Every primitive conversion step is applied element-wise. Custom
    conversions receive the whole array and must support that.

    Args:
        values: Scalars expressed in ``from_unit``.
        from_unit: Unit of the input values.
        to_unit: Unit of the result.

    Returns:
        np.ndarray: Float array of the same shape as ``values``.
    """
    array = np.asarray(values, dtype=float)
    return np.asarray(unit_table(type(from_unit)).convert(array, from_unit, to_unit), dtype=float)
