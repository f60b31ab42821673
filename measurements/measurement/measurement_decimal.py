"""Fixed-point measurement value type.

``DecimalMeasurement`` keeps its value as ``decimal.Decimal`` and converts
through the DECIMAL unit tables, which evaluate every primitive step in the
library decimal context (28 significant digits). Comparison is exact.

Example:
    >>> from decimal import Decimal
    >>> from measurements.unit import DistanceUnit
    >>> m = DecimalMeasurement("1", DistanceUnit.Inch)
    >>> m.value_in(DistanceUnit.Centimeter)
    Decimal('2.54')
    >>> m * 2
    DecimalMeasurement(Decimal('2'), DistanceUnit.Inch)
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any

from ..config import DECIMAL_CONTEXT
from ..exceptions import MeasurementFormatError
from ..unit.compiler import Arithmetic
from .measurement_base import MeasurementBase, U

if TYPE_CHECKING:
    from .measurement_float import Measurement

__all__ = ["DecimalMeasurement"]


class DecimalMeasurement(MeasurementBase[U]):
    """Measurement with a ``Decimal`` value.

    The value may be given as ``Decimal``, ``int``, a decimal string or a
    ``float`` (taken by its shortest repr). Scalars for ``*`` and ``/``
    must be ``int`` or ``Decimal``.
    """

    __slots__ = ()

    ARITHMETIC = Arithmetic.DECIMAL

    _add = staticmethod(DECIMAL_CONTEXT.add)
    _sub = staticmethod(DECIMAL_CONTEXT.subtract)
    _mul = staticmethod(DECIMAL_CONTEXT.multiply)
    _div = staticmethod(DECIMAL_CONTEXT.divide)

    @classmethod
    def _coerce(cls, value: Any) -> Decimal:
        if isinstance(value, Decimal):
            return value
        if isinstance(value, int):
            return Decimal(value)
        if isinstance(value, float):
            return Decimal(repr(value))
        if isinstance(value, str):
            try:
                return Decimal(value.strip())
            except InvalidOperation:
                raise MeasurementFormatError(value, "invalid decimal number") from None
        msg = f"DecimalMeasurement value must be Decimal, int, float or str, got {type(value).__name__}"
        raise TypeError(msg)

    @classmethod
    def _parse_number(cls, text: str) -> Decimal:
        return Decimal(text)

    @staticmethod
    def _format_lossless(value: Decimal) -> str:
        return format(value, "f")

    @staticmethod
    def _compare_values(a: Decimal, b: Decimal) -> int:
        return (a > b) - (a < b)

    @staticmethod
    def _hash_value(value: Decimal) -> Decimal:
        return value

    @staticmethod
    def _is_scalar(value: Any) -> bool:
        return isinstance(value, (int, Decimal))

    def to_float(self) -> Measurement[U]:
        """The measurement as a float Measurement."""
        from .measurement_float import Measurement

        return Measurement(float(self._value), self._unit)

    @classmethod
    def from_measurement(cls, measurement: Measurement[U]) -> DecimalMeasurement[U]:
        """Convert a float measurement, taking the shortest repr of its value."""
        return cls(Decimal(repr(measurement.value)), measurement.unit)
