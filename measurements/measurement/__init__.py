"""Measurement value types.

Two variants share one implementation in ``measurement_base``:

    - Measurement: float value, tolerant comparison, NumPy bulk helpers
    - DecimalMeasurement: Decimal value, exact comparison

Example:
    >>> from measurements.measurement import Measurement
    >>> from measurements.unit import DistanceUnit
    >>> Measurement.parse('1,234.23"', DistanceUnit).value
    1234.23
"""

from .measurement_base import MeasurementBase
from .measurement_decimal import DecimalMeasurement
from .measurement_float import Measurement, as_measurements, convert_array, values_in

__all__ = [
    "MeasurementBase",
    "Measurement",
    "DecimalMeasurement",
    "as_measurements",
    "values_in",
    "convert_array",
]
