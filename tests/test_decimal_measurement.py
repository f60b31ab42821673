"""
Tests for the decimal measurement value type.
"""

import pickle
import unittest
from decimal import Decimal, InvalidOperation

from measurements import DecimalMeasurement, Measurement
from measurements.exceptions import MeasurementFormatError
from measurements.unit import DistanceUnit, TemperatureUnit, WeightUnit

from sample_units import DecimalSampleUnit


class TestDecimalMeasurement(unittest.TestCase):
    """Test DecimalMeasurement class."""

    def test_value_coercion(self):
        self.assertEqual(DecimalMeasurement(2, DistanceUnit.Foot).value, Decimal(2))
        self.assertEqual(DecimalMeasurement("2.50", DistanceUnit.Foot).value, Decimal("2.50"))
        self.assertEqual(DecimalMeasurement(0.1, DistanceUnit.Foot).value, Decimal("0.1"))
        with self.assertRaises(MeasurementFormatError):
            DecimalMeasurement("two", DistanceUnit.Foot)
        with self.assertRaises(TypeError):
            DecimalMeasurement(None, DistanceUnit.Foot)

    def test_exact_conversion(self):
        m = DecimalMeasurement(1, DistanceUnit.Inch)
        self.assertEqual(m.value_in(DistanceUnit.Centimeter), Decimal("2.54"))
        self.assertEqual(DecimalMeasurement(10, DistanceUnit.RussianLine).value_in(DistanceUnit.Inch), Decimal(1))

    def test_custom_decimal_conversion(self):
        m = DecimalMeasurement(10, DecimalSampleUnit.Unit9)
        self.assertEqual(m.base_value, Decimal("-0.8"))
        self.assertEqual(m.to(DecimalSampleUnit.Base).to(DecimalSampleUnit.Unit9), m)

    def test_arithmetic(self):
        total = DecimalMeasurement(5, DistanceUnit.Centimeter) + DecimalMeasurement(5, DistanceUnit.Millimeter)
        self.assertEqual(total.value, Decimal("5.5"))
        self.assertIs(total.unit, DistanceUnit.Centimeter)

        m = DecimalMeasurement("1.5", WeightUnit.Pound)
        self.assertEqual((m * 2).value, Decimal("3.0"))
        self.assertEqual((Decimal("0.5") * m).value, Decimal("0.75"))
        self.assertEqual((m / 3).value, Decimal("0.5"))
        self.assertEqual((m - m).value, Decimal(0))
        self.assertEqual(DecimalMeasurement(1, DistanceUnit.Foot) / DecimalMeasurement(1, DistanceUnit.Inch), Decimal(12))

    def test_float_scalars_are_rejected(self):
        m = DecimalMeasurement(1, DistanceUnit.Foot)
        with self.assertRaises(TypeError):
            m * 1.5
        with self.assertRaises(TypeError):
            m / 1.5

    def test_exact_comparison(self):
        """Test that the decimal variant has no tolerance."""
        a = DecimalMeasurement("1.000000000000000000001", DistanceUnit.Meter)
        b = DecimalMeasurement(1, DistanceUnit.Meter)
        self.assertNotEqual(a, b)
        self.assertGreater(a, b)
        self.assertEqual(DecimalMeasurement(10, DistanceUnit.Centimeter), DecimalMeasurement("0.1", DistanceUnit.Meter))

    def test_hash(self):
        self.assertEqual(
            hash(DecimalMeasurement(1, DistanceUnit.Foot)),
            hash(DecimalMeasurement(12, DistanceUnit.Inch)),
        )
        self.assertEqual(hash(DecimalMeasurement("1.0", DistanceUnit.Inch)), hash(DecimalMeasurement(1, DistanceUnit.Inch)))

    def test_variant_casts(self):
        d = DecimalMeasurement("36.6", TemperatureUnit.Celsius)
        m = d.to_float()
        self.assertIsInstance(m, Measurement)
        self.assertEqual(m.as_tuple(), (36.6, TemperatureUnit.Celsius))
        self.assertEqual(DecimalMeasurement.from_measurement(m), d)

    def test_repr_and_pickle(self):
        d = DecimalMeasurement("2.5", DistanceUnit.Meter)
        self.assertEqual(repr(d), "DecimalMeasurement(Decimal('2.5'), DistanceUnit.Meter)")
        self.assertEqual(pickle.loads(pickle.dumps(d)).as_tuple(), d.as_tuple())

    def test_zero(self):
        zero = DecimalMeasurement.zero(DistanceUnit)
        self.assertEqual(zero.as_tuple(), (Decimal(0), DistanceUnit.Inch))

    def test_division_by_zero(self):
        """Test that dividing by zero gives a signed Infinity."""
        self.assertEqual((DecimalMeasurement(1, DistanceUnit.Foot) / 0).value, Decimal("Infinity"))
        self.assertEqual((DecimalMeasurement(-1, DistanceUnit.Foot) / Decimal(0)).value, Decimal("-Infinity"))
        with self.assertRaises(InvalidOperation):
            DecimalMeasurement(0, DistanceUnit.Foot) / 0

    def test_zero_in_reciprocal_unit(self):
        m = DecimalMeasurement(0, DecimalSampleUnit.Unit6)
        self.assertEqual(m.base_value, Decimal("Infinity"))
        self.assertEqual(m.to(DecimalSampleUnit.Base).to(DecimalSampleUnit.Unit6).value, Decimal(0))


if __name__ == '__main__':
    unittest.main()
