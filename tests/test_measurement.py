"""
Tests for the float measurement value type.
"""

import math
import pickle
import unittest
from decimal import Decimal

import numpy as np

from measurements import DecimalMeasurement, Measurement, as_measurements, convert_array, values_in
from measurements.exceptions import InvalidUnitError
from measurements.unit import AngularUnit, DistanceUnit, GasConsumptionUnit, TemperatureUnit, WeightUnit

from sample_units import SampleUnit


class TestMeasurementBasics(unittest.TestCase):
    """Test construction and accessors."""

    def test_value_and_unit(self):
        m = Measurement(1.5, WeightUnit.Kilogram)
        self.assertEqual(m.value, 1.5)
        self.assertIs(m.unit, WeightUnit.Kilogram)
        self.assertIs(m.unit_type, WeightUnit)
        self.assertEqual(m.as_tuple(), (1.5, WeightUnit.Kilogram))

    def test_value_is_float(self):
        m = Measurement(2, DistanceUnit.Meter)
        self.assertIsInstance(m.value, float)

    def test_invalid_unit(self):
        with self.assertRaises(InvalidUnitError):
            Measurement(1, "cm")

    def test_text_value_is_rejected(self):
        with self.assertRaises(TypeError):
            Measurement("1", DistanceUnit.Meter)

    def test_from_tuple_and_zero(self):
        self.assertEqual(Measurement.from_tuple((3, DistanceUnit.Foot)), Measurement(3, DistanceUnit.Foot))
        zero = Measurement.zero(TemperatureUnit)
        self.assertEqual(zero.as_tuple(), (0.0, TemperatureUnit.Fahrenheit))

    def test_immutable(self):
        m = Measurement(1, DistanceUnit.Meter)
        with self.assertRaises(AttributeError):
            m.value = 2
        with self.assertRaises(AttributeError):
            m._value = 2

    def test_base_value(self):
        self.assertAlmostEqual(Measurement(1, DistanceUnit.Foot).base_value, 12)
        self.assertEqual(Measurement(7, DistanceUnit.Inch).base_value, 7)

    def test_repr_and_str(self):
        m = Measurement(1.5, WeightUnit.Kilogram)
        self.assertEqual(repr(m), "Measurement(1.5, WeightUnit.Kilogram)")
        self.assertEqual(str(m), "1.5kg")
        self.assertEqual(m.text, "1.5kg")

    def test_pickle(self):
        m = Measurement(1.25, AngularUnit.MOA)
        restored = pickle.loads(pickle.dumps(m))
        self.assertEqual(restored.as_tuple(), m.as_tuple())


class TestMeasurementConversion(unittest.TestCase):
    """Test unit conversion of measurements."""

    def test_inch_to_centimeter(self):
        self.assertAlmostEqual(Measurement(1, DistanceUnit.Inch).value_in(DistanceUnit.Centimeter), 2.54)

    def test_russian_line_to_inch(self):
        self.assertAlmostEqual(Measurement(10, DistanceUnit.RussianLine).value_in(DistanceUnit.Inch), 1)

    def test_to_returns_measurement(self):
        m = Measurement(1, DistanceUnit.Foot).to(DistanceUnit.Inch)
        self.assertIsInstance(m, Measurement)
        self.assertIs(m.unit, DistanceUnit.Inch)
        self.assertAlmostEqual(m.value, 12)

    def test_value_in_foreign_unit(self):
        with self.assertRaises(InvalidUnitError):
            Measurement(1, DistanceUnit.Foot).value_in(WeightUnit.Pound)

    def test_static_conversions(self):
        self.assertAlmostEqual(Measurement.convert(1, DistanceUnit.Foot, DistanceUnit.Inch), 12)
        self.assertAlmostEqual(Measurement.to_base(1, DistanceUnit.Yard), 36)
        self.assertAlmostEqual(Measurement.from_base(36, DistanceUnit.Yard), 1)

    def test_sample_units(self):
        m = Measurement(10, SampleUnit.Unit7)
        self.assertAlmostEqual(m.value_in(SampleUnit.Base), 24)
        self.assertAlmostEqual(m.value_in(SampleUnit.Unit8), 2 / 25)


class TestMeasurementArithmetic(unittest.TestCase):
    """Test measurement arithmetic."""

    def test_add_keeps_left_unit(self):
        total = Measurement(5, DistanceUnit.Centimeter) + Measurement(5, DistanceUnit.Millimeter)
        self.assertIs(total.unit, DistanceUnit.Centimeter)
        self.assertEqual(total, Measurement(5.5, DistanceUnit.Centimeter))

    def test_subtract(self):
        diff = Measurement(1, DistanceUnit.Foot) - Measurement(6, DistanceUnit.Inch)
        self.assertIs(diff.unit, DistanceUnit.Foot)
        self.assertAlmostEqual(diff.value, 0.5)

    def test_scalar_multiply_and_divide(self):
        m = Measurement(3, DistanceUnit.Meter)
        self.assertEqual((m * 2).value, 6)
        self.assertEqual((2 * m).value, 6)
        self.assertEqual((m / 2).value, 1.5)
        self.assertEqual((m * np.float64(2)).value, 6)

    def test_division_by_zero(self):
        """Test that dividing by zero gives a signed infinity."""
        self.assertEqual((Measurement(1, DistanceUnit.Inch) / 0).value, math.inf)
        self.assertEqual((Measurement(-1, DistanceUnit.Inch) / 0.0).value, -math.inf)
        self.assertTrue(math.isnan((Measurement(0, DistanceUnit.Inch) / 0).value))
        self.assertEqual(Measurement(1, DistanceUnit.Foot) / Measurement(0, DistanceUnit.Inch), math.inf)

    def test_zero_in_reciprocal_unit(self):
        """Test that zero miles per gallon converts to infinity and back to zero."""
        mpg = Measurement(0, GasConsumptionUnit.MilesPerGallon)
        self.assertEqual(mpg.value_in(GasConsumptionUnit.LiterPer100Km), math.inf)
        self.assertEqual(mpg.to(GasConsumptionUnit.LiterPer100Km).value_in(GasConsumptionUnit.MilesPerGallon), 0.0)
        self.assertEqual(mpg, Measurement(0, GasConsumptionUnit.MilesPerGallon))
        np.testing.assert_array_equal(
            convert_array([0.0], GasConsumptionUnit.MilesPerGallon, GasConsumptionUnit.LiterPer100Km), [math.inf])

    def test_ratio(self):
        ratio = Measurement(1, DistanceUnit.Foot) / Measurement(1, DistanceUnit.Inch)
        self.assertIsInstance(ratio, float)
        self.assertAlmostEqual(ratio, 12)

    def test_unary(self):
        m = Measurement(-2, TemperatureUnit.Celsius)
        self.assertEqual((-m).value, 2)
        self.assertIs(+m, m)
        self.assertEqual(abs(m).value, 2)

    def test_mixing_families_fails(self):
        """Test that measurements of different enumerations cannot be combined."""
        length = Measurement(1, DistanceUnit.Meter)
        weight = Measurement(1, WeightUnit.Kilogram)
        with self.assertRaises(TypeError):
            length + weight
        with self.assertRaises(TypeError):
            length - weight
        with self.assertRaises(TypeError):
            length / weight
        with self.assertRaises(TypeError):
            length < weight

    def test_mixing_variants_fails(self):
        m = Measurement(1, DistanceUnit.Meter)
        d = DecimalMeasurement(1, DistanceUnit.Meter)
        with self.assertRaises(TypeError):
            m + d
        with self.assertRaises(TypeError):
            m < d
        self.assertFalse(m == d)

    def test_measurement_times_measurement_fails(self):
        m = Measurement(1, DistanceUnit.Meter)
        with self.assertRaises(TypeError):
            m * m
        with self.assertRaises(TypeError):
            m * "2"


class TestMeasurementComparison(unittest.TestCase):
    """Test epsilon-aware comparison and hashing."""

    def test_equal_across_units(self):
        self.assertEqual(Measurement(10, DistanceUnit.Centimeter), Measurement(0.1, DistanceUnit.Meter))
        self.assertEqual(Measurement(1, DistanceUnit.Foot), Measurement(12, DistanceUnit.Inch))

    def test_tiny_values(self):
        """Test that the tolerance scales with the magnitude of the values."""
        self.assertEqual(Measurement(1e-200, DistanceUnit.Centimeter), Measurement(1e-202, DistanceUnit.Meter))
        self.assertNotEqual(Measurement(1e-200, DistanceUnit.Centimeter), Measurement(1e-201, DistanceUnit.Centimeter))

    def test_huge_values(self):
        self.assertEqual(Measurement(1e200, DistanceUnit.Meter), Measurement(1e202, DistanceUnit.Centimeter))
        self.assertLess(Measurement(1e200, DistanceUnit.Meter), Measurement(1.000001e200, DistanceUnit.Meter))

    def test_round_off_is_tolerated(self):
        a = Measurement(0.1 + 0.2, DistanceUnit.Meter)
        b = Measurement(0.3, DistanceUnit.Meter)
        self.assertEqual(a, b)
        self.assertLessEqual(a, b)
        self.assertGreaterEqual(a, b)
        self.assertFalse(a < b)
        self.assertEqual(a.compare_to(b), 0)

    def test_ordering(self):
        inch = Measurement(1, DistanceUnit.Inch)
        cm = Measurement(1, DistanceUnit.Centimeter)
        self.assertGreater(inch, cm)
        self.assertLess(cm, inch)
        self.assertEqual(inch.compare_to(cm), 1)
        self.assertEqual(cm.compare_to(inch), -1)
        self.assertEqual(sorted([inch, cm]), [cm, inch])

    def test_zero(self):
        self.assertEqual(Measurement(0, DistanceUnit.Meter), Measurement(0, DistanceUnit.Inch))
        self.assertNotEqual(Measurement(0, DistanceUnit.Meter), Measurement(1e-300, DistanceUnit.Meter))

    def test_different_families_are_not_equal(self):
        self.assertNotEqual(Measurement(1, DistanceUnit.Inch), Measurement(1, WeightUnit.Grain))

    def test_foreign_types(self):
        m = Measurement(1, DistanceUnit.Inch)
        self.assertNotEqual(m, 1.0)
        with self.assertRaises(TypeError):
            m < 1.0
        with self.assertRaises(TypeError):
            m.compare_to(1.0)

    def test_hash_follows_base_value(self):
        """Test that equal measurements in different units hash alike."""
        self.assertEqual(hash(Measurement(1, DistanceUnit.Foot)), hash(Measurement(12, DistanceUnit.Inch)))
        self.assertEqual(hash(Measurement(10, DistanceUnit.Centimeter)), hash(Measurement(0.1, DistanceUnit.Meter)))
        self.assertEqual(len({Measurement(1, DistanceUnit.Foot), Measurement(12, DistanceUnit.Inch)}), 1)

    def test_hash_agrees_with_tolerant_equality(self):
        """Test that measurements equal within the tolerance share a hash across rounding boundaries."""
        a = Measurement(1.23456789050001, DistanceUnit.Inch)
        b = Measurement(1.23456789049999, DistanceUnit.Inch)
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(len({a, b}), 1)

        tiny = Measurement(1e-300, DistanceUnit.Inch)
        self.assertNotEqual(tiny, Measurement(0, DistanceUnit.Inch))
        self.assertNotEqual(tiny, Measurement(-1e-300, DistanceUnit.Inch))
        self.assertEqual(len({tiny, Measurement(0, DistanceUnit.Inch), Measurement(-1e-300, DistanceUnit.Inch)}), 3)

    def test_hash_is_cached(self):
        m = Measurement(3, DistanceUnit.Yard)
        self.assertEqual(hash(m), hash(m))
        self.assertIsNotNone(m._hash)


class TestBulkHelpers(unittest.TestCase):
    """Test NumPy bulk helpers."""

    def test_as_measurements(self):
        ms = as_measurements(np.array([1.0, 2.0]), DistanceUnit.Foot)
        self.assertEqual([m.value for m in ms], [1.0, 2.0])
        self.assertTrue(all(m.unit is DistanceUnit.Foot for m in ms))

    def test_values_in(self):
        values = values_in([Measurement(1, DistanceUnit.Foot), Measurement(1, DistanceUnit.Yard)], DistanceUnit.Inch)
        np.testing.assert_allclose(values, [12, 36])

    def test_convert_array(self):
        celsius = convert_array([32, 212, -40], TemperatureUnit.Fahrenheit, TemperatureUnit.Celsius)
        self.assertIsInstance(celsius, np.ndarray)
        np.testing.assert_allclose(celsius, [0, 100, -40], atol=1e-9)


class TestVariantCasts(unittest.TestCase):
    """Test conversions between the float and the decimal variant."""

    def test_to_decimal(self):
        d = Measurement(0.1, DistanceUnit.Meter).to_decimal()
        self.assertIsInstance(d, DecimalMeasurement)
        self.assertEqual(d.value, Decimal("0.1"))

    def test_from_decimal(self):
        m = Measurement.from_decimal(DecimalMeasurement("2.5", DistanceUnit.Meter))
        self.assertEqual(m.as_tuple(), (2.5, DistanceUnit.Meter))


if __name__ == '__main__':
    unittest.main()
