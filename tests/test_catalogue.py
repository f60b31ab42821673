"""
Tests for the unit catalogue: names and reference conversions per dimension.
"""

import unittest

from measurements import Measurement
from measurements.unit import (
    UNIT_TYPES,
    AccelerationUnit,
    AngularUnit,
    AreaUnit,
    DensityUnit,
    DistanceUnit,
    EnergyUnit,
    ForceUnit,
    GasConsumptionUnit,
    PowerUnit,
    PressureUnit,
    SolidAngularUnit,
    TemperatureUnit,
    VelocityUnit,
    VolumeUnit,
    WeightUnit,
    unit_table,
)

# (value, unit, expected, target unit, tolerance)
REFERENCE_CONVERSIONS = [
    (1, DistanceUnit.Inch, 2.54, DistanceUnit.Centimeter, 1e-9),
    (1, DistanceUnit.Foot, 12, DistanceUnit.Inch, 1e-9),
    (1, DistanceUnit.Mile, 1.609344, DistanceUnit.Kilometer, 1e-9),
    (1, DistanceUnit.NauticalMile, 1852, DistanceUnit.Meter, 1e-9),
    (12, DistanceUnit.Line, 1, DistanceUnit.Inch, 1e-9),
    (72, DistanceUnit.Point, 1, DistanceUnit.Inch, 1e-9),
    (360, AngularUnit.Degree, 6.28318530717958, AngularUnit.Radian, 1e-9),
    (1000, AngularUnit.MRad, 1, AngularUnit.Radian, 1e-9),
    (30, AngularUnit.MOA, 0.5, AngularUnit.Degree, 1e-9),
    (1, AngularUnit.MRad, 3.6, AngularUnit.InchesPer100Yards, 1e-5),
    (1, AngularUnit.Mil, 3.5343, AngularUnit.InchesPer100Yards, 1e-5),
    (1, AngularUnit.Thousand, 10.47198, AngularUnit.CmPer100Meters, 1e-5),
    (100, AngularUnit.Percent, 45, AngularUnit.Degree, 1e-5),
    (50, AngularUnit.Percent, 26.56505, AngularUnit.Degree, 1e-5),
    (26.56505, AngularUnit.Degree, 50, AngularUnit.Percent, 1e-5),
    (400, AngularUnit.Gradian, 1, AngularUnit.Turn, 1e-9),
    (1, SolidAngularUnit.SquareDegree, 3.0461742e-4, SolidAngularUnit.Steradian, 1e-9),
    (1, SolidAngularUnit.SquareDegree, 3600, SolidAngularUnit.SquareMinute, 1e-6),
    (50, TemperatureUnit.Fahrenheit, 10, TemperatureUnit.Celsius, 1e-5),
    (-50, TemperatureUnit.Fahrenheit, 227.5944444, TemperatureUnit.Kelvin, 1e-5),
    (38, TemperatureUnit.Celsius, 560.07, TemperatureUnit.Rankin, 1e-5),
    (117, TemperatureUnit.Fahrenheit, 576.67, TemperatureUnit.Rankin, 1e-5),
    (100, TemperatureUnit.Celsius, 80, TemperatureUnit.Reaumur, 1e-9),
    (100, TemperatureUnit.Celsius, 0, TemperatureUnit.Delisle, 1e-9),
    (5, VelocityUnit.MilesPerHour, 7.33333333, VelocityUnit.FeetPerSecond, 1e-5),
    (12, VelocityUnit.MetersPerSecond, 43.2, VelocityUnit.KilometersPerHour, 1e-9),
    (12.5, VelocityUnit.Knot, 21.09762, VelocityUnit.FeetPerSecond, 1e-5),
    (2700, VelocityUnit.FeetPerSecond, 822.96, VelocityUnit.MetersPerSecond, 1e-5),
    (5, GasConsumptionUnit.MilesPerGallon, 47.0429, GasConsumptionUnit.LiterPer100Km, 1e-4),
    (12, GasConsumptionUnit.LiterPer100Km, 19.6012, GasConsumptionUnit.MilesPerGallon, 1e-4),
    (1, PressureUnit.KiloPascal, 1000, PressureUnit.Pascal, 1e-9),
    (1, PressureUnit.Atmosphere, 760, PressureUnit.MillimetersOfMercury, 1e-3),
    (29.92, PressureUnit.InchesOfMercury, 759.96801, PressureUnit.MillimetersOfMercury, 1e-3),
    (1, PressureUnit.PoundsPerSquareInch, 0.0689476, PressureUnit.Bar, 1e-5),
    (5.5, EnergyUnit.Joule, 4.056591821024985, EnergyUnit.FootPound, 1e-9),
    (1, EnergyUnit.BTU, 778.1280674872351, EnergyUnit.FootPound, 1e-9),
    (1, VolumeUnit.CubicFoot, 1728, VolumeUnit.CubicInch, 1e-2),
    (1, VolumeUnit.CubicFoot, 28.31684, VolumeUnit.Liter, 1e-5),
    (1, VolumeUnit.CubicFoot, 7.480519, VolumeUnit.Gallon, 1e-5),
    (120, AreaUnit.Acre, 48.56227, AreaUnit.Hectare, 1e-5),
    (1, AreaUnit.Ar, 100, AreaUnit.SquareMeter, 1e-9),
    (3.28084, AccelerationUnit.FeetPerSecondSquare, 0.101972, AccelerationUnit.EarthGravity, 1e-5),
    (1, AccelerationUnit.EarthGravity, 9.80665, AccelerationUnit.MeterPerSecondSquare, 1e-9),
    (1, ForceUnit.Newton, 100000, ForceUnit.Dyne, 1e-5),
    (1, ForceUnit.Newton, 0.10197, ForceUnit.KilogramForce, 1e-5),
    (980665, ForceUnit.Dyne, 2.204622, ForceUnit.PoundForce, 1e-5),
    (1, PowerUnit.MechanicalHorsepower, 745.7, PowerUnit.Watt, 1e-9),
    (1, PowerUnit.MetricHorsepower, 542.47696, PowerUnit.FootPoundPerSecond, 1e-5),
    (1, DensityUnit.GramPerCubicCentimeter, 1000, DensityUnit.KilogramPerCubicMeter, 1e-9),
    (1, DensityUnit.PoundsPerCubicFoot, 16.0185, DensityUnit.KilogramPerCubicMeter, 1e-9),
    (5, WeightUnit.Kilogram, 5000, WeightUnit.Gram, 1e-5),
    (1, WeightUnit.Pound, 0.453592, WeightUnit.Kilogram, 1e-5),
    (1, WeightUnit.Kilogram, 9.80665, WeightUnit.Newton, 1e-5),
    (1, WeightUnit.Tonne, 1000, WeightUnit.Kilogram, 1e-5),
    (16, WeightUnit.Dram, 1, WeightUnit.Ounce, 1e-5),
]


class TestCatalogue(unittest.TestCase):
    """Test every catalogue enumeration."""

    def test_every_enumeration_compiles(self):
        for name, unit_type in UNIT_TYPES.items():
            with self.subTest(dimension=name):
                table = unit_table(unit_type)
                self.assertEqual(len(table.units), len(unit_type))

    def test_base_units(self):
        self.assertIs(DistanceUnit.base(), DistanceUnit.Inch)
        self.assertIs(AngularUnit.base(), AngularUnit.Radian)
        self.assertIs(TemperatureUnit.base(), TemperatureUnit.Fahrenheit)
        self.assertIs(WeightUnit.base(), WeightUnit.Grain)
        self.assertIs(VelocityUnit.base(), VelocityUnit.MetersPerSecond)
        self.assertIs(DensityUnit.base(), DensityUnit.KilogramPerCubicMeter)

    def test_distance_names(self):
        """Test primary and alternative names of the distance units."""
        cases = [
            (DistanceUnit.Inch, '"', "in"),
            (DistanceUnit.Foot, "'", "ft"),
            (DistanceUnit.Yard, "yd", None),
            (DistanceUnit.Line, "ln", "'''"),
            (DistanceUnit.RussianLine, "rln", None),
        ]
        for unit, name, alternative in cases:
            with self.subTest(unit=unit):
                self.assertEqual(unit.symbol, name)
                self.assertEqual(unit.descriptor.alternative_name, alternative)
                self.assertIs(DistanceUnit.parse(name), unit)
                if alternative:
                    self.assertIs(DistanceUnit.parse(alternative), unit)

    def test_reference_conversions(self):
        for value, unit, expected, target, tolerance in REFERENCE_CONVERSIONS:
            with self.subTest(unit=unit, target=target):
                converted = Measurement(value, unit).value_in(target)
                self.assertAlmostEqual(converted, expected, delta=tolerance * max(1.0, abs(expected)))


if __name__ == '__main__':
    unittest.main()
