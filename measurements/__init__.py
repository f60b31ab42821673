"""Typed-unit arithmetic: physical quantities as (value, unit) pairs.

Measurements is a library for working with physical quantities safely. A
quantity is stored as a number together with the unit it was given in, and
can be converted to any other unit of the same dimension, parsed from and
formatted to text, compared with tolerance for floating point round-off and
combined arithmetically with quantities of the same dimension.

Framework Architecture:
    Declarative Units:
        Every dimension is a unit enumeration (``DistanceUnit``,
        ``TemperatureUnit``, ...). Each member declares its display names,
        its default precision and a conversion rule towards the single base
        unit of the enumeration. Rules are made of at most two primitive
        operations (add, multiply, divide, atan, ...) or delegate to a
        registered custom conversion.

    Compiled Tables:
        On first use an enumeration is validated and compiled into an
        immutable table of lookup dictionaries and pre-composed conversion
        closures. The reverse conversion of every rule is derived
        automatically. Tables are cached per enumeration and arithmetic
        (float or decimal) and built exactly once, also under concurrency.

    Measurement Values:
        ``Measurement`` (float) and ``DecimalMeasurement`` (Decimal) are
        immutable value types built on the compiled tables. Float
        measurements compare with a magnitude-relative epsilon; decimal
        measurements compare exactly.

Framework Components:
    Units (measurements.unit):
        • UnitEnum, UnitDescriptor, ConversionRule, Operation
        • ConversionRegistry and the register_conversion decorator
        • compile_unit_table, UnitTableCache, unit_table
        • The catalogue of fifteen unit enumerations

    Values (measurements.measurement):
        • Measurement, DecimalMeasurement
        • as_measurements, values_in, convert_array (NumPy bulk helpers)

    Support:
        • measurements.culture: number formats for parsing and formatting
        • measurements.measurement_math: trigonometry and physics helpers
        • measurements.cli: the ``measurements`` command

Example:
    Basic conversions::

        >>> from measurements import DistanceUnit, Measurement
        >>> inch = Measurement(1, DistanceUnit.Inch)
        >>> inch.value_in(DistanceUnit.Centimeter)
        2.54
        >>> DistanceUnit.RussianLine(10).value_in(DistanceUnit.Inch)
        1.0

    Parsing and formatting::

        >>> m = Measurement.parse('1,234.23"', DistanceUnit)
        >>> m.value
        1234.23
        >>> Measurement.parse('1 234,23"', DistanceUnit, culture="ru") == m
        True
        >>> format(Measurement(1.2345678, DistanceUnit.Meter), "N2")
        '1.23m'

    Custom conversions::

        >>> from measurements import ConversionRule, UnitDescriptor, UnitEnum
        >>> from measurements import register_conversion
        >>> @register_conversion("reciprocal-plus-one")
        ... class ReciprocalPlusOne:
        ...     def to_base(self, value):
        ...         return 2 / value - 1
        ...     def from_base(self, value):
        ...         return 2 / (value + 1)
        >>> class OddUnit(UnitEnum):
        ...     Base = 0, UnitDescriptor("b"), ConversionRule.base()
        ...     Odd = 1, UnitDescriptor("o"), ConversionRule.custom_rule("reciprocal-plus-one")
"""

from .culture import INVARIANT, Culture, get_culture, register_culture
from .exceptions import (
    InvalidRuleDeclarationError,
    InvalidUnitError,
    MeasurementError,
    MeasurementFormatError,
    UnknownCultureError,
    UnknownUnitNameError,
)
from .measurement import (
    DecimalMeasurement,
    Measurement,
    MeasurementBase,
    as_measurements,
    convert_array,
    values_in,
)
from .unit import (
    DEFAULT_CACHE,
    DEFAULT_REGISTRY,
    UNIT_TYPES,
    AccelerationUnit,
    AngularUnit,
    AreaUnit,
    Arithmetic,
    CompiledUnitTable,
    ConversionRegistry,
    ConversionRule,
    CustomConversion,
    DecimalCustomConversion,
    DensityUnit,
    DistanceUnit,
    EnergyUnit,
    ForceUnit,
    GasConsumptionUnit,
    Operation,
    PowerUnit,
    PressureUnit,
    SolidAngularUnit,
    TemperatureUnit,
    UnitDescriptor,
    UnitEnum,
    UnitTableCache,
    VelocityUnit,
    VolumeUnit,
    WeightUnit,
    compile_unit_table,
    register_conversion,
    unit_table,
)

__version__ = "0.1.0"

__all__ = [
    # Values
    "Measurement",
    "DecimalMeasurement",
    "MeasurementBase",
    "as_measurements",
    "values_in",
    "convert_array",
    # Declarations
    "Operation",
    "UnitDescriptor",
    "ConversionRule",
    "UnitEnum",
    # Custom conversions
    "CustomConversion",
    "DecimalCustomConversion",
    "ConversionRegistry",
    "DEFAULT_REGISTRY",
    "register_conversion",
    # Compiler
    "Arithmetic",
    "CompiledUnitTable",
    "UnitTableCache",
    "DEFAULT_CACHE",
    "compile_unit_table",
    "unit_table",
    # Catalogue
    "AccelerationUnit",
    "AngularUnit",
    "AreaUnit",
    "DensityUnit",
    "DistanceUnit",
    "EnergyUnit",
    "ForceUnit",
    "GasConsumptionUnit",
    "PowerUnit",
    "PressureUnit",
    "SolidAngularUnit",
    "TemperatureUnit",
    "VelocityUnit",
    "VolumeUnit",
    "WeightUnit",
    "UNIT_TYPES",
    # Cultures
    "Culture",
    "INVARIANT",
    "get_culture",
    "register_culture",
    # Errors
    "MeasurementError",
    "InvalidUnitError",
    "UnknownUnitNameError",
    "MeasurementFormatError",
    "InvalidRuleDeclarationError",
    "UnknownCultureError",
]
