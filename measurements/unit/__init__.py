"""Unit enumerations and the conversion engine behind them.

This package holds everything that describes units: the declarative
metadata every unit enumeration is built from, the registry of custom
conversions, the compiler that turns a declaration into fast lookup and
conversion tables, and the catalogue of concrete unit enumerations.

Architecture:
    - unit_base: Operation, UnitDescriptor, ConversionRule and UnitEnum
    - conversion: Custom conversion protocols and their registry
    - compiler: Validation, reverse derivation and the table cache
    - unit_*: One module per physical dimension

Unit Families:
    Every UnitEnum subclass is one family with exactly one base unit:

    - AccelerationUnit: Gal (base), ft/s², m/s², g0
    - AngularUnit: Radian (base), Degree, MOA, Mil, MRad, slopes, ...
    - AreaUnit: SquareMillimeter (base), ..., Acre, Hectare
    - DensityUnit: KilogramPerCubicMeter (base), ...
    - DistanceUnit: Inch (base), Foot, Meter, Kilometer, ...
    - EnergyUnit: Joule (base), FootPound, BTU, ...
    - ForceUnit: Newton (base), Dyne, KilogramForce, ...
    - GasConsumptionUnit: LiterPerKm (base), LiterPer100Km, MilesPerGallon
    - PowerUnit: Watt (base), horsepower variants
    - PressureUnit: Pascal (base), Bar, Atmosphere, mmHg, psi, ...
    - SolidAngularUnit: Steradian (base), SquareDegree, SquareMinute
    - TemperatureUnit: Fahrenheit (base), Celsius, Kelvin, ...
    - VelocityUnit: MetersPerSecond (base), km/h, ft/s, mph, knot
    - VolumeUnit: Milliliter (base), Liter, gallons, ...
    - WeightUnit: Grain (base), Gram, Kilogram, Pound, ...

Example:
    >>> from measurements.unit import DistanceUnit, unit_table
    >>> DistanceUnit.parse("cm")
    <DistanceUnit.Centimeter: 8>
    >>> unit_table(DistanceUnit).convert(1, DistanceUnit.Inch, DistanceUnit.Centimeter)
    2.54
"""

from .compiler import (
    DEFAULT_CACHE,
    Arithmetic,
    CompiledUnitTable,
    UnitTableCache,
    compile_unit_table,
    unit_table,
)
from .conversion import (
    DEFAULT_REGISTRY,
    ConversionRegistry,
    CustomConversion,
    DecimalCustomConversion,
    register_conversion,
)
from .unit_acceleration import AccelerationUnit
from .unit_angle import AngularUnit
from .unit_area import AreaUnit
from .unit_base import ConversionRule, Operation, UnitDescriptor, UnitEnum
from .unit_density import DensityUnit
from .unit_distance import DistanceUnit
from .unit_energy import EnergyUnit
from .unit_force import ForceUnit
from .unit_gas_consumption import GasConsumptionUnit
from .unit_power import PowerUnit
from .unit_pressure import PressureUnit
from .unit_solid_angle import SolidAngularUnit
from .unit_temperature import TemperatureUnit
from .unit_velocity import VelocityUnit
from .unit_volume import VolumeUnit
from .unit_weight import WeightUnit

# Unit enumerations of the catalogue, by dimension name
UNIT_TYPES: dict[str, type[UnitEnum]] = {
    "acceleration": AccelerationUnit,
    "angular": AngularUnit,
    "area": AreaUnit,
    "density": DensityUnit,
    "distance": DistanceUnit,
    "energy": EnergyUnit,
    "force": ForceUnit,
    "gas-consumption": GasConsumptionUnit,
    "power": PowerUnit,
    "pressure": PressureUnit,
    "solid-angular": SolidAngularUnit,
    "temperature": TemperatureUnit,
    "velocity": VelocityUnit,
    "volume": VolumeUnit,
    "weight": WeightUnit,
}

__all__ = [
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
]
