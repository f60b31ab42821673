"""Declarative unit metadata: descriptors, conversion rules and unit enumerations.

This module provides the building blocks every unit enumeration is made of.
A unit enumeration describes one physical dimension (distance, angle,
temperature, ...). Each of its members carries a display descriptor and a
conversion rule towards the single base unit of the enumeration.

The unit system is organised in "unit families": every UnitEnum subclass is
one family. Measurements of the same family can be converted, compared and
combined; measurements of different families cannot.

Key Concepts:
- UnitDescriptor: display name, alternative name and default precision
- ConversionRule: one or two primitive operations (or a custom conversion)
  that turn a value expressed in the unit into a value in the base unit
- Base unit: the one member whose rule is ``Operation.BASE``

Classes:
    Operation: Closed set of primitive conversion operations.
    UnitDescriptor: Per-unit display metadata.
    ConversionRule: Per-unit conversion recipe.
    UnitEnum: Base class of all unit enumerations.

Example:
    >>> class LengthUnit(UnitEnum):
    ...     Inch = 0, UnitDescriptor("in", '"', 1), ConversionRule.base()
    ...     Foot = 1, UnitDescriptor("ft", "'", 2), ConversionRule(Operation.MULTIPLY, 12)
    ...     Meter = 2, UnitDescriptor("m", precision=1), ConversionRule(
    ...         Operation.DIVIDE, 25.4, Operation.MULTIPLY, 1000)
    >>> LengthUnit.Foot.symbol
    'ft'
    >>> LengthUnit.parse('"')
    <LengthUnit.Inch: 0>
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from decimal import Decimal

    from ..measurement import DecimalMeasurement, Measurement


class Operation(Enum):
    """Primitive operation of a conversion rule.

    The forward direction converts a value expressed in the unit one step
    towards the base unit; every operation has a matching reverse.
    """

    BASE = "base"
    ADD = "add"
    SUBTRACT = "subtract"
    SUBTRACT_FROM_FACTOR = "subtract_from_factor"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    DIVIDE_FACTOR = "divide_factor"
    NEGATE = "negate"
    ATAN = "atan"
    CUSTOM = "custom"


@dataclass(frozen=True)
class UnitDescriptor:
    """Display metadata of a unit.

    Attributes:
        name: Primary name, used when formatting (e.g. "kg").
        alternative_name: Optional second name accepted when parsing.
        precision: Default number of fraction digits when formatting.
    """

    name: str
    alternative_name: str | None = None
    precision: int = 0

    @property
    def names(self) -> tuple[str, ...]:
        """All names the unit is known under, primary name first."""
        if self.alternative_name:
            return (self.name, self.alternative_name)
        return (self.name,)


@dataclass(frozen=True)
class ConversionRule:
    """Recipe that converts a value in a unit to the base unit.

    The first operation is applied first, then the optional second one.
    Conversion from the base unit applies the reverse operations in the
    opposite order.

    Attributes:
        operation: First operation.
        factor: Factor of the first operation.
        second_operation: Optional second operation.
        second_factor: Factor of the second operation.
        custom: Identifier of a registered custom conversion, used with
            ``Operation.CUSTOM``.
    """

    operation: Operation
    factor: float = 0.0
    second_operation: Operation | None = None
    second_factor: float = 0.0
    custom: str | None = None

    @classmethod
    def base(cls) -> ConversionRule:
        """Rule of the base unit of an enumeration."""
        return cls(Operation.BASE)

    @classmethod
    def custom_rule(cls, identifier: str) -> ConversionRule:
        """Rule delegating to a registered custom conversion.

        Args:
            identifier: Name the conversion is registered under.
        """
        return cls(Operation.CUSTOM, custom=identifier)

    @property
    def is_base(self) -> bool:
        return self.operation is Operation.BASE

    @property
    def steps(self) -> tuple[tuple[Operation, float], ...]:
        """The (operation, factor) steps in forward order."""
        if self.second_operation is None:
            return ((self.operation, self.factor),)
        return ((self.operation, self.factor), (self.second_operation, self.second_factor))


class UnitEnum(Enum):
    """Base class of all unit enumerations.

    Members are declared as ``Name = code, UnitDescriptor(...), ConversionRule(...)``.
    The member value is the integer code; descriptor and rule are attached
    to the member. Lookups and conversions go through the compiled unit
    table of the enumeration, built on first use.

    Attributes:
        descriptor (UnitDescriptor): Display metadata of the member.
        rule (ConversionRule): Conversion rule of the member.
    """

    descriptor: UnitDescriptor
    rule: ConversionRule

    def __new__(cls, code: int, descriptor: UnitDescriptor, rule: ConversionRule):
        obj = object.__new__(cls)
        obj._value_ = code
        obj.descriptor = descriptor
        obj.rule = rule
        return obj

    @classmethod
    def metadata(cls) -> Iterator[tuple[UnitEnum, UnitDescriptor, ConversionRule]]:
        """Yield ``(unit, descriptor, rule)`` for every member in declaration order."""
        for unit in cls:
            yield unit, unit.descriptor, unit.rule

    @classmethod
    def base(cls) -> UnitEnum:
        """The base unit of the enumeration."""
        from .compiler import unit_table

        return unit_table(cls).base_unit

    @classmethod
    def parse(cls, name: str) -> UnitEnum:
        """Find the unit by its primary or alternative name.

        Raises:
            UnknownUnitNameError: If no unit has that name.
        """
        from .compiler import unit_table

        return unit_table(cls).unit_of(name)

    @classmethod
    def names(cls) -> list[tuple[UnitEnum, str]]:
        """All units with their primary names."""
        from .compiler import unit_table

        return unit_table(cls).names()

    @property
    def symbol(self) -> str:
        """Primary name of the unit."""
        from .compiler import unit_table

        return unit_table(type(self)).name_of(self)

    @property
    def precision(self) -> int:
        """Default display precision of the unit."""
        from .compiler import unit_table

        return unit_table(type(self)).precision_of(self)

    def new(self, value: float) -> Measurement:
        """Create a float measurement of ``value`` in this unit."""
        from ..measurement import Measurement

        return Measurement(value, self)

    def new_decimal(self, value: Decimal | int | str) -> DecimalMeasurement:
        """Create a decimal measurement of ``value`` in this unit."""
        from ..measurement import DecimalMeasurement

        return DecimalMeasurement(value, self)

    def __call__(self, value: float) -> Measurement:
        return self.new(value)

    def __str__(self) -> str:
        return self.descriptor.name
