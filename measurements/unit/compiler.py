"""Compilation of unit enumerations into fast lookup and conversion tables.

A unit enumeration only declares facts: names, precisions and conversion
rules. Before the first measurement of an enumeration is used, the facts are
validated and compiled into a ``CompiledUnitTable``: dictionaries for the
name and precision lookups and one pre-composed closure per unit and
direction for the conversions.

Reverse Derivation:
    Every primitive operation has a forward step (towards the base unit) and
    a reverse step (away from it):

    ====================  ==========  ============
    Operation             Forward     Reverse
    ====================  ==========  ============
    BASE                  v           v
    ADD(k)                v + k       v - k
    SUBTRACT(k)           v - k       v + k
    SUBTRACT_FROM_FACTOR  k - v       k - v
    MULTIPLY(k)           v * k       v / k
    DIVIDE(k)             v / k       v * k
    DIVIDE_FACTOR(k)      k / v       k / v
    NEGATE                -v          -v
    ATAN                  atan(v)     tan(v)
    CUSTOM                to_base(v)  from_base(v)
    ====================  ==========  ============

    A two-step rule converts to the base unit as ``second(first(v))`` and
    from the base unit as ``reverse_first(reverse_second(v))``.

Arithmetic:
    FLOAT tables work on Python floats and, element-wise, on NumPy arrays
    (the transcendental steps use NumPy ufuncs). DECIMAL tables work on
    ``decimal.Decimal`` in the library decimal context; ATAN is evaluated
    through float. DIVIDE_FACTOR maps a zero value to a signed infinity in
    both representations.

Caching:
    Tables are cached per (enumeration, arithmetic) in a ``UnitTableCache``.
    A table is built at most once, under a lock, and is immutable afterwards,
    so readers never synchronise.

Example:
    >>> from measurements.unit import DistanceUnit
    >>> table = unit_table(DistanceUnit)
    >>> round(table.to_base(1, DistanceUnit.Meter), 4)
    39.3701
    >>> table.name_of(DistanceUnit.Centimeter)
    'cm'
"""

from __future__ import annotations

import math
import threading
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from types import MappingProxyType
from typing import Any, Generic, TypeVar

import numpy as np

from ..config import DECIMAL_CONTEXT
from ..exceptions import InvalidRuleDeclarationError, InvalidUnitError, UnknownUnitNameError
from ..logger import logger
from .conversion import DEFAULT_REGISTRY, ConversionRegistry, CustomConversion, DecimalCustomConversion
from .unit_base import ConversionRule, Operation, UnitEnum

__all__ = [
    "Arithmetic",
    "CompiledUnitTable",
    "UnitTableCache",
    "DEFAULT_CACHE",
    "compile_unit_table",
    "unit_table",
]

U = TypeVar("U", bound=UnitEnum)
Step = Callable[[Any], Any]
StepFactory = Callable[[Any], Step]


class Arithmetic(Enum):
    """Scalar representation a unit table converts."""

    FLOAT = "float"
    DECIMAL = "decimal"


def _identity(value):
    return value


def _divide_factor(k):
    def step(v):
        with np.errstate(divide="ignore"):
            return np.divide(k, v)

    return step


def _decimal_atan(value: Decimal) -> Decimal:
    return Decimal(repr(math.atan(float(value))))


def _decimal_tan(value: Decimal) -> Decimal:
    return Decimal(repr(math.tan(float(value))))


# Operation -> (forward factory, reverse factory); each factory takes the factor.
_FLOAT_STEPS: dict[Operation, tuple[StepFactory, StepFactory]] = {
    Operation.BASE: (lambda k: _identity, lambda k: _identity),
    Operation.ADD: (lambda k: lambda v: v + k, lambda k: lambda v: v - k),
    Operation.SUBTRACT: (lambda k: lambda v: v - k, lambda k: lambda v: v + k),
    Operation.SUBTRACT_FROM_FACTOR: (lambda k: lambda v: k - v, lambda k: lambda v: k - v),
    Operation.MULTIPLY: (lambda k: lambda v: v * k, lambda k: lambda v: v / k),
    Operation.DIVIDE: (lambda k: lambda v: v / k, lambda k: lambda v: v * k),
    Operation.DIVIDE_FACTOR: (_divide_factor, _divide_factor),
    Operation.NEGATE: (lambda k: lambda v: -v, lambda k: lambda v: -v),
    Operation.ATAN: (lambda k: np.arctan, lambda k: np.tan),
}

_ctx = DECIMAL_CONTEXT
_DECIMAL_STEPS: dict[Operation, tuple[StepFactory, StepFactory]] = {
    Operation.BASE: (lambda k: _identity, lambda k: _identity),
    Operation.ADD: (lambda k: lambda v: _ctx.add(v, k), lambda k: lambda v: _ctx.subtract(v, k)),
    Operation.SUBTRACT: (lambda k: lambda v: _ctx.subtract(v, k), lambda k: lambda v: _ctx.add(v, k)),
    Operation.SUBTRACT_FROM_FACTOR: (
        lambda k: lambda v: _ctx.subtract(k, v),
        lambda k: lambda v: _ctx.subtract(k, v),
    ),
    Operation.MULTIPLY: (lambda k: lambda v: _ctx.multiply(v, k), lambda k: lambda v: _ctx.divide(v, k)),
    Operation.DIVIDE: (lambda k: lambda v: _ctx.divide(v, k), lambda k: lambda v: _ctx.multiply(v, k)),
    Operation.DIVIDE_FACTOR: (lambda k: lambda v: _ctx.divide(k, v), lambda k: lambda v: _ctx.divide(k, v)),
    Operation.NEGATE: (lambda k: _ctx.minus, lambda k: _ctx.minus),
    Operation.ATAN: (lambda k: _decimal_atan, lambda k: _decimal_tan),
}


@dataclass(frozen=True)
class CompiledUnitTable(Generic[U]):
    """Lookup and conversion functions of one unit enumeration.

    Every function fails with ``InvalidUnitError`` for a value that is not a
    member of ``unit_type``.

    Attributes:
        unit_type: The compiled enumeration.
        arithmetic: Scalar representation of the conversion functions.
        base_unit: The base unit of the enumeration.
        units: All units in declaration order.
    """

    unit_type: type[U]
    arithmetic: Arithmetic
    base_unit: U
    units: tuple[U, ...]
    _names: Mapping[U, str]
    _lookup: Mapping[str, U]
    _precisions: Mapping[U, int]
    _to_base: Mapping[U, Step]
    _from_base: Mapping[U, Step]

    def _invalid(self, unit: object) -> InvalidUnitError:
        return InvalidUnitError(unit, self.unit_type)

    def name_of(self, unit: U) -> str:
        """Primary name of the unit."""
        try:
            return self._names[unit]
        except (KeyError, TypeError):
            raise self._invalid(unit) from None

    def unit_of(self, name: str) -> U:
        """Unit known under the primary or alternative name.

        Raises:
            UnknownUnitNameError: If no unit has that name.
        """
        try:
            return self._lookup[name]
        except (KeyError, TypeError):
            raise UnknownUnitNameError(name, self.unit_type) from None

    def precision_of(self, unit: U) -> int:
        """Default display precision of the unit."""
        try:
            return self._precisions[unit]
        except (KeyError, TypeError):
            raise self._invalid(unit) from None

    def to_base(self, value, unit: U):
        """Convert ``value`` expressed in ``unit`` to the base unit."""
        try:
            step = self._to_base[unit]
        except (KeyError, TypeError):
            raise self._invalid(unit) from None
        return step(value)

    def from_base(self, value, unit: U):
        """Convert ``value`` expressed in the base unit to ``unit``."""
        try:
            step = self._from_base[unit]
        except (KeyError, TypeError):
            raise self._invalid(unit) from None
        return step(value)

    def convert(self, value, from_unit: U, to_unit: U):
        """Convert ``value`` from one unit of the enumeration to another.

        Equal units return the value untouched; the base unit is never
        converted to or from itself.
        """
        if not self.contains(from_unit):
            raise self._invalid(from_unit)
        if not self.contains(to_unit):
            raise self._invalid(to_unit)
        if from_unit is to_unit:
            return value
        if from_unit is not self.base_unit:
            value = self._to_base[from_unit](value)
        if to_unit is not self.base_unit:
            value = self._from_base[to_unit](value)
        return value

    def contains(self, unit: object) -> bool:
        try:
            return unit in self._names
        except TypeError:
            return False

    def names(self) -> list[tuple[U, str]]:
        """All units with their primary names, in declaration order."""
        return [(unit, self._names[unit]) for unit in self.units]


def _resolve_custom(
    unit_type: type[UnitEnum],
    unit: UnitEnum,
    rule: ConversionRule,
    arithmetic: Arithmetic,
    registry: ConversionRegistry,
) -> tuple[Step, Step]:
    if not rule.custom:
        raise InvalidRuleDeclarationError(unit_type, f"{unit.name}: custom conversion requires an identifier")
    try:
        conversion = registry.resolve(rule.custom)
    except KeyError:
        msg = f"{unit.name}: custom conversion {rule.custom!r} is not registered"
        raise InvalidRuleDeclarationError(unit_type, msg) from None

    if arithmetic is Arithmetic.DECIMAL:
        if not isinstance(conversion, DecimalCustomConversion):
            msg = f"{unit.name}: custom conversion {rule.custom!r} does not support decimal values"
            raise InvalidRuleDeclarationError(unit_type, msg)
        return conversion.to_base_decimal, conversion.from_base_decimal

    if not isinstance(conversion, CustomConversion):
        msg = f"{unit.name}: custom conversion {rule.custom!r} does not implement to_base/from_base"
        raise InvalidRuleDeclarationError(unit_type, msg)
    return conversion.to_base, conversion.from_base


def _check_rule(unit_type: type[UnitEnum], unit: UnitEnum, rule: ConversionRule) -> None:
    if not isinstance(rule, ConversionRule) or not isinstance(rule.operation, Operation):
        raise InvalidRuleDeclarationError(unit_type, f"{unit.name}: invalid conversion rule {rule!r}")
    second = rule.second_operation
    if second is not None:
        if rule.operation in (Operation.BASE, Operation.CUSTOM):
            msg = f"{unit.name}: {rule.operation.name} cannot be combined with a second operation"
            raise InvalidRuleDeclarationError(unit_type, msg)
        if not isinstance(second, Operation) or second in (Operation.BASE, Operation.CUSTOM):
            msg = f"{unit.name}: {second!r} cannot be used as a second operation"
            raise InvalidRuleDeclarationError(unit_type, msg)
    for operation, factor in rule.steps:
        if operation in (Operation.MULTIPLY, Operation.DIVIDE) and factor == 0:
            msg = f"{unit.name}: {operation.name} by zero cannot be reversed"
            raise InvalidRuleDeclarationError(unit_type, msg)


def _compile_steps(rule: ConversionRule, arithmetic: Arithmetic) -> tuple[Step, Step]:
    steps = _FLOAT_STEPS if arithmetic is Arithmetic.FLOAT else _DECIMAL_STEPS
    forward: list[Step] = []
    reverse: list[Step] = []
    for operation, factor in rule.steps:
        k = float(factor) if arithmetic is Arithmetic.FLOAT else Decimal(repr(factor))
        make_forward, make_reverse = steps[operation]
        forward.append(make_forward(k))
        reverse.append(make_reverse(k))

    if len(forward) == 1:
        return forward[0], reverse[0]

    first, second = forward
    reverse_first, reverse_second = reverse

    def to_base(value):
        return second(first(value))

    def from_base(value):
        return reverse_first(reverse_second(value))

    return to_base, from_base


def compile_unit_table(
    unit_type: type[U],
    arithmetic: Arithmetic = Arithmetic.FLOAT,
    registry: ConversionRegistry | None = None,
) -> CompiledUnitTable[U]:
    """Validate a unit enumeration and compile its lookup and conversion table.

    Args:
        unit_type: The UnitEnum subclass to compile.
        arithmetic: Scalar representation of the conversion functions.
        registry: Custom conversion registry; the default one when omitted.

    Returns:
        CompiledUnitTable: The immutable table.

    Raises:
        TypeError: If ``unit_type`` is not a UnitEnum subclass.
        InvalidRuleDeclarationError: If the declaration violates an invariant.
    """
    if not (isinstance(unit_type, type) and issubclass(unit_type, UnitEnum)):
        msg = f"UnitEnum subclass expected, got {unit_type!r}"
        raise TypeError(msg)
    registry = registry or DEFAULT_REGISTRY

    metadata = list(unit_type.metadata())
    if not metadata:
        raise InvalidRuleDeclarationError(unit_type, "no units declared")
    if len(unit_type.__members__) != len(metadata):
        raise InvalidRuleDeclarationError(unit_type, "unit codes must be unique")

    base_units = [unit for unit, _, rule in metadata if rule.is_base]
    if len(base_units) != 1:
        msg = f"exactly one base unit required, found {len(base_units)}"
        raise InvalidRuleDeclarationError(unit_type, msg)

    names: dict[UnitEnum, str] = {}
    lookup: dict[str, UnitEnum] = {}
    precisions: dict[UnitEnum, int] = {}
    to_base: dict[UnitEnum, Step] = {}
    from_base: dict[UnitEnum, Step] = {}

    for unit, descriptor, rule in metadata:
        if not descriptor.name:
            raise InvalidRuleDeclarationError(unit_type, f"{unit.name}: unit name is empty")
        if descriptor.precision < 0:
            raise InvalidRuleDeclarationError(unit_type, f"{unit.name}: precision must not be negative")
        for name in descriptor.names:
            other = lookup.get(name)
            if other is not None and other is not unit:
                msg = f"name {name!r} is used by both {other.name} and {unit.name}"
                raise InvalidRuleDeclarationError(unit_type, msg)
            lookup[name] = unit

        _check_rule(unit_type, unit, rule)
        if rule.operation is Operation.CUSTOM:
            forward, reverse = _resolve_custom(unit_type, unit, rule, arithmetic, registry)
        else:
            forward, reverse = _compile_steps(rule, arithmetic)

        names[unit] = descriptor.name
        precisions[unit] = descriptor.precision
        to_base[unit] = forward
        from_base[unit] = reverse

    logger.debug(
        "Compiled %s unit table for %s (%d units, base %s)",
        arithmetic.value, unit_type.__name__, len(metadata), base_units[0].name,
    )
    return CompiledUnitTable(
        unit_type=unit_type,
        arithmetic=arithmetic,
        base_unit=base_units[0],
        units=tuple(unit for unit, _, _ in metadata),
        _names=MappingProxyType(names),
        _lookup=MappingProxyType(lookup),
        _precisions=MappingProxyType(precisions),
        _to_base=MappingProxyType(to_base),
        _from_base=MappingProxyType(from_base),
    )


class UnitTableCache:
    """Build-once cache of compiled unit tables.

    Tables are keyed by (enumeration, arithmetic). Lookups of published
    tables take no lock; construction is serialised so every table is built
    exactly once. A failed build is not cached and fails again on the next
    request.
    """

    def __init__(self, registry: ConversionRegistry | None = None):
        self._registry = registry
        self._tables: dict[tuple[type[UnitEnum], Arithmetic], CompiledUnitTable] = {}
        self._lock = threading.Lock()

    def get(self, unit_type: type[U], arithmetic: Arithmetic = Arithmetic.FLOAT) -> CompiledUnitTable[U]:
        key = (unit_type, arithmetic)
        table = self._tables.get(key)
        if table is None:
            with self._lock:
                table = self._tables.get(key)
                if table is None:
                    table = compile_unit_table(unit_type, arithmetic, self._registry)
                    self._tables[key] = table
        return table

    def __contains__(self, key: object) -> bool:
        return key in self._tables

    def __len__(self) -> int:
        return len(self._tables)


DEFAULT_CACHE = UnitTableCache()


def unit_table(unit_type: type[U], arithmetic: Arithmetic = Arithmetic.FLOAT) -> CompiledUnitTable[U]:
    """Compiled table of ``unit_type`` from the default cache."""
    return DEFAULT_CACHE.get(unit_type, arithmetic)
