"""Shared behaviour of the float and decimal measurement value types.

A measurement is an immutable (value, unit) pair. The value is kept exactly
as given, in the unit it was given in; conversions happen on demand through
the compiled unit table of the unit's enumeration.

Measurements are organised in families the same way units are: every unit
enumeration is one family. Measurements of one family can be added,
subtracted, divided into a ratio and compared. Measurements of different
families cannot be combined (TypeError), and neither can the float and the
decimal variant.

Text Form:
    The canonical text form is the number immediately followed by the unit
    name, e.g. ``"1.5kg"`` or ``"1,234.23\""``. Parsing scans the longest
    prefix made of digits, the culture's decimal separator, group separator
    and negative sign, ``+``, ``-`` and space; the rest of the text must be
    a unit name of the requested enumeration.

Format Specifications:
    ``""`` / ``"NF"``: full precision, no digit grouping.
    ``"ND"``: the unit's default precision, with digit grouping.
    ``"N<k>"``: ``k`` fraction digits, with digit grouping.

Classes:
    MeasurementBase: Common base class of Measurement and DecimalMeasurement.
"""

from __future__ import annotations

import operator
import re
from typing import Any, ClassVar, Generic, TypeVar

from ..config import DEFAULT_CULTURE
from ..culture import INVARIANT, Culture, get_culture
from ..exceptions import InvalidUnitError, MeasurementFormatError, UnknownUnitNameError
from ..unit.compiler import Arithmetic, CompiledUnitTable, unit_table
from ..unit.unit_base import UnitEnum

__all__ = ["MeasurementBase"]

U = TypeVar("U", bound=UnitEnum)
M = TypeVar("M", bound="MeasurementBase")

_NUMBER = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)\Z")
_FIXED_FORMAT = re.compile(r"N(\d+)\Z")


class MeasurementBase(Generic[U]):
    """Immutable value and unit pair.

    Subclasses choose the scalar representation by setting ``ARITHMETIC``
    and implementing the scalar hooks (``_coerce``, ``_parse_number``,
    ``_format_lossless``, ``_compare_values``, ``_hash_value`` and
    ``_is_scalar``).

    Attributes:
        ARITHMETIC (ClassVar[Arithmetic]): Scalar representation of the
            unit tables this variant uses.
    """

    __slots__ = ("_value", "_unit", "_hash")

    ARITHMETIC: ClassVar[Arithmetic]

    # Scalar arithmetic; the decimal variant routes it through its context.
    _add = staticmethod(operator.add)
    _sub = staticmethod(operator.sub)
    _mul = staticmethod(operator.mul)
    _div = staticmethod(operator.truediv)

    def __init__(self, value: Any, unit: U):
        if not isinstance(unit, UnitEnum):
            raise InvalidUnitError(unit)
        # Compiles (and validates) the enumeration on first use.
        unit_table(type(unit), self.ARITHMETIC)
        object.__setattr__(self, "_value", self._coerce(value))
        object.__setattr__(self, "_unit", unit)
        object.__setattr__(self, "_hash", None)

    def __setattr__(self, name: str, value: Any) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    def __delattr__(self, name: str) -> None:
        msg = f"{type(self).__name__} is immutable"
        raise AttributeError(msg)

    # -------------------------------- Scalar hooks --------------------------------
    @classmethod
    def _coerce(cls, value: Any) -> Any:
        raise NotImplementedError

    @classmethod
    def _parse_number(cls, text: str) -> Any:
        raise NotImplementedError

    @staticmethod
    def _format_lossless(value: Any) -> str:
        raise NotImplementedError

    @staticmethod
    def _compare_values(a: Any, b: Any) -> int:
        raise NotImplementedError

    @staticmethod
    def _hash_value(value: Any) -> Any:
        raise NotImplementedError

    @staticmethod
    def _is_scalar(value: Any) -> bool:
        raise NotImplementedError

    @staticmethod
    def _scalar(value: Any) -> Any:
        return value

    # -------------------------------- Accessors --------------------------------
    @property
    def value(self) -> Any:
        """The scalar value, expressed in ``unit``."""
        return self._value

    @property
    def unit(self) -> U:
        return self._unit

    @property
    def unit_type(self) -> type[U]:
        """The unit enumeration (family) of the measurement."""
        return type(self._unit)

    @property
    def text(self) -> str:
        """Lossless text form in the invariant culture, e.g. ``"1.5kg"``."""
        return self.to_string("NF", INVARIANT)

    @property
    def base_value(self) -> Any:
        """The value converted to the base unit of the family."""
        table = self._table()
        return self._scalar(table.convert(self._value, self._unit, table.base_unit))

    def as_tuple(self) -> tuple[Any, U]:
        return self._value, self._unit

    def _table(self) -> CompiledUnitTable[U]:
        return unit_table(type(self._unit), self.ARITHMETIC)

    # -------------------------------- Construction --------------------------------
    @classmethod
    def from_tuple(cls: type[M], value: tuple[Any, UnitEnum]) -> M:
        """Create a measurement from a ``(value, unit)`` pair."""
        scalar, unit = value
        return cls(scalar, unit)

    @classmethod
    def zero(cls: type[M], unit_type: type[UnitEnum]) -> M:
        """Zero in the base unit of ``unit_type``."""
        return cls(0, unit_table(unit_type, cls.ARITHMETIC).base_unit)

    @classmethod
    def parse(cls: type[M], text: str, unit_type: type[UnitEnum], culture: str | Culture | None = None) -> M:
        """Parse a measurement from its text form.

        Args:
            text: Number immediately followed by a unit name, e.g. ``"1.5cm"``.
            unit_type: Enumeration the unit name is looked up in.
            culture: Culture (or culture name) the number is written in;
                ``config.DEFAULT_CULTURE`` when omitted.

        Returns:
            The parsed measurement.

        Raises:
            MeasurementFormatError: If the text is not a valid measurement.
            UnknownCultureError: If the culture name is not registered.
        """
        culture = get_culture(DEFAULT_CULTURE if culture is None else culture)
        if not isinstance(text, str):
            raise MeasurementFormatError(repr(text), "text expected")
        if len(text) < 2:
            raise MeasurementFormatError(text, "text is too short")

        end = 0
        while end < len(text) and culture.is_number_char(text[end]):
            end += 1
        if end == 0:
            raise MeasurementFormatError(text, "no number found")
        if end == len(text):
            raise MeasurementFormatError(text, "no unit name found")

        table = unit_table(unit_type, cls.ARITHMETIC)
        try:
            unit = table.unit_of(text[end:])
        except UnknownUnitNameError as err:
            raise MeasurementFormatError(text, f"unknown unit {err.name!r}") from err

        number = culture.normalize_number(text[:end])
        if not _NUMBER.match(number):
            raise MeasurementFormatError(text, f"invalid number {text[:end]!r}")
        return cls(cls._parse_number(number), unit)

    @classmethod
    def try_parse(
        cls: type[M], text: str, unit_type: type[UnitEnum], culture: str | Culture | None = None
    ) -> M | None:
        """Parse a measurement, returning None instead of raising on bad text."""
        try:
            return cls.parse(text, unit_type, culture)
        except MeasurementFormatError:
            return None

    @classmethod
    def from_text(cls: type[M], text: str, unit_type: type[UnitEnum]) -> M:
        """Strict parse of the invariant text form, as produced by ``text``."""
        return cls.parse(text, unit_type, INVARIANT)

    # -------------------------------- Conversion --------------------------------
    @classmethod
    def convert(cls, value: Any, from_unit: U, to_unit: U) -> Any:
        """Convert a scalar between two units of one enumeration."""
        return unit_table(type(from_unit), cls.ARITHMETIC).convert(value, from_unit, to_unit)

    @classmethod
    def to_base(cls, value: Any, unit: U) -> Any:
        """Convert a scalar expressed in ``unit`` to the base unit."""
        return unit_table(type(unit), cls.ARITHMETIC).to_base(value, unit)

    @classmethod
    def from_base(cls, value: Any, unit: U) -> Any:
        """Convert a scalar expressed in the base unit to ``unit``."""
        return unit_table(type(unit), cls.ARITHMETIC).from_base(value, unit)

    def value_in(self, unit: U) -> Any:
        """The value of the measurement expressed in ``unit``.

        Raises:
            InvalidUnitError: If ``unit`` does not belong to the family.
        """
        return self._scalar(self._table().convert(self._value, self._unit, unit))

    def to(self: M, unit: U) -> M:
        """The same quantity as a measurement in ``unit``."""
        return type(self)(self.value_in(unit), unit)

    # -------------------------------- Formatting --------------------------------
    def to_string(self, spec: str = "NF", culture: str | Culture | None = None) -> str:
        """Format the measurement as number and unit name.

        Args:
            spec: ``"NF"`` (or ``""``), ``"ND"`` or ``"N<k>"``.
            culture: Culture (or culture name) to write the number in;
                ``config.DEFAULT_CULTURE`` when omitted.

        Raises:
            ValueError: If the format specification is not supported.
        """
        culture = get_culture(DEFAULT_CULTURE if culture is None else culture)
        table = self._table()
        if spec in ("", "NF"):
            number = self._format_lossless(self._value)
        else:
            if spec == "ND":
                digits = table.precision_of(self._unit)
            else:
                match = _FIXED_FORMAT.match(spec)
                if match is None:
                    msg = f"Unsupported measurement format {spec!r}"
                    raise ValueError(msg)
                digits = int(match.group(1))
            number = format(self._value, f",.{digits}f")
        return culture.localize_number(number) + table.name_of(self._unit)

    def __format__(self, spec: str) -> str:
        return self.to_string(spec)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        unit = self._unit
        return f"{type(self).__name__}({self._value!r}, {type(unit).__name__}.{unit.name})"

    def __reduce__(self):
        return type(self), (self._value, self._unit)

    # -------------------------------- Family checks --------------------------------
    def _check_same_family(self, other: MeasurementBase) -> None:
        """Check that two measurements belong to the same unit family.

        Raises:
            TypeError: If the measurements use different unit enumerations.
        """
        if type(self._unit) is not type(other._unit):
            msg = f"Cannot combine {type(self._unit).__name__} and {type(other._unit).__name__} measurements"
            raise TypeError(msg)

    # -------------------------------- Arithmetic Operations --------------------------------
    def __add__(self: M, other: M) -> M:
        """Add a measurement of the same family; the result keeps this unit.

        Raises:
            TypeError: If the measurements are from different families.
        """
        if not isinstance(other, type(self)):
            return NotImplemented
        self._check_same_family(other)
        return type(self)(self._add(self._value, other.value_in(self._unit)), self._unit)

    def __sub__(self: M, other: M) -> M:
        """Subtract a measurement of the same family; the result keeps this unit.

        Raises:
            TypeError: If the measurements are from different families.
        """
        if not isinstance(other, type(self)):
            return NotImplemented
        self._check_same_family(other)
        return type(self)(self._sub(self._value, other.value_in(self._unit)), self._unit)

    def __mul__(self: M, k: Any) -> M:
        """Scale the measurement by a scalar."""
        if not self._is_scalar(k):
            return NotImplemented
        return type(self)(self._mul(self._value, k), self._unit)

    def __rmul__(self: M, k: Any) -> M:
        return self.__mul__(k)

    def __truediv__(self, other: Any) -> Any:
        """Divide by a scalar, or by a measurement of the same family.

        Dividing by a measurement yields the plain ratio of the two
        quantities; dividing by a scalar yields a measurement in this unit.
        """
        if isinstance(other, type(self)):
            self._check_same_family(other)
            return self._div(self._value, other.value_in(self._unit))
        if not self._is_scalar(other):
            return NotImplemented
        return type(self)(self._div(self._value, other), self._unit)

    def __neg__(self: M) -> M:
        return type(self)(-self._value, self._unit)

    def __pos__(self: M) -> M:
        return self

    def __abs__(self: M) -> M:
        return type(self)(abs(self._value), self._unit)

    # -------------------------------- Comparison --------------------------------
    def compare_to(self, other: MeasurementBase) -> int:
        """Compare with a measurement of the same family.

        Returns:
            int: -1, 0 or 1 as this measurement is less than, equal to or
            greater than ``other``.

        Raises:
            TypeError: If ``other`` is not a measurement of the same variant
                and family.
        """
        if not isinstance(other, type(self)):
            msg = f"Cannot compare {type(self).__name__} with {type(other).__name__}"
            raise TypeError(msg)
        self._check_same_family(other)
        return self._compare_values(self.base_value, other.base_value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        if type(self._unit) is not type(other._unit):
            return False
        return self.compare_to(other) == 0

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: MeasurementBase) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: MeasurementBase) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: MeasurementBase) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: MeasurementBase) -> bool:
        if not isinstance(other, type(self)):
            return NotImplemented
        return self.compare_to(other) >= 0

    def __hash__(self) -> int:
        cached = self._hash
        if cached is None:
            cached = hash((type(self._unit), self._hash_value(self.base_value)))
            object.__setattr__(self, "_hash", cached)
        return cached
