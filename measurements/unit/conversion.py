"""Custom conversion plug-ins.

Units whose relation to the base unit is not expressible with the primitive
operations use ``Operation.CUSTOM`` and name a registered conversion. The
registry maps that name to an implementation; it is consulted while a unit
table is compiled, never while converting.

Example:
    >>> @register_conversion("reciprocal-plus-one")
    ... class ReciprocalPlusOne:
    ...     def to_base(self, value):
    ...         return 2 / value - 1
    ...     def from_base(self, value):
    ...         return 2 / (value + 1)
"""

from __future__ import annotations

import threading
from decimal import Decimal
from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

from ..logger import logger

__all__ = [
    "CustomConversion",
    "DecimalCustomConversion",
    "ConversionRegistry",
    "DEFAULT_REGISTRY",
    "register_conversion",
]

C = TypeVar("C")


@runtime_checkable
class CustomConversion(Protocol):
    """Conversion between a unit and the base unit on float values."""

    def to_base(self, value: float) -> float: ...
    def from_base(self, value: float) -> float: ...


@runtime_checkable
class DecimalCustomConversion(CustomConversion, Protocol):
    """Custom conversion that also supports decimal values."""

    def to_base_decimal(self, value: Decimal) -> Decimal: ...
    def from_base_decimal(self, value: Decimal) -> Decimal: ...


class ConversionRegistry:
    """Mapping from conversion identifiers to implementations.

    Implementations may be registered as classes or as instances. A class is
    instantiated without arguments the first time it is resolved and the
    instance is reused afterwards.
    """

    def __init__(self):
        self._entries: dict[str, Any] = {}
        self._instances: dict[str, Any] = {}
        self._lock = threading.Lock()

    def register(self, identifier: str, implementation: Any) -> None:
        """Register an implementation under ``identifier``.

        Raises:
            ValueError: If another implementation already uses the identifier.
        """
        with self._lock:
            current = self._entries.get(identifier)
            if current is not None and current is not implementation:
                msg = f"Conversion {identifier!r} is already registered"
                raise ValueError(msg)
            self._entries[identifier] = implementation
            self._instances.pop(identifier, None)

    def unregister(self, identifier: str) -> None:
        with self._lock:
            self._entries.pop(identifier, None)
            self._instances.pop(identifier, None)

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._entries

    def resolve(self, identifier: str) -> Any:
        """Return the implementation instance registered under ``identifier``.

        Raises:
            KeyError: If nothing is registered under the identifier.
        """
        with self._lock:
            instance = self._instances.get(identifier)
            if instance is not None:
                return instance
            entry = self._entries[identifier]
            instance = entry() if isinstance(entry, type) else entry
            self._instances[identifier] = instance
        logger.debug("Resolved custom conversion %r to %s", identifier, type(instance).__name__)
        return instance


DEFAULT_REGISTRY = ConversionRegistry()


def register_conversion(
    identifier: str, registry: ConversionRegistry | None = None
) -> Callable[[C], C]:
    """Class decorator registering a custom conversion.

    Args:
        identifier: Name used by ``ConversionRule.custom_rule``.
        registry: Registry to use; the default registry when omitted.
    """

    def decorator(implementation: C) -> C:
        (registry or DEFAULT_REGISTRY).register(identifier, implementation)
        return implementation

    return decorator
