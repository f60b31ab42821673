"""Number formatting cultures used by measurement parsing and formatting.

A culture describes how a number is written: which character separates the
integer part from the fraction, which character groups thousands and which
sign marks a negative number. Measurements are always stored as numbers;
the culture only affects the text form.

Classes:
    Culture: Immutable description of a number format.

Constants:
    INVARIANT: The culture-independent format ("1,234.5").

Example:
    >>> ru = get_culture("ru")
    >>> ru.normalize_number("-1 234,5")
    '-1234.5'
    >>> INVARIANT.localize_number("-1,234.5")
    '-1,234.5'
"""

from __future__ import annotations

from dataclasses import dataclass

from .exceptions import UnknownCultureError

NBSP = "\u00a0"
NARROW_NBSP = "\u202f"


@dataclass(frozen=True)
class Culture:
    """Number format of a culture.

    Attributes:
        name: Culture name, e.g. "ru-RU".
        decimal_separator: Separator between integer and fraction part.
        group_separator: Separator between digit groups.
        negative_sign: Sign that marks a negative number.
    """

    name: str
    decimal_separator: str = "."
    group_separator: str = ","
    negative_sign: str = "-"

    def is_number_char(self, char: str) -> bool:
        """Check whether the character may be part of a number prefix.

        Args:
            char: Single character to check.

        Returns:
            bool: True for digits, the culture separators and signs, and space.
        """
        return (
            "0" <= char <= "9"
            or char == self.decimal_separator
            or char == self.group_separator
            or char == self.negative_sign
            or char in "+- "
        )

    @property
    def group_separators(self) -> tuple[str, ...]:
        """Characters accepted as group separator while parsing."""
        if self.group_separator in (NBSP, NARROW_NBSP):
            return (self.group_separator, " ")
        return (self.group_separator,)

    def normalize_number(self, text: str) -> str:
        """Rewrite a culture-formatted number in invariant notation.

        Group separators and spaces are dropped, the decimal separator
        becomes "." and the negative sign becomes "-".

        Args:
            text: Number as written in this culture.

        Returns:
            str: The number without grouping, using "." and "-".
        """
        text = text.strip()
        for separator in self.group_separators:
            text = text.replace(separator, "")
        text = text.replace(" ", "")
        if self.negative_sign != "-":
            text = text.replace(self.negative_sign, "-")
        if self.decimal_separator != ".":
            text = text.replace(self.decimal_separator, ".")
        return text

    def localize_number(self, text: str) -> str:
        """Rewrite an invariant number ("-1,234.5") in this culture.

        Args:
            text: Number using "," for grouping, "." and "-".

        Returns:
            str: The number written with this culture's characters.
        """
        table = str.maketrans({
            ",": self.group_separator,
            ".": self.decimal_separator,
            "-": self.negative_sign,
        })
        return text.translate(table)


INVARIANT = Culture("invariant")

_CULTURES: dict[str, Culture] = {}


def register_culture(culture: Culture, *aliases: str) -> Culture:
    """Register a culture under its name and optional aliases.

    Args:
        culture: Culture to register.
        *aliases: Additional names for the culture.

    Returns:
        Culture: The registered culture.
    """
    for name in (culture.name, *aliases):
        _CULTURES[name.lower()] = culture
    return culture


def get_culture(name: str | Culture | None) -> Culture:
    """Look a culture up by name.

    Args:
        name: Registered culture name (case-insensitive), a Culture, or
            None for the invariant culture.

    Returns:
        Culture: The culture.

    Raises:
        UnknownCultureError: If no culture is registered under the name.
    """
    if name is None:
        return INVARIANT
    if isinstance(name, Culture):
        return name
    try:
        return _CULTURES[name.lower()]
    except KeyError:
        raise UnknownCultureError(name) from None


register_culture(INVARIANT, "", "iv")
register_culture(Culture("en-US"), "en")
register_culture(Culture("en-GB"))
register_culture(Culture("ru-RU", ",", NBSP, "-"), "ru")
register_culture(Culture("de-DE", ",", ".", "-"), "de")
register_culture(Culture("fr-FR", ",", NARROW_NBSP, "-"), "fr")
