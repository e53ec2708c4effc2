"""Rules shared by the strict and fallback parse paths.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from .regex_components import RegexComponents

__all__ = ["CurrencyPresenceValidator", "ScaleValidator"]


@dataclass(frozen=True, slots=True)
class ScaleValidator:
    """Fraction digit count check against the currency's scale.

    Attributes:
        fraction_digits: Digits mandated by the currency
        decimal_separator: Locale decimal separator
        components: Digit class used for counting
    """

    fraction_digits: int
    decimal_separator: str
    components: RegexComponents = RegexComponents()

    def count_after_first(self, text: str) -> int:
        """Digits between the first and second decimal separator.

        Example:
            >>> ScaleValidator(2, ",").count_after_first("1.234,61 €")
            2
        """
        if not self.decimal_separator:
            return 0
        parts = text.split(self.decimal_separator)
        return self.components.count_digits(parts[1]) if len(parts) > 1 else 0

    def count_after_last(self, text: str) -> int:
        """Digits after the last decimal separator; 0 without one."""
        if not self.decimal_separator or self.decimal_separator not in text:
            return 0
        return self.components.count_digits(text.rpartition(self.decimal_separator)[2])

    def matches(self, count: int) -> bool:
        """Check a counted digit total against the mandated scale."""
        return count == self.fraction_digits


@dataclass(frozen=True, slots=True)
class CurrencyPresenceValidator:
    """Checks that the currency's display symbol occurs in the text."""

    currency_symbol: str

    def is_present(self, text: str) -> bool:
        return bool(self.currency_symbol) and self.currency_symbol in text
