"""Locale and currency formatting metadata consumed by both parse paths.

Python 3.12+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from currencylex.enums import NumberAttribute, NumberSymbol, SymbolKind, TextAttribute

from .currency_symbols import CurrencySymbolResolver

if TYPE_CHECKING:
    from currencylex.runtime.number_formatter import NumberFormatter

__all__ = ["SymbolTable"]


@dataclass(frozen=True, slots=True)
class SymbolTable:
    """Read-only snapshot of a (locale, currency) pair's formatting metadata.

    Affixes have the currency symbol removed: for it_IT/EUR the positive
    suffix "\\xa0€" is stored as "\\xa0". Symbols the locale does not define
    are empty strings.

    Attributes:
        fraction_digits: Fraction digits mandated by the currency
        currency_symbol: Display symbol of the currency
        group_separator: Grouping separator
        decimal_separator: Decimal separator
        positive_prefix: Positive prefix without the currency symbol
        positive_suffix: Positive suffix without the currency symbol
        negative_prefix: Negative prefix without the currency symbol
        negative_suffix: Negative suffix without the currency symbol
        infinity_symbol: Locale infinity symbol
        nan_symbol: Locale NaN symbol
    """

    fraction_digits: int
    currency_symbol: str
    group_separator: str
    decimal_separator: str
    positive_prefix: str
    positive_suffix: str
    negative_prefix: str
    negative_suffix: str
    infinity_symbol: str
    nan_symbol: str

    @classmethod
    def from_formatter(
        cls,
        formatter: NumberFormatter,
        resolver: CurrencySymbolResolver | None = None,
    ) -> SymbolTable:
        """Derive the table from a currency-style handle.

        Disables the handle's exponent symbol first, so that scientific
        notation is never recognized by the parsers built on this table.

        Args:
            formatter: Currency-style handle with its active currency set
            resolver: Currency symbol resolver (default: new resolver)
        """
        formatter.set_symbol(NumberSymbol.EXPONENTIAL, "")

        resolver = resolver or CurrencySymbolResolver()
        currency_symbol = resolver.resolve(
            str(formatter.babel_locale), formatter.currency_code
        )
        rendered_symbol = formatter.get_symbol(NumberSymbol.CURRENCY_SYMBOL)

        def without_symbol(attribute: TextAttribute) -> str:
            affix = formatter.get_text_attribute(attribute)
            for symbol in (rendered_symbol, currency_symbol):
                if symbol:
                    affix = affix.replace(symbol, "")
            return affix

        return cls(
            fraction_digits=formatter.get_attribute(NumberAttribute.FRACTION_DIGITS),
            currency_symbol=currency_symbol,
            group_separator=formatter.get_symbol(NumberSymbol.GROUPING_SEPARATOR),
            decimal_separator=formatter.get_symbol(NumberSymbol.DECIMAL_SEPARATOR),
            positive_prefix=without_symbol(TextAttribute.POSITIVE_PREFIX),
            positive_suffix=without_symbol(TextAttribute.POSITIVE_SUFFIX),
            negative_prefix=without_symbol(TextAttribute.NEGATIVE_PREFIX),
            negative_suffix=without_symbol(TextAttribute.NEGATIVE_SUFFIX),
            infinity_symbol=formatter.get_symbol(NumberSymbol.INFINITY),
            nan_symbol=formatter.get_symbol(NumberSymbol.NAN),
        )

    def get(self, kind: SymbolKind) -> str | int | None:
        """Look up an entry; None when the entry is empty."""
        value: str | int = getattr(self, kind.value)
        if value == "":
            return None
        return value

    def distinct_symbols(self) -> tuple[str, ...]:
        """Distinct non-empty string entries, in field order."""
        seen: dict[str, None] = {}
        for kind in SymbolKind:
            value = getattr(self, kind.value)
            if isinstance(value, str) and value:
                seen.setdefault(value, None)
        return tuple(seen)
