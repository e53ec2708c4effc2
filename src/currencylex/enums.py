"""Enumerations for currencylex type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.12+.
"""

from enum import StrEnum


class FormatStyle(StrEnum):
    """Kind of CLDR pattern a NumberFormatter is bound to.

    StrEnum provides automatic string conversion: str(FormatStyle.CURRENCY) == "currency"
    """

    DECIMAL = "decimal"
    """Plain decimal pattern: #,##0.###"""

    CURRENCY = "currency"
    """Standard currency pattern: #,##0.00 ¤"""

    ACCOUNTING = "accounting"
    """Accounting currency pattern: ¤#,##0.00;(¤#,##0.00)"""

    SCIENTIFIC = "scientific"
    """Scientific pattern: #E0"""


class FormatType(StrEnum):
    """CLDR currency format type selectable through options."""

    STANDARD = "standard"
    ACCOUNTING = "accounting"

    @property
    def style(self) -> FormatStyle:
        """Formatter style that renders this format type."""
        if self is FormatType.ACCOUNTING:
            return FormatStyle.ACCOUNTING
        return FormatStyle.CURRENCY


class NumberSymbol(StrEnum):
    """Symbols readable from (and overridable on) a NumberFormatter."""

    DECIMAL_SEPARATOR = "decimal"
    GROUPING_SEPARATOR = "group"
    MONETARY_SEPARATOR = "currencyDecimal"
    MONETARY_GROUPING_SEPARATOR = "currencyGroup"
    MINUS_SIGN = "minusSign"
    PLUS_SIGN = "plusSign"
    EXPONENTIAL = "exponential"
    INFINITY = "infinity"
    NAN = "nan"
    CURRENCY_SYMBOL = "currency"
    INTL_CURRENCY_SYMBOL = "intlCurrency"


class TextAttribute(StrEnum):
    """Textual attributes of a NumberFormatter."""

    POSITIVE_PREFIX = "positive_prefix"
    POSITIVE_SUFFIX = "positive_suffix"
    NEGATIVE_PREFIX = "negative_prefix"
    NEGATIVE_SUFFIX = "negative_suffix"
    CURRENCY_CODE = "currency_code"


class NumberAttribute(StrEnum):
    """Integer attributes of a NumberFormatter."""

    FRACTION_DIGITS = "fraction_digits"
    MIN_FRACTION_DIGITS = "min_fraction_digits"
    MAX_FRACTION_DIGITS = "max_fraction_digits"


class SymbolKind(StrEnum):
    """Entries of a SymbolTable.

    StrEnum provides automatic string conversion: str(SymbolKind.NAN) == "nan"
    """

    FRACTION_DIGITS = "fraction_digits"
    CURRENCY_SYMBOL = "currency_symbol"
    GROUP_SEPARATOR = "group_separator"
    DECIMAL_SEPARATOR = "decimal_separator"
    POSITIVE_PREFIX = "positive_prefix"
    POSITIVE_SUFFIX = "positive_suffix"
    NEGATIVE_PREFIX = "negative_prefix"
    NEGATIVE_SUFFIX = "negative_suffix"
    INFINITY = "infinity_symbol"
    NAN = "nan_symbol"


class ParsePath(StrEnum):
    """Which branch of the parse state machine accepted the input."""

    STRICT = "strict"
    FALLBACK = "fallback"
    NAN = "nan"


class RejectionReason(StrEnum):
    """Why a filter returned its input unchanged."""

    INVALID_TYPE = "invalid_type"
    NOT_PARSED = "not_parsed"
    INCOMPLETE_PARSE = "incomplete_parse"
    SCALE_MISMATCH = "scale_mismatch"
    CURRENCY_MISSING = "currency_missing"
    DISALLOWED_CHARACTERS = "disallowed_characters"
    SCALE_EXCEEDED = "scale_exceeded"
    FORMAT_FAILED = "format_failed"


__all__ = [
    "FormatStyle",
    "FormatType",
    "NumberAttribute",
    "NumberSymbol",
    "ParsePath",
    "RejectionReason",
    "SymbolKind",
    "TextAttribute",
]
