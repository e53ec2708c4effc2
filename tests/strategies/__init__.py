"""Hypothesis strategies for currencylex property-based testing.

Usage:
    from tests.strategies import in_scale_amounts, locale_currency_pairs
"""

from .currency import (
    LOCALE_DEFAULT_CURRENCIES,
    SYMBOL_EDGE_LOCALES,
    TWO_DIGIT_LOCALE_CURRENCIES,
    cents_to_float,
    in_scale_amounts,
    locale_currency_pairs,
    non_float_values,
    over_scale_amounts,
)

__all__ = [
    "LOCALE_DEFAULT_CURRENCIES",
    "SYMBOL_EDGE_LOCALES",
    "TWO_DIGIT_LOCALE_CURRENCIES",
    "cents_to_float",
    "in_scale_amounts",
    "locale_currency_pairs",
    "non_float_values",
    "over_scale_amounts",
]
