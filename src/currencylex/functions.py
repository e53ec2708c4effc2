"""Functional API over the currency filters and validator.

Each call builds a fresh filter, so calls share no mutable state. Options
may be given as option objects or as plain mappings with snake_case or
camelCase keys.

Example:
    >>> filter_to_currency(1234.61, {"locale": "it_IT", "currency_code": "EUR"})
    '1.234,61\\xa0€'
    >>> filter_to_number("£11.33", {"locale": "en_GB"})
    11.33
    >>> validate_currency("-£1.00", {"locale": "en_GB", "negativeAllowed": False})
    False

Python 3.12+.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .filters import CurrencyFilter, UncurrencyFilter
from .validators import CurrencyValidator

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from .runtime import CurrencyOptions, ValidationOptions

__all__ = ["filter_to_currency", "filter_to_number", "validate_currency"]


def filter_to_currency(
    value: object,
    options: CurrencyOptions | Mapping[str, Any] | None = None,
) -> object:
    """Format a float as currency text; other values are returned as is.

    Raises:
        InvalidOptionError: If options are invalid
        LocaleConfigurationError: If the locale is unknown or malformed
    """
    return CurrencyFilter(options).filter(value)


def filter_to_number(
    value: object,
    options: CurrencyOptions | Mapping[str, Any] | None = None,
) -> object:
    """Parse currency text to a float; rejected values are returned as is.

    Raises:
        InvalidOptionError: If options are invalid
        LocaleConfigurationError: If the locale is unknown or malformed
    """
    return UncurrencyFilter(options).filter(value)


def validate_currency(
    value: object,
    options: ValidationOptions | Mapping[str, Any] | None = None,
) -> bool:
    """True when value is a valid currency string.

    Raises:
        InvalidOptionError: If options are invalid
        LocaleConfigurationError: If the locale is unknown or malformed
    """
    return CurrencyValidator(options).is_valid(value)
