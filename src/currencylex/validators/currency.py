"""Validator for localized currency strings.

Python 3.12+. Uses Babel for i18n.
"""

from __future__ import annotations

import logging
import threading
from typing import TYPE_CHECKING

from currencylex.diagnostics import ErrorTemplate, ValidationError, ValidationResult
from currencylex.filters import UncurrencyFilter
from currencylex.parsing import Unchanged
from currencylex.runtime import ValidationOptions

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

__all__ = ["CurrencyValidator"]

logger = logging.getLogger(__name__)

# Reason codes
CURRENCY_INVALID = "currencyInvalid"
NOT_CURRENCY = "notCurrency"
NOT_POSITIVE_CURRENCY = "notPositiveCurrency"


class CurrencyValidator:
    """Checks that a string is a currency amount for a locale.

    Acceptance follows UncurrencyFilter under the same options. With
    negative_allowed off, a negative amount is reported as
    notPositiveCurrency.

    After each validation the resolved currency code and the expected CLDR
    pattern are available through currency_code and pattern.

    Example:
        >>> v = CurrencyValidator(ValidationOptions(locale="it_IT", currency_code="EUR"))
        >>> v.is_valid("1.234,61 €")
        True
        >>> v.is_valid("€ 11,33")
        False
        >>> v.messages
        {'notCurrency': "The '€ 11,33' is not a well-formatted currency; ..."}
    """

    def __init__(self, options: ValidationOptions | Mapping[str, Any] | None = None) -> None:
        self._lock = threading.RLock()
        self._options = self._coerce_options(options)
        self._filter = UncurrencyFilter(self._options)
        self._last: ValidationResult | None = None
        self._pattern: str | None = None
        self._currency_code: str | None = self._options.currency_code

    @staticmethod
    def _coerce_options(options: ValidationOptions | Mapping[str, Any] | None) -> ValidationOptions:
        if options is None:
            return ValidationOptions()
        if isinstance(options, ValidationOptions):
            return options
        return ValidationOptions.from_mapping(options)

    @property
    def options(self) -> ValidationOptions:
        """Current options."""
        return self._options

    def set_options(self, options: ValidationOptions | Mapping[str, Any]) -> None:
        """Replace all options."""
        with self._lock:
            self._options = self._coerce_options(options)
            self._filter.set_options(self._options)
            self._currency_code = self._options.currency_code
            self._pattern = None

    @property
    def currency_code(self) -> str | None:
        """Configured code, or the code resolved by the last validation."""
        return self._currency_code

    @property
    def pattern(self) -> str | None:
        """CLDR pattern in effect for the last validation."""
        return self._pattern

    @property
    def messages(self) -> dict[str, str]:
        """Reason code to message for the last validation."""
        if self._last is None:
            return {}
        return self._last.messages

    def is_valid(self, value: object) -> bool:
        """True when value is an acceptable currency string."""
        return self.validate(value).is_valid

    def validate(self, value: object) -> ValidationResult:
        """Validate value and record the result.

        Raises:
            LocaleConfigurationError: If the configured locale is invalid
        """
        with self._lock:
            result = self._validate(value)
            self._last = result
        if not result.is_valid:
            logger.debug("Validation of %r failed: %s", value, ", ".join(result.messages))
        return result

    def _validate(self, value: object) -> ValidationResult:
        if not isinstance(value, str):
            diagnostic = ErrorTemplate.validation_currency_invalid(value)
            error = ValidationError(CURRENCY_INVALID, diagnostic.message, diagnostic)
            return ValidationResult.invalid(value, (error,))

        outcome = self._filter.evaluate(value)
        formatter = self._filter.get_formatter()
        self._currency_code = self._filter.get_currency_code()
        self._pattern = formatter.pattern
        locale_code = formatter.locale_code

        if isinstance(outcome, Unchanged):
            diagnostic = ErrorTemplate.validation_not_currency(
                value, self._pattern, locale_code, self._currency_code
            )
            error = ValidationError(NOT_CURRENCY, diagnostic.message, diagnostic)
            return ValidationResult.invalid(value, (error,))

        if not self._options.negative_allowed and outcome.value < 0:
            diagnostic = ErrorTemplate.validation_not_positive_currency(
                value, locale_code, self._currency_code
            )
            error = ValidationError(NOT_POSITIVE_CURRENCY, diagnostic.message, diagnostic)
            return ValidationResult.invalid(value, (error,))

        return ValidationResult.valid(value)

    def __call__(self, value: object) -> bool:
        return self.is_valid(value)
