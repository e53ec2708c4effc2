"""Validator for numbers written in scientific notation.

Python 3.12+. Uses Babel for i18n.
"""

from __future__ import annotations

import logging
import re
import threading
from dataclasses import dataclass
from decimal import Decimal

from currencylex.constants import LEFT_TO_RIGHT_MARK
from currencylex.diagnostics import ErrorTemplate, ValidationError, ValidationResult
from currencylex.enums import FormatStyle, NumberSymbol
from currencylex.locale_utils import get_system_locale
from currencylex.runtime import NumberFormatter

__all__ = ["ScientificNotationValidator"]

logger = logging.getLogger(__name__)

# Reason codes
INVALID_INPUT = "invalidInput"
NOT_SCIENTIFIC = "notScientific"
NOT_NUMBER = "notNumber"


@dataclass(frozen=True, slots=True)
class _LocaleHandles:
    decimal: NumberFormatter
    exponential: str
    exponent_symbol: re.Pattern[str]
    exponent: re.Pattern[str]


class ScientificNotationValidator:
    """Checks that a value is a locale number in scientific notation.

    The locale's exponent symbol (matched case-insensitively) must split
    the value into a mantissa that parses as a locale number and a signed
    integer exponent. Left-to-right marks are ignored. Non-string scalars
    are checked through str(); bools and containers are invalidInput.

    Example:
        >>> v = ScientificNotationValidator("it_IT")
        >>> v.is_valid("1,5E3")
        True
        >>> v.is_valid("1500")
        False
    """

    def __init__(self, locale: str | None = None) -> None:
        self._lock = threading.RLock()
        self._locale = locale
        self._handles: _LocaleHandles | None = None
        self._last: ValidationResult | None = None

    @property
    def locale(self) -> str:
        """Configured locale, or the platform locale."""
        return self._locale or get_system_locale()

    def set_locale(self, locale: str | None) -> None:
        with self._lock:
            self._locale = locale
            self._handles = None

    @property
    def messages(self) -> dict[str, str]:
        """Reason code to message for the last validation."""
        if self._last is None:
            return {}
        return self._last.messages

    def _get_handles(self) -> _LocaleHandles:
        with self._lock:
            if self._handles is None:
                locale_code = self.locale
                scientific = NumberFormatter.create(locale_code, FormatStyle.SCIENTIFIC)
                decimal = NumberFormatter.create(locale_code, FormatStyle.DECIMAL)
                exponential = scientific.get_symbol(NumberSymbol.EXPONENTIAL) or "E"
                signs = {"+", "-"}
                signs.add(decimal.get_symbol(NumberSymbol.PLUS_SIGN))
                signs.add(decimal.get_symbol(NumberSymbol.MINUS_SIGN))
                self._handles = _LocaleHandles(
                    decimal=decimal,
                    exponential=exponential,
                    exponent_symbol=re.compile(re.escape(exponential), re.IGNORECASE),
                    exponent=re.compile(rf"[{re.escape(''.join(sorted(signs)))}]?\d+"),
                )
            return self._handles

    def is_valid(self, value: object) -> bool:
        return self.validate(value).is_valid

    def validate(self, value: object) -> ValidationResult:
        """Validate value and record the result.

        Raises:
            LocaleConfigurationError: If the configured locale is invalid
        """
        result = self._validate(value)
        with self._lock:
            self._last = result
        if not result.is_valid:
            logger.debug("Validation of %r failed: %s", value, ", ".join(result.messages))
        return result

    def _validate(self, value: object) -> ValidationResult:
        if isinstance(value, bool) or not isinstance(value, (str, int, float, Decimal)):
            diagnostic = ErrorTemplate.scientific_invalid_input(value)
            return ValidationResult.invalid(
                value, (ValidationError(INVALID_INPUT, diagnostic.message, diagnostic),)
            )

        handles = self._get_handles()
        locale_code = handles.decimal.locale_code
        text = str(value).replace(LEFT_TO_RIGHT_MARK, "")

        parts = handles.exponent_symbol.split(text, maxsplit=1)
        if len(parts) != 2:
            diagnostic = ErrorTemplate.not_scientific(text, handles.exponential, locale_code)
            return ValidationResult.invalid(
                value, (ValidationError(NOT_SCIENTIFIC, diagnostic.message, diagnostic),)
            )

        mantissa, exponent = parts
        if handles.decimal.parse(mantissa) is None or not handles.exponent.fullmatch(exponent):
            diagnostic = ErrorTemplate.not_number(text, locale_code)
            return ValidationResult.invalid(
                value, (ValidationError(NOT_NUMBER, diagnostic.message, diagnostic),)
            )

        return ValidationResult.valid(value)

    def __call__(self, value: object) -> bool:
        return self.is_valid(value)
