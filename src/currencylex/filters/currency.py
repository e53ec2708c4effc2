"""Float to localized currency text.

Python 3.12+. Uses Babel for i18n.
"""

from __future__ import annotations

import logging
import math
from decimal import Decimal, InvalidOperation, localcontext

from currencylex.diagnostics import ErrorTemplate
from currencylex.enums import RejectionReason
from currencylex.parsing import FormatOutcome, Formatted, Unchanged
from currencylex.runtime import decimal_context

from .base import LocaleAwareFilter

__all__ = ["CurrencyFilter"]

logger = logging.getLogger(__name__)


def _exceeds_scale(value: float, fraction_digits: int, rounding: str) -> bool:
    """True when rounding value to fraction_digits would change it."""
    amount = Decimal(repr(value))
    quantum = Decimal(1).scaleb(-fraction_digits)
    with localcontext(decimal_context(amount, fraction_digits)):
        return float(amount.quantize(quantum, rounding=rounding)) != value


class CurrencyFilter(LocaleAwareFilter):
    """Formats floats as currency text for a locale.

    Only floats are formatted; every other type is returned unchanged.
    With scale correctness on, a finite value that would be rounded by the
    currency's fraction digits is returned unchanged.

    Example:
        >>> f = CurrencyFilter(CurrencyOptions(locale="it_IT", currency_code="EUR"))
        >>> f.filter(1234.61)
        '1.234,61\\xa0€'
        >>> f.filter(0.123)
        0.123
        >>> f.filter("1234.61")
        '1234.61'
    """

    def evaluate(self, value: object) -> FormatOutcome:
        """Format value, or report why it was left unchanged.

        Raises:
            LocaleConfigurationError: If the configured locale is invalid
        """
        if not isinstance(value, float):
            diagnostic = ErrorTemplate.unsupported_input_type(value, "float")
            return Unchanged(value, RejectionReason.INVALID_TYPE, diagnostic)

        state = self._ready()
        formatter = state.formatter
        currency_code = state.currency_code
        locale_code = formatter.locale_code

        text = formatter.format_currency(value, currency_code)
        if text is None:
            diagnostic = ErrorTemplate.format_failed(value, locale_code, currency_code)
            return Unchanged(value, RejectionReason.FORMAT_FAILED, diagnostic)

        if self._options.scale_correctness and math.isfinite(value):
            fraction_digits = state.symbols.fraction_digits
            try:
                exceeded = _exceeds_scale(value, fraction_digits, formatter.rounding_mode)
            except InvalidOperation:
                diagnostic = ErrorTemplate.format_failed(value, locale_code, currency_code)
                return Unchanged(value, RejectionReason.FORMAT_FAILED, diagnostic)
            if exceeded:
                diagnostic = ErrorTemplate.format_scale_exceeded(
                    value, fraction_digits, locale_code, currency_code
                )
                logger.debug("Not formatting %r: %s", value, diagnostic.message)
                return Unchanged(value, RejectionReason.SCALE_EXCEEDED, diagnostic)

        return Formatted(text)

    def filter(self, value: object) -> object:
        """Currency text for value, or value itself if it was rejected."""
        outcome = self.evaluate(value)
        if isinstance(outcome, Formatted):
            return outcome.text
        return outcome.original
