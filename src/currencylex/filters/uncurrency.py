"""Localized currency text to float.

Python 3.12+. Uses Babel for i18n.
"""

from __future__ import annotations

from currencylex.diagnostics import ErrorTemplate
from currencylex.enums import RejectionReason
from currencylex.parsing import ParseOutcome, Parsed, Unchanged

from .base import LocaleAwareFilter

__all__ = ["UncurrencyFilter"]


class UncurrencyFilter(LocaleAwareFilter):
    """Parses currency text into a float for a locale.

    The strict path accepts the locale's canonical currency pattern. When
    currency correctness is off, text the strict path rejects is retried
    with the currency symbol optional. Non-strings and rejected text are
    returned unchanged.

    Example:
        >>> f = UncurrencyFilter(CurrencyOptions(locale="it_IT", currency_code="EUR"))
        >>> f.filter("1.234,61 €")
        1234.61
        >>> f.filter("€ 11,33")
        '€ 11,33'
    """

    def evaluate(self, value: object) -> ParseOutcome:
        """Parse value, or report why it was left unchanged.

        Raises:
            LocaleConfigurationError: If the configured locale is invalid
        """
        if not isinstance(value, str):
            diagnostic = ErrorTemplate.unsupported_input_type(value, "str")
            return Unchanged(value, RejectionReason.INVALID_TYPE, diagnostic)
        return self._ready().engine.parse(value)

    def filter(self, value: object) -> object:
        """Amount parsed from value, or value itself if it was rejected."""
        outcome = self.evaluate(value)
        if isinstance(outcome, Parsed):
            return outcome.value
        return outcome.original
