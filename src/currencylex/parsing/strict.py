"""Strict parse path: the locale-canonical currency pattern.

Python 3.12+.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from currencylex.diagnostics import ErrorTemplate
from currencylex.enums import ParsePath, RejectionReason, TextAttribute

from .outcome import Parsed, Unchanged
from .rules import CurrencyPresenceValidator, ScaleValidator

if TYPE_CHECKING:
    from currencylex.runtime.number_formatter import NumberFormatter

    from .outcome import ParseOutcome
    from .regex_components import RegexComponents
    from .symbols import SymbolTable

__all__ = ["StrictParser"]


class StrictParser:
    """Accepts text that the currency-style handle parses in full.

    Rejection order:
        1. No prefix of the text matches the currency pattern
        2. Finite result, but parsing stopped before the end of the text
        3. Scale correctness on, finite result, and the digit count after
           the decimal separator of the matched amount differs from the
           currency's fraction digits
        4. Currency correctness on and the display symbol is absent
    """

    __slots__ = (
        "_currency_code",
        "_currency_correctness",
        "_formatter",
        "_presence",
        "_scale",
        "_scale_correctness",
    )

    def __init__(
        self,
        formatter: NumberFormatter,
        symbols: SymbolTable,
        components: RegexComponents,
        *,
        currency_code: str,
        scale_correctness: bool,
        currency_correctness: bool,
    ) -> None:
        self._formatter = formatter
        self._currency_code = currency_code
        self._scale = ScaleValidator(
            symbols.fraction_digits, symbols.decimal_separator, components
        )
        self._presence = CurrencyPresenceValidator(symbols.currency_symbol)
        self._scale_correctness = scale_correctness
        self._currency_correctness = currency_correctness

    def parse(self, original: str, normalized: str) -> ParseOutcome:
        """Parse space-normalized text; checks run against the original.

        Args:
            original: Text as received
            normalized: Text with U+0020 replaced by U+00A0

        Returns:
            Parsed on acceptance, Unchanged(original) otherwise
        """
        formatter = self._formatter
        formatter.set_text_attribute(TextAttribute.CURRENCY_CODE, self._currency_code)
        locale_code, currency_code = formatter.locale_code, self._currency_code

        result = formatter.parse_currency(normalized)
        if result is None:
            diagnostic = ErrorTemplate.parse_failed(original, locale_code, currency_code)
            return Unchanged(original, RejectionReason.NOT_PARSED, diagnostic)

        finite = math.isfinite(result.amount)
        if finite and result.position != len(normalized):
            diagnostic = ErrorTemplate.parse_incomplete(
                original, result.position, locale_code, currency_code
            )
            return Unchanged(original, RejectionReason.INCOMPLETE_PARSE, diagnostic)

        if self._scale_correctness and finite:
            count = self._scale.count_after_first(result.number)
            if not self._scale.matches(count):
                diagnostic = ErrorTemplate.scale_mismatch(
                    original, self._scale.fraction_digits, count, locale_code, currency_code
                )
                return Unchanged(original, RejectionReason.SCALE_MISMATCH, diagnostic)

        if self._currency_correctness and not self._presence.is_present(original):
            diagnostic = ErrorTemplate.currency_missing(
                original, locale_code, currency_code, self._presence.currency_symbol
            )
            return Unchanged(original, RejectionReason.CURRENCY_MISSING, diagnostic)

        return Parsed(result.amount, ParsePath.STRICT)
