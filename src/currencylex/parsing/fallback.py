"""Fallback parse path: character-class check, then plain-decimal parse.

Entered only when the currency symbol is optional. Accepts amounts with or
without the currency symbol, in any position, as long as every character
belongs to the locale's symbol set.

Python 3.12+.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from currencylex.constants import NBSP
from currencylex.diagnostics import ErrorTemplate
from currencylex.enums import ParsePath, RejectionReason, TextAttribute

from .outcome import Parsed, Unchanged
from .rules import ScaleValidator

if TYPE_CHECKING:
    from currencylex.runtime.number_formatter import NumberFormatter

    from .outcome import ParseOutcome
    from .regex_components import RegexComponents
    from .symbols import SymbolTable

__all__ = ["FallbackParser"]


class FallbackParser:
    """Parses relaxed currency text through the plain-decimal handle.

    Steps:
        1. Reject characters outside digits plus the SymbolTable's symbols
        2. Scale correctness: digits after the last decimal separator, with
           the currency symbol stripped, must equal the fraction digits
        3. Strip the currency symbol and non-breaking spaces
        4. Rewrite a currency-style negative (e.g. "(0.01)") into the
           decimal style ("-0.01") when the two conventions differ
        5. Parse with the decimal handle, which must consume the whole text
    """

    __slots__ = (
        "_allowed",
        "_currency_code",
        "_currency_symbol",
        "_decimal",
        "_disallowed",
        "_negative_pattern",
        "_negative_replacement",
        "_scale",
        "_scale_correctness",
    )

    def __init__(
        self,
        decimal_formatter: NumberFormatter,
        symbols: SymbolTable,
        components: RegexComponents,
        *,
        currency_code: str,
        scale_correctness: bool,
    ) -> None:
        self._decimal = decimal_formatter
        self._currency_code = currency_code
        self._currency_symbol = symbols.currency_symbol
        self._scale_correctness = scale_correctness
        self._scale = ScaleValidator(
            symbols.fraction_digits, symbols.decimal_separator, components
        )

        distinct = symbols.distinct_symbols()
        self._allowed = components.allowed_characters(distinct)
        self._disallowed = components.disallowed_characters(distinct)

        currency_prefix = symbols.negative_prefix.strip()
        currency_suffix = symbols.negative_suffix.strip()
        decimal_prefix = decimal_formatter.get_text_attribute(TextAttribute.NEGATIVE_PREFIX)
        decimal_suffix = decimal_formatter.get_text_attribute(TextAttribute.NEGATIVE_SUFFIX)

        self._negative_pattern: re.Pattern[str] | None = None
        self._negative_replacement = (decimal_prefix, decimal_suffix)
        if currency_prefix != decimal_prefix or currency_suffix != decimal_suffix:
            body = components.digits + "".join(
                re.escape(s)
                for s in (
                    symbols.decimal_separator,
                    symbols.group_separator,
                    symbols.infinity_symbol,
                )
                if s
            )
            self._negative_pattern = re.compile(
                f"^{re.escape(currency_prefix)}([{body}]+){re.escape(currency_suffix)}$",
                components.flags,
            )

    def normalize_negative(self, text: str) -> str:
        """Rewrite one anchored currency-style negative into decimal style.

        Example (en_US accounting):
            >>> parser.normalize_negative("(0.01)")
            '-0.01'
        """
        if self._negative_pattern is None:
            return text
        prefix, suffix = self._negative_replacement
        return self._negative_pattern.sub(
            lambda m: f"{prefix}{m.group(1)}{suffix}", text, count=1
        )

    def parse(self, original: str, normalized: str) -> ParseOutcome:
        """Parse space-normalized text.

        Args:
            original: Text as received
            normalized: Text with U+0020 replaced by U+00A0

        Returns:
            Parsed on acceptance, Unchanged(original) otherwise
        """
        locale_code, currency_code = self._decimal.locale_code, self._currency_code

        if not self._allowed.fullmatch(normalized):
            offending = "".join(self._disallowed.findall(normalized))
            diagnostic = ErrorTemplate.disallowed_characters(
                original, offending, locale_code, currency_code
            )
            return Unchanged(original, RejectionReason.DISALLOWED_CHARACTERS, diagnostic)

        text = normalized
        if self._currency_symbol:
            text = text.replace(self._currency_symbol, "")

        if self._scale_correctness:
            count = self._scale.count_after_last(text)
            if not self._scale.matches(count):
                diagnostic = ErrorTemplate.scale_mismatch(
                    original, self._scale.fraction_digits, count, locale_code, currency_code
                )
                return Unchanged(original, RejectionReason.SCALE_MISMATCH, diagnostic)

        text = self.normalize_negative(text.replace(NBSP, ""))

        value = self._decimal.parse(text)
        if value is None:
            diagnostic = ErrorTemplate.amount_invalid(original, text, locale_code)
            return Unchanged(original, RejectionReason.NOT_PARSED, diagnostic)
        return Parsed(value, ParsePath.FALLBACK)
