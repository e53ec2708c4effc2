"""Parse state machine: Start -> TryStrict -> [Accepted | TryFallback].

Python 3.12+.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from currencylex.constants import NBSP
from currencylex.enums import FormatStyle, ParsePath
from currencylex.runtime.number_formatter import NumberFormatter

from .fallback import FallbackParser
from .outcome import Parsed, Unchanged
from .strict import StrictParser

if TYPE_CHECKING:
    from .outcome import ParseOutcome
    from .regex_components import RegexComponents
    from .symbols import SymbolTable

__all__ = ["ParseEngine", "normalize_spaces"]

logger = logging.getLogger(__name__)


def normalize_spaces(text: str) -> str:
    """Treat ordinary spaces as the non-breaking spaces CLDR patterns use."""
    return text.replace(" ", NBSP)


class ParseEngine:
    """Runs the strict path, then the fallback path when it is enabled.

    The NaN symbol is accepted before either path runs. The fallback path
    exists only when currency correctness is off.
    """

    __slots__ = ("_fallback", "_nan_symbol", "_strict")

    def __init__(
        self,
        strict: StrictParser,
        fallback: FallbackParser | None,
        nan_symbol: str,
    ) -> None:
        self._strict = strict
        self._fallback = fallback
        self._nan_symbol = nan_symbol

    @classmethod
    def create(
        cls,
        formatter: NumberFormatter,
        symbols: SymbolTable,
        components: RegexComponents,
        *,
        scale_correctness: bool,
        currency_correctness: bool,
    ) -> ParseEngine:
        """Wire both paths for a currency-style handle.

        The plain-decimal handle for the fallback path is created for the
        same locale only when currency correctness is off.
        """
        currency_code = formatter.currency_code
        strict = StrictParser(
            formatter,
            symbols,
            components,
            currency_code=currency_code,
            scale_correctness=scale_correctness,
            currency_correctness=currency_correctness,
        )

        fallback = None
        if not currency_correctness:
            # Same Babel locale, so creation cannot fail here
            decimal_formatter = NumberFormatter(
                formatter.locale_code, formatter.babel_locale, FormatStyle.DECIMAL
            )
            fallback = FallbackParser(
                decimal_formatter,
                symbols,
                components,
                currency_code=currency_code,
                scale_correctness=scale_correctness,
            )
        return cls(strict, fallback, symbols.nan_symbol)

    @property
    def has_fallback(self) -> bool:
        """True when the fallback path is enabled."""
        return self._fallback is not None

    def parse(self, text: str) -> ParseOutcome:
        """Parse currency text.

        Returns:
            Parsed, or Unchanged(text) carrying the reason of the last path
            that ran
        """
        normalized = normalize_spaces(text)
        if self._nan_symbol and normalized == self._nan_symbol:
            return Parsed(math.nan, ParsePath.NAN)

        outcome = self._strict.parse(text, normalized)
        if isinstance(outcome, Unchanged) and self._fallback is not None:
            logger.debug("Strict parse rejected %r (%s); trying fallback", text, outcome.reason)
            outcome = self._fallback.parse(text, normalized)

        if isinstance(outcome, Unchanged):
            logger.debug("Rejected %r: %s", text, outcome.reason)
        return outcome
