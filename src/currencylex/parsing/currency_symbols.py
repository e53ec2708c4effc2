"""Currency display symbol resolution through the CLDR locale chain.

Each CLDR locale file carries only the currency symbols that differ from its
parent. Resolution walks the fallback chain from the most specific locale to
root and returns the first locale-owned symbol, or the ISO code itself.

Python 3.12+. Uses Babel for CLDR data.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Mapping

from babel import localedata

from currencylex.constants import MAX_LOCALE_CACHE_SIZE, ROOT_LOCALE
from currencylex.locale_utils import locale_fallback_chain

__all__ = ["CurrencySymbolResolver"]

logger = logging.getLogger(__name__)


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def _own_currency_symbols(locale_id: str) -> Mapping[str, str]:
    """Currency symbols defined by the locale itself (not inherited)."""
    # Data file names are case-sensitive; normalize_locale finds the real one
    # but does not list root
    if locale_id == ROOT_LOCALE:
        canonical: str | None = ROOT_LOCALE
    else:
        canonical = localedata.normalize_locale(locale_id)
    if canonical is None:
        return {}
    data = localedata.load(canonical, merge_inherited=False)
    return dict(data.get("currency_symbols", {}))


class CurrencySymbolResolver:
    """Resolves the display symbol of a currency for a locale.

    Example:
        >>> resolver = CurrencySymbolResolver()
        >>> resolver.locale_chain("it_IT")
        ('it_IT', 'it', 'root')
        >>> resolver.resolve("it_IT", "EUR")
        '€'
        >>> resolver.resolve("it_IT", "ZZZ")
        'ZZZ'
    """

    __slots__ = ()

    def locale_chain(self, locale_code: str) -> tuple[str, ...]:
        """Locale identifiers searched, most specific first."""
        return locale_fallback_chain(locale_code)

    def lookup(self, locale_id: str, currency_code: str) -> str | None:
        """Symbol owned by exactly this locale, or None."""
        return _own_currency_symbols(locale_id).get(currency_code)

    def resolve(self, locale_code: str, currency_code: str) -> str:
        """Resolve the display symbol, falling back to the ISO code.

        Never raises: locales without CLDR data are skipped.
        """
        for locale_id in self.locale_chain(locale_code):
            symbol = self.lookup(locale_id, currency_code)
            if symbol:
                logger.debug(
                    "Currency symbol for %s in %s found in %s",
                    currency_code,
                    locale_code,
                    locale_id,
                )
                return symbol
        return currency_code
