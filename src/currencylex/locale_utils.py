"""Locale utilities for BCP-47 to POSIX conversion and CLDR locale inheritance.

Centralizes locale format normalization used throughout the codebase.
Provides canonical locale handling to ensure consistent cache keys and lookups,
plus the bounded locale fallback chain used for currency symbol resolution.

Python 3.12+.
"""

from __future__ import annotations

import functools
import logging
import os
from typing import TYPE_CHECKING

from babel.core import get_global, parse_locale
from babel.numbers import get_territory_currencies

from currencylex.constants import (
    DEFAULT_LOCALE_FALLBACK,
    MAX_LOCALE_CACHE_SIZE,
    MAX_LOCALE_CHAIN_DEPTH,
    ROOT_LOCALE,
    UNKNOWN_CURRENCY_CODE,
)

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "default_currency_for_locale",
    "get_babel_locale",
    "get_system_locale",
    "locale_fallback_chain",
    "normalize_locale",
    "parent_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Encoding and modifier suffixes (".UTF-8", "@euro") are dropped.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "pt-BR")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "pt_BR")

    Example:
        >>> normalize_locale("en-US")
        'en_US'
        >>> normalize_locale("de_DE.UTF-8")
        'de_DE'
        >>> normalize_locale("en")  # Already normalized
        'en'
    """
    code = locale_code.strip().split(".")[0].split("@")[0]
    return code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result. Babel Locale objects
    are immutable, so cached instances are safe to share between threads.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("it-IT")
        >>> locale.language
        'it'
        >>> locale.territory
        'IT'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the Babel Locale cache (tests, long-running processes)."""
    get_babel_locale.cache_clear()


def get_system_locale(*, raise_on_failure: bool = False) -> str:
    """Detect system locale from OS and environment variables.

    Detection order:
    1. Python locale.getlocale() (OS-level locale)
    2. LC_ALL environment variable (overrides all)
    3. LC_MESSAGES environment variable (for message catalogs)
    4. LANG environment variable (default locale)

    Normalizes the result to POSIX format for Babel compatibility.
    Filters out "C" and "POSIX" pseudo-locales.

    Args:
        raise_on_failure: If True, raise RuntimeError when locale cannot be
            determined. If False (default), return "en_US" as fallback.

    Returns:
        Detected locale code in POSIX format.

    Raises:
        RuntimeError: If raise_on_failure is True and locale cannot be determined.
    """
    import locale as locale_module  # noqa: PLC0415

    try:
        system_locale, _ = locale_module.getlocale()
        if system_locale and system_locale not in ("C", "POSIX"):
            return normalize_locale(system_locale)
    except (ValueError, AttributeError):
        pass

    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value and value not in ("C", "POSIX", "C.UTF-8", ""):
            return normalize_locale(value)

    if raise_on_failure:
        msg = (
            "Could not determine system locale. "
            "Set LC_ALL, LC_MESSAGES, or LANG environment variable."
        )
        raise RuntimeError(msg)

    logger.warning(
        "Could not determine system locale; falling back to %s", DEFAULT_LOCALE_FALLBACK
    )
    return DEFAULT_LOCALE_FALLBACK


def _is_non_likely_script(locale_code: str) -> bool:
    """True for language_Script locales whose script is not the language's likely one.

    CLDR gives such locales (az_Arab, mn_Mong) the root locale as parent
    instead of their language.
    """
    try:
        language, territory, script, variant = parse_locale(locale_code)[:4]
    except ValueError:
        return False
    if not (language and script) or territory or variant:
        return False

    likely = get_global("likely_subtags").get(language)
    if not likely:
        return False
    try:
        likely_script = parse_locale(likely)[2]
    except ValueError:
        return False
    return script != likely_script


def parent_locale(locale_code: str) -> str | None:
    """Return the CLDR parent of a locale identifier.

    CLDR parent exceptions take priority (es_MX -> es_419). A language_Script
    locale with a script other than the language's likely script inherits
    from root (az_Arab -> root). Otherwise the most specific subtag is
    stripped (it_IT -> it, mn_Mong_MN -> mn_Mong). Single-subtag locales have
    the root locale as parent, and root has none.

    Args:
        locale_code: Locale identifier (BCP-47 or POSIX)

    Returns:
        Parent identifier, or None when locale_code is the root locale

    Example:
        >>> parent_locale("it_IT")
        'it'
        >>> parent_locale("it")
        'root'
        >>> parent_locale("root") is None
        True
    """
    normalized = normalize_locale(locale_code)
    if not normalized or normalized == ROOT_LOCALE:
        return None

    exception = get_global("parent_exceptions").get(normalized)
    if exception:
        return str(exception)

    if _is_non_likely_script(normalized):
        return ROOT_LOCALE

    parts = normalized.split("_")
    if len(parts) == 1:
        return ROOT_LOCALE
    return "_".join(parts[:-1])


def locale_fallback_chain(locale_code: str) -> tuple[str, ...]:
    """Build the locale fallback chain from most specific to root.

    Iterative and bounded by MAX_LOCALE_CHAIN_DEPTH; the chain always ends
    with the root locale.

    Args:
        locale_code: Locale identifier (BCP-47 or POSIX)

    Returns:
        Tuple of identifiers, e.g. ("it_IT", "it", "root")

    Example:
        >>> locale_fallback_chain("it-IT")
        ('it_IT', 'it', 'root')
    """
    chain: list[str] = []
    current: str | None = normalize_locale(locale_code)
    while current and len(chain) < MAX_LOCALE_CHAIN_DEPTH:
        if current in chain:
            break
        chain.append(current)
        current = parent_locale(current)

    if not chain or chain[-1] != ROOT_LOCALE:
        chain.append(ROOT_LOCALE)
    return tuple(chain)


def default_currency_for_locale(locale: Locale) -> str:
    """Resolve the default ISO 4217 currency of a locale.

    Uses the locale territory, or the likely territory of its language when
    the locale has none (it -> it_Latn_IT -> IT). Locales without any
    territory currency resolve to "XXX".

    Args:
        locale: Babel Locale

    Returns:
        ISO 4217 currency code

    Example:
        >>> default_currency_for_locale(get_babel_locale("it_IT"))
        'EUR'
        >>> default_currency_for_locale(get_babel_locale("ja"))
        'JPY'
    """
    territory = locale.territory
    if territory is None:
        likely = get_global("likely_subtags").get(locale.language)
        if likely:
            territory = parse_locale(likely)[1]

    if territory:
        currencies = get_territory_currencies(territory, tender=True)
        if currencies:
            return str(currencies[0])
    return UNKNOWN_CURRENCY_CODE
