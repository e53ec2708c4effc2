"""Shared constants for currencylex.

This module provides centralized configuration constants used across
the runtime, parsing, filter, and validator packages. Placing constants
here avoids circular imports and provides a single source of truth.

Constants are grouped by domain:
- Option defaults: Strictness policy applied when callers do not override
- Locale data: Root locale, numbering system, chain bounds
- Whitespace: Characters treated as interchangeable spaces
- Cache limits: Memory bounds for caching subsystems

Python 3.12+. Zero external dependencies.
"""

from decimal import ROUND_HALF_EVEN

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Option defaults
    "DEFAULT_SCALE_CORRECTNESS",
    "DEFAULT_CURRENCY_CORRECTNESS",
    "DEFAULT_NEGATIVE_ALLOWED",
    "DEFAULT_LOCALE_FALLBACK",
    # Locale data
    "ROOT_LOCALE",
    "NUMBERING_SYSTEM",
    "MAX_LOCALE_CHAIN_DEPTH",
    "UNKNOWN_CURRENCY_CODE",
    "ISO_CURRENCY_CODE_LENGTH",
    "CURRENCY_PLACEHOLDER",
    "DEFAULT_ROUNDING_MODE",
    # Whitespace
    "NBSP",
    "NNBSP",
    "SPACE_CHARS",
    "LEFT_TO_RIGHT_MARK",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# OPTION DEFAULTS
# ============================================================================

# Number of fraction digits must equal the currency's mandated scale.
DEFAULT_SCALE_CORRECTNESS: bool = True

# Currency symbol must be present and match the configured currency.
DEFAULT_CURRENCY_CORRECTNESS: bool = True

# Negative amounts are accepted by the currency validator.
DEFAULT_NEGATIVE_ALLOWED: bool = True

# Locale used when the platform locale cannot be determined.
DEFAULT_LOCALE_FALLBACK: str = "en_US"

# ============================================================================
# LOCALE DATA
# ============================================================================

# Identifier of the CLDR root locale; terminal element of every fallback chain.
ROOT_LOCALE: str = "root"

# Numbering system whose symbols Babel uses when formatting.
NUMBERING_SYSTEM: str = "latn"

# Upper bound on locale fallback chain length.
# language_Script_TERRITORY_VARIANT plus root is 5; parent exceptions add at most one hop.
MAX_LOCALE_CHAIN_DEPTH: int = 8

# ISO 4217 code for "no currency"; used when a locale has no territory currency.
UNKNOWN_CURRENCY_CODE: str = "XXX"

# ISO 4217 currency codes are exactly 3 ASCII letters.
ISO_CURRENCY_CODE_LENGTH: int = 3

# CLDR pattern placeholder for the currency sign.
CURRENCY_PLACEHOLDER: str = "\u00a4"

# Babel quantizes with the decimal module default context rounding.
DEFAULT_ROUNDING_MODE: str = ROUND_HALF_EVEN

# ============================================================================
# WHITESPACE
# ============================================================================

NBSP: str = "\u00a0"
NNBSP: str = "\u202f"

# Characters accepted wherever a CLDR pattern or group separator has a space.
SPACE_CHARS: frozenset[str] = frozenset({" ", NBSP, NNBSP})

# Bidi mark emitted by some locales around exponent and sign symbols.
LEFT_TO_RIGHT_MARK: str = "\u200e"

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel Locale objects.
# 128 covers typical multi-region applications (major locales + variants).
MAX_LOCALE_CACHE_SIZE: int = 128
