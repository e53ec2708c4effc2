"""currencylex - locale-aware currency formatting and parsing.

Converts float amounts to locale currency text and parses currency text
back to floats, with tunable strictness on the parsing side: a strict
locale-canonical parse first, then, when the currency symbol is optional,
a character-class fallback. Locale data comes from Babel (CLDR).

Public API:
    CurrencyFilter - Float to currency text
    UncurrencyFilter - Currency text to float
    CurrencyValidator - Currency string validation with reason codes
    ScientificNotationValidator - Scientific notation validation
    CurrencyOptions / ValidationOptions - Typed, validated options
    filter_to_currency / filter_to_number / validate_currency - One-shot calls

Exceptions:
    CurrencyLexError - Base exception class
    ConfigurationError - Invalid configuration
    LocaleConfigurationError - Unknown or malformed locale
    InvalidOptionError - Invalid option value (also a ValueError)

Submodules:
    currencylex.parsing - Symbol tables and the strict/fallback parse engine
    currencylex.runtime - Babel-backed NumberFormatter handle and options
    currencylex.diagnostics - Diagnostics, error templates, validation results
    currencylex.locale_utils - Locale normalization and fallback chains
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .diagnostics import (
    ConfigurationError,
    CurrencyLexError,
    InvalidOptionError,
    LocaleConfigurationError,
    ValidationResult,
)
from .enums import FormatType, ParsePath, RejectionReason
from .filters import CurrencyFilter, UncurrencyFilter
from .functions import filter_to_currency, filter_to_number, validate_currency
from .runtime import CurrencyOptions, NumberFormatter, ValidationOptions
from .validators import CurrencyValidator, ScientificNotationValidator

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("currencylex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigurationError",
    "CurrencyFilter",
    "CurrencyLexError",
    "CurrencyOptions",
    "CurrencyValidator",
    "FormatType",
    "InvalidOptionError",
    "LocaleConfigurationError",
    "NumberFormatter",
    "ParsePath",
    "RejectionReason",
    "ScientificNotationValidator",
    "UncurrencyFilter",
    "ValidationOptions",
    "ValidationResult",
    "__version__",
    "filter_to_currency",
    "filter_to_number",
    "validate_currency",
]
