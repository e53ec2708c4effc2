"""Diagnostic system for currencylex.

Provides structured error diagnostics with codes, hints, and locale context.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.12+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    ConfigurationError,
    CurrencyLexError,
    InvalidOptionError,
    LocaleConfigurationError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate
from .validation import ValidationError, ValidationResult

__all__ = [
    "ConfigurationError",
    "CurrencyLexError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorTemplate",
    "InvalidOptionError",
    "LocaleConfigurationError",
    "OutputFormat",
    "ValidationError",
    "ValidationResult",
]
