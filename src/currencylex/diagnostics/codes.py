"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.12+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Input errors (value outside the supported domain)
        2000-2999: Configuration errors (locale, options, currency code)
        3000-3999: Formatting rejections (number -> currency text)
        4000-4999: Parsing rejections (currency text -> number)
        5000-5099: Currency validation failures
        5100-5199: Scientific notation validation failures
    """

    # Input errors (1000-1999)
    INPUT_TYPE_UNSUPPORTED = 1001

    # Configuration errors (2000-2999)
    LOCALE_UNKNOWN = 2001
    LOCALE_INVALID = 2002
    OPTION_INVALID = 2003
    OPTION_UNKNOWN = 2004
    CURRENCY_CODE_INVALID = 2005

    # Formatting rejections (3000-3999)
    FORMAT_SCALE_EXCEEDED = 3001
    FORMAT_FAILED = 3002

    # Parsing rejections (4000-4999)
    PARSE_CURRENCY_FAILED = 4001
    PARSE_INCOMPLETE = 4002
    PARSE_SCALE_MISMATCH = 4003
    PARSE_CURRENCY_MISSING = 4004
    PARSE_DISALLOWED_CHARACTERS = 4005
    PARSE_AMOUNT_INVALID = 4006

    # Currency validation (5000-5099)
    VALIDATION_CURRENCY_INVALID = 5001
    VALIDATION_NOT_CURRENCY = 5002
    VALIDATION_NOT_POSITIVE_CURRENCY = 5003

    # Scientific notation validation (5100-5199)
    VALIDATION_SCIENTIFIC_INVALID_INPUT = 5101
    VALIDATION_NOT_SCIENTIFIC = 5102
    VALIDATION_NOT_NUMBER = 5103


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools (logs, API responses).

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        input_value: Input that was rejected (repr for non-strings)
        locale_code: Locale in effect when the diagnostic was produced
        currency_code: ISO 4217 code in effect when the diagnostic was produced
        expected_pattern: CLDR pattern the input was expected to follow
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    input_value: str | None = None
    locale_code: str | None = None
    currency_code: str | None = None
    expected_pattern: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[PARSE_SCALE_MISMATCH]: Expected 2 fraction digits in '11,333'
              = locale: it_IT
              = currency: EUR
              = help: Enter exactly 2 digits after the decimal separator

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
