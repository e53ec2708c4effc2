"""currencylex exception hierarchy with structured diagnostics.

Exceptions are raised for configuration problems only. Policy rejections
(unparseable text, wrong scale, missing currency) are never raised: filters
return their input unchanged and expose the diagnostic through evaluate().

Python 3.12+. Zero external dependencies.
"""

from .codes import Diagnostic

__all__ = [
    "ConfigurationError",
    "CurrencyLexError",
    "InvalidOptionError",
    "LocaleConfigurationError",
]


class CurrencyLexError(Exception):
    """Base exception for all currencylex errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CurrencyLexError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigurationError(CurrencyLexError):
    """Invalid configuration of a filter, validator, or formatting handle."""


class LocaleConfigurationError(ConfigurationError):
    """Locale is unknown to CLDR or syntactically invalid.

    Raised when a formatting handle is created for the locale, which happens
    lazily on first use of a filter or validator.

    Attributes:
        locale_code: The locale that failed to load
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        """Initialize LocaleConfigurationError.

        Args:
            message: Error message string OR Diagnostic object
            locale_code: The locale that failed to load
        """
        super().__init__(message)
        self.locale_code = locale_code


class InvalidOptionError(ConfigurationError, ValueError):
    """Option value or option key is invalid.

    Also a ValueError so that callers validating plain mappings can catch
    it with the builtin exception.

    Attributes:
        option_name: Name of the offending option
    """

    def __init__(self, message: str | Diagnostic, *, option_name: str = "") -> None:
        """Initialize InvalidOptionError.

        Args:
            message: Error message string OR Diagnostic object
            option_name: Name of the offending option
        """
        super().__init__(message)
        self.option_name = option_name
