"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.12+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode

__all__ = ["ErrorTemplate"]


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This solves EM101/EM102 violations while providing:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    # =========================================================================
    # INPUT ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def unsupported_input_type(value: object, expected: str) -> Diagnostic:
        """Value type is outside the domain of the operation.

        Args:
            value: The rejected value
            expected: Description of the accepted type(s)

        Returns:
            Diagnostic for INPUT_TYPE_UNSUPPORTED
        """
        received = type(value).__name__
        msg = f"Unsupported input type '{received}': {expected} expected"
        return Diagnostic(
            code=DiagnosticCode.INPUT_TYPE_UNSUPPORTED,
            message=msg,
            hint=f"Pass a {expected} value",
            input_value=repr(value),
        )

    # =========================================================================
    # CONFIGURATION ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def locale_unknown(locale_code: str) -> Diagnostic:
        """Locale is well-formed but has no CLDR data.

        Args:
            locale_code: The unknown locale code

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use BCP 47 or POSIX locale codes (e.g., 'en_US', 'it-IT', 'de_DE')",
            locale_code=locale_code,
        )

    @staticmethod
    def locale_invalid(locale_code: str, reason: str) -> Diagnostic:
        """Locale identifier cannot be parsed.

        Args:
            locale_code: The malformed locale code
            reason: Parser error message

        Returns:
            Diagnostic for LOCALE_INVALID
        """
        msg = f"Invalid locale '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_INVALID,
            message=msg,
            hint="Use BCP 47 or POSIX locale codes (e.g., 'en_US', 'it-IT', 'de_DE')",
            locale_code=locale_code,
        )

    @staticmethod
    def option_invalid(option_name: str, value: object, expected: str) -> Diagnostic:
        """Option value has the wrong type or shape.

        Args:
            option_name: The option being set
            value: The rejected value
            expected: Description of accepted values

        Returns:
            Diagnostic for OPTION_INVALID
        """
        msg = f"Invalid value {value!r} for option '{option_name}': {expected} expected"
        return Diagnostic(
            code=DiagnosticCode.OPTION_INVALID,
            message=msg,
            input_value=repr(value),
        )

    @staticmethod
    def option_unknown(option_name: str, known: tuple[str, ...]) -> Diagnostic:
        """Option mapping contains a key that is not an option.

        Args:
            option_name: The unrecognized key
            known: Accepted option names

        Returns:
            Diagnostic for OPTION_UNKNOWN
        """
        msg = f"Unknown option '{option_name}'"
        return Diagnostic(
            code=DiagnosticCode.OPTION_UNKNOWN,
            message=msg,
            hint=f"Known options: {', '.join(known)}",
        )

    @staticmethod
    def currency_code_invalid(currency_code: object) -> Diagnostic:
        """Currency code is not three ASCII letters."""
        msg = f"Invalid currency code {currency_code!r}"
        return Diagnostic(
            code=DiagnosticCode.CURRENCY_CODE_INVALID,
            message=msg,
            hint="Use ISO 4217 alphabetic codes (EUR, USD, GBP)",
            input_value=repr(currency_code),
        )

    # =========================================================================
    # FORMATTING REJECTIONS (3000-3999)
    # =========================================================================

    @staticmethod
    def format_scale_exceeded(
        value: float,
        fraction_digits: int,
        locale_code: str,
        currency_code: str,
    ) -> Diagnostic:
        """Value has more precision than the currency allows.

        Args:
            value: The rejected amount
            fraction_digits: Fraction digits mandated by the currency
            locale_code: Locale in effect
            currency_code: Currency in effect

        Returns:
            Diagnostic for FORMAT_SCALE_EXCEEDED
        """
        msg = (
            f"Amount {value!r} cannot be represented with "
            f"{fraction_digits} fraction digit(s) without rounding"
        )
        return Diagnostic(
            code=DiagnosticCode.FORMAT_SCALE_EXCEEDED,
            message=msg,
            hint="Round the amount first, or disable scale correctness",
            input_value=repr(value),
            locale_code=locale_code,
            currency_code=currency_code,
        )

    @staticmethod
    def format_failed(
        value: object,
        locale_code: str,
        currency_code: str,
    ) -> Diagnostic:
        """Formatting handle produced no output."""
        msg = f"Failed to format {value!r} as currency"
        return Diagnostic(
            code=DiagnosticCode.FORMAT_FAILED,
            message=msg,
            input_value=repr(value),
            locale_code=locale_code,
            currency_code=currency_code,
        )

    # =========================================================================
    # PARSING REJECTIONS (4000-4999)
    # =========================================================================

    @staticmethod
    def parse_failed(value: str, locale_code: str, currency_code: str) -> Diagnostic:
        """Text does not match the locale currency pattern.

        Args:
            value: The input string that failed to parse
            locale_code: Locale in effect
            currency_code: Currency in effect

        Returns:
            Diagnostic for PARSE_CURRENCY_FAILED
        """
        msg = f"Failed to parse currency '{value}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_CURRENCY_FAILED,
            message=msg,
            hint="Check that the amount follows the locale's currency conventions",
            input_value=value,
            locale_code=locale_code,
            currency_code=currency_code,
        )

    @staticmethod
    def parse_incomplete(
        value: str,
        position: int,
        locale_code: str,
        currency_code: str,
    ) -> Diagnostic:
        """Parse stopped before the end of the text.

        Args:
            value: The input string
            position: Index where parsing stopped
            locale_code: Locale in effect
            currency_code: Currency in effect

        Returns:
            Diagnostic for PARSE_INCOMPLETE
        """
        msg = f"Unparsed trailing input '{value[position:]}' in '{value}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_INCOMPLETE,
            message=msg,
            hint="Remove characters after the amount",
            input_value=value,
            locale_code=locale_code,
            currency_code=currency_code,
        )

    @staticmethod
    def scale_mismatch(
        value: str,
        expected: int,
        actual: int,
        locale_code: str,
        currency_code: str,
    ) -> Diagnostic:
        """Fraction digit count differs from the currency scale.

        Args:
            value: The input string
            expected: Fraction digits mandated by the currency
            actual: Fraction digits found in the input
            locale_code: Locale in effect
            currency_code: Currency in effect

        Returns:
            Diagnostic for PARSE_SCALE_MISMATCH
        """
        msg = f"Expected {expected} fraction digit(s) in '{value}', found {actual}"
        return Diagnostic(
            code=DiagnosticCode.PARSE_SCALE_MISMATCH,
            message=msg,
            hint=f"Enter exactly {expected} digit(s) after the decimal separator",
            input_value=value,
            locale_code=locale_code,
            currency_code=currency_code,
        )

    @staticmethod
    def currency_missing(
        value: str,
        locale_code: str,
        currency_code: str,
        symbol: str,
    ) -> Diagnostic:
        """Currency symbol is required but absent.

        Args:
            value: The input string
            locale_code: Locale in effect
            currency_code: Currency in effect
            symbol: Display symbol that was expected

        Returns:
            Diagnostic for PARSE_CURRENCY_MISSING
        """
        msg = f"Currency symbol '{symbol}' not found in '{value}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_CURRENCY_MISSING,
            message=msg,
            hint="Include the currency symbol, or disable currency correctness",
            input_value=value,
            locale_code=locale_code,
            currency_code=currency_code,
        )

    @staticmethod
    def disallowed_characters(
        value: str,
        characters: str,
        locale_code: str,
        currency_code: str,
    ) -> Diagnostic:
        """Text contains characters outside the locale symbol set.

        Args:
            value: The input string
            characters: The offending characters, in order of appearance
            locale_code: Locale in effect
            currency_code: Currency in effect

        Returns:
            Diagnostic for PARSE_DISALLOWED_CHARACTERS
        """
        msg = f"Unexpected character(s) {characters!r} in '{value}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_DISALLOWED_CHARACTERS,
            message=msg,
            hint="Use only digits and the locale's number and currency symbols",
            input_value=value,
            locale_code=locale_code,
            currency_code=currency_code,
        )

    @staticmethod
    def amount_invalid(value: str, normalized: str, locale_code: str) -> Diagnostic:
        """Normalized amount is not a valid locale decimal."""
        msg = f"Failed to parse amount '{normalized}' from '{value}'"
        return Diagnostic(
            code=DiagnosticCode.PARSE_AMOUNT_INVALID,
            message=msg,
            hint="Check that the amount format matches the locale's conventions",
            input_value=value,
            locale_code=locale_code,
        )

    # =========================================================================
    # VALIDATION (5000-5199)
    # =========================================================================

    @staticmethod
    def validation_currency_invalid(value: object) -> Diagnostic:
        """Validated value is not a string."""
        msg = f"Invalid input given: '{value}' is not a string"
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_CURRENCY_INVALID,
            message=msg,
            input_value=repr(value),
        )

    @staticmethod
    def validation_not_currency(
        value: str,
        pattern: str,
        locale_code: str,
        currency_code: str,
    ) -> Diagnostic:
        """Validated string is not a well-formatted currency amount.

        Args:
            value: The input string
            pattern: CLDR currency pattern the input should follow
            locale_code: Locale in effect
            currency_code: Currency in effect

        Returns:
            Diagnostic for VALIDATION_NOT_CURRENCY
        """
        msg = (
            f"The '{value}' is not a well-formatted currency; "
            f"the requested format is {pattern}"
        )
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_NOT_CURRENCY,
            message=msg,
            input_value=value,
            locale_code=locale_code,
            currency_code=currency_code,
            expected_pattern=pattern,
        )

    @staticmethod
    def validation_not_positive_currency(
        value: str,
        locale_code: str,
        currency_code: str,
    ) -> Diagnostic:
        """Validated amount is negative while negatives are disallowed."""
        msg = f"The '{value}' value does not appear to be a positive currency"
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_NOT_POSITIVE_CURRENCY,
            message=msg,
            hint="Enable negative_allowed to accept negative amounts",
            input_value=value,
            locale_code=locale_code,
            currency_code=currency_code,
        )

    @staticmethod
    def scientific_invalid_input(value: object) -> Diagnostic:
        """Validated value is not a scalar."""
        msg = f"Invalid input given: '{value}' is not a string or number"
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_SCIENTIFIC_INVALID_INPUT,
            message=msg,
            input_value=repr(value),
        )

    @staticmethod
    def not_scientific(value: str, exponential: str, locale_code: str) -> Diagnostic:
        """Validated string has no exponent symbol.

        Args:
            value: The input string
            exponential: Locale exponent symbol
            locale_code: Locale in effect

        Returns:
            Diagnostic for VALIDATION_NOT_SCIENTIFIC
        """
        msg = (
            f"The '{value}' value does not appear to be a number "
            "expressed in scientific notation"
        )
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_NOT_SCIENTIFIC,
            message=msg,
            hint=f"Separate mantissa and exponent with '{exponential}'",
            input_value=value,
            locale_code=locale_code,
        )

    @staticmethod
    def not_number(value: str, locale_code: str) -> Diagnostic:
        """Validated string has an exponent symbol but is not a number."""
        msg = f"The '{value}' value is not a valid number"
        return Diagnostic(
            code=DiagnosticCode.VALIDATION_NOT_NUMBER,
            message=msg,
            input_value=value,
            locale_code=locale_code,
        )
