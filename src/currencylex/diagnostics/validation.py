"""Validation result for currency and scientific notation validators.

Validators report every failure as a ValidationError carrying a stable
reason code (e.g. "notCurrency") and the structured Diagnostic behind it.

Python 3.12+.
"""

from dataclasses import dataclass

from .codes import Diagnostic

__all__ = [
    "ValidationError",
    "ValidationResult",
]


# Maximum content length before truncation when sanitizing
_SANITIZE_MAX_CONTENT_LENGTH: int = 100


@dataclass(frozen=True, slots=True)
class ValidationError:
    """Single validation failure.

    Attributes:
        code: Reason code (e.g., "currencyInvalid", "notCurrency")
        message: Human-readable error message
        diagnostic: Structured diagnostic behind the failure

    Security Note:
        The message embeds the validated input. Use format(sanitize=True)
        to truncate it before logging user-supplied values.
    """

    code: str
    message: str
    diagnostic: Diagnostic | None = None

    def format(self, *, sanitize: bool = False) -> str:
        """Format error as human-readable string.

        Args:
            sanitize: If True, truncate the message to prevent leaking long
                user input into logs.

        Returns:
            Formatted error string
        """
        message = self.message
        if sanitize and len(message) > _SANITIZE_MAX_CONTENT_LENGTH:
            message = message[:_SANITIZE_MAX_CONTENT_LENGTH] + "..."
        return f"[{self.code}]: {message}"


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Outcome of validating one value.

    Immutable result object for thread-safe validation feedback.

    Attributes:
        value: The validated value
        errors: Validation failures (empty when valid)

    Example:
        >>> result = ValidationResult.valid("1.234,61 €")
        >>> result.is_valid
        True
        >>> result = ValidationResult.invalid(
        ...     "€ 11,33",
        ...     (ValidationError("notCurrency", "The '€ 11,33' is not ..."),),
        ... )
        >>> result.messages
        {'notCurrency': "The '€ 11,33' is not ..."}
    """

    value: object
    errors: tuple[ValidationError, ...]

    @property
    def is_valid(self) -> bool:
        """Check if validation passed."""
        return len(self.errors) == 0

    @property
    def error_count(self) -> int:
        """Get number of errors."""
        return len(self.errors)

    @property
    def messages(self) -> dict[str, str]:
        """Map reason code to message, in order of occurrence."""
        return {error.code: error.message for error in self.errors}

    @staticmethod
    def valid(value: object) -> "ValidationResult":
        """Create a valid result with no errors."""
        return ValidationResult(value=value, errors=())

    @staticmethod
    def invalid(value: object, errors: tuple[ValidationError, ...]) -> "ValidationResult":
        """Create an invalid result.

        Args:
            value: The validated value
            errors: Tuple of validation errors

        Returns:
            ValidationResult carrying the errors
        """
        return ValidationResult(value=value, errors=errors)

    def format(self, *, sanitize: bool = False) -> str:
        """Format validation result as human-readable string.

        Args:
            sanitize: If True, truncate each error message.

        Returns:
            One line per error, or a pass message
        """
        if not self.errors:
            return "Validation passed: no errors"

        lines = [f"Errors ({len(self.errors)}):"]
        lines.extend(f"  {error.format(sanitize=sanitize)}" for error in self.errors)
        return "\n".join(lines)
