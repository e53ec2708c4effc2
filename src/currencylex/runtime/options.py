"""Typed options for currency filters and validators.

CurrencyOptions replaces a string-keyed option bag with named, defaulted,
validated fields. ValidationOptions adds the validator-only policy.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any, Self

from currencylex.constants import (
    DEFAULT_CURRENCY_CORRECTNESS,
    DEFAULT_NEGATIVE_ALLOWED,
    DEFAULT_SCALE_CORRECTNESS,
    ISO_CURRENCY_CODE_LENGTH,
)
from currencylex.diagnostics import ErrorTemplate, InvalidOptionError
from currencylex.enums import FormatType

__all__ = ["CurrencyOptions", "ValidationOptions"]

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def _snake_case(key: str) -> str:
    """Convert camelCase or PascalCase option keys to snake_case."""
    return _CAMEL_BOUNDARY.sub(r"_\1", key).lower()


@dataclass(frozen=True, slots=True)
class CurrencyOptions:
    """Immutable options shared by currency filters and validators.

    Attributes:
        locale: BCP 47 or POSIX locale; None selects the platform locale
            when the formatting handle is acquired.
        currency_code: ISO 4217 code; None selects the locale's currency.
            Normalized to upper case.
        scale_correctness: Require exactly the currency's fraction digits.
        currency_correctness: Require the configured currency's symbol.
        format_type: CLDR currency pattern (standard or accounting).

    Raises:
        InvalidOptionError: On construction with an invalid value.

    Example:
        >>> CurrencyOptions(locale="it_IT", currency_code="eur")
        CurrencyOptions(locale='it_IT', currency_code='EUR', ...)
        >>> CurrencyOptions.from_mapping({"locale": "en_GB", "scaleCorrectness": False})
        CurrencyOptions(locale='en_GB', currency_code=None, scale_correctness=False, ...)
    """

    locale: str | None = None
    currency_code: str | None = None
    scale_correctness: bool = DEFAULT_SCALE_CORRECTNESS
    currency_correctness: bool = DEFAULT_CURRENCY_CORRECTNESS
    format_type: FormatType = FormatType.STANDARD

    def __post_init__(self) -> None:
        """Validate and normalize field values."""
        if self.locale is not None and (
            not isinstance(self.locale, str) or not self.locale.strip()
        ):
            diagnostic = ErrorTemplate.option_invalid("locale", self.locale, "non-empty string")
            raise InvalidOptionError(diagnostic, option_name="locale")

        if self.currency_code is not None:
            code = self.currency_code
            if not (
                isinstance(code, str)
                and len(code) == ISO_CURRENCY_CODE_LENGTH
                and code.isascii()
                and code.isalpha()
            ):
                diagnostic = ErrorTemplate.currency_code_invalid(code)
                raise InvalidOptionError(diagnostic, option_name="currency_code")
            object.__setattr__(self, "currency_code", code.upper())

        for name in ("scale_correctness", "currency_correctness"):
            value = getattr(self, name)
            if not isinstance(value, bool):
                diagnostic = ErrorTemplate.option_invalid(name, value, "bool")
                raise InvalidOptionError(diagnostic, option_name=name)

        try:
            object.__setattr__(self, "format_type", FormatType(self.format_type))
        except ValueError:
            expected = " or ".join(repr(str(t)) for t in FormatType)
            diagnostic = ErrorTemplate.option_invalid("format_type", self.format_type, expected)
            raise InvalidOptionError(diagnostic, option_name="format_type") from None

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> Self:
        """Build options from a plain mapping.

        Keys may be snake_case ("currency_code") or camelCase ("currencyCode").

        Raises:
            InvalidOptionError: On unknown keys or invalid values.
        """
        known = tuple(f.name for f in fields(cls))
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            name = _snake_case(str(key))
            if name not in known:
                diagnostic = ErrorTemplate.option_unknown(str(key), known)
                raise InvalidOptionError(diagnostic, option_name=str(key))
            kwargs[name] = value
        return cls(**kwargs)


@dataclass(frozen=True, slots=True)
class ValidationOptions(CurrencyOptions):
    """CurrencyOptions plus the validator's sign policy.

    Attributes:
        negative_allowed: Accept negative amounts as valid.
    """

    negative_allowed: bool = DEFAULT_NEGATIVE_ALLOWED

    def __post_init__(self) -> None:
        """Validate fields, including negative_allowed."""
        super(ValidationOptions, self).__post_init__()
        if not isinstance(self.negative_allowed, bool):
            diagnostic = ErrorTemplate.option_invalid(
                "negative_allowed", self.negative_allowed, "bool"
            )
            raise InvalidOptionError(diagnostic, option_name="negative_allowed")
