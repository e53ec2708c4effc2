"""Tests for CurrencyValidator and ScientificNotationValidator.

Python 3.12+.
"""

from __future__ import annotations

from decimal import Decimal

import pytest
from hypothesis import event, given
from hypothesis import strategies as st

from currencylex.diagnostics import DiagnosticCode, ValidationResult
from currencylex.runtime import ValidationOptions
from currencylex.validators import CurrencyValidator, ScientificNotationValidator

IT_EUR = ValidationOptions(locale="it_IT", currency_code="EUR")


class TestCurrencyValidator:
    """Reason codes and messages."""

    @pytest.fixture
    def validator(self) -> CurrencyValidator:
        return CurrencyValidator(IT_EUR)

    def test_valid(self, validator: CurrencyValidator) -> None:
        assert validator.is_valid("1.234,61 €")
        assert validator.messages == {}

    def test_not_currency(self, validator: CurrencyValidator) -> None:
        assert not validator.is_valid("€ 11,33")
        assert validator.messages == {
            "notCurrency": (
                "The '€ 11,33' is not a well-formatted currency; "
                "the requested format is #,##0.00\xa0¤"
            )
        }

    def test_currency_invalid(self, validator: CurrencyValidator) -> None:
        result = validator.validate(12.5)
        assert not result.is_valid
        assert result.messages == {
            "currencyInvalid": "Invalid input given: '12.5' is not a string"
        }

    def test_negative_allowed_by_default(self, validator: CurrencyValidator) -> None:
        assert validator.is_valid("-1,00 €")

    def test_not_positive_currency(self) -> None:
        validator = CurrencyValidator(
            ValidationOptions(locale="it_IT", currency_code="EUR", negative_allowed=False)
        )
        result = validator.validate("-1,00 €")
        assert result.messages == {
            "notPositiveCurrency": "The '-1,00 €' value does not appear to be a positive currency"
        }
        assert validator.is_valid("1,00 €")

    def test_result_carries_diagnostic(self, validator: CurrencyValidator) -> None:
        result = validator.validate("1,0 €")
        assert isinstance(result, ValidationResult)
        diagnostic = result.errors[0].diagnostic
        assert diagnostic is not None
        assert diagnostic.code == DiagnosticCode.VALIDATION_NOT_CURRENCY
        assert diagnostic.expected_pattern == "#,##0.00\xa0¤"

    def test_currency_code_written_back(self) -> None:
        validator = CurrencyValidator(ValidationOptions(locale="en_GB"))
        assert validator.currency_code is None
        assert validator.pattern is None
        assert validator.is_valid("£11.33")
        assert validator.currency_code == "GBP"
        assert validator.pattern == "¤#,##0.00"

    def test_relaxed_currency(self) -> None:
        validator = CurrencyValidator({"locale": "it_IT", "currencyCorrectness": False})
        assert validator("11,33")
        assert not validator("11,333")

    def test_set_options(self, validator: CurrencyValidator) -> None:
        validator.set_options({"locale": "en_GB", "currencyCode": "GBP"})
        assert validator.options.locale == "en_GB"
        assert validator.is_valid("£11.33")
        assert not validator.is_valid("1.234,61 €")


class TestScientificNotationValidator:
    """Exponent symbol, mantissa and exponent checks."""

    @pytest.fixture
    def validator(self) -> ScientificNotationValidator:
        return ScientificNotationValidator("en_US")

    @pytest.mark.parametrize(
        "value", ["1.5E3", "1.5e3", "1.5E+3", "1.5E-3", "-2E10", "1,234.5E2", "\u200e1.5E3"]
    )
    def test_valid_strings(self, validator: ScientificNotationValidator, value: str) -> None:
        assert validator.is_valid(value)

    @pytest.mark.parametrize("value", [1e20, 1.5e-7, Decimal("1E+5")])
    def test_valid_scalars(self, validator: ScientificNotationValidator, value: object) -> None:
        assert validator.is_valid(value)

    @pytest.mark.parametrize("value", ["1500", "1.5", 1500, 2.5])
    def test_not_scientific(self, validator: ScientificNotationValidator, value: object) -> None:
        assert not validator.is_valid(value)
        assert list(validator.messages) == ["notScientific"]

    @pytest.mark.parametrize("value", ["E3", "1.5E", "1.5E3.2", "abcE3", "1.5E3E4", "1.5EE3"])
    def test_not_number(self, validator: ScientificNotationValidator, value: str) -> None:
        assert not validator.is_valid(value)
        assert list(validator.messages) == ["notNumber"]

    @pytest.mark.parametrize("value", [True, None, [1.5], {"a": 1}, object()])
    def test_invalid_input(self, validator: ScientificNotationValidator, value: object) -> None:
        result = validator.validate(value)
        assert list(result.messages) == ["invalidInput"]

    def test_locale_mantissa(self) -> None:
        validator = ScientificNotationValidator("it_IT")
        assert validator.is_valid("1,5E3")
        assert validator.locale == "it_IT"

    def test_set_locale(self, validator: ScientificNotationValidator) -> None:
        validator.set_locale("de_DE")
        assert validator.is_valid("1,5E3")

    @given(
        mantissa=st.decimals(
            min_value=Decimal("-999.999"),
            max_value=Decimal("999.999"),
            places=3,
            allow_nan=False,
            allow_infinity=False,
        ),
        exponent=st.integers(min_value=-300, max_value=300),
    )
    def test_generated_notation(self, mantissa: Decimal, exponent: int) -> None:
        """Plain mantissa and integer exponent always validate in en_US."""
        event(f"exponent_sign={'negative' if exponent < 0 else 'positive'}")
        text = f"{mantissa}E{exponent}"
        assert ScientificNotationValidator("en_US").is_valid(text)
