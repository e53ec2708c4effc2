"""Tests for the strict path, the fallback path and the parse state machine.

Python 3.12+.
"""

from __future__ import annotations

import math

import pytest
from babel import localedata

from currencylex.enums import FormatStyle, ParsePath, RejectionReason, TextAttribute
from currencylex.parsing import (
    FallbackParser,
    ParseEngine,
    Parsed,
    RegexComponents,
    SymbolTable,
    Unchanged,
    normalize_spaces,
)
from currencylex.runtime import NumberFormatter


def _engine(
    locale_code: str,
    currency_code: str,
    *,
    scale_correctness: bool = True,
    currency_correctness: bool = True,
    style: FormatStyle = FormatStyle.CURRENCY,
) -> ParseEngine:
    fmt = NumberFormatter.create(locale_code, style)
    fmt.set_text_attribute(TextAttribute.CURRENCY_CODE, currency_code)
    return ParseEngine.create(
        fmt,
        SymbolTable.from_formatter(fmt),
        RegexComponents(),
        scale_correctness=scale_correctness,
        currency_correctness=currency_correctness,
    )


def _reason(outcome: Parsed | Unchanged) -> RejectionReason:
    assert isinstance(outcome, Unchanged), outcome
    return outcome.reason


class TestNormalizeSpaces:
    def test_plain_spaces_become_nbsp(self) -> None:
        assert normalize_spaces("1 234,61 €") == "1\xa0234,61\xa0€"

    def test_other_whitespace_untouched(self) -> None:
        assert normalize_spaces("1\u202f234\t€") == "1\u202f234\t€"


class TestStrictPath:
    """it_IT/EUR with both correctness flags on."""

    @pytest.fixture
    def engine(self) -> ParseEngine:
        return _engine("it_IT", "EUR")

    def test_no_fallback(self, engine: ParseEngine) -> None:
        assert not engine.has_fallback

    def test_canonical(self, engine: ParseEngine) -> None:
        assert engine.parse("1.234,61 €") == Parsed(1234.61, ParsePath.STRICT)

    def test_nbsp_input(self, engine: ParseEngine) -> None:
        assert engine.parse("1.234,61\xa0€") == Parsed(1234.61, ParsePath.STRICT)

    def test_not_parsed(self, engine: ParseEngine) -> None:
        assert _reason(engine.parse("€ 11,33")) is RejectionReason.NOT_PARSED

    def test_trailing_text(self, engine: ParseEngine) -> None:
        assert _reason(engine.parse("1,00 € x")) is RejectionReason.INCOMPLETE_PARSE

    @pytest.mark.parametrize("text", ["1.234 €", "-1.234.10 €", "11,333 €", "11,3 €"])
    def test_scale_mismatch(self, engine: ParseEngine, text: str) -> None:
        assert _reason(engine.parse(text)) is RejectionReason.SCALE_MISMATCH

    def test_iso_code_without_symbol(self, engine: ParseEngine) -> None:
        """The code parses, but currency correctness demands the symbol."""
        assert _reason(engine.parse("11,33 EUR")) is RejectionReason.CURRENCY_MISSING

    def test_bare_amount(self, engine: ParseEngine) -> None:
        assert _reason(engine.parse("11,33")) is RejectionReason.NOT_PARSED

    def test_infinity_skips_scale_check(self, engine: ParseEngine) -> None:
        assert engine.parse("∞ €") == Parsed(math.inf, ParsePath.STRICT)
        assert engine.parse("-∞ €") == Parsed(-math.inf, ParsePath.STRICT)

    def test_nan(self, engine: ParseEngine) -> None:
        outcome = engine.parse("NaN")
        assert isinstance(outcome, Parsed)
        assert outcome.path is ParsePath.NAN
        assert math.isnan(outcome.value)

    def test_rejection_keeps_original(self, engine: ParseEngine) -> None:
        outcome = engine.parse("1 €")
        assert isinstance(outcome, Unchanged)
        assert outcome.original == "1 €"
        assert outcome.diagnostic is not None
        assert outcome.diagnostic.locale_code == "it_IT"

    def test_scale_off_accepts_extra_digits(self) -> None:
        engine = _engine("it_IT", "EUR", scale_correctness=False)
        assert engine.parse("11,333 €") == Parsed(11.333, ParsePath.STRICT)
        assert engine.parse("1.234 €") == Parsed(1234.0, ParsePath.STRICT)


class TestFallbackPath:
    """it_IT/EUR with currency correctness off."""

    @pytest.fixture
    def engine(self) -> ParseEngine:
        return _engine("it_IT", "EUR", currency_correctness=False)

    def test_has_fallback(self, engine: ParseEngine) -> None:
        assert engine.has_fallback

    def test_bare_amount(self, engine: ParseEngine) -> None:
        assert engine.parse("11,33") == Parsed(11.33, ParsePath.FALLBACK)

    def test_symbol_first(self, engine: ParseEngine) -> None:
        assert engine.parse("€ 11,33") == Parsed(11.33, ParsePath.FALLBACK)

    def test_negative_without_space(self, engine: ParseEngine) -> None:
        assert engine.parse("-0,01€") == Parsed(-0.01, ParsePath.FALLBACK)

    @pytest.mark.parametrize("text", ["1234,61 EUR", "1234,61 EURO"])
    def test_code_and_name_accepted_by_strict(self, engine: ParseEngine, text: str) -> None:
        assert engine.parse(text) == Parsed(1234.61, ParsePath.STRICT)

    def test_foreign_symbol_rejected(self, engine: ParseEngine) -> None:
        assert _reason(engine.parse("$ 11,33")) is RejectionReason.DISALLOWED_CHARACTERS

    def test_letters_rejected(self, engine: ParseEngine) -> None:
        outcome = engine.parse("11,33 euros")
        assert _reason(outcome) is RejectionReason.DISALLOWED_CHARACTERS

    def test_scale_counted_after_last_separator(self, engine: ParseEngine) -> None:
        assert _reason(engine.parse("11,333")) is RejectionReason.SCALE_MISMATCH
        assert _reason(engine.parse("1,234,5")) is RejectionReason.SCALE_MISMATCH

    def test_malformed_amount(self) -> None:
        engine = _engine("it_IT", "EUR", scale_correctness=False, currency_correctness=False)
        assert _reason(engine.parse("1,2,3")) is RejectionReason.NOT_PARSED


class TestNegativeNormalization:
    """Currency-style negatives rewritten to the decimal style."""

    def _fallback(self, locale_code: str, style: FormatStyle) -> FallbackParser:
        fmt = NumberFormatter.create(locale_code, style)
        decimal = NumberFormatter(fmt.locale_code, fmt.babel_locale, FormatStyle.DECIMAL)
        return FallbackParser(
            decimal,
            SymbolTable.from_formatter(fmt),
            RegexComponents(),
            currency_code=fmt.currency_code,
            scale_correctness=True,
        )

    def test_accounting_parentheses(self) -> None:
        parser = self._fallback("en_US", FormatStyle.ACCOUNTING)
        assert parser.normalize_negative("(0.01)") == "-0.01"
        assert parser.normalize_negative("(1,234.56)") == "-1,234.56"

    def test_unanchored_text_untouched(self) -> None:
        parser = self._fallback("en_US", FormatStyle.ACCOUNTING)
        assert parser.normalize_negative("x(0.01)") == "x(0.01)"

    def test_same_convention_is_identity(self) -> None:
        parser = self._fallback("it_IT", FormatStyle.CURRENCY)
        assert parser.normalize_negative("-0,01") == "-0,01"

    def test_accounting_engine(self) -> None:
        engine = _engine(
            "en_US", "USD", currency_correctness=False, style=FormatStyle.ACCOUNTING
        )
        assert engine.parse("(0.01)") == Parsed(-0.01, ParsePath.FALLBACK)
        assert engine.parse("($0.01)") == Parsed(-0.01, ParsePath.STRICT)


class TestBritishPound:
    """en_GB/GBP scale handling."""

    def test_scale(self) -> None:
        engine = _engine("en_GB", "GBP")
        assert _reason(engine.parse("£11.333")) is RejectionReason.SCALE_MISMATCH
        assert engine.parse("£11.33") == Parsed(11.33, ParsePath.STRICT)
        assert engine.parse("-£1,000.00") == Parsed(-1000.0, ParsePath.STRICT)


class TestSymbolContainingDecimalSeparator:
    """es_PA/PAB: the display symbol "B/." ends with the decimal separator."""

    @pytest.fixture
    def engine(self) -> ParseEngine:
        return _engine("es_PA", "PAB")

    def test_canonical(self, engine: ParseEngine) -> None:
        assert engine.parse("B/.1,234.00") == Parsed(1234.0, ParsePath.STRICT)

    def test_negative(self, engine: ParseEngine) -> None:
        fmt = NumberFormatter.create("es_PA", FormatStyle.CURRENCY)
        text = fmt.format_currency(-0.01, "PAB")
        assert text is not None
        assert engine.parse(text) == Parsed(-0.01, ParsePath.STRICT)

    @pytest.mark.parametrize("text", ["B/.1,234.0", "B/.1,234.000", "B/.1,234"])
    def test_scale_counted_in_amount(self, engine: ParseEngine, text: str) -> None:
        assert _reason(engine.parse(text)) is RejectionReason.SCALE_MISMATCH

    def test_relaxed_currency(self) -> None:
        engine = _engine("es_PA", "PAB", currency_correctness=False)
        assert engine.parse("1,234.00") == Parsed(1234.0, ParsePath.FALLBACK)
        assert engine.parse("B/.1,234.00") == Parsed(1234.0, ParsePath.STRICT)


class TestScriptSubtagSymbol:
    """Locales with a non-likely script resolve currency symbols from root."""

    @pytest.mark.parametrize(
        ("locale_code", "currency_code"),
        [("az_Arab", "AZN"), ("kk_Arab", "KZT"), ("mn_Mong_MN", "MNT")],
    )
    def test_symbol_matches_formatter_output(
        self, locale_code: str, currency_code: str
    ) -> None:
        if not localedata.exists(locale_code):
            pytest.skip(f"{locale_code} not in this CLDR release")
        fmt = NumberFormatter.create(locale_code, FormatStyle.CURRENCY)
        fmt.set_text_attribute(TextAttribute.CURRENCY_CODE, currency_code)
        text = fmt.format_currency(1234.0, currency_code)
        assert text is not None
        assert SymbolTable.from_formatter(fmt).currency_symbol in text
        assert _engine(locale_code, currency_code).parse(text) == Parsed(
            1234.0, ParsePath.STRICT
        )
