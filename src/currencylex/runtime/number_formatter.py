"""Locale-bound number formatting handle.

NumberFormatter wraps Babel's CLDR data and formatting functions behind a
small, mutable handle: one locale, one pattern style, one active currency.
It exposes the primitives the filters and validators are built on:

    - format_currency() / format(): number -> locale text
    - parse_currency() / parse(): locale text -> number
    - get_symbol() / set_symbol(): separators, signs, special-value symbols
    - get_attribute(): fraction digit counts
    - get_text_attribute() / set_text_attribute(): affixes and currency code

Parsing mirrors Babel's rendering: affixes are the CLDR pattern prefix and
suffix with the currency placeholder substituted and quotes removed, so any
string produced by format_currency() is accepted by parse_currency().

Thread Safety:
    A handle is mutable (active currency, symbol overrides) and is owned by
    a single filter or validator. Share only under the owner's lock.

Python 3.12+. Uses Babel for i18n.
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from decimal import Context, Decimal, InvalidOperation, getcontext, localcontext
from typing import TYPE_CHECKING

from babel import UnknownLocaleError
from babel import numbers as babel_numbers

from currencylex.constants import (
    CURRENCY_PLACEHOLDER,
    DEFAULT_ROUNDING_MODE,
    ISO_CURRENCY_CODE_LENGTH,
    NUMBERING_SYSTEM,
    SPACE_CHARS,
)
from currencylex.diagnostics import (
    ErrorTemplate,
    InvalidOptionError,
    LocaleConfigurationError,
)
from currencylex.enums import FormatStyle, NumberAttribute, NumberSymbol, TextAttribute
from currencylex.locale_utils import default_currency_for_locale, get_babel_locale

if TYPE_CHECKING:
    from babel import Locale
    from babel.numbers import NumberPattern

__all__ = ["CurrencyParseResult", "NumberFormatter", "decimal_context"]

logger = logging.getLogger(__name__)

# Single-quoted literal text in CLDR patterns; '' is an escaped quote
_QUOTED_LITERAL = re.compile(r"'([^']*)'")

# Runs of the currency placeholder (symbol, ISO code, or display name slot)
_PLACEHOLDER_RUN = re.compile(f"({CURRENCY_PLACEHOLDER}+)")

_SPACE_CLASS = "[" + "".join(sorted(SPACE_CHARS)) + "]"

# Symbols not carried by CLDR number symbol tables
_SYMBOL_FALLBACKS: dict[NumberSymbol, NumberSymbol] = {
    NumberSymbol.MONETARY_SEPARATOR: NumberSymbol.DECIMAL_SEPARATOR,
    NumberSymbol.MONETARY_GROUPING_SEPARATOR: NumberSymbol.GROUPING_SEPARATOR,
}

_CURRENCY_STYLES = frozenset({FormatStyle.CURRENCY, FormatStyle.ACCOUNTING})


def _strip_quotes(text: str) -> str:
    """Remove CLDR literal quoting the way Babel does when rendering."""
    return _QUOTED_LITERAL.sub(lambda m: m.group(1) or "'", text)


def decimal_context(value: Decimal, fraction_digits: int) -> Context:
    """Copy of the current context with room to quantize value exactly.

    Quantizing to fraction_digits places needs one digit per integer place
    plus fraction_digits, which exceeds the default 28 digits from 1e26 on.

    Example:
        >>> with localcontext(decimal_context(Decimal("1E+26"), 2)):
        ...     Decimal("1E+26").quantize(Decimal("0.01"))
        Decimal('100000000000000000000000000.00')
    """
    context = getcontext().copy()
    if value.is_finite():
        context.prec = max(context.prec, value.adjusted() + 1 + fraction_digits)
    return context


@dataclass(frozen=True, slots=True)
class CurrencyParseResult:
    """Result of NumberFormatter.parse_currency().

    Attributes:
        amount: Parsed value (finite, or +/-inf for the infinity symbol)
        currency_code: ISO 4217 code of the matched currency
        position: Index in the text where parsing stopped
        number: Matched numeric text, without the currency affixes
    """

    amount: float
    currency_code: str
    position: int
    number: str


class NumberFormatter:
    """Mutable formatting handle for one locale and pattern style.

    Use NumberFormatter.create() to construct instances; it validates the
    locale and raises LocaleConfigurationError for unknown or malformed
    locale identifiers.

    Examples:
        >>> fmt = NumberFormatter.create("it_IT", FormatStyle.CURRENCY)
        >>> fmt.currency_code
        'EUR'
        >>> fmt.format_currency(1234.61, "EUR")
        '1.234,61\\xa0€'
        >>> fmt.parse_currency("1.234,61\\xa0€")
        CurrencyParseResult(amount=1234.61, currency_code='EUR', position=10, number='1.234,61')

        >>> fmt = NumberFormatter.create("en-US", FormatStyle.ACCOUNTING)
        >>> fmt.format_currency(-0.01, "USD")
        '($0.01)'
    """

    __slots__ = (
        "_currency_code",
        "_locale",
        "_locale_code",
        "_number_pattern",
        "_style",
        "_symbol_overrides",
    )

    def __init__(self, locale_code: str, babel_locale: Locale, style: FormatStyle) -> None:
        """Initialize handle. Prefer create(), which validates the locale.

        Args:
            locale_code: Locale identifier as given by the caller
            babel_locale: Parsed Babel locale
            style: Pattern style the handle formats and parses with
        """
        self._locale_code = locale_code
        self._locale = babel_locale
        self._style = style
        self._number_pattern = self._lookup_pattern(babel_locale, style)
        self._currency_code: str | None = None
        self._symbol_overrides: dict[NumberSymbol, str] = {}

    @classmethod
    def create(cls, locale_code: str, style: FormatStyle = FormatStyle.CURRENCY) -> NumberFormatter:
        """Create a handle, validating the locale.

        Args:
            locale_code: BCP 47 or POSIX locale identifier (e.g., "it_IT", "en-GB")
            style: Pattern style (default: CURRENCY)

        Returns:
            New NumberFormatter

        Raises:
            LocaleConfigurationError: If the locale is unknown or malformed
        """
        try:
            babel_locale = get_babel_locale(locale_code)
        except UnknownLocaleError:
            diagnostic = ErrorTemplate.locale_unknown(locale_code)
            raise LocaleConfigurationError(diagnostic, locale_code=locale_code) from None
        except (ValueError, TypeError) as e:
            diagnostic = ErrorTemplate.locale_invalid(locale_code, str(e))
            raise LocaleConfigurationError(diagnostic, locale_code=locale_code) from None

        logger.debug("Created %s formatter for locale %s", style, babel_locale)
        return cls(locale_code, babel_locale, style)

    @staticmethod
    def _lookup_pattern(babel_locale: Locale, style: FormatStyle) -> NumberPattern:
        match style:
            case FormatStyle.CURRENCY:
                return babel_locale.currency_formats["standard"]
            case FormatStyle.ACCOUNTING:
                formats = babel_locale.currency_formats
                return formats.get("accounting") or formats["standard"]
            case FormatStyle.SCIENTIFIC:
                return babel_locale.scientific_formats[None]
            case FormatStyle.DECIMAL:
                return babel_locale.decimal_formats[None]

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def locale_code(self) -> str:
        """Locale identifier as given at creation."""
        return self._locale_code

    @property
    def babel_locale(self) -> Locale:
        """Parsed Babel locale."""
        return self._locale

    @property
    def style(self) -> FormatStyle:
        """Pattern style of this handle."""
        return self._style

    @property
    def pattern(self) -> str:
        """CLDR pattern string (e.g., '#,##0.00\\xa0¤')."""
        return str(self._number_pattern.pattern)

    @property
    def rounding_mode(self) -> str:
        """Decimal rounding mode applied when quantizing to the fraction digits."""
        return DEFAULT_ROUNDING_MODE

    @property
    def currency_code(self) -> str:
        """Active ISO 4217 code; defaults to the locale's currency on first read."""
        if self._currency_code is None:
            self._currency_code = default_currency_for_locale(self._locale)
            logger.debug(
                "Resolved default currency %s for locale %s", self._currency_code, self._locale
            )
        return self._currency_code

    # ------------------------------------------------------------------
    # Symbols and attributes
    # ------------------------------------------------------------------

    def get_symbol(self, kind: NumberSymbol) -> str:
        """Get a number symbol; empty string when the locale has none.

        Overrides set through set_symbol() take precedence over CLDR data.
        """
        if kind in self._symbol_overrides:
            return self._symbol_overrides[kind]

        if kind is NumberSymbol.CURRENCY_SYMBOL:
            return str(babel_numbers.get_currency_symbol(self.currency_code, locale=self._locale))
        if kind is NumberSymbol.INTL_CURRENCY_SYMBOL:
            return self.currency_code

        symbols = self._locale.number_symbols.get(NUMBERING_SYSTEM, {})
        value = symbols.get(kind.value)
        if value is None and kind in _SYMBOL_FALLBACKS:
            value = symbols.get(_SYMBOL_FALLBACKS[kind].value)
        return str(value) if value is not None else ""

    def set_symbol(self, kind: NumberSymbol, value: str) -> None:
        """Override a symbol reported by get_symbol() and used by the parsers.

        Setting EXPONENTIAL to "" disables scientific notation recognition.
        """
        self._symbol_overrides[kind] = value

    def get_attribute(self, attribute: NumberAttribute) -> int:
        """Get a fraction digit attribute.

        Currency styles report the currency's mandated precision (JPY: 0,
        EUR: 2, BHD: 3); other styles report the pattern's precision.
        """
        if self._style in _CURRENCY_STYLES:
            return int(babel_numbers.get_currency_precision(self.currency_code))

        minimum, maximum = self._number_pattern.frac_prec
        if attribute is NumberAttribute.MIN_FRACTION_DIGITS:
            return int(minimum)
        return int(maximum)

    def get_text_attribute(self, attribute: TextAttribute) -> str:
        """Get a rendered affix or the active currency code.

        Affixes are rendered exactly as format_currency() renders them,
        with the active currency's symbol in place of the placeholder.
        """
        match attribute:
            case TextAttribute.CURRENCY_CODE:
                return self.currency_code
            case TextAttribute.POSITIVE_PREFIX:
                return self._render_affix(self._number_pattern.prefix[0])
            case TextAttribute.POSITIVE_SUFFIX:
                return self._render_affix(self._number_pattern.suffix[0])
            case TextAttribute.NEGATIVE_PREFIX:
                return self._render_affix(self._number_pattern.prefix[1])
            case TextAttribute.NEGATIVE_SUFFIX:
                return self._render_affix(self._number_pattern.suffix[1])

    def set_text_attribute(self, attribute: TextAttribute, value: str) -> None:
        """Set the active currency code.

        Raises:
            InvalidOptionError: If attribute is not CURRENCY_CODE, or the code
                is not three ASCII letters
        """
        if attribute is not TextAttribute.CURRENCY_CODE:
            diagnostic = ErrorTemplate.option_invalid(
                str(attribute), value, "a writable text attribute (currency_code)"
            )
            raise InvalidOptionError(diagnostic, option_name=str(attribute))

        if not (
            isinstance(value, str)
            and len(value) == ISO_CURRENCY_CODE_LENGTH
            and value.isascii()
            and value.isalpha()
        ):
            diagnostic = ErrorTemplate.currency_code_invalid(value)
            raise InvalidOptionError(diagnostic, option_name="currency_code")

        self._currency_code = value.upper()

    def _render_affix(self, affix: str) -> str:
        text = affix
        if CURRENCY_PLACEHOLDER in text:
            code = self.currency_code
            text = text.replace(
                CURRENCY_PLACEHOLDER * 3,
                str(babel_numbers.get_currency_name(code, locale=self._locale)),
            )
            text = text.replace(CURRENCY_PLACEHOLDER * 2, code)
            text = text.replace(
                CURRENCY_PLACEHOLDER, self.get_symbol(NumberSymbol.CURRENCY_SYMBOL)
            )
        return _strip_quotes(text)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format_currency(self, value: float | Decimal, currency_code: str) -> str | None:
        """Format an amount as currency text.

        Uses the currency's mandated fraction digits. NaN renders as the
        locale NaN symbol; infinities render as the signed currency affixes
        around the locale infinity symbol.

        Args:
            value: Amount to format
            currency_code: ISO 4217 code

        Returns:
            Formatted text, or None if Babel cannot format the value
        """
        self.set_text_attribute(TextAttribute.CURRENCY_CODE, currency_code)

        special = self._format_special(value)
        if special is not None:
            return special

        format_type = "accounting" if self._style is FormatStyle.ACCOUNTING else "standard"
        amount = self._to_decimal(value)
        fraction_digits = self.get_attribute(NumberAttribute.FRACTION_DIGITS)
        try:
            with localcontext(decimal_context(amount, fraction_digits)):
                return str(
                    babel_numbers.format_currency(
                        amount,
                        self.currency_code,
                        locale=self._locale,
                        currency_digits=True,
                        format_type=format_type,
                    )
                )
        except (ValueError, TypeError, InvalidOperation, KeyError) as e:
            logger.debug("Currency formatting failed for %r: %s", value, e)
            return None

    def format(self, value: float | Decimal) -> str | None:
        """Format a number with this handle's pattern style.

        Currency styles format with the active currency code.

        Returns:
            Formatted text, or None if Babel cannot format the value
        """
        if self._style in _CURRENCY_STYLES:
            return self.format_currency(value, self.currency_code)

        special = self._format_special(value)
        if special is not None:
            return special

        number = self._to_decimal(value)
        fraction_digits = self.get_attribute(NumberAttribute.MAX_FRACTION_DIGITS)
        try:
            with localcontext(decimal_context(number, fraction_digits)):
                if self._style is FormatStyle.SCIENTIFIC:
                    return str(babel_numbers.format_scientific(number, locale=self._locale))
                return str(babel_numbers.format_decimal(number, locale=self._locale))
        except (ValueError, TypeError, InvalidOperation, KeyError) as e:
            logger.debug("Number formatting failed for %r: %s", value, e)
            return None

    def _format_special(self, value: float | Decimal) -> str | None:
        if isinstance(value, Decimal):
            is_nan, is_inf = value.is_nan(), value.is_infinite()
        else:
            is_nan, is_inf = math.isnan(value), math.isinf(value)

        if is_nan:
            return self.get_symbol(NumberSymbol.NAN)
        if is_inf:
            negative = value < 0
            prefix = TextAttribute.NEGATIVE_PREFIX if negative else TextAttribute.POSITIVE_PREFIX
            suffix = TextAttribute.NEGATIVE_SUFFIX if negative else TextAttribute.POSITIVE_SUFFIX
            return (
                self.get_text_attribute(prefix)
                + self.get_symbol(NumberSymbol.INFINITY)
                + self.get_text_attribute(suffix)
            )
        return None

    @staticmethod
    def _to_decimal(value: float | Decimal) -> Decimal:
        # repr() gives the shortest string that round-trips the float
        if isinstance(value, Decimal):
            return value
        return Decimal(repr(value))

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def parse_currency(self, text: str) -> CurrencyParseResult | None:
        """Parse currency text from the start of the string.

        Matches the positive and negative forms of the currency pattern
        anchored at the start and keeps the longest match. The currency
        slot accepts the display symbol, the ISO code, or the localized
        currency name, case-insensitively. Grouping is lenient and affix
        spaces match any of U+0020, U+00A0, U+202F.

        Args:
            text: Text to parse

        Returns:
            Amount, currency code and stop position; None when no prefix of
            the text matches the pattern
        """
        best: tuple[re.Match[str], bool] | None = None
        for negative in (False, True):
            match = self._affixed_number_regex(negative, currency_slot=True).match(text)
            if match is not None and (best is None or match.end() > best[0].end()):
                best = (match, negative)

        if best is None:
            return None

        match, negative = best
        amount = self._amount_from_match(match.group("number"), negative)
        if amount is None:
            return None
        return CurrencyParseResult(
            amount=amount,
            currency_code=self.currency_code,
            position=match.end(),
            number=match.group("number"),
        )

    def parse(self, text: str) -> float | None:
        """Parse a plain number; the whole text must match.

        Only the pattern's own affixes, digits, the locale separators and
        the infinity symbol are recognized. Exponents, "NaN" and other
        Decimal literal forms are rejected.

        Returns:
            Parsed value, or None
        """
        for negative in (False, True):
            match = self._affixed_number_regex(negative, currency_slot=False).fullmatch(text)
            if match is not None:
                return self._amount_from_match(match.group("number"), negative)
        return None

    def _amount_from_match(self, number: str, negative: bool) -> float | None:
        infinity = self.get_symbol(NumberSymbol.INFINITY)
        if infinity and number == infinity:
            return -math.inf if negative else math.inf

        group = self.get_symbol(NumberSymbol.GROUPING_SEPARATOR)
        if group in SPACE_CHARS:
            normalized = "".join(ch for ch in number if ch not in SPACE_CHARS)
        else:
            normalized = number.replace(group, "") if group else number

        # Babel parses with the locale's own separator, not an override
        decimal_symbol = self.get_symbol(NumberSymbol.DECIMAL_SEPARATOR)
        locale_decimal = str(babel_numbers.get_decimal_symbol(self._locale))
        if decimal_symbol and decimal_symbol != locale_decimal:
            normalized = normalized.replace(decimal_symbol, locale_decimal)

        try:
            parsed = babel_numbers.parse_decimal(normalized, locale=self._locale)
        except (babel_numbers.NumberFormatError, InvalidOperation, ValueError) as e:
            logger.debug("Amount %r rejected by Babel: %s", number, e)
            return None
        amount = float(parsed)
        return -amount if negative else amount

    def _number_regex(self) -> str:
        digits = r"\d"
        group = self.get_symbol(NumberSymbol.GROUPING_SEPARATOR)
        decimal_symbol = self.get_symbol(NumberSymbol.DECIMAL_SEPARATOR)

        if group in SPACE_CHARS:
            group_class = _SPACE_CLASS
        elif group:
            group_class = re.escape(group)
        else:
            group_class = ""

        integer = rf"{digits}(?:{digits}|{group_class})*" if group_class else rf"{digits}+"
        if decimal_symbol:
            number = rf"{integer}(?:{re.escape(decimal_symbol)}{digits}*)?"
        else:
            number = integer

        infinity = self.get_symbol(NumberSymbol.INFINITY)
        if infinity:
            number = f"{number}|{re.escape(infinity)}"
        return f"(?P<number>{number})"

    def _currency_slot_regex(self) -> str:
        code = self.currency_code
        forms = {
            self.get_symbol(NumberSymbol.CURRENCY_SYMBOL),
            code,
            str(babel_numbers.get_currency_name(code, locale=self._locale)),
            str(babel_numbers.get_currency_name(code, count=2, locale=self._locale)),
        }
        alternatives = sorted((f for f in forms if f), key=len, reverse=True)
        return "(?:" + "|".join(re.escape(f) for f in alternatives) + ")"

    def _affix_regex(self, affix: str, *, currency_slot: bool) -> str:
        minus = self.get_symbol(NumberSymbol.MINUS_SIGN)
        minus_class = "[" + re.escape("-" + minus) + "]" if minus and minus != "-" else "-"

        parts: list[str] = []
        for segment in _PLACEHOLDER_RUN.split(_strip_quotes(affix)):
            if not segment:
                continue
            if segment.startswith(CURRENCY_PLACEHOLDER):
                if currency_slot:
                    parts.append(self._currency_slot_regex())
                continue
            for ch in segment:
                if ch in SPACE_CHARS:
                    parts.append(_SPACE_CLASS)
                elif ch == "-":
                    parts.append(minus_class)
                else:
                    parts.append(re.escape(ch))
        return "".join(parts)

    def _affixed_number_regex(self, negative: bool, *, currency_slot: bool) -> re.Pattern[str]:
        index = 1 if negative else 0
        prefix = self._affix_regex(self._number_pattern.prefix[index], currency_slot=currency_slot)
        suffix = self._affix_regex(self._number_pattern.suffix[index], currency_slot=currency_slot)
        return re.compile(f"{prefix}{self._number_regex()}{suffix}", re.IGNORECASE)
