"""Quickstart example for currencylex.

This example shows formatting floats as currency text, parsing it back, and
how the two strictness flags change what the parser accepts.

Note: Filters never raise on bad input; rejected values come back unchanged.
Use evaluate() or a validator when the reason matters.
"""

from currencylex import (
    CurrencyFilter,
    CurrencyOptions,
    CurrencyValidator,
    ScientificNotationValidator,
    UncurrencyFilter,
    ValidationOptions,
    filter_to_currency,
    filter_to_number,
)

# Example 1: Format and parse
print("=" * 50)
print("Example 1: Format and Parse")
print("=" * 50)

options = CurrencyOptions(locale="it_IT", currency_code="EUR")
currency = CurrencyFilter(options)
uncurrency = UncurrencyFilter(options)

text = currency.filter(1234.61)
print(repr(text))
# Output: '1.234,61\xa0€'

print(uncurrency.filter(text))
# Output: 1234.61

# Example 2: Scale correctness
print("\n" + "=" * 50)
print("Example 2: Scale Correctness")
print("=" * 50)

print(repr(currency.filter(0.123)))
# Output: 0.123 (would be rounded, so left unchanged)

gbp = {"locale": "en_GB", "currency_code": "GBP"}
print(repr(filter_to_number("£11.333", gbp)))
# Output: '£11.333'

print(repr(filter_to_number("£11.33", gbp)))
# Output: 11.33

# Example 3: Currency correctness
print("\n" + "=" * 50)
print("Example 3: Currency Correctness")
print("=" * 50)

print(repr(uncurrency.filter("11,33")))
# Output: '11,33' (symbol required)

relaxed = CurrencyOptions(locale="it_IT", currency_code="EUR", currency_correctness=False)
print(repr(UncurrencyFilter(relaxed).filter("11,33")))
# Output: 11.33

# Example 4: Why was it rejected?
print("\n" + "=" * 50)
print("Example 4: Rejection Reasons")
print("=" * 50)

outcome = uncurrency.evaluate("€ 11,33")
print(outcome.reason)
print(outcome.diagnostic.message)

# Example 5: Validators
print("\n" + "=" * 50)
print("Example 5: Validators")
print("=" * 50)

validator = CurrencyValidator(
    ValidationOptions(locale="en_GB", currency_code="GBP", negative_allowed=False)
)
for value in ("£11.33", "-£11.33", "11.33 GBP", 11.33):
    print(f"{value!r}: {validator.is_valid(value)} {validator.messages}")

scientific = ScientificNotationValidator("en_US")
for value in ("1.5E3", "1,234.5e-2", "1500"):
    print(f"{value!r}: {scientific.is_valid(value)}")

# Example 6: Accounting format
print("\n" + "=" * 50)
print("Example 6: Accounting Format")
print("=" * 50)

accounting = {"locale": "en_US", "formatType": "accounting"}
print(filter_to_currency(-1234.5, accounting))
# Output: ($1,234.50)
