"""Runtime package: formatting handle and typed options.

Python 3.12+.
"""

from .number_formatter import CurrencyParseResult, NumberFormatter, decimal_context
from .options import CurrencyOptions, ValidationOptions

__all__ = [
    "CurrencyOptions",
    "CurrencyParseResult",
    "NumberFormatter",
    "ValidationOptions",
    "decimal_context",
]
