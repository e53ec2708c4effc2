"""Currency filters: float to currency text and back.

Python 3.12+.
"""

from .base import FilterState, LocaleAwareFilter, Ready, Uninitialized
from .currency import CurrencyFilter
from .uncurrency import UncurrencyFilter

__all__ = [
    "CurrencyFilter",
    "FilterState",
    "LocaleAwareFilter",
    "Ready",
    "Uninitialized",
    "UncurrencyFilter",
]
