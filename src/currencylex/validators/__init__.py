"""Validators for currency strings and scientific notation.

Python 3.12+.
"""

from .currency import CurrencyValidator
from .scientific import ScientificNotationValidator

__all__ = ["CurrencyValidator", "ScientificNotationValidator"]
