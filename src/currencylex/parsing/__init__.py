"""Currency text parsing.

Strict and fallback parse paths over a SymbolTable derived from Babel's
CLDR data. Rejections are values (Unchanged), never exceptions.

Python 3.12+.
"""

from .currency_symbols import CurrencySymbolResolver
from .engine import ParseEngine, normalize_spaces
from .fallback import FallbackParser
from .outcome import FormatOutcome, Formatted, ParseOutcome, Parsed, Unchanged
from .regex_components import RegexComponents
from .rules import CurrencyPresenceValidator, ScaleValidator
from .strict import StrictParser
from .symbols import SymbolTable

__all__ = [
    "CurrencyPresenceValidator",
    "CurrencySymbolResolver",
    "FallbackParser",
    "FormatOutcome",
    "Formatted",
    "ParseEngine",
    "ParseOutcome",
    "Parsed",
    "RegexComponents",
    "ScaleValidator",
    "StrictParser",
    "SymbolTable",
    "Unchanged",
    "normalize_spaces",
]
