"""Tagged outcomes of parsing and formatting.

Filters expose only "result or original input"; evaluate() returns these
richer outcomes so validators can report why a value was rejected.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from currencylex.diagnostics import Diagnostic
    from currencylex.enums import ParsePath, RejectionReason

__all__ = [
    "FormatOutcome",
    "Formatted",
    "ParseOutcome",
    "Parsed",
    "Unchanged",
]


@dataclass(frozen=True, slots=True)
class Parsed:
    """Text accepted as an amount.

    Attributes:
        value: Parsed amount (may be NaN or +/-inf)
        path: Parse path that accepted the text
    """

    value: float
    path: ParsePath


@dataclass(frozen=True, slots=True)
class Formatted:
    """Amount rendered as currency text."""

    text: str


@dataclass(frozen=True, slots=True)
class Unchanged:
    """Input rejected; filters return it as is.

    Attributes:
        original: The input exactly as received
        reason: Why the input was rejected
        diagnostic: Structured details for logs and validators
    """

    original: object
    reason: RejectionReason
    diagnostic: Diagnostic | None = None


ParseOutcome: TypeAlias = Parsed | Unchanged
FormatOutcome: TypeAlias = Formatted | Unchanged
