"""Character-class fragments for fallback-mode patterns.

Python's re module matches Unicode decimal digits with \\d on str patterns,
so Unicode mode is the default; ASCII mode restricts digits to 0-9.

Python 3.12+. Zero external dependencies.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

__all__ = ["RegexComponents"]


@dataclass(frozen=True, slots=True)
class RegexComponents:
    """Digit class and flags used to build fallback-mode patterns.

    Attributes:
        digits: Digit class body, usable inside [...] (e.g., "\\d" or "0-9")
        flags: re flags applied to every pattern built from these components
    """

    digits: str = r"\d"
    flags: re.RegexFlag = re.UNICODE

    @classmethod
    def detect(cls, *, ascii_only: bool = False) -> RegexComponents:
        """Components for Unicode digits, or ASCII digits when requested."""
        if ascii_only:
            return cls(digits="0-9", flags=re.ASCII)
        return cls()

    @property
    def digit_class(self) -> str:
        """Digit class as a standalone pattern (e.g., "[\\d]")."""
        return f"[{self.digits}]"

    def allowed_characters(self, symbols: Iterable[str]) -> re.Pattern[str]:
        """Pattern matching strings made only of digits and symbol characters.

        Multi-character symbols contribute each of their characters.
        """
        body = self.digits + "".join(re.escape(symbol) for symbol in symbols)
        return re.compile(f"[{body}]+", self.flags)

    def disallowed_characters(self, symbols: Iterable[str]) -> re.Pattern[str]:
        """Pattern matching any single character outside the allowed set."""
        body = self.digits + "".join(re.escape(symbol) for symbol in symbols)
        return re.compile(f"[^{body}]", self.flags)

    def count_digits(self, text: str) -> int:
        """Count digit characters in text."""
        return len(re.findall(self.digit_class, text, self.flags))
