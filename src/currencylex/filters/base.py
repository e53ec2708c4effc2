"""Shared state management for locale-aware currency filters.

Each filter owns a formatting handle and the SymbolTable derived from it.
Both are built lazily into an explicit state:

    Uninitialized --(first use)--> Ready(formatter, symbols, engine, ...)
    Ready --(any setter / refresh())--> Uninitialized

Builds and invalidations happen under the filter's RLock, so a caller never
observes a state mixing old and new configuration.

Python 3.12+.
"""

from __future__ import annotations

import dataclasses
import logging
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from currencylex.enums import TextAttribute
from currencylex.locale_utils import get_system_locale
from currencylex.parsing import (
    CurrencySymbolResolver,
    ParseEngine,
    RegexComponents,
    SymbolTable,
)
from currencylex.runtime import CurrencyOptions, NumberFormatter

if TYPE_CHECKING:
    from collections.abc import Mapping
    from typing import Any

    from currencylex.parsing import FormatOutcome, ParseOutcome

__all__ = ["FilterState", "LocaleAwareFilter", "Ready", "Uninitialized"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Uninitialized:
    """No handle or SymbolTable built yet."""


@dataclass(frozen=True, slots=True)
class Ready:
    """Handle, resolved currency and derived parse machinery.

    Attributes:
        locale_code: Locale the state was built for
        formatter: Currency-style handle
        currency_code: Resolved ISO 4217 code
        symbols: SymbolTable for (locale_code, currency_code)
        components: Regex components used by the fallback path
        engine: Parse state machine
    """

    locale_code: str
    formatter: NumberFormatter
    currency_code: str
    symbols: SymbolTable
    components: RegexComponents
    engine: ParseEngine


FilterState: TypeAlias = Uninitialized | Ready


class LocaleAwareFilter(ABC):
    """Base class for CurrencyFilter and UncurrencyFilter.

    Args:
        options: CurrencyOptions, a plain mapping of options, or None for
            defaults
        formatter: Custom handle; the filter adopts its locale
        ascii_digits: Restrict fallback-mode digits to 0-9

    Raises:
        InvalidOptionError: If options are invalid
    """

    def __init__(
        self,
        options: CurrencyOptions | Mapping[str, Any] | None = None,
        *,
        formatter: NumberFormatter | None = None,
        ascii_digits: bool = False,
    ) -> None:
        self._lock = threading.RLock()
        self._options = self._coerce_options(options)
        self._components = RegexComponents.detect(ascii_only=ascii_digits)
        self._resolver = CurrencySymbolResolver()
        self._custom_formatter: NumberFormatter | None = None
        self._state: FilterState = Uninitialized()
        if formatter is not None:
            self.set_formatter(formatter)

    @staticmethod
    def _coerce_options(options: CurrencyOptions | Mapping[str, Any] | None) -> CurrencyOptions:
        if options is None:
            return CurrencyOptions()
        if isinstance(options, CurrencyOptions):
            return options
        return CurrencyOptions.from_mapping(options)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> FilterState:
        """Current state (Uninitialized until first use)."""
        return self._state

    def refresh(self) -> None:
        """Drop the built state; it is rebuilt on next use."""
        with self._lock:
            self._state = Uninitialized()

    def _ready(self) -> Ready:
        """Return the Ready state, building it if needed.

        Raises:
            LocaleConfigurationError: If the locale is unknown or malformed
        """
        with self._lock:
            state = self._state
            if isinstance(state, Ready):
                return state

            options = self._options
            locale_code = self.get_locale()
            formatter = self._custom_formatter or NumberFormatter.create(
                locale_code, options.format_type.style
            )
            if options.currency_code is not None:
                formatter.set_text_attribute(TextAttribute.CURRENCY_CODE, options.currency_code)

            symbols = SymbolTable.from_formatter(formatter, self._resolver)
            engine = ParseEngine.create(
                formatter,
                symbols,
                self._components,
                scale_correctness=options.scale_correctness,
                currency_correctness=options.currency_correctness,
            )
            ready = Ready(
                locale_code=locale_code,
                formatter=formatter,
                currency_code=formatter.currency_code,
                symbols=symbols,
                components=self._components,
                engine=engine,
            )
            self._state = ready
            logger.debug(
                "%s ready for %s/%s", type(self).__name__, locale_code, ready.currency_code
            )
            return ready

    # ------------------------------------------------------------------
    # Options
    # ------------------------------------------------------------------

    @property
    def options(self) -> CurrencyOptions:
        """Current options."""
        return self._options

    def set_options(self, options: CurrencyOptions | Mapping[str, Any]) -> None:
        """Replace all options; drops a custom handle if the locale changes."""
        coerced = self._coerce_options(options)
        with self._lock:
            if coerced.locale != self._options.locale:
                self._custom_formatter = None
            self._options = coerced
            self.refresh()

    def _update(self, **changes: Any) -> None:
        with self._lock:
            self._options = dataclasses.replace(self._options, **changes)
            self.refresh()

    def get_locale(self) -> str:
        """Configured locale, or the platform locale when none is set."""
        return self._options.locale or get_system_locale()

    def set_locale(self, locale: str | None) -> None:
        """Set the locale (None: platform locale); drops a custom handle."""
        with self._lock:
            self._custom_formatter = None
            self._update(locale=locale)

    def get_currency_code(self) -> str:
        """Configured currency, or the locale's currency once resolved.

        Raises:
            LocaleConfigurationError: If resolving requires an invalid locale
        """
        if self._options.currency_code is not None:
            return self._options.currency_code
        return self._ready().currency_code

    def set_currency_code(self, currency_code: str | None) -> None:
        """Set the ISO 4217 code (None: the locale's currency)."""
        self._update(currency_code=currency_code)

    def get_scale_correctness(self) -> bool:
        return self._options.scale_correctness

    def set_scale_correctness(self, scale_correctness: bool) -> None:
        self._update(scale_correctness=scale_correctness)

    def get_currency_correctness(self) -> bool:
        return self._options.currency_correctness

    def set_currency_correctness(self, currency_correctness: bool) -> None:
        self._update(currency_correctness=currency_correctness)

    # ------------------------------------------------------------------
    # Handle and derived data
    # ------------------------------------------------------------------

    def get_formatter(self) -> NumberFormatter:
        """Formatting handle, created on first use."""
        return self._ready().formatter

    def set_formatter(self, formatter: NumberFormatter) -> None:
        """Use a custom handle and adopt its locale."""
        with self._lock:
            self._custom_formatter = formatter
            self._update(locale=formatter.locale_code)

    def get_symbol_table(self) -> SymbolTable:
        """SymbolTable for the current locale and currency."""
        return self._ready().symbols

    def get_regex_components(self) -> RegexComponents:
        """Regex components used by the fallback path."""
        return self._components

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------

    @abstractmethod
    def evaluate(self, value: object) -> FormatOutcome | ParseOutcome:
        """Filter value, reporting why it was left unchanged."""

    @abstractmethod
    def filter(self, value: object) -> object:
        """Filter value; returns it unchanged on any rejection."""

    def __call__(self, value: object) -> object:
        return self.filter(value)
