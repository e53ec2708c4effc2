"""Tests for locale_utils: normalization, caching, system locale, fallback chains.

Python 3.12+.
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest
from babel import Locale, UnknownLocaleError
from hypothesis import event, given
from hypothesis import strategies as st

from currencylex.constants import DEFAULT_LOCALE_FALLBACK, MAX_LOCALE_CHAIN_DEPTH, ROOT_LOCALE
from currencylex.locale_utils import (
    clear_locale_cache,
    default_currency_for_locale,
    get_babel_locale,
    get_system_locale,
    locale_fallback_chain,
    normalize_locale,
    parent_locale,
)
from tests.strategies import LOCALE_DEFAULT_CURRENCIES


class TestNormalizeLocale:
    """Test normalize_locale function."""

    def test_bcp47_to_posix(self) -> None:
        """BCP-47 hyphens become underscores."""
        assert normalize_locale("en-US") == "en_US"

    def test_already_normalized(self) -> None:
        assert normalize_locale("it_IT") == "it_IT"

    def test_encoding_suffix_dropped(self) -> None:
        """POSIX encoding suffixes from LANG are removed."""
        assert normalize_locale("de_DE.UTF-8") == "de_DE"

    def test_modifier_dropped(self) -> None:
        assert normalize_locale("fr_FR@euro") == "fr_FR"

    def test_surrounding_whitespace_stripped(self) -> None:
        assert normalize_locale("  en_GB ") == "en_GB"

    def test_multiple_hyphens(self) -> None:
        assert normalize_locale("zh-Hans-CN") == "zh_Hans_CN"

    @given(
        language=st.from_regex(r"[a-z]{2,3}", fullmatch=True),
        territory=st.from_regex(r"[A-Z]{2}", fullmatch=True),
    )
    def test_hyphen_and_underscore_forms_agree(self, language: str, territory: str) -> None:
        """Both separator forms normalize to the same identifier."""
        event("locale_form=bcp47_vs_posix")
        assert normalize_locale(f"{language}-{territory}") == normalize_locale(
            f"{language}_{territory}"
        )


class TestGetBabelLocale:
    """Test get_babel_locale caching and parsing."""

    def test_returns_babel_locale(self) -> None:
        locale = get_babel_locale("it-IT")
        assert isinstance(locale, Locale)
        assert locale.language == "it"
        assert locale.territory == "IT"

    def test_cached_instance_reused(self) -> None:
        """The same Locale object is returned for repeated lookups."""
        assert get_babel_locale("en_GB") is get_babel_locale("en_GB")

    def test_unknown_locale_raises(self) -> None:
        with pytest.raises(UnknownLocaleError):
            get_babel_locale("xx_XX")

    @pytest.mark.usefixtures("fresh_locale_cache")
    def test_clear_locale_cache(self) -> None:
        """clear_locale_cache() empties the LRU cache."""
        get_babel_locale("en_US")
        assert get_babel_locale.cache_info().currsize > 0
        clear_locale_cache()
        assert get_babel_locale.cache_info().currsize == 0


class TestGetSystemLocale:
    """Test get_system_locale detection order and fallback."""

    def test_os_locale_preferred(self) -> None:
        with patch("locale.getlocale", return_value=("it_IT", "UTF-8")):
            assert get_system_locale() == "it_IT"

    def test_environment_used_when_os_locale_is_c(self) -> None:
        with (
            patch("locale.getlocale", return_value=("C", None)),
            patch.dict(os.environ, {"LC_ALL": "de_DE.UTF-8"}, clear=True),
        ):
            assert get_system_locale() == "de_DE"

    def test_lang_used_last(self) -> None:
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, {"LANG": "en_GB.UTF-8"}, clear=True),
        ):
            assert get_system_locale() == "en_GB"

    def test_fallback_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        """Without any locale information, en_US is returned with a warning."""
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, {}, clear=True),
        ):
            assert get_system_locale() == DEFAULT_LOCALE_FALLBACK
        assert "falling back" in caplog.text

    def test_raise_on_failure(self) -> None:
        with (
            patch("locale.getlocale", return_value=(None, None)),
            patch.dict(os.environ, {"LANG": "C"}, clear=True),
            pytest.raises(RuntimeError, match="Could not determine system locale"),
        ):
            get_system_locale(raise_on_failure=True)

    def test_getlocale_error_falls_through(self) -> None:
        with (
            patch("locale.getlocale", side_effect=ValueError("unknown locale")),
            patch.dict(os.environ, {"LC_MESSAGES": "pt_BR"}, clear=True),
        ):
            assert get_system_locale() == "pt_BR"


class TestParentLocale:
    """Test CLDR parent resolution."""

    def test_territory_stripped(self) -> None:
        assert parent_locale("it_IT") == "it"

    def test_language_parent_is_root(self) -> None:
        assert parent_locale("it") == ROOT_LOCALE

    def test_root_has_no_parent(self) -> None:
        assert parent_locale(ROOT_LOCALE) is None

    def test_parent_exception_honored(self) -> None:
        """CLDR parent exceptions override subtag stripping."""
        assert parent_locale("es_MX") == "es_419"

    def test_bcp47_input(self) -> None:
        assert parent_locale("pt-BR") == "pt"

    @pytest.mark.parametrize("locale_code", ["az_Arab", "kk_Arab", "mn_Mong", "sr_Latn"])
    def test_non_likely_script_parent_is_root(self, locale_code: str) -> None:
        """A language_Script locale outside the likely script skips its language."""
        assert parent_locale(locale_code) == ROOT_LOCALE

    def test_likely_script_parent_is_language(self) -> None:
        assert parent_locale("az_Latn") == "az"

    def test_script_with_territory_strips_territory(self) -> None:
        assert parent_locale("mn_Mong_MN") == "mn_Mong"


class TestLocaleFallbackChain:
    """Test the bounded locale fallback chain."""

    def test_language_territory(self) -> None:
        assert locale_fallback_chain("it_IT") == ("it_IT", "it", ROOT_LOCALE)

    def test_parent_exception_chain(self) -> None:
        assert locale_fallback_chain("es_MX") == ("es_MX", "es_419", "es", ROOT_LOCALE)

    def test_root_chain(self) -> None:
        assert locale_fallback_chain(ROOT_LOCALE) == (ROOT_LOCALE,)

    @pytest.mark.parametrize(
        ("locale_code", "expected"),
        [
            ("zh-Hant-TW", ("zh_Hant_TW", "zh_Hant", ROOT_LOCALE)),
            ("az_Arab", ("az_Arab", ROOT_LOCALE)),
            ("kk_Arab", ("kk_Arab", ROOT_LOCALE)),
            ("mn_Mong_MN", ("mn_Mong_MN", "mn_Mong", ROOT_LOCALE)),
            ("az_Latn_AZ", ("az_Latn_AZ", "az_Latn", "az", ROOT_LOCALE)),
        ],
    )
    def test_script_subtags(self, locale_code: str, expected: tuple[str, ...]) -> None:
        assert locale_fallback_chain(locale_code) == expected

    @given(
        locale_code=st.from_regex(r"[a-z]{2,3}(_[A-Za-z0-9]{2,8}){0,12}", fullmatch=True),
    )
    def test_chain_bounded_and_rooted(self, locale_code: str) -> None:
        """Every chain ends in root and never exceeds the depth bound."""
        chain = locale_fallback_chain(locale_code)
        event(f"chain_length={len(chain)}")
        assert chain[-1] == ROOT_LOCALE
        assert len(chain) <= MAX_LOCALE_CHAIN_DEPTH + 1
        assert len(set(chain)) == len(chain)


class TestDefaultCurrencyForLocale:
    """Test territory-based default currency resolution."""

    @pytest.mark.parametrize(("locale_code", "expected"), LOCALE_DEFAULT_CURRENCIES)
    def test_territory_currency(self, locale_code: str, expected: str) -> None:
        assert default_currency_for_locale(get_babel_locale(locale_code)) == expected

    def test_language_only_uses_likely_territory(self) -> None:
        """A bare language resolves through CLDR likely subtags."""
        assert default_currency_for_locale(get_babel_locale("it")) == "EUR"
        assert default_currency_for_locale(get_babel_locale("ja")) == "JPY"
