"""Tests for language handling."""

import pytest

from techstore.catalog.i18n import NAME_PLACEHOLDER, ActiveLanguage, resolve_name
from techstore.domain.exceptions import UnsupportedLanguageError


class TestResolveName:
    """Tests for display name resolution."""

    def test_active_language(self, make_product) -> None:
        product = make_product(name={"uk": "Навушники", "en": "Headphones"})
        assert resolve_name(product, "en") == "Headphones"
        assert resolve_name(product, "uk") == "Навушники"

    def test_falls_back_to_default_language(self, make_product) -> None:
        """A missing translation falls back to Ukrainian."""
        product = make_product(name={"uk": "Навушники"})
        assert resolve_name(product, "ru") == "Навушники"

    def test_empty_translation_counts_as_missing(self, make_product) -> None:
        product = make_product(name={"uk": "Навушники", "en": ""})
        assert resolve_name(product, "en") == "Навушники"

    def test_custom_fallback_chain(self, make_product) -> None:
        """Fallbacks are tried in order."""
        product = make_product(name={"en": "Headphones", "ru": "Наушники"})
        assert resolve_name(product, "uk", fallbacks=("ru", "en")) == "Наушники"

    def test_placeholder_when_nothing_available(self, make_product) -> None:
        product = make_product(name={})
        assert resolve_name(product, "en") == NAME_PLACEHOLDER
        assert resolve_name(product, "en", placeholder="Product") == "Product"


class TestActiveLanguage:
    """Tests for the in-memory language provider."""

    def test_default_language(self) -> None:
        assert ActiveLanguage().current_language() == "uk"

    def test_set_language_notifies(self) -> None:
        language = ActiveLanguage()
        seen: list[str] = []
        language.subscribe(seen.append)

        language.set_language("en")

        assert language.current_language() == "en"
        assert seen == ["en"]

    def test_same_language_does_not_notify(self) -> None:
        """Re-selecting the active language is not a change."""
        language = ActiveLanguage("en")
        seen: list[str] = []
        language.subscribe(seen.append)

        language.set_language("en")

        assert seen == []

    def test_unsupported_language_rejected(self) -> None:
        """Unknown codes raise and keep the current language."""
        language = ActiveLanguage()
        with pytest.raises(UnsupportedLanguageError) as exc_info:
            language.set_language("de")

        assert exc_info.value.details["language"] == "de"
        assert language.current_language() == "uk"

    def test_unsupported_initial_language(self) -> None:
        with pytest.raises(UnsupportedLanguageError):
            ActiveLanguage("pl")

    def test_custom_supported_languages(self) -> None:
        language = ActiveLanguage("en", supported=["en", "de"])
        language.set_language("de")
        assert language.supported == ("en", "de")
        assert language.current_language() == "de"

    def test_unsubscribe(self) -> None:
        language = ActiveLanguage()
        seen: list[str] = []
        unsubscribe = language.subscribe(seen.append)

        unsubscribe()
        unsubscribe()
        language.set_language("ru")

        assert seen == []
