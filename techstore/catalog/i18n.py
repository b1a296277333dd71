"""Language handling for catalog queries.

Product names are stored per language. Text search and name sorting read
the name in the active language and walk an explicit fallback chain when
that translation is missing.
"""

from collections.abc import Callable, Sequence
from typing import Protocol

import structlog

from techstore.catalog.models import Product
from techstore.domain.exceptions import UnsupportedLanguageError

logger = structlog.get_logger()

DEFAULT_LANGUAGE = "uk"
SUPPORTED_LANGUAGES = ("uk", "en", "ru")
DEFAULT_FALLBACKS: tuple[str, ...] = (DEFAULT_LANGUAGE,)
NAME_PLACEHOLDER = "Продукт"

LanguageListener = Callable[[str], None]


def resolve_name(
    product: Product,
    language: str,
    fallbacks: Sequence[str] = DEFAULT_FALLBACKS,
    placeholder: str = NAME_PLACEHOLDER,
) -> str:
    """Resolve the display name of a product.

    Tries ``language`` first, then each of ``fallbacks`` in order. Empty
    translations count as missing.

    Args:
        product: Product to name.
        language: Active language code.
        fallbacks: Ordered fallback language codes.
        placeholder: Returned when no translation is available.

    Returns:
        Display name.
    """
    for code in (language, *fallbacks):
        name = product.name.get(code)
        if name:
            return name
    return placeholder


class LanguageProvider(Protocol):
    """Source of the active language for a catalog session."""

    def current_language(self) -> str:
        """Return the active language code."""
        ...

    def subscribe(self, listener: LanguageListener) -> Callable[[], None]:
        """Register a language-change listener.

        Returns:
            Callable that removes the listener.
        """
        ...


class ActiveLanguage:
    """In-memory language provider with change notifications.

    Example usage:
        language = ActiveLanguage()
        unsubscribe = language.subscribe(lambda code: print(code))
        language.set_language("en")
    """

    def __init__(
        self,
        language: str = DEFAULT_LANGUAGE,
        supported: Sequence[str] = SUPPORTED_LANGUAGES,
    ) -> None:
        """Initialize provider.

        Args:
            language: Initial language code.
            supported: Language codes accepted by ``set_language``.

        Raises:
            UnsupportedLanguageError: If the initial language is not supported.
        """
        self._supported = tuple(supported)
        self._check(language)
        self._language = language
        self._listeners: list[LanguageListener] = []

    @property
    def supported(self) -> tuple[str, ...]:
        """Supported language codes."""
        return self._supported

    def current_language(self) -> str:
        """Return the active language code."""
        return self._language

    def set_language(self, language: str) -> None:
        """Switch the active language and notify listeners.

        Listeners are not called when the language does not change.

        Args:
            language: New language code.

        Raises:
            UnsupportedLanguageError: If the language is not supported.
        """
        self._check(language)
        if language == self._language:
            return

        self._language = language
        logger.info("Language changed", language=language)

        for listener in list(self._listeners):
            listener(language)

    def subscribe(self, listener: LanguageListener) -> Callable[[], None]:
        """Register a language-change listener.

        Args:
            listener: Called with the new language code.

        Returns:
            Callable that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _check(self, language: str) -> None:
        if language not in self._supported:
            raise UnsupportedLanguageError(language, list(self._supported))
