"""
Language — translations for a single locale.

A Language is built once (usually by the file loader) and never modified
afterwards, so it can be shared between threads without locking.
"""

from collections.abc import Mapping
from types import MappingProxyType


class Language:
    """Holds all translations for a specific locale.

    Attributes:
        locale: Language code, e.g. "en_US"
        name: Display name, e.g. "English (US)"
        translations: Read-only view of the key → text mapping

    Example:
        >>> lang = Language("en_US", "English (US)", {"greet.hello": "Hi {name}"})
        >>> lang.locale
        'en_US'
    """

    __slots__ = ("_locale", "_name", "_translations")

    def __init__(self, locale: str, name: str, translations: Mapping[str, str]) -> None:
        self._locale = locale
        self._name = name
        self._translations: Mapping[str, str] = MappingProxyType(
            {str(key): str(text) for key, text in translations.items()}
        )

    @property
    def locale(self) -> str:
        """Language code, e.g. "en_US"."""
        return self._locale

    @property
    def name(self) -> str:
        """Display name of the language, e.g. "English (US)"."""
        return self._name

    @property
    def translations(self) -> Mapping[str, str]:
        """Read-only key → text mapping."""
        return self._translations

    def _translation(self, key: str) -> tuple[str, bool]:
        """Look up a translation key.

        Returns:
            Tuple (text, found). A missing key yields ("", False).
        """
        text = self._translations.get(key)
        if text is None:
            return "", False
        return text, True

    def __contains__(self, key: object) -> bool:
        return key in self._translations

    def __len__(self) -> int:
        return len(self._translations)

    def __repr__(self) -> str:
        return f"<Language({self._locale!r}, {self._name!r}, {len(self)} keys)>"
