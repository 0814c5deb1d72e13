"""
Manager — registry of languages and translation resolution.

A plugin creates one Manager at startup, registers the languages it loaded
and then calls translate() from any thread. Resolution order:
caller's language → default language → raw key.
"""

from collections.abc import Iterable, Mapping
from typing import Any, Protocol

import structlog

from ..errors import InvalidLanguageError, LanguageNotFoundError
from .language import Language
from .placeholders import substitute
from .player import Player
from .rwlock import ReadWriteLock


class DiagnosticSink(Protocol):
    """Leveled structured logger (the structlog BoundLogger interface)."""

    def debug(self, event: str, **kw: Any) -> Any: ...

    def info(self, event: str, **kw: Any) -> Any: ...

    def warning(self, event: str, **kw: Any) -> Any: ...

    def error(self, event: str, **kw: Any) -> Any: ...


class Manager:
    """Thread-safe collection of languages for a plugin or server.

    Registration and default selection take the lock exclusively; lookups,
    enumeration and translation share it, so many players can be served in
    parallel and never see a half-applied registration.

    Usage:
        manager = Manager()
        manager.register(Language("en_US", "English (US)", {"greet.hello": "Hi {name}"}))
        manager.translate(player, "greet.hello", {"{name}": "Alex"})
    """

    def __init__(self, logger: DiagnosticSink | None = None) -> None:
        """Create an empty manager.

        Args:
            logger: Sink for diagnostics. Defaults to the "bedrock_lang"
                structlog logger.
        """
        self._lock = ReadWriteLock()
        self._languages: dict[str, Language] = {}
        self._default: Language | None = None
        self._log: DiagnosticSink = logger if logger is not None else structlog.get_logger("bedrock_lang")

    # ── Registration ────────────────────────────────────────────────────

    def register(self, language: Language) -> None:
        """Add a language, replacing any language with the same locale.

        The first language ever registered becomes the default. Replacing
        the current default's locale makes the new object the default.

        Args:
            language: Language to register

        Raises:
            InvalidLanguageError: If language is None or its locale is empty
        """
        if not isinstance(language, Language) or not language.locale:
            raise InvalidLanguageError("language and its locale cannot be None or empty")

        with self._lock.write_locked():
            locale = language.locale
            self._languages[locale] = language

            if self._default is None:
                self._default = language
                self._log.info("default_language_set_automatically", locale=locale)
            elif self._default.locale == locale and self._default is not language:
                self._default = language
                self._log.info("default_language_replaced", locale=locale)

    def register_all(self, languages: Iterable[Language]) -> None:
        """Register several languages in order.

        Raises:
            InvalidLanguageError: On the first invalid language; the ones
                before it stay registered.
        """
        for language in languages:
            self.register(language)

    def set_default(self, locale: str) -> None:
        """Choose the fallback language. It must already be registered.

        Raises:
            LanguageNotFoundError: If no language is registered for locale
        """
        with self._lock.write_locked():
            language = self._languages.get(locale)
            if language is None:
                raise LanguageNotFoundError(locale, list(self._languages))
            self._default = language

    # ── Lookup ──────────────────────────────────────────────────────────

    def language(self, locale: str) -> Language | None:
        """Return the registered language for locale, or None."""
        with self._lock.read_locked():
            return self._languages.get(locale)

    def languages(self) -> list[Language]:
        """Return a snapshot of all registered languages, sorted by locale."""
        with self._lock.read_locked():
            return sorted(self._languages.values(), key=lambda lang: lang.locale)

    def locales(self) -> list[str]:
        """Return the sorted list of registered locale codes."""
        with self._lock.read_locked():
            return sorted(self._languages)

    @property
    def default(self) -> Language | None:
        """Current default language, or None if nothing is registered."""
        with self._lock.read_locked():
            return self._default

    # ── Translation ─────────────────────────────────────────────────────

    def translate(
        self,
        player: Player,
        key: str,
        placeholders: Mapping[str, object] | None = None,
    ) -> str:
        """Translate key into the player's language.

        Falls back to the default language when the player's locale is not
        registered or lacks the key. Never raises: when no translation is
        available the key itself is returned and a log line is emitted.

        Args:
            player: Any object with a ``locale`` attribute
            key: Translation key, e.g. "greet.hello"
            placeholders: Tokens to replace in the text, e.g. {"{name}": "Alex"}

        Returns:
            Translated text, or key if it could not be resolved.
        """
        try:
            locale = player.locale
        except Exception as e:
            self._log.debug("player_locale_unavailable", key=key, error=str(e))
            locale = None
        if not isinstance(locale, str):
            locale = None
        return self._resolve(locale, key, placeholders)

    def translate_locale(
        self,
        locale: str,
        key: str,
        placeholders: Mapping[str, object] | None = None,
    ) -> str:
        """Translate key for a bare locale code. Same rules as translate()."""
        return self._resolve(locale if isinstance(locale, str) else None, key, placeholders)

    def _resolve(
        self,
        locale: str | None,
        key: str,
        placeholders: Mapping[str, object] | None,
    ) -> str:
        with self._lock.read_locked():
            if self._default is None:
                self._log.error("translation_failed_no_default_language", key=key)
                return key

            text, found = "", False
            player_lang = self._languages.get(locale) if locale is not None else None
            if player_lang is not None:
                text, found = player_lang._translation(key)

            if not found:
                text, found = self._default._translation(key)

            if not found:
                self._log.warning(
                    "translation_key_not_found",
                    key=key,
                    fallback_locale=self._default.locale,
                )
                return key

        if placeholders:
            return substitute(text, placeholders)
        return text

    # ── Dunder ──────────────────────────────────────────────────────────

    def __contains__(self, locale: object) -> bool:
        with self._lock.read_locked():
            return locale in self._languages

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._languages)

    def __repr__(self) -> str:
        with self._lock.read_locked():
            count = len(self._languages)
            default = self._default.locale if self._default is not None else None
        return f"<Manager({count} languages, default={default!r})>"
