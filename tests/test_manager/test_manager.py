"""Tests for Manager — registration, default selection and translation."""

import threading
from typing import Any

import pytest
from structlog.testing import capture_logs

from bedrock_lang.core.language import Language
from bedrock_lang.core.manager import Manager
from bedrock_lang.core.player import LocaleCaller, Player
from bedrock_lang.errors import InvalidLanguageError, LanguageNotFoundError


class RecordingSink:
    """Diagnostic sink that keeps every call."""

    def __init__(self) -> None:
        self.records: list[tuple[str, str, dict[str, Any]]] = []

    def debug(self, event: str, **kw: Any) -> None:
        self.records.append(("debug", event, kw))

    def info(self, event: str, **kw: Any) -> None:
        self.records.append(("info", event, kw))

    def warning(self, event: str, **kw: Any) -> None:
        self.records.append(("warning", event, kw))

    def error(self, event: str, **kw: Any) -> None:
        self.records.append(("error", event, kw))


@pytest.fixture
def english() -> Language:
    return Language(
        "en_US",
        "English (US)",
        {"greet.hello": "Hi {name}", "only.english": "English only", "shared": "shared (en)"},
    )


@pytest.fixture
def german() -> Language:
    return Language(
        "de_DE",
        "Deutsch",
        {"greet.hello": "Hallo {name}", "only.german": "Nur Deutsch", "shared": "geteilt (de)"},
    )


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def manager(english: Language, german: Language, sink: RecordingSink) -> Manager:
    m = Manager(logger=sink)
    m.register(english)
    m.register(german)
    return m


# ── Registration ────────────────────────────────────────────────────────


class TestRegister:
    def test_register_and_lookup(self, manager: Manager, english: Language):
        assert manager.language("en_US") is english
        assert manager.language("fr_FR") is None

    def test_first_registration_becomes_default(self, manager: Manager, english: Language):
        assert manager.default is english

    def test_later_registration_does_not_change_default(self, english: Language, german: Language):
        m = Manager(logger=RecordingSink())
        m.register(german)
        m.register(english)
        assert m.default is german

    def test_auto_default_is_logged(self, sink: RecordingSink, manager: Manager):
        assert ("info", "default_language_set_automatically", {"locale": "en_US"}) in sink.records
        auto = [r for r in sink.records if r[1] == "default_language_set_automatically"]
        assert len(auto) == 1

    def test_none_rejected(self, sink: RecordingSink):
        m = Manager(logger=sink)
        with pytest.raises(InvalidLanguageError):
            m.register(None)  # type: ignore[arg-type]
        assert len(m) == 0
        assert m.default is None

    def test_empty_locale_rejected(self):
        m = Manager(logger=RecordingSink())
        with pytest.raises(ValueError, match="locale"):
            m.register(Language("", "Nameless", {"a": "b"}))
        assert len(m) == 0

    def test_overwrite_replaces_whole_table(self, manager: Manager, german: Language):
        replacement = Language("de_DE", "Deutsch v2", {"only.new": "Neu"})
        manager.register(replacement)
        assert manager.language("de_DE") is replacement
        caller = LocaleCaller("de_DE")
        assert manager.translate(caller, "only.new") == "Neu"
        # old German key is gone, falls back to English default
        assert manager.translate(caller, "shared") == "shared (en)"

    def test_overwrite_of_default_keeps_default(self, manager: Manager, sink: RecordingSink):
        replacement = Language("en_US", "English v2", {"greet.hello": "Hey {name}"})
        manager.register(replacement)
        assert manager.default is replacement
        assert ("info", "default_language_replaced", {"locale": "en_US"}) in sink.records
        assert manager.translate(LocaleCaller("fr_FR"), "greet.hello") == "Hey {name}"

    def test_register_all(self, english: Language, german: Language):
        m = Manager(logger=RecordingSink())
        m.register_all([german, english])
        assert m.locales() == ["de_DE", "en_US"]
        assert m.default is german

    def test_register_all_stops_at_invalid(self, english: Language):
        m = Manager(logger=RecordingSink())
        with pytest.raises(InvalidLanguageError):
            m.register_all([english, Language("", "x", {})])
        assert m.locales() == ["en_US"]


class TestSetDefault:
    def test_set_default(self, manager: Manager, german: Language):
        manager.set_default("de_DE")
        assert manager.default is german

    def test_unregistered_locale_leaves_default(self, manager: Manager, english: Language):
        with pytest.raises(LanguageNotFoundError) as exc_info:
            manager.set_default("fr_FR")
        assert manager.default is english
        assert exc_info.value.locale == "fr_FR"
        assert exc_info.value.available == ["de_DE", "en_US"]

    def test_not_found_is_lookup_error(self):
        m = Manager(logger=RecordingSink())
        with pytest.raises(LookupError):
            m.set_default("en_US")

    def test_later_registration_after_explicit_default(self, manager: Manager, german: Language):
        manager.set_default("de_DE")
        manager.register(Language("fr_FR", "Français", {}))
        assert manager.default is german


class TestEnumeration:
    def test_languages_sorted_snapshot(self, manager: Manager, english: Language, german: Language):
        snapshot = manager.languages()
        assert snapshot == [german, english]
        manager.register(Language("fr_FR", "Français", {}))
        assert len(snapshot) == 2
        assert len(manager.languages()) == 3

    def test_contains_and_len(self, manager: Manager):
        assert "en_US" in manager
        assert "fr_FR" not in manager
        assert len(manager) == 2

    def test_repr(self, manager: Manager):
        assert repr(manager) == "<Manager(2 languages, default='en_US')>"

    def test_repr_empty(self):
        assert repr(Manager(logger=RecordingSink())) == "<Manager(0 languages, default=None)>"

    def test_repr_waits_for_writer(self, manager: Manager):
        results: list[str] = []
        manager._lock.acquire_write()
        try:
            reader = threading.Thread(target=lambda: results.append(repr(manager)))
            reader.start()
            reader.join(timeout=0.1)
            assert reader.is_alive()
            assert results == []
        finally:
            manager._lock.release_write()
        reader.join(timeout=5)
        assert results == ["<Manager(2 languages, default='en_US')>"]


# ── Translation ─────────────────────────────────────────────────────────


class TestTranslate:
    def test_player_language(self, manager: Manager):
        assert manager.translate(LocaleCaller("de_DE"), "only.german") == "Nur Deutsch"

    def test_player_language_wins_over_default(self, manager: Manager):
        assert manager.translate(LocaleCaller("de_DE"), "shared") == "geteilt (de)"

    def test_key_missing_in_player_language_falls_back(self, manager: Manager):
        assert manager.translate(LocaleCaller("de_DE"), "only.english") == "English only"

    def test_unregistered_locale_falls_back(self, manager: Manager):
        assert manager.translate(LocaleCaller("ja_JP"), "shared") == "shared (en)"

    def test_key_only_in_non_default_language(self, manager: Manager):
        # default (en_US) lacks it; non-German callers do not see German text
        assert manager.translate(LocaleCaller("en_US"), "only.german") == "only.german"

    def test_missing_everywhere_returns_key(self, manager: Manager, sink: RecordingSink):
        assert manager.translate(LocaleCaller("de_DE"), "no.such.key") == "no.such.key"
        assert (
            "warning",
            "translation_key_not_found",
            {"key": "no.such.key", "fallback_locale": "en_US"},
        ) in sink.records

    def test_missing_key_ignores_placeholders(self, manager: Manager):
        assert manager.translate(LocaleCaller("en_US"), "{name}", {"{name}": "Alex"}) == "{name}"

    def test_no_default_returns_key(self, sink: RecordingSink):
        m = Manager(logger=sink)
        assert m.translate(LocaleCaller("en_US"), "greet.hello") == "greet.hello"
        assert ("error", "translation_failed_no_default_language", {"key": "greet.hello"}) in sink.records

    def test_placeholders(self, manager: Manager):
        result = manager.translate(LocaleCaller("de_DE"), "greet.hello", {"{name}": "Alex"})
        assert result == "Hallo Alex"

    def test_round_trip(self):
        m = Manager(logger=RecordingSink())
        m.register(Language("en_US", "English (US)", {"greet.hello": "Hi {name}"}))
        assert m.translate(LocaleCaller("en_US"), "greet.hello", {"{name}": "Alex"}) == "Hi Alex"

    def test_simultaneous_substitution(self):
        m = Manager(logger=RecordingSink())
        m.register(Language("en_US", "English (US)", {"where": "Hello {a}, you are in {b}"}))
        result = m.translate(LocaleCaller("en_US"), "where", {"{a}": "Steve", "{b}": "{a}"})
        assert result == "Hello Steve, you are in {a}"

    def test_translate_locale(self, manager: Manager):
        assert manager.translate_locale("de_DE", "greet.hello", {"{name}": "Alex"}) == "Hallo Alex"
        assert manager.translate_locale("ja_JP", "only.english") == "English only"

    def test_switching_default_changes_fallback(self, manager: Manager):
        manager.set_default("de_DE")
        assert manager.translate(LocaleCaller("ja_JP"), "shared") == "geteilt (de)"


class TestNonTextTables:
    def test_non_text_value_translates_to_text(self):
        m = Manager(logger=RecordingSink())
        m.register(Language("en_US", "English (US)", {"players": 5}))  # type: ignore[dict-item]
        assert m.translate(LocaleCaller("en_US"), "players") == "5"
        assert m.translate(LocaleCaller("en_US"), "players", {"5": "five"}) == "five"


class TestCallers:
    def test_any_object_with_locale_attribute(self, manager: Manager):
        class ServerPlayer:
            def __init__(self, locale: str) -> None:
                self._locale = locale

            @property
            def locale(self) -> str:
                return self._locale

        player = ServerPlayer("de_DE")
        assert isinstance(player, Player)
        assert manager.translate(player, "only.german") == "Nur Deutsch"

    def test_broken_locale_property_falls_back(self, manager: Manager, sink: RecordingSink):
        class Broken:
            @property
            def locale(self) -> str:
                raise RuntimeError("disconnected")

        assert manager.translate(Broken(), "shared") == "shared (en)"
        assert any(r[1] == "player_locale_unavailable" for r in sink.records)

    def test_non_string_locale_falls_back(self, manager: Manager):
        assert manager.translate(LocaleCaller(None), "shared") == "shared (en)"  # type: ignore[arg-type]

    def test_object_without_locale_falls_back(self, manager: Manager):
        assert manager.translate(object(), "shared") == "shared (en)"  # type: ignore[arg-type]


class TestDefaultLogger:
    def test_structlog_used_when_no_logger_given(self):
        m = Manager()
        with capture_logs() as logs:
            m.register(Language("en_US", "English (US)", {}))
            m.translate(LocaleCaller("en_US"), "missing")

        events = [(entry["event"], entry["log_level"]) for entry in logs]
        assert ("default_language_set_automatically", "info") in events
        assert ("translation_key_not_found", "warning") in events
