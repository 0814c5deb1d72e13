"""
bedrock_lang — translations for Minecraft Bedrock server plugins.

Public API:
    Language                — Translations for one locale.
    Manager                 — Thread-safe registry + translate().
    P                       — Placeholder mapping, e.g. P({"{player}": "Steve"}).
    load_language_file()    — Load en_US.json / de_DE.yml style files.
    load_language_dir()     — Load every language file in a directory.
    build_manager()         — Manager from a LangConfig.

Usage:
    from bedrock_lang import Manager, load_language_dir

    manager = Manager()
    manager.register_all(load_language_dir("lang"))
    manager.set_default("en_US")
    player.message(manager.translate(player, "greet.hello", {"{name}": player.name}))
"""

from .bootstrap import build_manager
from .config import LangConfig, LoggingConfig, load_config
from .core import DiagnosticSink, Language, LocaleCaller, Manager, P, Player, substitute
from .errors import InvalidLanguageError, LangError, LanguageFileError, LanguageNotFoundError
from .loading import (
    DISPLAY_NAME_KEY,
    MINECRAFT_LOCALES,
    is_minecraft_locale,
    load_language_data,
    load_language_dir,
    load_language_file,
)

__version__ = "1.0.0"

__all__ = [
    "DISPLAY_NAME_KEY",
    "DiagnosticSink",
    "InvalidLanguageError",
    "LangConfig",
    "LangError",
    "Language",
    "LanguageFileError",
    "LanguageNotFoundError",
    "LocaleCaller",
    "LoggingConfig",
    "MINECRAFT_LOCALES",
    "Manager",
    "P",
    "Player",
    "build_manager",
    "is_minecraft_locale",
    "load_config",
    "load_language_data",
    "load_language_dir",
    "load_language_file",
    "substitute",
]
