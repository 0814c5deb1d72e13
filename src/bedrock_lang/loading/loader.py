"""
Language file loader — JSON and YAML translation tables.

A language file is a flat mapping of translation keys to text. The locale is
taken from the file name (``en_US.json``, ``de_DE.yml``) and the file must
carry its display name under the reserved ``language.name`` key:

    language.name: "English (US)"
    greet.hello: "Hi {name}"
"""

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog
import yaml

from ..core.language import Language
from ..errors import LanguageFileError
from .locales import is_minecraft_locale

logger = structlog.get_logger()

DISPLAY_NAME_KEY = "language.name"
SUPPORTED_EXTENSIONS = (".json", ".yml", ".yaml")

# Scalars JSON may produce for unquoted values (true, 3, 1.5)
_SCALAR_TYPES = (str, int, float, bool)


def load_language_data(locale: str, data: Any, source: object = None) -> Language:
    """Build a Language from a decoded key → text mapping.

    The ``language.name`` entry is removed from the translations and used
    as the display name. The input mapping is not modified.

    Args:
        locale: Locale code of the language
        data: Decoded document (must be a flat mapping)
        source: Where the data came from, used in error messages

    Returns:
        Language instance

    Raises:
        LanguageFileError: If data is not a flat mapping or has no display name
    """
    origin = source if source is not None else locale

    if not isinstance(data, Mapping):
        raise LanguageFileError(
            f"language file {origin} must contain a mapping of keys to text, "
            f"got {type(data).__name__}",
            path=source,
        )

    translations: dict[str, str] = {}
    for key, value in data.items():
        if not isinstance(value, _SCALAR_TYPES):
            raise LanguageFileError(
                f"language file {origin} has a non-text value for key '{key}' "
                f"({type(value).__name__})",
                path=source,
            )
        translations[str(key)] = str(value)

    name = translations.pop(DISPLAY_NAME_KEY, None)
    if name is None:
        raise LanguageFileError(
            f"language file {origin} is missing the required '{DISPLAY_NAME_KEY}' key",
            path=source,
        )

    return Language(locale, name, translations)


def _decode(path: Path, raw: str) -> Any:
    ext = path.suffix.lower()
    if ext == ".json":
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise LanguageFileError(f"failed to decode JSON from {path}: {e}", path=path) from e
    try:
        # BaseLoader keeps every scalar as written ("Yes", "1.50", "12:30")
        return yaml.load(raw, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise LanguageFileError(f"failed to decode YAML from {path}: {e}", path=path) from e


def load_language_file(path: str | Path, validate_locale: bool = True) -> Language:
    """Load a language file (JSON or YAML).

    The locale is inferred from the file name, e.g. "en_US.json" → "en_US".

    Args:
        path: Path to the file
        validate_locale: If True, reject locales that are not official
            Minecraft Bedrock codes

    Returns:
        Loaded Language

    Raises:
        LanguageFileError: If the file cannot be read, decoded or validated
    """
    path = Path(path)
    ext = path.suffix.lower()
    locale = path.stem

    if ext not in SUPPORTED_EXTENSIONS:
        raise LanguageFileError(f"unsupported file format: {path.suffix or '(none)'} ({path})", path=path)

    if validate_locale and not is_minecraft_locale(locale):
        raise LanguageFileError(
            f"locale '{locale}' derived from filename is not a valid Minecraft locale",
            path=path,
        )

    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise LanguageFileError(f"could not read language file {path}: {e}", path=path) from e

    language = load_language_data(locale, _decode(path, raw), source=path)
    logger.debug("language_file_loaded", path=str(path), locale=locale, keys=len(language))
    return language


def load_language_dir(
    directory: str | Path,
    *,
    strict: bool = True,
    validate_locale: bool = True,
) -> list[Language]:
    """Load every language file in a directory (non-recursive).

    Files are processed in name order; files with other extensions are
    ignored.

    Args:
        directory: Directory holding the language files
        strict: If True the first failing file raises; otherwise it is
            logged and skipped
        validate_locale: Passed to load_language_file()

    Returns:
        Loaded languages in file-name order

    Raises:
        LanguageFileError: If the directory does not exist, or (strict) a
            file fails to load or repeats a locale
    """
    directory = Path(directory)
    if not directory.is_dir():
        raise LanguageFileError(f"language directory not found: {directory}", path=directory)

    languages: list[Language] = []
    seen: dict[str, Path] = {}

    for path in sorted(directory.iterdir()):
        if not path.is_file() or path.suffix.lower() not in SUPPORTED_EXTENSIONS:
            continue

        try:
            language = load_language_file(path, validate_locale=validate_locale)
            if language.locale in seen:
                raise LanguageFileError(
                    f"duplicate locale '{language.locale}' in {path} "
                    f"(already loaded from {seen[language.locale]})",
                    path=path,
                )
        except LanguageFileError as e:
            if strict:
                raise
            logger.warning("language_file_skipped", path=str(path), error=str(e))
            continue

        seen[language.locale] = path
        languages.append(language)

    logger.info(
        "language_dir_loaded",
        directory=str(directory),
        count=len(languages),
        locales=[lang.locale for lang in languages],
    )
    return languages
