"""
Build a ready-to-use Manager from configuration.
"""

import structlog

from .config.schema import LangConfig
from .core.manager import DiagnosticSink, Manager
from .loading.loader import load_language_dir

log = structlog.get_logger()


def build_manager(config: LangConfig, logger: DiagnosticSink | None = None) -> Manager:
    """Load config.directory and register every language in a new Manager.

    The first file loaded becomes the default unless config.default_locale
    names another one.

    Args:
        config: Loaded configuration
        logger: Diagnostic sink handed to the Manager

    Returns:
        Manager with all languages registered

    Raises:
        LanguageFileError: If the directory cannot be loaded (see strict)
        LanguageNotFoundError: If default_locale was not among the loaded files
    """
    languages = load_language_dir(
        config.directory,
        strict=config.strict,
        validate_locale=config.validate_locales,
    )

    manager = Manager(logger=logger)
    manager.register_all(languages)

    if config.default_locale:
        manager.set_default(config.default_locale)

    default = manager.default
    log.info(
        "languages_loaded",
        count=len(manager),
        locales=manager.locales(),
        default=default.locale if default is not None else None,
    )
    return manager
