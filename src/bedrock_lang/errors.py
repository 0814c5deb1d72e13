"""
Exceptions raised by bedrock_lang.

Only administrative operations (registering languages, choosing the default,
loading files) raise. Translation never raises: a missing default language or
a missing key is logged and the raw key is returned instead.
"""


class LangError(Exception):
    """Base class for all bedrock_lang errors."""

    pass


class InvalidLanguageError(LangError, ValueError):
    """Error raised when registering a missing language or one without a locale."""

    pass


class LanguageNotFoundError(LangError, LookupError):
    """Error raised when an operation refers to an unregistered locale."""

    def __init__(self, locale: str, available: list[str] | None = None):
        self.locale = locale
        self.available = sorted(available or [])
        shown = ", ".join(self.available) if self.available else "(none)"
        super().__init__(
            f"Language '{locale}' is not registered. Available languages: {shown}"
        )


class LanguageFileError(LangError):
    """Error raised when a language file cannot be loaded."""

    def __init__(self, message: str, path: object = None):
        self.path = path
        super().__init__(message)
