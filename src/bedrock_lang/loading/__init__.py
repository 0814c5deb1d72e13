"""
Loading module - Language files and the official locale list.
"""

from .loader import (
    DISPLAY_NAME_KEY,
    SUPPORTED_EXTENSIONS,
    load_language_data,
    load_language_dir,
    load_language_file,
)
from .locales import MINECRAFT_LOCALES, is_minecraft_locale

__all__ = [
    "DISPLAY_NAME_KEY",
    "MINECRAFT_LOCALES",
    "SUPPORTED_EXTENSIONS",
    "is_minecraft_locale",
    "load_language_data",
    "load_language_dir",
    "load_language_file",
]
