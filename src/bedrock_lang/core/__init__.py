"""
Core module - Languages, placeholder substitution and the translation manager.
"""

from .language import Language
from .manager import DiagnosticSink, Manager
from .placeholders import P, substitute
from .player import LocaleCaller, Player
from .rwlock import ReadWriteLock

__all__ = [
    "DiagnosticSink",
    "Language",
    "LocaleCaller",
    "Manager",
    "P",
    "Player",
    "ReadWriteLock",
    "substitute",
]
