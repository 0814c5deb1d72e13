"""
Caller capability used by Manager.translate().

The host application (e.g. a game server) passes its own player objects;
the only requirement is a ``locale`` attribute or property holding the
player's language code.
"""

from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class Player(Protocol):
    """Anything that has a language setting, such as a connected player."""

    @property
    def locale(self) -> str:
        """Language code of the player, e.g. "en_US"."""
        ...


@dataclass(frozen=True)
class LocaleCaller:
    """Minimal Player carrying only a locale code."""

    locale: str
