"""Terminal RPG state tracking."""
from __future__ import annotations

from dataclasses import dataclass

MAX_HEALTH = 100
HOME_LOCATION = "/home/user"


@dataclass(slots=True)
class RPGState:
    """Health, progression and position of the RPG hero."""

    health: int = MAX_HEALTH
    level: int = 1
    xp: int = 0
    location: str = HOME_LOCATION

    @property
    def is_alive(self) -> bool:
        return self.health > 0

    @property
    def next_level_xp(self) -> int:
        return self.level * 50
