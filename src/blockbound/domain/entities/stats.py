"""Stat models for generated items."""
from __future__ import annotations

from dataclasses import dataclass

CRIT_CHANCE_CAP = 90


@dataclass(frozen=True, slots=True)
class ItemStats:
    """Six-dimension stat vector carried by every item."""

    attack: int
    defense: int
    speed: int
    health: int
    magic: int
    crit_chance: int

    @property
    def max_hp(self) -> int:
        """Hit points an item starts a match with."""
        return 100 + self.health * 10
