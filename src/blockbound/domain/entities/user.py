"""Player profile models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from .item import GameItem

EXP_PER_LEVEL = 100


@dataclass(slots=True)
class UserProfile:
    """A registered player and the items they own."""

    id: str
    username: str
    wallet: str
    experience: int = 0
    level: int = 1
    inventory: List[GameItem] = field(default_factory=list)
    equipped_item: GameItem | None = None

    @property
    def next_level_threshold(self) -> int:
        return self.level * EXP_PER_LEVEL

    def find_item(self, item_id: str) -> GameItem | None:
        for item in self.inventory:
            if item.id == item_id:
                return item
        return None
