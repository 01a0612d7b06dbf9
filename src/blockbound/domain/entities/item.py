"""Generated item models."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from blockbound.core.types import ItemType, Rarity

from .stats import ItemStats

PixelGrid = Tuple[Tuple[int, ...], ...]


@dataclass(frozen=True, slots=True)
class SpecialAttack:
    """Rare-and-above ability with precomputed damage."""

    name: str
    description: str
    damage: int
    cooldown: int


@dataclass(frozen=True, slots=True)
class PixelArt:
    """Square grid of palette indices; index 0 is the background."""

    pixels: PixelGrid
    palette: Tuple[str, ...]

    @property
    def size(self) -> int:
        return len(self.pixels)

    def max_index(self) -> int:
        return max((max(row) for row in self.pixels if row), default=0)


@dataclass(frozen=True, slots=True)
class GameItem:
    """An immutable generated item.

    ``minted`` and ``tx_hash`` belong to the minting collaborator, which
    records them on a replaced copy rather than mutating the original.
    """

    id: str
    name: str
    description: str
    stats: ItemStats
    rarity: Rarity
    item_type: ItemType
    level: int
    pixel_art: PixelArt
    special_attack: SpecialAttack | None = None
    minted: bool = False
    tx_hash: str | None = None

    @property
    def has_special_attack(self) -> bool:
        return self.special_attack is not None
