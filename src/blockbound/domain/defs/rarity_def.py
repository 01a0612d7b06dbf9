"""Rarity tier definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from blockbound.core.types import Rarity


@dataclass(frozen=True, slots=True)
class RarityDef:
    """Scaling, drop weight and palette for one rarity tier."""

    id: Rarity
    rank: int
    stat_multiplier: float
    weight: float
    color: str
    palette: Tuple[str, ...]
    detail_pixels: int
    highlight_details: bool = False
