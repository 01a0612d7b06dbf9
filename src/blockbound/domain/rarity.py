"""Weighted rarity selection."""
from __future__ import annotations

from typing import Sequence

from blockbound.core.rng import RNG
from blockbound.core.types import Rarity
from blockbound.domain.defs import RarityDef

FALLBACK_RARITY: Rarity = "common"


def resolve_rarity(rarities: Sequence[RarityDef], rng: RNG) -> Rarity:
    """Pick a tier by walking cumulative weights in rank order.

    ``rarities`` must already be sorted from lowest to highest rank. If float
    drift leaves the total short of the draw, the lowest tier is returned.
    """
    roll = rng.random()
    cumulative = 0.0
    for rarity in rarities:
        cumulative += rarity.weight
        if cumulative >= roll:
            return rarity.id
    return FALLBACK_RARITY
