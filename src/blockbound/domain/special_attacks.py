"""Special ability derivation for rare-and-above items."""
from __future__ import annotations

from typing import Sequence

from blockbound.core.rng import RNG
from blockbound.core.types import Rarity
from blockbound.domain.defs import RarityDef
from blockbound.domain.entities import ItemStats, SpecialAttack
from blockbound.domain.stat_synthesis import round_half_up

ABILITY_RARITIES: frozenset[Rarity] = frozenset({"rare", "epic", "legendary"})
BASE_SPECIAL_DAMAGE = 10
MAX_COOLDOWN = 5
SPEED_PER_COOLDOWN_STEP = 10


def special_attack_damage(stats: ItemStats, multiplier: float) -> int:
    return round_half_up((BASE_SPECIAL_DAMAGE + stats.attack * 2 + stats.magic * 1.5) * multiplier)


def special_attack_cooldown(stats: ItemStats) -> int:
    return max(1, MAX_COOLDOWN - stats.speed // SPEED_PER_COOLDOWN_STEP)


def synthesize_special_attack(
    rarity: RarityDef,
    stats: ItemStats,
    prefixes: Sequence[str],
    roots: Sequence[str],
    rng: RNG,
) -> SpecialAttack | None:
    """Build the item's ability, or None below rare."""
    if rarity.id not in ABILITY_RARITIES:
        return None

    name = f"{rng.choice(prefixes)} {rng.choice(roots)}"
    return SpecialAttack(
        name=name,
        description=f"A powerful {name.lower()} that deals massive damage.",
        damage=special_attack_damage(stats, rarity.stat_multiplier),
        cooldown=special_attack_cooldown(stats),
    )
