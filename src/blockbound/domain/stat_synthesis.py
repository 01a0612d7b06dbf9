"""Stat rolls for generated items."""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict

from blockbound.core.rng import RNG
from blockbound.core.types import ItemType
from blockbound.domain.defs import RarityDef
from blockbound.domain.entities import CRIT_CHANCE_CAP, ItemStats

BASE_STAT_RANGE = (1, 5)
BASE_CRIT_RANGE = (1, 10)


@dataclass(frozen=True, slots=True)
class TypeBias:
    """Multipliers and flat bonuses applied before rarity scaling."""

    attack_mult: float = 1.0
    defense_mult: float = 1.0
    speed_mult: float = 1.0
    health_mult: float = 1.0
    health_bonus: int = 0
    magic_bonus: int = 0
    crit_bonus: int = 0


TYPE_BIASES: Dict[ItemType, TypeBias] = {
    "weapon": TypeBias(attack_mult=2, crit_bonus=5),
    "armor": TypeBias(defense_mult=2, health_bonus=2),
    "accessory": TypeBias(speed_mult=1.5, magic_bonus=3),
    "consumable": TypeBias(health_mult=2),
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up."""
    return int(math.floor(value + 0.5))


def synthesize_stats(rarity: RarityDef, item_type: ItemType, rng: RNG) -> ItemStats:
    """Roll base stats, apply the type bias, then scale by rarity.

    The order matters: bias first, rarity multiplier second, rounding and the
    crit cap last.
    """
    low, high = BASE_STAT_RANGE
    attack = rng.randint(low, high)
    defense = rng.randint(low, high)
    speed = rng.randint(low, high)
    health = rng.randint(low, high)
    magic = rng.randint(low, high)
    crit = rng.randint(*BASE_CRIT_RANGE)

    bias = TYPE_BIASES[item_type]
    biased = {
        "attack": attack * bias.attack_mult,
        "defense": defense * bias.defense_mult,
        "speed": speed * bias.speed_mult,
        "health": health * bias.health_mult + bias.health_bonus,
        "magic": magic + bias.magic_bonus,
        "crit_chance": crit + bias.crit_bonus,
    }

    scaled = {key: round_half_up(value * rarity.stat_multiplier) for key, value in biased.items()}
    scaled["crit_chance"] = max(0, min(CRIT_CHANCE_CAP, scaled["crit_chance"]))
    return ItemStats(**scaled)
