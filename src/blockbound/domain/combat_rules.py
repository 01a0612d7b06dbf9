"""Damage formulas for item combat."""
from __future__ import annotations

from blockbound.domain.entities import ItemStats

PLAYER_ATTACK_FACTOR = 5
PLAYER_MIN_DAMAGE = 5
ENEMY_ATTACK_FACTOR = 4
ENEMY_MIN_DAMAGE = 3
DEFENSE_FACTOR = 2
CRIT_MULTIPLIER = 2


def basic_attack_damage(attacker: ItemStats, defender: ItemStats) -> int:
    """Player basic attack before any critical hit."""
    return max(PLAYER_MIN_DAMAGE, attacker.attack * PLAYER_ATTACK_FACTOR - defender.defense * DEFENSE_FACTOR)


def enemy_reply_damage(enemy: ItemStats, player: ItemStats) -> int:
    return max(ENEMY_MIN_DAMAGE, enemy.attack * ENEMY_ATTACK_FACTOR - player.defense * DEFENSE_FACTOR)


def apply_damage(current_hp: int, damage: int) -> int:
    return max(0, current_hp - damage)
