"""Shared type aliases for the core and domain layers."""
from typing import Literal, Tuple

Rarity = Literal["common", "uncommon", "rare", "epic", "legendary"]
ItemType = Literal["weapon", "armor", "accessory", "consumable"]
CombatSide = Literal["player", "enemy"]

RARITY_ORDER: Tuple[Rarity, ...] = ("common", "uncommon", "rare", "epic", "legendary")
ITEM_TYPES: Tuple[ItemType, ...] = ("weapon", "armor", "accessory", "consumable")

__all__ = ["CombatSide", "ITEM_TYPES", "ItemType", "RARITY_ORDER", "Rarity"]
