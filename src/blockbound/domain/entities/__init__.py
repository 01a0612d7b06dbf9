"""Runtime entity exports."""

from .item import GameItem, PixelArt, PixelGrid, SpecialAttack
from .stats import CRIT_CHANCE_CAP, ItemStats
from .user import EXP_PER_LEVEL, UserProfile

__all__ = [
    "CRIT_CHANCE_CAP",
    "EXP_PER_LEVEL",
    "GameItem",
    "ItemStats",
    "PixelArt",
    "PixelGrid",
    "SpecialAttack",
    "UserProfile",
]
