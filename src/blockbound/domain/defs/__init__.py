"""Domain definition exports."""

from .name_pool_def import NamePoolDef
from .rarity_def import RarityDef

__all__ = [
    "NamePoolDef",
    "RarityDef",
]
