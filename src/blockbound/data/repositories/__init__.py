"""Repository exports."""

from .names_repo import NamesRepository
from .rarities_repo import RaritiesRepository

__all__ = [
    "NamesRepository",
    "RaritiesRepository",
]
