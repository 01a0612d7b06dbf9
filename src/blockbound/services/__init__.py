"""Service layer exports."""

from .errors import MetadataError, SessionError
from .item_generator import ItemGenerator
from .combat_service import CombatService
from .item_metadata import item_from_metadata, item_to_metadata
from .session_service import GameSession, VictoryReward

__all__ = [
    "MetadataError",
    "SessionError",
    "ItemGenerator",
    "CombatService",
    "item_from_metadata",
    "item_to_metadata",
    "GameSession",
    "VictoryReward",
]
