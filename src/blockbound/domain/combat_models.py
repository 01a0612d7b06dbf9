"""Combat domain models."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from blockbound.core.types import CombatSide

COMBAT_STARTED_MESSAGE = "Combat has started!"


@dataclass(slots=True)
class CombatState:
    """Tracks one player-versus-enemy match.

    ``turn`` counts player half-turns taken so far. ``special_ready_turn`` is
    the first player turn on which the special attack may be cast again.
    """

    player_hp: int
    enemy_hp: int
    player_max_hp: int
    enemy_max_hp: int
    generation: int
    player_turn: bool = True
    log: List[str] = field(default_factory=lambda: [COMBAT_STARTED_MESSAGE])
    is_over: bool = False
    winner: CombatSide | None = None
    turn: int = 0
    special_ready_turn: int = 0

    @property
    def is_active(self) -> bool:
        return not self.is_over
