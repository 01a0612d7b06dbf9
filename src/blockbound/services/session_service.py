"""Game session tying the generator and combat engine to a player."""
from __future__ import annotations

from dataclasses import dataclass, replace

from blockbound.config import EngineConfig
from blockbound.core.logging import get_logger
from blockbound.core.rng import RNG
from blockbound.core.scheduler import TurnScheduler
from blockbound.domain.combat_models import CombatState
from blockbound.domain.entities import GameItem, UserProfile
from blockbound.services.combat_service import CombatService
from blockbound.services.errors import SessionError
from blockbound.services.factories import create_user_profile
from blockbound.services.item_generator import ItemGenerator

logger = get_logger(__name__)

BASIC_WIN_EXP = 10
SPECIAL_WIN_EXP = 15
EXP_PER_ENEMY_LEVEL = 5


@dataclass(frozen=True, slots=True)
class VictoryReward:
    experience: int
    total_experience: int
    level: int
    leveled_up: bool


def victory_experience(enemy_item: GameItem, *, special_finish: bool) -> int:
    base = SPECIAL_WIN_EXP if special_finish else BASIC_WIN_EXP
    return base + enemy_item.level * EXP_PER_ENEMY_LEVEL


class GameSession:
    """
    Mutable session state: current user, active and enemy items, combat.

    Persistence and wallet plumbing live outside; callers hand in a profile
    with ``load_user`` and read ``current_user`` back out to store it. The
    enemy's reply arrives only when ``advance`` moves the session clock.
    """

    def __init__(
        self,
        *,
        rng: RNG | None = None,
        config: EngineConfig | None = None,
        item_generator: ItemGenerator | None = None,
        scheduler: TurnScheduler | None = None,
    ) -> None:
        self._rng = rng or RNG()
        self._config = config or EngineConfig()
        self._scheduler = scheduler or TurnScheduler()
        self._item_generator = item_generator or ItemGenerator(self._rng)
        self._combat = CombatService(
            self._item_generator,
            self._scheduler,
            rng=self._rng,
            config=self._config,
        )
        self.current_user: UserProfile | None = None
        self.active_item: GameItem | None = None
        self.enemy_item: GameItem | None = None
        self.combat_state: CombatState | None = None
        self.last_reward: VictoryReward | None = None
        self._rewarded_generation: int | None = None

    @property
    def scheduler(self) -> TurnScheduler:
        return self._scheduler

    # -----------------------
    # Profile
    # -----------------------
    def register(self, username: str, wallet: str) -> UserProfile:
        self.current_user = create_user_profile(username, wallet, self._rng)
        logger.info(f"Registered '{self.current_user.username}' ({wallet})")
        return self.current_user

    def load_user(self, profile: UserProfile) -> None:
        """Resume a stored profile; clears any item or match from the previous one."""
        self.end_combat()
        self.active_item = profile.equipped_item
        self.last_reward = None
        self.current_user = profile

    # -----------------------
    # Items
    # -----------------------
    def generate_item(self) -> GameItem:
        """Generate an item, make it active and add it to the inventory."""
        item = self._item_generator.generate_item()
        self.active_item = item
        if self.current_user is not None:
            self.current_user.inventory.append(item)
        return item

    def select_item(self, item_id: str) -> GameItem:
        item = self._require_owned_item(item_id)
        self.active_item = item
        return item

    def equip_item(self, item_id: str) -> GameItem:
        item = self._require_owned_item(item_id)
        assert self.current_user is not None
        self.current_user.equipped_item = item
        return item

    def mark_item_minted(self, item_id: str, tx_hash: str) -> GameItem:
        """Record a completed mint by swapping in a minted copy of the item."""
        if not tx_hash:
            raise SessionError("A transaction reference is required.")
        item = self._require_owned_item(item_id)
        minted = replace(item, minted=True, tx_hash=tx_hash)
        user = self.current_user
        assert user is not None
        user.inventory = [minted if entry.id == item_id else entry for entry in user.inventory]
        if user.equipped_item is not None and user.equipped_item.id == item_id:
            user.equipped_item = minted
        if self.active_item is not None and self.active_item.id == item_id:
            self.active_item = minted
        return minted

    # -----------------------
    # Combat
    # -----------------------
    def start_combat(self) -> CombatState | None:
        if self.active_item is None:
            logger.debug("Cannot start combat without an active item")
            return None
        if self.combat_state is not None:
            self.end_combat()
        self.combat_state, self.enemy_item = self._combat.start_combat(self.active_item)
        self.last_reward = None
        return self.combat_state

    def attack_enemy(self) -> CombatState | None:
        if not self._in_combat():
            return self.combat_state
        assert self.combat_state and self.active_item and self.enemy_item
        self._combat.apply_player_attack(self.combat_state, self.active_item, self.enemy_item)
        self._maybe_award_victory(special_finish=False)
        return self.combat_state

    def use_special_attack(self) -> CombatState | None:
        if not self._in_combat():
            return self.combat_state
        assert self.combat_state and self.active_item and self.enemy_item
        self._combat.apply_player_special(self.combat_state, self.active_item, self.enemy_item)
        self._maybe_award_victory(special_finish=True)
        return self.combat_state

    def advance(self, elapsed: float) -> int:
        """Move the session clock, delivering any due enemy replies."""
        return self._scheduler.advance(elapsed)

    def end_combat(self) -> None:
        if self.combat_state is not None:
            self._combat.end_combat(self.combat_state)
        self.combat_state = None
        self.enemy_item = None

    # -----------------------
    # Helpers
    # -----------------------
    def _in_combat(self) -> bool:
        return (
            self.combat_state is not None
            and self.active_item is not None
            and self.enemy_item is not None
        )

    def _maybe_award_victory(self, *, special_finish: bool) -> None:
        state = self.combat_state
        if state is None or not state.is_over or state.winner != "player":
            return
        if self._rewarded_generation == state.generation:
            return
        self._rewarded_generation = state.generation
        if self.current_user is None or self.enemy_item is None:
            return

        user = self.current_user
        gained = victory_experience(self.enemy_item, special_finish=special_finish)
        user.experience += gained
        leveled_up = user.experience >= user.next_level_threshold
        if leveled_up:
            user.level += 1
        self.last_reward = VictoryReward(
            experience=gained,
            total_experience=user.experience,
            level=user.level,
            leveled_up=leveled_up,
        )
        logger.info(f"'{user.username}' gained {gained} exp (level {user.level})")

    def _require_owned_item(self, item_id: str) -> GameItem:
        if self.current_user is None:
            raise SessionError("No user is registered.")
        item = self.current_user.find_item(item_id)
        if item is None:
            raise SessionError(f"Item '{item_id}' is not in the inventory.")
        return item
