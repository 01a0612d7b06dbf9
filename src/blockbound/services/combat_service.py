"""Combat engine resolving player-versus-enemy item matches."""
from __future__ import annotations

from blockbound.config import EngineConfig
from blockbound.core.logging import get_logger
from blockbound.core.rng import RNG
from blockbound.core.scheduler import ScheduledTask, TurnScheduler
from blockbound.core.types import CombatSide
from blockbound.domain.combat_models import CombatState
from blockbound.domain.combat_rules import (
    CRIT_MULTIPLIER,
    apply_damage,
    basic_attack_damage,
    enemy_reply_damage,
)
from blockbound.domain.entities import GameItem
from blockbound.services.item_generator import ItemGenerator

logger = get_logger(__name__)


class CombatService:
    """
    Two-party turn state machine over CombatState.

    The player acts synchronously through ``apply_player_attack`` or
    ``apply_player_special``; the enemy's reply is queued on the scheduler and
    only lands when the owner advances it. Every match is stamped with the
    service's generation counter. Ending a match bumps the counter, which
    turns any reply still in the queue into a no-op.

    Invalid calls (not the player's turn, match over, no special attack,
    special on cooldown, stale state) never raise and leave the state as is.
    """

    def __init__(
        self,
        item_generator: ItemGenerator,
        scheduler: TurnScheduler,
        *,
        rng: RNG | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        self._item_generator = item_generator
        self._scheduler = scheduler
        self._rng = rng or item_generator.rng
        self._config = config or EngineConfig()
        self._generation = 0
        self._pending_reply: ScheduledTask | None = None

    # -----------------------
    # Match Lifecycle
    # -----------------------
    def start_combat(
        self, player_item: GameItem, enemy_item: GameItem | None = None
    ) -> tuple[CombatState, GameItem]:
        """Open a new match, generating an opponent when none is given.

        Returns a ``(state, enemy_item)`` pair so callers that let the
        service roll the opponent can still reach it. Any reply still queued
        for the previous match is cancelled.
        """
        if enemy_item is None:
            enemy_item = self._item_generator.generate_item()
        self._cancel_pending_reply()
        self._generation += 1
        state = CombatState(
            player_hp=player_item.stats.max_hp,
            enemy_hp=enemy_item.stats.max_hp,
            player_max_hp=player_item.stats.max_hp,
            enemy_max_hp=enemy_item.stats.max_hp,
            generation=self._generation,
        )
        logger.info(
            f"Combat #{state.generation}: '{player_item.name}' ({state.player_hp} HP) "
            f"vs '{enemy_item.name}' ({state.enemy_hp} HP)"
        )
        return state, enemy_item

    def end_combat(self, state: CombatState | None = None) -> None:
        """Retire the current match so pending replies become inert."""
        if state is not None and not self.is_current(state):
            return
        self._generation += 1
        self._cancel_pending_reply()
        logger.debug(f"Combat ended; generation now {self._generation}")

    def is_current(self, state: CombatState) -> bool:
        return state.generation == self._generation

    def can_act(self, state: CombatState) -> bool:
        return self.is_current(state) and state.is_active and state.player_turn

    def can_use_special(self, state: CombatState, player_item: GameItem) -> bool:
        if not player_item.has_special_attack or not self.can_act(state):
            return False
        if self._config.enforce_special_cooldown:
            return state.turn >= state.special_ready_turn
        return True

    # -----------------------
    # Player Actions
    # -----------------------
    def apply_player_attack(
        self, state: CombatState, player_item: GameItem, enemy_item: GameItem
    ) -> CombatState:
        if not self.can_act(state):
            logger.debug("Ignoring attack: not the player's turn")
            return state

        damage = basic_attack_damage(player_item.stats, enemy_item.stats)
        is_critical = self._rng.random() < player_item.stats.crit_chance / 100
        if is_critical:
            damage *= CRIT_MULTIPLIER
            state.log.append(f"Critical hit! You dealt {damage} damage!")
        else:
            state.log.append(f"You attacked for {damage} damage!")

        self._resolve_player_hit(state, damage, player_item, enemy_item)
        return state

    def apply_player_special(
        self, state: CombatState, player_item: GameItem, enemy_item: GameItem
    ) -> CombatState:
        if not self.can_use_special(state, player_item):
            logger.debug("Ignoring special attack: unavailable")
            return state

        special = player_item.special_attack
        assert special is not None
        state.special_ready_turn = state.turn + special.cooldown
        state.log.append(f"You used {special.name} for {special.damage} damage!")
        self._resolve_player_hit(state, special.damage, player_item, enemy_item)
        return state

    def special_turns_remaining(self, state: CombatState) -> int:
        """Player turns left before the special attack is ready again."""
        if not self._config.enforce_special_cooldown:
            return 0
        return max(0, state.special_ready_turn - state.turn)

    # -----------------------
    # Enemy Reply
    # -----------------------
    def resolve_enemy_reply(
        self, state: CombatState, player_item: GameItem, enemy_item: GameItem
    ) -> CombatState:
        """Apply the enemy half-turn if this match is still live."""
        if not self.is_current(state) or state.is_over or state.player_turn:
            logger.debug(f"Dropping stale enemy reply for combat #{state.generation}")
            return state

        damage = enemy_reply_damage(enemy_item.stats, player_item.stats)
        state.player_hp = apply_damage(state.player_hp, damage)
        state.log.append(f"Enemy attacked for {damage} damage!")
        if state.player_hp <= 0:
            self._conclude(state, "enemy")
        else:
            state.player_turn = True
        return state

    # -----------------------
    # Helpers
    # -----------------------
    def _resolve_player_hit(
        self, state: CombatState, damage: int, player_item: GameItem, enemy_item: GameItem
    ) -> None:
        state.enemy_hp = apply_damage(state.enemy_hp, damage)
        state.turn += 1
        if state.enemy_hp <= 0:
            self._conclude(state, "player")
            return

        state.player_turn = False
        self._pending_reply = self._scheduler.schedule(
            self._config.enemy_reply_delay,
            lambda: self.resolve_enemy_reply(state, player_item, enemy_item),
            label=f"enemy_reply#{state.generation}",
        )

    def _cancel_pending_reply(self) -> None:
        if self._pending_reply is not None:
            self._scheduler.cancel(self._pending_reply)
            self._pending_reply = None

    def _conclude(self, state: CombatState, winner: CombatSide) -> None:
        state.is_over = True
        state.winner = winner
        logger.info(f"Combat #{state.generation} over: {winner} wins")
