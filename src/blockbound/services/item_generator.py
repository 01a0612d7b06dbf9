"""Item generator composing the rarity, stat, ability and sprite rules."""
from __future__ import annotations

from blockbound.core.logging import get_logger
from blockbound.core.rng import RNG
from blockbound.core.types import ITEM_TYPES, ItemType, Rarity
from blockbound.data.repositories import NamesRepository, RaritiesRepository
from blockbound.domain.entities import GameItem
from blockbound.domain.rarity import resolve_rarity
from blockbound.domain.special_attacks import synthesize_special_attack
from blockbound.domain.sprites import synthesize_sprite
from blockbound.domain.stat_synthesis import synthesize_stats
from blockbound.services.factories import make_instance_id

logger = get_logger(__name__)

LEVEL_RANGE = (1, 10)
NAME_AFFIX_THRESHOLD = 0.3


def describe_item(rarity: Rarity, item_type: ItemType) -> str:
    return f"A {rarity} {item_type} with powerful attributes."


class ItemGenerator:
    """Produces fully-formed random items from the injected RNG."""

    def __init__(
        self,
        rng: RNG,
        rarities_repo: RaritiesRepository | None = None,
        names_repo: NamesRepository | None = None,
    ) -> None:
        self._rng = rng
        self._rarities_repo = rarities_repo or RaritiesRepository()
        self._names_repo = names_repo or NamesRepository()

    @property
    def rng(self) -> RNG:
        return self._rng

    def roll_rarity(self) -> Rarity:
        return resolve_rarity(self._rarities_repo.ordered(), self._rng)

    def build_name(self) -> str:
        """Root noun, each affix present with 70% probability."""
        use_prefix = self._rng.random() > NAME_AFFIX_THRESHOLD
        use_suffix = self._rng.random() > NAME_AFFIX_THRESHOLD
        parts = []
        if use_prefix:
            parts.append(self._rng.choice(self._names_repo.entries("item_prefixes")))
        parts.append(self._rng.choice(self._names_repo.entries("item_roots")))
        if use_suffix:
            parts.append(self._rng.choice(self._names_repo.entries("item_suffixes")))
        return " ".join(parts)

    def generate_item(self) -> GameItem:
        rarity = self.roll_rarity()
        rarity_def = self._rarities_repo.get(rarity)
        item_type = self._rng.choice(ITEM_TYPES)
        level = self._rng.randint(*LEVEL_RANGE)
        name = self.build_name()

        stats = synthesize_stats(rarity_def, item_type, self._rng)
        pixel_art = synthesize_sprite(rarity_def, item_type, self._rng)
        special_attack = synthesize_special_attack(
            rarity_def,
            stats,
            self._names_repo.entries("attack_prefixes"),
            self._names_repo.entries("attack_roots"),
            self._rng,
        )

        item = GameItem(
            id=make_instance_id(self._rng),
            name=name,
            description=describe_item(rarity, item_type),
            stats=stats,
            rarity=rarity,
            item_type=item_type,
            level=level,
            pixel_art=pixel_art,
            special_attack=special_attack,
        )
        logger.debug(f"Generated {rarity} {item_type} '{name}' ({item.id})")
        return item
