"""Rarity tier repository."""
from __future__ import annotations

import math
from typing import Dict, List

from blockbound.core.types import RARITY_ORDER
from blockbound.data.errors import DataReferenceError, DataValidationError
from blockbound.data.repositories.base import RepositoryBase
from blockbound.domain.defs import RarityDef

PALETTE_SIZE = 5


class RaritiesRepository(RepositoryBase[RarityDef]):
    """Loads and validates the rarity table."""

    def __init__(self, base_path=None) -> None:
        super().__init__("rarities.json", base_path)

    def ordered(self) -> List[RarityDef]:
        """Return every tier from lowest to highest rank."""
        return sorted(self.all(), key=lambda rarity: rarity.rank)

    def _build(self, raw: dict[str, object]) -> Dict[str, RarityDef]:
        rarities: Dict[str, RarityDef] = {}
        for raw_id, payload in raw.items():
            if raw_id not in RARITY_ORDER:
                raise DataValidationError(f"Unknown rarity '{raw_id}'.")
            context = f"rarity '{raw_id}'"
            data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                data,
                {"rank", "stat_multiplier", "weight", "color", "palette", "detail_pixels"},
                context,
                optional_fields={"highlight_details"},
            )

            palette = tuple(self._require_str_list(data["palette"], f"{context} palette"))
            if len(palette) != PALETTE_SIZE:
                raise DataValidationError(f"{context} palette must have {PALETTE_SIZE} colors.")
            weight = self._require_number(data["weight"], f"{context} weight")
            if not 0.0 <= weight <= 1.0:
                raise DataValidationError(f"{context} weight must be between 0 and 1.")
            detail_pixels = self._require_int(data["detail_pixels"], f"{context} detail_pixels")
            if detail_pixels < 0:
                raise DataValidationError(f"{context} detail_pixels must be non-negative.")
            highlight = data.get("highlight_details", False)
            if not isinstance(highlight, bool):
                raise DataValidationError(f"{context} highlight_details must be a boolean.")

            rarities[raw_id] = RarityDef(
                id=raw_id,  # type: ignore[arg-type]
                rank=self._require_int(data["rank"], f"{context} rank"),
                stat_multiplier=self._require_number(data["stat_multiplier"], f"{context} stat_multiplier"),
                weight=weight,
                color=self._require_str(data["color"], f"{context} color"),
                palette=palette,
                detail_pixels=detail_pixels,
                highlight_details=highlight,
            )

        self._validate_table(rarities)
        return rarities

    @staticmethod
    def _validate_table(rarities: Dict[str, RarityDef]) -> None:
        missing = [rarity_id for rarity_id in RARITY_ORDER if rarity_id not in rarities]
        if missing:
            raise DataReferenceError(f"Rarity table is missing tiers: {missing}")

        ordered = sorted(rarities.values(), key=lambda rarity: rarity.rank)
        if [rarity.id for rarity in ordered] != list(RARITY_ORDER):
            raise DataValidationError(f"Rarity ranks must follow {list(RARITY_ORDER)}.")

        total = sum(rarity.weight for rarity in ordered)
        if not math.isclose(total, 1.0, abs_tol=1e-9):
            raise DataValidationError(f"Rarity weights must sum to 1.0 (got {total}).")

        for lower, higher in zip(ordered, ordered[1:]):
            if higher.stat_multiplier <= lower.stat_multiplier:
                raise DataValidationError(
                    f"Rarity '{higher.id}' multiplier must exceed '{lower.id}'."
                )
