"""Name pool repository."""
from __future__ import annotations

from typing import Dict, Tuple

from blockbound.data.errors import DataReferenceError, DataValidationError
from blockbound.data.repositories.base import RepositoryBase
from blockbound.domain.defs import NamePoolDef

REQUIRED_POOLS = (
    "item_prefixes",
    "item_roots",
    "item_suffixes",
    "attack_prefixes",
    "attack_roots",
)


class NamesRepository(RepositoryBase[NamePoolDef]):
    """Loads the word lists used by the item and ability name builders."""

    def __init__(self, base_path=None) -> None:
        super().__init__("names.json", base_path)

    def entries(self, pool_id: str) -> Tuple[str, ...]:
        return self.get(pool_id).entries

    def _build(self, raw: dict[str, object]) -> Dict[str, NamePoolDef]:
        pools: Dict[str, NamePoolDef] = {}
        for raw_id, payload in raw.items():
            entries = tuple(self._require_str_list(payload, f"name pool '{raw_id}'"))
            if not entries:
                raise DataValidationError(f"name pool '{raw_id}' must not be empty.")
            pools[raw_id] = NamePoolDef(id=raw_id, entries=entries)

        missing = [pool_id for pool_id in REQUIRED_POOLS if pool_id not in pools]
        if missing:
            raise DataReferenceError(f"Name pools missing: {missing}")
        return pools
