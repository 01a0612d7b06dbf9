"""Plain-mapping item descriptions handed to the minting collaborator."""
from __future__ import annotations

from typing import Any, Dict, Mapping

from blockbound.core.types import ITEM_TYPES, RARITY_ORDER
from blockbound.domain.entities import CRIT_CHANCE_CAP, GameItem, ItemStats, PixelArt, SpecialAttack
from blockbound.services.errors import MetadataError

ItemMetadata = Dict[str, Any]

METADATA_VERSION = 1
_STAT_FIELDS = ("attack", "defense", "speed", "health", "magic", "crit_chance")


def item_to_metadata(item: GameItem) -> ItemMetadata:
    """Return a JSON-serializable description of an item."""
    special = item.special_attack
    return {
        "metadata_version": METADATA_VERSION,
        "id": item.id,
        "name": item.name,
        "description": item.description,
        "rarity": item.rarity,
        "type": item.item_type,
        "level": item.level,
        "stats": {name: getattr(item.stats, name) for name in _STAT_FIELDS},
        "special_attack": None
        if special is None
        else {
            "name": special.name,
            "description": special.description,
            "damage": special.damage,
            "cooldown": special.cooldown,
        },
        "pixel_art": {
            "pixels": [list(row) for row in item.pixel_art.pixels],
            "palette": list(item.pixel_art.palette),
        },
        "minted": item.minted,
        "tx_hash": item.tx_hash,
    }


def item_from_metadata(payload: Mapping[str, Any]) -> GameItem:
    """Rebuild an item from ``item_to_metadata`` output, validating as it goes."""
    if not isinstance(payload, Mapping):
        raise MetadataError("Item metadata must be a mapping.")
    if payload.get("metadata_version") != METADATA_VERSION:
        raise MetadataError(f"Unsupported metadata version: {payload.get('metadata_version')!r}")

    rarity = payload.get("rarity")
    if rarity not in RARITY_ORDER:
        raise MetadataError(f"Unknown rarity: {rarity!r}")
    item_type = payload.get("type")
    if item_type not in ITEM_TYPES:
        raise MetadataError(f"Unknown item type: {item_type!r}")

    level = _require_int(payload.get("level"), "level")
    if not 1 <= level <= 10:
        raise MetadataError("level must be between 1 and 10.")

    minted = payload.get("minted", False)
    if not isinstance(minted, bool):
        raise MetadataError("minted must be a boolean.")
    tx_hash = payload.get("tx_hash")
    if tx_hash is not None and not isinstance(tx_hash, str):
        raise MetadataError("tx_hash must be a string.")

    return GameItem(
        id=_require_str(payload.get("id"), "id"),
        name=_require_str(payload.get("name"), "name"),
        description=_require_str(payload.get("description"), "description"),
        stats=_parse_stats(payload.get("stats")),
        rarity=rarity,
        item_type=item_type,
        level=level,
        pixel_art=_parse_pixel_art(payload.get("pixel_art")),
        special_attack=_parse_special(payload.get("special_attack")),
        minted=minted,
        tx_hash=tx_hash,
    )


def _parse_stats(raw: object) -> ItemStats:
    if not isinstance(raw, Mapping):
        raise MetadataError("stats must be a mapping.")
    values = {name: _require_int(raw.get(name), f"stats.{name}") for name in _STAT_FIELDS}
    if any(value < 0 for value in values.values()):
        raise MetadataError("stats must be non-negative.")
    if values["crit_chance"] > CRIT_CHANCE_CAP:
        raise MetadataError(f"stats.crit_chance must not exceed {CRIT_CHANCE_CAP}.")
    return ItemStats(**values)


def _parse_special(raw: object) -> SpecialAttack | None:
    if raw is None:
        return None
    if not isinstance(raw, Mapping):
        raise MetadataError("special_attack must be a mapping or null.")
    cooldown = _require_int(raw.get("cooldown"), "special_attack.cooldown")
    if cooldown < 1:
        raise MetadataError("special_attack.cooldown must be at least 1.")
    return SpecialAttack(
        name=_require_str(raw.get("name"), "special_attack.name"),
        description=_require_str(raw.get("description"), "special_attack.description"),
        damage=_require_int(raw.get("damage"), "special_attack.damage"),
        cooldown=cooldown,
    )


def _parse_pixel_art(raw: object) -> PixelArt:
    if not isinstance(raw, Mapping):
        raise MetadataError("pixel_art must be a mapping.")
    palette = raw.get("palette")
    if not isinstance(palette, list) or not all(isinstance(color, str) for color in palette):
        raise MetadataError("pixel_art.palette must be a list of strings.")
    rows = raw.get("pixels")
    if not isinstance(rows, list) or not rows:
        raise MetadataError("pixel_art.pixels must be a non-empty list.")
    size = len(rows)
    pixels = []
    for y, row in enumerate(rows):
        if not isinstance(row, list) or len(row) != size:
            raise MetadataError(f"pixel_art.pixels[{y}] must be a list of {size} cells.")
        for index in row:
            if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < len(palette):
                raise MetadataError(f"pixel_art.pixels[{y}] has an index outside the palette.")
        pixels.append(tuple(row))
    return PixelArt(pixels=tuple(pixels), palette=tuple(palette))


def _require_str(value: object, context: str) -> str:
    if not isinstance(value, str) or not value:
        raise MetadataError(f"{context} must be a non-empty string.")
    return value


def _require_int(value: object, context: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise MetadataError(f"{context} must be an integer.")
    return value
