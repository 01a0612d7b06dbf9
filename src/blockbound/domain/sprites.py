"""Pixel-art synthesis for generated items.

Sprites are built in two passes. An archetype routine first draws the
silhouette for the item type, then a detail pass recolors a rarity-scaled
number of random cells that are already part of the shape. Detail pixels
never paint onto the background, so silhouettes stay recognizable.

Palette indices used by the archetypes:

* 0 background
* 1 main body
* 2 secondary (handle, shoulders, bottle glass)
* 3 outline / accent
* 4 highlight
"""
from __future__ import annotations

import math
from typing import Callable, Dict, List

from blockbound.core.rng import RNG
from blockbound.core.types import ItemType
from blockbound.domain.defs import RarityDef
from blockbound.domain.entities import PixelArt

SPRITE_SIZE = 16
HIGHLIGHT_INDEX = 4

BACKGROUND = 0
BODY = 1
SECONDARY = 2
ACCENT = 3
HIGHLIGHT = HIGHLIGHT_INDEX

Grid = List[List[int]]


def _blank_grid(size: int) -> Grid:
    return [[BACKGROUND] * size for _ in range(size)]


def draw_weapon(grid: Grid, rng: RNG) -> None:
    """Handle, guard, blade with random edge glints, tip."""
    size = len(grid)
    handle_x = size // 2 - 1
    handle_length = rng.randint(4, 6)
    handle_bottom = size - 3
    for y in range(handle_bottom, handle_bottom - handle_length, -1):
        grid[y][handle_x] = SECONDARY
        grid[y][handle_x + 1] = SECONDARY

    guard_y = handle_bottom - handle_length
    for x in range(handle_x - 1, handle_x + 3):
        grid[guard_y][x] = ACCENT

    # The tip row must stay on the grid.
    blade_top = guard_y - 1
    blade_length = min(rng.randint(5, 8), blade_top)
    for y in range(blade_top, blade_top - blade_length, -1):
        grid[y][handle_x] = BODY
        grid[y][handle_x + 1] = BODY
        if rng.random() > 0.7:
            grid[y][handle_x - 1] = HIGHLIGHT
        if rng.random() > 0.7:
            grid[y][handle_x + 2] = HIGHLIGHT

    tip_y = blade_top - blade_length
    grid[tip_y][handle_x] = BODY
    grid[tip_y][handle_x + 1] = BODY


def draw_armor(grid: Grid, rng: RNG) -> None:
    """Outlined chest plate with shoulder pads and a center accent."""
    size = len(grid)
    center_x = size // 2
    top_y = 4
    width = 8
    height = 10
    left = center_x - width // 2
    right = center_x + math.ceil(width / 2) - 1
    bottom = top_y + height - 1

    for y in range(top_y, bottom + 1):
        for x in range(left, right + 1):
            on_edge = y in (top_y, bottom) or x in (left, right)
            grid[y][x] = ACCENT if on_edge else BODY

    for x in list(range(left - 2, left)) + list(range(right + 1, right + 3)):
        grid[top_y + 1][x] = SECONDARY
        grid[top_y + 2][x] = SECONDARY

    grid[top_y + 3][center_x] = HIGHLIGHT
    grid[top_y + 4][center_x] = HIGHLIGHT


def draw_accessory(grid: Grid, rng: RNG) -> None:
    """Ring band around the center with a gem and four sparkles."""
    size = len(grid)
    center_x = size // 2
    center_y = size // 2
    radius = rng.randint(3, 5)
    band = 1.5

    for y in range(size):
        for x in range(size):
            distance = math.hypot(x - center_x, y - center_y)
            if radius - band < distance < radius:
                grid[y][x] = BODY

    grid[center_y][center_x] = ACCENT
    for dx, dy in ((0, -2), (2, 0), (0, 2), (-2, 0)):
        grid[center_y + dy][center_x + dx] = HIGHLIGHT


def _bottle_width(row_offset: int, max_width: int, body_height: int) -> int:
    profile = math.sin(row_offset / body_height * math.pi)
    return min(max_width, int(math.floor(max_width * profile + 0.5)))


def draw_consumable(grid: Grid, rng: RNG) -> None:
    """Potion bottle: neck, sine-profile body, partial liquid fill."""
    size = len(grid)
    center_x = size // 2
    top_y = 5
    body_width = 6
    body_height = 8
    neck_width = 2
    neck_height = 2
    body_top = top_y + neck_height
    body_bottom = body_top + body_height - 1

    for y in range(top_y, body_top):
        for x in range(center_x - neck_width // 2, center_x + math.ceil(neck_width / 2)):
            grid[y][x] = ACCENT

    for y in range(body_top, body_bottom + 1):
        width = _bottle_width(y - body_top, body_width, body_height)
        left = center_x - width // 2
        right = center_x + math.ceil(width / 2) - 1
        for x in range(left, right + 1):
            on_edge = y in (body_top, body_bottom) or x in (left, right)
            grid[y][x] = SECONDARY if on_edge else BODY

    fill_rows = rng.randint(3, 5)
    for y in range(body_bottom + 1 - fill_rows, body_bottom + 1):
        width = _bottle_width(y - body_top, body_width - 2, body_height)
        for x in range(center_x - width // 2, center_x + math.ceil(width / 2)):
            grid[y][x] = HIGHLIGHT


ARCHETYPES: Dict[ItemType, Callable[[Grid, RNG], None]] = {
    "weapon": draw_weapon,
    "armor": draw_armor,
    "accessory": draw_accessory,
    "consumable": draw_consumable,
}


def apply_detail_pass(grid: Grid, rarity: RarityDef, rng: RNG) -> None:
    """Recolor up to ``rarity.detail_pixels`` cells that are already drawn."""
    size = len(grid)
    for _ in range(rarity.detail_pixels):
        x = rng.randint(0, size - 1)
        y = rng.randint(0, size - 1)
        if grid[y][x] == BACKGROUND:
            continue
        grid[y][x] = HIGHLIGHT if rarity.highlight_details else rng.randint(BODY, HIGHLIGHT)


def synthesize_sprite(rarity: RarityDef, item_type: ItemType, rng: RNG) -> PixelArt:
    grid = _blank_grid(SPRITE_SIZE)
    ARCHETYPES[item_type](grid, rng)
    apply_detail_pass(grid, rarity, rng)
    return PixelArt(
        pixels=tuple(tuple(row) for row in grid),
        palette=tuple(rarity.palette),
    )
