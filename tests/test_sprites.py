import pytest

from blockbound.core.rng import RNG
from blockbound.core.types import ITEM_TYPES, RARITY_ORDER
from blockbound.data.repositories import RaritiesRepository
from blockbound.domain.sprites import (
    ACCENT,
    BACKGROUND,
    BODY,
    HIGHLIGHT,
    SECONDARY,
    SPRITE_SIZE,
    apply_detail_pass,
    draw_accessory,
    draw_armor,
    draw_consumable,
    draw_weapon,
    synthesize_sprite,
)
from tests.helpers.fake_rng import ScriptedRNG

_REPO = RaritiesRepository()


def _blank() -> list[list[int]]:
    return [[BACKGROUND] * SPRITE_SIZE for _ in range(SPRITE_SIZE)]


@pytest.mark.parametrize("seed", range(10))
def test_every_sprite_index_fits_its_palette(seed: int) -> None:
    rng = RNG(seed)
    for rarity_id in RARITY_ORDER:
        rarity = _REPO.get(rarity_id)
        for item_type in ITEM_TYPES:
            art = synthesize_sprite(rarity, item_type, rng)
            assert art.size == SPRITE_SIZE
            assert all(len(row) == SPRITE_SIZE for row in art.pixels)
            assert art.max_index() < len(art.palette)
            assert art.palette == rarity.palette


def test_weapon_tip_stays_on_grid_for_longest_parts() -> None:
    grid = _blank()
    draw_weapon(grid, ScriptedRNG(ints=[6, 8], floats=[0.0] * 16))

    assert grid[13][7] == SECONDARY and grid[8][8] == SECONDARY
    assert grid[7][6:10] == [ACCENT] * 4
    assert grid[1][7] == BODY
    assert grid[0][7] == BODY and grid[0][8] == BODY
    assert all(cell == BACKGROUND for cell in grid[14] + grid[15])


def test_weapon_edge_highlights_follow_draws() -> None:
    grid = _blank()
    draw_weapon(grid, ScriptedRNG(ints=[4, 5], floats=[0.9, 0.1] * 5))

    blade_rows = range(8, 3, -1)
    assert all(grid[y][6] == HIGHLIGHT for y in blade_rows)
    assert all(grid[y][9] == BACKGROUND for y in blade_rows)


def test_armor_plate_layout() -> None:
    grid = _blank()
    draw_armor(grid, RNG(1))

    assert grid[4][4] == ACCENT and grid[13][11] == ACCENT
    assert grid[5][5] == BODY
    assert grid[5][2] == SECONDARY and grid[6][13] == SECONDARY
    assert grid[7][8] == HIGHLIGHT and grid[8][8] == HIGHLIGHT
    assert all(cell == BACKGROUND for cell in grid[0])


def test_accessory_ring_gem_and_sparkles() -> None:
    grid = _blank()
    draw_accessory(grid, ScriptedRNG(ints=[5]))

    assert grid[8][8] == ACCENT
    assert grid[6][8] == grid[8][10] == grid[10][8] == grid[8][6] == HIGHLIGHT
    assert grid[8][4] == BODY
    assert grid[0][0] == BACKGROUND


def test_consumable_bottle_and_liquid_level() -> None:
    grid = _blank()
    draw_consumable(grid, ScriptedRNG(ints=[3]))

    assert grid[5][7] == grid[6][8] == ACCENT
    assert grid[11][5] == SECONDARY and grid[11][7] == BODY
    assert grid[12][6] == HIGHLIGHT and grid[14][7] == HIGHLIGHT
    assert grid[15] == [BACKGROUND] * SPRITE_SIZE


@pytest.mark.parametrize("rarity_id", RARITY_ORDER)
def test_detail_pass_never_grows_the_silhouette(rarity_id: str) -> None:
    rarity = _REPO.get(rarity_id)
    rng = RNG(5)
    for draw in (draw_weapon, draw_armor, draw_accessory, draw_consumable):
        grid = _blank()
        draw(grid, rng)
        before = [[cell != BACKGROUND for cell in row] for row in grid]
        snapshot = [row[:] for row in grid]

        apply_detail_pass(grid, rarity, rng)

        assert [[cell != BACKGROUND for cell in row] for row in grid] == before
        changed = [
            grid[y][x]
            for y in range(SPRITE_SIZE)
            for x in range(SPRITE_SIZE)
            if grid[y][x] != snapshot[y][x]
        ]
        if rarity.highlight_details:
            assert all(value == HIGHLIGHT for value in changed)
