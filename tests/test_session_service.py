from __future__ import annotations

import pytest

from blockbound.core.rng import RNG
from blockbound.domain.combat_models import COMBAT_STARTED_MESSAGE
from blockbound.domain.entities import UserProfile
from blockbound.services.errors import SessionError
from blockbound.services.session_service import GameSession, victory_experience
from tests.helpers.fake_rng import ScriptedRNG
from tests.helpers.items import QueuedItemGenerator, make_item, make_special

WALLET = "0x5aAeb6053F3E94C9b9A09f33669435E7Ef1BeAed"


def _make_session(*items, floats=(0.9,) * 20) -> GameSession:
    session = GameSession(rng=ScriptedRNG(floats=floats, seed=9), item_generator=QueuedItemGenerator(list(items)))
    session.register("tester", WALLET)
    return session


def test_register_creates_level_one_profile() -> None:
    session = GameSession(rng=RNG(5))

    user = session.register("  Aldric ", WALLET)

    assert user.username == "Aldric"
    assert user.wallet == WALLET
    assert (user.level, user.experience) == (1, 0)
    assert user.inventory == []
    assert user.id.startswith("user_")
    assert session.current_user is user


def test_register_rejects_blank_username() -> None:
    with pytest.raises(SessionError):
        GameSession(rng=RNG(5)).register("   ", WALLET)


def test_generate_item_appends_to_inventory_and_activates() -> None:
    session = GameSession(rng=RNG(6))
    session.register("tester", WALLET)

    first = session.generate_item()
    second = session.generate_item()

    assert session.active_item is second
    assert session.current_user is not None
    assert session.current_user.inventory == [first, second]


def test_generate_item_without_user_only_activates() -> None:
    session = GameSession(rng=RNG(6))

    item = session.generate_item()

    assert session.active_item is item
    assert session.current_user is None


def test_start_combat_requires_active_item() -> None:
    session = GameSession(rng=RNG(6))

    assert session.start_combat() is None
    assert session.combat_state is None


def test_basic_attack_win_awards_experience_once() -> None:
    player = make_item("p", attack=50)
    enemy = make_item("e", health=0, level=3)
    session = _make_session(player, enemy)
    session.generate_item()
    session.start_combat()

    session.attack_enemy()
    session.attack_enemy()

    user = session.current_user
    assert user is not None
    assert session.combat_state is not None and session.combat_state.winner == "player"
    assert user.experience == 25
    assert user.level == 1
    assert session.last_reward is not None
    assert session.last_reward.experience == 25
    assert session.last_reward.leveled_up is False


def test_special_attack_win_awards_bonus_experience_and_levels_up() -> None:
    player = make_item("p", special=make_special(damage=500))
    enemy = make_item("e", health=0, level=4)
    session = _make_session(player, enemy)
    assert session.current_user is not None
    session.current_user.experience = 80
    session.generate_item()
    session.start_combat()

    session.use_special_attack()

    user = session.current_user
    assert user.experience == 80 + 35
    assert user.level == 2
    assert session.last_reward is not None and session.last_reward.leveled_up is True


def test_loss_awards_nothing() -> None:
    player = make_item("p", attack=1, health=0)
    enemy = make_item("e", attack=40, health=5)
    session = _make_session(player, enemy)
    session.generate_item()
    session.start_combat()

    session.attack_enemy()
    session.advance(1.0)

    assert session.combat_state is not None and session.combat_state.winner == "enemy"
    assert session.current_user is not None and session.current_user.experience == 0
    assert session.last_reward is None


def test_full_round_trip_through_the_session_clock() -> None:
    player = make_item("p", attack=5, defense=1, health=1)
    enemy = make_item("e", attack=2, defense=1, health=0)
    session = _make_session(player, enemy)
    session.generate_item()
    state = session.start_combat()
    assert state is not None

    session.attack_enemy()
    assert state.player_turn is False
    assert session.advance(1.0) == 1

    assert state.log == [
        COMBAT_STARTED_MESSAGE,
        "You attacked for 23 damage!",
        "Enemy attacked for 6 damage!",
    ]
    assert (state.player_hp, state.enemy_hp) == (104, 77)


def test_end_combat_then_restart_gives_fresh_state() -> None:
    player = make_item("p", attack=5, health=1)
    first_enemy = make_item("e1", attack=10, health=5)
    second_enemy = make_item("e2", attack=10, health=5)
    session = _make_session(player, first_enemy, second_enemy)
    session.generate_item()
    first_state = session.start_combat()
    session.attack_enemy()

    session.end_combat()
    assert session.combat_state is None and session.enemy_item is None
    session.advance(1.0)

    state = session.start_combat()
    assert state is not None and state is not first_state
    assert session.enemy_item is second_enemy
    assert state.player_hp == state.player_max_hp == 110
    assert state.log == [COMBAT_STARTED_MESSAGE]
    assert first_state is not None and first_state.player_hp == 110


def test_actions_without_combat_are_ignored() -> None:
    session = _make_session(make_item("p"))
    session.generate_item()

    assert session.attack_enemy() is None
    assert session.use_special_attack() is None


def test_select_and_equip_items_from_inventory() -> None:
    first, second = make_item("a"), make_item("b")
    session = _make_session(first, second)
    session.generate_item()
    session.generate_item()

    assert session.select_item("a") is first
    assert session.active_item is first
    session.equip_item("b")
    assert session.current_user is not None and session.current_user.equipped_item is second
    with pytest.raises(SessionError):
        session.select_item("missing")


def test_mark_item_minted_swaps_in_a_minted_copy() -> None:
    item = make_item("a")
    session = _make_session(item)
    session.generate_item()
    session.equip_item("a")

    minted = session.mark_item_minted("a", "0xabc")

    assert minted.minted is True and minted.tx_hash == "0xabc"
    assert item.minted is False and item.tx_hash is None
    assert session.current_user is not None
    assert session.current_user.inventory == [minted]
    assert session.current_user.equipped_item is minted
    assert session.active_item is minted


def test_mark_item_minted_requires_user_and_reference() -> None:
    session = GameSession(rng=RNG(1))
    with pytest.raises(SessionError):
        session.mark_item_minted("a", "0xabc")

    session = _make_session(make_item("a"))
    session.generate_item()
    with pytest.raises(SessionError):
        session.mark_item_minted("a", "")


def test_victory_experience_formula() -> None:
    enemy = make_item("e", level=7)

    assert victory_experience(enemy, special_finish=False) == 45
    assert victory_experience(enemy, special_finish=True) == 50


def test_leaving_matches_mid_turn_does_not_grow_the_queue() -> None:
    player = make_item("p", attack=5)
    enemies = [make_item(f"e{index}", attack=10, health=5) for index in range(50)]
    session = _make_session(player, *enemies, floats=(0.9,) * 60)
    session.generate_item()

    for _ in range(50):
        session.start_combat()
        session.attack_enemy()
        assert session.scheduler.pending == 1
        session.end_combat()

    assert session.scheduler.pending == 0


def test_load_user_resumes_a_stored_profile() -> None:
    stored_item = make_item("stored", attack=5)
    player = make_item("p", attack=5)
    enemy = make_item("e", attack=10, health=5)
    session = _make_session(player, enemy)
    session.generate_item()
    session.start_combat()
    session.attack_enemy()

    profile = UserProfile(
        id="user_saved",
        username="Saved",
        wallet=WALLET,
        experience=40,
        level=2,
        inventory=[stored_item],
        equipped_item=stored_item,
    )
    session.load_user(profile)

    assert session.current_user is profile
    assert session.active_item is stored_item
    assert session.combat_state is None and session.enemy_item is None
    assert session.scheduler.pending == 0
    assert session.select_item("stored") is stored_item
    with pytest.raises(SessionError):
        session.select_item("p")
