import random

import pytest

from archaemania.models import TurnAction
from archaemania.modules.item_catalog import create_consumable
from archaemania.modules.player_profile import new_game
from archaemania.modules.turn_engine import advance_clock, begin_turn, take_turn


def test_action_clock_advances_both_players_after_each_action() -> None:
    state = new_game()
    rng = random.Random(1)

    take_turn(state, TurnAction("work"), rng=rng)
    assert [player.turn for player in state.players] == [1, 1]
    assert state.active_player.name == "Gopher2"

    take_turn(state, TurnAction("work"), rng=rng)
    assert [player.turn for player in state.players] == [2, 2]
    assert state.active_player.name == "Gopher1"


def test_round_clock_advances_after_both_players_act() -> None:
    state = new_game(turn_advance="round")

    advance_clock(state)
    assert state.turn == 0
    assert state.active_index == 1

    advance_clock(state)
    assert state.turn == 1
    assert state.active_index == 0


def test_strength_potion_wears_off_at_start_of_turn_two() -> None:
    state = new_game()
    rng = random.Random(2)
    first = state.players[0]
    first.inventory.append(create_consumable("Strength Potion"))

    outcome = take_turn(state, TurnAction("use", "Strength Potion"), rng=rng)
    assert outcome.turn == 0
    assert first.attributes.strength == 2

    take_turn(state, TurnAction("work"), rng=rng)
    assert state.active_player is first
    assert first.turn == 2

    assert begin_turn(state) == ["Gopher1's Strength Potion wore off"]
    assert first.attributes.strength == 0
    assert first.active_effects == []


def test_round_clock_keeps_effect_until_its_expiry_turn() -> None:
    state = new_game(turn_advance="round")
    rng = random.Random(3)
    first = state.players[0]
    first.inventory.append(create_consumable("Strength Potion"))

    take_turn(state, TurnAction("use", "Strength Potion"), rng=rng)
    take_turn(state, TurnAction("work"), rng=rng)

    outcome = take_turn(state, TurnAction("work"), rng=rng)
    assert outcome.turn == 1
    assert first.attributes.strength == 2

    take_turn(state, TurnAction("work"), rng=rng)
    outcome = take_turn(state, TurnAction("work"), rng=rng)
    assert outcome.turn == 2
    assert outcome.messages[0] == "Gopher1's Strength Potion wore off"
    assert first.attributes.strength == 0


def test_failed_action_is_reported_and_still_uses_the_turn() -> None:
    state = new_game()

    outcome = take_turn(state, TurnAction("buy", "Sword"))

    assert outcome.succeeded is False
    assert outcome.messages == ["Insufficient strength to buy Sword. Purchase failed!"]
    assert state.players[0].gold == 20
    assert state.active_player.name == "Gopher2"
    assert state.turn == 1


def test_lethal_attack_ends_the_game() -> None:
    state = new_game()
    state.players[1].health = 1

    outcome = take_turn(state, TurnAction("attack"))

    assert outcome.game_over is True
    assert state.winner == "Gopher1"
    assert state.players[1].health == 0
    assert outcome.messages[-1] == "Gopher2 has died and Gopher1 has won the game!"
    assert state.turn == 0

    with pytest.raises(ValueError, match="already over"):
        take_turn(state, TurnAction("work"))


def test_exit_hands_the_win_to_the_opponent() -> None:
    state = new_game()
    take_turn(state, TurnAction("work"), rng=random.Random(4))

    outcome = take_turn(state, TurnAction("exit"))

    assert outcome.game_over is True
    assert state.exited_by == "Gopher2"
    assert state.winner == "Gopher1"
    assert outcome.messages == ["Gopher2 has exited the game", "Gopher1 has won the game!"]


def test_malformed_actions_are_rejected_before_any_change() -> None:
    state = new_game()

    with pytest.raises(ValueError, match="Unknown action"):
        take_turn(state, TurnAction("dance"))
    with pytest.raises(ValueError, match="needs a target"):
        take_turn(state, TurnAction("buy"))

    assert state.turn == 0
    assert state.active_index == 0
