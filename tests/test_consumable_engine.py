import pytest

from archaemania.models import ActionError
from archaemania.modules.consumable_engine import expire_effects, use_item
from archaemania.modules.item_catalog import create_consumable
from archaemania.modules.player_profile import create_player


def _player_with(*items: str):
    player = create_player("Drinker")
    player.inventory = [create_consumable(item) for item in items]
    return player


def test_strength_potion_expires_on_turn_start_plus_duration_minus_one() -> None:
    player = _player_with("Strength Potion")

    use_item(player, "Strength Potion")

    assert player.attributes.strength == 2
    assert player.inventory == []
    assert player.active_effects[0].activated_turn == 0
    assert player.active_effects[0].expires_at() == 2

    player.turn = 1
    assert expire_effects(player) == []
    assert player.attributes.strength == 2

    player.turn = 2
    assert expire_effects(player) == ["Drinker's Strength Potion wore off"]
    assert player.attributes.strength == 0
    assert player.active_effects == []

    player.turn = 3
    assert expire_effects(player) == []
    assert player.attributes.strength == 0


def test_late_expiry_check_still_reverses_exactly_once() -> None:
    player = _player_with("Agility Potion")
    player.attributes.agility = 4
    use_item(player, "Agility Potion")

    player.turn = 7
    expire_effects(player)
    expire_effects(player)

    assert player.attributes.agility == 4


def test_stacked_potions_respect_the_attribute_cap() -> None:
    player = _player_with("Strength Potion", "Strength Potion")
    player.attributes.strength = 8

    use_item(player, "Strength Potion")
    use_item(player, "Strength Potion")

    assert player.attributes.strength == 10
    assert [effect.applied for effect in player.active_effects] == [
        {"strength": 2},
        {"strength": 0},
    ]

    player.turn = 2
    expire_effects(player)
    assert player.attributes.strength == 8


def test_health_potion_heals_and_is_consumed() -> None:
    player = _player_with("Health Potion")
    player.health = 27

    details = use_item(player, "Health Potion")

    assert player.health == 30
    assert details["applied"] == {"health": 3}
    assert player.inventory == []
    assert player.active_effects == []


def test_health_potion_kept_at_max_health() -> None:
    player = _player_with("Health Potion")

    with pytest.raises(ActionError, match="already at max health"):
        use_item(player, "Health Potion")

    assert player.inventory_labels() == ["Health Potion"]


def test_use_takes_first_matching_item() -> None:
    player = _player_with("Health Potion", "Intellect Potion", "Intellect Potion")

    use_item(player, "Intellect Potion")

    assert player.inventory_labels() == ["Health Potion", "Intellect Potion"]
    assert player.attributes.intellect == 2


def test_missing_item_is_reported_without_changes() -> None:
    player = _player_with("Health Potion")
    player.health = 10

    with pytest.raises(ActionError, match="do not have any Strength Potion"):
        use_item(player, "Strength Potion")

    assert player.health == 10
    assert player.inventory_labels() == ["Health Potion"]
