import pytest

from archaemania.models import ActionError
from archaemania.modules.item_catalog import (
    consumable_types,
    create_consumable,
    create_weapon,
    default_weapon,
    is_consumable,
    is_weapon,
    requirement_set,
    weapon_types,
)


def test_catalog_lists_follow_menu_order() -> None:
    assert weapon_types() == ["Knife", "Sword", "Ninjaku", "Wand", "Gophermourne"]
    assert consumable_types() == [
        "Health Potion",
        "Strength Potion",
        "Agility Potion",
        "Intellect Potion",
    ]


def test_default_weapon_is_fixed_single_damage() -> None:
    weapon = default_weapon()

    assert weapon.weapon_type == "Bare Hands"
    assert weapon.is_fixed
    assert weapon.damage_range == (1, 1)


def test_create_weapon_reads_damage_range_and_requirements() -> None:
    sword = create_weapon("Sword")
    wand = create_weapon("Wand")

    assert sword.damage_range == (3, 5)
    assert not sword.is_fixed
    assert sword.requirements == {"strength": 2}
    assert wand.is_fixed
    assert wand.describe() == "Wand (3 dmg)"


def test_create_consumable_returns_fresh_unused_items() -> None:
    first = create_consumable("Strength Potion")
    second = create_consumable("Strength Potion")

    assert first is not second
    assert first.duration == 3
    assert first.effects == {"strength": 2}
    assert first.activated_turn is None
    assert create_consumable("Health Potion").is_instant


def test_requirement_set_lists_gold_and_attribute_minimums() -> None:
    sword = requirement_set("Sword")
    gophermourne = requirement_set("Gophermourne")
    potion = requirement_set("Health Potion")

    assert sword.gold == 35
    assert sword.attributes == (("strength", 2),)
    assert gophermourne.gold == 65
    assert dict(gophermourne.attributes) == {"strength": 2, "intellect": 2}
    assert potion.gold == 5
    assert potion.attributes == ()


def test_unknown_items_are_rejected() -> None:
    assert not is_weapon("Laser")
    assert not is_consumable("Laser")
    assert is_weapon("Knife")
    assert is_consumable("Agility Potion")

    with pytest.raises(ActionError, match="Invalid item type"):
        requirement_set("Laser")
    with pytest.raises(ActionError, match="Unknown weapon"):
        create_weapon("Health Potion")
    with pytest.raises(ActionError, match="Unknown consumable"):
        create_consumable("Knife")
