import pytest

from archaemania.models import ActionError
from archaemania.modules.player_profile import create_player
from archaemania.modules.training_engine import train, training_terms


def test_training_spends_gold_and_raises_stat() -> None:
    player = create_player("Trainee")

    details = train(player, "agility")

    assert training_terms() == (5, 2)
    assert details["old_value"] == 0
    assert details["new_value"] == 2
    assert player.attributes.agility == 2
    assert player.gold == 15


def test_repeated_training_stops_below_the_cap() -> None:
    player = create_player("Trainee")
    player.gold = 100

    for _ in range(10):
        try:
            train(player, "strength")
        except ActionError as exc:
            assert "Strength is already at maximum" in str(exc)
        assert player.attributes.strength <= 10

    assert player.attributes.strength == 8
    assert player.gold == 80


def test_training_refused_without_gold() -> None:
    player = create_player("Trainee")
    player.gold = 4

    with pytest.raises(ActionError, match="not have enough gold"):
        train(player, "intellect")

    assert player.attributes.intellect == 0
    assert player.gold == 4


def test_training_unknown_stat_is_reported() -> None:
    player = create_player("Trainee")

    with pytest.raises(ActionError, match="Unknown attribute"):
        train(player, "charisma")
    assert player.gold == 20
