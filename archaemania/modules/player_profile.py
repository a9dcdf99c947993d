"""Player creation and new-game setup.

Handles validated player creation with starting health, gold, attributes and
the default weapon taken from ``rules/game_balance.json``.
"""

from __future__ import annotations

from typing import Any, Sequence

from archaemania.constants import ATTRIBUTE_NAMES, TURN_ADVANCE_MODES
from archaemania.models import Attributes, GameState, Player
from archaemania.modules.item_catalog import default_weapon
from archaemania.rules_registry import load_rule_set


def balance_rules() -> dict[str, Any]:
    return load_rule_set("game_balance")


def max_health() -> int:
    return int(balance_rules()["max_health"])


def attribute_limit(name: str) -> int:
    limits = balance_rules()["attribute_limits"]
    if name not in limits:
        raise ValueError(f"No limit configured for attribute: {name}")
    return int(limits[name])


def create_player(name: str) -> Player:
    """Create a player at full health with starting gold and bare hands."""
    normalized_name = name.strip()
    if not normalized_name:
        raise ValueError("Name is required.")

    rules = balance_rules()
    starting = int(rules.get("starting_attribute", 0))
    attributes = Attributes.from_dict({key: starting for key in ATTRIBUTE_NAMES})

    return Player(
        name=normalized_name,
        health=int(rules["max_health"]),
        gold=max(0, int(rules["starting_gold"])),
        weapon=default_weapon(),
        attributes=attributes,
    )


def new_game(
    names: Sequence[str] | None = None,
    *,
    turn_advance: str | None = None,
) -> GameState:
    """Create a two-player game state.

    Player names default to ``default_player_names`` and the turn clock to
    ``turn_advance`` from the balance rules.
    """
    rules = balance_rules()
    chosen_names = list(names) if names is not None else list(rules["default_player_names"])
    if len(chosen_names) != 2:
        raise ValueError("Exactly two player names are required.")
    if chosen_names[0].strip() == chosen_names[1].strip():
        raise ValueError("Player names must be different.")

    mode = turn_advance or str(rules.get("turn_advance", "action"))
    if mode not in TURN_ADVANCE_MODES:
        raise ValueError(f"Unknown turn advance mode: {mode}")

    return GameState(
        players=[create_player(name) for name in chosen_names],
        turn_advance=mode,
    )
