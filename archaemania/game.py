from __future__ import annotations

import argparse
import random
from typing import Sequence

from archaemania.constants import (
    ACTION_ATTACK,
    ACTION_BUY,
    ACTION_EXIT,
    ACTION_TRAIN,
    ACTION_USE,
    ACTION_WORK,
    ATTRIBUTE_NAMES,
    TURN_ADVANCE_MODES,
)
from archaemania.models import GameState, Player, TurnAction
from archaemania.modules.item_catalog import (
    consumable_types,
    create_consumable,
    create_weapon,
    requirement_set,
    weapon_types,
)
from archaemania.modules.player_profile import max_health, new_game
from archaemania.modules.turn_engine import begin_turn, take_turn
from archaemania.utils import label_for


def _prompt_int(prompt: str, minimum: int, maximum: int) -> int:
    while True:
        raw = input(prompt).strip()
        try:
            value = int(raw)
        except ValueError:
            print("Invalid Choice. Please enter a whole number.")
            continue

        if minimum <= value <= maximum:
            return value
        print(f"Invalid Choice. Value must be between {minimum} and {maximum}.")


def _pick(prompt: str, labels: Sequence[str]) -> int:
    """Print a numbered menu and return the zero-based index picked."""
    for idx, label in enumerate(labels, start=1):
        print(f"{idx}. {label}")
    return _prompt_int(prompt, 1, len(labels)) - 1


def _requirements_label(item_type: str) -> str:
    requirements = requirement_set(item_type)
    parts = [f"{requirements.gold} gold"]
    parts.extend(f"{stat} {minimum}" for stat, minimum in requirements.attributes)
    return ", ".join(parts)


def _weapon_labels() -> list[str]:
    return [
        f"{create_weapon(weapon_type).describe()} [{_requirements_label(weapon_type)}]"
        for weapon_type in weapon_types()
    ]


def _consumable_labels(with_cost: bool) -> list[str]:
    labels = []
    for consumable_type in consumable_types():
        if not with_cost:
            labels.append(consumable_type)
            continue
        item = create_consumable(consumable_type)
        effects = ", ".join(f"{key} {delta:+d}" for key, delta in item.effects.items())
        duration = "instant" if item.is_instant else f"{item.duration} turns"
        labels.append(f"{consumable_type} ({effects}, {duration}) [{item.cost} gold]")
    return labels


def _render_player(player: Player) -> None:
    attributes = player.attributes
    print(f"\nName: {player.name}")
    print(f"Health: {player.health}/{max_health()}")
    print(f"Gold: {player.gold}")
    print(f"Agility: {attributes.agility}")
    print(f"Strength: {attributes.strength}")
    print(f"Intellect: {attributes.intellect}")
    print(f"Weapon: {player.weapon.describe()}")
    inventory = ", ".join(player.inventory_labels()) or "none"
    print(f"Consumables: {inventory}")
    if player.active_effects:
        active = ", ".join(
            f"{effect.consumable_type} (until turn {effect.expires_at()})"
            for effect in player.active_effects
        )
        print(f"Active Effects: {active}")


def _choose_buy() -> TurnAction:
    print("What would you like to buy?")
    category = _pick("Choose category: ", ["Weapons", "Consumables"])
    if category == 0:
        print("What weapon would you like to buy?")
        choice = _pick("Choose weapon: ", _weapon_labels())
        return TurnAction(ACTION_BUY, weapon_types()[choice])

    print("What consumable would you like to buy?")
    choice = _pick("Choose consumable: ", _consumable_labels(with_cost=True))
    return TurnAction(ACTION_BUY, consumable_types()[choice])


def _choose_action(state: GameState) -> TurnAction:
    player = state.active_player
    print(f"\n{player.name}, what would you like to do?")
    choice = _pick("Choose action: ", ["Attack", "Buy", "Work", "Use", "Train", "Exit"])

    if choice == 0:
        return TurnAction(ACTION_ATTACK)
    if choice == 1:
        return _choose_buy()
    if choice == 2:
        return TurnAction(ACTION_WORK)
    if choice == 3:
        print("What consumable would you like to use?")
        item = _pick("Choose consumable: ", _consumable_labels(with_cost=False))
        return TurnAction(ACTION_USE, consumable_types()[item])
    if choice == 4:
        print("What stat would you like to train?")
        stat = _pick("Choose stat: ", [label_for(name) for name in ATTRIBUTE_NAMES])
        return TurnAction(ACTION_TRAIN, ATTRIBUTE_NAMES[stat])
    return TurnAction(ACTION_EXIT)


def run(
    names: Sequence[str] | None = None,
    *,
    rng: random.Random | None = None,
    turn_advance: str | None = None,
) -> GameState:
    """Play a full console match and return the finished state."""
    randomizer = rng or random.Random()
    state = new_game(names, turn_advance=turn_advance)

    print("Welcome to Archaemania\n")
    while not state.is_over:
        player = state.active_player
        print(f"\n=== Turn {player.turn} | {player.name} ===")
        for message in begin_turn(state):
            print(message)
        _render_player(player)

        try:
            action = _choose_action(state)
        except EOFError:
            print()
            action = TurnAction(ACTION_EXIT)

        outcome = take_turn(state, action, rng=randomizer)
        for message in outcome.messages:
            print(message)

    return state


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Two-player turn-based console combat.")
    parser.add_argument(
        "--names",
        nargs=2,
        metavar=("PLAYER1", "PLAYER2"),
        default=None,
        help="Player names (default: from rules/game_balance.json).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for damage and work rolls.",
    )
    parser.add_argument(
        "--turn-advance",
        choices=TURN_ADVANCE_MODES,
        default=None,
        help="Increment the turn clock per action or per round.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else None
    try:
        run(args.names, rng=rng, turn_advance=args.turn_advance)
    except ValueError as exc:
        raise SystemExit(str(exc)) from exc
    raise SystemExit(0)


if __name__ == "__main__":
    main()
