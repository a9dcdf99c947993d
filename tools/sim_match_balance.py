#!/usr/bin/env python3
"""Match balance simulation.

Plays seeded bot-vs-bot matches through the turn engine and reports whether
either seat has an edge, how long matches last, and which weapons the bots
end up buying.  The bot prefers the best affordable weapon, works when broke,
drinks a health potion when low, and otherwise attacks.
"""

from __future__ import annotations

import argparse
import random
import statistics
import sys
from collections import Counter
from dataclasses import dataclass
from pathlib import Path


def _bootstrap_project_path() -> None:
    root = Path(__file__).resolve().parents[1]
    candidate = str(root)
    if candidate not in sys.path:
        sys.path.insert(0, candidate)


_bootstrap_project_path()

from archaemania.constants import (
    ACTION_ATTACK,
    ACTION_BUY,
    ACTION_TRAIN,
    ACTION_USE,
    ACTION_WORK,
    ATTRIBUTE_NAMES,
    HEALTH_POTION,
)
from archaemania.models import GameState, TurnAction
from archaemania.modules.item_catalog import weapon_types
from archaemania.modules.player_profile import new_game
from archaemania.modules.shop import can_afford
from archaemania.modules.turn_engine import take_turn


@dataclass(frozen=True)
class MatchSample:
    winner_seat: int | None
    turns: int
    weapons_bought: tuple[str, ...]


def _bot_action(state: GameState, rng: random.Random) -> TurnAction:
    player = state.active_player
    if player.health <= 10 and HEALTH_POTION in player.inventory_labels():
        return TurnAction(ACTION_USE, HEALTH_POTION)

    # Catalog order roughly tracks weapon strength.
    for weapon_type in reversed(weapon_types()):
        if weapon_type != player.weapon.weapon_type and can_afford(player, weapon_type):
            return TurnAction(ACTION_BUY, weapon_type)

    roll = rng.random()
    if roll < 0.15 and player.gold >= 5:
        return TurnAction(ACTION_TRAIN, rng.choice(ATTRIBUTE_NAMES))
    if roll < 0.35:
        return TurnAction(ACTION_WORK)
    if roll < 0.40 and can_afford(player, HEALTH_POTION):
        return TurnAction(ACTION_BUY, HEALTH_POTION)
    return TurnAction(ACTION_ATTACK)


def simulate_match(seed: int, *, max_turns: int, turn_advance: str | None) -> MatchSample:
    rng = random.Random(seed)
    state = new_game(turn_advance=turn_advance)
    bought: list[str] = []
    actions = 0

    while not state.is_over and actions < max_turns:
        action = _bot_action(state, rng)
        outcome = take_turn(state, action, rng=rng)
        if action.kind == ACTION_BUY and outcome.succeeded and action.target in weapon_types():
            bought.append(str(action.target))
        actions += 1

    winner_seat = None
    if state.winner is not None:
        winner_seat = [player.name for player in state.players].index(state.winner)
    return MatchSample(winner_seat=winner_seat, turns=actions, weapons_bought=tuple(bought))


def summarize(samples: list[MatchSample]) -> dict[str, object]:
    decided = [sample for sample in samples if sample.winner_seat is not None]
    turns = [sample.turns for sample in samples]
    weapons = Counter(weapon for sample in samples for weapon in sample.weapons_bought)
    first_seat_wins = sum(1 for sample in decided if sample.winner_seat == 0)
    return {
        "matches": len(samples),
        "undecided": len(samples) - len(decided),
        "first_seat_win_pct": first_seat_wins / len(decided) if decided else 0.0,
        "mean_turns": statistics.mean(turns),
        "median_turns": statistics.median(turns),
        "weapons": weapons.most_common(),
    }


def _print_report(label: str, summary: dict[str, object]) -> None:
    print(f"\n== {label} ==")
    print(f"Matches: {summary['matches']} | Undecided (turn cap): {summary['undecided']}")
    print(f"First seat win rate: {float(summary['first_seat_win_pct']):.1%}")
    print(
        f"Actions per match: mean {float(summary['mean_turns']):.1f} | "
        f"median {float(summary['median_turns']):.1f}"
    )
    print("Weapons bought:")
    for weapon, count in summary["weapons"]:  # type: ignore[union-attr]
        print(f"  - {weapon}: {count}")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run bot-vs-bot match simulations.")
    parser.add_argument(
        "--matches",
        type=int,
        default=500,
        help="Number of deterministic seeds to play per turn-clock mode (default: 500).",
    )
    parser.add_argument(
        "--max-turns",
        type=int,
        default=400,
        help="Actions before a match is called undecided (default: 400).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    if args.matches < 10:
        raise SystemExit("--matches must be >= 10")
    if args.max_turns < 2:
        raise SystemExit("--max-turns must be >= 2")

    seeds = range(args.matches)
    for mode in ("action", "round"):
        samples = [
            simulate_match(seed, max_turns=args.max_turns, turn_advance=mode) for seed in seeds
        ]
        _print_report(f"Turn clock per {mode}", summarize(samples))


if __name__ == "__main__":
    main()
