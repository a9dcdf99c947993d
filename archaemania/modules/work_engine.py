"""Working for gold."""

from __future__ import annotations

import random

from archaemania.models import Player
from archaemania.modules.player_profile import balance_rules


def work_range() -> tuple[int, int]:
    rules = balance_rules()["work"]
    low = int(rules["min_gold"])
    high = int(rules["max_gold"])
    if low < 0 or low > high:
        raise ValueError(f"Invalid work range: {low}-{high}")
    return low, high


def work(player: Player, *, rng: random.Random | None = None) -> dict[str, int | list[str]]:
    """Add a uniform random amount of gold within the configured work range."""
    randomizer = rng or random.Random()
    low, high = work_range()
    earned = randomizer.randint(low, high)
    player.gold += earned
    return {
        "earned": earned,
        "gold": player.gold,
        "messages": [f"{player.name} worked and earned {earned} gold"],
    }
