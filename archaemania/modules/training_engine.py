"""Paid attribute training."""

from __future__ import annotations

from archaemania.constants import ATTRIBUTE_NAMES
from archaemania.models import ActionError, Player
from archaemania.modules.player_profile import attribute_limit, balance_rules
from archaemania.utils import label_for


def training_terms() -> tuple[int, int]:
    """Return ``(cost, increment)`` for one training session."""
    rules = balance_rules()["training"]
    return int(rules["cost"]), int(rules["increment"])


def train(player: Player, stat: str) -> dict[str, int | str | list[str]]:
    """Spend gold to raise *stat*, returning details.

    Refused when gold is short, or when the raised value would reach or
    exceed the stat's limit.
    """
    if stat not in ATTRIBUTE_NAMES:
        raise ActionError(f"Unknown attribute: {stat}")

    cost, increment = training_terms()
    if player.gold < cost:
        raise ActionError("You do not have enough gold to train")

    current = player.attributes.get(stat)
    if current + increment >= attribute_limit(stat):
        raise ActionError(f"{label_for(stat)} is already at maximum.")

    player.attributes.set(stat, current + increment)
    player.gold -= cost

    return {
        "stat": stat,
        "old_value": current,
        "new_value": current + increment,
        "cost": cost,
        "messages": [f"{player.name} trained {stat}."],
    }
