"""Purchases: requirement checks, weapon replacement and inventory stocking.

Every check runs before any mutation, so a refused purchase leaves the player
exactly as it was.
"""

from __future__ import annotations

from archaemania.models import ActionError, Player, RequirementSet
from archaemania.modules.item_catalog import (
    create_consumable,
    create_weapon,
    is_weapon,
    requirement_set,
)


def missing_requirements(player: Player, requirements: RequirementSet) -> list[str]:
    """Return a reason for every unmet requirement (attributes first, then gold)."""
    reasons: list[str] = []
    for stat, minimum in requirements.attributes:
        if player.attributes.get(stat) < minimum:
            reasons.append(f"Insufficient {stat} to buy {requirements.item_type}")
    if player.gold < requirements.gold:
        reasons.append(f"Insufficient gold to buy {requirements.item_type}")
    return reasons


def can_afford(player: Player, item_type: str) -> bool:
    try:
        return not missing_requirements(player, requirement_set(item_type))
    except ActionError:
        return False


def buy(player: Player, item_type: str) -> dict[str, int | str | list[str]]:
    """Buy *item_type* for *player*.

    Weapons replace the equipped weapon; consumables are appended to the
    inventory.  Raises ``ActionError`` naming the first unmet requirement.
    """
    requirements = requirement_set(item_type)
    reasons = missing_requirements(player, requirements)
    if reasons:
        raise ActionError(f"{reasons[0]}. Purchase failed!")

    if is_weapon(item_type):
        replaced = player.weapon.weapon_type
        player.weapon = create_weapon(item_type)
    else:
        replaced = ""
        player.inventory.append(create_consumable(item_type))

    player.gold -= requirements.gold

    messages = [f"{player.name} bought a {item_type}"]
    if replaced:
        messages.append(f"{replaced} was discarded")
    return {
        "item_type": item_type,
        "cost": requirements.gold,
        "gold": player.gold,
        "replaced": replaced,
        "messages": messages,
    }
