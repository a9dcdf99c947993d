"""Consumable use and timed-effect expiry.

Instant consumables (duration 0) apply once and are gone.  Timed consumables
apply their attribute deltas on use, move to the player's active effects
stamped with the current turn, and are reversed on the turn
``activated_turn + duration - 1`` (or the first expiry check after it).
Only the deltas actually applied after clamping are reversed, so attributes
stay inside their configured bounds.
"""

from __future__ import annotations

from archaemania.models import ActionError, Consumable, Player
from archaemania.modules.player_profile import attribute_limit, max_health
from archaemania.utils import clamp_int


def _apply_effects(player: Player, item: Consumable) -> dict[str, int]:
    applied: dict[str, int] = {}
    for key, delta in item.effects.items():
        if key == "health":
            before = player.health
            player.health = clamp_int(before + delta, 0, max_health())
            applied[key] = player.health - before
            continue
        before = player.attributes.get(key)
        player.attributes.set(key, clamp_int(before + delta, 0, attribute_limit(key)))
        applied[key] = player.attributes.get(key) - before
    return applied


def _find_in_inventory(player: Player, item_type: str) -> int | None:
    for index, item in enumerate(player.inventory):
        if item.consumable_type == item_type:
            return index
    return None


def use_item(player: Player, item_type: str) -> dict[str, int | str | list[str] | dict[str, int]]:
    """Consume the first *item_type* in the player's inventory.

    Raises ``ActionError`` if the item is missing, or if it only heals and the
    player is already at max health (the potion is kept).
    """
    index = _find_in_inventory(player, item_type)
    if index is None:
        raise ActionError(f"You do not have any {item_type} in your inventory")

    item = player.inventory[index]
    heals_only = set(item.effects) == {"health"}
    if heals_only and player.health >= max_health():
        raise ActionError("You are already at max health")

    del player.inventory[index]
    applied = _apply_effects(player, item)

    messages = [f"{player.name} used {item.consumable_type}"]
    if not item.is_instant:
        item.activated_turn = player.turn
        item.applied = applied
        player.active_effects.append(item)
        messages.append(f"{item.consumable_type} lasts until turn {item.expires_at()}")

    return {
        "item_type": item_type,
        "applied": applied,
        "health": player.health,
        "messages": messages,
    }


def expire_effects(player: Player) -> list[str]:
    """Reverse and drop every active effect that is due on the player's turn.

    Returns a message per expired effect.
    """
    remaining: list[Consumable] = []
    messages: list[str] = []
    for effect in player.active_effects:
        expiry = effect.expires_at()
        if expiry is None or player.turn < expiry:
            remaining.append(effect)
            continue

        # Health changes are permanent; attribute bonuses are temporary.
        for key, delta in effect.applied.items():
            if key == "health":
                continue
            current = player.attributes.get(key)
            player.attributes.set(key, clamp_int(current - delta, 0, attribute_limit(key)))
        messages.append(f"{player.name}'s {effect.consumable_type} wore off")

    player.active_effects = remaining
    return messages
