"""Weapon damage rolls and attack resolution."""

from __future__ import annotations

import random

from archaemania.models import Player, Weapon
from archaemania.modules.player_profile import max_health
from archaemania.utils import clamp_int


def roll_damage(weapon: Weapon, rng: random.Random | None = None) -> int:
    """Return the weapon's fixed damage or a uniform roll in ``[min, max]``."""
    low, high = weapon.damage_range
    if weapon.is_fixed:
        return low
    randomizer = rng or random.Random()
    return randomizer.randint(low, high)


def attack(
    attacker: Player,
    defender: Player,
    *,
    rng: random.Random | None = None,
) -> dict[str, int | bool | list[str]]:
    """Hit *defender* with the attacker's weapon, returning details.

    Health is clamped to ``[0, max_health]``; ``defeated`` is set once the
    defender reaches zero.
    """
    damage = max(0, roll_damage(attacker.weapon, rng=rng))
    before = defender.health
    defender.health = clamp_int(before - damage, 0, max_health())

    messages = [
        f"{attacker.name} attacked {defender.name} with {attacker.weapon.weapon_type}",
        f"{defender.name} now has {defender.health} health",
    ]
    defeated = defender.health <= 0
    if defeated:
        messages.append(f"{defender.name} has died and {attacker.name} has won the game!")

    return {
        "damage": damage,
        "health_lost": before - defender.health,
        "defeated": defeated,
        "messages": messages,
    }
