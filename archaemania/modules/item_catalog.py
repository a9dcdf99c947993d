"""Weapon and consumable catalog.

Builds fresh ``Weapon`` / ``Consumable`` instances and purchase requirement
sets from ``rules/item_catalog.json``.  Catalog order is the menu order used
by the console and GUI front-ends.
"""

from __future__ import annotations

from typing import Any

from archaemania.constants import ATTRIBUTE_NAMES, EFFECT_KEYS
from archaemania.models import ActionError, Consumable, RequirementSet, Weapon
from archaemania.rules_registry import load_rule_set


# ---------------------------------------------------------------------------
# Rules access
# ---------------------------------------------------------------------------

def _catalog_rules() -> dict[str, Any]:
    return load_rule_set("item_catalog")


def _weapon_entries() -> dict[str, dict[str, Any]]:
    return {str(entry["type"]): entry for entry in _catalog_rules()["weapons"]}


def _consumable_entries() -> dict[str, dict[str, Any]]:
    return {str(entry["type"]): entry for entry in _catalog_rules()["consumables"]}


def _weapon_from_entry(entry: dict[str, Any]) -> Weapon:
    damage = tuple(int(value) for value in entry["damage"])
    if len(damage) not in (1, 2) or damage[0] > damage[-1]:
        raise ValueError(f"Invalid damage range for {entry['type']}: {entry['damage']}")
    return Weapon(
        weapon_type=str(entry["type"]),
        damage=damage,
        cost=int(entry.get("cost", 0)),
        requirements={str(k): int(v) for k, v in entry.get("requirements", {}).items()},
    )


# ---------------------------------------------------------------------------
# Listings
# ---------------------------------------------------------------------------

def weapon_types() -> list[str]:
    """Purchasable weapon types in menu order."""
    return [str(entry["type"]) for entry in _catalog_rules()["weapons"]]


def consumable_types() -> list[str]:
    """Consumable types in menu order."""
    return [str(entry["type"]) for entry in _catalog_rules()["consumables"]]


def is_weapon(item_type: str) -> bool:
    return item_type in _weapon_entries()


def is_consumable(item_type: str) -> bool:
    return item_type in _consumable_entries()


# ---------------------------------------------------------------------------
# Factories
# ---------------------------------------------------------------------------

def default_weapon() -> Weapon:
    return _weapon_from_entry(_catalog_rules()["default_weapon"])


def create_weapon(weapon_type: str) -> Weapon:
    entries = _weapon_entries()
    if weapon_type not in entries:
        raise ActionError(f"Unknown weapon: {weapon_type}")
    return _weapon_from_entry(entries[weapon_type])


def create_consumable(consumable_type: str) -> Consumable:
    """Return a new, unused consumable of *consumable_type*."""
    entries = _consumable_entries()
    if consumable_type not in entries:
        raise ActionError(f"Unknown consumable: {consumable_type}")
    entry = entries[consumable_type]
    effects = {str(k): int(v) for k, v in entry.get("effects", {}).items()}
    for key in effects:
        if key not in EFFECT_KEYS:
            raise ValueError(f"Unknown effect '{key}' on {consumable_type}")
    return Consumable(
        consumable_type=consumable_type,
        cost=int(entry.get("cost", 0)),
        duration=max(0, int(entry.get("duration", 0))),
        effects=effects,
    )


def requirement_set(item_type: str) -> RequirementSet:
    """Return the gold cost and attribute minimums for *item_type*.

    Raises ``ActionError`` for item types that are not in the catalog.
    """
    entry = _weapon_entries().get(item_type) or _consumable_entries().get(item_type)
    if entry is None:
        raise ActionError("Invalid item type!")
    requirements = entry.get("requirements", {})
    attributes = tuple(
        (name, int(requirements[name])) for name in ATTRIBUTE_NAMES if name in requirements
    )
    unknown = set(requirements) - set(ATTRIBUTE_NAMES)
    if unknown:
        raise ValueError(f"Unknown requirement type for {item_type}: {sorted(unknown)}")
    return RequirementSet(item_type=item_type, gold=int(entry.get("cost", 0)), attributes=attributes)
