"""Shared game constants.

Centralises the string literals that are referenced by multiple modules so
they have a single source of truth.  Tunable numbers (costs, caps, ranges)
live in ``rules/game_balance.json`` and ``rules/item_catalog.json``.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Attributes
# ---------------------------------------------------------------------------
ATTRIBUTE_NAMES: tuple[str, ...] = ("strength", "intellect", "agility")
"""Trainable attributes, in training-menu order."""

EFFECT_KEYS: tuple[str, ...] = ("health",) + ATTRIBUTE_NAMES
"""Keys a consumable effect map may contain."""

# ---------------------------------------------------------------------------
# Item types
# ---------------------------------------------------------------------------
HEALTH_POTION: str = "Health Potion"

# ---------------------------------------------------------------------------
# Turn actions
# ---------------------------------------------------------------------------
ACTION_ATTACK: str = "attack"
ACTION_BUY: str = "buy"
ACTION_WORK: str = "work"
ACTION_USE: str = "use"
ACTION_TRAIN: str = "train"
ACTION_EXIT: str = "exit"

ACTION_KINDS: tuple[str, ...] = (
    ACTION_ATTACK,
    ACTION_BUY,
    ACTION_WORK,
    ACTION_USE,
    ACTION_TRAIN,
    ACTION_EXIT,
)
"""Top-level actions, in console-menu order."""

# ---------------------------------------------------------------------------
# Turn clock
# ---------------------------------------------------------------------------
TURN_ADVANCE_ACTION: str = "action"
"""Both turn counters increment after every single action."""

TURN_ADVANCE_ROUND: str = "round"
"""Both turn counters increment once both players have acted."""

TURN_ADVANCE_MODES: tuple[str, ...] = (TURN_ADVANCE_ACTION, TURN_ADVANCE_ROUND)
