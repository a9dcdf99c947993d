"""Shared utility helpers used across archaemania modules.

Small clamping primitives for health, gold and attribute bounds.
"""

from __future__ import annotations


def clamp_int(value: int, minimum: int, maximum: int) -> int:
    """Clamp *value* to the inclusive ``[minimum, maximum]`` range."""
    return max(minimum, min(maximum, int(value)))


def label_for(key: str) -> str:
    """Return a menu label for a snake-case rules key (``"intellect"`` -> ``"Intellect"``)."""
    return key.replace("_", " ").title()
