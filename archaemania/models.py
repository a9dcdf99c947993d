from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from archaemania.constants import ATTRIBUTE_NAMES, TURN_ADVANCE_ACTION


class ActionError(ValueError):
    """Raised when a player action cannot be carried out (resources, caps, items)."""


@dataclass
class Attributes:
    strength: int = 0
    intellect: int = 0
    agility: int = 0

    def get(self, name: str) -> int:
        if name not in ATTRIBUTE_NAMES:
            raise ActionError(f"Unknown attribute: {name}")
        return int(getattr(self, name))

    def set(self, name: str, value: int) -> None:
        if name not in ATTRIBUTE_NAMES:
            raise ActionError(f"Unknown attribute: {name}")
        setattr(self, name, int(value))

    def to_dict(self) -> dict[str, int]:
        return {
            "strength": self.strength,
            "intellect": self.intellect,
            "agility": self.agility,
        }

    @classmethod
    def from_dict(cls, payload: dict[str, Any]) -> "Attributes":
        return cls(
            strength=int(payload.get("strength", 0)),
            intellect=int(payload.get("intellect", 0)),
            agility=int(payload.get("agility", 0)),
        )


@dataclass
class Weapon:
    weapon_type: str
    damage: tuple[int, ...]
    cost: int = 0
    requirements: dict[str, int] = field(default_factory=dict)

    @property
    def is_fixed(self) -> bool:
        return len(self.damage) == 1 or self.damage[0] == self.damage[-1]

    @property
    def damage_range(self) -> tuple[int, int]:
        return int(self.damage[0]), int(self.damage[-1])

    def describe(self) -> str:
        low, high = self.damage_range
        if self.is_fixed:
            return f"{self.weapon_type} ({low} dmg)"
        return f"{self.weapon_type} ({low}-{high} dmg)"


@dataclass
class Consumable:
    consumable_type: str
    cost: int
    duration: int
    effects: dict[str, int] = field(default_factory=dict)
    activated_turn: int | None = None
    applied: dict[str, int] = field(default_factory=dict)

    @property
    def is_instant(self) -> bool:
        return self.duration <= 0

    def expires_at(self) -> int | None:
        """Turn on which this effect is reversed, or ``None`` if never activated."""
        if self.activated_turn is None or self.is_instant:
            return None
        return self.activated_turn + self.duration - 1


@dataclass(frozen=True)
class RequirementSet:
    """Gold and minimum attribute values needed to purchase one item type."""

    item_type: str
    gold: int
    attributes: tuple[tuple[str, int], ...] = ()


@dataclass
class Player:
    name: str
    health: int
    gold: int
    weapon: Weapon
    attributes: Attributes = field(default_factory=Attributes)
    turn: int = 0
    inventory: list[Consumable] = field(default_factory=list)
    active_effects: list[Consumable] = field(default_factory=list)

    @property
    def is_defeated(self) -> bool:
        return self.health <= 0

    def inventory_labels(self) -> list[str]:
        return [item.consumable_type for item in self.inventory]


@dataclass
class GameState:
    players: list[Player]
    active_index: int = 0
    turn_advance: str = TURN_ADVANCE_ACTION
    winner: str | None = None
    exited_by: str | None = None
    log: list[str] = field(default_factory=list)

    @property
    def active_player(self) -> Player:
        return self.players[self.active_index]

    @property
    def waiting_player(self) -> Player:
        return self.players[1 - self.active_index]

    @property
    def turn(self) -> int:
        return self.players[0].turn

    @property
    def is_over(self) -> bool:
        return self.winner is not None


@dataclass(frozen=True)
class TurnAction:
    kind: str
    target: str | None = None


@dataclass
class TurnOutcome:
    player: str
    action: TurnAction
    turn: int
    messages: list[str] = field(default_factory=list)
    succeeded: bool = True
    game_over: bool = False
