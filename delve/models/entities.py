"""Entity records populated by level generation.

An ``Entity`` is anything that sits on a map cell: the player, monsters, items
and the stairs. Capabilities are optional records attached to the entity;
generation only fills them in, combat/AI/inventory code interprets them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

Color = Tuple[int, int, int]


class DeathCallback(Enum):
    PLAYER = "player"
    MONSTER = "monster"


class Ai(Enum):
    BASIC = "basic"
    CONFUSED = "confused"


class ItemKind(Enum):
    HEAL = "heal"
    LIGHTNING = "lightning"
    FIREBALL = "fireball"
    CONFUSE = "confuse"
    SWORD = "sword"
    SHIELD = "shield"


class Slot(Enum):
    LEFT_HAND = "left hand"
    RIGHT_HAND = "right hand"
    HEAD = "head"


@dataclass
class Fighter:
    base_max_hp: int
    hp: int
    base_defense: int
    base_power: int
    on_death: DeathCallback
    xp: int


@dataclass
class Equipment:
    slot: Slot
    equipped: bool = False
    max_hp_bonus: int = 0
    power_bonus: int = 0
    defense_bonus: int = 0


@dataclass(eq=False)
class Entity:
    # compared by identity
    x: int
    y: int
    name: str
    blocks: bool
    glyph: str
    color: Color
    always_visible: bool = False
    alive: bool = False
    fighter: Optional[Fighter] = None
    ai: Optional[Ai] = None
    item: Optional[ItemKind] = None
    equipment: Optional[Equipment] = None

    @property
    def pos(self) -> Tuple[int, int]:
        return (self.x, self.y)

    def set_pos(self, x: int, y: int) -> None:
        self.x = x
        self.y = y


def new_player(name: str = "player") -> Entity:
    """Build a player entity at the origin; generation moves it to the first room."""
    return Entity(
        0,
        0,
        name,
        True,
        "@",
        (255, 255, 255),
        alive=True,
        fighter=Fighter(
            base_max_hp=100,
            hp=100,
            base_defense=1,
            base_power=2,
            on_death=DeathCallback.PLAYER,
            xp=0,
        ),
    )


__all__ = [
    "Color",
    "DeathCallback",
    "Ai",
    "ItemKind",
    "Slot",
    "Fighter",
    "Equipment",
    "Entity",
    "new_player",
]
