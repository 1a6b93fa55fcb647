from .entities import (  # noqa: F401
    Ai,
    DeathCallback,
    Entity,
    Equipment,
    Fighter,
    ItemKind,
    Slot,
    new_player,
)
from .registry import EntityRegistry  # noqa: F401

__all__ = [
    "Ai",
    "DeathCallback",
    "Entity",
    "Equipment",
    "Fighter",
    "ItemKind",
    "Slot",
    "new_player",
    "EntityRegistry",
]
