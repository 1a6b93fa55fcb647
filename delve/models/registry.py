"""Session-owned entity registry.

Entities are keyed by a stable integer id handed out on insertion. The player
is tracked by an explicit ``player_id`` instead of by list position, and a
new level starts from ``carry_over()``: a fresh registry holding only the
player under its existing id.
"""
from __future__ import annotations

from typing import Dict, Iterator, Optional

from ..errors import InvariantError
from .entities import Entity


class EntityRegistry:
    def __init__(self, player: Optional[Entity] = None, *, next_id: int = 1):
        self._entities: Dict[int, Entity] = {}
        self._next_id = next_id
        self.player_id: Optional[int] = None
        if player is not None:
            self.player_id = self.add(player)

    def add(self, entity: Entity) -> int:
        eid = self._next_id
        self._next_id += 1
        self._entities[eid] = entity
        return eid

    def get(self, eid: int) -> Entity:
        return self._entities[eid]

    def remove(self, eid: int) -> Entity:
        if eid == self.player_id:
            raise InvariantError("the player cannot be removed from the registry", code="player_removed")
        return self._entities.pop(eid)

    @property
    def player(self) -> Entity:
        if self.player_id is None or self.player_id not in self._entities:
            raise InvariantError("registry has no player entity", code="player_missing")
        return self._entities[self.player_id]

    def carry_over(self) -> "EntityRegistry":
        """Return a new registry containing only the player, same id and same object."""
        player = self.player
        fresh = EntityRegistry(next_id=self._next_id)
        fresh._entities[self.player_id] = player
        fresh.player_id = self.player_id
        return fresh

    def __iter__(self) -> Iterator[Entity]:
        return iter(self._entities.values())

    def __len__(self) -> int:
        return len(self._entities)

    def __contains__(self, eid: object) -> bool:
        return eid in self._entities


__all__ = ["EntityRegistry"]
