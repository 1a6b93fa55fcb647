from __future__ import annotations

import random
from typing import List, Optional, Tuple

from ..models.registry import EntityRegistry
from ..world.grid import Grid
from ..world.rooms import Rect
from .loot_service import place_items
from .spawn_service import spawn_monsters


def populate_room(
    grid: Grid,
    registry: EntityRegistry,
    room: Rect,
    depth: int,
    rng: random.Random,
    metrics: Optional[dict] = None,
) -> Tuple[List[int], List[int]]:
    """Fill a freshly carved room: monsters first, then items. Returns (monster_ids, item_ids)."""
    monsters = spawn_monsters(grid, registry, room, depth, rng, metrics)
    items = place_items(grid, registry, room, depth, rng, metrics)
    return monsters, items


__all__ = ["populate_room"]
