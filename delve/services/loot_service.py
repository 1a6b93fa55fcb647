"""Item placement for a single room.

Mirrors ``spawn_service``: roll a count against the per-room item cap, roll a
point per slot, skip occupied points, and pick the item kind from the
depth-weighted table. Items never block and stay visible once seen
(``always_visible``). Equipment kinds get an unequipped ``Equipment`` record.
"""
from __future__ import annotations

import random
from typing import Dict, List, Optional

from ..logging_utils import get_logger
from ..models.catalog import ITEMS, MAX_ITEMS_PER_ROOM, ItemTemplate
from ..models.entities import Entity, Equipment, ItemKind
from ..models.registry import EntityRegistry
from ..world.grid import Grid, is_blocked
from ..world.rooms import Rect
from .selection import WeightedChoice

log = get_logger("delve.loot")


def item_table(depth: int, catalog: Optional[Dict[ItemKind, ItemTemplate]] = None) -> WeightedChoice:
    catalog = ITEMS if catalog is None else catalog
    return WeightedChoice((tpl, tpl.weight.value_at(depth)) for tpl in catalog.values())


def build_item(tpl: ItemTemplate, x: int, y: int) -> Entity:
    item = Entity(x, y, tpl.name, False, tpl.glyph, tpl.color, always_visible=True)
    item.item = tpl.kind
    if tpl.equipment is not None:
        eq = tpl.equipment
        item.equipment = Equipment(
            slot=eq.slot,
            equipped=False,
            max_hp_bonus=eq.max_hp_bonus,
            power_bonus=eq.power_bonus,
            defense_bonus=eq.defense_bonus,
        )
    return item


def place_items(
    grid: Grid,
    registry: EntityRegistry,
    room: Rect,
    depth: int,
    rng: random.Random,
    metrics: Optional[dict] = None,
) -> List[int]:
    table = item_table(depth)
    cap = MAX_ITEMS_PER_ROOM.value_at(depth)
    count = rng.randint(0, cap)
    placed: List[int] = []
    for _ in range(count):
        x = rng.randrange(room.x1 + 1, room.x2)
        y = rng.randrange(room.y1 + 1, room.y2)
        # only place it if the tile is not blocked
        if is_blocked(grid, registry, x, y):
            log.debug(event="placement_miss", kind="item", x=x, y=y)
            if metrics is not None:
                metrics["placement_misses"] += 1
            continue
        tpl = table.choose(rng)
        placed.append(registry.add(build_item(tpl, x, y)))
    if metrics is not None:
        metrics["items_rolled"] += count
        metrics["items_placed"] += len(placed)
    return placed


__all__ = ["item_table", "build_item", "place_items"]
