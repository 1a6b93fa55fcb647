"""Monster spawn selection & placement for a single room.

Steps per room:
  1. Look up the per-room monster cap for the depth and roll a count in [0, cap].
  2. For each slot roll an interior point; an occupied point is skipped, not retried.
  3. Pick the species from the depth-weighted table and append the monster.

Stateless apart from the RNG handed in by the caller.
"""

from __future__ import annotations

import random
from typing import Dict, List, Optional

from ..logging_utils import get_logger
from ..models.catalog import MAX_MONSTERS_PER_ROOM, MONSTERS, MonsterTemplate
from ..models.entities import Entity, Fighter
from ..models.registry import EntityRegistry
from ..world.grid import Grid, is_blocked
from ..world.rooms import Rect
from .selection import WeightedChoice

log = get_logger("delve.spawn")


def monster_table(depth: int, catalog: Optional[Dict[str, MonsterTemplate]] = None) -> WeightedChoice:
    catalog = MONSTERS if catalog is None else catalog
    return WeightedChoice((tpl, tpl.weight.value_at(depth)) for tpl in catalog.values())


def build_monster(tpl: MonsterTemplate, x: int, y: int) -> Entity:
    monster = Entity(x, y, tpl.name, True, tpl.glyph, tpl.color)
    monster.fighter = Fighter(
        base_max_hp=tpl.max_hp,
        hp=tpl.max_hp,
        base_defense=tpl.defense,
        base_power=tpl.power,
        on_death=tpl.on_death,
        xp=tpl.xp,
    )
    monster.ai = tpl.ai
    monster.alive = True
    return monster


def spawn_monsters(
    grid: Grid,
    registry: EntityRegistry,
    room: Rect,
    depth: int,
    rng: random.Random,
    metrics: Optional[dict] = None,
) -> List[int]:
    """Place up to the depth's cap of monsters in ``room``; return the new entity ids."""
    table = monster_table(depth)
    cap = MAX_MONSTERS_PER_ROOM.value_at(depth)
    count = rng.randint(0, cap)
    placed: List[int] = []
    for _ in range(count):
        x = rng.randrange(room.x1 + 1, room.x2)
        y = rng.randrange(room.y1 + 1, room.y2)
        if is_blocked(grid, registry, x, y):
            log.debug(event="placement_miss", kind="monster", x=x, y=y)
            if metrics is not None:
                metrics["placement_misses"] += 1
            continue
        tpl = table.choose(rng)
        placed.append(registry.add(build_monster(tpl, x, y)))
    if metrics is not None:
        metrics["monsters_rolled"] += count
        metrics["monsters_placed"] += len(placed)
    return placed


__all__ = ["monster_table", "build_monster", "spawn_monsters"]
