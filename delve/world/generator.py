"""
project: Delve
module: world/generator.py
License: MIT

Level generator (room chain, population, stairs)

Phases, in order:
    * Reset: all-wall grid, fresh registry holding only the carried-over player.
    * Up to ``max_rooms`` proposals: random size and position, rejected when
      touching any accepted room.
    * Each accepted room is carved and populated; the first one receives the
      player, every later one is tunnelled to the room accepted just before it.
    * Stairs go to the center of the last accepted room.

Rooms form a linear chain: room N is connected to room N-1 only.

Public contract:
    LevelGenerator(config, rng=None, seed=None).run(registry, depth) -> Level
    make_level(registry, depth, config=None, rng=None, seed=None) -> Level

``Level.seed`` is the seed that built the RNG stream, or None when the
caller injected a stream without naming its seed.
"""

from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..config import LevelConfig
from ..errors import ConfigurationError
from ..logging_utils import get_logger
from ..models.catalog import STAIRS_COLOR, STAIRS_GLYPH, STAIRS_NAME
from ..models.entities import Entity
from ..models.registry import EntityRegistry
from ..services.population import populate_room
from .grid import Grid
from .metrics import init_metrics
from .rooms import Rect, carve_room, overlaps_any, propose_room
from .tunnels import connect_centers


@dataclass
class Level:
    grid: Grid
    rooms: List[Rect]
    entities: EntityRegistry
    stairs_id: int
    depth: int
    seed: Optional[int] = None
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def player(self) -> Entity:
        return self.entities.player

    @property
    def stairs(self) -> Entity:
        return self.entities.get(self.stairs_id)


class LevelGenerator:
    def __init__(
        self,
        config: LevelConfig | None = None,
        rng: random.Random | None = None,
        seed: Optional[int] = None,
    ):
        """Use ``rng`` when given; ``seed`` then only labels it and may be None.

        Without ``rng`` a stream is built from ``seed``, else ``config.seed``, else a drawn seed.
        """
        self.config = (config or LevelConfig()).validate()
        if rng is None:
            if seed is None:
                seed = self.config.seed
            if seed is None:
                seed = random.randint(0, 2**31 - 1)
            rng = random.Random(seed)
        self.seed = seed
        self.rng = rng

    def run(self, registry: EntityRegistry, depth: int) -> Level:
        log = get_logger("delve.generator").bind(depth=depth, seed=self.seed)
        if depth < 1:
            log.error(event="generation_failed", reason="bad_depth")
            raise ConfigurationError(f"dungeon depth must be positive, got {depth}", code="depth")
        cfg = self.config
        start = time.perf_counter()
        metrics = init_metrics() if cfg.enable_metrics else None

        # Reset. carry_over() raises InvariantError before anything is touched if the player is missing.
        entities = registry.carry_over()
        player = entities.player
        grid = Grid(cfg.width, cfg.height)
        rooms: List[Rect] = []

        for _ in range(cfg.max_rooms):
            new_room = propose_room(cfg, self.rng)
            if metrics is not None:
                metrics["rooms_attempted"] += 1
            if overlaps_any(new_room, rooms):
                log.debug(event="room_rejected", x1=new_room.x1, y1=new_room.y1, x2=new_room.x2, y2=new_room.y2)
                if metrics is not None:
                    metrics["rooms_rejected"] += 1
                continue
            carve_room(grid, new_room)
            populate_room(grid, entities, new_room, depth, self.rng, metrics)
            new_x, new_y = new_room.center
            if not rooms:
                # first room: level entry point
                player.set_pos(new_x, new_y)
            else:
                connect_centers(grid, rooms[-1].center, (new_x, new_y), self.rng)
            rooms.append(new_room)

        if not rooms:
            log.error(event="generation_failed", reason="no_rooms", max_rooms=cfg.max_rooms)
            raise ConfigurationError(
                f"no room was accepted out of {cfg.max_rooms} attempts; check room size and budget settings",
                code="no_rooms",
            )

        last_x, last_y = rooms[-1].center
        stairs = Entity(last_x, last_y, STAIRS_NAME, False, STAIRS_GLYPH, STAIRS_COLOR)
        stairs.always_visible = True
        stairs_id = entities.add(stairs)

        level = Level(grid, rooms, entities, stairs_id, depth, seed=self.seed)
        if metrics is not None:
            metrics["rooms_accepted"] = len(rooms)
            metrics["tiles_empty"] = grid.count_empty()
            metrics["runtime_ms"] = int((time.perf_counter() - start) * 1000)
            level.metrics = metrics
        log.info(
            event="level_generated",
            rooms=len(rooms),
            entities=len(entities),
        )
        return level


def make_level(
    registry: EntityRegistry,
    depth: int,
    config: LevelConfig | None = None,
    rng: random.Random | None = None,
    seed: Optional[int] = None,
) -> Level:
    return LevelGenerator(config, rng, seed).run(registry, depth)


__all__ = ["Level", "LevelGenerator", "make_level"]
