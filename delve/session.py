"""
project: Delve
module: session.py
License: MIT

Game session: owns the player, the depth counter, the RNG and the current
level. Each level gets a fresh entity registry; only the player record is
carried from one level to the next.
"""

from __future__ import annotations

import random
from typing import Optional

from .config import LevelConfig
from .logging_utils import get_logger
from .models.entities import Entity
from .models.registry import EntityRegistry
from .world.generator import Level, LevelGenerator

log = get_logger("delve.session")


class GameSession:
    def __init__(self, player: Entity, config: LevelConfig | None = None, seed: Optional[int] = None):
        self.config = config or LevelConfig.from_env()
        if seed is None:
            seed = self.config.seed
        if seed is None:
            seed = random.randint(0, 2**31 - 1)
        self.seed = seed
        # Session stream only draws per-level seeds; Level.seed rebuilds any one level.
        self.rng = random.Random(seed)
        self.entities = EntityRegistry(player)
        self.depth = 0
        self.level: Optional[Level] = None

    @property
    def player(self) -> Entity:
        return self.entities.player

    @property
    def stairs(self) -> Optional[Entity]:
        return self.level.stairs if self.level is not None else None

    def _generate(self, depth: int) -> Level:
        level_seed = self.rng.randint(0, 2**31 - 1)
        level = LevelGenerator(self.config, seed=level_seed).run(self.entities, depth)
        self.level = level
        self.entities = level.entities
        self.depth = depth
        return level

    def start(self) -> Level:
        log.info(event="session_start", seed=self.seed)
        return self._generate(1)

    def can_descend(self) -> bool:
        stairs = self.stairs
        return stairs is not None and self.player.pos == stairs.pos

    def descend(self) -> Level:
        """Advance one level deeper; everything but the player is left behind."""
        if self.level is None:
            return self.start()
        level = self._generate(self.depth + 1)
        log.info(event="level_descended", depth=self.depth, entities=len(self.entities))
        return level


__all__ = ["GameSession"]
