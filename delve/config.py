from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional

from .errors import ConfigurationError

# Environment key -> LevelConfig attribute
ENV_MAP = {
    "DELVE_MAP_WIDTH": "width",
    "DELVE_MAP_HEIGHT": "height",
    "DELVE_ROOM_MIN_SIZE": "room_min_size",
    "DELVE_ROOM_MAX_SIZE": "room_max_size",
    "DELVE_MAX_ROOMS": "max_rooms",
    "DELVE_SEED": "seed",
    "DELVE_ENABLE_GENERATION_METRICS": "enable_metrics",
}


@dataclass
class LevelConfig:
    width: int = 80
    height: int = 43
    room_min_size: int = 6
    room_max_size: int = 10
    max_rooms: int = 30
    seed: Optional[int] = None
    enable_metrics: bool = True

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None, **overrides) -> "LevelConfig":
        """Build a config from defaults, then DELVE_* environment values, then keyword overrides."""
        env = os.environ if environ is None else environ
        cfg = cls()
        for env_key, attr in ENV_MAP.items():
            if env_key not in env:
                continue
            raw = env.get(env_key, "").strip()
            if attr == "enable_metrics":
                cfg.enable_metrics = raw.lower() not in {"0", "false", "no", ""}
                continue
            if attr == "seed" and raw == "":
                cfg.seed = None
                continue
            try:
                setattr(cfg, attr, int(raw))
            except ValueError:
                raise ConfigurationError(f"{env_key} must be an integer, got {raw!r}", code="env") from None
        known = {f.name for f in fields(cls)}
        for key, value in overrides.items():
            if key not in known:
                raise ConfigurationError(f"unknown config option {key!r}", code="option")
            setattr(cfg, key, value)
        return cfg

    def validate(self) -> "LevelConfig":
        if self.width <= 0 or self.height <= 0:
            raise ConfigurationError(f"map size must be positive, got {self.width}x{self.height}", code="map_size")
        if self.room_min_size < 2:
            raise ConfigurationError("room_min_size must be at least 2 to leave an interior", code="room_size")
        if self.room_min_size > self.room_max_size:
            raise ConfigurationError(
                f"room_min_size {self.room_min_size} exceeds room_max_size {self.room_max_size}", code="room_size"
            )
        # A room must leave at least one valid top-left column/row.
        if self.room_max_size >= self.width or self.room_max_size >= self.height:
            raise ConfigurationError(
                f"room_max_size {self.room_max_size} does not fit a {self.width}x{self.height} map", code="room_size"
            )
        if self.max_rooms < 0:
            raise ConfigurationError("max_rooms must not be negative", code="room_budget")
        return self


__all__ = ["LevelConfig", "ENV_MAP"]
