"""
project: Delve
module: __init__.py
License: MIT

Single-level dungeon generation for a tile-based roguelike.

Builds a wall-filled tile grid, carves a chain of non-overlapping rooms joined
by L-shaped tunnels, places the player in the first room, fills rooms with
depth-scaled monsters and items, and drops the stairs in the last room.
Configuration comes from ``LevelConfig`` (defaults, ``DELVE_*`` environment
variables, optionally supplied through a local ``.env`` file).
"""

from dotenv import load_dotenv

# Load .env if present so DELVE_* settings can be supplied without exporting shell variables.
load_dotenv()

from .config import LevelConfig  # noqa: E402
from .errors import ConfigurationError, GenerationError, InvariantError  # noqa: E402
from .models import Entity, EntityRegistry, new_player  # noqa: E402
from .services.scaling import LevelScaleTable, value_at  # noqa: E402
from .services.selection import WeightedChoice  # noqa: E402
from .session import GameSession  # noqa: E402
from .world import Grid, Rect, is_blocked  # noqa: E402
from .world.generator import Level, LevelGenerator, make_level  # noqa: E402

__version__ = "0.1.0"

__all__ = [
    "LevelConfig",
    "ConfigurationError",
    "GenerationError",
    "InvariantError",
    "Entity",
    "EntityRegistry",
    "new_player",
    "LevelScaleTable",
    "value_at",
    "WeightedChoice",
    "GameSession",
    "Grid",
    "Rect",
    "is_blocked",
    "Level",
    "LevelGenerator",
    "make_level",
]
