"""Map-side building blocks: tiles, grid, rooms and tunnels.

The level generator lives in ``delve.world.generator`` and is re-exported from
the top-level ``delve`` package.
"""

from .grid import Grid, is_blocked
from .rooms import Rect, carve_room
from .tiles import Tile, empty, wall
from .tunnels import carve_h_tunnel, carve_v_tunnel, connect_centers  # noqa: F401

__all__ = [
    "Grid",
    "is_blocked",
    "Rect",
    "carve_room",
    "Tile",
    "empty",
    "wall",
    "carve_h_tunnel",
    "carve_v_tunnel",
    "connect_centers",
]
