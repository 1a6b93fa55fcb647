"""Reachability diagnostics for a generated level.

Flood fill from the player start over open tiles. Nothing is repaired here;
the room chain is the only connectivity mechanism and these helpers just
report whether it held.
"""
from __future__ import annotations

from collections import deque
from typing import Any, Dict, Set, Tuple

from .grid import Grid

Coord2D = Tuple[int, int]


def flood_reachable(grid: Grid, start: Coord2D) -> Set[Coord2D]:
    """Return the set of open tiles reachable from ``start`` (4-neighborhood)."""
    sx, sy = start
    if not grid.in_bounds(sx, sy) or grid.tile(sx, sy).blocked:
        return set()
    q = deque([start])
    visited = {start}
    while q:
        x, y = q.popleft()
        for dx, dy in ((1, 0), (-1, 0), (0, 1), (0, -1)):
            nx, ny = x + dx, y + dy
            if (nx, ny) in visited or not grid.in_bounds(nx, ny):
                continue
            if not grid.tiles[nx][ny].blocked:
                visited.add((nx, ny))
                q.append((nx, ny))
    return visited


def analyze(level) -> Dict[str, Any]:
    reachable = flood_reachable(level.grid, level.player.pos)
    unreachable = [i for i, room in enumerate(level.rooms) if room.center not in reachable]
    return {
        "unreachable_rooms": unreachable,
        "stairs_reachable": level.stairs.pos in reachable,
        "open_tiles": level.grid.count_empty(),
        "reachable_tiles": len(reachable),
    }


__all__ = ["flood_reachable", "analyze"]
