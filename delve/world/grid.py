"""Tile grid and placement test.

The grid is column-major (``tiles[x][y]``) and starts fully walled. Carving
only ever swaps a wall for a fresh empty tile. Coordinates outside
``[0, width) x [0, height)`` raise ``IndexError``; negative indices are
rejected rather than wrapping like plain list indexing would.
"""
from __future__ import annotations

from typing import Iterable, List

from .tiles import FLOOR_GLYPH, WALL_GLYPH, Tile, empty, wall


class Grid:
    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.tiles: List[List[Tile]] = [[wall() for _ in range(height)] for _ in range(width)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def _check(self, x: int, y: int) -> None:
        if not self.in_bounds(x, y):
            raise IndexError(f"({x}, {y}) outside {self.width}x{self.height} grid")

    def tile(self, x: int, y: int) -> Tile:
        self._check(x, y)
        return self.tiles[x][y]

    def set_empty(self, x: int, y: int) -> None:
        self._check(x, y)
        if self.tiles[x][y].blocked:
            self.tiles[x][y] = empty()

    def cells(self):
        for x in range(self.width):
            for y in range(self.height):
                yield x, y, self.tiles[x][y]

    def count_empty(self) -> int:
        return sum(1 for _, _, t in self.cells() if not t.blocked)

    def rows(self) -> List[str]:
        """Return the map as text rows, top to bottom."""
        return [
            "".join(WALL_GLYPH if self.tiles[x][y].blocked else FLOOR_GLYPH for x in range(self.width))
            for y in range(self.height)
        ]


def is_blocked(grid: Grid, entities: Iterable, x: int, y: int) -> bool:
    """True when the tile is blocked or a blocking entity stands on (x, y)."""
    if grid.tile(x, y).blocked:
        return True
    return any(e.blocks and e.pos == (x, y) for e in entities)


__all__ = ["Grid", "is_blocked"]
