import random
from typing import Tuple

from .grid import Grid


def carve_h_tunnel(grid: Grid, x1: int, x2: int, y: int) -> None:
    for x in range(min(x1, x2), max(x1, x2) + 1):
        grid.set_empty(x, y)


def carve_v_tunnel(grid: Grid, y1: int, y2: int, x: int) -> None:
    for y in range(min(y1, y2), max(y1, y2) + 1):
        grid.set_empty(x, y)


def connect_centers(grid: Grid, prev: Tuple[int, int], new: Tuple[int, int], rng: random.Random) -> bool:
    """Join two room centers with one horizontal and one vertical run.

    A coin flip picks the bend: horizontal first (along the previous room's
    row) or vertical first (along the previous room's column). Returns True
    when the horizontal leg was carved first.
    """
    (prev_x, prev_y) = prev
    (new_x, new_y) = new
    horizontal_first = rng.random() < 0.5
    if horizontal_first:
        carve_h_tunnel(grid, prev_x, new_x, prev_y)
        carve_v_tunnel(grid, prev_y, new_y, new_x)
    else:
        carve_v_tunnel(grid, prev_y, new_y, prev_x)
        carve_h_tunnel(grid, prev_x, new_x, new_y)
    return horizontal_first


__all__ = ["carve_h_tunnel", "carve_v_tunnel", "connect_centers"]
