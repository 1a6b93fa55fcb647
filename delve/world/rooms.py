import random
from dataclasses import dataclass
from typing import Iterable, Tuple

from ..config import LevelConfig
from .grid import Grid


@dataclass(frozen=True)
class Rect:
    x1: int
    y1: int
    x2: int
    y2: int

    @classmethod
    def new(cls, x: int, y: int, w: int, h: int) -> "Rect":
        return cls(x, y, x + w, y + h)

    @property
    def center(self) -> Tuple[int, int]:
        return ((self.x1 + self.x2) // 2, (self.y1 + self.y2) // 2)

    def intersects(self, other: "Rect") -> bool:
        # Inclusive: rects that merely touch still count, so rooms never share a wall.
        return self.x1 <= other.x2 and self.x2 >= other.x1 and self.y1 <= other.y2 and self.y2 >= other.y1

    def interior(self):
        """Yield the cells carved for this room (the x1/y1 edge and everything past x2/y2 stay wall)."""
        for ix in range(self.x1 + 1, self.x2):
            for iy in range(self.y1 + 1, self.y2):
                yield ix, iy

    def contains_interior(self, x: int, y: int) -> bool:
        return self.x1 < x < self.x2 and self.y1 < y < self.y2


def propose_room(config: LevelConfig, rng: random.Random) -> Rect:
    """Sample a room size within bounds and a top-left corner that keeps it on the map."""
    w = rng.randint(config.room_min_size, config.room_max_size)
    h = rng.randint(config.room_min_size, config.room_max_size)
    x = rng.randrange(0, config.width - w)
    y = rng.randrange(0, config.height - h)
    return Rect.new(x, y, w, h)


def overlaps_any(room: Rect, existing: Iterable[Rect]) -> bool:
    return any(room.intersects(other) for other in existing)


def carve_room(grid: Grid, room: Rect) -> None:
    for ix, iy in room.interior():
        grid.set_empty(ix, iy)


__all__ = ["Rect", "propose_room", "overlaps_any", "carve_room"]
