from dataclasses import dataclass

# Diagnostic glyphs for Grid.rows()
WALL_GLYPH = "#"
FLOOR_GLYPH = "."


@dataclass
class Tile:
    """State of a single map cell."""

    blocked: bool
    block_sight: bool
    explored: bool = False


def wall() -> Tile:
    return Tile(blocked=True, block_sight=True, explored=False)


def empty() -> Tile:
    return Tile(blocked=False, block_sight=False, explored=False)


__all__ = ["Tile", "wall", "empty", "WALL_GLYPH", "FLOOR_GLYPH"]
