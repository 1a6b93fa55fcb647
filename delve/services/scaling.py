"""Depth-indexed step tables.

A ``LevelScaleTable`` maps dungeon depth to a number: the value of the last
transition whose threshold is <= depth, or the baseline when depth is below
every threshold. Monster/item caps per room and per-category spawn weights
are all expressed this way so content progression stays in data.

Example:
    >>> t = LevelScaleTable([(1, 2), (4, 3), (6, 5)])
    >>> [t.value_at(d) for d in (0, 3, 4, 10)]
    [0, 2, 3, 5]
"""

from __future__ import annotations

from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple, Union

from ..errors import ConfigurationError


class Transition(NamedTuple):
    level: int
    value: int


class LevelScaleTable:
    def __init__(self, transitions: Iterable[Tuple[int, int]] = (), default: int = 0):
        self.transitions: List[Transition] = [Transition(int(lvl), int(val)) for lvl, val in transitions]
        self.default = default
        for prev, cur in zip(self.transitions, self.transitions[1:]):
            if cur.level <= prev.level:
                raise ConfigurationError(
                    f"scale thresholds must be strictly increasing ({prev.level} then {cur.level})",
                    code="scale_order",
                )

    @classmethod
    def constant(cls, value: int) -> "LevelScaleTable":
        return cls((), default=value)

    def value_at(self, depth: int) -> int:
        current = self.default
        for t in self.transitions:
            if t.level > depth:
                break
            current = t.value
        return current

    def __repr__(self) -> str:  # pragma: no cover - debug helper
        return f"LevelScaleTable({[tuple(t) for t in self.transitions]!r}, default={self.default})"


def value_at(
    table: Union[LevelScaleTable, Sequence[Tuple[int, int]]],
    depth: int,
    default: Optional[int] = None,
) -> int:
    """Look up ``depth`` in a table or in a raw list of (threshold, value) pairs.

    ``default`` is the value below the first threshold. When omitted, a
    ``LevelScaleTable`` keeps its own baseline and a raw list uses 0.
    """
    if isinstance(table, LevelScaleTable):
        transitions = table.transitions
        if default is None:
            default = table.default
    else:
        transitions = table
    return LevelScaleTable(transitions, default=0 if default is None else default).value_at(depth)


__all__ = ["Transition", "LevelScaleTable", "value_at"]
