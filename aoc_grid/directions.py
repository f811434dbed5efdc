"""Direction policies for neighbour enumeration and movement.

:class:`AdjacentDirection` names which offsets count as adjacent to a cell.
Each member carries a fixed, ordered tuple of ``(d_row, d_column)`` offsets
and that order is the iteration order of every neighbour query, so searches
that break ties by discovery order stay deterministic:

* ``CARDINAL``: up, down, left, right
* ``DIAGONAL``: up-left, up-right, down-left, down-right
* ``ALL``: the cardinal offsets followed by the diagonal offsets

:class:`Direction` is the four-way movement vocabulary used by puzzle inputs
(``^ v < >``), and :class:`AdjacentPointsSelector` bundles the options for
enumerating neighbours of a bare point without a grid.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Optional, Tuple

Offset = Tuple[int, int]

CARDINAL_OFFSETS: Tuple[Offset, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
DIAGONAL_OFFSETS: Tuple[Offset, ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))

_CARDINAL_SET: FrozenSet[Offset] = frozenset(CARDINAL_OFFSETS)
_DIAGONAL_SET: FrozenSet[Offset] = frozenset(DIAGONAL_OFFSETS)


class AdjacentDirection(Enum):
    """Which neighbouring offsets are considered adjacent."""

    ALL = "all"
    CARDINAL = "cardinal"
    DIAGONAL = "diagonal"

    @property
    def offsets(self) -> Tuple[Offset, ...]:
        """Ordered offsets for this policy."""
        return _OFFSETS[self]

    @staticmethod
    def is_cardinal(direction: "AdjacentDirection") -> bool:
        """Return True if ``direction`` includes the cardinal offsets (``ALL`` or ``CARDINAL``)."""
        return _CARDINAL_SET <= frozenset(direction.offsets)

    @staticmethod
    def is_diagonal(direction: "AdjacentDirection") -> bool:
        """Return True if ``direction`` includes the diagonal offsets (``ALL`` or ``DIAGONAL``)."""
        return _DIAGONAL_SET <= frozenset(direction.offsets)

    @classmethod
    def of(cls, offset: Offset) -> "AdjacentDirection":
        """Classify a single offset pair as ``CARDINAL`` or ``DIAGONAL``."""
        offset = (int(offset[0]), int(offset[1]))
        if offset in _CARDINAL_SET:
            return cls.CARDINAL
        if offset in _DIAGONAL_SET:
            return cls.DIAGONAL
        raise ValueError(f"Offset is not a unit neighbour offset: {offset}")


_OFFSETS: Dict[AdjacentDirection, Tuple[Offset, ...]] = {
    AdjacentDirection.CARDINAL: CARDINAL_OFFSETS,
    AdjacentDirection.DIAGONAL: DIAGONAL_OFFSETS,
    AdjacentDirection.ALL: CARDINAL_OFFSETS + DIAGONAL_OFFSETS,
}


class Direction(Enum):
    """A single step of movement, valued by its puzzle-input symbol.

    Deltas use grid orientation: row 0 is the top line of input, so ``UP``
    decreases the row.
    """

    UP = "^"
    DOWN = "v"
    LEFT = "<"
    RIGHT = ">"

    @property
    def delta(self) -> Offset:
        return _DELTAS[self]

    @property
    def symbol(self) -> str:
        return self.value

    def turn_right(self) -> "Direction":
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 1) % 4]

    def turn_left(self) -> "Direction":
        return _CLOCKWISE[(_CLOCKWISE.index(self) - 1) % 4]

    def opposite(self) -> "Direction":
        return _CLOCKWISE[(_CLOCKWISE.index(self) + 2) % 4]

    @classmethod
    def get(cls, name: str) -> "Direction":
        """Look up a direction by name, ignoring case."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid direction: '{name}'") from None

    @classmethod
    def from_symbol(cls, symbol: str) -> "Direction":
        """Look up a direction by its input symbol (``^``, ``v``, ``<``, ``>``)."""
        try:
            return cls(symbol)
        except ValueError:
            raise ValueError(f"Invalid direction: '{symbol}'") from None


_DELTAS: Dict[Direction, Offset] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_CLOCKWISE: Tuple[Direction, ...] = (Direction.UP, Direction.RIGHT, Direction.DOWN, Direction.LEFT)


@dataclass(frozen=True)
class AdjacentPointsSelector:
    """Options for listing the neighbours of a point without a grid.

    When ``allow_out_of_bounds`` is False, only neighbours inside
    ``[0, row_count) x [0, column_count)`` are produced.
    """

    with_self: bool
    direction: AdjacentDirection
    allow_out_of_bounds: bool
    row_count: int = 0
    column_count: int = 0

    @classmethod
    def unbounded(cls, with_self: bool, direction: AdjacentDirection) -> "AdjacentPointsSelector":
        return cls(with_self, direction, True)

    @classmethod
    def bounded(
        cls,
        with_self: bool,
        direction: AdjacentDirection,
        row_count: int,
        column_count: Optional[int] = None,
    ) -> "AdjacentPointsSelector":
        """Bounded selector; ``column_count`` defaults to ``row_count`` for square grids."""
        if column_count is None:
            column_count = row_count
        return cls(with_self, direction, False, row_count, column_count)

    def accepts(self, row: int, column: int) -> bool:
        if self.allow_out_of_bounds:
            return True
        return 0 <= row < self.row_count and 0 <= column < self.column_count


__all__ = [
    "Offset",
    "CARDINAL_OFFSETS",
    "DIAGONAL_OFFSETS",
    "AdjacentDirection",
    "Direction",
    "AdjacentPointsSelector",
]
