"""Immutable ``(row, column)`` coordinates.

A :class:`Point` is a plain value: any integer pair is legal, and range
checking belongs to :class:`aoc_grid.grid.Grid`. Points order by row, then
column, so sorted point collections read in row-major order.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .directions import AdjacentPointsSelector, Direction

_INTEGER = re.compile(r"-?\d+")
_PAIR = re.compile(r"(-?\d+)\s*[,|]\s*(-?\d+)")


@dataclass(frozen=True, order=True)
class Point:
    """A coordinate on a 2D grid."""

    row: int
    column: int

    @classmethod
    def of(cls, row: int, column: int) -> "Point":
        return cls(row, column)

    @classmethod
    def origin(cls) -> "Point":
        return cls(0, 0)

    @classmethod
    def parse(cls, text: str) -> "Point":
        """Parse a point from two integers split by any delimiter, e.g. ``"1,2"`` or ``"1|5"``.

        Raises
        ------
        ValueError
            If the text does not hold exactly two integers.
        """
        values = _INTEGER.findall(text)
        if len(values) != 2:
            raise ValueError(f"Cannot find two values in input: '{text}'")
        return cls(int(values[0]), int(values[1]))

    @classmethod
    def parse_many(cls, text: str) -> List["Point"]:
        """Parse every ``a,b`` (or ``a|b``) pair in the text, e.g. ``"1,2 -> 2,3"``."""
        return [cls(int(r), int(c)) for r, c in _PAIR.findall(text)]

    def offset(self, d_row: int, d_column: int) -> "Point":
        return Point(self.row + d_row, self.column + d_column)

    def plus(self, delta: "Point") -> "Point":
        """Translate this point by another point's values."""
        return Point(self.row + delta.row, self.column + delta.column)

    def minus(self, delta: "Point") -> "Point":
        return Point(self.row - delta.row, self.column - delta.column)

    def __add__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return self.plus(other)

    def __sub__(self, other: "Point") -> "Point":
        if not isinstance(other, Point):
            return NotImplemented
        return self.minus(other)

    def move(self, direction: Direction, steps: int = 1) -> "Point":
        d_row, d_column = direction.delta
        return Point(self.row + d_row * steps, self.column + d_column * steps)

    def delta_to(self, other: "Point") -> Tuple[int, int]:
        """Return ``(d_row, d_column)`` needed to move from this point to ``other``."""
        return other.row - self.row, other.column - self.column

    def distance_to(self, other: "Point") -> int:
        """Manhattan distance between the two points."""
        d_row, d_column = self.delta_to(other)
        return abs(d_row) + abs(d_column)

    def adjacent_points(self, selector: AdjacentPointsSelector) -> Iterator["Point"]:
        """Yield neighbours in the selector direction's offset order.

        The point itself comes first when ``selector.with_self`` is set. Bounded
        selectors drop any candidate (including the point itself) outside
        their limits.
        """
        if selector.with_self and selector.accepts(self.row, self.column):
            yield self
        for d_row, d_column in selector.direction.offsets:
            row, column = self.row + d_row, self.column + d_column
            if selector.accepts(row, column):
                yield Point(row, column)

    def __iter__(self) -> Iterator[int]:
        yield self.row
        yield self.column

    def __str__(self) -> str:
        return f"({self.row}, {self.column})"


__all__ = ["Point"]
