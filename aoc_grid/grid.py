"""
Bounds-checked 2D grid for puzzle inputs.

A :class:`Grid` is a fixed-size rectangle of values addressed by
:class:`~aoc_grid.point.Point` or by ``(row, column)``. Cells live in a single
flat numpy object buffer of length ``rows * columns`` with ``(r, c)`` stored
at ``r * columns + c``, so any Python value can be held while row-major
walks stay contiguous.

Grids are built either from explicit dimensions and a default value, or by
parsing equal-length text lines through a per-character mapping function.
Direct reads and writes outside the grid raise
:class:`~aoc_grid.errors.OutOfBoundsError`; neighbour enumeration silently
skips out-of-bounds candidates instead, since edge cells simply have fewer
neighbours.
"""

from __future__ import annotations

import logging
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Set,
    Tuple,
    TypeVar,
    Union,
)

import numpy as np

from .directions import AdjacentDirection, Direction
from .errors import InvalidDimensionError, MalformedInputError, OutOfBoundsError
from .point import Point

logger = logging.getLogger(__name__)

T = TypeVar("T")
U = TypeVar("U")

Array = np.ndarray


def _object_buffer(values: Iterable[Any], size: int) -> Array:
    """Copy ``values`` into a flat object array of exactly ``size`` cells."""
    buffer = np.empty(size, dtype=object)
    # Element-wise assignment keeps tuples and lists as single cell values.
    for index, value in enumerate(values):
        buffer[index] = value
    return buffer


class Grid(Generic[T]):
    """A fixed-size rectangular container of values.

    Parameters
    ----------
    row_count, column_count:
        Grid dimensions. Zero is legal and yields a grid with no cells.
    default_value:
        Value every cell starts with. It is an ordinary cell value, not an
        "unset" marker.

    Raises
    ------
    InvalidDimensionError
        If either dimension is negative.

    Grids compare and hash by dimensions and cell values, so they can be used
    as memo keys for puzzle states. Do not mutate a grid while it is stored in
    a set or as a dict key.
    """

    __slots__ = ("_rows", "_columns", "_default", "_cells")

    def __init__(self, row_count: int, column_count: int, default_value: T = None) -> None:
        if row_count < 0 or column_count < 0:
            raise InvalidDimensionError(row_count, column_count)
        self._rows = int(row_count)
        self._columns = int(column_count)
        self._default = default_value
        self._cells = np.empty(self._rows * self._columns, dtype=object)
        self._cells.fill(default_value)
        logger.debug("Initialized Grid %dx%d with default value %r", self._rows, self._columns, default_value)

    @classmethod
    def _from_buffer(cls, row_count: int, column_count: int, cells: Array, default_value: Any) -> "Grid":
        grid = cls.__new__(cls)
        grid._rows = row_count
        grid._columns = column_count
        grid._default = default_value
        grid._cells = cells
        return grid

    @classmethod
    def parse(
        cls,
        lines: Sequence[str],
        mapping: Callable[[str], T],
        require_rows: bool = False,
    ) -> "Grid[T]":
        """Build a grid from equal-length text lines.

        Cell ``(r, c)`` is ``mapping(lines[r][c])``. An empty sequence gives a
        zero-row grid unless ``require_rows`` is set.

        Raises
        ------
        MalformedInputError
            If the lines differ in length, or if ``lines`` is empty and
            ``require_rows`` is True.
        """
        lines = list(lines)
        if not lines:
            if require_rows:
                raise MalformedInputError("Input cannot be empty")
            return cls(0, 0)

        width = len(lines[0])
        for index, line in enumerate(lines):
            if len(line) != width:
                raise MalformedInputError(
                    f"All rows must have equal width; row 0 has {width}, row {index} has {len(line)}"
                )

        cells = _object_buffer((mapping(ch) for line in lines for ch in line), len(lines) * width)
        logger.debug("Parsed Grid %dx%d", len(lines), width)
        return cls._from_buffer(len(lines), width, cells, None)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[T]], default_value: T = None) -> "Grid[T]":
        """Build a grid from nested row sequences of equal length."""
        rows = [list(row) for row in rows]
        if not rows:
            return cls(0, 0, default_value)
        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise MalformedInputError(
                    f"All rows must have equal width; row 0 has {width}, row {index} has {len(row)}"
                )
        cells = _object_buffer((value for row in rows for value in row), len(rows) * width)
        return cls._from_buffer(len(rows), width, cells, default_value)

    # ------------------------------------------------------------------
    # Dimensions
    # ------------------------------------------------------------------

    @property
    def row_count(self) -> int:
        return self._rows

    @property
    def column_count(self) -> int:
        return self._columns

    @property
    def default_value(self) -> Optional[T]:
        return self._default

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._columns

    def number_of_rows(self) -> int:
        return self._rows

    def number_of_columns(self) -> int:
        return self._columns

    def elements_in_grid(self) -> int:
        """Total number of cells, ``row_count * column_count``."""
        return self._rows * self._columns

    def __len__(self) -> int:
        return self.elements_in_grid()

    # ------------------------------------------------------------------
    # Addressing
    # ------------------------------------------------------------------

    def in_bounds(self, row: int, column: int) -> bool:
        """Return True if ``(row, column)`` addresses a cell. Never raises."""
        return 0 <= row < self._rows and 0 <= column < self._columns

    def exists(self, point: Point) -> bool:
        return self.in_bounds(point.row, point.column)

    def __contains__(self, point: object) -> bool:
        return isinstance(point, Point) and self.exists(point)

    def _index(self, row: int, column: int) -> int:
        if not self.in_bounds(row, column):
            raise OutOfBoundsError(row, column, self._rows, self._columns)
        return row * self._columns + column

    @staticmethod
    def _coordinates(point_or_row: Union[Point, int], column: Optional[int]) -> Tuple[int, int]:
        if isinstance(point_or_row, Point):
            if column is not None:
                raise TypeError("column must not be given together with a Point")
            return point_or_row.row, point_or_row.column
        if column is None:
            raise TypeError("column is required when addressing by row")
        return point_or_row, column

    def at(self, point_or_row: Union[Point, int], column: Optional[int] = None) -> T:
        """Return the value at a :class:`Point` or at ``(row, column)``.

        Raises
        ------
        OutOfBoundsError
            If the coordinate is outside the grid.
        """
        row, column = self._coordinates(point_or_row, column)
        return self._cells[self._index(row, column)]

    def set(self, point_or_row: Union[Point, int], *args: Any) -> None:
        """Overwrite one cell in place: ``set(point, value)`` or ``set(row, column, value)``.

        Raises
        ------
        OutOfBoundsError
            If the coordinate is outside the grid.
        """
        if isinstance(point_or_row, Point):
            if len(args) != 1:
                raise TypeError("set(point, value) takes exactly one value")
            row, column = point_or_row.row, point_or_row.column
            value = args[0]
        else:
            if len(args) != 2:
                raise TypeError("set(row, column, value) takes a column and a value")
            row = point_or_row
            column, value = args
        self._cells[self._index(row, column)] = value

    def __getitem__(self, key: Union[Point, Tuple[int, int]]) -> T:
        row, column = key
        return self._cells[self._index(row, column)]

    def __setitem__(self, key: Union[Point, Tuple[int, int]], value: T) -> None:
        row, column = key
        self._cells[self._index(row, column)] = value

    def row_at(self, row: int) -> Tuple[T, ...]:
        if not 0 <= row < self._rows:
            raise OutOfBoundsError(row, 0, self._rows, self._columns)
        start = row * self._columns
        return tuple(self._cells[start:start + self._columns])

    def column_at(self, column: int) -> Tuple[T, ...]:
        if not 0 <= column < self._columns:
            raise OutOfBoundsError(0, column, self._rows, self._columns)
        return tuple(self._cells[column::self._columns])

    # ------------------------------------------------------------------
    # Neighbours and point sets
    # ------------------------------------------------------------------

    def neighbors_of(self, point: Point, direction: AdjacentDirection) -> List[Point]:
        """Return in-bounds neighbours of ``point`` in the policy's offset order.

        Candidates outside the grid are skipped, not reported as errors.
        """
        neighbours: List[Point] = []
        for d_row, d_column in direction.offsets:
            row, column = point.row + d_row, point.column + d_column
            if self.in_bounds(row, column):
                neighbours.append(Point(row, column))
        return neighbours

    def all_points(self) -> List[Point]:
        """Every coordinate of the grid in row-major order."""
        return [Point(row, column) for row in range(self._rows) for column in range(self._columns)]

    def iter_cells(self) -> Iterator[Tuple[Point, T]]:
        """Yield ``(point, value)`` pairs in row-major order."""
        for index, value in enumerate(self._cells):
            yield Point(*divmod(index, self._columns)), value

    def find_value(self, predicate: Callable[[T], bool]) -> List[Point]:
        """Points whose value satisfies ``predicate``, in row-major order."""
        return [point for point, value in self.iter_cells() if predicate(value)]

    def find_rows_with(self, predicate: Callable[[T], bool]) -> List[int]:
        """Indexes of rows where every value satisfies ``predicate``."""
        return [row for row in range(self._rows) if all(predicate(v) for v in self.row_at(row))]

    def find_columns_with(self, predicate: Callable[[T], bool]) -> List[int]:
        """Indexes of columns where every value satisfies ``predicate``."""
        return [
            column for column in range(self._columns)
            if all(predicate(v) for v in self.column_at(column))
        ]

    def is_corner(self, row: int, column: int) -> bool:
        if self.elements_in_grid() == 0:
            return False
        return row in (0, self._rows - 1) and column in (0, self._columns - 1)

    def border_points(self) -> Set[Point]:
        """All points on the outer edge of the grid."""
        return set().union(*self.perimeter_points().values())

    def perimeter_points(self) -> Dict[Direction, Set[Point]]:
        """Edge points keyed by the side they lie on.

        The top row is ``UP``, the bottom row ``DOWN``, the first column
        ``LEFT`` and the last column ``RIGHT``; corners appear under two keys.
        """
        if self.elements_in_grid() == 0:
            return {direction: set() for direction in Direction}
        last_row, last_column = self._rows - 1, self._columns - 1
        return {
            Direction.UP: {Point(0, c) for c in range(self._columns)},
            Direction.DOWN: {Point(last_row, c) for c in range(self._columns)},
            Direction.LEFT: {Point(r, 0) for r in range(self._rows)},
            Direction.RIGHT: {Point(r, last_column) for r in range(self._rows)},
        }

    # ------------------------------------------------------------------
    # Whole-grid operations
    # ------------------------------------------------------------------

    def sum_values(self, evaluator: Callable[[T], int]) -> int:
        return sum(evaluator(value) for value in self._cells)

    def copy(self) -> "Grid[T]":
        return self._from_buffer(self._rows, self._columns, self._cells.copy(), self._default)

    def update_at(self, point: Point, value: T) -> "Grid[T]":
        """Return a copy of this grid with one cell replaced."""
        updated = self.copy()
        updated.set(point, value)
        return updated

    def update_corners(self, value: T) -> "Grid[T]":
        """Return a copy of this grid with all four corners set to ``value``."""
        updated = self.copy()
        if self.elements_in_grid() == 0:
            return updated
        for row in (0, self._rows - 1):
            for column in (0, self._columns - 1):
                updated.set(row, column, value)
        return updated

    def draw_box(self, first: Point, second: Point, update: Callable[[T], T]) -> None:
        """Apply ``update`` in place to every cell in the box spanned by two corners (inclusive).

        Raises
        ------
        OutOfBoundsError
            If either corner is outside the grid.
        """
        for corner in (first, second):
            if not self.exists(corner):
                raise OutOfBoundsError(corner.row, corner.column, self._rows, self._columns)
        top, bottom = sorted((first.row, second.row))
        left, right = sorted((first.column, second.column))
        for row in range(top, bottom + 1):
            for column in range(left, right + 1):
                index = row * self._columns + column
                self._cells[index] = update(self._cells[index])

    def map(self, function: Callable[[T], U]) -> "Grid[U]":
        """Return a new grid with ``function`` applied to every cell."""
        cells = _object_buffer((function(value) for value in self._cells), self.elements_in_grid())
        return self._from_buffer(self._rows, self._columns, cells, None)

    def rotate(self, clockwise: bool = True) -> "Grid[T]":
        """Return a copy of this grid rotated a quarter turn."""
        matrix = self._cells.reshape(self._rows, self._columns)
        rotated = np.rot90(matrix, -1 if clockwise else 1)
        rows, columns = rotated.shape
        return self._from_buffer(rows, columns, rotated.reshape(-1).copy(), self._default)

    def to_lines(self, transform: Callable[[T], str] = str) -> List[str]:
        """Render each row as a string, one ``transform(value)`` per cell."""
        return ["".join(transform(value) for value in self.row_at(row)) for row in range(self._rows)]

    # ------------------------------------------------------------------
    # Equality
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Grid):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(a == b for a, b in zip(self._cells, other._cells))

    def __hash__(self) -> int:
        return hash((self._rows, self._columns, tuple(self._cells)))

    def __str__(self) -> str:
        return "\n".join(self.to_lines())

    def __repr__(self) -> str:
        return f"Grid(row_count={self._rows}, column_count={self._columns})"


__all__ = ["Array", "Grid"]
