"""Tests for breadth-first shortest distance."""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from hypothesis import given, strategies as st

from aoc_grid.directions import AdjacentDirection
from aoc_grid.factory import of_characters
from aoc_grid.grid import Grid
from aoc_grid.point import Point
from aoc_grid.search import grid_neighbours, shortest_distance

MAZE = [
    "S.#.....",
    ".##.###.",
    "....#...",
    "###.#.#E",
]


def test_shortest_distance_through_maze() -> None:
    grid = of_characters(MAZE)
    start = grid.find_value(lambda v: v == "S")[0]
    end = grid.find_value(lambda v: v == "E")[0]
    neighbours = grid_neighbours(grid, passable=lambda v: v != "#")
    assert shortest_distance(start, [end], neighbours) == 14


def test_start_is_an_end_point() -> None:
    grid = Grid(3, 3, ".")
    assert shortest_distance(Point(1, 1), {Point(1, 1)}, grid_neighbours(grid)) == 0


def test_unreachable_returns_none() -> None:
    grid = of_characters([
        ".#.",
        ".#.",
    ])
    neighbours = grid_neighbours(grid, passable=lambda v: v == ".")
    assert shortest_distance(Point(0, 0), [Point(0, 2)], neighbours) is None


def test_nearest_of_several_end_points() -> None:
    grid = Grid(1, 10, ".")
    ends = [Point(0, 9), Point(0, 2)]
    assert shortest_distance(Point(0, 5), ends, grid_neighbours(grid)) == 3


def test_diagonal_moves_shorten_path() -> None:
    grid = Grid(5, 5, ".")
    assert shortest_distance(Point(0, 0), [Point(4, 4)], grid_neighbours(grid, AdjacentDirection.ALL)) == 4


@given(
    st.integers(1, 6),
    st.integers(1, 6),
    st.data(),
)
def test_open_grid_distance_is_manhattan(rows: int, columns: int, data) -> None:
    """On an obstacle-free grid cardinal BFS distance equals Manhattan distance."""
    grid = Grid(rows, columns, ".")
    start = Point(data.draw(st.integers(0, rows - 1)), data.draw(st.integers(0, columns - 1)))
    end = Point(data.draw(st.integers(0, rows - 1)), data.draw(st.integers(0, columns - 1)))
    assert shortest_distance(start, [end], grid_neighbours(grid)) == start.distance_to(end)


def test_custom_neighbour_function() -> None:
    def knight(point: Point):
        for d_row, d_column in ((1, 2), (2, 1), (-1, 2), (2, -1), (1, -2), (-2, 1), (-1, -2), (-2, -1)):
            candidate = point.offset(d_row, d_column)
            if 0 <= candidate.row < 8 and 0 <= candidate.column < 8:
                yield candidate

    assert shortest_distance(Point(0, 0), [Point(7, 7)], knight) == 6
