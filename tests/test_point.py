"""Tests for the Point coordinate value."""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest
from hypothesis import given, strategies as st

from aoc_grid.directions import AdjacentDirection, AdjacentPointsSelector, Direction
from aoc_grid.point import Point

points = st.builds(Point, st.integers(-50, 50), st.integers(-50, 50))


def test_constructors() -> None:
    point = Point.of(-1, 2)
    assert point.row == -1
    assert point.column == 2
    assert Point.origin() == Point(0, 0)


@given(st.integers(), st.integers())
def test_structural_equality_and_hash(row: int, column: int) -> None:
    assert Point.of(row, column) == Point(row, column)
    assert hash(Point.of(row, column)) == hash(Point(row, column))


def test_points_are_immutable() -> None:
    point = Point(1, 2)
    with pytest.raises(AttributeError):
        point.row = 3


def test_points_sort_row_major() -> None:
    assert sorted([Point(1, 0), Point(0, 5), Point(0, 1)]) == [Point(0, 1), Point(0, 5), Point(1, 0)]


@given(points, points)
def test_plus_and_minus_are_inverse(a: Point, b: Point) -> None:
    assert a.plus(b).minus(b) == a
    assert a + b == a.plus(b)
    assert (a + b) - b == a


def test_offset_and_move() -> None:
    assert Point(2, 2).offset(-1, 1) == Point(1, 3)
    assert Point(2, 2).move(Direction.UP) == Point(1, 2)
    assert Point(2, 2).move(Direction.RIGHT, 3) == Point(2, 5)


def test_unpacking() -> None:
    row, column = Point(4, 7)
    assert (row, column) == (4, 7)


@pytest.mark.parametrize(
    "text,row,column",
    [
        ("1,2", 1, 2),
        ("1, 3", 1, 3),
        ("1|5", 1, 5),
        ("-1,-9", -1, -9),
        ("10,-100", 10, -100),
        ("2147483648,1", 2147483648, 1),
    ],
)
def test_parse(text: str, row: int, column: int) -> None:
    assert Point.parse(text) == Point(row, column)


@pytest.mark.parametrize("text", ["hello", "1", "1,2,3", ""])
def test_parse_invalid(text: str) -> None:
    with pytest.raises(ValueError, match="Cannot find two values in input"):
        Point.parse(text)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("1,2 -> 2,3", [Point(1, 2), Point(2, 3)]),
        ("1| 3", [Point(1, 3)]),
        ("1|5 -> -4 , 5 -> 1,-2", [Point(1, 5), Point(-4, 5), Point(1, -2)]),
        ("no points here", []),
    ],
)
def test_parse_many(text: str, expected: list) -> None:
    assert Point.parse_many(text) == expected


@pytest.mark.parametrize(
    "first,second,delta",
    [
        (Point(0, 0), Point(1, 1), (1, 1)),
        (Point(0, 0), Point(-1, -1), (-1, -1)),
        (Point(0, 0), Point(-1, 1), (-1, 1)),
        (Point(5, 5), Point(5, 5), (0, 0)),
    ],
)
def test_delta_to(first: Point, second: Point, delta: tuple) -> None:
    assert first.delta_to(second) == delta


@given(points, points)
def test_distance_is_symmetric(a: Point, b: Point) -> None:
    assert a.distance_to(b) == b.distance_to(a)
    assert a.distance_to(a) == 0
    assert a.distance_to(b) >= 0


def test_distance_to() -> None:
    assert Point(0, 0).distance_to(Point(-1, 1)) == 2
    assert Point(3, 4).distance_to(Point(0, 0)) == 7


def test_adjacent_points_unbounded() -> None:
    selector = AdjacentPointsSelector.unbounded(False, AdjacentDirection.CARDINAL)
    assert list(Point(0, 0).adjacent_points(selector)) == [
        Point(-1, 0),
        Point(1, 0),
        Point(0, -1),
        Point(0, 1),
    ]


def test_adjacent_points_bounded_with_self() -> None:
    selector = AdjacentPointsSelector.bounded(True, AdjacentDirection.ALL, 3)
    assert list(Point(0, 0).adjacent_points(selector)) == [
        Point(0, 0),
        Point(1, 0),
        Point(0, 1),
        Point(1, 1),
    ]


def test_adjacent_points_bounded_rectangle() -> None:
    selector = AdjacentPointsSelector.bounded(False, AdjacentDirection.DIAGONAL, 2, 5)
    assert list(Point(1, 4).adjacent_points(selector)) == [Point(0, 3)]
