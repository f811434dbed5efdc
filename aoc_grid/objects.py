"""
Connected regions of a grid.

Puzzles frequently reason about contiguous patches of equal cells (garden
plots, basins, islands). This module finds them with an explicit-stack flood
fill over :meth:`Grid.neighbors_of`, so region size is not limited by the
interpreter's recursion depth.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Set, TypeVar

from .directions import AdjacentDirection
from .grid import Grid
from .point import Point

logger = logging.getLogger(__name__)

T = TypeVar("T")


def flood_fill(
    grid: Grid[T],
    start: Point,
    predicate: Callable[[T], bool],
    direction: AdjacentDirection = AdjacentDirection.CARDINAL,
) -> Set[Point]:
    """Return every point reachable from ``start`` through cells matching ``predicate``.

    ``start`` itself must match, otherwise the result is empty.

    Raises
    ------
    OutOfBoundsError
        If ``start`` is outside the grid.
    """
    if not predicate(grid.at(start)):
        return set()
    region: Set[Point] = {start}
    q = [start]
    while q:
        current = q.pop()
        for neighbour in grid.neighbors_of(current, direction):
            if neighbour not in region and predicate(grid.at(neighbour)):
                region.add(neighbour)
                q.append(neighbour)
    return region


def find_groups(
    grid: Grid[T],
    direction: AdjacentDirection = AdjacentDirection.CARDINAL,
) -> Dict[T, List[Set[Point]]]:
    """Partition the grid into maximal connected groups of equal value.

    Groups are keyed by their value and listed in the row-major order of
    their first cell. Values must be hashable.
    """
    visited: Set[Point] = set()
    groups: Dict[T, List[Set[Point]]] = {}
    for point in grid.all_points():
        if point in visited:
            continue
        value = grid.at(point)
        region = flood_fill(grid, point, lambda other: other == value, direction)
        visited |= region
        groups.setdefault(value, []).append(region)
    logger.debug(
        "Found %d groups across %d values in %r",
        sum(len(regions) for regions in groups.values()),
        len(groups),
        grid,
    )
    return groups


__all__ = ["flood_fill", "find_groups"]
