"""
Breadth-first shortest distance over grid coordinates.

The searcher knows nothing about grids: it walks whatever ``neighbours``
callable it is given. :func:`grid_neighbours` builds that callable from a
grid, a direction policy and a passability rule for the common case.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Callable, Collection, Dict, Iterable, Optional, TypeVar

from .directions import AdjacentDirection
from .grid import Grid
from .point import Point

logger = logging.getLogger(__name__)

T = TypeVar("T")

Neighbours = Callable[[Point], Iterable[Point]]


def grid_neighbours(
    grid: Grid[T],
    direction: AdjacentDirection = AdjacentDirection.CARDINAL,
    passable: Optional[Callable[[T], bool]] = None,
) -> Neighbours:
    """Return a neighbour function limited to in-bounds cells accepted by ``passable``."""

    def neighbours(point: Point) -> Iterable[Point]:
        for neighbour in grid.neighbors_of(point, direction):
            if passable is None or passable(grid.at(neighbour)):
                yield neighbour

    return neighbours


def shortest_distance(
    start: Point,
    end_points: Collection[Point],
    neighbours: Neighbours,
) -> Optional[int]:
    """Number of steps on the shortest path from ``start`` to any of ``end_points``.

    Returns ``None`` when no end point is reachable. Neighbours are expanded
    in the order ``neighbours`` yields them.
    """
    targets = set(end_points)
    distances: Dict[Point, int] = {start: 0}
    frontier = deque([start])
    while frontier:
        current = frontier.popleft()
        if current in targets:
            logger.debug("Reached %s from %s in %d steps (%d visited)", current, start, distances[current], len(distances))
            return distances[current]
        for neighbour in neighbours(current):
            if neighbour not in distances:
                distances[neighbour] = distances[current] + 1
                frontier.append(neighbour)
    logger.debug("No end point reachable from %s (%d visited)", start, len(distances))
    return None


__all__ = ["Neighbours", "grid_neighbours", "shortest_distance"]
