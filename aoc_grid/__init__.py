"""aoc-grid: a 2D grid toolkit for text puzzles.

The package exposes :class:`Grid` alongside the :class:`Point` coordinate and
the :class:`AdjacentDirection` neighbour policies used to address and walk it.
Puzzle code parses its input lines into a grid and runs its own algorithm on
top of these primitives.
"""

import logging

from .directions import AdjacentDirection, AdjacentPointsSelector, Direction
from .errors import GridError, InvalidDimensionError, MalformedInputError, OutOfBoundsError
from .grid import Grid
from .point import Point

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "AdjacentDirection",
    "AdjacentPointsSelector",
    "Direction",
    "Grid",
    "GridError",
    "InvalidDimensionError",
    "MalformedInputError",
    "OutOfBoundsError",
    "Point",
]
