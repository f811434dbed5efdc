"""
Input helpers for puzzle text.

These sit at the boundary of the grid core: they turn an input file into the
ordered lines that :meth:`aoc_grid.grid.Grid.parse` consumes. Nothing in the
grid modules imports this one.
"""

from __future__ import annotations

import os
from typing import List, Sequence, Union

PathLike = Union[str, "os.PathLike[str]"]


def read_lines(path: PathLike) -> List[str]:
    """Read a text file into lines without newline characters.

    Trailing blank lines are dropped; blank lines between blocks are kept.
    Raises FileNotFoundError if ``path`` does not exist.
    """
    with open(path, "r") as f:
        lines = f.read().splitlines()
    while lines and not lines[-1].strip():
        lines.pop()
    return lines


def split_blocks(lines: Sequence[str]) -> List[List[str]]:
    """Split lines into blocks separated by one or more blank lines."""
    blocks: List[List[str]] = []
    current: List[str] = []
    for line in lines:
        if line.strip():
            current.append(line)
        elif current:
            blocks.append(current)
            current = []
    if current:
        blocks.append(current)
    return blocks


__all__ = ["read_lines", "split_blocks"]
