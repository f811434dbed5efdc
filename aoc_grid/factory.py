"""Shortcuts for the grid value types puzzles parse most often."""

from __future__ import annotations

from typing import Sequence

from .grid import Grid


def of_characters(lines: Sequence[str]) -> Grid[str]:
    """One cell per character, unchanged."""
    return Grid.parse(lines, lambda ch: ch)


def of_booleans(lines: Sequence[str], true_symbol: str = "#") -> Grid[bool]:
    """``True`` where the character equals ``true_symbol``, ``False`` elsewhere."""
    return Grid.parse(lines, lambda ch: ch == true_symbol)


def of_integers(lines: Sequence[str], default: int = 0) -> Grid[int]:
    """Digit value of each character, or ``default`` for non-digits."""
    return Grid.parse(lines, lambda ch: int(ch) if ch.isdigit() else default)


__all__ = ["of_characters", "of_booleans", "of_integers"]
