"""A cell coordinate on a board."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A zero-based row and column on a board."""

    row: int
    col: int