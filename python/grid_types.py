"""
Shared type definitions for the tilegrid system.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TypeVar, Union


class Direction(Enum):
    """Cardinal direction between adjacent cells."""

    E = "E"  # Right (increasing y)
    S = "S"  # Down (increasing x)
    W = "W"  # Left (decreasing y)
    N = "N"  # Up (decreasing x)


# =============================================================================
# Coordinates
# =============================================================================


@dataclass(frozen=True)
class Vector:
    """A cell coordinate: x selects the row, y the cell within the row."""

    x: int
    y: int

    def __add__(self, other: Vector) -> Vector:
        return Vector(self.x + other.x, self.y + other.y)


@dataclass(frozen=True)
class Area:
    """Inclusive rectangle spanning rows p1.x..p2.x and columns p1.y..p2.y."""

    p1: Vector
    p2: Vector


# (dx, dy) per direction, in the order neighbours are examined
DELTAS: dict[Direction, Vector] = {
    Direction.E: Vector(0, 1),
    Direction.S: Vector(1, 0),
    Direction.W: Vector(0, -1),
    Direction.N: Vector(-1, 0),
}


# =============================================================================
# Cell Types
# =============================================================================


@dataclass(frozen=True)
class Empty:
    """An empty cell."""

    pass


EMPTY = Empty()

T = TypeVar("T")

Cell = Union[Empty, T]


# =============================================================================
# Errors
# =============================================================================


class GridError(Exception):
    """Base class for errors raised by grid operations."""


class OutOfBounds(GridError, IndexError):
    """A position lies outside the grid it was used with."""

    def __init__(self, position: Vector, dimensions: Vector) -> None:
        self.position = position
        self.dimensions = dimensions
        super().__init__(
            f"Not a valid position {position.x}, {position.y}\n"
            f"  Grid dimensions: {dimensions.x}x{dimensions.y}"
        )


class InvalidPosition(GridError, ValueError):
    """A position is out of bounds or refers to an empty cell."""

    def __init__(self, position: Vector, reason: str) -> None:
        self.position = position
        super().__init__(f"Not a valid position {position.x}, {position.y}: {reason}")


class NoPathFound(GridError, LookupError):
    """The end position is unreachable from the start position."""

    def __init__(self, start: Vector, end: Vector, expanded: int = 0) -> None:
        self.start = start
        self.end = end
        self.expanded = expanded
        super().__init__(
            f"No path from ({start.x}, {start.y}) to ({end.x}, {end.y})\n"
            f"  Cells expanded before giving up: {expanded}"
        )
