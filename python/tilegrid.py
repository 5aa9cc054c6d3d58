"""
Rectangular grid container with region algebra and breadth-first search.
Cells hold a value or EMPTY; every transformation returns a new grid.
"""

from __future__ import annotations

import copy
import logging
from collections import deque
from typing import Callable, Generic, Iterator, TypeVar

from grid_types import (
    DELTAS,
    EMPTY,
    Area,
    Cell,
    Direction,
    Empty,
    GridError,
    InvalidPosition,
    NoPathFound,
    OutOfBounds,
    Vector,
)

__all__ = [
    "Area",
    "Cell",
    "Direction",
    "EMPTY",
    "Empty",
    "Grid",
    "GridError",
    "InvalidPosition",
    "NoPathFound",
    "OutOfBounds",
    "Vector",
]

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Type alias for per-cell callbacks
CellFn = Callable[[Cell[T], Vector], Cell[T]]

# Type alias for neighbour/search filters
CellPredicate = Callable[[T, Vector], bool]


class Grid(Generic[T]):
    """
    A mutable rectangular table of cells indexed by Vector.

    The first index (x) selects a row, the second (y) a cell in that row.
    Width is the number of rows and height the number of cells per row.

    Construction:
        Grid()                 -> 0x0 grid
        Grid(Vector(w, h))     -> w x h grid, every cell EMPTY
        Grid(table)            -> wraps an existing rectangular table
    """

    def __init__(self, content: list[list[Cell[T]]] | Vector | None = None) -> None:
        if content is None:
            self.content: list[list[Cell[T]]] = []
        elif isinstance(content, Vector):
            self.content = [[EMPTY for _ in range(content.y)] for _ in range(content.x)]
        else:
            self.content = content

    # =========================================================================
    # Basic Access
    # =========================================================================

    def width(self) -> int:
        return len(self.content)

    def height(self) -> int:
        return len(self.content[0]) if self.content else 0

    def dimensions(self) -> Vector:
        return Vector(self.width(), self.height())

    def area(self) -> int:
        return self.width() * self.height()

    def contains_position(self, position: Vector) -> bool:
        return 0 <= position.x < self.width() and 0 <= position.y < self.height()

    def get(self, position: Vector) -> Cell[T]:
        """Return the cell at position, raising OutOfBounds outside the grid."""
        if not self.contains_position(position):
            raise OutOfBounds(position, self.dimensions())
        return self.content[position.x][position.y]

    def set(self, position: Vector, value: Cell[T]) -> None:
        """Write value at position in place, raising OutOfBounds outside the grid."""
        if not self.contains_position(position):
            raise OutOfBounds(position, self.dimensions())
        self.content[position.x][position.y] = value

    def positions(self) -> Iterator[Vector]:
        """Yield every position in row-major order."""
        for x, row in enumerate(self.content):
            for y in range(len(row)):
                yield Vector(x, y)

    def for_each(self, callback: Callable[[Cell[T], Vector], object]) -> None:
        for x, row in enumerate(self.content):
            for y, value in enumerate(row):
                callback(value, Vector(x, y))

    def contains(self, value: Cell[T]) -> bool:
        return any(v == value for row in self.content for v in row)

    def find(self, value: Cell[T]) -> Vector | None:
        """Return the first position holding value (row-major), or None."""
        for x, row in enumerate(self.content):
            for y, v in enumerate(row):
                if v == value:
                    return Vector(x, y)
        return None

    # =========================================================================
    # Region Algebra
    # =========================================================================

    def crop(self, area: Area) -> Grid[T]:
        """
        Return the inclusive sub-rectangle described by area.

        The lower corner is floored at 0 and the upper corner capped at the
        grid's width/height before slicing.
        An area that ends before it starts, or lies wholly outside the grid,
        crops to an empty grid.
        """
        min_x = max(area.p1.x, 0)
        min_y = max(area.p1.y, 0)
        max_x = min(area.p2.x, self.width())
        max_y = min(area.p2.y, self.height())
        if max_x < min_x or max_y < min_y:
            return Grid()
        return Grid([row[min_y : max_y + 1] for row in self.content[min_x : max_x + 1]])

    def map(self, callback: CellFn[T]) -> Grid[T]:
        return Grid(
            [[callback(value, Vector(x, y)) for y, value in enumerate(row)] for x, row in enumerate(self.content)]
        )

    def map_area(self, area: Area, callback: CellFn[T]) -> Grid[T]:
        """
        Apply callback to the cells inside area only.

        Equivalent to mapping over crop(area) and pasting the result back at the
        area's (clamped) lower corner. Positions passed to callback are relative
        to that corner. Cells outside the area are unchanged.
        """
        patch = self.crop(area).map(callback)
        origin = Vector(max(area.p1.x, 0), max(area.p1.y, 0))
        rows = [list(row) for row in self.content]
        for x, patch_row in enumerate(patch.content):
            rows[origin.x + x][origin.y : origin.y + len(patch_row)] = patch_row
        return Grid(rows)

    def fill_area(self, area: Area, value: Cell[T]) -> Grid[T]:
        return self.map_area(area, lambda _value, _position: value)

    def fill_undefined(self, value: Cell[T]) -> Grid[T]:
        return Grid([[value if isinstance(v, Empty) else v for v in row] for row in self.content])

    def fill_all(self, value: Cell[T]) -> Grid[T]:
        return Grid([[value for _ in row] for row in self.content])

    def overlay(self, position: Vector, grid: Grid[T]) -> Grid[T]:
        """
        Fill this grid's empty cells from another grid.

        An empty cell at (x, y) takes grid.get((x + position.x, y + position.y));
        non-empty cells are kept. Raises OutOfBounds if that lookup falls
        outside the other grid.
        """
        return Grid(
            [
                [grid.get(Vector(x, y) + position) if isinstance(value, Empty) else value for y, value in enumerate(row)]
                for x, row in enumerate(self.content)
            ]
        )

    def extend(self, new_size: Vector, value: Cell[T]) -> Grid[T]:
        """
        Grow the grid to new_size, filling new rows and columns with value.

        Existing cells keep their coordinates. Raises ValueError if new_size is
        smaller than the current dimensions on either axis.
        """
        if new_size.x < self.width() or new_size.y < self.height():
            raise ValueError(
                f"Cannot extend grid to a smaller size\n"
                f"  Current: {self.width()}x{self.height()}\n"
                f"  Requested: {new_size.x}x{new_size.y}"
            )
        extra_cols = new_size.y - self.height()
        rows = [list(row) + [value] * extra_cols for row in self.content]
        rows.extend([value] * new_size.y for _ in range(new_size.x - self.width()))
        return Grid(rows)

    def flip_x(self) -> Grid[T]:
        """Reverse the cells of every row."""
        return Grid([row[::-1] for row in self.content])

    def flip_y(self) -> Grid[T]:
        """Reverse the order of rows."""
        return Grid([list(row) for row in reversed(self.content)])

    # =========================================================================
    # Neighbours & Search
    # =========================================================================

    def neighbours(self, position: Vector, predicate: CellPredicate[T]) -> set[Vector]:
        """
        Return the axis-adjacent positions accepted by predicate.

        A neighbour qualifies when it is in bounds, non-empty and
        predicate(value, neighbour) is true. Diagonals are never considered.

        Raises:
            InvalidPosition: position is out of bounds or holds EMPTY
        """
        self._check_occupied(position)

        result: set[Vector] = set()
        for delta in DELTAS.values():
            candidate = position + delta
            if not self.contains_position(candidate):
                continue
            value = self.content[candidate.x][candidate.y]
            if isinstance(value, Empty):
                continue
            if predicate(value, candidate):
                result.add(candidate)
        return result

    def _check_occupied(self, position: Vector) -> None:
        if not self.contains_position(position):
            raise InvalidPosition(position, "outside the grid")
        if isinstance(self.content[position.x][position.y], Empty):
            raise InvalidPosition(position, "cell is empty")

    def _ordered_neighbours(self, position: Vector, allowed: CellPredicate[T]) -> list[Vector]:
        # neighbours() returns a set; keep the fixed E, S, W, N order for the search
        found = self.neighbours(position, allowed)
        return [position + delta for delta in DELTAS.values() if position + delta in found]

    def pathfind(self, start: Vector, end: Vector, allowed: CellPredicate[T]) -> list[Vector]:
        """
        Breadth-first search from start, expanding through allowed cells.

        Args:
            start: Starting position (must hold a value)
            end: Position to reach
            allowed: Predicate deciding which neighbouring cells may be entered

        Returns:
            Every position discovered during the search, in discovery order.
            This is not the start-to-end route; see shortest_path for that.

        Raises:
            InvalidPosition: start is out of bounds or empty
            NoPathFound: end is unreachable
        """
        self._check_occupied(start)
        path: list[Vector] = []
        visited: set[Vector] = set()
        frontier: deque[Vector] = deque([start])
        queued: set[Vector] = {start}

        while frontier:
            current = frontier.popleft()
            queued.discard(current)
            visited.add(current)
            if current == end:
                break
            for neighbour in self._ordered_neighbours(current, allowed):
                if neighbour in visited or neighbour in queued:
                    continue
                frontier.append(neighbour)
                queued.add(neighbour)
                path.append(neighbour)

        logger.debug(
            "pathfind: start=%s end=%s reached=%s expanded=%d discovered=%d",
            start,
            end,
            end in visited,
            len(visited),
            len(path),
        )
        if end not in visited:
            raise NoPathFound(start, end, len(visited))
        return path

    def shortest_path(self, start: Vector, end: Vector, allowed: CellPredicate[T]) -> list[Vector]:
        """
        Return the fewest-steps route from start to end, both inclusive.

        Uses the same expansion rules as pathfind, recording each position's
        predecessor and walking back from end once it is reached.

        Raises:
            InvalidPosition: start is out of bounds or empty
            NoPathFound: end is unreachable
        """
        self._check_occupied(start)
        came_from: dict[Vector, Vector | None] = {start: None}
        frontier: deque[Vector] = deque([start])

        while frontier:
            current = frontier.popleft()
            if current == end:
                break
            for neighbour in self._ordered_neighbours(current, allowed):
                if neighbour in came_from:
                    continue
                came_from[neighbour] = current
                frontier.append(neighbour)

        if end not in came_from:
            raise NoPathFound(start, end, len(came_from))

        route: list[Vector] = []
        step: Vector | None = end
        while step is not None:
            route.append(step)
            step = came_from[step]
        route.reverse()
        logger.debug("shortest_path: start=%s end=%s length=%d", start, end, len(route))
        return route

    # =========================================================================
    # Cloning & Diffing
    # =========================================================================

    def clone(self) -> Grid[T]:
        """Copy the table; cell values are shared."""
        return Grid([list(row) for row in self.content])

    def deep_clone(self) -> Grid[T]:
        """Copy the table and recursively duplicate every cell value."""
        return Grid(copy.deepcopy(self.content))

    def difference(self, other: Grid[T]) -> list[Vector]:
        """
        Return the positions (row-major) whose values differ between the grids.

        Raises:
            ValueError: the grids have different dimensions
        """
        if self.dimensions() != other.dimensions():
            raise ValueError(
                f"Cannot diff grids of different dimensions\n"
                f"  Left: {self.width()}x{self.height()}\n"
                f"  Right: {other.width()}x{other.height()}"
            )
        return [position for position in self.positions() if self.get(position) != other.get(position)]

    # =========================================================================
    # Dunder Methods
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self.dimensions() == other.dimensions() and all(
            list(row) == list(other_row) for row, other_row in zip(self.content, other.content)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid({self.width()}x{self.height()})"

    def __str__(self) -> str:
        return "\n".join("".join("." if isinstance(v, Empty) else "#" for v in row) for row in self.content)
