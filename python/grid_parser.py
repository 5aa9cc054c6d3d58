"""
Grid parsing utilities for tilegrid.

Provides two parsing formats:
1. Standard format with space-separated tokens
2. Concise format with single-character cells and named grids
"""

from __future__ import annotations

from grid_types import EMPTY, Cell
from tilegrid import Grid

__all__ = ["parse_grid", "parse_grids_concise"]


def _parse_token(token: str) -> Cell[int | str]:
    if not token or token == "_":
        return EMPTY
    if token.isdecimal():
        return int(token)
    return token


def parse_grid(definition: str) -> Grid[int | str]:
    """
    Parse a grid from a compact string format.

    Format:
    - Rows separated by |
    - Cells separated by single spaces
    - Cell value determined by the token:
      * Underscore only (_): Empty cell
      * Empty string (from multiple adjacent spaces): Empty cell
      * Only digits: int value, e.g. "12" -> 12
      * Anything else: the token itself as a str value, e.g. "wall"

    Example:
        "1 2 _|wall 3 4"
        Creates a 2x3 grid:
        [[1, 2, EMPTY], ["wall", 3, 4]]

    Args:
        definition: The grid definition string

    Returns:
        Grid with parsed cells

    Raises:
        ValueError: If rows have different numbers of cells
    """
    row_strings = definition.split("|")
    rows: list[list[Cell[int | str]]] = [
        [_parse_token(token) for token in row_str.split(" ")] for row_str in row_strings
    ]

    # Validate all rows have same length
    cols = len(rows[0])
    mismatched = [(i, len(row)) for i, row in enumerate(rows) if len(row) != cols]
    if mismatched:
        error_msg = (
            f"Inconsistent row lengths in grid definition\n"
            f"  Expected: {cols} cells (from row 0)\n"
            f"  Mismatched rows:\n"
        )
        for row_idx, actual_cols in mismatched:
            error_msg += f"    Row {row_idx}: {actual_cols} cells - \"{row_strings[row_idx]}\"\n"
        error_msg += "  All rows must have the same number of cells"
        raise ValueError(error_msg)

    return Grid(rows)


def parse_grids_concise(definition: str) -> dict[str, Grid[int | str]]:
    """
    Parse named grids from a concise multi-line format.

    Format:
    - One grid per line: "name: grid_definition"
    - Grid definition uses single characters (no spaces between cells)
    - Rows separated by |
    - Cell types:
      * Underscore (_) or dot (.): Empty cell
      * Digit (0-9): int value
      * Any other character: str value

    Short rows are padded with Empty cells to the longest row.

    Example:
        \"\"\"
        maze: ##.#|#..#
        costs: 12|3
        \"\"\"

        Creates:
        - Grid "maze": [["#", "#", EMPTY, "#"], ["#", EMPTY, EMPTY, "#"]]
        - Grid "costs": [[1, 2], [3, EMPTY]]

    Args:
        definition: Multi-line string with one grid per line

    Returns:
        Dict mapping grid name to parsed Grid

    Raises:
        ValueError: If a line is malformed or a name is repeated
    """
    grids: dict[str, Grid[int | str]] = {}
    lines = [line.strip() for line in definition.strip().split("\n") if line.strip()]

    for line_idx, line in enumerate(lines):
        if ":" not in line:
            raise ValueError(
                f"Invalid grid definition on line {line_idx + 1}: '{line}'\n"
                f"  Expected format: 'name: grid_definition'"
            )

        grid_name, grid_def = (part.strip() for part in line.split(":", 1))

        if not grid_name:
            raise ValueError(f"Empty grid name on line {line_idx + 1}: '{line}'")

        if not grid_def:
            raise ValueError(f"Empty grid definition for '{grid_name}' on line {line_idx + 1}")

        if grid_name in grids:
            raise ValueError(
                f"Duplicate grid name '{grid_name}' on line {line_idx + 1}\n"
                f"  Grid names must be unique"
            )

        rows: list[list[Cell[int | str]]] = []
        for row_str in grid_def.split("|"):
            cells: list[Cell[int | str]] = []
            # Each character is a cell
            for char in row_str:
                if char in "_.":
                    cells.append(EMPTY)
                elif char.isdecimal():
                    cells.append(int(char))
                else:
                    cells.append(char)
            rows.append(cells)

        # Pad rows to maximum length with Empty cells
        max_cols = max(len(row) for row in rows)
        for row in rows:
            row.extend([EMPTY] * (max_cols - len(row)))

        grids[grid_name] = Grid(rows)

    return grids
