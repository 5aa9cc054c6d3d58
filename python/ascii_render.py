"""
ASCII rendering for tilegrid grids.

Provides two rendering approaches:
1. Plain rendering - one glyph per cell, the canonical text form of a grid
2. Framed rendering - bordered, coloured output with highlighted cells
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable

import simple_chalk as chalk  # type: ignore[import-untyped]

from grid_types import Empty, Vector
from tilegrid import Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderStyle:
    """Glyphs and layout options for rendering."""

    empty: str = "."
    occupied: str = "#"
    show_values: bool = False  # Use first character of str(value) instead of `occupied`
    cell_width: int = 1


# =============================================================================
# Plain Rendering
# =============================================================================


def cell_glyph(value: object, style: RenderStyle = RenderStyle()) -> str:
    """Single character for a cell under the given style."""
    if isinstance(value, Empty):
        return style.empty
    if style.show_values:
        text = str(value)
        return text[0] if text else "?"
    return style.occupied


def render_plain(grid: Grid, style: RenderStyle = RenderStyle()) -> str:
    """
    Render one line per row, one glyph per cell, no trailing newline.

    With the default style this is identical to str(grid).
    """
    return "\n".join("".join(cell_glyph(value, style) for value in row) for row in grid.content)


# =============================================================================
# Framed Rendering
# =============================================================================


def render_grid_simple(
    grid: Grid,
    style: RenderStyle = RenderStyle(),
    highlight: Iterable[Vector] = (),
    title: str | None = None,
    colorize: Callable[[str], str] | None = None,
) -> list[str]:
    """
    Render a grid inside a box border.

    Args:
        grid: The grid to render
        style: Glyphs and cell width
        highlight: Positions drawn on a white background
        title: Optional title centred in the top border
        colorize: Optional colouring applied to the border and unhighlighted cells

    Returns:
        List of strings representing the rendered grid lines
    """
    if colorize is None:
        colorize = lambda s: s

    highlighted = set(highlight)
    grid_width = grid.height() * style.cell_width + 2

    lines: list[str] = []

    # Top border with title
    title_line = "┌" + "─" * (grid_width - 2) + "┐"
    if title is not None:
        label = f" {title} "
        # Center title in the border
        if len(label) <= grid_width - 2:
            title_start = (grid_width - len(label)) // 2
            title_line = (
                "┌" +
                "─" * (title_start - 1) +
                label +
                "─" * (grid_width - title_start - len(label) - 1) +
                "┐"
            )
    lines.append(colorize(title_line))

    for x, row in enumerate(grid.content):
        line_parts = [colorize("│")]
        for y, value in enumerate(row):
            char = cell_glyph(value, style)
            content = char if style.cell_width == 1 else char.center(style.cell_width)

            if Vector(x, y) in highlighted:
                content = chalk.bgWhite.black(content)
            else:
                content = colorize(content)
            line_parts.append(content)

        line_parts.append(colorize("│"))
        lines.append("".join(line_parts))

    lines.append(colorize("└" + "─" * (grid_width - 2) + "┘"))

    logger.debug(
        "render_grid_simple: %dx%d grid, %d highlighted, %d lines",
        grid.width(),
        grid.height(),
        len(highlighted),
        len(lines),
    )
    return lines


def render_path(
    grid: Grid,
    path: Iterable[Vector],
    style: RenderStyle = RenderStyle(show_values=True, cell_width=3),
    title: str | None = None,
) -> str:
    """Render a framed grid with every position of path highlighted."""
    return "\n".join(render_grid_simple(grid, style, path, title, chalk.green))
