"""
Demonstration script for the tilegrid container.
"""

import logging
import sys

from ascii_render import RenderStyle, render_grid_simple, render_path, render_plain
from grid_parser import parse_grids_concise
from grid_types import EMPTY, Area, Vector
from tilegrid import Grid, NoPathFound

BOARDS = parse_grids_concise(
    """
    maze: Sooo#ooo|o#o#oo#o|o#ooo#oo|o####o#o|oooooo#E
    walled: So#oo|oo#oo|oo#oE
    """
)

VALUE_STYLE = RenderStyle(show_values=True, cell_width=3)


def banner(text: str) -> None:
    print("=" * 40)
    print(text)
    print("=" * 40)


def open_cell(value: object, position: Vector) -> bool:
    return value != "#"


def region_demo() -> None:
    """Show crop, flips, extend and area fills on a numbered board."""
    numbers: Grid[int] = Grid([[x * 5 + y for y in range(5)] for x in range(5)])

    banner("Numbered 5x5 board:")
    print("\n".join(render_grid_simple(numbers, VALUE_STYLE, title="numbers")))
    print()

    banner("crop((1,1)-(3,3)):")
    cropped = numbers.crop(Area(Vector(1, 1), Vector(3, 3)))
    print("\n".join(render_grid_simple(cropped, VALUE_STYLE)))
    print()

    banner("flip_x / flip_y:")
    print("\n".join(render_grid_simple(numbers.flip_x(), VALUE_STYLE, title="flip_x")))
    print("\n".join(render_grid_simple(numbers.flip_y(), VALUE_STYLE, title="flip_y")))
    print()

    banner("fill_area((0,0)-(1,4)) with EMPTY, extended to 6x7:")
    holed = numbers.fill_area(Area(Vector(0, 0), Vector(1, 4)), EMPTY)
    print(holed.extend(Vector(6, 7), EMPTY))
    print()


def search_demo() -> None:
    """Compare discovery order with the reconstructed shortest path."""
    maze = BOARDS["maze"]
    start = maze.find("S")
    end = maze.find("E")
    assert start is not None and end is not None

    banner("Maze:")
    print(render_plain(maze, RenderStyle(show_values=True)))
    print()

    discovered = maze.pathfind(start, end, open_cell)
    print(f"pathfind discovered {len(discovered)} cells before reaching {end}")
    print(render_path(maze, discovered, title="discovered"))
    print()

    route = maze.shortest_path(start, end, open_cell)
    print(f"shortest_path: {len(route) - 1} steps")
    print(render_path(maze, route, title="route"))
    print()

    walled = BOARDS["walled"]
    banner("Walled-off board:")
    print(render_plain(walled, RenderStyle(show_values=True)))
    try:
        walled.pathfind(walled.find("S"), walled.find("E"), open_cell)
    except NoPathFound as e:
        print(f"pathfind failed: {e}")


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "debug":
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s: %(message)s')
    region_demo()
    search_demo()
