"""
Interactive demo for tilegrid path search.
Move a cursor over a board, edit walls and run shortest_path with keyboard commands.
"""

import logging

import readchar, sys
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import RenderStyle, render_grid_simple
from grid_parser import parse_grids_concise
from grid_types import DELTAS, Direction, Vector
from tilegrid import Grid, GridError

WALL = "#"
FLOOR = "o"

STYLE = RenderStyle(show_values=True, cell_width=3)


def passable(value: object, position: Vector) -> bool:
    return value != WALL


class InteractiveDemo:
    """Interactive demo for path search."""

    def __init__(self, grid: Grid[str]) -> None:
        self.grid = grid
        self.original_grid = grid.clone()  # Keep a copy of the original state
        self.cursor = Vector(0, 0)
        self.start: Vector | None = grid.find("S")
        self.end: Vector | None = grid.find("E")
        self.route: list[Vector] = []
        self.console = Console()
        self.status_message = "Ready"

    def generate_display(self) -> Panel:
        """Generate the current display with grid and status."""
        highlight = set(self.route) | {self.cursor}
        grid_text = "\n".join(render_grid_simple(self.grid, STYLE, highlight, title="board"))

        status = Text()
        status.append("Cursor: ", style="bold")
        status.append(f"({self.cursor.x}, {self.cursor.y}) = {self.grid.get(self.cursor)!r}\n")
        status.append("Start: ", style="bold")
        status.append(f"{self.start}\n")
        status.append("End: ", style="bold")
        status.append(f"{self.end}\n\n")

        # Convert ANSI-colored grid text to Rich Text properly
        status.append(Text.from_ansi(grid_text))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  W/A/S/D - Move cursor\n")
        status.append("  Space   - Toggle wall\n")
        status.append("  1 / 2   - Set start / end\n")
        status.append("  P       - Find shortest path\n")
        status.append("  R       - Reset to original board\n")
        status.append("  Q       - Quit\n\n")

        # Status line at the bottom
        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="tilegrid Path Search Demo", border_style="green", width=80)

    def move_cursor(self, direction: Direction) -> None:
        target = self.cursor + DELTAS[direction]
        if self.grid.contains_position(target):
            self.cursor = target
            self.status_message = f"Moved {direction.value}"
        else:
            self.status_message = f"Edge of board reached moving {direction.value}"

    def toggle_wall(self) -> None:
        current = self.grid.get(self.cursor)
        if current in ("S", "E"):
            self.status_message = "Cannot wall over start or end"
            return
        self.grid.set(self.cursor, FLOOR if current == WALL else WALL)
        self.route = []
        self.status_message = f"Toggled wall at ({self.cursor.x}, {self.cursor.y})"

    def place_marker(self, marker: str) -> None:
        """Move the start ("S") or end ("E") marker to the cursor."""
        previous = self.start if marker == "S" else self.end
        if previous is not None:
            self.grid.set(previous, FLOOR)
        self.grid.set(self.cursor, marker)
        if marker == "S":
            self.start = self.cursor
            if self.end == self.cursor:
                self.end = None
        else:
            self.end = self.cursor
            if self.start == self.cursor:
                self.start = None
        self.route = []
        self.status_message = f"{marker} placed at ({self.cursor.x}, {self.cursor.y})"

    def find_route(self) -> None:
        if self.start is None or self.end is None:
            self.status_message = "Place both start (1) and end (2) first"
            return
        try:
            self.route = self.grid.shortest_path(self.start, self.end, passable)
        except GridError as e:
            self.route = []
            self.status_message = f"✗ {e}".splitlines()[0]
        else:
            self.status_message = f"✓ Route found: {len(self.route) - 1} steps"

    def reset_grid(self) -> None:
        """Reset the board to its original state."""
        self.grid = self.original_grid.clone()
        self.start = self.grid.find("S")
        self.end = self.grid.find("E")
        self.route = []
        self.status_message = "Board reset to original state"

    def run(self) -> None:
        """Run the interactive demo."""
        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())

                    # Get single key press
                    key = readchar.readkey()

                    if key.lower() == 'q':
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key.lower() == 'r':
                        self.reset_grid()
                    elif key.lower() == 'w':
                        self.move_cursor(Direction.N)
                    elif key.lower() == 's':
                        self.move_cursor(Direction.S)
                    elif key.lower() == 'a':
                        self.move_cursor(Direction.W)
                    elif key.lower() == 'd':
                        self.move_cursor(Direction.E)
                    elif key == ' ':
                        self.toggle_wall()
                    elif key == '1':
                        self.place_marker("S")
                    elif key == '2':
                        self.place_marker("E")
                    elif key.lower() == 'p':
                        self.find_route()
                    else:
                        self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


LAYOUTS = parse_grids_concise(
    """
    rooms: Soooo#oooo|ooooo#oooo|oo###ooooo|ooooo#o###|#o###ooooo|ooooo#oooE
    open: Soooo|ooooo|ooooo|ooooE
    """
)


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == 'sublime':
        # Running from IDE - just render a single frame
        logging.basicConfig(level=logging.DEBUG, format='%(levelname)s: %(message)s')

        print('Running from IDE - rendering initial state')
        print()

        demo = InteractiveDemo(LAYOUTS['rooms'])
        demo.find_route()
        Console().print(demo.generate_display())
    else:
        InteractiveDemo(LAYOUTS[sys.argv[1] if len(sys.argv) > 1 else 'rooms']).run()
