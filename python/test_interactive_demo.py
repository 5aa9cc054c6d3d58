"""Tests for the interactive demo's state handling (no key loop)."""

from rich.panel import Panel

from grid_parser import parse_grids_concise
from grid_types import Direction, Vector
from interactive_demo import FLOOR, WALL, InteractiveDemo


def make_demo(definition: str = "b: So|oE") -> InteractiveDemo:
    return InteractiveDemo(parse_grids_concise(definition)["b"])


class TestInteractiveDemo:
    """Tests for cursor movement, editing and route finding."""

    def test_markers_found(self) -> None:
        demo = make_demo()
        assert demo.start == Vector(0, 0)
        assert demo.end == Vector(1, 1)

    def test_move_cursor(self) -> None:
        demo = make_demo()
        demo.move_cursor(Direction.E)
        assert demo.cursor == Vector(0, 1)
        demo.move_cursor(Direction.S)
        assert demo.cursor == Vector(1, 1)

    def test_move_cursor_stops_at_edge(self) -> None:
        demo = make_demo()
        demo.move_cursor(Direction.N)
        assert demo.cursor == Vector(0, 0)
        assert "Edge of board" in demo.status_message

    def test_find_route(self) -> None:
        demo = make_demo()
        demo.find_route()
        assert len(demo.route) == 3
        assert demo.status_message == "✓ Route found: 2 steps"

    def test_walls_block_route(self) -> None:
        demo = make_demo()
        demo.cursor = Vector(0, 1)
        demo.toggle_wall()
        demo.cursor = Vector(1, 0)
        demo.toggle_wall()
        assert demo.grid.get(Vector(1, 0)) == WALL
        demo.find_route()
        assert demo.route == []
        assert demo.status_message.startswith("✗ No path from")

    def test_toggle_wall_twice_restores_floor(self) -> None:
        demo = make_demo()
        demo.cursor = Vector(0, 1)
        demo.toggle_wall()
        demo.toggle_wall()
        assert demo.grid.get(Vector(0, 1)) == FLOOR

    def test_cannot_wall_markers(self) -> None:
        demo = make_demo()
        demo.toggle_wall()
        assert demo.grid.get(Vector(0, 0)) == "S"

    def test_place_marker(self) -> None:
        demo = make_demo()
        demo.cursor = Vector(1, 0)
        demo.place_marker("S")
        assert demo.start == Vector(1, 0)
        assert demo.grid.get(Vector(0, 0)) == FLOOR
        assert demo.grid.get(Vector(1, 0)) == "S"

    def test_marker_over_other_marker(self) -> None:
        demo = make_demo()
        demo.cursor = Vector(1, 1)
        demo.place_marker("S")
        assert demo.end is None
        demo.find_route()
        assert demo.status_message.startswith("Place both")

    def test_reset(self) -> None:
        demo = make_demo()
        demo.cursor = Vector(0, 1)
        demo.toggle_wall()
        demo.reset_grid()
        assert demo.grid.get(Vector(0, 1)) == FLOOR
        assert demo.start == Vector(0, 0)

    def test_generate_display(self) -> None:
        demo = make_demo()
        demo.find_route()
        assert isinstance(demo.generate_display(), Panel)
