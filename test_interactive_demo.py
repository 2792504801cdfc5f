"""Tests for the interactive overflow demo's state handling (no keyboard loop)."""

from rich.panel import Panel

from grid_types import Overflow, Position
from gridarr import Grid
from interactive_demo import LAYOUTS, GridWalkDemo


def make_demo(overflow: str = "none") -> GridWalkDemo:
    return GridWalkDemo(Grid(list(range(9)), col_count=3, overflow=overflow))


class TestGridWalkDemo:
    """Tests for cursor movement and display state."""

    def test_starts_at_origin_with_grid_policy(self) -> None:
        demo = make_demo("constrain")
        assert demo.cursor.position == Position(0, 0)
        assert demo.overflow is Overflow.CONSTRAIN

    def test_move_within_grid(self) -> None:
        demo = make_demo()
        demo.move(1, 1)
        assert demo.cursor.position == Position(1, 1)
        assert demo.status_message.startswith("✓")

    def test_move_off_edge_without_overflow(self) -> None:
        """A move that resolves to nothing leaves the cursor where it was."""
        demo = make_demo()
        demo.move(-1, 0)
        assert demo.cursor.position == Position(0, 0)
        assert "off the grid" in demo.status_message

    def test_move_wraps(self) -> None:
        demo = make_demo("wrap")
        demo.move(-1, -1)
        assert demo.cursor.position == Position(2, 2)

    def test_cycle_overflow(self) -> None:
        demo = make_demo()
        demo.cycle_overflow()
        assert demo.overflow is Overflow.WRAP
        demo.move(0, -1)
        assert demo.cursor.position == Position(0, 2)
        demo.cycle_overflow()
        demo.cycle_overflow()
        assert demo.overflow is Overflow.NONE

    def test_area_highlight(self) -> None:
        demo = make_demo()
        demo.move(1, 1)
        assert demo.highlighted() == [demo.cursor]
        demo.toggle_area()
        assert [c.list_index for c in demo.highlighted()] == list(range(9))

    def test_area_highlight_off_grid_anchor(self) -> None:
        """At the corner with no overflow the area's top-left is off the grid."""
        demo = make_demo()
        demo.toggle_area()
        assert demo.highlighted() == []

    def test_reset(self) -> None:
        demo = make_demo()
        demo.move(2, 2)
        demo.reset()
        assert demo.cursor.position == Position(0, 0)

    def test_display(self) -> None:
        assert isinstance(make_demo().generate_display(), Panel)

    def test_empty_grid(self) -> None:
        demo = GridWalkDemo(Grid())
        assert demo.cursor is None
        assert demo.highlighted() == []
        demo.move(1, 0)
        assert demo.status_message.startswith("ERROR")
        assert isinstance(demo.generate_display(), Panel)

    def test_layouts_build(self) -> None:
        for config in LAYOUTS.values():
            grid = Grid.from_config(config)
            assert len(grid) == grid.row_count * grid.column_count
