"""
Interactive demo for gridarr overflow policies.
Display a grid with a cursor and walk it with keyboard commands.
"""

import logging
import sys

import readchar
from rich.console import Console
from rich.live import Live
from rich.panel import Panel
from rich.text import Text

from ascii_render import render_grid
from grid_types import GridConfig, Overflow
from gridarr import Cell, Grid

POLICIES = list(Overflow)


class GridWalkDemo:
    """Interactive demo for moving a cursor cell around a grid."""

    def __init__(self, grid: Grid) -> None:
        self.grid = grid
        self.cursor: Cell | None = grid.cells[0] if grid.cells else None
        self.policy_index = POLICIES.index(grid.overflow_x)
        self.show_area = False
        self.console = Console()
        self.status_message = "Ready"

    @property
    def overflow(self) -> Overflow:
        return POLICIES[self.policy_index]

    def highlighted(self) -> list[Cell]:
        """Cells to mark: the cursor, or the 3x3 area centred on it."""
        if self.cursor is None:
            return []
        if not self.show_area:
            return [self.cursor]
        pos = self.cursor.position
        return self.grid.area(pos.x - 1, pos.y - 1, 3, 3, self.overflow, self.overflow) or []

    def generate_display(self) -> Panel:
        """Generate the current display with grid and status."""
        if self.cursor is None:
            status = Text()
            status.append("ERROR: Grid has no cells!\n", style="bold red")
            return Panel(status, title="Gridarr - Error", border_style="red")

        pos = self.cursor.position
        status = Text()
        status.append("Cursor: ", style="bold")
        status.append(f"({pos.x}, {pos.y}) index {self.cursor.list_index} = {self.cursor.contents!r}\n")
        status.append("Overflow: ", style="bold")
        status.append(f"{self.overflow.value}\n\n")

        grid_text = render_grid(self.grid, self.highlighted())
        status.append(Text.from_ansi(grid_text))
        status.append("\n\n")
        status.append("Keys:\n", style="bold cyan")
        status.append("  W/A/S/D - Move cursor\n")
        status.append("  O - Cycle overflow policy\n")
        status.append("  E - Toggle 3x3 area around cursor\n")
        status.append("  R - Reset cursor\n")
        status.append("  Q - Quit\n\n")

        status.append("─" * 40 + "\n", style="dim")
        status.append("Status: ", style="bold")
        status.append(self.status_message)

        return Panel(status, title="Gridarr Overflow Demo", border_style="green", width=80)

    def move(self, dx: int, dy: int) -> None:
        """Step the cursor, resolving off-grid moves with the current overflow policy."""
        if self.cursor is None:
            self.status_message = "ERROR: Grid has no cells!"
            return

        target = self.cursor.relative(dx, dy, self.overflow, self.overflow)
        if target is None:
            pos = self.cursor.position
            self.status_message = (
                f"✗ ({pos.x + dx}, {pos.y + dy}) is off the grid under '{self.overflow.value}'"
            )
            return

        self.cursor = target
        self.status_message = f"✓ Moved to ({target.position.x}, {target.position.y})"

    def cycle_overflow(self) -> None:
        self.policy_index = (self.policy_index + 1) % len(POLICIES)
        self.status_message = f"Overflow policy is now '{self.overflow.value}'"

    def toggle_area(self) -> None:
        self.show_area = not self.show_area
        self.status_message = "Area highlight on" if self.show_area else "Area highlight off"

    def reset(self) -> None:
        self.cursor = self.grid.cells[0] if self.grid.cells else None
        self.status_message = "Cursor reset to (0, 0)"

    def run(self) -> None:
        """Run the interactive demo with keyboard controls."""
        if self.cursor is None:
            print("ERROR: Grid has no cells!")
            return

        with Live(self.generate_display(), console=self.console, refresh_per_second=4) as live:
            try:
                while True:
                    live.update(self.generate_display())

                    key = readchar.readkey()

                    if key.lower() == 'q':
                        self.status_message = "Quitting..."
                        live.update(self.generate_display())
                        break
                    elif key.lower() == 'r':
                        self.reset()
                    elif key.lower() == 'o':
                        self.cycle_overflow()
                    elif key.lower() == 'e':
                        self.toggle_area()
                    elif key.lower() == 'w':
                        self.move(0, -1)
                    elif key.lower() == 's':
                        self.move(0, 1)
                    elif key.lower() == 'a':
                        self.move(-1, 0)
                    elif key.lower() == 'd':
                        self.move(1, 0)
                    else:
                        self.status_message = f"Unknown key: {repr(key)}"

            except KeyboardInterrupt:
                self.status_message = "Interrupted by user"
                live.update(self.generate_display())


LAYOUTS = dict(
    board = GridConfig(items=list("abcdefghijklmnopqrstuvwxy"), col_count=5, overflow="wrap", id="board"),
    strip = GridConfig(items=list(range(12)), row_count=1, overflow="constrain", id="strip"),
    padded = GridConfig(items=list(range(10)), row_count=4, col_count=6, filler=lambda col, row, idx: -idx, id="padded"),
)


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == 'sublime':
        # Running from IDE - just render the initial state
        logging.basicConfig(level=logging.INFO, format='%(levelname)s: %(message)s')

        print('Running from IDE - rendering initial state')
        print()

        demo = GridWalkDemo(Grid.from_config(LAYOUTS['board']))
        demo.console.print(demo.generate_display())
    else:
        layout = LAYOUTS[sys.argv[1] if len(sys.argv) > 1 else 'board']
        GridWalkDemo(Grid.from_config(layout)).run()
