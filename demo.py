"""
Demonstration scripts for the gridarr grid system.
"""

import logging
import sys

from ascii_render import visualise
from grid_types import ConfigurationError, Overflow, Position
from gridarr import Grid


def construction_demo() -> None:
    """Show how dimensions are inferred, clipped and padded."""
    print("=" * 40)
    print("Nine items, col_count=3:")
    print("=" * 40)
    grid = Grid(list(range(1, 10)), col_count=3)
    print(f"  {grid.column_count}x{grid.row_count}, contents {[c.contents for c in grid]}")
    visualise(grid)
    print()

    print("=" * 40)
    print("Nine items, row_count=3 (same shape):")
    print("=" * 40)
    grid = Grid(list(range(1, 10)), row_count=3)
    print(f"  {grid.column_count}x{grid.row_count}, contents {[c.contents for c in grid]}")
    print()

    print("=" * 40)
    print("Eleven items into 3x3 (last two clipped):")
    print("=" * 40)
    grid = Grid(list(range(1, 12)), row_count=3, col_count=3)
    print(f"  contents {[c.contents for c in grid]}")
    print()

    print("=" * 40)
    print("Eight items, row_count=3, filler idx*10:")
    print("=" * 40)
    grid = Grid(list(range(1, 9)), row_count=3, filler=lambda col, row, idx: idx * 10)
    print(f"  contents {[c.contents for c in grid]}")
    visualise(grid, [Position(2, 2)])
    print()

    print("=" * 40)
    print("No items, 3 cols x 5 rows, filler returns the index:")
    print("=" * 40)
    grid = Grid([], row_count=5, col_count=3, filler=lambda col, row, idx: idx)
    visualise(grid)
    print()

    print("=" * 40)
    print("col_count=3 with no items:")
    print("=" * 40)
    try:
        Grid([], col_count=3)
    except ConfigurationError as e:
        print(f"  ConfigurationError: {e}")
    print()


def query_demo() -> None:
    """Show overflow policies and area queries."""
    grid = Grid(list(range(25)), col_count=5, id="demo")

    print("=" * 40)
    print("Cell (6, -1) under each overflow policy:")
    print("=" * 40)
    for policy in Overflow:
        found = grid.cell(6, -1, policy, policy)
        where = f"({found.position.x}, {found.position.y})" if found else "None"
        print(f"  {policy.value:>9}: {where}")
    print()

    print("=" * 40)
    print("area(3, 3, -3, -2): anchored back from (3, 3):")
    print("=" * 40)
    cells = grid.area(3, 3, -3, -2)
    assert cells is not None
    print(f"  list indices {[c.list_index for c in cells]}")
    visualise(cells)
    print()

    print("=" * 40)
    print("area(3, 3, 3, 3) with wrap:")
    print("=" * 40)
    cells = grid.area(3, 3, 3, 3, Overflow.WRAP, Overflow.WRAP)
    assert cells is not None
    visualise(cells)
    print()

    print("=" * 40)
    print("area(3, 3, 3, 3) with no overflow (clipped at the edge):")
    print("=" * 40)
    cells = grid.area(3, 3, 3, 3)
    assert cells is not None
    visualise(cells)


if __name__ == "__main__":
    if len(sys.argv) > 1 and sys.argv[1] == "debug":
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")
    construction_demo()
    print()
    query_demo()
