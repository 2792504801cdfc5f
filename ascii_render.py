"""
ASCII rendering for gridarr grids.

Draws a grid as a table of list indices with column and row labels, optionally
marking a set of highlighted coordinates. Uses only the grid's public read
interface, so it works on any Grid regardless of what its cells contain.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Sequence, Union

import simple_chalk as chalk  # type: ignore[import-untyped]

from grid_types import Overflow, Position
from gridarr import Cell, Grid

logger = logging.getLogger(__name__)

RenderTarget = Union[Grid[Any], Cell[Any], Sequence[Cell[Any]]]
Highlight = Union[Cell[Any], Position]


def _grid_of(target: RenderTarget) -> Grid[Any]:
    """Find the grid behind whatever was passed in."""
    if isinstance(target, Grid):
        return target
    if isinstance(target, Cell):
        return target.grid
    if not target:
        raise ValueError("Cannot render an empty list of cells: there is no grid to draw")
    return target[0].grid


def _highlighted_coords(highlights: Iterable[Highlight]) -> set[tuple[int, int]]:
    coords: set[tuple[int, int]] = set()
    for h in highlights:
        pos = h.position if isinstance(h, Cell) else h
        coords.add((pos.x, pos.y))
    return coords


def render_grid(
    target: RenderTarget,
    highlights: Iterable[Highlight] | None = None,
    colorize: bool = True,
) -> str:
    """
    Render a grid as rows of cell list indices.

    Args:
        target: A Grid, a Cell, or a non-empty sequence of Cells. For cells the
            parent grid is drawn.
        highlights: Cells or positions to mark. When omitted and the target is a
            cell or cells, the target itself is marked.
        colorize: Use ANSI colours (labels on a light background, highlights in
            red). When False, output is plain text and a highlighted cell is
            prefixed with '*'.

    Returns:
        The rendered table, one line per row plus a header line.
    """
    grid = _grid_of(target)

    if highlights is None:
        if isinstance(target, Cell):
            highlights = [target]
        elif not isinstance(target, Grid):
            highlights = list(target)
        else:
            highlights = []
    marked = _highlighted_coords(highlights)

    plain: Callable[[str], str] = lambda s: s
    label = chalk.bgWhite.black if colorize else plain
    mark = chalk.red if colorize else plain

    row_label_width = len(str(max(grid.row_count - 1, 0)))
    col_label_width = len(str(max(grid.column_count - 1, 0)))
    cell_width = len(str(max(len(grid.cells) - 1, 0))) + 1
    column_width = max(col_label_width, cell_width - 1) + 1

    logger.info(
        "render_grid: grid=%s, %dx%d, %d highlighted",
        grid.id,
        grid.column_count,
        grid.row_count,
        len(marked),
    )

    lines: list[str] = []

    # Header: blank corner then column indices
    header = " " * (row_label_width + 2)
    header += "".join(str(c).rjust(column_width) for c in range(grid.column_count))
    lines.append(label(header + " "))

    for r in range(grid.row_count):
        parts = [label(" " + str(r).rjust(row_label_width) + " ")]
        for c in range(grid.column_count):
            cell = grid.cell(c, r, Overflow.NONE, Overflow.NONE)
            index = str(cell.list_index) if cell is not None else "?"
            text = index.rjust(column_width)
            if (c, r) in marked:
                if not colorize:
                    text = ("*" + index).rjust(column_width)
                parts.append(mark(text))
            else:
                parts.append(text)
        lines.append("".join(parts))

    return "\n".join(lines)


def visualise(
    target: RenderTarget,
    highlights: Iterable[Highlight] | None = None,
    colorize: bool = True,
) -> None:
    """Print render_grid() output to stdout."""
    print(render_grid(target, highlights, colorize))
