"""
Two-dimensional grid view over a flat, row-major sequence of values.
Build once (dimension inference, clip/pad, materialise cells) -> query by coordinate.
"""

from __future__ import annotations

import logging
import math
import secrets
import time
from dataclasses import dataclass, field
from typing import Generic, Iterator, Sequence

from grid_types import (
    ConfigurationError,
    Filler,
    GridConfig,
    Overflow,
    OverflowLike,
    Position,
    T,
)

logger = logging.getLogger(__name__)


# =============================================================================
# Data Structures: Cell
# =============================================================================


@dataclass(frozen=True, eq=False)
class Cell(Generic[T]):
    """One value wrapped with its place in the parent grid.

    Cells are only created by Grid construction.
    """

    contents: T
    position: Position
    list_index: int
    grid: Grid[T] = field(repr=False)

    def relative(
        self,
        dx: int,
        dy: int,
        overflow_x: OverflowLike | None = None,
        overflow_y: OverflowLike | None = None,
    ) -> Cell[T] | None:
        """Return the cell offset by (dx, dy) from this one, or None if it does not resolve."""
        return self.grid.cell(self.position.x + dx, self.position.y + dy, overflow_x, overflow_y)


# =============================================================================
# Helpers
# =============================================================================


def generate_grid_id() -> str:
    """Creation time in hex plus a random suffix."""
    return f"{time.time_ns():x}-{secrets.token_hex(4)}"


def _first_set(*values: OverflowLike | None) -> OverflowLike:
    """The first policy that was passed, even an empty or invalid one."""
    return next(v for v in values if v is not None)  # type: ignore[return-value]


def _resolve_axis(value: int, extent: int, policy: Overflow) -> int:
    if extent <= 0:
        return value
    if policy is Overflow.WRAP:
        return value % extent  # Python's % already lands in [0, extent)
    if policy is Overflow.CONSTRAIN:
        return max(0, min(value, extent - 1))
    return value


def _infer_dimensions(item_count: int, row_count: int | None, col_count: int | None) -> tuple[int, int]:
    """Work out (rows, cols) from whichever counts were given."""
    for name, count in (("row_count", row_count), ("col_count", col_count)):
        if count is not None and count < 0:
            raise ConfigurationError(f"{name} must be zero or positive, got {count}")

    # A zero count beside a non-zero one is treated as not given
    if row_count == 0 and col_count:
        row_count = None
    elif col_count == 0 and row_count:
        col_count = None

    if row_count is not None and col_count is not None:
        return row_count, col_count

    if col_count is not None:
        given_name, other_name, given = "col_count", "row_count", col_count
    elif row_count is not None:
        given_name, other_name, given = "row_count", "col_count", row_count
    else:
        return 1, item_count

    if item_count == 0 or given == 0:
        raise ConfigurationError(
            f"Ambiguous grid dimensions: {given_name}={given} with {item_count} items\n"
            f"  {other_name} cannot be solved, which would give a grid with zero dimensions\n"
            f"  Pass both row_count and col_count, or a non-empty items sequence with a non-zero {given_name}"
        )

    solved = math.ceil(item_count / given)
    if col_count is not None:
        return solved, given
    return given, solved


# =============================================================================
# Grid
# =============================================================================


class Grid(Generic[T]):
    """
    Fixed-size rectangular container of Cells with row-major storage.

    Usage:
        grid = Grid([1, 2, 3, 4, 5, 6, 7, 8, 9], col_count=3)
        grid.cell(2, 2).contents  # 9
        grid.cell(5, 0, "wrap").contents  # 3
    """

    def __init__(
        self,
        items: Sequence[T | Cell[T]] | None = None,
        row_count: int | None = None,
        col_count: int | None = None,
        *,
        overflow: OverflowLike | None = None,
        overflow_x: OverflowLike | None = None,
        overflow_y: OverflowLike | None = None,
        filler: Filler[T] | None = None,
        id: str | None = None,
    ) -> None:
        items = list(items) if items is not None else []

        self._overflow_x = Overflow.coerce(_first_set(overflow_x, overflow, Overflow.NONE))
        self._overflow_y = Overflow.coerce(_first_set(overflow_y, overflow, Overflow.NONE))
        self._row_count, self._col_count = _infer_dimensions(len(items), row_count, col_count)
        self._id = id if id is not None else generate_grid_id()

        capacity = self._row_count * self._col_count
        shortfall = max(0, capacity - len(items))

        # Too few items to fill the grid and no filler function
        if shortfall and filler is None:
            raise ConfigurationError(
                f"Insufficient items: {len(items)} supplied to a grid with {capacity} cells "
                f"({self._col_count} columns x {self._row_count} rows)\n"
                f"  Pass more items and/or a filler function"
            )

        if len(items) > capacity:
            logger.debug("Grid %s: discarding %d items beyond capacity %d", self._id, len(items) - capacity, capacity)

        cells: list[Cell[T]] = []
        for n in range(capacity):
            x = n % self._col_count
            y = n // self._col_count

            if n < len(items):
                item = items[n]
                # Pre-built cells are re-slotted: their contents move, their old position does not
                value = item.contents if isinstance(item, Cell) else item
            elif filler is not None:
                value = filler(x, y, n)
            else:
                raise ConfigurationError(f"No filler for padded slot {n}")

            cells.append(Cell(value, Position(x, y), n, self))

        self._cells: tuple[Cell[T], ...] = tuple(cells)

        logger.debug(
            "Grid %s: %d cols x %d rows, overflow=(%s, %s), %d filled",
            self._id,
            self._col_count,
            self._row_count,
            self._overflow_x.value,
            self._overflow_y.value,
            shortfall,
        )

    @classmethod
    def from_config(cls, config: GridConfig[T]) -> Grid[T]:
        """Build a grid from an explicit configuration."""
        return cls(
            config.items,
            config.row_count,
            config.col_count,
            overflow=config.overflow,
            overflow_x=config.overflow_x,
            overflow_y=config.overflow_y,
            filler=config.filler,
            id=config.id,
        )

    # -------------------------------------------------------------------------
    # Read-only properties
    # -------------------------------------------------------------------------

    @property
    def id(self) -> str:
        return self._id

    @property
    def row_count(self) -> int:
        return self._row_count

    @property
    def column_count(self) -> int:
        return self._col_count

    @property
    def overflow_x(self) -> Overflow:
        return self._overflow_x

    @property
    def overflow_y(self) -> Overflow:
        return self._overflow_y

    @property
    def cells(self) -> tuple[Cell[T], ...]:
        return self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell[T]]:
        return iter(self._cells)

    def __repr__(self) -> str:
        return (
            f"Grid(id={self._id!r}, cols={self._col_count}, rows={self._row_count}, "
            f"overflow=({self._overflow_x.value}, {self._overflow_y.value}))"
        )

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def resolve_coordinate(
        self,
        x: int,
        y: int,
        overflow_x: OverflowLike | None = None,
        overflow_y: OverflowLike | None = None,
    ) -> Position:
        """
        Apply overflow policy to a coordinate, independently per axis.

        Each axis uses its own call-site override if given, otherwise the
        grid's policy for that axis. An X override never affects Y.

        The result may still be out of range (Overflow.NONE, or an axis with
        no extent); callers check bounds.
        """
        policy_x = Overflow.coerce(overflow_x) if overflow_x is not None else self._overflow_x
        policy_y = Overflow.coerce(overflow_y) if overflow_y is not None else self._overflow_y
        return Position(
            _resolve_axis(x, self._col_count, policy_x),
            _resolve_axis(y, self._row_count, policy_y),
        )

    def _in_bounds(self, pos: Position) -> bool:
        return 0 <= pos.x < self._col_count and 0 <= pos.y < self._row_count

    def cell(
        self,
        x: int,
        y: int,
        overflow_x: OverflowLike | None = None,
        overflow_y: OverflowLike | None = None,
    ) -> Cell[T] | None:
        """Return the cell at (x, y) after overflow resolution, or None if it is off the grid."""
        pos = self.resolve_coordinate(x, y, overflow_x, overflow_y)
        if not self._in_bounds(pos):
            return None
        return self._cells[pos.y * self._col_count + pos.x]

    def row(self, index: int, overflow_y: OverflowLike | None = None) -> list[Cell[T]] | None:
        """Return the cells of one row, left to right, or None if the row does not resolve."""
        y = self.resolve_coordinate(0, index, overflow_y=overflow_y).y
        if not 0 <= y < self._row_count:
            return None
        return list(self._cells[y * self._col_count : (y + 1) * self._col_count])

    def column(self, index: int, overflow_x: OverflowLike | None = None) -> list[Cell[T]] | None:
        """Return the cells of one column, top to bottom, or None if the column does not resolve."""
        x = self.resolve_coordinate(index, 0, overflow_x=overflow_x).x
        if not 0 <= x < self._col_count:
            return None
        return [c for c in self._cells if c.list_index % self._col_count == x]

    def area(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        overflow_x: OverflowLike | None = None,
        overflow_y: OverflowLike | None = None,
    ) -> list[Cell[T]] | None:
        """
        Return a rectangle of cells in row-major order.

        Width and height include the reference cell (x, y). A negative width
        extends the rectangle left of x, a negative height extends it up from y.
        The top-left corner is resolved first; if it is off the grid the whole
        query is None. Cells inside the rectangle that do not resolve (e.g. past
        an edge under Overflow.NONE) are left out. A zero width or height is an
        empty rectangle: [] when (x, y) resolves, otherwise None.

        Examples:
            area(1, 1, 2, 2)    -> (1,1) (2,1) (1,2) (2,2)
            area(2, 2, -2, -2)  -> (1,1) (2,1) (1,2) (2,2)
        """
        if width == 0 or height == 0:
            return [] if self.cell(x, y, overflow_x, overflow_y) is not None else None

        # Convert to the number of extra steps beyond the reference cell
        span_x = width + 1 if width < 0 else width - 1
        span_y = height + 1 if height < 0 else height - 1

        anchor = self.cell(x + min(span_x, 0), y + min(span_y, 0), overflow_x, overflow_y)
        if anchor is None:
            return None

        found: list[Cell[T]] = []
        for r in range(abs(span_y) + 1):
            for c in range(abs(span_x) + 1):
                neighbour = anchor.relative(c, r, overflow_x, overflow_y)
                if neighbour is not None:
                    found.append(neighbour)
        return found
