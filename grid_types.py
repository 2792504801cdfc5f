"""
Shared type definitions for the gridarr system.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable, Generic, Sequence, TypeVar, Union

if TYPE_CHECKING:
    from gridarr import Cell

T = TypeVar("T")


class ConfigurationError(ValueError):
    """A grid configuration that cannot produce a rectangular grid."""


class Overflow(Enum):
    """How an out-of-range coordinate is resolved on one axis."""

    NONE = "none"  # Passed through unchanged (lookup misses)
    WRAP = "wrap"  # Taken modulo the axis extent
    CONSTRAIN = "constrain"  # Clamped to the nearest edge

    @classmethod
    def coerce(cls, value: OverflowLike) -> Overflow:
        """Accept an Overflow member or its string value."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            valid = ", ".join(repr(member.value) for member in cls)
            raise ConfigurationError(
                f"Invalid overflow policy: {value!r}\n"
                f"  Valid policies: {valid}"
            ) from None


OverflowLike = Union[Overflow, str]


@dataclass(frozen=True)
class Position:
    """A column/row coordinate with an origin of (0, 0) at the top left."""

    x: int
    y: int


# Type alias for the filler callback: (col, row, index) -> value
Filler = Callable[[int, int, int], T]


@dataclass
class GridConfig(Generic[T]):
    """Everything needed to build a Grid.

    Unset counts are inferred from the number of items. Per-axis overflow
    settings take precedence over the ``overflow`` shorthand; an axis with
    neither set uses Overflow.NONE. A missing ``id`` is generated.
    """

    items: Sequence[T | Cell[T]] = ()
    row_count: int | None = None
    col_count: int | None = None
    overflow: OverflowLike | None = None
    overflow_x: OverflowLike | None = None
    overflow_y: OverflowLike | None = None
    filler: Filler[T] | None = None
    id: str | None = None
