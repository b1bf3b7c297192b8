"""Cell grid — colors plus per-cell consumption flags, indexed (column, row)."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from pixelpoly.engine.compass import Direction

Color = tuple[int, ...]


@dataclass(frozen=True)
class Cell:
    """Read-only view of one grid position."""

    color: Color
    consumed: bool


class Grid:
    """A fixed-size matrix of colored cells.

    ``colors`` has shape ``(columns, rows, channels)``: the column index is the
    outer one, matching how decoded images are laid out as columns of rows.
    Consumption only ever goes from False to True.
    """

    def __init__(self, colors: NDArray[np.uint8]) -> None:
        colors = np.asarray(colors, dtype=np.uint8)
        if colors.ndim != 3:
            raise ValueError(f"grid colors must be 3-D (columns, rows, channels), got shape {colors.shape}")
        cols, rows, channels = colors.shape
        if cols == 0 or rows == 0:
            raise ValueError("grid must have at least one column and one row")
        if channels not in (3, 4):
            raise ValueError(f"colors need 3 or 4 channels, got {channels}")
        self.colors = colors
        self.consumed = np.zeros((cols, rows), dtype=bool)

    @classmethod
    def from_columns(cls, columns: Sequence[Sequence[Sequence[int]]]) -> Grid:
        """Build from a list of columns, each a list of colors top to bottom."""
        if not columns or not columns[0]:
            raise ValueError("grid must have at least one column and one row")
        heights = {len(col) for col in columns}
        if len(heights) > 1:
            raise ValueError(f"columns have differing heights: {sorted(heights)}")
        widths = {len(color) for col in columns for color in col}
        if len(widths) > 1:
            raise ValueError(f"colors have differing channel counts: {sorted(widths)}")
        values = np.array(columns, dtype=np.int64)
        if values.min() < 0 or values.max() > 255:
            raise ValueError("color channels must be within 0-255")
        return cls(values.astype(np.uint8))

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Sequence[int]]]) -> Grid:
        """Build from a list of rows, each a list of colors left to right."""
        if not rows or not rows[0]:
            raise ValueError("grid must have at least one column and one row")
        widths = {len(row) for row in rows}
        if len(widths) > 1:
            raise ValueError(f"rows have differing widths: {sorted(widths)}")
        columns = [[row[c] for row in rows] for c in range(len(rows[0]))]
        return cls.from_columns(columns)

    # ── Dimensions ──

    @property
    def column_count(self) -> int:
        return self.colors.shape[0]

    @property
    def row_count(self) -> int:
        return self.colors.shape[1]

    @property
    def cell_count(self) -> int:
        return self.column_count * self.row_count

    # ── Cell access ──

    def color_at(self, col: int, row: int) -> Color:
        return tuple(int(v) for v in self.colors[col, row])

    def is_consumed(self, col: int, row: int) -> bool:
        return bool(self.consumed[col, row])

    def cell(self, col: int, row: int) -> Cell:
        return Cell(color=self.color_at(col, row), consumed=self.is_consumed(col, row))

    def __getitem__(self, key: tuple[int, int]) -> Cell:
        col, row = key
        return self.cell(col, row)

    def consume(self, col: int, row: int) -> None:
        self.consumed[col, row] = True

    def consume_range(self, col: int, top: int, bottom: int) -> None:
        """Consume rows ``top..bottom`` inclusive of one column."""
        self.consumed[col, top:bottom + 1] = True

    def unconsumed_count(self) -> int:
        return int(self.cell_count - np.count_nonzero(self.consumed))

    # ── Boundaries ──

    def is_top(self, row: int) -> bool:
        return row == 0

    def is_bottom(self, row: int) -> bool:
        return row == self.row_count - 1

    def is_left(self, col: int) -> bool:
        return col == 0

    def is_right(self, col: int) -> bool:
        return col == self.column_count - 1

    def is_edge_column(self, col: int, toward: Direction) -> bool:
        """True when no column exists beyond ``col`` heading ``toward`` (E or W)."""
        if toward == Direction.E:
            return self.is_right(col)
        if toward == Direction.W:
            return self.is_left(col)
        raise ValueError(f"edge column test needs E or W, got {toward.name}")

    def in_bounds(self, col: int, row: int, direction: Direction) -> bool:
        dc, dr = direction.offset
        return 0 <= col + dc < self.column_count and 0 <= row + dr < self.row_count

    def neighbor(self, col: int, row: int, direction: Direction) -> tuple[int, int]:
        """Coordinate of the adjacent cell; off-grid lookups are a caller bug."""
        if not self.in_bounds(col, row, direction):
            raise IndexError(f"no {direction.name} neighbor for cell ({col}, {row})")
        dc, dr = direction.offset
        return col + dc, row + dr

    # ── Matching ──

    def matches(self, color: Color, col: int, row: int) -> bool:
        """True when the cell has exactly ``color`` and is not yet consumed."""
        if self.consumed[col, row]:
            return False
        return self.color_at(col, row) == tuple(color)

    def neighbor_matches(self, color: Color, col: int, row: int, *directions: Direction) -> bool:
        """True when any in-bounds neighbor in ``directions`` matches ``color``."""
        for direction in directions:
            if self.in_bounds(col, row, direction):
                n_col, n_row = self.neighbor(col, row, direction)
                if self.matches(color, n_col, n_row):
                    return True
        return False

    def __repr__(self) -> str:
        return f"Grid({self.column_count}x{self.row_count}, unconsumed={self.unconsumed_count()})"
