"""Shape builder — grows a same-colored region outward from a seed cell, one column at a time.

The seed column is measured first, then columns are added eastward and
westward. Each new column gets an upper and lower row bound derived from the
previous column, with two guards against one-cell-wide protrusions:

- chimney: a column does not climb above the region unless the cells it
  climbs through are backed by the region on the growth side
- stalactite: likewise a column does not drop below the previous column's
  range unless backed on the growth side
"""

from __future__ import annotations

import logging

from pixelpoly.engine.compass import Direction
from pixelpoly.engine.grid import Color, Grid
from pixelpoly.engine.shapes import Shape

logger = logging.getLogger(__name__)

_GROWTH_DIAGONAL = {Direction.E: Direction.SE, Direction.W: Direction.SW}


class ShapeBuilder:
    """Builds column-range shapes on a grid. Never consumes cells itself."""

    def __init__(self, grid: Grid) -> None:
        self.grid = grid

    def is_seed(self, col: int, row: int) -> bool:
        """Can a new shape start at this cell?

        The cell must be unconsumed, above the bottom row, and form a small
        triangle with matching neighbors: S with E or SE, E with SE, or S
        with SW.
        """
        grid = self.grid
        if grid.is_consumed(col, row) or grid.is_bottom(row):
            return False
        color = grid.color_at(col, row)

        def has(direction: Direction) -> bool:
            return grid.neighbor_matches(color, col, row, direction)

        south = has(Direction.S)
        if not grid.is_right(col):
            if south and (has(Direction.E) or has(Direction.SE)):
                return True
            if not south and has(Direction.E) and has(Direction.SE):
                return True
        if not grid.is_left(col):
            return south and has(Direction.SW)
        return False

    def seed_column_bottom(self, col: int, row: int, color: Color) -> int:
        """Lowest row of the seed column.

        Descent stops above a non-matching cell. A matching cell with no
        matching E or W neighbor closes the column: it is kept as the last row
        and nothing below it is taken.
        """
        grid = self.grid
        bottom = row
        while not grid.is_bottom(bottom):
            below = bottom + 1
            if not grid.matches(color, col, below):
                return bottom
            if not grid.neighbor_matches(color, col, below, Direction.E, Direction.W):
                return below
            bottom = below
        return bottom

    def upper_row(
        self, col: int, start: int, lowest: int, toward: Direction, color: Color
    ) -> int | None:
        """Top row for the next column, or None when nothing there matches.

        ``start`` and ``lowest`` are the previous column's bounds.
        """
        grid = self.grid
        if not grid.matches(color, col, start):
            for row in range(start + 1, lowest + 1):
                if grid.matches(color, col, row):
                    return row
            return None

        if grid.is_top(start) or not grid.matches(color, col, start - 1):
            return start
        if grid.is_edge_column(col, toward):
            # Only one row of lift at the outer edge
            return start - 1

        diagonal = _GROWTH_DIAGONAL[toward]
        upper = start - 1
        while upper > 0:
            row = upper - 1
            if not grid.matches(color, col, row):
                break
            if not (
                grid.neighbor_matches(color, col, row, Direction.S)
                and grid.neighbor_matches(color, col, row, diagonal)
            ):
                break
            upper = row
        return upper

    def lower_row(
        self, col: int, upper: int, lowest: int, toward: Direction, color: Color
    ) -> int:
        """Bottom row for the next column, starting from its ``upper`` row.

        Past the previous column's ``lowest`` row the column only keeps
        descending while the neighbor on the growth side matches too; the
        first row failing that test is still included.
        """
        grid = self.grid
        for row in range(upper, lowest + 1):
            if not grid.neighbor_matches(color, col, row, Direction.S):
                return row

        if grid.is_edge_column(col, toward):
            return lowest + 1

        for row in range(lowest + 1, grid.row_count):
            if not grid.neighbor_matches(color, col, row, Direction.S):
                return row
            if not grid.neighbor_matches(color, col, row, toward):
                return row
        return grid.row_count - 1

    def grow(self, shape: Shape, seed_col: int, toward: Direction) -> None:
        """Add columns to ``shape`` from ``seed_col`` outward until growth stops."""
        dcol, _ = toward.offset
        col = seed_col
        upper, lower = shape.columns[seed_col]
        while not self.grid.is_edge_column(col, toward):
            col += dcol
            new_upper = self.upper_row(col, upper, lower, toward, shape.color)
            if new_upper is None:
                break
            new_lower = self.lower_row(col, new_upper, lower, toward, shape.color)
            shape.add_column(col, new_upper, new_lower)
            if new_upper >= new_lower:
                break
            upper, lower = new_upper, new_lower

    def build(self, col: int, row: int) -> Shape | None:
        """Shape seeded at (col, row), or None when no 2-D shape starts here."""
        if not self.is_seed(col, row):
            return None
        color = self.grid.color_at(col, row)
        shape = Shape(color=color)
        shape.add_column(col, row, self.seed_column_bottom(col, row, color))
        self.grow(shape, col, Direction.E)
        self.grow(shape, col, Direction.W)
        if shape.column_count < 2:
            logger.debug("Abandoned single-column shape at (%d, %d)", col, row)
            return None
        return shape
