"""Claim cells the polygon pass left behind as straight one-cell runs."""

from __future__ import annotations

import logging

from pixelpoly.engine.compass import Direction, clockwise_from
from pixelpoly.engine.grid import Grid
from pixelpoly.engine.shapes import Line

logger = logging.getLogger(__name__)

# Walker is assumed to face south; probing starts on its left and turns clockwise.
_INITIAL_HEADING = Direction.S
PROBE_ORDER: list[Direction] = clockwise_from(_INITIAL_HEADING.turn_left())


def line_direction(grid: Grid, col: int, row: int) -> Direction | None:
    """First probe direction whose neighbor matches this cell's color."""
    color = grid.color_at(col, row)
    for direction in PROBE_ORDER:
        if grid.neighbor_matches(color, col, row, direction):
            return direction
    return None


def sweep_line(grid: Grid, col: int, row: int) -> Line:
    """Consume the run starting at (col, row) and return it as a Line.

    A cell with no matching neighbor becomes a single-cell dot.
    """
    color = grid.color_at(col, row)
    direction = line_direction(grid, col, row)
    if direction is None:
        grid.consume(col, row)
        return Line(color=color, start=(col, row), end=(col, row))

    cur_col, cur_row = col, row
    while grid.neighbor_matches(color, cur_col, cur_row, direction):
        grid.consume(cur_col, cur_row)
        cur_col, cur_row = grid.neighbor(cur_col, cur_row, direction)
    grid.consume(cur_col, cur_row)

    return Line(color=color, start=(col, row), end=(cur_col, cur_row))


def sweep_lines(grid: Grid) -> list[Line]:
    """Row-major pass turning every unconsumed cell into part of some Line."""
    lines: list[Line] = []
    for row in range(grid.row_count):
        for col in range(grid.column_count):
            if grid.is_consumed(col, row):
                continue
            line = sweep_line(grid, col, row)
            logger.debug("Line %s → %s (%d cells)", line.start, line.end, line.cell_count)
            lines.append(line)
    return lines
