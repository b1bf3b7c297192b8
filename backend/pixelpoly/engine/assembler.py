"""Turn a shape's column ranges into a closed outline and claim its cells."""

from __future__ import annotations

import logging

from pixelpoly.engine.grid import Grid
from pixelpoly.engine.shapes import Point, Polygon, Shape

logger = logging.getLogger(__name__)


def build_outline(shape: Shape) -> list[Point]:
    """Ordered outline vertices: top edge left→right, then bottom edge right→left.

    Where neighbouring columns' tops (or bottoms) differ by more than one row a
    corner vertex is inserted, so every step between vertices is either a
    vertical run or a single horizontal/diagonal move.
    """
    if shape.column_count < 2:
        raise ValueError(f"outline needs at least two columns, got {shape.column_count}")

    cols = sorted(shape.columns)
    tops = {c: shape.columns[c][0] for c in cols}
    bottoms = {c: shape.columns[c][1] for c in cols}
    points: list[Point] = []

    # Top edge, left to right
    for i, col in enumerate(cols):
        top = tops[col]
        points.append((col, top))
        if i + 1 < len(cols):
            next_col = cols[i + 1]
            next_top = tops[next_col]
            if next_top > top + 1:
                points.append((col, next_top - 1))
            elif next_top < top - 1:
                points.append((next_col, top - 1))

    # Bottom edge, right to left
    for i in range(len(cols) - 1, -1, -1):
        col = cols[i]
        bottom = bottoms[col]
        points.append((col, bottom))
        if i > 0:
            next_col = cols[i - 1]
            next_bottom = bottoms[next_col]
            if next_bottom < bottom - 1:
                points.append((col, next_bottom + 1))
            elif next_bottom > bottom + 1:
                points.append((next_col, bottom + 1))

    return _drop_repeats(points)


def _drop_repeats(points: list[Point]) -> list[Point]:
    outline: list[Point] = []
    for p in points:
        if not outline or outline[-1] != p:
            outline.append(p)
    # Closing vertex is implicit
    if len(outline) > 1 and outline[-1] == outline[0]:
        outline.pop()
    return outline


def claim_shape(shape: Shape, grid: Grid) -> None:
    """Mark every cell in the shape's column ranges consumed."""
    for col, (top, bottom) in shape.columns.items():
        grid.consume_range(col, top, bottom)


def assemble_polygon(shape: Shape, grid: Grid) -> Polygon:
    """Build the polygon for ``shape`` and consume its cells on ``grid``."""
    outline = build_outline(shape)
    claim_shape(shape, grid)
    logger.debug(
        "Assembled polygon: %d columns, %d cells, %d vertices",
        shape.column_count,
        shape.cell_count,
        len(outline),
    )
    return Polygon(color=shape.color, vertices=tuple(outline))
