"""Extraction orchestrator — scans a grid once for polygons, then once more for lines.

Both passes are row-major: row outer, column inner. Output order follows the
scan, so the same grid always produces the same shapes in the same order.
"""

from __future__ import annotations

import logging
import time

from pixelpoly.engine.assembler import assemble_polygon
from pixelpoly.engine.config import ExtractionConfig
from pixelpoly.engine.grid import Grid
from pixelpoly.engine.line_sweeper import sweep_lines
from pixelpoly.engine.reducer import reduce_outline
from pixelpoly.engine.shape_builder import ShapeBuilder
from pixelpoly.engine.shapes import ExtractionResult, Line, Polygon

logger = logging.getLogger(__name__)


class ShapeExtractor:
    """Owns one grid for the duration of an extraction run."""

    def __init__(self, grid: Grid, config: ExtractionConfig | None = None) -> None:
        self.grid = grid
        self.config = config or ExtractionConfig()
        self.builder = ShapeBuilder(grid)
        self.reductions = 0

    def extract_polygons(self) -> list[Polygon]:
        """Polygon pass over every cell, in row-major order."""
        polygons: list[Polygon] = []
        grid = self.grid
        for row in range(grid.row_count):
            for col in range(grid.column_count):
                shape = self.builder.build(col, row)
                if shape is None:
                    continue
                polygon = assemble_polygon(shape, grid)
                if self.config.reduce_outlines:
                    count, vertices = reduce_outline(polygon.vertices)
                    self.reductions += count
                    polygon = Polygon(color=polygon.color, vertices=tuple(vertices))
                polygons.append(polygon)
        return polygons

    def extract_lines(self) -> list[Line]:
        """Line pass over whatever the polygon pass left unconsumed."""
        return sweep_lines(self.grid)

    def run(self) -> ExtractionResult:
        """Run both passes and collect the result."""
        start = time.perf_counter()
        grid = self.grid

        t0 = time.perf_counter()
        polygons = self.extract_polygons()
        logger.debug(
            "  polygon pass: %d polygons in %.1fms (%d cells left)",
            len(polygons),
            (time.perf_counter() - t0) * 1000,
            grid.unconsumed_count(),
        )

        lines: list[Line] = []
        if self.config.emit_lines:
            t0 = time.perf_counter()
            lines = self.extract_lines()
            logger.debug("  line pass: %d lines in %.1fms", len(lines), (time.perf_counter() - t0) * 1000)

        elapsed = (time.perf_counter() - start) * 1000
        logger.info(
            "Extraction complete: %dx%d grid → %d polygons, %d lines in %.0fms",
            grid.column_count,
            grid.row_count,
            len(polygons),
            len(lines),
            elapsed,
        )
        return ExtractionResult(
            width=grid.column_count,
            height=grid.row_count,
            polygons=polygons,
            lines=lines,
            reductions=self.reductions,
            elapsed_ms=elapsed,
        )


def create_extractor(grid: Grid, config: ExtractionConfig | None = None) -> ShapeExtractor:
    """Factory: extractor bound to ``grid``."""
    return ShapeExtractor(grid=grid, config=config)


def extract_grid(grid: Grid, config: ExtractionConfig | None = None) -> ExtractionResult:
    """Extract all polygons and lines from ``grid``, consuming every cell."""
    return create_extractor(grid, config).run()
