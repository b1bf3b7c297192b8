"""Shape, Polygon, Line and ExtractionResult — what the extractor builds and emits.

Shape → ephemeral column-range map built while growing one region
Polygon / Line → immutable output, coordinates are (column, row) cell centres
"""

from __future__ import annotations

from dataclasses import dataclass, field

from shapely.geometry import Polygon as ShapelyPolygon

from pixelpoly.engine.grid import Color

Point = tuple[int, int]


@dataclass
class Shape:
    """Per-column inclusive row ranges of one same-colored region."""

    color: Color
    # column -> (top_row, bottom_row)
    columns: dict[int, tuple[int, int]] = field(default_factory=dict)

    def add_column(self, col: int, top: int, bottom: int) -> None:
        self.columns[col] = (top, bottom)

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @property
    def cell_count(self) -> int:
        return sum(bottom - top + 1 for top, bottom in self.columns.values())


@dataclass(frozen=True)
class Polygon:
    """Closed outline; the last vertex connects back to the first."""

    color: Color
    vertices: tuple[Point, ...]

    @property
    def geometry(self) -> ShapelyPolygon | None:
        if len(self.vertices) < 3:
            return None
        return ShapelyPolygon(self.vertices)

    @property
    def area(self) -> float:
        # Cell-centre area; zero-width spikes contribute nothing
        geom = self.geometry
        if geom is None or geom.is_empty:
            return 0.0
        return float(geom.area)

    @property
    def bounds(self) -> tuple[int, int, int, int]:
        """(min_col, min_row, max_col, max_row)"""
        cols = [p[0] for p in self.vertices]
        rows = [p[1] for p in self.vertices]
        return (min(cols), min(rows), max(cols), max(rows))


@dataclass(frozen=True)
class Line:
    """A one-cell-wide run; ``start == end`` for a single dot."""

    color: Color
    start: Point
    end: Point

    @property
    def is_dot(self) -> bool:
        return self.start == self.end

    @property
    def cell_count(self) -> int:
        return max(abs(self.end[0] - self.start[0]), abs(self.end[1] - self.start[1])) + 1


@dataclass
class ExtractionResult:
    """Everything one extraction run produced, in scan order."""

    width: int
    height: int
    polygons: list[Polygon] = field(default_factory=list)
    lines: list[Line] = field(default_factory=list)
    # Collapse steps applied by the outline reducer, summed over all polygons
    reductions: int = 0
    elapsed_ms: float = 0.0

    @property
    def shape_count(self) -> int:
        return len(self.polygons) + len(self.lines)
