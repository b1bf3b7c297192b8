"""PixelPoly shape-extraction engine."""

from pixelpoly.engine.compass import Direction
from pixelpoly.engine.config import ExtractionConfig
from pixelpoly.engine.extractor import ShapeExtractor, create_extractor, extract_grid
from pixelpoly.engine.grid import Cell, Color, Grid
from pixelpoly.engine.shapes import ExtractionResult, Line, Polygon, Shape

__all__ = [
    "Direction",
    "ExtractionConfig",
    "ShapeExtractor",
    "create_extractor",
    "extract_grid",
    "Cell",
    "Color",
    "Grid",
    "ExtractionResult",
    "Line",
    "Polygon",
    "Shape",
]
