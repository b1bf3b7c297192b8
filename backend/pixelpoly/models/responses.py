"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    environment: str = "development"
    max_grid_cells: int = 0


class PolygonModel(BaseModel):
    color: str = Field(..., description="#RRGGBB")
    points: list[tuple[int, int]] = Field(..., description="(column, row) vertices, implicitly closed")
    area: float = 0.0


class LineModel(BaseModel):
    color: str = Field(..., description="#RRGGBB")
    start: tuple[int, int]
    end: tuple[int, int]


class VectorizeResponse(BaseModel):
    svg: str
    width: int
    height: int
    polygons: list[PolygonModel] = Field(default_factory=list)
    lines: list[LineModel] = Field(default_factory=list)
    polygon_count: int = 0
    line_count: int = 0
    reductions: int = 0
    processing_time_ms: float = 0.0
