"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class VectorizeRequest(BaseModel):
    image: str = Field(..., description="Base64-encoded raster image (PNG, GIF, BMP, ...)")
    keep_alpha: bool | None = Field(
        default=None,
        description="Match cells on alpha as well; defaults to the server setting",
    )
    reduce: bool = Field(default=True, description="Collapse straight and staircase outline runs")
    title: str = Field(default="", description="Optional <title> for the SVG document")


class GridVectorizeRequest(BaseModel):
    columns: list[list[list[int]]] = Field(
        ...,
        description="Columns of rows of colors; each color is 3 or 4 channel values 0-255",
    )
    reduce: bool = Field(default=True, description="Collapse straight and staircase outline runs")
    title: str = Field(default="", description="Optional <title> for the SVG document")
