"""POST /api/vectorize — raster image or explicit grid in, SVG and shapes out."""

from __future__ import annotations

import base64
import logging
import time

from fastapi import APIRouter, Depends, HTTPException

from pixelpoly.config import Settings
from pixelpoly.dependencies import get_settings
from pixelpoly.engine.config import ExtractionConfig
from pixelpoly.engine.extractor import create_extractor
from pixelpoly.engine.grid import Grid
from pixelpoly.models.requests import GridVectorizeRequest, VectorizeRequest
from pixelpoly.models.responses import LineModel, PolygonModel, VectorizeResponse
from pixelpoly.svg.serializer import hex_color, serialize_svg
from pixelpoly.utils.raster import decode_grid

logger = logging.getLogger(__name__)

router = APIRouter()


def _run(grid: Grid, reduce: bool, title: str, settings: Settings, start: float) -> VectorizeResponse:
    if grid.cell_count > settings.max_grid_cells:
        raise HTTPException(
            status_code=413,
            detail=f"grid has {grid.cell_count} cells, limit is {settings.max_grid_cells}",
        )

    extractor = create_extractor(grid, ExtractionConfig(reduce_outlines=reduce))
    result = extractor.run()
    svg = serialize_svg(result, title=title)

    elapsed = (time.perf_counter() - start) * 1000

    return VectorizeResponse(
        svg=svg,
        width=result.width,
        height=result.height,
        polygons=[
            PolygonModel(color=hex_color(p.color), points=list(p.vertices), area=p.area)
            for p in result.polygons
        ],
        lines=[
            LineModel(color=hex_color(ln.color), start=ln.start, end=ln.end)
            for ln in result.lines
        ],
        polygon_count=len(result.polygons),
        line_count=len(result.lines),
        reductions=result.reductions,
        processing_time_ms=round(elapsed, 1),
    )


@router.post("/vectorize", response_model=VectorizeResponse)
async def vectorize(req: VectorizeRequest, settings: Settings = Depends(get_settings)) -> VectorizeResponse:
    start = time.perf_counter()

    try:
        data = base64.b64decode(req.image, validate=True)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=f"image is not valid base64: {e}") from e

    keep_alpha = settings.keep_alpha if req.keep_alpha is None else req.keep_alpha
    try:
        grid = decode_grid(data, keep_alpha=keep_alpha)
    except ValueError as e:
        logger.warning("Rejected image upload: %s", e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    return _run(grid, req.reduce, req.title, settings, start)


@router.post("/vectorize/grid", response_model=VectorizeResponse)
async def vectorize_grid(req: GridVectorizeRequest, settings: Settings = Depends(get_settings)) -> VectorizeResponse:
    start = time.perf_counter()

    try:
        grid = Grid.from_columns(req.columns)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    return _run(grid, req.reduce, req.title, settings, start)
