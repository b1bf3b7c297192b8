"""Write SVG output from extracted polygons and lines."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any
from xml.sax.saxutils import escape

from pixelpoly.engine.grid import Color
from pixelpoly.engine.shapes import ExtractionResult, Line, Polygon

logger = logging.getLogger(__name__)


def hex_color(color: Color) -> str:
    """``#RRGGBB`` from the first three channels; alpha is ignored."""
    r, g, b = color[:3]
    return f"#{r:02X}{g:02X}{b:02X}"


def _paint(color: Color) -> dict[str, str]:
    h = hex_color(color)
    return {"class": h, "stroke": h, "fill": h}


def polygon_element(polygon: Polygon) -> dict[str, Any]:
    points = " ".join(f"{col},{row}" for col, row in polygon.vertices)
    return {"tag": "polygon", "points": points, **_paint(polygon.color)}


def line_element(line: Line) -> dict[str, Any]:
    return {
        "tag": "line",
        "x1": line.start[0],
        "y1": line.start[1],
        "x2": line.end[0],
        "y2": line.end[1],
        **_paint(line.color),
    }


def serialize_svg(result: ExtractionResult, title: str = "") -> str:
    """Generate SVG markup: polygons first, then lines, all in one group.

    The canvas is one unit per grid cell, so ``width``/``height`` are the
    grid's column and row counts.
    """
    w, h = result.width, result.height
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg width="{w}" height="{h}" viewBox="0 0 {w} {h}" xmlns="http://www.w3.org/2000/svg">',
    ]
    if title:
        lines.append(f"  <title>{escape(title)}</title>")

    elements = [polygon_element(p) for p in result.polygons]
    elements += [line_element(ln) for ln in result.lines]

    lines.append("  <g>")
    for elem in elements:
        tag = elem["tag"]
        attr_str = " ".join(f'{k}="{v}"' for k, v in elem.items() if k != "tag")
        lines.append(f"    <{tag} {attr_str} />")
    lines.append("  </g>")

    lines.append("</svg>")
    return "\n".join(lines)


def write_svg(result: ExtractionResult, path: str | Path, title: str = "") -> Path:
    """Serialize ``result`` and write it to ``path``."""
    path = Path(path)
    path.write_text(serialize_svg(result, title=title), encoding="utf-8")
    logger.info("Wrote SVG to %s", path)
    return path
