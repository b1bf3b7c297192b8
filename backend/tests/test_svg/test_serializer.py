"""Tests for SVG output."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from pixelpoly.engine.extractor import extract_grid
from pixelpoly.engine.shapes import ExtractionResult, Line, Polygon
from pixelpoly.svg.serializer import hex_color, line_element, serialize_svg, write_svg
from tests.conftest import TRIANGLE, text_grid, uniform_grid

NS = "{http://www.w3.org/2000/svg}"


def test_hex_color_ignores_alpha():
    assert hex_color((1, 2, 3, 4)) == "#010203"
    assert hex_color((255, 170, 0)) == "#FFAA00"
    assert hex_color((0, 0, 0, 0)) == "#000000"


def test_dimensions_follow_grid():
    svg = serialize_svg(extract_grid(uniform_grid()))
    root = ET.fromstring(svg)
    assert root.get("width") == "5"
    assert root.get("height") == "4"
    assert root.get("viewBox") == "0 0 5 4"


def test_polygon_points_and_paint():
    svg = serialize_svg(extract_grid(uniform_grid()))
    root = ET.fromstring(svg)
    polygons = root.findall(f"{NS}g/{NS}polygon")
    assert len(polygons) == 1
    poly = polygons[0]
    assert poly.get("points") == "0,0 4,0 4,3 0,3"
    assert poly.get("fill") == "#010101"
    assert poly.get("stroke") == "#010101"
    assert poly.get("class") == "#010101"


def test_lines_follow_polygons():
    result = ExtractionResult(
        width=3,
        height=3,
        polygons=[Polygon(color=(9, 9, 9), vertices=((0, 0), (2, 0), (0, 2)))],
        lines=[Line(color=(255, 0, 0), start=(2, 2), end=(2, 2))],
    )
    root = ET.fromstring(serialize_svg(result))
    tags = [child.tag.replace(NS, "") for child in root.find(f"{NS}g")]
    assert tags == ["polygon", "line"]
    line = root.find(f"{NS}g/{NS}line")
    assert (line.get("x1"), line.get("y1"), line.get("x2"), line.get("y2")) == ("2", "2", "2", "2")
    assert line.get("stroke") == "#FF0000"


def test_line_element_attributes():
    elem = line_element(Line(color=(0, 16, 255, 255), start=(1, 2), end=(3, 2)))
    assert elem["tag"] == "line"
    assert (elem["x1"], elem["y1"], elem["x2"], elem["y2"]) == (1, 2, 3, 2)
    assert elem["fill"] == "#0010FF"


def test_title_is_escaped():
    svg = serialize_svg(extract_grid(uniform_grid()), title="a < b & c")
    root = ET.fromstring(svg)
    assert root.find(f"{NS}title").text == "a < b & c"


def test_write_svg(tmp_path):
    result = extract_grid(text_grid(TRIANGLE))
    path = write_svg(result, tmp_path / "triangle.svg")
    text = path.read_text(encoding="utf-8")
    assert text.startswith("<?xml")
    assert text.count("<polygon") == 2
    assert text == serialize_svg(result)
