"""Tests for text-art grids."""

from __future__ import annotations

import pytest

from pixelpoly.utils.text_grid import SAILBOAT, SAILBOAT_PALETTE, parse_text_grid, sailboat_grid

PALETTE = {"#": (0, 0, 0), ".": (255, 255, 255)}


def test_lines_are_rows():
    grid = parse_text_grid("#..\n.#.\n", PALETTE)
    assert (grid.column_count, grid.row_count) == (3, 2)
    assert grid.color_at(0, 0) == (0, 0, 0)
    assert grid.color_at(1, 1) == (0, 0, 0)
    assert grid.color_at(2, 1) == (255, 255, 255)


def test_list_of_rows():
    grid = parse_text_grid(["##", ".."], PALETTE)
    assert grid.color_at(1, 1) == (255, 255, 255)


def test_unknown_symbol():
    with pytest.raises(ValueError, match="palette"):
        parse_text_grid("#x", PALETTE)


def test_ragged_rows():
    with pytest.raises(ValueError, match="lengths"):
        parse_text_grid(["##", "."], PALETTE)


def test_no_rows():
    with pytest.raises(ValueError):
        parse_text_grid([], PALETTE)


def test_sailboat():
    grid = sailboat_grid()
    assert (grid.column_count, grid.row_count) == (20, 14)
    assert grid.color_at(11, 0) == SAILBOAT_PALETTE["m"]
    assert grid.color_at(0, 0) == SAILBOAT_PALETTE[" "]
    assert len(SAILBOAT) == 14
