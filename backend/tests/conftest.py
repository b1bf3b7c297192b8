"""Shared test fixtures."""

from __future__ import annotations

import pytest

from pixelpoly.engine.grid import Grid
from pixelpoly.utils.text_grid import parse_text_grid

PALETTE = {
    ".": (0, 0, 0, 255),
    "a": (10, 20, 30, 255),
    "b": (0, 0, 255, 255),
    "g": (0, 200, 0, 255),
    "r": (255, 0, 0, 255),
    "t": (250, 200, 40, 255),
    "x": (90, 90, 90, 255),
}

# Red ladder through the middle of a blue field, green at the right
LADDER = """
bbbbb
bbrgg
rbrrg
brrbr
bbrbb
"""

# Lower-left triangle: row r has r+1 't' cells
TRIANGLE = """
tbbb
ttbb
tttb
tttt
"""

ONE = (1, 1, 1, 1)
NINE = (9, 9, 9, 9)


def text_grid(text: str) -> Grid:
    return parse_text_grid(text, PALETTE)


def uniform_grid(columns: int = 5, rows: int = 4, color: tuple[int, ...] = ONE) -> Grid:
    return Grid.from_columns([[color] * rows for _ in range(columns)])


@pytest.fixture
def ladder_grid() -> Grid:
    return text_grid(LADDER)


@pytest.fixture
def triangle_grid() -> Grid:
    return text_grid(TRIANGLE)


@pytest.fixture
def uniform() -> Grid:
    return uniform_grid()
