"""Tests for the leftover-cell line sweeper."""

from __future__ import annotations

from pixelpoly.engine.compass import Direction
from pixelpoly.engine.line_sweeper import PROBE_ORDER, line_direction, sweep_line, sweep_lines
from pixelpoly.engine.shapes import Line
from tests.conftest import NINE, ONE, PALETTE, text_grid, uniform_grid

X = PALETTE["x"]


def test_probe_order_starts_east_and_turns_clockwise():
    assert PROBE_ORDER[0] == Direction.E
    assert PROBE_ORDER[1] == Direction.SE
    assert len(set(PROBE_ORDER)) == 8


def test_top_row_of_uniform_grid():
    grid = uniform_grid()
    line = sweep_line(grid, 0, 0)
    assert line == Line(color=ONE, start=(0, 0), end=(4, 0))
    assert all(grid.is_consumed(c, 0) for c in range(5))
    assert not any(grid.is_consumed(c, 1) for c in range(5))


def test_run_stops_before_other_color():
    grid = uniform_grid()
    grid.colors[4, 1] = NINE
    line = sweep_line(grid, 1, 1)
    assert line.start == (1, 1)
    assert line.end == (3, 1)
    assert not grid.is_consumed(0, 1)
    assert not grid.is_consumed(4, 1)


def test_last_column_runs_down():
    grid = uniform_grid()
    line = sweep_line(grid, 4, 0)
    assert (line.start, line.end) == ((4, 0), (4, 3))


def test_diagonal_run():
    grid = text_grid("""
..x
.x.
x..
""")
    assert line_direction(grid, 2, 0) == Direction.SW
    line = sweep_line(grid, 2, 0)
    assert (line.start, line.end) == ((2, 0), (0, 2))
    assert line.cell_count == 3
    assert grid.is_consumed(1, 1)


def test_north_east_is_probed_last():
    grid = text_grid("""
.x
x.
""")
    line = sweep_line(grid, 0, 1)
    assert (line.start, line.end) == ((0, 1), (1, 0))


def test_lone_cell_is_a_dot():
    grid = text_grid("""
...
.x.
...
""")
    line = sweep_line(grid, 1, 1)
    assert line.is_dot
    assert line.color == X
    assert grid.is_consumed(1, 1)


def test_consumed_neighbors_do_not_extend_a_run():
    grid = uniform_grid(3, 1)
    grid.consume(1, 0)
    line = sweep_line(grid, 0, 0)
    assert line.is_dot


def test_sweep_lines_consumes_everything_in_row_major_order():
    grid = text_grid("""
ab
ab
""")
    lines = sweep_lines(grid)
    assert grid.unconsumed_count() == 0
    assert [(ln.start, ln.end) for ln in lines] == [((0, 0), (0, 1)), ((1, 0), (1, 1))]
    assert [ln.color for ln in lines] == [PALETTE["a"], PALETTE["b"]]
