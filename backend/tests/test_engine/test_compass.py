"""Tests for the compass directions."""

from __future__ import annotations

from pixelpoly.engine.compass import Direction, clockwise_from


def test_directions_numbered_clockwise_from_north():
    assert [d.name for d in Direction] == ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]
    assert [int(d) for d in Direction] == list(range(8))


def test_offsets_grow_rows_southward():
    assert Direction.N.offset == (0, -1)
    assert Direction.E.offset == (1, 0)
    assert Direction.S.offset == (0, 1)
    assert Direction.SW.offset == (-1, 1)
    assert Direction.NW.offset == (-1, -1)


def test_rotation_wraps():
    assert Direction.N.rotate_right() == Direction.NE
    assert Direction.NW.rotate_right() == Direction.N
    assert Direction.N.rotate_left() == Direction.NW
    assert Direction.E.rotate_left(3) == Direction.NW
    assert Direction.SE.rotate_right(8) == Direction.SE


def test_turn_left_and_opposite():
    assert Direction.S.turn_left() == Direction.E
    assert Direction.N.turn_left() == Direction.W
    assert Direction.NE.opposite == Direction.SW
    for d in Direction:
        assert d.opposite.opposite == d
        dc, dr = d.offset
        assert d.opposite.offset == (-dc, -dr)


def test_clockwise_from_east():
    assert clockwise_from(Direction.E) == [
        Direction.E, Direction.SE, Direction.S, Direction.SW,
        Direction.W, Direction.NW, Direction.N, Direction.NE,
    ]
