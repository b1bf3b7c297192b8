"""Outline reducer — drops redundant vertices from straight runs and staircase edges.

Two kinds of run are collapsed to their last point:
- straight: consecutive steps along one direction (R, R, R ...)
- staircase: a block of steps repeated back to back (R, R, D, R, R, D ...)

Directions are compared on the reduced step vector, so (0, 2) and (0, 1) are
both "D" while (2, 1) and (1, 1) differ. Staircase blocks compare exact step
vectors so a collapsed diagonal stays on the lattice points it replaced.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from math import gcd

from pixelpoly.engine.shapes import Point

logger = logging.getLogger(__name__)

# Patterns ending this close to the start are not worth collapsing
_MIN_PATTERN_END = 4


def step_code(a: Point, b: Point) -> str:
    """Compass letters for the step a→b, e.g. "R", "LU", "" for no move."""
    horizontal = "R" if b[0] > a[0] else "L" if b[0] < a[0] else ""
    vertical = "D" if b[1] > a[1] else "U" if b[1] < a[1] else ""
    return horizontal + vertical


def _direction(a: Point, b: Point) -> tuple[int, int]:
    dx, dy = b[0] - a[0], b[1] - a[1]
    g = gcd(dx, dy)
    if g == 0:
        return (0, 0)
    return (dx // g, dy // g)


def _steps(points: Sequence[Point]) -> list[tuple[int, int]]:
    return [(b[0] - a[0], b[1] - a[1]) for a, b in zip(points, points[1:])]


def last_repeat_index(points: Sequence[Point]) -> int:
    """Index of the last point reached before the direction first changes."""
    if len(points) <= 1:
        return 0
    first = _direction(points[0], points[1])
    for i in range(1, len(points) - 1):
        if _direction(points[i], points[i + 1]) != first:
            return i
    return len(points) - 1


def _is_monotone(steps: Sequence[tuple[int, int]]) -> bool:
    """True when no step reverses the x or y heading of another."""
    xs = {dx > 0 for dx, _ in steps if dx}
    ys = {dy > 0 for _, dy in steps if dy}
    return len(xs) <= 1 and len(ys) <= 1


def pattern_end_index(points: Sequence[Point]) -> int:
    """Index of the last point of a repeated step block, or 0 without a repeat.

    The block is the leading straight run plus the one step that breaks it.
    Only monotone blocks form a staircase; a zigzag block is never collapsed
    because its peaks would drop out of the outline.
    """
    block_len = last_repeat_index(points) + 1
    if block_len <= 1 or block_len >= len(points) - 1:
        return 0

    pattern = _steps(points[:block_len + 1])
    if not _is_monotone(pattern):
        return 0
    last = 0
    for index in range(block_len, len(points) - block_len, block_len):
        end = index + block_len
        if _steps(points[index:end + 1]) != pattern:
            return index if last else 0
        last = end
    return last


def _reduce_once(points: Sequence[Point]) -> tuple[int, list[Point]]:
    count = 0
    index = 0
    reduced = [points[0]]

    while index < len(points) - 4:
        rest = points[index:]
        skip = pattern_end_index(rest)
        if skip >= _MIN_PATTERN_END:
            reduced.append(points[index + skip])
            index += skip
            count += 1
            continue

        skip = last_repeat_index(rest)
        if skip > 1:
            reduced.append(points[index + skip])
            index += skip
            count += 1
            continue

        reduced.append(points[index + 1])
        index += 1

    # Tail is only checked for one straight run
    skip = last_repeat_index(points[index:])
    if skip > 1:
        reduced.append(points[index + skip])
        index += skip
        count += 1

    reduced.extend(points[index + 1:])
    return count, reduced


def reduce_outline(points: Sequence[Point]) -> tuple[int, list[Point]]:
    """Collapse straight and staircase runs until nothing more collapses.

    Returns ``(reduction_count, points)``; outlines shorter than three points
    come back unchanged.
    """
    current = list(points)
    if len(current) < 3:
        return 0, current

    total = 0
    while True:
        count, current = _reduce_once(current)
        if count == 0:
            break
        total += count
    if total:
        logger.debug("Reduced outline %d → %d points (%d collapses)", len(points), len(current), total)
    return total, current


def describe_outline(points: Sequence[Point]) -> str:
    """Space-separated step codes, handy in logs and test failures."""
    return " ".join(step_code(a, b) for a, b in zip(points, points[1:]))
