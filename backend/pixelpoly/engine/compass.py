"""Eight-way compass used for neighbor lookups on the cell grid."""

from __future__ import annotations

from enum import IntEnum

# (dcol, drow) per direction; rows grow southward.
_OFFSETS: dict[int, tuple[int, int]] = {
    0: (0, -1),
    1: (1, -1),
    2: (1, 0),
    3: (1, 1),
    4: (0, 1),
    5: (-1, 1),
    6: (-1, 0),
    7: (-1, -1),
}


class Direction(IntEnum):
    """Compass directions, clockwise from north."""

    N = 0
    NE = 1
    E = 2
    SE = 3
    S = 4
    SW = 5
    W = 6
    NW = 7

    @property
    def offset(self) -> tuple[int, int]:
        return _OFFSETS[self.value]

    @property
    def opposite(self) -> Direction:
        return self.rotate_right(4)

    def rotate_right(self, steps: int = 1) -> Direction:
        """Rotate clockwise by 45 degree steps."""
        return Direction((self.value + steps) % 8)

    def rotate_left(self, steps: int = 1) -> Direction:
        """Rotate counter-clockwise by 45 degree steps."""
        return Direction((self.value - steps) % 8)

    def turn_left(self) -> Direction:
        return self.rotate_left(2)


def clockwise_from(start: Direction) -> list[Direction]:
    """All eight directions, clockwise, beginning with ``start``."""
    return [start.rotate_right(i) for i in range(8)]
