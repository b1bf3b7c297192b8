"""Text-art grids: one character per cell, one line per row."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from pixelpoly.engine.grid import Color, Grid

SAILBOAT: list[str] = [
    "           m        ",
    "           m        ",
    "          sm        ",
    "         ssms       ",
    "        sssmss      ",
    "       ssssmss      ",
    "      sssssmsss     ",
    "    sssssssmsss     ",
    "  sssssssssmssss    ",
    "sssssssssssmssss    ",
    "           m        ",
    "  hhhhhhhhhhhhhhhhh ",
    "  hhhhhhhhhhhhhhhh  ",
    "   hhhhhhhhhhhhhh   ",
]

SAILBOAT_PALETTE: dict[str, Color] = {
    " ": (0, 0, 150, 255),  # sea
    "s": (250, 250, 245, 255),  # sail
    "m": (150, 150, 0, 255),  # mast
    "h": (220, 50, 0, 255),  # hull
}


def parse_text_grid(rows: str | Sequence[str], palette: Mapping[str, Color]) -> Grid:
    """Build a grid from text art.

    ``rows`` is either a list of equal-length strings or one multi-line string
    (surrounding blank lines are dropped). Every character must be a palette key.
    """
    if isinstance(rows, str):
        rows = rows.strip("\n").split("\n")
    if not rows:
        raise ValueError("text grid has no rows")

    widths = {len(r) for r in rows}
    if len(widths) > 1:
        raise ValueError(f"text grid rows have differing lengths: {sorted(widths)}")

    unknown = sorted({ch for r in rows for ch in r} - set(palette))
    if unknown:
        raise ValueError(f"symbols missing from palette: {unknown!r}")

    return Grid.from_rows([[palette[ch] for ch in r] for r in rows])


def sailboat_grid() -> Grid:
    """20x14 demo picture: sail, mast and hull on the sea."""
    return parse_text_grid(SAILBOAT, SAILBOAT_PALETTE)
