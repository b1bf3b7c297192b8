"""
PixelPoly CLI: converts raster images into SVG polygons and lines.

Usage:
  pixelpoly input.png                    # writes input.svg next to the image
  pixelpoly input.png -o out.svg         # explicit output file
  pixelpoly images/ -o svgs/             # each image in a folder, one after another
  pixelpoly --demo -o sailboat.svg       # built-in sailboat picture
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from pixelpoly.config import settings
from pixelpoly.engine.config import ExtractionConfig
from pixelpoly.engine.extractor import extract_grid
from pixelpoly.engine.grid import Grid
from pixelpoly.svg.serializer import write_svg
from pixelpoly.utils.raster import load_grid
from pixelpoly.utils.text_grid import sailboat_grid

logger = logging.getLogger(__name__)

IMAGE_SUFFIXES = {".png", ".gif", ".bmp", ".webp", ".tif", ".tiff"}


def convert(grid: Grid, output: Path, config: ExtractionConfig, title: str = "") -> str:
    """Extract ``grid`` into ``output``; returns a one-line summary."""
    result = extract_grid(grid, config)
    write_svg(result, output, title=title)
    return (
        f"{result.width}x{result.height} → {result.shape_count} shapes "
        f"({len(result.polygons)} polygons, {len(result.lines)} lines) "
        f"in {result.elapsed_ms:.0f}ms"
    )


def process_file(path: Path, output: Path, config: ExtractionConfig, keep_alpha: bool) -> bool:
    try:
        grid = load_grid(path, keep_alpha=keep_alpha)
        summary = convert(grid, output, config, title=path.stem)
    except (ValueError, OSError) as e:
        print(f"  ERROR: {e}", file=sys.stderr)
        return False
    print(f"  {summary}")
    print(f"  → Saved: {output}")
    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pixelpoly", description="Raster image → SVG polygons and lines")
    parser.add_argument("input", nargs="?", help="Image file or folder of images")
    parser.add_argument("-o", "--output", help="Output SVG file or folder")
    parser.add_argument("--demo", action="store_true", help="Vectorize the built-in sailboat picture")
    parser.add_argument("--no-reduce", action="store_true", help="Keep every outline vertex")
    parser.add_argument("--keep-alpha", action="store_true", help="Match cells on alpha as well (default: KEEP_ALPHA setting)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def log_level(verbose: bool) -> int:
    """``-v`` wins over PIXELPOLY_LOG_LEVEL."""
    if verbose:
        return logging.DEBUG
    return getattr(logging, settings.pixelpoly_log_level.upper(), logging.INFO)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=log_level(args.verbose),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    config = ExtractionConfig(reduce_outlines=not args.no_reduce)
    keep_alpha = args.keep_alpha or settings.keep_alpha

    if args.demo:
        output = Path(args.output or "sailboat.svg")
        print("[sailboat]")
        print(f"  {convert(sailboat_grid(), output, config, title='sailboat')}")
        print(f"  → Saved: {output}")
        return 0

    if not args.input:
        parser.error("an input image or folder is required unless --demo is given")

    source = Path(args.input)
    if source.is_dir():
        images = sorted(p for p in source.iterdir() if p.suffix.lower() in IMAGE_SUFFIXES)
        if not images:
            print("No image files found in folder.", file=sys.stderr)
            return 1
        out_dir = Path(args.output) if args.output else source
        out_dir.mkdir(parents=True, exist_ok=True)
        print(f"Processing {len(images)} files...\n")
        success = 0
        for image in images:
            print(f"[{image.name}]")
            if process_file(image, out_dir / f"{image.stem}.svg", config, keep_alpha):
                success += 1
            print()
        print(f"Done: {success}/{len(images)} processed → {out_dir}")
        return 0 if success == len(images) else 1

    if not source.exists():
        print(f"File not found: {source}", file=sys.stderr)
        return 1

    output = Path(args.output) if args.output else source.with_suffix(".svg")
    print(f"[{source.name}]")
    return 0 if process_file(source, output, config, keep_alpha) else 1


if __name__ == "__main__":
    sys.exit(main())
