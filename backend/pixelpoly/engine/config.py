"""Extraction configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ExtractionConfig:
    """Controls what the extractor emits."""

    # Collapse straight and staircase runs in polygon outlines
    reduce_outlines: bool = True

    # Sweep leftover cells into lines; off leaves them unconsumed
    emit_lines: bool = True
