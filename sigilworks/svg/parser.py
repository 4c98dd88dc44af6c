"""Path-data measurement — facade over svgpathtools.

Reads back the move/line mini-language the synthesizer emits so budgets and
canvas bounds can be checked without trusting the generator.
"""

from __future__ import annotations

import logging
import re

from pydantic import BaseModel
from svgpathtools import Line, parse_path

logger = logging.getLogger(__name__)

_MOVE_RE = re.compile(r"[Mm]")


class PathStats(BaseModel):
    primitive_count: int = 0
    segment_count: int = 0
    # (xmin, ymin, xmax, ymax)
    bbox: tuple[float, float, float, float] = (0.0, 0.0, 0.0, 0.0)
    total_length: float = 0.0
    lines_only: bool = True


def count_primitives(path_data: str) -> int:
    """Number of move commands, i.e. emitted primitives."""
    return len(_MOVE_RE.findall(path_data))


def measure_path(path_data: str) -> PathStats:
    """Parse path data and report primitive/segment counts, bbox and length."""
    if not path_data.strip():
        return PathStats()

    path = parse_path(path_data)
    if len(path) == 0:
        return PathStats(primitive_count=count_primitives(path_data))

    xmin, xmax, ymin, ymax = path.bbox()
    length = sum(seg.length() for seg in path)
    stats = PathStats(
        primitive_count=count_primitives(path_data),
        segment_count=len(path),
        bbox=(float(xmin), float(ymin), float(xmax), float(ymax)),
        total_length=float(length),
        lines_only=all(isinstance(seg, Line) for seg in path),
    )
    logger.debug("Measured path: %d primitives, %d segments", stats.primitive_count, stats.segment_count)
    return stats
