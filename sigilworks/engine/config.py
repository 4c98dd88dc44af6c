"""Synthesis configuration — shared canvas geometry for every grammar."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SynthesisConfig:
    """Fixed geometry all paradigms draw into. Unit-agnostic; callers scale for display."""

    # Canvas center and base radius
    center_x: float = 100.0
    center_y: float = 100.0
    radius: float = 60.0

    # Square canvas edge used by the SVG wrapper (viewBox 0 0 200 200)
    canvas_size: float = 200.0

    # Shamanic spiral sampling cap
    spiral_point_cap: int = 20

    # Decimal places in emitted coordinates
    precision: int = 2


DEFAULT_CONFIG = SynthesisConfig()
