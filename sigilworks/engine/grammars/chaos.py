"""Chaos — a cross anchor overrun by phase-driven strokes, cuts and connectors."""

from __future__ import annotations

import math

from sigilworks.engine.config import SynthesisConfig
from sigilworks.engine.features import FeatureSet
from sigilworks.engine.primitives import PathBuilder, Point
from sigilworks.engine.registry import Paradigm, grammar
from sigilworks.utils.geometry import harmonic_weight, polar

# Marks cycle through three styles by index mod 3
_RADIAL, _CUT, _CONNECTOR = 0, 1, 2

# Ring the angled cuts sit on, as a fraction of radius
_CUT_RING = 0.7


@grammar(Paradigm.CHAOS, description="Cross anchor with radial strokes, angled cuts and connectors")
def chaos(features: FeatureSet, builder: PathBuilder, cfg: SynthesisConfig) -> None:
    center = Point(cfg.center_x, cfg.center_y)
    builder.cross(center, cfg.radius * (0.5 + features.rhythm * 0.5))

    if features.is_empty:
        return

    angles = features.phase_angles[: max(0, features.line_count - 2)]
    for i, angle in enumerate(angles):
        if builder.full:
            break
        size = cfg.radius * (0.4 + 0.6 * harmonic_weight(features.harmonic(i)))
        style = i % 3

        if style == _RADIAL:
            builder.line(center, polar(center, size, angle))
        elif style == _CUT:
            mid = polar(center, cfg.radius * _CUT_RING, angle)
            tilt = angle + math.pi / 4
            builder.line(polar(mid, size / 2, tilt + math.pi), polar(mid, size / 2, tilt))
        else:
            previous = angles[i - 1]
            builder.line(polar(center, size, previous), polar(center, size, angle))
