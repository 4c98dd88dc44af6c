"""Hermetic — inscribed triangles, vertex rays and a nested center cross."""

from __future__ import annotations

import math

from sigilworks.engine.config import SynthesisConfig
from sigilworks.engine.features import FeatureSet
from sigilworks.engine.primitives import PathBuilder, Point
from sigilworks.engine.registry import Paradigm, grammar
from sigilworks.utils.geometry import harmonic_weight, polar, triangle

_OUTER_SCALE = 0.8
_INNER_RHYTHM_MIN = 0.3
_RAY_BASE = 0.15
_CROSS_STEP = 4.0


def _closed(builder: PathBuilder, vertices: list[Point]) -> None:
    for a, b in zip(vertices, vertices[1:] + vertices[:1]):
        builder.line(a, b)


@grammar(Paradigm.HERMETIC, description="Inscribed triangle, inner triangle, vertex rays, center crosses")
def hermetic(features: FeatureSet, builder: PathBuilder, cfg: SynthesisConfig) -> None:
    center = Point(cfg.center_x, cfg.center_y)
    rotation = features.phase_angles[0] if features.phase_angles else 0.0
    outer_r = cfg.radius * _OUTER_SCALE
    outer = triangle(center, outer_r, rotation)
    _closed(builder, outer)

    if features.is_empty:
        return

    # Inverted inner triangle only when all three edges fit
    if features.rhythm > _INNER_RHYTHM_MIN and builder.remaining >= 3:
        _closed(builder, triangle(center, outer_r * features.rhythm, rotation + math.pi))

    for i, vertex in enumerate(outer):
        if builder.full:
            return
        angle = math.atan2(vertex.y - center.y, vertex.x - center.x)
        length = cfg.radius * (_RAY_BASE + _RAY_BASE * harmonic_weight(features.harmonic(i)))
        builder.line(vertex, polar(vertex, length, angle))

    # Filler: center crosses, alternating upright and diagonal, growing outward
    k = 0
    while not builder.full:
        half = _CROSS_STEP * (k + 1)
        if k % 2 == 0:
            builder.cross(center, half)
        else:
            builder.x_mark(center, half)
        k += 1
