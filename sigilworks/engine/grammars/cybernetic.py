"""Cybernetic — a ring of harmonic-displaced nodes wired into a network."""

from __future__ import annotations

from itertools import combinations

import numpy as np

from sigilworks.engine.config import SynthesisConfig
from sigilworks.engine.features import FeatureSet
from sigilworks.engine.primitives import PathBuilder, Point
from sigilworks.engine.registry import Paradigm, grammar
from sigilworks.utils.geometry import harmonic_weight, ring

_MIN_NODES = 3
_MAX_NODES = 6
_RING_SCALE = 0.6
# Outward displacement per unit harmonic weight, as a fraction of the ring radius
_NODE_PUSH = 0.25
_LINK_THRESHOLD = 0.3
_NODE_MARK = 4.0


@grammar(Paradigm.CYBERNETIC, description="Node ring, harmonic links, node X-marks")
def cybernetic(features: FeatureSet, builder: PathBuilder, cfg: SynthesisConfig) -> None:
    count = max(_MIN_NODES, min(_MAX_NODES, len(features.unique_letters)))
    harmonics = [features.harmonic(i) for i in range(count)]
    base = cfg.radius * _RING_SCALE
    radii = base * (1.0 + _NODE_PUSH * np.array([harmonic_weight(h) for h in harmonics]))
    rotation = features.phase_angles[0] if features.phase_angles else 0.0
    nodes = ring(Point(cfg.center_x, cfg.center_y), radii, count, rotation)

    first, last = 0, count - 1
    builder.line(nodes[first], nodes[last])

    if features.is_empty:
        return

    for i, j in combinations(range(count), 2):
        if builder.full:
            return
        if (i, j) == (first, last):
            continue
        if (harmonics[i] + harmonics[j]) / 2 > _LINK_THRESHOLD:
            builder.line(nodes[i], nodes[j])

    for node in nodes:
        if builder.full:
            return
        builder.x_mark(node, _NODE_MARK)
