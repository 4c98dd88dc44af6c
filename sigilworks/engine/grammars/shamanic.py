"""Shamanic — an outward spiral drawn chord by chord, studded with power marks."""

from __future__ import annotations

from sigilworks.engine.config import SynthesisConfig
from sigilworks.engine.features import FeatureSet
from sigilworks.engine.primitives import PathBuilder, Point
from sigilworks.engine.registry import Paradigm, grammar
from sigilworks.utils.geometry import archimedean_spiral, harmonic_weight

_BASE_TURNS = 1.5
_VOWEL_TURNS = 2.0

# Each chord spans two spiral samples; the last may span one
_CHORD_STRIDE = 2

# Power marks follow chords whose harmonic weight reaches this
_MARK_WEIGHT_MIN = 0.3
_MARK_BASE = 3.0
_MARK_SPAN = 5.0


@grammar(Paradigm.SHAMANIC, description="Archimedean spiral chords interleaved with power marks")
def shamanic(features: FeatureSet, builder: PathBuilder, cfg: SynthesisConfig) -> None:
    rotation = features.phase_angles[0] if features.phase_angles else 0.0
    turns = _BASE_TURNS + features.vowel_ratio * _VOWEL_TURNS
    points = archimedean_spiral(
        Point(cfg.center_x, cfg.center_y),
        cfg.radius,
        turns,
        cfg.spiral_point_cap,
        rotation,
    )

    if len(points) < 2:
        return

    # Chord endpoints: every second sample, closing on the last so the spiral
    # reaches its full radius and turn count
    stops = list(range(0, len(points), _CHORD_STRIDE))
    if stops[-1] != len(points) - 1:
        stops.append(len(points) - 1)

    for chord, (a, b) in enumerate(zip(stops, stops[1:])):
        if not builder.line(points[a], points[b]):
            return
        # Opening chord is the anchor; empty statements stop there
        if features.is_empty:
            return

        weight = harmonic_weight(features.harmonic(chord))
        if weight >= _MARK_WEIGHT_MIN:
            builder.x_mark(points[b], _MARK_BASE + _MARK_SPAN * weight)
