"""Path synthesizer — FeatureSet + Paradigm → bounded move/line path string."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from sigilworks.engine import grammars  # noqa: F401  (registers grammars)
from sigilworks.engine.config import DEFAULT_CONFIG, SynthesisConfig
from sigilworks.engine.features import FeatureSet, extract
from sigilworks.engine.primitives import PathBuilder, Primitive
from sigilworks.engine.registry import GrammarRegistry, Paradigm, get_registry
from sigilworks.svg.serializer import serialize_path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedSigil:
    """Output of one synthesis call. Never mutated; handed to the store as-is."""

    statement: str
    paradigm: Paradigm
    path_data: str
    created_at: datetime


def build_primitives(
    features: FeatureSet,
    paradigm: Paradigm | str,
    config: SynthesisConfig | None = None,
    registry: GrammarRegistry | None = None,
) -> list[Primitive]:
    """Run the paradigm's grammar and return the emitted primitives in order."""
    cfg = config or DEFAULT_CONFIG
    reg = registry or get_registry()
    spec = reg.get(Paradigm.parse(paradigm))

    builder = PathBuilder(budget=features.line_count, precision=cfg.precision)
    spec.fn(features, builder, cfg)

    logger.debug(
        "Synthesized %s: %d/%d primitives (seed=%d)",
        spec.paradigm.value,
        len(builder.primitives),
        builder.budget,
        features.seed,
    )
    return builder.primitives


def synthesize(
    features: FeatureSet,
    paradigm: Paradigm | str,
    config: SynthesisConfig | None = None,
) -> str:
    """Serialize the paradigm's primitives as ``M x y L x y ...`` path data."""
    cfg = config or DEFAULT_CONFIG
    return serialize_path(build_primitives(features, paradigm, cfg), cfg.precision)


def generate(statement: str, paradigm: Paradigm | str) -> GeneratedSigil:
    """Full pipeline: statement → features → path, stamped with creation time."""
    p = Paradigm.parse(paradigm)
    path_data = synthesize(extract(statement), p)
    return GeneratedSigil(
        statement=statement,
        paradigm=p,
        path_data=path_data,
        created_at=datetime.now(timezone.utc),
    )
