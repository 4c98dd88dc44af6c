"""SigilWorks generation engine: statement → features → path."""

from sigilworks.engine.features import FeatureSet, extract
from sigilworks.engine.registry import Paradigm, get_registry, grammar
from sigilworks.engine.synthesizer import build_primitives, generate, synthesize

__all__ = [
    "FeatureSet",
    "extract",
    "Paradigm",
    "get_registry",
    "grammar",
    "build_primitives",
    "generate",
    "synthesize",
]
