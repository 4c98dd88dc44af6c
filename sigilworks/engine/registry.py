"""Grammar registry — every paradigm maps to exactly one grammar function.

Usage:
    @grammar(Paradigm.HERMETIC, description="Inscribed triangles with vertex rays")
    def hermetic(features: FeatureSet, builder: PathBuilder, cfg: SynthesisConfig) -> None:
        builder.line(a, b)

Adding a paradigm = adding an enum member and one grammar module. Feature
extraction never changes.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from sigilworks.engine.config import SynthesisConfig
    from sigilworks.engine.features import FeatureSet
    from sigilworks.engine.primitives import PathBuilder

logger = logging.getLogger(__name__)

GrammarFn = Callable[["FeatureSet", "PathBuilder", "SynthesisConfig"], None]


class Paradigm(str, enum.Enum):
    CHAOS = "chaos"
    HERMETIC = "hermetic"
    SHAMANIC = "shamanic"
    CYBERNETIC = "cybernetic"

    @classmethod
    def parse(cls, value: "Paradigm | str") -> "Paradigm":
        """Boundary check: unknown paradigm names raise ValueError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            allowed = ", ".join(p.value for p in cls)
            raise ValueError(f"Unknown paradigm {value!r} (expected one of: {allowed})") from None


@dataclass
class GrammarSpec:
    paradigm: Paradigm
    fn: GrammarFn
    description: str = ""


class GrammarRegistry:
    """Closed paradigm → grammar table."""

    def __init__(self) -> None:
        self._grammars: dict[Paradigm, GrammarSpec] = {}

    def register(self, spec: GrammarSpec) -> None:
        if spec.paradigm in self._grammars:
            raise ValueError(f"Duplicate grammar for paradigm: {spec.paradigm.value}")
        self._grammars[spec.paradigm] = spec
        logger.debug("Registered grammar %s", spec.paradigm.value)

    def get(self, paradigm: Paradigm) -> GrammarSpec:
        return self._grammars[paradigm]

    def all(self) -> list[GrammarSpec]:
        return [self._grammars[p] for p in Paradigm if p in self._grammars]

    def missing(self) -> list[Paradigm]:
        return [p for p in Paradigm if p not in self._grammars]

    @property
    def count(self) -> int:
        return len(self._grammars)


# Module-level registry, populated once at import of the grammars package
_registry = GrammarRegistry()


def get_registry() -> GrammarRegistry:
    return _registry


def grammar(paradigm: Paradigm, *, description: str = ""):
    """Decorator to register a grammar function for a paradigm."""

    def decorator(fn: GrammarFn) -> GrammarFn:
        _registry.register(GrammarSpec(paradigm=paradigm, fn=fn, description=description))
        return fn

    return decorator
