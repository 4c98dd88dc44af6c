"""Transformation steps — the classic statement-to-sigil breakdown, stage by stage.

Statement → Condensation → Vowel Extraction → Essence Distillation → Manifestation.
The first four stages are the traditional letter method shown to the user; the
manifestation stage is the synthesized path itself.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from sigilworks.engine.features import extract
from sigilworks.engine.registry import Paradigm
from sigilworks.engine.synthesizer import synthesize

_WHITESPACE_RE = re.compile(r"\s+")
_VOWEL_RE = re.compile(r"[AEIOU]")


@dataclass(frozen=True)
class TransformationStep:
    label: str
    description: str
    content: str


def condense(statement: str) -> str:
    return _WHITESPACE_RE.sub("", statement.upper())


def strip_vowels(text: str) -> str:
    return _VOWEL_RE.sub("", text)


def distill(text: str) -> str:
    """Distinct characters in first-occurrence order."""
    return "".join(dict.fromkeys(text))


def transformation_steps(statement: str, paradigm: Paradigm | str = Paradigm.CHAOS) -> list[TransformationStep]:
    condensed = condense(statement)
    consonants = strip_vowels(condensed)
    essence = distill(consonants)
    path_data = synthesize(extract(statement), paradigm)

    return [
        TransformationStep(
            label="Statement of Intent",
            description="The original desire expressed in words",
            content=statement,
        ),
        TransformationStep(
            label="Condensation",
            description="Remove spaces and convert to uppercase",
            content=condensed,
        ),
        TransformationStep(
            label="Vowel Extraction",
            description="Remove vowels, stripping away the obvious meaning",
            content=consonants,
        ),
        TransformationStep(
            label="Essence Distillation",
            description="Remove duplicate letters, leaving the unique essence",
            content=essence,
        ),
        TransformationStep(
            label="Sigil Manifestation",
            description="Transform the letters into abstract symbolic form",
            content=path_data,
        ),
    ]
