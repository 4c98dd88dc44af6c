"""Feature extraction — statement text → deterministic numeric FeatureSet.

Every value here is a pure function of the cleaned text. No hashing guarantees:
the seed is an aesthetic accumulator and collisions are expected.
"""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import asdict, dataclass, field
from typing import Any

_ALPHABET_SIZE = 26
_VOWELS = frozenset("aeiou")

# Sequence bounds
MAX_HARMONICS = 8
MAX_PHASE_ANGLES = 13
RHYTHM_LETTERS = 3

# line_count = clamp(floor(MIN_LINES + complexity * LINE_SPAN), MIN_LINES, MAX_LINES)
MIN_LINES = 7
MAX_LINES = 13
LINE_SPAN = 6


@dataclass(frozen=True)
class FeatureSet:
    """Rhythmic/harmonic features of a statement."""

    cleaned_text: str = ""
    seed: int = 0
    unique_letters: tuple[str, ...] = field(default_factory=tuple)
    harmonics: tuple[float, ...] = field(default_factory=tuple)
    phase_angles: tuple[float, ...] = field(default_factory=tuple)
    rhythm: float = 0.0
    vowel_ratio: float = 0.0
    consonant_ratio: float = 0.0
    complexity: float = 0.0
    line_count: int = MIN_LINES

    @property
    def is_empty(self) -> bool:
        return not self.unique_letters

    def harmonic(self, index: int) -> float:
        """Harmonic at index, 0.0 past the end."""
        if 0 <= index < len(self.harmonics):
            return self.harmonics[index]
        return 0.0

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        for key in ("unique_letters", "harmonics", "phase_angles"):
            data[key] = list(data[key])
        return data


def clean_statement(statement: str) -> str:
    """Lower-case and keep only a–z."""
    return "".join(c for c in statement.lower() if "a" <= c <= "z")


def letter_index(letter: str) -> int:
    """0 for 'a' … 25 for 'z'."""
    return ord(letter) - ord("a")


def line_count_for(complexity: float) -> int:
    """Primitive budget for a complexity score. Non-decreasing in complexity."""
    raw = math.floor(MIN_LINES + complexity * LINE_SPAN)
    return max(MIN_LINES, min(MAX_LINES, raw))


def extract(statement: str) -> FeatureSet:
    """Derive the FeatureSet for a statement. Total: never raises."""
    cleaned = clean_statement(statement)
    if not cleaned:
        return FeatureSet()

    n = len(cleaned)
    seed = sum(ord(c) * (i + 1) for i, c in enumerate(cleaned))

    freq = Counter(cleaned)
    unique = tuple(dict.fromkeys(cleaned))

    harmonics = tuple(
        letter_index(letter) * freq[letter] / n for letter in unique[:MAX_HARMONICS]
    )

    phase_angles = tuple(
        ((ord(c) * (i + 1)) % 360) * (math.pi / 180)
        for i, c in enumerate(cleaned[:MAX_PHASE_ANGLES])
    )

    leading = unique[:RHYTHM_LETTERS]
    rhythm = sum(letter_index(letter) / 25 for letter in leading) / len(leading)

    vowels = sum(1 for c in cleaned if c in _VOWELS)
    vowel_ratio = vowels / max(1, n)
    consonant_ratio = (n - vowels) / max(1, n)

    complexity = (len(unique) / _ALPHABET_SIZE) * vowel_ratio * consonant_ratio * rhythm

    return FeatureSet(
        cleaned_text=cleaned,
        seed=seed,
        unique_letters=unique,
        harmonics=harmonics,
        phase_angles=phase_angles,
        rhythm=rhythm,
        vowel_ratio=vowel_ratio,
        consonant_ratio=consonant_ratio,
        complexity=complexity,
        line_count=line_count_for(complexity),
    )
