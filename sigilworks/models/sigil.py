"""Sigil models — the generated glyph, the stored record built around it, and
the practice journal entries (manifestations, gnosis sessions) attached to it."""

from __future__ import annotations

import enum
import uuid
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from sigilworks.engine.registry import Paradigm
from sigilworks.engine.synthesizer import GeneratedSigil


class GnosisMethod(str, enum.Enum):
    MEDITATION = "meditation"
    DANCE = "dance"
    EXHAUSTION = "exhaustion"
    SEX = "sex"
    PAIN = "pain"
    INTOXICATION = "intoxication"
    OTHER = "other"


def _new_id() -> str:
    return str(uuid.uuid4())


class Manifestation(BaseModel):
    """An observed outcome the practitioner attributes to a sigil."""

    id: str = Field(default_factory=_new_id)
    date: datetime
    description: str
    synchronicities: list[str] = Field(default_factory=list)
    confidence: float = Field(default=0.5, ge=0.0, le=1.0, description="How sure the link to the sigil is")
    emotional_resonance: float = Field(default=0.0, ge=-1.0, le=1.0, description="Negative to positive")


class GnosisSession(BaseModel):
    """One altered-state working; every sigil listed is charged at ``date``."""

    id: str = Field(default_factory=_new_id)
    date: datetime
    method: GnosisMethod = GnosisMethod.MEDITATION
    duration_minutes: float = Field(default=0.0, ge=0.0)
    intensity: float = Field(default=0.5, ge=0.0, le=1.0)
    sigils_charged: list[str] = Field(default_factory=list)
    notes: str | None = None


class SigilRecord(BaseModel):
    """A stored sigil. Mutated only through SigilStore operations."""

    id: str
    statement: str
    paradigm: Paradigm
    path_data: str
    created_at: datetime
    charge_events: list[datetime] = Field(default_factory=list)
    resonance_strength: float = Field(default=0.5, ge=0.0, le=1.0)
    resonance_updated_at: datetime | None = None
    gnosis_method: GnosisMethod = GnosisMethod.MEDITATION
    manifestations: list[Manifestation] = Field(default_factory=list)
    lunar_phase: str | None = None
    planetary_hour: str | None = None

    @classmethod
    def from_generated(
        cls,
        sigil: GeneratedSigil,
        id: str,
        gnosis_method: GnosisMethod = GnosisMethod.MEDITATION,
        resonance_strength: float = 0.5,
    ) -> "SigilRecord":
        return cls(
            id=id,
            statement=sigil.statement,
            paradigm=sigil.paradigm,
            path_data=sigil.path_data,
            created_at=sigil.created_at,
            resonance_strength=resonance_strength,
            resonance_updated_at=sigil.created_at,
            gnosis_method=gnosis_method,
        )


class SigilPatch(BaseModel):
    """Fields a caller may change on a stored sigil. Geometry is not patchable.

    Only fields present in the payload are applied. ``lunar_phase`` and
    ``planetary_hour`` may be cleared with null; the others may not.
    """

    gnosis_method: GnosisMethod | None = None
    resonance_strength: float | None = Field(default=None, ge=0.0, le=1.0)
    lunar_phase: str | None = None
    planetary_hour: str | None = None

    @field_validator("gnosis_method", "resonance_strength")
    @classmethod
    def not_null(cls, value):
        if value is None:
            raise ValueError("field may not be null")
        return value
