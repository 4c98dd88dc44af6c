"""API request models."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from sigilworks.engine.registry import Paradigm
from sigilworks.models.sigil import GnosisMethod


class GenerateRequest(BaseModel):
    statement: str = Field(..., description="Statement of intent")
    paradigm: Paradigm = Field(default=Paradigm.CHAOS, description="Geometric grammar to apply")

    @field_validator("statement")
    @classmethod
    def statement_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("no statement supplied")
        return value


class CreateSigilRequest(GenerateRequest):
    id: str | None = Field(default=None, description="Caller-supplied identifier (uuid4 if omitted)")
    gnosis_method: GnosisMethod = Field(default=GnosisMethod.MEDITATION)


class ChargeRequest(BaseModel):
    timestamp: datetime | None = Field(default=None, description="Charge time (now if omitted)")


class DecayRequest(BaseModel):
    now: datetime | None = Field(default=None, description="Decay reference time (now if omitted)")


class ManifestationRequest(BaseModel):
    date: datetime | None = Field(default=None, description="When it was observed (now if omitted)")
    description: str = Field(..., min_length=1)
    synchronicities: list[str] = Field(default_factory=list)
    confidence: float = Field(default=0.5, ge=0.0, le=1.0)
    emotional_resonance: float = Field(default=0.0, ge=-1.0, le=1.0)


class GnosisSessionRequest(BaseModel):
    date: datetime | None = Field(default=None, description="Session time (now if omitted)")
    method: GnosisMethod = Field(default=GnosisMethod.MEDITATION)
    duration_minutes: float = Field(default=0.0, ge=0.0)
    intensity: float = Field(default=0.5, ge=0.0, le=1.0)
    sigils_charged: list[str] = Field(default_factory=list, description="Ids of sigils charged in the session")
    notes: str | None = None
