"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from sigilworks.engine.registry import Paradigm
from sigilworks.svg.parser import PathStats


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    paradigms_registered: int = 0


class ParadigmInfo(BaseModel):
    name: Paradigm
    description: str = ""


class ParadigmsResponse(BaseModel):
    paradigms: list[ParadigmInfo] = Field(default_factory=list)


class FeaturesPayload(BaseModel):
    cleaned_text: str = ""
    seed: int = 0
    unique_letters: list[str] = Field(default_factory=list)
    harmonics: list[float] = Field(default_factory=list)
    phase_angles: list[float] = Field(default_factory=list)
    rhythm: float = 0.0
    vowel_ratio: float = 0.0
    consonant_ratio: float = 0.0
    complexity: float = 0.0
    line_count: int = 7


class GenerateResponse(BaseModel):
    statement: str
    paradigm: Paradigm
    path_data: str
    features: FeaturesPayload
    stats: PathStats
    svg: str


class StepPayload(BaseModel):
    label: str
    description: str
    content: str


class StepsResponse(BaseModel):
    statement: str
    paradigm: Paradigm
    steps: list[StepPayload] = Field(default_factory=list)


class DecayResponse(BaseModel):
    status: str = "ok"
    sigils_decayed: int = 0
