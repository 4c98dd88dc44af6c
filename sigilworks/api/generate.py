"""POST /api/generate, /api/steps — stateless sigil generation."""

from __future__ import annotations

import logging

from fastapi import APIRouter

from sigilworks.engine.config import DEFAULT_CONFIG
from sigilworks.engine.features import extract
from sigilworks.engine.steps import transformation_steps
from sigilworks.engine.synthesizer import synthesize
from sigilworks.models.requests import GenerateRequest
from sigilworks.models.responses import (
    FeaturesPayload,
    GenerateResponse,
    StepPayload,
    StepsResponse,
)
from sigilworks.svg.parser import measure_path
from sigilworks.svg.serializer import serialize_svg

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/generate", response_model=GenerateResponse)
async def generate(req: GenerateRequest) -> GenerateResponse:
    """Statement → features → path. Nothing is stored."""
    features = extract(req.statement)
    path_data = synthesize(features, req.paradigm)
    logger.debug("Generated %s sigil for %r", req.paradigm.value, features.cleaned_text)

    return GenerateResponse(
        statement=req.statement,
        paradigm=req.paradigm,
        path_data=path_data,
        features=FeaturesPayload(**features.to_dict()),
        stats=measure_path(path_data),
        svg=serialize_svg(path_data, canvas_size=DEFAULT_CONFIG.canvas_size),
    )


@router.post("/steps", response_model=StepsResponse)
async def steps(req: GenerateRequest) -> StepsResponse:
    return StepsResponse(
        statement=req.statement,
        paradigm=req.paradigm,
        steps=[
            StepPayload(label=s.label, description=s.description, content=s.content)
            for s in transformation_steps(req.statement, req.paradigm)
        ],
    )
