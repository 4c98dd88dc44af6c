"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from sigilworks import __version__
from sigilworks.engine.registry import get_registry
from sigilworks.models.responses import HealthResponse, ParadigmInfo, ParadigmsResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        paradigms_registered=get_registry().count,
    )


@router.get("/paradigms", response_model=ParadigmsResponse)
async def paradigms() -> ParadigmsResponse:
    return ParadigmsResponse(
        paradigms=[
            ParadigmInfo(name=spec.paradigm, description=spec.description)
            for spec in get_registry().all()
        ]
    )
