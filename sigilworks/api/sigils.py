"""/api/sigils — create, list, patch, charge and annotate stored sigils."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException, Response

from sigilworks.config import Settings
from sigilworks.dependencies import get_settings, get_store
from sigilworks.engine.config import DEFAULT_CONFIG
from sigilworks.engine.synthesizer import generate
from sigilworks.models.requests import ChargeRequest, CreateSigilRequest, DecayRequest, ManifestationRequest
from sigilworks.models.responses import DecayResponse
from sigilworks.models.sigil import Manifestation, SigilPatch, SigilRecord
from sigilworks.store.sigils import DuplicateSigilError, SigilNotFoundError, SigilStore
from sigilworks.svg.serializer import serialize_svg

router = APIRouter(prefix="/sigils")


def _lookup(store: SigilStore, sigil_id: str) -> SigilRecord:
    try:
        return store.get(sigil_id)
    except SigilNotFoundError:
        raise HTTPException(status_code=404, detail=f"Sigil not found: {sigil_id}") from None


@router.post("", response_model=SigilRecord, status_code=201)
async def create_sigil(
    req: CreateSigilRequest,
    store: SigilStore = Depends(get_store),
    settings: Settings = Depends(get_settings),
) -> SigilRecord:
    sigil = generate(req.statement, req.paradigm)
    record = SigilRecord.from_generated(
        sigil,
        id=req.id or str(uuid.uuid4()),
        gnosis_method=req.gnosis_method,
        resonance_strength=settings.initial_resonance,
    )
    try:
        return store.create(record)
    except DuplicateSigilError as e:
        raise HTTPException(status_code=409, detail=str(e)) from None


@router.get("", response_model=list[SigilRecord])
async def list_sigils(store: SigilStore = Depends(get_store)) -> list[SigilRecord]:
    return store.all()


@router.post("/decay", response_model=DecayResponse)
async def decay_sigils(
    req: DecayRequest | None = None,
    store: SigilStore = Depends(get_store),
) -> DecayResponse:
    return DecayResponse(sigils_decayed=store.apply_decay(req.now if req else None))


@router.get("/{sigil_id}", response_model=SigilRecord)
async def get_sigil(sigil_id: str, store: SigilStore = Depends(get_store)) -> SigilRecord:
    return _lookup(store, sigil_id)


@router.get("/{sigil_id}/svg")
async def get_sigil_svg(sigil_id: str, store: SigilStore = Depends(get_store)) -> Response:
    record = _lookup(store, sigil_id)
    svg = serialize_svg(
        record.path_data,
        canvas_size=DEFAULT_CONFIG.canvas_size,
        title=record.statement,
    )
    return Response(content=svg, media_type="image/svg+xml")


@router.patch("/{sigil_id}", response_model=SigilRecord)
async def update_sigil(
    sigil_id: str,
    patch: SigilPatch,
    store: SigilStore = Depends(get_store),
) -> SigilRecord:
    try:
        return store.update(sigil_id, patch)
    except SigilNotFoundError:
        raise HTTPException(status_code=404, detail=f"Sigil not found: {sigil_id}") from None


@router.post("/{sigil_id}/charge", response_model=SigilRecord)
async def charge_sigil(
    sigil_id: str,
    req: ChargeRequest | None = None,
    store: SigilStore = Depends(get_store),
) -> SigilRecord:
    try:
        return store.append_charge(sigil_id, req.timestamp if req else None)
    except SigilNotFoundError:
        raise HTTPException(status_code=404, detail=f"Sigil not found: {sigil_id}") from None


@router.post("/{sigil_id}/manifestations", response_model=SigilRecord, status_code=201)
async def add_manifestation(
    sigil_id: str,
    req: ManifestationRequest,
    store: SigilStore = Depends(get_store),
) -> SigilRecord:
    manifestation = Manifestation(
        date=req.date or datetime.now(timezone.utc),
        description=req.description,
        synchronicities=req.synchronicities,
        confidence=req.confidence,
        emotional_resonance=req.emotional_resonance,
    )
    try:
        return store.add_manifestation(sigil_id, manifestation)
    except SigilNotFoundError:
        raise HTTPException(status_code=404, detail=f"Sigil not found: {sigil_id}") from None
