"""/api/sessions — gnosis session journal. Recording a session charges its sigils."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter, Depends, HTTPException

from sigilworks.dependencies import get_store
from sigilworks.models.requests import GnosisSessionRequest
from sigilworks.models.sigil import GnosisSession
from sigilworks.store.sigils import SigilNotFoundError, SigilStore

router = APIRouter(prefix="/sessions")


@router.post("", response_model=GnosisSession, status_code=201)
async def record_session(
    req: GnosisSessionRequest,
    store: SigilStore = Depends(get_store),
) -> GnosisSession:
    session = GnosisSession(
        date=req.date or datetime.now(timezone.utc),
        method=req.method,
        duration_minutes=req.duration_minutes,
        intensity=req.intensity,
        sigils_charged=req.sigils_charged,
        notes=req.notes,
    )
    try:
        return store.record_session(session)
    except SigilNotFoundError as e:
        raise HTTPException(status_code=404, detail=f"Sigil not found: {e.args[0]}") from None


@router.get("", response_model=list[GnosisSession])
async def list_sessions(store: SigilStore = Depends(get_store)) -> list[GnosisSession]:
    return store.sessions()
