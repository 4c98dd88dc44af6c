"""FastAPI dependency injection."""

from __future__ import annotations

from fastapi import Request

from sigilworks.config import Settings
from sigilworks.store.sigils import SigilStore


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_store(request: Request) -> SigilStore:
    return request.app.state.store
