"""FastAPI app factory."""

from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from sigilworks import __version__
from sigilworks.config import Settings, settings as default_settings
from sigilworks.engine.registry import get_registry
from sigilworks.store.sigils import SigilStore

load_dotenv()

logging.basicConfig(
    level=getattr(logging, default_settings.sigilworks_log_level.upper(), logging.DEBUG),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None, store: SigilStore | None = None) -> FastAPI:
    settings = settings or default_settings

    app = FastAPI(
        title="SigilWorks",
        description="Statement-to-sigil engine: deterministic vector glyphs from text",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # The application owns the store; endpoints receive it via dependencies
    app.state.settings = settings
    app.state.store = store if store is not None else _build_store(settings)

    _check_grammars()

    from sigilworks.api.router import api_router

    app.include_router(api_router)

    return app


def _build_store(settings: Settings) -> SigilStore:
    data_file = Path(settings.sigilworks_data_file) if settings.sigilworks_data_file else None
    return SigilStore(
        data_file=data_file,
        charge_boost=settings.charge_boost,
        half_life_days=settings.resonance_half_life_days,
    )


def _check_grammars() -> None:
    """Every paradigm must have exactly one grammar before serving."""
    import sigilworks.engine.grammars  # noqa: F401

    missing = get_registry().missing()
    if missing:
        raise RuntimeError(f"No grammar registered for: {[p.value for p in missing]}")
    logger.debug("Grammars ready: %d paradigms", get_registry().count)


app = create_app()
