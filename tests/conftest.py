"""Shared test fixtures."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from sigilworks.config import Settings
from sigilworks.main import create_app
from sigilworks.store.sigils import SigilStore


SUCCESS_STATEMENT = "I am successful"
FLY_STATEMENT = "I WILL FLY"
ZEBRA_STATEMENT = "zebra"
LONG_STATEMENT = (
    "The quick brown fox jumps over the lazy dog while I remain calm, "
    "focused and entirely certain of my path"
)
NON_ALPHA_STATEMENT = "1234 !!! ☃ 42"

STATEMENTS = [
    SUCCESS_STATEMENT,
    FLY_STATEMENT,
    ZEBRA_STATEMENT,
    LONG_STATEMENT,
    "a",
    "zzzz",
    "aeiou",
    "bcdfg",
    "Ünïcödé intent ✨",
    "",
    NON_ALPHA_STATEMENT,
]


@pytest.fixture
def store() -> SigilStore:
    return SigilStore()


@pytest.fixture
def client(store: SigilStore) -> TestClient:
    app = create_app(settings=Settings(), store=store)
    return TestClient(app)
