"""
Pytest fixtures shared by the API tests.

Every test gets a fresh app built around its own pre‑seeded store, so
no test depends on state left behind by another.
"""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from client_registry_api.app.core.store import ClientStore
from client_registry_api.app.main import create_app
from client_registry_api.app.schemas.client import Client


INITIAL_CLIENTS = [
    {"id": 1, "name": "Client 1"},
    {"id": 2, "name": "Client 2"},
    {"id": 3, "name": "Client 3"},
]


@pytest.fixture
def store() -> ClientStore:
    return ClientStore(Client(**c) for c in INITIAL_CLIENTS)


@pytest.fixture
def client(store: ClientStore) -> TestClient:
    return TestClient(create_app(store))
