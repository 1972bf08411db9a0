# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from hempatlas.api.server import create_app
from hempatlas.globe import MemoryStore, StyleConfigStore
from hempatlas.session import GlobeSession


@pytest.fixture
def session(fake_client) -> GlobeSession:
    return GlobeSession(fake_client, style_store=StyleConfigStore(MemoryStore()))


@pytest.fixture
def client(session) -> TestClient:
    """TestClient around a fresh app and session per test."""
    return TestClient(create_app(session))
