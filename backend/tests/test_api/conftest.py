from __future__ import annotations

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from newsindex.main import app
from newsindex.core.db import get_session


@pytest.fixture
def client(db: Session, monkeypatch: pytest.MonkeyPatch) -> Generator[TestClient, None, None]:
    """FastAPI TestClient bound to the in-memory test session."""

    def override_get_session() -> Generator[Session, None, None]:
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_session] = override_get_session

    # Avoid touching the real DB directory during app startup in tests
    monkeypatch.setattr("newsindex.main.init_db", lambda: None, raising=True)

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
