"""Shared fixtures for the greeting service tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from app.common.metrics import metrics
from app.main import create_app


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    # No stray .env file or greeting override leaks into a test
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv('greetingServiceGreeting', raising=False)
    monkeypatch.delenv('GREETINGSERVICEGREETING', raising=False)
    metrics.reset()
    yield
    metrics.reset()


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())
