"""Shared test fixtures for the robolt test suite."""

from __future__ import annotations

import os

import pytest

from fakes import SESSION, FakeApi
from robolt.client import Robolt
from robolt.core.client import Anonymous, Authenticated
from robolt.core.config import AppSettings


# ---------------------------------------------------------------------------
# Isolate settings from the developer's environment
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop any ROBOLT_* variable so AppSettings only sees test values."""
    for key in list(os.environ):
        if key.upper().startswith("ROBOLT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


# ---------------------------------------------------------------------------
# Client fixtures (backed by httpx.MockTransport)
# ---------------------------------------------------------------------------


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
def client(fake_api: FakeApi, settings: AppSettings) -> Robolt[Anonymous]:
    return Robolt.anonymous(settings, transport=fake_api.transport(settings))


@pytest.fixture
def auth_client(fake_api: FakeApi, settings: AppSettings) -> Robolt[Authenticated]:
    return Robolt.authenticated(
        SESSION, settings, transport=fake_api.transport(settings, session_cookie=SESSION)
    )
