from __future__ import annotations

import os
import tempfile
from collections.abc import AsyncIterator

import httpx
import pytest
import pytest_asyncio

_SANDBOX = tempfile.mkdtemp(prefix="watsonkit-tests-")
os.environ.setdefault("XDG_CACHE_HOME", os.path.join(_SANDBOX, "cache"))
os.environ.setdefault("XDG_CONFIG_HOME", os.path.join(_SANDBOX, "config"))

from watsonkit.config import Settings  # noqa: E402
from watsonkit.utils import LoggingOptions, configure_logging  # noqa: E402

from tests.factories import IAM_TEST_URL, SERVICE_TEST_URL  # noqa: E402


configure_logging(LoggingOptions(level="DEBUG"))


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at mock identity and service endpoints."""

    return Settings(iam_url=IAM_TEST_URL, service_url=SERVICE_TEST_URL)


@pytest_asyncio.fixture
async def http_client() -> AsyncIterator[httpx.AsyncClient]:
    """A caller-owned client, closed after the test."""

    async with httpx.AsyncClient() as client:
        yield client


@pytest.fixture
def built_clients(monkeypatch: pytest.MonkeyPatch) -> list[httpx.AsyncClient]:
    """Record every client the authenticator and services build for themselves."""

    clients: list[httpx.AsyncClient] = []

    def _build(settings: Settings | None = None) -> httpx.AsyncClient:
        client = httpx.AsyncClient()
        clients.append(client)
        return client

    monkeypatch.setattr("watsonkit.auth.authenticator.build_async_client", _build)
    monkeypatch.setattr("watsonkit.tts.voices.service.build_async_client", _build)
    return clients
