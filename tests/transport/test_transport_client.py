from __future__ import annotations

from typing import Any

import httpx
import pytest
import respx

from watsonkit.auth import AUTHENTICATION_CLASSIFIER, AuthenticationError
from watsonkit.config import Settings
from watsonkit.errors import ErrorKind
from watsonkit.transport import RequestTelemetryEvent, build_async_client, send_request
from watsonkit.transport import client as transport_client


class _RecordingClient:
    def __init__(self, **kwargs: Any) -> None:
        self.kwargs = kwargs


def test_http1_client_by_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(transport_client.httpx, "AsyncClient", _RecordingClient)

    client = build_async_client(Settings(user_agent="watsonkit-tests/1.0"))

    assert client.kwargs == {"headers": {"User-Agent": "watsonkit-tests/1.0"}}


def test_http2_prior_knowledge_disables_http1(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(transport_client.httpx, "AsyncClient", _RecordingClient)

    client = build_async_client(Settings(http2_prior_knowledge=True))

    assert client.kwargs["http1"] is False
    assert client.kwargs["http2"] is True


@pytest.mark.asyncio
async def test_send_request_returns_non_ok_responses(respx_mock: respx.Router) -> None:
    respx_mock.get("https://svc.test.invalid/x").mock(return_value=httpx.Response(503))
    events: list[RequestTelemetryEvent] = []

    async with httpx.AsyncClient() as client:
        request = client.build_request("GET", "https://svc.test.invalid/x?secret=1")
        response = await send_request(
            client,
            request,
            AUTHENTICATION_CLASSIFIER,
            telemetry_callback=events.append,
        )

    assert response.status_code == 503
    assert len(events) == 1
    assert events[0].status_code == 503
    assert events[0].success is False
    assert "secret" not in events[0].url


@pytest.mark.asyncio
async def test_send_request_wraps_transport_errors(respx_mock: respx.Router) -> None:
    respx_mock.get("https://svc.test.invalid/x").mock(
        side_effect=httpx.RemoteProtocolError("peer closed connection"),
    )
    events: list[RequestTelemetryEvent] = []

    async with httpx.AsyncClient() as client:
        request = client.build_request("GET", "https://svc.test.invalid/x")
        with pytest.raises(AuthenticationError) as excinfo:
            await send_request(
                client,
                request,
                AUTHENTICATION_CLASSIFIER,
                telemetry_callback=events.append,
            )

    assert excinfo.value.kind is ErrorKind.CONNECTION
    assert events[0].status_code is None


@pytest.mark.asyncio
async def test_failing_telemetry_callback_does_not_break_request(
    respx_mock: respx.Router,
) -> None:
    respx_mock.get("https://svc.test.invalid/x").mock(return_value=httpx.Response(200))

    def _explode(_: RequestTelemetryEvent) -> None:
        raise RuntimeError("boom")

    async with httpx.AsyncClient() as client:
        request = client.build_request("GET", "https://svc.test.invalid/x")
        response = await send_request(
            client, request, AUTHENTICATION_CLASSIFIER, telemetry_callback=_explode
        )

    assert response.status_code == 200
