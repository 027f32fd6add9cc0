from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable

import httpx

from watsonkit.config.settings import Settings
from watsonkit.errors import StatusClassifier
from watsonkit.utils import get_logger


logger = get_logger(__name__)


@dataclass(slots=True)
class RequestTelemetryEvent:
    method: str
    url: str
    status_code: int | None
    duration_ms: float
    success: bool


TelemetryCallback = Callable[[RequestTelemetryEvent], None]


def build_async_client(settings: Settings | None = None) -> httpx.AsyncClient:
    """Create the async HTTP client used for every call made with ``settings``.

    With ``http2_prior_knowledge`` the client speaks HTTP/2 only and skips the
    HTTP/1.1 upgrade negotiation. Timeouts are left at the httpx defaults.
    """

    settings = settings or Settings()
    if settings.http2_prior_knowledge:
        return httpx.AsyncClient(
            headers={"User-Agent": settings.user_agent},
            http1=False,
            http2=True,
        )
    return httpx.AsyncClient(headers={"User-Agent": settings.user_agent})


async def send_request(
    client: httpx.AsyncClient,
    request: httpx.Request,
    classifier: StatusClassifier,
    *,
    telemetry_callback: TelemetryCallback | None = None,
) -> httpx.Response:
    """Send ``request`` once and return the response, whatever its status.

    Transport failures (DNS, TLS, timeouts, resets) are raised as the
    classifier's connection error. No retry is attempted.
    """

    start = time.perf_counter()
    try:
        response = await client.send(request)
    except httpx.RequestError as exc:
        _publish(
            telemetry_callback,
            request,
            duration=time.perf_counter() - start,
            status_code=None,
            success=False,
        )
        raise classifier.connection_error(exc) from exc

    _publish(
        telemetry_callback,
        request,
        duration=time.perf_counter() - start,
        status_code=response.status_code,
        success=response.status_code == httpx.codes.OK,
    )
    return response


def _publish(
    callback: TelemetryCallback | None,
    request: httpx.Request,
    *,
    duration: float,
    status_code: int | None,
    success: bool,
) -> None:
    event = RequestTelemetryEvent(
        method=request.method,
        url=str(request.url).split("?", 1)[0],
        status_code=status_code,
        duration_ms=duration * 1000,
        success=success,
    )
    if callback is None:
        _default_telemetry_callback(event)
        return
    try:
        callback(event)
    except Exception:  # pragma: no cover - telemetry shouldn't break requests
        logger.warning("Telemetry callback raised an exception", exc_info=True)


def _default_telemetry_callback(event: RequestTelemetryEvent) -> None:
    logger.debug(
        "Watson request",
        method=event.method,
        url=event.url,
        status_code=event.status_code,
        duration_ms=round(event.duration_ms, 2),
        success=event.success,
    )


__all__ = [
    "RequestTelemetryEvent",
    "TelemetryCallback",
    "build_async_client",
    "send_request",
]
