"""HTTP transport helpers."""

from .client import (
    RequestTelemetryEvent,
    TelemetryCallback,
    build_async_client,
    send_request,
)

__all__ = [
    "RequestTelemetryEvent",
    "TelemetryCallback",
    "build_async_client",
    "send_request",
]
