from __future__ import annotations

import json
from typing import Any
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from watsonkit.auth import IamAuthenticator
from watsonkit.config.settings import Settings
from watsonkit.errors import StatusClassifier
from watsonkit.transport import TelemetryCallback, build_async_client, send_request
from watsonkit.utils import get_logger, sanitize_log_message

from .errors import GET_VOICE_CLASSIFIER, LIST_VOICES_CLASSIFIER
from .models import VoiceList, WatsonVoice


logger = get_logger(__name__)

VOICES_PATH = "/v1/voices"
JSON_CONTENT_TYPE = "application/json"


class VoicesService:
    """List and inspect the voices offered by the Text to Speech service."""

    def __init__(
        self,
        authenticator: IamAuthenticator,
        *,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
        telemetry_callback: TelemetryCallback | None = None,
    ) -> None:
        self._authenticator = authenticator
        self._settings = settings or Settings()
        self._owns_client = client is None
        self._client = client
        self._telemetry_callback = telemetry_callback

    async def __aenter__(self) -> VoicesService:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    async def list_voices(self) -> list[WatsonVoice]:
        """Return every voice available to the authenticated credentials.

        Raises:
            ListVoicesError: for any non-200 status or transport failure.
        """
        response = await self._get(VOICES_PATH, LIST_VOICES_CLASSIFIER)
        payload = self._decode(response, LIST_VOICES_CLASSIFIER)
        try:
            voices = VoiceList.from_payload(payload).voices
        except ValidationError as exc:
            raise LIST_VOICES_CLASSIFIER.deserialization_error(
                exc, status_code=response.status_code
            ) from exc
        logger.debug("Listed voices", count=len(voices))
        return voices

    async def get_voice(
        self,
        name: str,
        customisation_id: str | None = None,
    ) -> WatsonVoice:
        """Return information about the voice called ``name``.

        When ``customisation_id`` is given the custom model is included in the
        result, and a 401 names that id in its message.

        Raises:
            GetVoiceError: for any non-200 status or transport failure.
        """
        params: dict[str, str] = {}
        context: dict[str, str] = {}
        if customisation_id is not None:
            params["customization_id"] = customisation_id
            context["customisation_id"] = customisation_id
        response = await self._get(
            f"{VOICES_PATH}/{quote(name, safe='')}",
            GET_VOICE_CLASSIFIER,
            params=params,
            **context,
        )
        payload = self._decode(response, GET_VOICE_CLASSIFIER)
        try:
            return WatsonVoice.from_payload(payload)
        except ValidationError as exc:
            raise GET_VOICE_CLASSIFIER.deserialization_error(
                exc, status_code=response.status_code
            ) from exc

    async def close(self) -> None:
        if self._owns_client and self._client is not None:
            await self._client.aclose()
            self._client = None

    # Internal --------------------------------------------------------

    async def _get(
        self,
        path: str,
        classifier: StatusClassifier,
        *,
        params: dict[str, str] | None = None,
        **context: str,
    ) -> httpx.Response:
        client = self._get_http_client()
        headers = {"Accept": JSON_CONTENT_TYPE}
        headers.update(self._authenticator.authorization_header())
        request = client.build_request(
            "GET",
            self._settings.service_endpoint(path),
            params=params or None,
            headers=headers,
        )
        response = await send_request(
            client,
            request,
            classifier,
            telemetry_callback=self._telemetry_callback,
        )
        if response.status_code != httpx.codes.OK:
            error = classifier.classify(response.status_code, **context)
            logger.warning(
                "Watson request failed",
                operation=classifier.operation,
                status_code=response.status_code,
                kind=error.kind.value,
                body=sanitize_log_message(response.text),
            )
            raise error
        return response

    @staticmethod
    def _decode(response: httpx.Response, classifier: StatusClassifier) -> Any:
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise classifier.deserialization_error(
                exc, status_code=response.status_code
            ) from exc

    def _get_http_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = build_async_client(self._settings)
        return self._client


__all__ = ["VOICES_PATH", "VoicesService"]
