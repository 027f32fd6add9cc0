from __future__ import annotations

import json
from typing import Callable

import httpx
from pydantic import ValidationError

from watsonkit.auth.errors import AUTHENTICATION_CLASSIFIER, AuthenticationError
from watsonkit.auth.types import TokenResponse
from watsonkit.config.settings import Settings
from watsonkit.transport import TelemetryCallback, build_async_client, send_request
from watsonkit.utils import get_logger, redact_secret, sanitize_log_message


logger = get_logger(__name__)

APIKEY_GRANT_TYPE = "urn:ibm:params:oauth:grant-type:apikey"
FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class IamAuthenticator:
    """Holds the IAM access token issued for one API key.

    A token is obtained once, when the authenticator is created through
    :meth:`from_api_key`. There is no refresh: build a new authenticator to get a
    new token.
    """

    __slots__ = ("_token",)

    def __init__(self, token: TokenResponse) -> None:
        self._token = token

    @classmethod
    async def from_api_key(
        cls,
        api_key: str,
        *,
        settings: Settings | None = None,
        client: httpx.AsyncClient | None = None,
        telemetry_callback: TelemetryCallback | None = None,
    ) -> IamAuthenticator:
        """Exchange ``api_key`` for an access token.

        Args:
            api_key: The API key for your Watson service. Sent as-is, form-encoded.
            settings: Endpoint and transport options; defaults to ``Settings()``.
            client: Optional caller-owned client. It is left open.

        Raises:
            AuthenticationError: ``PARAMETER_VALIDATION_FAILED`` for a rejected key,
                ``CONNECTION`` when no response was received,
                ``DESERIALIZATION_FAILED`` for an unreadable token payload and
                ``UNEXPECTED_STATUS`` for any other status.
        """
        settings = settings or Settings()
        owns_client = client is None
        http_client = client or build_async_client(settings)
        try:
            token = await _exchange_api_key(
                http_client,
                settings.iam_url,
                api_key,
                telemetry_callback=telemetry_callback,
            )
        finally:
            if owns_client:
                await http_client.aclose()
        logger.info(
            "Obtained IAM access token",
            token_type=token.token_type,
            expiration=token.expiration,
            api_key=redact_secret(api_key),
        )
        return cls(token)

    @property
    def token_response(self) -> TokenResponse:
        return self._token

    @property
    def access_token(self) -> str:
        return self._token.access_token

    @property
    def refresh_token(self) -> str:
        return self._token.refresh_token

    @property
    def delegated_refresh_token(self) -> str | None:
        return self._token.delegated_refresh_token

    @property
    def token_type(self) -> str:
        return self._token.token_type

    @property
    def expires_in(self) -> int:
        return self._token.expires_in

    @property
    def expiration(self) -> int:
        return self._token.expiration

    @property
    def scope(self) -> str | None:
        return self._token.scope

    def authorization_header(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self._token.access_token}"}

    def bearer_auth(self) -> Callable[[httpx.Request], httpx.Request]:
        """Return an httpx auth callable that injects the bearer token."""

        def auth(request: httpx.Request) -> httpx.Request:
            request.headers.update(self.authorization_header())
            return request

        return auth

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(token_type={self._token.token_type!r}, "
            f"access_token={redact_secret(self._token.access_token)!r}, "
            f"expiration={self._token.expiration})"
        )


async def _exchange_api_key(
    client: httpx.AsyncClient,
    url: str,
    api_key: str,
    *,
    telemetry_callback: TelemetryCallback | None = None,
) -> TokenResponse:
    request = client.build_request(
        "POST",
        url,
        data={"grant_type": APIKEY_GRANT_TYPE, "apikey": api_key},
        headers={"Content-Type": FORM_CONTENT_TYPE},
    )
    response = await send_request(
        client,
        request,
        AUTHENTICATION_CLASSIFIER,
        telemetry_callback=telemetry_callback,
    )

    if response.status_code != httpx.codes.OK:
        error = AUTHENTICATION_CLASSIFIER.classify(response.status_code)
        logger.warning(
            "IAM token exchange failed",
            status_code=response.status_code,
            kind=error.kind.value,
            body=sanitize_log_message(response.text),
        )
        raise error

    try:
        return TokenResponse.from_payload(response.json())
    except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as exc:
        logger.error("IAM token response could not be decoded", error=str(exc))
        raise AUTHENTICATION_CLASSIFIER.deserialization_error(
            exc, status_code=response.status_code
        ) from exc


__all__ = ["APIKEY_GRANT_TYPE", "AuthenticationError", "IamAuthenticator"]
