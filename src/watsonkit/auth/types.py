"""Authentication type definitions."""

from __future__ import annotations

from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field


class TokenResponse(BaseModel):
    """One credential grant issued by the IAM identity service.

    Field names match the JSON returned by the token endpoint. The client does
    not check ``expiration`` against ``expires_in``; both are taken verbatim.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    access_token: str = Field(min_length=1)
    """Bearer credential for subsequent service calls."""

    refresh_token: str = Field(min_length=1)

    delegated_refresh_token: str | None = None
    """Only present for grants requesting a delegated refresh token."""

    token_type: str
    """Usually ``Bearer``."""

    expires_in: int
    """Validity in seconds from issuance."""

    expiration: int
    """Unix time at which the token stops being accepted."""

    scope: str | None = None

    @classmethod
    def from_payload(cls, payload: Any) -> Self:
        """Validate a decoded JSON token response."""
        return cls.model_validate(payload)

    def to_payload(self) -> dict[str, Any]:
        """Return the JSON-compatible form of the record."""
        return self.model_dump(mode="json")


__all__ = ["TokenResponse"]
