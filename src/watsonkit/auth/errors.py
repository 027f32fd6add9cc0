from __future__ import annotations

from watsonkit.errors import ErrorKind, StatusClassifier, StatusRule, WatsonError


class AuthenticationError(WatsonError):
    """Raised when an API key cannot be exchanged for an access token."""


AUTHENTICATION_CLASSIFIER = StatusClassifier(
    operation="token exchange",
    error_type=AuthenticationError,
    rules={
        400: StatusRule(
            ErrorKind.PARAMETER_VALIDATION_FAILED,
            "Parameter validation failed. Check the API key and grant parameters.",
        ),
    },
)


__all__ = ["AUTHENTICATION_CLASSIFIER", "AuthenticationError"]
