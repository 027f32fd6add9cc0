from __future__ import annotations

from watsonkit.errors import (
    BASE_CLASSIFIER,
    ErrorKind,
    StatusRule,
    WatsonError,
)


class ListVoicesError(WatsonError):
    """Errors that may be returned when listing Watson voices."""


class GetVoiceError(WatsonError):
    """Errors that may be returned when getting information about one voice."""

    @property
    def customisation_id(self) -> str | None:
        return self.context.get("customisation_id")


LIST_VOICES_CLASSIFIER = BASE_CLASSIFIER.extend(
    "list voices",
    ListVoicesError,
    {},
)

GET_VOICE_CLASSIFIER = BASE_CLASSIFIER.extend(
    "get voice",
    GetVoiceError,
    {
        304: StatusRule(
            ErrorKind.NOT_MODIFIED,
            "The requested resource has not been modified since the time "
            "specified by the If-Modified-Since header, as documented in the "
            "HTTP specification",
        ),
        400: StatusRule(
            ErrorKind.BAD_REQUEST,
            "A required input parameter is null or a specified input parameter "
            "or header value is invalid or not supported. Please check your "
            "customisation id",
        ),
        401: StatusRule(
            ErrorKind.UNAUTHORISED,
            "The specified customisation_id {customisation_id} is invalid for "
            "the requesting credentials",
        ),
    },
)


__all__ = [
    "GET_VOICE_CLASSIFIER",
    "GetVoiceError",
    "LIST_VOICES_CLASSIFIER",
    "ListVoicesError",
]
